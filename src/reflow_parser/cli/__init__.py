"""
Command-line interface for the reflow parser.
"""

from .cli import app

__all__ = ["app"]
