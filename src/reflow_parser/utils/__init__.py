"""
Utilities package for the reflow parser.

Configuration management and logging setup.
"""

from .config import ConfigManager, ConfigPaths
from .logging_config import LogFormat, LogLevel, setup_logging

__all__ = [
    "ConfigManager",
    "ConfigPaths",
    "LogFormat",
    "LogLevel",
    "setup_logging",
]
