"""
Configuration file paths and constants for the reflow parser.
"""

from dataclasses import dataclass


@dataclass
class ConfigPaths:
    """Configuration file paths and constants."""
    
    DEFAULT_CONFIG_FILE: str = "reflow.config.json"
    ENV_FILE: str = ".env"
