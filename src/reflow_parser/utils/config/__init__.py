"""Configuration management package.

This package provides the configuration system with support for:
- JSON schema validation
- Environment variable overrides (REFLOW_*), including .env files
- Default value resolution

Usage:
    from reflow_parser.utils.config import ConfigManager
    
    config = ConfigManager()
    settings = config.parser_settings()
"""

from .manager import ConfigManager, default_config
from .paths import ConfigPaths
from .file_operations import FileOperations
from .schema_validation import SchemaValidator, CONFIG_SCHEMA
from .environment import ENV_OVERRIDES, EnvironmentHandler, EnvOverride

__all__ = [
    'ConfigManager',
    'default_config',
    'ConfigPaths',
    'FileOperations',
    'SchemaValidator',
    'CONFIG_SCHEMA',
    'EnvironmentHandler',
    'EnvOverride',
    'ENV_OVERRIDES',
]
