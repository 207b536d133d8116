"""
Main configuration manager for the reflow parser.

The ConfigManager combines built-in defaults, an optional JSON
configuration file and REFLOW_* environment variables (optionally read
from a .env file), validates the result, and hands out ParserSettings.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...core.parsing.config import ParserSettings
from ...exceptions import ReflowParserError
from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
)
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)


def default_config() -> Dict[str, Any]:
    """Built-in configuration used before any file or environment override."""
    return {
        "parser": ParserSettings().to_dict(),
        "logging": {"level": "WARNING"},
    }


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


class ConfigManager:
    """
    Configuration manager for the reflow parser.
    
    Sources, later ones winning:
    - Built-in defaults
    - JSON configuration file (reflow.config.json unless given explicitly)
    - Environment variables
    
    A missing default configuration file is not an error; a missing file
    that was asked for explicitly is.
    """
    
    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Initialize the ConfigManager.
        
        Args:
            config_file: Path to configuration file (default: reflow.config.json)
            project_root: Directory relative paths are resolved against (default: cwd)
            load_env: Whether to load environment variables from a .env file
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.paths = ConfigPaths()
        self.config_file = config_file or self.paths.DEFAULT_CONFIG_FILE
        self._explicit_file = config_file is not None
        
        self._config: Dict[str, Any] = {}
        self._loaded = False
        
        self.logger = logger
        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.schema_validator = SchemaValidator()
        self.env_handler = EnvironmentHandler()
        
        if load_env:
            self.file_ops.load_environment_variables()
    
    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)
    
    @property
    def is_loaded(self) -> bool:
        return self._loaded
    
    def load_config(self, force_reload: bool = False, validate: bool = True) -> Dict[str, Any]:
        """
        Load configuration from all sources.
        
        Args:
            force_reload: Force reloading even if already loaded
            validate: Whether to validate configuration against the schema
            
        Returns:
            Loaded configuration dictionary
            
        Raises:
            ConfigurationFileNotFoundError: If an explicit config file is missing
            ConfigurationValidationError: If validation fails
            ConfigurationError: If the file cannot be read
        """
        if self._loaded and not force_reload:
            return deepcopy(self._config)
        
        config = default_config()
        
        config_path = self.file_ops.resolve_path(self.config_file)
        if self._explicit_file or config_path.exists():
            config = _deep_merge(config, self.file_ops.load_json_file(config_path))
        else:
            self.logger.debug(f"No configuration file at {config_path}, using defaults")
        
        config = self.env_handler.apply_environment_overrides(config)
        
        if validate:
            self.schema_validator.validate_config(config, str(config_path))
            self._check_parser_settings(config, str(config_path))
        
        self._config = config
        self._loaded = True
        self.logger.debug("Configuration loaded successfully")
        return deepcopy(self._config)
    
    def _check_parser_settings(self, config: Dict[str, Any], config_file: str) -> None:
        """Make sure the parser section also builds valid settings (e.g. marker regexes compile)."""
        try:
            ParserSettings.from_dict(config.get("parser", {}))
        except (ValueError, TypeError, ReflowParserError) as e:
            raise ConfigurationValidationError(
                f"Invalid parser settings: {e}",
                config_file,
                [str(e)],
                ["parser"]
            ) from e
    
    def reload_config(self) -> Dict[str, Any]:
        return self.load_config(force_reload=True)
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.
        
        Args:
            key: Configuration key (e.g. 'parser.tab_width')
            default: Default value if key not found
            
        Returns:
            Configuration value or default
        """
        config = self.config
        
        try:
            for k in key.split('.'):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default
    
    def parser_settings(self, **overrides: Any) -> ParserSettings:
        """
        Build ParserSettings from the loaded configuration.
        
        Args:
            **overrides: Settings that take precedence over configuration (None values are skipped)
            
        Raises:
            ConfigurationError: If the resulting settings are invalid
        """
        data = self.get("parser", {})
        data.update({key: value for key, value in overrides.items() if value is not None})
        
        try:
            return ParserSettings.from_dict(data)
        except (ValueError, TypeError, ReflowParserError) as e:
            raise ConfigurationError(f"Invalid parser settings: {e}", self.config_file) from e
    
    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False
