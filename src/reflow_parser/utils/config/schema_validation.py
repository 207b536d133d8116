"""
Schema validation for configuration management.

Validates configuration dictionaries against a JSON schema with
jsonschema and turns failures into ConfigurationValidationError.
"""

import logging
from typing import Any, Dict, Optional

import jsonschema

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
)
from ...core.parsing.config import MAX_TAB_WIDTH, MIN_TAB_WIDTH


logger = logging.getLogger(__name__)


CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "parser": {
            "type": "object",
            "properties": {
                "tab_width": {
                    "type": "integer",
                    "minimum": MIN_TAB_WIDTH,
                    "maximum": MAX_TAB_WIDTH,
                },
                "tidy_up_indents": {"type": "boolean"},
                "ignore_markers": {
                    "type": "array",
                    "items": {
                        "type": "array",
                        "items": {"type": "string"},
                        "minItems": 2,
                        "maxItems": 2,
                    },
                },
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL",
                             "debug", "info", "warning", "error", "critical"],
                },
            },
            "additionalProperties": False,
        },
    },
}


class SchemaValidator:
    """
    Schema validation for configuration management.
    
    Handles JSON schema validation and error reporting.
    """
    
    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize schema validator.
        
        Args:
            schema: JSON schema to validate against (defaults to CONFIG_SCHEMA)
        """
        self.schema = schema or CONFIG_SCHEMA
        self.logger = logger
    
    def validate_config(self, config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
        """
        Validate configuration against the schema.
        
        Args:
            config: Configuration dictionary to validate
            config_file: Configuration file name for error reporting
            
        Returns:
            True if validation passes
            
        Raises:
            ConfigurationValidationError: If validation fails
            ConfigurationError: If the schema itself is invalid
        """
        try:
            jsonschema.validate(config, self.schema)
        except jsonschema.ValidationError as e:
            validation_errors = [e.message]
            invalid_fields = []
            
            if e.absolute_path:
                invalid_fields.append(".".join(str(p) for p in e.absolute_path))
            
            for ctx_error in e.context or []:
                validation_errors.append(ctx_error.message)
                if ctx_error.absolute_path:
                    invalid_fields.append(".".join(str(p) for p in ctx_error.absolute_path))
            
            raise ConfigurationValidationError(
                f"Configuration validation failed: {e.message}",
                config_file,
                validation_errors,
                invalid_fields
            ) from e
        except jsonschema.SchemaError as e:
            raise ConfigurationError(f"Invalid JSON schema: {e.message}") from e
        
        self.logger.debug("Configuration passed schema validation")
        return True
