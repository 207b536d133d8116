"""
Configuration errors for the reflow parser.

These share the parser errors' formatting (message, context lines, numbered
suggestions) and add the config file involved and, for schema failures,
the individual validation messages.
"""

from typing import List, Optional

from .parser_exceptions import ReflowParserError, numbered


class ConfigurationError(ReflowParserError):
    """Raised when configuration cannot be loaded or used."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        super().__init__(message, suggestions)
        self.config_file = config_file

    def details(self) -> List[str]:
        return [f"Config file: {self.config_file}"] if self.config_file else []


class ConfigurationFileNotFoundError(ConfigurationError):
    """An explicitly requested config file does not exist."""

    def __init__(self, message: str, config_file: Optional[str] = None) -> None:
        super().__init__(message, config_file, [
            "Pass an existing file with --config-path, or drop the option to use defaults",
            "Relative paths are resolved against the current directory",
        ])


class ConfigurationValidationError(ConfigurationError):
    """
    Configuration did not pass validation.

    Attributes:
        validation_errors: Messages from the schema or settings checks
        invalid_fields: Dotted paths of the offending keys, when known
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        self.validation_errors = list(validation_errors or [])
        self.invalid_fields = list(invalid_fields or [])

        hints = ["Run 'reflow-parse config' to see the effective configuration"]
        if self.invalid_fields:
            hints.insert(0, f"Check {', '.join(self.invalid_fields)}")
        super().__init__(message, config_file, hints)

    def details(self) -> List[str]:
        lines = super().details()
        if self.validation_errors:
            lines.append(numbered("Validation errors:", self.validation_errors))
        return lines


class EnvironmentVariableError(ConfigurationError):
    """A REFLOW_* environment variable holds a value that cannot be converted."""

    def __init__(self, message: str, variable_name: Optional[str] = None) -> None:
        hints = [f"Fix or unset {variable_name}"] if variable_name else []
        super().__init__(message, None, hints)
        self.variable_name = variable_name
