"""
Exceptions package for the reflow parser.

This package contains custom exception classes for parser construction,
parsing invariants and configuration handling.
"""

from .parser_exceptions import (
    ReflowParserError,
    PatternCompileError,
    EmptySequenceError,
    ParserInvariantError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    EnvironmentVariableError,
)

__all__ = [
    # Parser exceptions
    "ReflowParserError",
    "PatternCompileError",
    "EmptySequenceError",
    "ParserInvariantError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "EnvironmentVariableError",
]
