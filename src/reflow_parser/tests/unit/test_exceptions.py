"""Tests for exception formatting and hierarchy."""

import pytest

from reflow_parser.exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    EmptySequenceError,
    EnvironmentVariableError,
    ParserInvariantError,
    PatternCompileError,
    ReflowParserError,
)


class TestParserExceptions:
    """Tests for parser engine exceptions."""
    
    def test_message_without_suggestions(self):
        """Test a bare error renders only its message."""
        assert str(ReflowParserError("broken")) == "broken"
    
    def test_suggestions_are_numbered(self):
        """Test suggestions follow the message after a blank line."""
        error = ReflowParserError("broken", ["first", "second"])
        assert str(error) == "broken\n\nSuggestions:\n  1. first\n  2. second"
    
    def test_pattern_compile_error(self):
        """Test the offending pattern is kept."""
        error = PatternCompileError("bad", pattern="(")
        assert error.pattern == "("
        assert error.message == "bad"
    
    def test_empty_sequence_is_value_error(self):
        """Test EmptySequenceError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise EmptySequenceError()
    
    def test_invariant_error_is_assertion_error(self):
        """Test ParserInvariantError is an AssertionError with line counts."""
        error = ParserInvariantError("stuck", lines_before=3, lines_after=3)
        assert isinstance(error, AssertionError)
        assert (error.lines_before, error.lines_after) == (3, 3)


class TestConfigExceptions:
    """Tests for configuration exceptions."""
    
    @pytest.mark.parametrize("error_class", [
        ConfigurationError,
        ConfigurationFileNotFoundError,
        ConfigurationValidationError,
        EnvironmentVariableError,
    ])
    def test_hierarchy(self, error_class):
        """Test every configuration error is a ConfigurationError and ReflowParserError."""
        assert issubclass(error_class, ConfigurationError)
        assert issubclass(error_class, ReflowParserError)
    
    def test_config_file_shown(self):
        """Test the config file appears after the message."""
        error = ConfigurationError("bad config", "reflow.config.json")
        assert str(error).startswith("bad config\nConfig file: reflow.config.json")
    
    def test_validation_details(self):
        """Test validation errors and fields are reported."""
        error = ConfigurationValidationError(
            "invalid",
            "reflow.config.json",
            ["0 is less than the minimum of 1"],
            ["parser.tab_width"],
        )
        
        rendered = str(error)
        assert "Validation errors:\n  1. 0 is less than the minimum of 1" in rendered
        assert "Check parser.tab_width" in rendered
        assert error.invalid_fields == ["parser.tab_width"]
    
    def test_environment_variable_name(self):
        """Test the variable name is kept and suggested."""
        error = EnvironmentVariableError("bad value", "REFLOW_TAB_WIDTH")
        assert error.variable_name == "REFLOW_TAB_WIDTH"
        assert "Fix or unset REFLOW_TAB_WIDTH" in str(error)
