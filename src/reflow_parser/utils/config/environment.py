"""
REFLOW_* environment variable overrides.

Each supported variable names a dotted configuration key and the type its
string value is converted to before it replaces the configured value.
"""

import json
import logging
import os
from copy import deepcopy
from typing import Any, Callable, Dict, NamedTuple, Optional

from ...exceptions.config_exceptions import EnvironmentVariableError


logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_bool(value: str) -> bool:
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE_WORDS | _FALSE_WORDS)}")


_CONVERTERS: Dict[str, Callable[[str], Any]] = {
    "string": str,
    "integer": int,
    "boolean": _parse_bool,
    "json": json.loads,
}


class EnvOverride(NamedTuple):
    """A configuration key that can be set from the environment."""
    config_key: str
    value_type: str


ENV_OVERRIDES: Dict[str, EnvOverride] = {
    "REFLOW_TAB_WIDTH": EnvOverride("parser.tab_width", "integer"),
    "REFLOW_TIDY_UP_INDENTS": EnvOverride("parser.tidy_up_indents", "boolean"),
    "REFLOW_IGNORE_MARKERS": EnvOverride("parser.ignore_markers", "json"),
    "REFLOW_LOG_LEVEL": EnvOverride("logging.level", "string"),
}


class EnvironmentHandler:
    """Applies ENV_OVERRIDES to a configuration dictionary."""

    def __init__(self, overrides: Optional[Dict[str, EnvOverride]] = None) -> None:
        self.overrides = overrides or ENV_OVERRIDES
        self.logger = logger

    def convert_env_value(self, value: str, target_type: str = "string", variable: Optional[str] = None) -> Any:
        """
        Convert a raw environment string.

        Args:
            value: Raw value
            target_type: One of 'string', 'integer', 'boolean', 'json'
            variable: Variable name, used in error messages

        Returns:
            Converted value, or None when value is empty (treated as unset)

        Raises:
            EnvironmentVariableError: If the value cannot be converted
        """
        if not value:
            return None

        converter = _CONVERTERS[target_type]
        try:
            return converter(value)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            source = variable or "environment value"
            raise EnvironmentVariableError(
                f"{source}={value!r} is not a valid {target_type}: {e}",
                variable
            ) from e

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return a copy of config with every set REFLOW_* variable applied.

        Unset or empty variables are ignored. A value that does not convert is
        logged and skipped so the rest of the configuration still loads.
        """
        result = deepcopy(config)

        for variable, override in self.overrides.items():
            raw = os.environ.get(variable)
            if raw is None:
                continue

            try:
                value = self.convert_env_value(raw, override.value_type, variable)
            except EnvironmentVariableError as e:
                self.logger.warning(f"Ignoring {variable}: {e.message}")
                continue

            if value is None:
                continue

            section = result
            *parents, leaf = override.config_key.split(".")
            for name in parents:
                section = section.setdefault(name, {})
            section[leaf] = value
            self.logger.debug(f"{variable} overrides {override.config_key}")

        return result
