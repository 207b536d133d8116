"""
Line helpers used by the split functions.

A line is a plain string without its trailing newline. These helpers answer
the few questions the engine needs to ask about one: whether it is blank,
what its leading whitespace is, how wide that indent is once tabs are
expanded, and whether a pattern matches it.
"""

import logging
import re
from typing import Optional, Union

from ..exceptions import PatternCompileError

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern]

_LEADING_WHITESPACE = re.compile(r"^\s*")


def compile_pattern(pattern: PatternLike) -> re.Pattern:
    """
    Compile a boundary pattern, accepting strings or already compiled regexes.
    
    Args:
        pattern: Regex source string or compiled pattern
        
    Returns:
        Compiled regex
        
    Raises:
        PatternCompileError: If the pattern is malformed or of the wrong type
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    
    if not isinstance(pattern, str):
        raise PatternCompileError(
            f"Pattern must be a string or compiled regex, got: {type(pattern)}",
            pattern=repr(pattern)
        )
    
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise PatternCompileError(
            f"Invalid regex pattern '{pattern}': {e}",
            pattern=pattern
        ) from e
    
    logger.debug(f"Compiled boundary pattern: {pattern}")
    return compiled


def is_blank(line: str) -> bool:
    return not line.strip()


def leading_whitespace(line: str) -> str:
    return _LEADING_WHITESPACE.match(line).group(0)


def tabs_to_spaces(tab_width: int, text: str) -> str:
    """Expand tabs in text to the next multiple of tab_width columns."""
    return text.expandtabs(tab_width)


def indent_width(tab_width: int, line: str) -> int:
    """Column width of a line's indentation, with tabs expanded."""
    return len(tabs_to_spaces(tab_width, leading_whitespace(line)))


def contains(pattern: re.Pattern, line: str) -> bool:
    return pattern.search(line) is not None


def try_match(pattern: re.Pattern, line: str) -> Optional[re.Match]:
    return pattern.search(line)
