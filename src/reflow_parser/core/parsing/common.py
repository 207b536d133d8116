"""
Common parsers built from the engine primitives.
"""

from ..block import Lines
from ..line import PatternLike, is_blank
from .parsers import ignore_parser
from .split import take_lines_between_markers
from .types import OptionParser, Split


def _leading_blank_lines(lines: Lines):
    result = lines.span(is_blank)
    if result is None:
        return None
    return Split(*result)


# Ignores a run of blank lines
blank_lines: OptionParser = ignore_parser(_leading_blank_lines)


def ignored_region(start_pattern: PatternLike, end_pattern: PatternLike) -> OptionParser:
    """Ignore everything from a start marker through its end marker."""
    return ignore_parser(take_lines_between_markers(start_pattern, end_pattern))
