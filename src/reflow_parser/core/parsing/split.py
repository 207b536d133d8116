"""
Split Functions Module

Functions that decide where to cut a non-empty run of lines into a head
chunk and an optional remainder. Every split preserves the input exactly:
the head followed by the remainder gives back the original lines.

Patterns are compiled when a split function is built, so a malformed regex
surfaces as a PatternCompileError before any parsing starts.
"""

from typing import Callable, Optional

from ..block import Lines
from ..line import PatternLike, compile_pattern, contains, indent_width, try_match
from ..nonempty import Nonempty
from .types import OptionSplitFunction, Split, SplitFunction

# Lines whose indent differs from the first line by this many columns or more
# start a new chunk.
INDENT_DIFFERENCE_THRESHOLD = 2


def split_into_chunks(split_fn: SplitFunction) -> Callable[[Lines], Nonempty[Lines]]:
    """
    Partition lines into consecutive chunks by applying split_fn until nothing remains.
    
    Args:
        split_fn: Split function that always consumes at least one line
        
    Returns:
        Function mapping lines to their non-empty sequence of chunks
    """
    def split(lines: Lines) -> Nonempty[Lines]:
        return Nonempty.unfold(split_fn, lines)
    
    return split


def before_regex(pattern: PatternLike) -> SplitFunction:
    """
    Create a split function that cuts right before the next line matching pattern.
    
    The first line always belongs to the head chunk, even if it matches. When
    no later line matches, the whole input is the head and there is no
    remainder.
    
    Args:
        pattern: Regex marking the first line of the next chunk
        
    Returns:
        SplitFunction
        
    Raises:
        PatternCompileError: If pattern is not a valid regex
    """
    regex = compile_pattern(pattern)
    
    def split(lines: Lines) -> Split:
        for index in range(1, len(lines)):
            if contains(regex, lines[index]):
                return Split(*lines.split_at(index))
        return Split(lines, None)
    
    return split


def after_regex(pattern: PatternLike) -> SplitFunction:
    """
    Create a split function that cuts right after the first line matching pattern.
    
    The matching line, which may be the first one, closes the head chunk. When
    no line matches, the whole input is the head and there is no remainder.
    
    Raises:
        PatternCompileError: If pattern is not a valid regex
    """
    regex = compile_pattern(pattern)
    
    def split(lines: Lines) -> Split:
        return Split(*lines.split_after(lambda line: contains(regex, line)))
    
    return split


def on_indent(tab_width: int) -> SplitFunction:
    """
    Create a split function that cuts where the indentation changes.
    
    Lines after the first stay in the head chunk while their indent width is
    within one column of the first line's; the first line that differs by two
    or more columns starts the remainder.
    
    Args:
        tab_width: Column width used to expand tabs in indentation
        
    Returns:
        SplitFunction
        
    Raises:
        ValueError: If tab_width is not a positive integer
    """
    if not isinstance(tab_width, int) or isinstance(tab_width, bool) or tab_width <= 0:
        raise ValueError(f"tab_width must be positive integer, got: {tab_width}")
    
    def split(lines: Lines) -> Split:
        first_indent = indent_width(tab_width, lines.head)
        
        end = 1
        while (end < len(lines)
               and abs(indent_width(tab_width, lines[end]) - first_indent) < INDENT_DIFFERENCE_THRESHOLD):
            end += 1
        
        return Split(*lines.split_at(end))
    
    return split


def take_lines_between_markers(
    start_pattern: PatternLike,
    end_pattern: PatternLike
) -> OptionSplitFunction:
    """
    Create an optional split function that takes every line from a start marker
    through the next end marker (inclusive).
    
    Declines unless the first line matches start_pattern. The end marker is
    searched for in the rest of the first line (after the start match) and then
    in the following lines, so a region may open and close on the same line.
    The returned head chunk always carries the original, unmodified first line.
    If no end marker is found, every line is taken.
    
    Args:
        start_pattern: Regex that must match the first line
        end_pattern: Regex matching the line that closes the region
        
    Returns:
        OptionSplitFunction
        
    Raises:
        PatternCompileError: If either pattern is not a valid regex
    """
    start_regex = compile_pattern(start_pattern)
    end_regex = compile_pattern(end_pattern)
    
    def split(lines: Lines) -> Optional[Split]:
        match = try_match(start_regex, lines.head)
        if match is None:
            return None
        
        # The start marker itself never closes the region
        after_start = lines.head[match.end():]
        for index, line in enumerate(lines):
            if contains(end_regex, after_start if index == 0 else line):
                return Split(*lines.split_at(index + 1))
        return Split(lines, None)
    
    return split
