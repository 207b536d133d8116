"""
Paragraph Builders

Convert a chunk of paragraph lines into a text block. Lines are stored
left-trimmed; indentation is kept only as the wrappable's prefixes.
"""

from typing import Callable

from ..block import Block, Lines, TextBlock, Wrappable, prefixes, text, wrappable
from ..line import leading_whitespace
from .types import BlockBuilder


def _trim_start(line: str) -> str:
    return line.lstrip()


def first_line_indent_paragraph_block(tidy_up_indents: bool) -> Callable[[Lines], TextBlock]:
    """
    Create a builder for paragraphs whose first line may be indented differently.
    
    The first-line prefix is the first line's leading whitespace and the
    continuation prefix is the second line's (or the first line's again for a
    one-line paragraph). With tidy_up_indents both prefixes are empty, so the
    indentation is dropped altogether.
    
    Example:
        >>> build = first_line_indent_paragraph_block(False)
        >>> block = build(Nonempty.of("  - item", "    more"))
        >>> block.wrappable.prefixes
        Prefixes(first_line='  ', continuation='    ')
    """
    def build(lines: Lines) -> TextBlock:
        if tidy_up_indents:
            paragraph_prefixes = prefixes("", "")
        else:
            second_line = lines[1] if len(lines) > 1 else lines.head
            paragraph_prefixes = prefixes(
                leading_whitespace(lines.head),
                leading_whitespace(second_line)
            )
        
        return text(wrappable(paragraph_prefixes, lines.map(_trim_start)))
    
    return build


def indent_separated_paragraph_block(block_constructor: Callable[[Wrappable], Block]) -> BlockBuilder:
    """
    Create a builder for paragraphs separated by changes in indent.
    
    One indent, taken from the first line, is used for both prefixes.
    
    Args:
        block_constructor: Builds the block from the wrappable (e.g. block.text)
    """
    def build(lines: Lines) -> Block:
        prefix = leading_whitespace(lines.head)
        return block_constructor(wrappable(prefixes(prefix, prefix), lines.map(_trim_start)))
    
    return build
