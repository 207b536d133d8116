"""
Reference Document Grammars

Two complete document parsers assembled from the engine, used by the
command line and as end-to-end checks of the combinators:

- plain_text: blank lines and marker regions are ignored; everything else
  is read as paragraphs running up to the next blank line or marker region.
- indent_separated: like plain_text, but a change of indent also starts a
  new paragraph.

Usage:
    >>> blocks = parse_text("Some text\\nmore text\\n\\n    indented", grammar=Grammar.INDENT)
    >>> [block.block_type.value for block in blocks]
    ['text', 'ignore', 'text']
"""

import logging
import re
from enum import Enum
from typing import List, Optional

from ..block import Block, Blocks, Lines, text
from ..nonempty import Nonempty
from .combinators import repeat_until_end, take_lines_until, try_many
from .common import blank_lines, ignored_region
from .config import ParserSettings
from .paragraphs import first_line_indent_paragraph_block, indent_separated_paragraph_block
from .parsers import single_block
from .split import on_indent, split_into_chunks
from .types import OptionParser, TotalParser

logger = logging.getLogger(__name__)


class Grammar(Enum):
    """Available reference grammars."""
    PLAIN = "plain"
    INDENT = "indent"
    
    def __str__(self) -> str:
        return self.value


def skipped_content(settings: ParserSettings) -> OptionParser:
    """Optional parser for content that is never wrapped: blank lines, then marker regions."""
    parsers: List[OptionParser] = [blank_lines]
    parsers.extend(ignored_region(start, end) for start, end in settings.ignore_markers)
    return try_many(parsers)


def plain_text(settings: Optional[ParserSettings] = None) -> TotalParser:
    """
    Build a parser for plain text paragraphs.
    
    Args:
        settings: Parser settings (defaults used when omitted)
        
    Returns:
        TotalParser for a whole document
    """
    settings = settings or ParserSettings()
    skip = skipped_content(settings)
    paragraph = single_block(first_line_indent_paragraph_block(settings.tidy_up_indents))
    
    logger.debug(f"Built plain text parser with {len(settings.ignore_markers)} marker pairs")
    return repeat_until_end(skip, take_lines_until(skip, paragraph))


def indent_separated(settings: Optional[ParserSettings] = None) -> TotalParser:
    """
    Build a parser for documents whose paragraphs may be separated by indent alone.
    
    Args:
        settings: Parser settings (defaults used when omitted)
        
    Returns:
        TotalParser for a whole document
    """
    settings = settings or ParserSettings()
    skip = skipped_content(settings)
    chunks = split_into_chunks(on_indent(settings.tab_width))
    build = indent_separated_paragraph_block(text)
    
    def paragraphs(lines: Lines) -> Blocks:
        return chunks(lines).map(build)
    
    logger.debug(f"Built indent separated parser with tab_width={settings.tab_width}")
    return repeat_until_end(skip, take_lines_until(skip, paragraphs))


_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_GRAMMARS = {
    Grammar.PLAIN: plain_text,
    Grammar.INDENT: indent_separated,
}


def split_lines(document: str) -> Lines:
    """
    Split raw text into lines; an empty document is a single empty line.
    
    Only \\n, \\r\\n and \\r end a line. Form feeds and Unicode separators
    stay inside their line. A final line break does not start another line.
    """
    lines = _LINE_BREAK.split(document)
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    return Nonempty.from_list(lines)


def parse_text(
    document: str,
    settings: Optional[ParserSettings] = None,
    grammar: Grammar = Grammar.PLAIN
) -> Nonempty[Block]:
    """
    Parse raw text into blocks with one of the reference grammars.
    
    Args:
        document: Raw text, with any line endings
        settings: Parser settings (defaults used when omitted)
        grammar: Which reference grammar to use
        
    Returns:
        Non-empty sequence of blocks covering every line in order
        
    Raises:
        PatternCompileError: If a configured marker is not a valid regex
    """
    parser = _GRAMMARS[Grammar(grammar)](settings)
    lines = split_lines(document)
    blocks = parser(lines)
    logger.info(f"Parsed document of {len(lines)} lines into {len(blocks)} blocks")
    return blocks
