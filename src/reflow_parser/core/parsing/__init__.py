"""
Parsing Package - Line-Oriented Parser Combinators

Turns a non-empty run of lines into a non-empty run of blocks.

Components:
- types: Split/Parsed results and the parser type aliases
- split: split functions (before_regex, after_regex, on_indent, markers)
- parsers: building optional parsers from split functions
- combinators: try_many, repeat_until_end, take_lines_until
- paragraphs: text block builders that reconcile indentation
- common: ready-made parsers such as blank_lines
- config: ParserSettings for the reference grammars
- documents: plain_text and indent_separated reference grammars
"""

from .types import (
    Split,
    Parsed,
    SplitFunction,
    OptionSplitFunction,
    OptionParser,
    PartialParser,
    TotalParser,
    BlockBuilder,
)

from .split import (
    split_into_chunks,
    before_regex,
    after_regex,
    on_indent,
    take_lines_between_markers,
)

from .parsers import option_parser, ignore_parser, single_block

from .combinators import try_many, repeat_until_end, take_lines_until

from .paragraphs import first_line_indent_paragraph_block, indent_separated_paragraph_block

from .common import blank_lines, ignored_region

from .config import ParserSettings, DEFAULT_IGNORE_MARKERS

from .documents import (
    Grammar,
    skipped_content,
    plain_text,
    indent_separated,
    split_lines,
    parse_text,
)

__all__ = [
    # Types
    "Split",
    "Parsed",
    "SplitFunction",
    "OptionSplitFunction",
    "OptionParser",
    "PartialParser",
    "TotalParser",
    "BlockBuilder",
    
    # Split functions
    "split_into_chunks",
    "before_regex",
    "after_regex",
    "on_indent",
    "take_lines_between_markers",
    
    # Parser construction
    "option_parser",
    "ignore_parser",
    "single_block",
    
    # Combinators
    "try_many",
    "repeat_until_end",
    "take_lines_until",
    
    # Paragraph builders
    "first_line_indent_paragraph_block",
    "indent_separated_paragraph_block",
    
    # Common parsers
    "blank_lines",
    "ignored_region",
    
    # Configuration and grammars
    "ParserSettings",
    "DEFAULT_IGNORE_MARKERS",
    "Grammar",
    "skipped_content",
    "plain_text",
    "indent_separated",
    "split_lines",
    "parse_text",
]
