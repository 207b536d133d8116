"""
Parser Combinators

Functions that compose parsers into larger ones:

- try_many: first-match-wins alternation over optional parsers
- repeat_until_end: the main parsing loop, run until every line is consumed
- take_lines_until: buffer lines until another parser claims the rest

Both loops are plain iteration, so document length is limited only by
memory, never by recursion depth.
"""

import logging
from typing import List, Optional, Sequence

from ...exceptions import ParserInvariantError
from ..block import Block, Blocks, Lines
from ..nonempty import Nonempty
from .types import OptionParser, PartialParser, Parsed, TotalParser

logger = logging.getLogger(__name__)


def try_many(parsers: Sequence[OptionParser]) -> OptionParser:
    """
    Create an optional parser that tries each parser in order.
    
    The result of the first parser that accepts is returned as-is, so earlier
    parsers take priority over later ones. Declines if every parser declines
    (or if no parsers are given).
    
    Args:
        parsers: Optional parsers in priority order
        
    Returns:
        OptionParser
    """
    parsers = tuple(parsers)
    
    def parse(lines: Lines) -> Optional[Parsed]:
        for parser in parsers:
            result = parser(lines)
            if result is not None:
                return result
        return None
    
    return parse


def repeat_until_end(option_parser: OptionParser, partial_parser: PartialParser) -> TotalParser:
    """
    Create a total parser that consumes lines until none are left.
    
    Each step tries option_parser first and falls back to partial_parser,
    which must always accept. Blocks from every step are concatenated in
    input order.
    
    Args:
        option_parser: Parser tried first at every step
        partial_parser: Catch-all parser used when option_parser declines
        
    Returns:
        TotalParser
        
    Raises:
        ParserInvariantError: (when parsing) if a step leaves as many lines
            as it was given, which would otherwise loop forever
    """
    def parse(lines: Lines) -> Blocks:
        blocks: List[Block] = []
        remaining: Optional[Lines] = lines
        
        while remaining is not None:
            result = option_parser(remaining)
            if result is None:
                result = partial_parser(remaining)
            
            if result.remainder is not None and len(result.remainder) >= len(remaining):
                raise ParserInvariantError(
                    f"Parser made no progress: {len(remaining)} lines in, "
                    f"{len(result.remainder)} lines left",
                    lines_before=len(remaining),
                    lines_after=len(result.remainder)
                )
            
            blocks.extend(result.blocks)
            remaining = result.remainder
        
        logger.debug(f"Parsed {len(lines)} lines into {len(blocks)} blocks")
        return Nonempty.from_list(blocks)
    
    return parse


def take_lines_until(other_parser: OptionParser, parser: TotalParser) -> PartialParser:
    """
    Create a partial parser that collects lines until other_parser accepts.
    
    Starting from the second line, the remaining lines are offered to
    other_parser one position at a time. Lines it declines are buffered. When
    it accepts, the buffered lines are parsed with parser and their blocks come
    before the blocks other_parser produced; the remainder is whatever
    other_parser left. If it never accepts, all lines go to parser.
    
    The first line is always consumed, so the result makes progress.
    
    Args:
        other_parser: Parser that recognises the start of the next construct
        parser: Parser for the buffered lines
        
    Returns:
        PartialParser
    """
    def parse(lines: Lines) -> Parsed:
        for index in range(1, len(lines)):
            declined, rest = lines.split_at(index)
            result = other_parser(rest)
            if result is not None:
                return Parsed(parser(declined) + result.blocks, result.remainder)
        
        return Parsed(parser(lines), None)
    
    return parse
