"""
Parser Construction

Helpers that turn split functions into parsers. An optional parser built
here declines exactly when its split function declines; otherwise the head
chunk becomes blocks and the remainder is passed along untouched.
"""

from ..block import ignore
from ..nonempty import Nonempty
from .types import BlockBuilder, OptionParser, OptionSplitFunction, Parsed, TotalParser


def option_parser(splitter: OptionSplitFunction, parser: TotalParser) -> OptionParser:
    """
    Combine an optional split function with a parser for the head chunk.
    
    Args:
        splitter: Decides whether the rule applies and where the chunk ends
        parser: Converts the head chunk into blocks
        
    Returns:
        OptionParser
    """
    def parse(lines):
        split = splitter(lines)
        if split is None:
            return None
        return Parsed(parser(split.head), split.remainder)
    
    return parse


def ignore_parser(splitter: OptionSplitFunction) -> OptionParser:
    """Create an optional parser that keeps the matched lines as a single ignored block."""
    return option_parser(splitter, lambda lines: Nonempty.singleton(ignore(lines)))


def single_block(builder: BlockBuilder) -> TotalParser:
    """Lift a function producing one block into a total parser."""
    def parse(lines):
        return Nonempty.singleton(builder(lines))
    
    return parse
