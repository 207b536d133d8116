"""
Parser Types

Shapes shared by every split function and parser in the engine:

- SplitFunction: always cuts off a non-empty head chunk
- OptionSplitFunction: may decline by returning None
- OptionParser: may decline; on success returns blocks and leftover lines
- PartialParser: never declines and always consumes at least one line
- TotalParser: consumes every line it is given

A remainder of None means nothing is left; a remainder is never empty.
"""

from typing import Callable, NamedTuple, Optional

from ..block import Block, Blocks, Lines


class Split(NamedTuple):
    """Head chunk plus the lines left after it."""
    head: Lines
    remainder: Optional[Lines]


class Parsed(NamedTuple):
    """Blocks built from the consumed lines plus the lines left after them."""
    blocks: Blocks
    remainder: Optional[Lines]


SplitFunction = Callable[[Lines], Split]
OptionSplitFunction = Callable[[Lines], Optional[Split]]

OptionParser = Callable[[Lines], Optional[Parsed]]
PartialParser = Callable[[Lines], Parsed]
TotalParser = Callable[[Lines], Blocks]

BlockBuilder = Callable[[Lines], Block]
