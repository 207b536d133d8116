"""
Core package for the reflow parser.

Holds the non-empty sequence type, line helpers, the block model and the
parsing engine built on top of them.
"""

from .nonempty import Nonempty
from .block import (
    BlockType,
    Prefixes,
    Wrappable,
    TextBlock,
    IgnoreBlock,
    Block,
    Blocks,
    Lines,
)

__all__ = [
    "Nonempty",
    "BlockType",
    "Prefixes",
    "Wrappable",
    "TextBlock",
    "IgnoreBlock",
    "Block",
    "Blocks",
    "Lines",
]
