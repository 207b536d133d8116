"""
Block Types

Core data structures for the output of the parser engine. A document is
parsed into an ordered, non-empty sequence of blocks, each covering a run
of consecutive input lines:

- TextBlock: a paragraph that may later be re-wrapped. Its lines are stored
  left-trimmed and the original indentation survives only as the two
  prefixes of its Wrappable.
- IgnoreBlock: lines that pass through untouched.

Rendering blocks back to text is left to downstream formatters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .nonempty import Nonempty

Lines = Nonempty[str]


class BlockType(Enum):
    """Enumeration of block kinds."""
    TEXT = "text"
    IGNORE = "ignore"
    
    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Prefixes:
    """Indent prefixes for the first line and for continuation lines."""
    first_line: str
    continuation: str


@dataclass(frozen=True)
class Wrappable:
    """Trimmed paragraph lines plus the prefixes to re-apply when wrapping."""
    prefixes: Prefixes
    lines: Lines


@dataclass(frozen=True)
class TextBlock:
    """A paragraph whose lines may be re-wrapped."""
    wrappable: Wrappable
    
    @property
    def block_type(self) -> BlockType:
        return BlockType.TEXT
    
    @property
    def lines(self) -> Lines:
        return self.wrappable.lines
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert block to dictionary representation."""
        return {
            "block_type": self.block_type.value,
            "prefixes": {
                "first_line": self.wrappable.prefixes.first_line,
                "continuation": self.wrappable.prefixes.continuation,
            },
            "lines": self.lines.to_list(),
            "line_count": len(self.lines),
        }


@dataclass(frozen=True)
class IgnoreBlock:
    """Original lines that are passed through without interpretation."""
    lines: Lines
    
    @property
    def block_type(self) -> BlockType:
        return BlockType.IGNORE
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert block to dictionary representation."""
        return {
            "block_type": self.block_type.value,
            "lines": self.lines.to_list(),
            "line_count": len(self.lines),
        }


Block = Union[TextBlock, IgnoreBlock]
Blocks = Nonempty[Block]


def prefixes(first_line: str, continuation: str) -> Prefixes:
    return Prefixes(first_line, continuation)


def wrappable(prefixes: Prefixes, lines: Lines) -> Wrappable:
    return Wrappable(prefixes, lines)


def text(wrappable: Wrappable) -> TextBlock:
    return TextBlock(wrappable)


def ignore(lines: Lines) -> IgnoreBlock:
    return IgnoreBlock(lines)
