"""Tests for block types and constructors."""

from reflow_parser.core import block
from reflow_parser.core.block import BlockType, IgnoreBlock, Prefixes, TextBlock, Wrappable
from reflow_parser.core.nonempty import Nonempty


class TestBlocks:
    """Tests for TextBlock and IgnoreBlock."""
    
    def test_text_block_constructor(self):
        """Test text() wraps a Wrappable in a TextBlock."""
        lines = Nonempty.of("one", "two")
        wrappable = block.wrappable(block.prefixes("> ", "  "), lines)
        text_block = block.text(wrappable)
        
        assert isinstance(text_block, TextBlock)
        assert text_block.block_type == BlockType.TEXT
        assert text_block.lines == lines
        assert text_block.wrappable.prefixes == Prefixes("> ", "  ")
    
    def test_ignore_block_constructor(self):
        """Test ignore() keeps the original lines."""
        lines = Nonempty.of("  raw", "")
        ignore_block = block.ignore(lines)
        
        assert isinstance(ignore_block, IgnoreBlock)
        assert ignore_block.block_type == BlockType.IGNORE
        assert ignore_block.lines == lines
    
    def test_blocks_are_value_objects(self):
        """Test blocks compare by content."""
        lines = Nonempty.of("x")
        assert block.ignore(lines) == IgnoreBlock(Nonempty.of("x"))
        assert block.text(Wrappable(Prefixes("", ""), lines)) == block.text(
            block.wrappable(block.prefixes("", ""), Nonempty.of("x"))
        )
    
    def test_to_dict(self):
        """Test dictionary representations for inspection output."""
        text_block = block.text(block.wrappable(block.prefixes(" ", "  "), Nonempty.of("a", "b")))
        assert text_block.to_dict() == {
            "block_type": "text",
            "prefixes": {"first_line": " ", "continuation": "  "},
            "lines": ["a", "b"],
            "line_count": 2,
        }
        
        assert block.ignore(Nonempty.of("")).to_dict() == {
            "block_type": "ignore",
            "lines": [""],
            "line_count": 1,
        }
    
    def test_block_type_str(self):
        """Test BlockType renders as its value."""
        assert str(BlockType.IGNORE) == "ignore"
