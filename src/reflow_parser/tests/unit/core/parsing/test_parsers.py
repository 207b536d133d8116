"""Tests for parser construction and common parsers."""

from reflow_parser.core import block
from reflow_parser.core.block import IgnoreBlock
from reflow_parser.core.nonempty import Nonempty
from reflow_parser.core.parsing import (
    Parsed,
    Split,
    after_regex,
    blank_lines,
    ignore_parser,
    ignored_region,
    option_parser,
    single_block,
)


def _declining_splitter(lines):
    return None


def _first_line_splitter(lines):
    return Split(Nonempty.singleton(lines.head), lines.drop(1))


def _as_ignored(lines):
    return Nonempty.singleton(block.ignore(lines))


class TestOptionParser:
    """Tests for option_parser."""
    
    def test_declines_when_splitter_declines(self, make_lines):
        """Test the parser returns None exactly when the splitter does."""
        parser = option_parser(_declining_splitter, _as_ignored)
        assert parser(make_lines("a")) is None
    
    def test_parses_head_and_passes_remainder(self, make_lines):
        """Test the head chunk is parsed and the remainder is untouched."""
        parser = option_parser(_first_line_splitter, _as_ignored)
        result = parser(make_lines("a", "b", "c"))
        
        assert isinstance(result, Parsed)
        assert result.blocks == Nonempty.singleton(block.ignore(make_lines("a")))
        assert result.remainder == make_lines("b", "c")
    
    def test_wraps_always_succeeding_split_functions(self, make_lines):
        """Test split functions that never decline can be used too."""
        parser = option_parser(after_regex(r"^--$"), _as_ignored)
        result = parser(make_lines("x", "--", "y"))
        assert result.blocks.head.lines == make_lines("x", "--")
        assert result.remainder == make_lines("y")


class TestIgnoreParser:
    """Tests for ignore_parser."""
    
    def test_wraps_head_in_single_ignore_block(self, make_lines):
        """Test the head becomes one IgnoreBlock."""
        result = ignore_parser(_first_line_splitter)(make_lines("a", "b"))
        assert len(result.blocks) == 1
        assert isinstance(result.blocks.head, IgnoreBlock)
        assert result.blocks.head.lines == make_lines("a")
    
    def test_declines_with_splitter(self, make_lines):
        """Test ignore_parser declines when its splitter does."""
        assert ignore_parser(_declining_splitter)(make_lines("a")) is None


class TestSingleBlock:
    """Tests for single_block."""
    
    def test_lifts_block_builder(self, make_lines):
        """Test a one-block builder becomes a total parser."""
        parser = single_block(block.ignore)
        assert parser(make_lines("a")) == Nonempty.singleton(block.ignore(make_lines("a")))


class TestBlankLines:
    """Tests for the blank_lines parser."""
    
    def test_consumes_leading_blank_run(self, make_lines):
        """Test blank lines are grouped into one ignored block."""
        result = blank_lines(make_lines("", "", "x"))
        assert result.blocks == Nonempty.singleton(block.ignore(make_lines("", "")))
        assert result.remainder == make_lines("x")
    
    def test_declines_on_non_blank_first_line(self, make_lines):
        """Test blank_lines declines when the first line has content."""
        assert blank_lines(make_lines("x")) is None
        assert blank_lines(make_lines("x", "")) is None
    
    def test_whitespace_only_lines_are_blank(self, make_lines):
        """Test lines of spaces and tabs count as blank."""
        result = blank_lines(make_lines("  ", "\t", "x", ""))
        assert result.blocks.head.lines == make_lines("  ", "\t")
        assert result.remainder == make_lines("x", "")
    
    def test_all_blank_input_has_no_remainder(self, make_lines):
        """Test a fully blank input is consumed."""
        assert blank_lines(make_lines("", " ")).remainder is None


class TestIgnoredRegion:
    """Tests for ignored_region."""
    
    def test_ignores_marker_delimited_region(self, make_lines):
        """Test the whole region becomes an ignored block."""
        parser = ignored_region(r"^\s*<!--", r"-->")
        result = parser(make_lines("<!--", "hidden", "-->", "shown"))
        assert result.blocks.head == block.ignore(make_lines("<!--", "hidden", "-->"))
        assert result.remainder == make_lines("shown")
    
    def test_declines_outside_region(self, make_lines):
        """Test ignored_region declines without a start marker."""
        assert ignored_region(r"^\s*<!--", r"-->")(make_lines("shown")) is None
