"""
Essential Reflow Parser Functionality Tests

End-to-end checks that a document built from the public API is split
into the blocks downstream reflowing expects:
- Paragraphs become text blocks with prefixes
- Blank lines and marker regions become ignore blocks
- Every input line is covered exactly once, in order
- Configuration feeds the reference grammars
"""

import json
import time

import pytest

from reflow_parser.core.block import BlockType
from reflow_parser.core.nonempty import Nonempty
from reflow_parser.core.parsing import (
    Grammar,
    ParserSettings,
    blank_lines,
    first_line_indent_paragraph_block,
    ignore_parser,
    parse_text,
    repeat_until_end,
    single_block,
    take_lines_between_markers,
    take_lines_until,
    try_many,
)
from reflow_parser.utils.config import ConfigManager


DOCUMENT = """\
Reflowing text means rewrapping
paragraphs to a new width.

    An indented paragraph
  with a different continuation indent.

<!-- this comment
     must stay as it is -->
```
  code too
```
Last line."""


def _covered_lines(blocks):
    covered = []
    for block in blocks:
        if block.block_type == BlockType.TEXT:
            first = block.wrappable.prefixes.first_line
            rest = block.wrappable.prefixes.continuation
            lines = block.lines.to_list()
            covered.append(first + lines[0])
            covered.extend(rest + line for line in lines[1:])
        else:
            covered.extend(block.lines)
    return covered


class TestReflowParserCore:
    """Essential smoke tests for the reflow parser."""
    
    def test_plain_document_blocks(self):
        """Test the plain grammar on a mixed document."""
        blocks = parse_text(DOCUMENT)
        
        assert [block.block_type.value for block in blocks] == [
            "text", "ignore", "text", "ignore", "ignore", "ignore", "text",
        ]
        assert blocks[2].wrappable.prefixes.first_line == "    "
        assert blocks[2].wrappable.prefixes.continuation == "  "
    
    def test_every_line_covered_in_order(self):
        """Test blocks reproduce the input when prefixes are put back."""
        blocks = parse_text(DOCUMENT)
        assert _covered_lines(blocks) == DOCUMENT.splitlines()
    
    def test_custom_grammar_from_engine_parts(self):
        """Test a grammar assembled directly from the combinators."""
        skip = try_many([
            blank_lines,
            ignore_parser(take_lines_between_markers(r"^BEGIN", r"END$")),
        ])
        paragraph = single_block(first_line_indent_paragraph_block(False))
        grammar = repeat_until_end(skip, take_lines_until(skip, paragraph))
        
        lines = Nonempty.of("one", "two", "BEGIN x", "y END", "", "three")
        blocks = grammar(lines)
        
        assert [block.block_type.value for block in blocks] == ["text", "ignore", "ignore", "text"]
        assert blocks[1].lines.to_list() == ["BEGIN x", "y END"]
    
    def test_long_document_does_not_exhaust_the_stack(self):
        """Test thousands of paragraphs parse without recursion limits."""
        document = "\n\n".join(f"paragraph {n}" for n in range(5000))
        
        blocks = parse_text(document)
        
        assert len(blocks) == 9999
        assert blocks.last.lines.head == "paragraph 4999"
    
    @pytest.mark.parametrize("separator", ["\n", "\n\n"])
    def test_parse_time_grows_linearly(self, separator):
        """Test four times the lines takes nowhere near sixteen times as long."""
        def best_time(item_count):
            document = separator.join(f"word {n}" for n in range(item_count))
            timings = []
            for _ in range(3):
                started = time.perf_counter()
                parse_text(document)
                timings.append(time.perf_counter() - started)
            return min(timings)
        
        small = best_time(10000)
        large = best_time(40000)
        
        assert large < small * 8, f"10k items: {small:.3f}s, 40k items: {large:.3f}s"
    
    def test_configuration_drives_grammar(self, tmp_path):
        """Test settings from a config file reach the indent grammar."""
        (tmp_path / "reflow.config.json").write_text(
            json.dumps({"parser": {"tab_width": 2}}), encoding="utf-8"
        )
        settings = ConfigManager(project_root=tmp_path, load_env=False).parser_settings()
        
        blocks = parse_text("\tfirst\n  second", settings, Grammar.INDENT)
        assert len(blocks) == 1
        
        blocks = parse_text("\tfirst\n  second", ParserSettings(), Grammar.INDENT)
        assert len(blocks) == 2
    
    @pytest.mark.parametrize("grammar", list(Grammar))
    def test_empty_document(self, grammar):
        """Test an empty document is a single ignored empty line."""
        blocks = parse_text("", grammar=grammar)
        assert len(blocks) == 1
        assert blocks[0].block_type == BlockType.IGNORE
        assert blocks[0].lines.to_list() == [""]
