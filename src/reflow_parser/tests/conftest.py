"""Shared test fixtures and configuration for reflow parser tests."""

import logging
import os

import pytest

from reflow_parser.core.block import IgnoreBlock, TextBlock
from reflow_parser.core.nonempty import Nonempty
from reflow_parser.utils.logging_config import ROOT_LOGGER_NAME

REFLOW_ENV_VARS = (
    "REFLOW_TAB_WIDTH",
    "REFLOW_TIDY_UP_INDENTS",
    "REFLOW_IGNORE_MARKERS",
    "REFLOW_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_reflow_env():
    """
    Keep REFLOW_* variables from leaking between tests.
    
    Values loaded from .env files are written straight into os.environ, so
    they are removed both before and after each test.
    """
    for name in REFLOW_ENV_VARS:
        os.environ.pop(name, None)
    
    yield
    
    for name in REFLOW_ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler changes made by setup_logging (the CLI callback calls it)."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def make_lines():
    """Build a Nonempty line sequence from positional strings."""
    def _make(*items):
        return Nonempty.of(*items)
    return _make


@pytest.fixture
def sample_document():
    """Provide a small document mixing paragraphs, blank lines and a code fence."""
    return "\n".join([
        "First paragraph line one",
        "first paragraph line two",
        "",
        "  - a list item that",
        "    continues here",
        "",
        "```python",
        "def function():",
        "    return 1",
        "```",
        "Closing words",
    ])


@pytest.fixture
def source_lines():
    """Lines a block covers, as stored (text blocks hold trimmed lines)."""
    def _lines(block):
        if isinstance(block, TextBlock):
            return block.wrappable.lines.to_list()
        if isinstance(block, IgnoreBlock):
            return block.lines.to_list()
        raise TypeError(f"Unexpected block type: {type(block)}")
    return _lines
