"""
Reflow Parser

Line-oriented parser combinators that turn raw text lines into blocks
(wrappable paragraphs and ignored regions) for downstream text reflow.
"""

__version__ = "0.1.0"
