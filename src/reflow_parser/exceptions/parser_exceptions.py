"""
Parser-related exceptions for the reflow parser engine.

The combinators never raise to say "this rule does not apply"; they
return None. The classes here cover the remaining failure modes:
malformed patterns detected while building parsers, attempts to build
an empty line sequence, and broken progress guarantees.
"""

from typing import List, Optional


def numbered(title: str, items: List[str]) -> str:
    """Render items as an indented numbered list under a title, after a blank line."""
    rows = "".join(f"\n  {number}. {item}" for number, item in enumerate(items, 1))
    return f"\n{title}{rows}"


class ReflowParserError(Exception):
    """Base exception for all parser engine errors."""
    
    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None
    ) -> None:
        """
        Initialize parser error.
        
        Args:
            message: Error description
            suggestions: List of suggested fixes
        """
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []
    
    def details(self) -> List[str]:
        """Extra context lines shown between the message and the suggestions."""
        return []
    
    def __str__(self) -> str:
        sections = [self.message, *self.details()]
        if self.suggestions:
            sections.append(numbered("Suggestions:", self.suggestions))
        return "\n".join(sections)


class PatternCompileError(ReflowParserError):
    """Raised when a boundary pattern cannot be compiled."""
    
    def __init__(self, message: str, pattern: Optional[str] = None) -> None:
        suggestions = [
            "Check the regular expression syntax",
            "Escape literal characters such as '(', '[' or '*'",
        ]
        super().__init__(message, suggestions)
        self.pattern = pattern


class EmptySequenceError(ReflowParserError, ValueError):
    """Raised when a non-empty sequence is built from zero items."""
    
    def __init__(self, message: str = "A non-empty sequence needs at least one item") -> None:
        super().__init__(message)


class ParserInvariantError(ReflowParserError, AssertionError):
    """
    Raised when a parser breaks the progress contract.
    
    A partial parser must consume at least one line on every call. When it
    doesn't, the main parsing loop cannot terminate, so this is treated as
    a fatal programming error rather than something to recover from.
    
    Attributes:
        lines_before: Number of lines offered to the parser
        lines_after: Number of lines the parser left over
    """
    
    def __init__(self, message: str, lines_before: int, lines_after: int) -> None:
        super().__init__(
            message,
            ["Make sure the fallback parser always consumes the first line"]
        )
        self.lines_before = lines_before
        self.lines_after = lines_after
