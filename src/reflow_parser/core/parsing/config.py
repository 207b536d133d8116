"""
Parser Configuration Module

Settings that control how the reference grammars build their parsers.

Components:
- ParserSettings: validated settings with dict/JSON serialization
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..line import compile_pattern

logger = logging.getLogger(__name__)

MIN_TAB_WIDTH = 1
MAX_TAB_WIDTH = 16

# Fenced code blocks and HTML comments pass through untouched by default
DEFAULT_IGNORE_MARKERS: List[Tuple[str, str]] = [
    (r"^\s*```", r"```"),
    (r"^\s*~~~", r"~~~"),
    (r"^\s*<!--", r"-->"),
]


@dataclass
class ParserSettings:
    """
    Settings for building document parsers.
    
    Attributes:
        tab_width: Columns a tab expands to when measuring indentation (1-16)
        tidy_up_indents: Drop paragraph indentation instead of keeping it as prefixes
        ignore_markers: (start, end) regex pairs delimiting regions to leave untouched
    
    Example:
        >>> settings = ParserSettings(tab_width=2, tidy_up_indents=True)
        >>> settings.to_dict()["tab_width"]
        2
    """
    tab_width: int = 4
    tidy_up_indents: bool = False
    ignore_markers: List[Tuple[str, str]] = field(
        default_factory=lambda: list(DEFAULT_IGNORE_MARKERS)
    )
    
    def __post_init__(self) -> None:
        """
        Validate settings.
        
        Raises:
            ValueError: If tab_width is out of range or a marker pair is malformed
            TypeError: If a field has the wrong type
            PatternCompileError: If a marker regex does not compile
        """
        if not isinstance(self.tab_width, int) or isinstance(self.tab_width, bool):
            raise TypeError(f"tab_width must be integer, got: {type(self.tab_width)}")
        
        if not MIN_TAB_WIDTH <= self.tab_width <= MAX_TAB_WIDTH:
            raise ValueError(
                f"tab_width must be between {MIN_TAB_WIDTH} and {MAX_TAB_WIDTH}, got: {self.tab_width}"
            )
        
        if not isinstance(self.tidy_up_indents, bool):
            raise TypeError(f"tidy_up_indents must be bool, got: {type(self.tidy_up_indents)}")
        
        if not isinstance(self.ignore_markers, list):
            raise TypeError(f"ignore_markers must be list, got: {type(self.ignore_markers)}")
        
        markers = []
        for pair in self.ignore_markers:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise ValueError(f"ignore_markers entries must be (start, end) pairs, got: {pair!r}")
            start, end = pair
            compile_pattern(start)
            compile_pattern(end)
            markers.append((start, end))
        self.ignore_markers = markers
        
        logger.debug(
            f"ParserSettings validated: tab_width={self.tab_width}, "
            f"tidy_up_indents={self.tidy_up_indents}, markers={len(self.ignore_markers)}"
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a JSON-compatible dictionary."""
        return {
            "tab_width": self.tab_width,
            "tidy_up_indents": self.tidy_up_indents,
            "ignore_markers": [list(pair) for pair in self.ignore_markers],
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserSettings":
        """
        Create settings from a dictionary, ignoring unknown keys.
        
        Raises:
            ValueError: If any value is invalid
        """
        known = {key: data[key] for key in ("tab_width", "tidy_up_indents", "ignore_markers") if key in data}
        if "ignore_markers" in known:
            known["ignore_markers"] = [
                tuple(pair) if isinstance(pair, list) else pair for pair in known["ignore_markers"]
            ]
        return cls(**known)
    
    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
    
    @classmethod
    def from_json(cls, json_str: str) -> "ParserSettings":
        return cls.from_dict(json.loads(json_str))
    
    def copy(self, **overrides) -> "ParserSettings":
        """
        Create a copy with optional overrides.
        
        Example:
            >>> narrow = ParserSettings().copy(tab_width=2)
        """
        data = self.to_dict()
        data.update(overrides)
        return self.from_dict(data)
