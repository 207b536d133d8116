"""
Logging configuration for the reflow parser.

Console logging goes through rich's RichHandler; JSON output is available
for machine-readable logs (one object per line on stderr).
"""

import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "reflow_parser"


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    
    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Look up a level by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level '{name}'")


class LogFormat(Enum):
    """Log format types."""
    RICH = "rich"
    JSON = "json"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""
    
    _STANDARD_ATTRS = frozenset({
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
        'filename', 'module', 'lineno', 'funcName', 'created',
        'msecs', 'relativeCreated', 'thread', 'threadName',
        'processName', 'process', 'exc_info', 'exc_text',
        'stack_info', 'message', 'taskName'
    })
    
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        
        # Fields passed through `extra=`
        for attr_name, attr_value in record.__dict__.items():
            if not attr_name.startswith('_') and attr_name not in self._STANDARD_ATTRS:
                log_data[attr_name] = attr_value
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, default=str, ensure_ascii=False, separators=(',', ':'))


def setup_logging(
    verbose: bool = False,
    log_format: LogFormat = LogFormat.RICH,
    level: Optional[Union[LogLevel, str]] = None,
    console: Optional[Console] = None
) -> logging.Logger:
    """
    Set up logging for the reflow parser package.
    
    Args:
        verbose: Enable verbose (DEBUG) logging
        log_format: Rich console output or JSON lines
        level: Explicit level, overriding verbose when given
        console: Console for rich output (defaults to stderr)
        
    Returns:
        The package logger
    """
    if level is None:
        log_level = LogLevel.DEBUG if verbose else LogLevel.WARNING
    elif isinstance(level, str):
        log_level = LogLevel.from_name(level)
    else:
        log_level = level
    
    if log_format == LogFormat.JSON:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
    else:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handler.setLevel(log_level.value)
    
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level.value)
    logger.propagate = False
    
    return logger
