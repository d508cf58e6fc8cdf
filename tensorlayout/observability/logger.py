# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Structured Logger for tensorlayout

Text output by default, JSON lines on request.

Example:
    from tensorlayout.observability import get_logger, Verbosity

    logger = get_logger()
    logger.set_verbosity(Verbosity.DEBUG)
    logger.warning("Could not open file", component="dump", path="/tmp/x.dump")
"""

import json
import os
import sys
from dataclasses import dataclass, asdict, field
from datetime import datetime
from enum import IntEnum
from typing import Optional, TextIO

VERBOSITY_ENV_VAR = "TENSORLAYOUT_VERBOSITY"


class Verbosity(IntEnum):
    """
    Logging verbosity levels.

    Uses IntEnum for numeric comparison (e.g., if verbosity >= INFO).
    """

    SILENT = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4


@dataclass
class LogEntry:
    """
    Structured log entry.

    Attributes:
        level: Log level (ERROR, WARNING, INFO, DEBUG)
        message: Log message
        timestamp: ISO format timestamp
        component: Source component (swizzle, dump, graph_export)
        operation: Optional operation name
        duration_ms: Optional duration in milliseconds
        extra: Additional context fields
    """

    level: str
    message: str
    timestamp: str
    component: str = "tensorlayout"
    operation: Optional[str] = None
    duration_ms: Optional[float] = None
    extra: dict = field(default_factory=dict)

    def to_json(self) -> str:
        """Convert to JSON string."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get("extra"):
            data.pop("extra", None)
        return json.dumps(data, default=str)

    def to_text(self) -> str:
        """Convert to human-readable text format."""
        parts = [
            f"[{self.level}]",
            f"[{self.component}]",
            self.message,
        ]
        if self.duration_ms is not None:
            parts.append(f"({self.duration_ms:.2f}ms)")
        return " ".join(parts)


class LayoutLogger:
    """
    Structured logger for tensorlayout.

    Singleton so every module shares one verbosity and one output stream.
    Each entry is written as a single line, so concurrent callers do not
    interleave within a line.

    Example:
        logger = LayoutLogger.get()
        logger.set_verbosity(Verbosity.DEBUG)
        logger.info("Swizzle complete", component="swizzle")
    """

    _instance: Optional["LayoutLogger"] = None

    def __init__(self):
        """Initialize logger with default settings."""
        self._verbosity = Verbosity.INFO
        self._output: TextIO = sys.stderr
        self._json_format = False

        env_verbosity = os.environ.get(VERBOSITY_ENV_VAR)
        if env_verbosity is not None:
            try:
                self._verbosity = Verbosity(int(env_verbosity))
            except ValueError:
                pass

    @classmethod
    def get(cls) -> "LayoutLogger":
        """Get the singleton logger instance."""
        if cls._instance is None:
            cls._instance = LayoutLogger()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        cls._instance = None

    def set_verbosity(self, level: int) -> None:
        """
        Set verbosity level.

        Args:
            level: Verbosity level (0-4 or Verbosity enum)
        """
        if isinstance(level, Verbosity):
            self._verbosity = level
        else:
            self._verbosity = Verbosity(max(0, min(4, level)))

    def get_verbosity(self) -> Verbosity:
        """Get current verbosity level."""
        return self._verbosity

    def set_json_format(self, enabled: bool) -> None:
        """Enable or disable JSON output format."""
        self._json_format = enabled

    def set_output(self, output: TextIO) -> None:
        """Set output stream."""
        self._output = output

    def _emit(self, entry: LogEntry) -> None:
        if self._json_format:
            line = entry.to_json()
        else:
            line = entry.to_text()

        self._output.write(line + "\n")
        self._output.flush()

    def _log(self, level: Verbosity, message: str, context: dict) -> None:
        if self._verbosity < level:
            return
        self._emit(
            LogEntry(
                level=level.name,
                message=message,
                timestamp=datetime.now().isoformat(),
                component=context.pop("component", "tensorlayout"),
                operation=context.pop("operation", None),
                duration_ms=context.pop("duration_ms", None),
                extra=context if context else {},
            )
        )

    def debug(self, message: str, **context) -> None:
        """Log debug message."""
        self._log(Verbosity.DEBUG, message, context)

    def info(self, message: str, **context) -> None:
        """Log info message."""
        self._log(Verbosity.INFO, message, context)

    def warning(self, message: str, **context) -> None:
        """Log warning message."""
        self._log(Verbosity.WARNING, message, context)

    def error(self, message: str, **context) -> None:
        """Log error message."""
        self._log(Verbosity.ERROR, message, context)


def get_logger() -> LayoutLogger:
    """Get the global tensorlayout logger."""
    return LayoutLogger.get()


def set_verbosity(level: int) -> None:
    """
    Set global verbosity level.

    Args:
        level: Verbosity level (0=SILENT, 1=ERROR, 2=WARNING, 3=INFO, 4=DEBUG)
    """
    LayoutLogger.get().set_verbosity(level)
