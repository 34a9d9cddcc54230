#!/usr/bin/env python3
"""
Domain model for log severities.

Severities are totally ordered by ordinal; threshold checks never compare names.
"""

import logging
from enum import Enum
from typing import Optional

__version__ = "0.1.0"
__author__ = "John Ayers"

# Level numbers for severities stdlib logging has no name for
TRACE = 15
FATAL = logging.CRITICAL


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "log_level",
        "description": "Domain model for log severities",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class LogLevel(Enum):
    """Ordered log severity.

    The value is the ordinal used for threshold comparison.
    """

    DEBUG = 0
    TRACE = 1
    INFO = 3
    WARNING = 5
    ERROR = 7
    FATAL = 9

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Capitalised name used as the message prefix, e.g. ``Error``."""
        return self.name.capitalize()

    @property
    def logging_level(self) -> int:
        """Equivalent stdlib logging level number."""
        return _LOGGING_LEVELS[self]

    def __lt__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal >= other.ordinal

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["LogLevel"]:
        """Parse a severity name.

        Args:
            name: Severity name, case-insensitive. ``warn`` is accepted.

        Returns:
            Matching LogLevel, or None if the name is not recognised
        """
        if not name:
            return None
        key = name.strip().lower()
        return _ALIASES.get(key)

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogLevel":
        """Map a stdlib logging level number onto the closest severity at or below it."""
        result = cls.DEBUG
        for level in cls:
            if level.logging_level <= levelno:
                result = level
        return result


_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: FATAL,
}

_ALIASES = {level.name.lower(): level for level in LogLevel}
_ALIASES["warn"] = LogLevel.WARNING
_ALIASES["information"] = LogLevel.INFO
_ALIASES["critical"] = LogLevel.FATAL


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
