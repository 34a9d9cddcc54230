#!/usr/bin/env python3
"""
Logging configuration for cloudops-utils.

Provides leveled logging with a process-wide threshold. Records below warning
go to standard output, warning and above to standard error, formatted as
``(Severity) message``.
"""

import logging
import os
import sys
from typing import Any, Optional

from cloudops_utils.domain.log_level import TRACE, LogLevel

__version__ = "0.1.0"
__author__ = "John Ayers"

PACKAGE_LOGGER = "cloudops_utils"

DEBUG_ENV_VAR = "CLOUDOPS_DEBUG"
LOG_LEVEL_ENV_VAR = "CLOUDOPS_LOG_LEVEL"

logging.addLevelName(TRACE, "TRACE")


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "logger",
        "description": "Logging configuration",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


class SeverityFormatter(logging.Formatter):
    """Formats records as ``(Severity) message``."""

    def format(self, record: logging.LogRecord) -> str:
        label = LogLevel.from_logging_level(record.levelno).label
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"({label}) {message}"


class SeverityStreamHandler(logging.StreamHandler):
    """Stream handler that splits output by severity.

    Streams are looked up on every emit so redirected ``sys.stdout`` and
    ``sys.stderr`` are honoured.
    """

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr if record.levelno >= logging.WARNING else sys.stdout
        super().emit(record)


def default_threshold() -> LogLevel:
    """Resolve the default threshold from the environment.

    Returns:
        DEBUG when the debug toggle is set, else the configured level, else INFO
    """
    if os.getenv(DEBUG_ENV_VAR):
        return LogLevel.DEBUG
    return LogLevel.parse(os.getenv(LOG_LEVEL_ENV_VAR)) or LogLevel.INFO


def check_log_level(level: Optional[str | LogLevel]) -> LogLevel:
    """Validate a requested level, falling back to the default threshold."""
    if isinstance(level, LogLevel):
        return level
    return LogLevel.parse(level) or default_threshold()


def has_severity_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, SeverityStreamHandler) for h in logger.handlers)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    verbose: bool = False,
    threshold: Optional[str | LogLevel] = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Args:
        name: Logger name
        verbose: If True, set the threshold to DEBUG
        threshold: Explicit threshold; unrecognised values use the default

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only add our handler once; foreign handlers (host app, pytest) do not count
    if not has_severity_handler(logger):
        handler = SeverityStreamHandler()
        handler.setLevel(logging.NOTSET)
        handler.setFormatter(SeverityFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    level = LogLevel.DEBUG if verbose else check_log_level(threshold)
    logger.setLevel(level.logging_level)

    return logger


def get_logger() -> logging.Logger:
    """Return the package logger, configuring it on first use."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not has_severity_handler(logger):
        setup_logger()
    return logger


def set_threshold(level: Optional[str | LogLevel]) -> LogLevel:
    """Set the process-wide minimum severity.

    Returns:
        The threshold actually applied
    """
    resolved = check_log_level(level)
    get_logger().setLevel(resolved.logging_level)
    return resolved


def get_threshold() -> LogLevel:
    return LogLevel.from_logging_level(get_logger().level)


def will_log(severity: str | LogLevel) -> bool:
    """Check whether a message at ``severity`` would be emitted."""
    level = check_log_level(severity)
    return level >= get_threshold()


def message(severity: str | LogLevel, *parts: Any) -> bool:
    """Emit a message made of space-joined parts.

    Returns:
        True if the message was emitted
    """
    level = check_log_level(severity)
    if not will_log(level):
        return False
    get_logger().log(level.logging_level, " ".join(str(part) for part in parts))
    return True


def debug(*parts: Any) -> bool:
    return message(LogLevel.DEBUG, *parts)


def trace(*parts: Any) -> bool:
    return message(LogLevel.TRACE, *parts)


def info(*parts: Any) -> bool:
    return message(LogLevel.INFO, *parts)


def warning(*parts: Any) -> bool:
    return message(LogLevel.WARNING, *parts)


def error(*parts: Any) -> bool:
    return message(LogLevel.ERROR, *parts)


def fatal(*parts: Any) -> bool:
    """Emit at fatal severity. Does not exit; callers decide what to do next."""
    return message(LogLevel.FATAL, *parts)


def log_operation(
    logger: logging.Logger,
    operation: str,
    details: dict[str, Any] | None = None,
    level: int = logging.INFO,
) -> None:
    """Log an operation with structured details.

    Args:
        logger: Logger instance
        operation: Operation description
        details: Optional dictionary of details
        level: Logging level
    """
    message_text = f"{operation}"
    if details:
        detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
        message_text = f"{message_text} ({detail_str})"

    logger.log(level, message_text)


# Canned messages


def location_message(*parts: Any) -> str:
    return " ".join([*(str(p) for p in parts), "Are we in the right place?"])


def cant_proceed_message(*parts: Any) -> str:
    return " ".join([*(str(p) for p in parts), "Nothing to do."])


def fatal_option(option: str) -> bool:
    return fatal(f'Invalid option: "-{option}"')


def fatal_option_argument(option: str) -> bool:
    return fatal(f'Option "-{option}" requires an argument')


def fatal_cant_proceed(*parts: Any) -> bool:
    return fatal(cant_proceed_message(*parts))


def fatal_location(*parts: Any) -> bool:
    return fatal(location_message(*parts))


def fatal_directory(name: str) -> bool:
    return fatal_location(f"We don't appear to be in the {name} directory.")


def fatal_mandatory() -> bool:
    return fatal("Mandatory arguments missing. Check usage via -h option.")


if __name__ == "__main__":
    # Example usage
    info_dict = file_info()
    print(f"{info_dict['name']} v{info_dict['version']}")
