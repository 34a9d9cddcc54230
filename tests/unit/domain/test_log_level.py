"""Unit tests for the LogLevel domain model."""

import logging

import pytest

from cloudops_utils.domain.log_level import TRACE, LogLevel


def test_levels_are_ordered() -> None:
    """Test the total order of severities."""
    ordered = [
        LogLevel.DEBUG,
        LogLevel.TRACE,
        LogLevel.INFO,
        LogLevel.WARNING,
        LogLevel.ERROR,
        LogLevel.FATAL,
    ]

    assert ordered == sorted(ordered)
    assert [level.ordinal for level in ordered] == [0, 1, 3, 5, 7, 9]


def test_label_is_capitalised() -> None:
    """Test message prefix labels."""
    assert LogLevel.ERROR.label == "Error"
    assert LogLevel.FATAL.label == "Fatal"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("debug", LogLevel.DEBUG),
        ("Trace", LogLevel.TRACE),
        ("INFO", LogLevel.INFO),
        ("warn", LogLevel.WARNING),
        ("Warning", LogLevel.WARNING),
        ("critical", LogLevel.FATAL),
    ],
)
def test_parse_names(name: str, expected: LogLevel) -> None:
    """Test case-insensitive parsing and aliases."""
    assert LogLevel.parse(name) is expected


@pytest.mark.parametrize("name", [None, "", "loud"])
def test_parse_unknown_returns_none(name) -> None:
    """Test that unknown names are not guessed."""
    assert LogLevel.parse(name) is None


def test_logging_level_mapping() -> None:
    """Test mapping onto stdlib level numbers."""
    assert LogLevel.TRACE.logging_level == TRACE
    assert LogLevel.FATAL.logging_level == logging.CRITICAL
    assert LogLevel.from_logging_level(logging.WARNING) is LogLevel.WARNING
    assert LogLevel.from_logging_level(logging.NOTSET) is LogLevel.DEBUG
