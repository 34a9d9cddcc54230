"""Shared pytest fixtures for cloudops-utils tests."""

import logging
from datetime import datetime, timezone

import pytest

from cloudops_utils.domain.snapshot import DBSnapshot
from cloudops_utils.infrastructure.logger import PACKAGE_LOGGER, SeverityStreamHandler


@pytest.fixture
def sample_snapshot() -> DBSnapshot:
    """Create an available, unencrypted snapshot for testing.

    Returns:
        DBSnapshot instance
    """
    return DBSnapshot(
        identifier="app-db-2026-01-01",
        instance_identifier="app-db",
        status="available",
        encrypted=False,
        master_username="appadmin",
        create_time=datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        percent_progress=100,
    )


@pytest.fixture
def encrypted_snapshot() -> DBSnapshot:
    """Create an available, encrypted snapshot for testing.

    Returns:
        DBSnapshot instance
    """
    return DBSnapshot(
        identifier="app-db-2026-01-01",
        instance_identifier="app-db",
        status="available",
        encrypted=True,
        master_username="appadmin",
        create_time=datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        percent_progress=100,
        kms_key_id="arn:aws:kms:us-east-1:123456789012:key/key-123",
    )


@pytest.fixture
def reset_package_logger():
    """Return the package logger to its unconfigured state before and after a test.

    Only the package's own handlers are removed; handlers installed by
    pytest for log capture stay in place.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    def _clear() -> None:
        for handler in list(logger.handlers):
            if isinstance(handler, SeverityStreamHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    _clear()
    yield logger
    _clear()


@pytest.fixture
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace time.sleep with a recorder.

    Returns:
        List receiving every requested delay
    """
    delays: list[float] = []
    monkeypatch.setattr("time.sleep", delays.append)
    return delays
