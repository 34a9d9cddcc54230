"""Unit tests for SnapshotService."""

from unittest.mock import Mock, call

import pytest

from cloudops_utils.application.snapshot_service import SnapshotService
from cloudops_utils.domain.errors import (
    SnapshotNotFoundError,
    SnapshotStateError,
    SnapshotTimeoutError,
    SnapshotUsernameMismatchError,
)
from cloudops_utils.domain.snapshot import DBSnapshot


def make_service(repo: Mock, max_poll_attempts: int = 5) -> SnapshotService:
    return SnapshotService(repo, settle_delay=0, poll_interval=0, max_poll_attempts=max_poll_attempts)


def test_create_snapshot_polls_until_available(no_sleep, sample_snapshot: DBSnapshot) -> None:
    """Test that creation polls through intermediate states."""
    # Arrange
    repo = Mock()
    repo.describe_snapshot.side_effect = [
        DBSnapshot(sample_snapshot.identifier, status="creating", percent_progress=10),
        DBSnapshot(sample_snapshot.identifier, status="creating", percent_progress=80),
        sample_snapshot,
    ]
    service = make_service(repo)

    # Act
    result = service.create_snapshot("app-db", sample_snapshot.identifier)

    # Assert
    assert result is sample_snapshot
    repo.describe_instance.assert_called_once_with("app-db")
    repo.create_snapshot.assert_called_once_with("app-db", sample_snapshot.identifier)
    assert repo.describe_snapshot.call_count == 3


def test_create_snapshot_failed_state(no_sleep) -> None:
    """Test that a failed snapshot stops polling with an error."""
    repo = Mock()
    repo.describe_snapshot.return_value = DBSnapshot("snap-1", status="failed")
    service = make_service(repo)

    with pytest.raises(SnapshotStateError, match="failed"):
        service.create_snapshot("app-db", "snap-1")

    assert repo.describe_snapshot.call_count == 1


def test_create_snapshot_times_out(no_sleep) -> None:
    """Test that polling is bounded by max_poll_attempts."""
    repo = Mock()
    repo.describe_snapshot.return_value = DBSnapshot("snap-1", status="creating")
    service = make_service(repo, max_poll_attempts=3)

    with pytest.raises(SnapshotTimeoutError, match="3 checks"):
        service.create_snapshot("app-db", "snap-1")

    assert repo.describe_snapshot.call_count == 3


def test_create_snapshot_missing_instance_creates_nothing(no_sleep) -> None:
    """Test that a missing DB instance aborts before create."""
    repo = Mock()
    repo.describe_instance.side_effect = RuntimeError("DBInstanceNotFound")
    service = make_service(repo)

    with pytest.raises(RuntimeError):
        service.create_snapshot("missing-db", "snap-1")

    repo.create_snapshot.assert_not_called()


def test_encrypt_snapshot_sequence(no_sleep, sample_snapshot: DBSnapshot, encrypted_snapshot: DBSnapshot) -> None:
    """Test the copy/delete/copy-back/delete sequence."""
    # Arrange
    repo = Mock()
    repo.describe_snapshot.side_effect = [sample_snapshot, encrypted_snapshot]
    service = make_service(repo)
    snap_id = sample_snapshot.identifier
    temp_id = f"encrypted-{snap_id}"

    # Act
    result = service.encrypt_snapshot(snap_id, "key-123")

    # Assert
    assert result is encrypted_snapshot
    assert repo.copy_snapshot.call_args_list == [
        call(snap_id, temp_id, "key-123"),
        call(temp_id, snap_id),
    ]
    assert repo.delete_snapshot.call_args_list == [call(snap_id), call(temp_id)]
    assert repo.wait_for_snapshot.call_args_list == [
        call(temp_id, "available"),
        call(snap_id, "deleted"),
        call(snap_id, "available"),
        call(temp_id, "deleted"),
    ]


def test_encrypt_snapshot_already_encrypted(encrypted_snapshot: DBSnapshot) -> None:
    """Test that an encrypted snapshot is left alone."""
    repo = Mock()
    repo.describe_snapshot.return_value = encrypted_snapshot
    service = make_service(repo)

    result = service.encrypt_snapshot(encrypted_snapshot.identifier, "key-123")

    assert result is encrypted_snapshot
    repo.copy_snapshot.assert_not_called()
    repo.delete_snapshot.assert_not_called()


def test_encrypt_snapshot_not_available() -> None:
    """Test that an unavailable snapshot is rejected."""
    repo = Mock()
    repo.describe_snapshot.return_value = DBSnapshot("snap-1", status="creating")
    service = make_service(repo)

    with pytest.raises(SnapshotStateError, match="not in a usable state"):
        service.encrypt_snapshot("snap-1", "key-123")

    repo.copy_snapshot.assert_not_called()


def test_encrypt_snapshot_missing() -> None:
    """Test that a missing snapshot raises SnapshotNotFoundError."""
    repo = Mock()
    repo.describe_snapshot.return_value = None
    service = make_service(repo)

    with pytest.raises(SnapshotNotFoundError):
        service.encrypt_snapshot("snap-1", "key-123")


def test_check_snapshot_username_match(sample_snapshot: DBSnapshot) -> None:
    """Test that matching usernames pass and shared snapshots are searched."""
    repo = Mock()
    repo.describe_snapshot.return_value = sample_snapshot
    service = make_service(repo)

    service.check_snapshot_username(sample_snapshot.identifier, "appadmin")

    repo.describe_snapshot.assert_called_once_with(sample_snapshot.identifier, True)


def test_check_snapshot_username_mismatch(sample_snapshot: DBSnapshot) -> None:
    """Test that a mismatch raises with exit code 128."""
    repo = Mock()
    repo.describe_snapshot.return_value = sample_snapshot
    service = make_service(repo)

    with pytest.raises(SnapshotUsernameMismatchError) as exc_info:
        service.check_snapshot_username(sample_snapshot.identifier, "postgres")

    assert exc_info.value.exit_code == 128
    assert exc_info.value.snapshot_username == "appadmin"


def test_check_snapshot_username_missing() -> None:
    """Test that a missing snapshot exits with the generic failure code."""
    repo = Mock()
    repo.describe_snapshot.return_value = None
    service = make_service(repo)

    with pytest.raises(SnapshotNotFoundError) as exc_info:
        service.check_snapshot_username("snap-1", "appadmin")

    assert exc_info.value.exit_code == 255
