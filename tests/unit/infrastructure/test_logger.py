"""Unit tests for leveled logging."""

import logging

import pytest

from cloudops_utils.domain.log_level import LogLevel
from cloudops_utils.infrastructure import logger as log


@pytest.fixture(autouse=True)
def clean_logger(reset_package_logger, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(log.DEBUG_ENV_VAR, raising=False)
    monkeypatch.delenv(log.LOG_LEVEL_ENV_VAR, raising=False)
    yield reset_package_logger


def test_info_goes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that informational messages are written to stdout."""
    log.setup_logger()

    assert log.info("hello", "world") is True

    captured = capsys.readouterr()
    assert captured.out == "(Info) hello world\n"
    assert captured.err == ""


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that errors are written to stderr."""
    log.setup_logger()

    log.error("boom")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "(Error) boom\n"


def test_threshold_filters_lower_severities(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that messages below the threshold are suppressed."""
    log.setup_logger(threshold="Warning")

    assert log.info("quiet") is False
    assert log.warning("loud") is True

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "(Warning) loud\n"


def test_trace_label(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the custom trace severity."""
    log.setup_logger(threshold=LogLevel.DEBUG)

    log.trace("step")

    assert capsys.readouterr().out == "(Trace) step\n"


def test_unknown_threshold_falls_back_to_default() -> None:
    """Test that an unrecognised level uses the default threshold."""
    assert log.set_threshold("shouting") is LogLevel.INFO
    assert log.get_threshold() is LogLevel.INFO


def test_debug_env_var_sets_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the debug toggle lowers the default threshold."""
    monkeypatch.setenv(log.DEBUG_ENV_VAR, "1")

    assert log.default_threshold() is LogLevel.DEBUG


def test_log_level_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the configured level is used when debug is off."""
    monkeypatch.setenv(log.LOG_LEVEL_ENV_VAR, "error")

    assert log.default_threshold() is LogLevel.ERROR


def test_will_log() -> None:
    """Test threshold checks."""
    log.set_threshold(LogLevel.ERROR)

    assert log.will_log("Fatal")
    assert not log.will_log(LogLevel.WARNING)


def test_setup_logger_adds_handler_once(clean_logger: logging.Logger) -> None:
    """Test that repeated setup does not duplicate output."""
    log.setup_logger()
    log.setup_logger(verbose=True)

    severity_handlers = [h for h in clean_logger.handlers if isinstance(h, log.SeverityStreamHandler)]
    assert len(severity_handlers) == 1
    assert clean_logger.level == logging.DEBUG


def test_setup_logger_with_foreign_handler(
    clean_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test that a handler added by the host application does not block setup."""
    foreign = logging.NullHandler()
    clean_logger.addHandler(foreign)
    try:
        log.setup_logger()
        log.error("boom")
    finally:
        clean_logger.removeHandler(foreign)

    assert capsys.readouterr().err == "(Error) boom\n"
    assert log.has_severity_handler(clean_logger)


def test_module_loggers_reach_package_handler(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that child module loggers use the package format."""
    log.setup_logger()

    logging.getLogger("cloudops_utils.application.snapshot_service").info("from module")

    assert capsys.readouterr().out == "(Info) from module\n"


def test_canned_messages(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the canned fatal messages."""
    log.setup_logger()

    log.fatal_directory("infra")
    log.fatal_mandatory()

    err = capsys.readouterr().err.splitlines()
    assert err[0] == (
        "(Fatal) We don't appear to be in the infra directory. Are we in the right place?"
    )
    assert err[1] == "(Fatal) Mandatory arguments missing. Check usage via -h option."


def test_log_operation_formats_details(capsys: pytest.CaptureFixture[str]) -> None:
    """Test structured operation logging."""
    logger = log.setup_logger()

    log.log_operation(logger, "Copy snapshot", {"source": "a", "target": "b"})

    assert capsys.readouterr().out == "(Info) Copy snapshot (source=a, target=b)\n"
