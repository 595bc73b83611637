from __future__ import annotations

import logging

import pytest

from losscurve.config import LOG_FILE_ENV, LOG_LEVEL_ENV, get_log_file, get_log_level
from losscurve.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("losscurve")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_setup_logging_is_idempotent() -> None:
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG)

    assert logger.name == "losscurve"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_writes_file(tmp_path) -> None:
    log_file = tmp_path / "app.log"
    logger = setup_logging(level=logging.INFO, log_file=str(log_file))
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "value, expected",
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("nonsense", logging.INFO), ("", logging.INFO)],
)
def test_log_level_from_environment(monkeypatch, value: str, expected: int) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert get_log_level() == expected


def test_log_file_from_environment(monkeypatch) -> None:
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)
    assert get_log_file() is None
    monkeypatch.setenv(LOG_FILE_ENV, "  run.log ")
    assert get_log_file() == "run.log"
