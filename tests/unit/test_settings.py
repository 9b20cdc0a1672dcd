"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from qa_warnings.config.settings import Settings, settings
from qa_warnings.models.warning import Severity
from qa_warnings.observability.logging import configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("QAW_OUTPUT", "QAW_FAIL_ON", "QAW_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.default_output == "table"
    assert s.fail_on is Severity.CRITICAL
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QAW_OUTPUT", "json")
    monkeypatch.setenv("QAW_FAIL_ON", "important")
    monkeypatch.setenv("QAW_LOG_LEVEL", "debug")
    s = Settings()
    assert s.default_output == "json"
    assert s.fail_on is Severity.IMPORTANT
    assert s.log_level == "DEBUG"


def test_unknown_fail_on_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QAW_FAIL_ON", "apocalyptic")
    assert Settings().fail_on is Severity.CRITICAL


@pytest.mark.parametrize(
    "verbosity,level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_configure_logging_levels(verbosity: int, level: int) -> None:
    configure_logging(verbosity)
    assert logging.getLogger("qa_warnings").level == level


def test_configure_logging_uses_settings_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "log_level", "ERROR")
    configure_logging(0)
    assert logging.getLogger("qa_warnings").level == logging.ERROR


def test_configure_logging_replaces_handler() -> None:
    configure_logging(0)
    configure_logging(1)
    handlers = [h for h in logging.getLogger("qa_warnings").handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
