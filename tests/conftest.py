"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from qa_warnings.config.settings import settings
from qa_warnings.models.warning import QAWarning, Severity


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin settings so QAW_* variables in the environment don't leak into tests."""
    monkeypatch.setattr(settings, "default_output", "table")
    monkeypatch.setattr(settings, "fail_on", Severity.CRITICAL)
    monkeypatch.setattr(settings, "log_level", "WARNING")


@pytest.fixture
def sample_warnings() -> list[QAWarning]:
    return [
        QAWarning("missing-ref", None, Severity.WARNING, 3),
        QAWarning("bad-property", "P31", Severity.INFO, 1),
        QAWarning("missing-ref", None, Severity.CRITICAL, 2),
        QAWarning("bad-property", "P279", Severity.IMPORTANT, 1),
        QAWarning("bad-property", "P31", Severity.WARNING, 4),
    ]


@pytest.fixture
def warnings_file(tmp_path: Path, sample_warnings: list[QAWarning]) -> Path:
    path = tmp_path / "warnings.json"
    path.write_text(json.dumps([w.to_dict() for w in sample_warnings]))
    return path
