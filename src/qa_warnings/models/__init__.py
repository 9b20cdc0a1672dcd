"""Data models for QA warnings."""

from __future__ import annotations

from qa_warnings.models.warning import QAWarning, Severity

__all__ = ["QAWarning", "Severity"]
