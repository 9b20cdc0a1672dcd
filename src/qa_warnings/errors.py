"""Exceptions raised by qa_warnings."""

from __future__ import annotations


class QAWarningError(Exception):
    """Base class for all qa_warnings errors."""


class WarningParseError(QAWarningError, ValueError):
    """A warning document is malformed or carries an unknown value."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class AggregationMismatchError(QAWarningError, ValueError):
    """Two warnings with different aggregation ids were merged."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Cannot aggregate warning '{actual}' into '{expected}'")
        self.expected = expected
        self.actual = actual
