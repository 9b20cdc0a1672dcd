"""Application configuration and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from qa_warnings.errors import WarningParseError
from qa_warnings.models.warning import Severity

logger = logging.getLogger(__name__)


def _default_output() -> str:
    return os.environ.get("QAW_OUTPUT", "") or "table"


def _default_fail_on() -> Severity:
    """Return the severity at which ``qaw summary`` fails.

    Reads QAW_FAIL_ON; an unknown name falls back to CRITICAL.
    """
    raw = os.environ.get("QAW_FAIL_ON", "")
    if not raw:
        return Severity.CRITICAL
    try:
        return Severity.from_str(raw)
    except WarningParseError:
        logger.warning("Ignoring unknown QAW_FAIL_ON value %r, using CRITICAL", raw)
        return Severity.CRITICAL


def _default_log_level() -> str:
    return (os.environ.get("QAW_LOG_LEVEL", "") or "WARNING").upper()


@dataclass
class Settings:
    default_output: str = field(default_factory=_default_output)  # "table", "json" or "yaml"
    fail_on: Severity = field(default_factory=_default_fail_on)
    log_level: str = field(default_factory=_default_log_level)


# Global singleton
settings = Settings()
