"""Console logging configuration for qa_warnings."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from qa_warnings.config.settings import settings

_handler: RichHandler | None = None


def configure_logging(verbosity: int = 0) -> None:
    """Configure the ``qa_warnings`` logger.

    Args:
        verbosity: 0 uses settings.log_level, 1=INFO, 2+=DEBUG.
    """
    global _handler

    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(settings.log_level)
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("qa_warnings")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    _handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(_handler)
    logger.setLevel(level)
    logger.propagate = False
