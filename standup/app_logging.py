"""Logging setup for the standup command."""

from __future__ import annotations

import logging


def setup_logging(
    log_level: int = logging.WARNING, name: str = "standup"
) -> logging.Logger:
    """Attach a stderr handler to the ``standup`` logger.

    Outcome messages go to stdout through Click; logs stay on stderr so the
    two never mix.
    """

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
