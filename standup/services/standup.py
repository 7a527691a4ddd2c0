"""High-level standup workflows used by the CLI."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable

from ..config import StandupConfig
from ..storage import ensure_initialized, initialize_directory, note_path
from ..template import resolve_content
from ..utils.datetime_fmt import today_stamp

logger = logging.getLogger(__name__)

EditFunc = Callable[[Path, str], int]

SUCCESS_MESSAGE = "Standup was successful"


def initialize(config: StandupConfig) -> str:
    """Create the configured notes directory."""

    return initialize_directory(config.directory)


def run_standup(
    config: StandupConfig,
    *,
    edit_fn: EditFunc,
    today: date | None = None,
) -> str:
    """Open today's note in the editor, seeded with carried-over content.

    Raises ``NotInitializedError`` before touching anything when the notes
    directory is missing.
    """

    ensure_initialized(config.directory)

    target = note_path(config.directory, today_stamp(today))
    content = resolve_content(config.directory, config.standup_template, target)

    status = edit_fn(target, content)
    if status:
        logger.debug("Editor returned non-zero status %s for %s", status, target)

    return SUCCESS_MESSAGE
