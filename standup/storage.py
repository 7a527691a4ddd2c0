"""Filesystem layout of the standup notes directory."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"

NOT_INITIALIZED_MESSAGE = (
    "Standup has not been initiated and the directory does not exist.\n"
    "You can initiate Standup with the following:\n"
    "\tstandup init"
)


class StandupError(RuntimeError):
    """Base error for user-facing standup failures."""


class AlreadyExistsError(StandupError):
    """Raised when initializing a notes directory that is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists")
        self.path = path


class NotInitializedError(StandupError):
    """Raised when the notes directory has not been created yet."""

    def __init__(self, path: Path) -> None:
        super().__init__(NOT_INITIALIZED_MESSAGE)
        self.path = path


def initialize_directory(directory: Path) -> str:
    """Create the notes directory and return a confirmation message.

    The parent directory must already exist. Any ``OSError`` raised while
    creating the directory is propagated unchanged.
    """

    if directory.exists():
        raise AlreadyExistsError(directory)

    directory.mkdir()
    logger.info("Created standup directory %s", directory)
    return f"{directory} was successfully created"


def ensure_initialized(directory: Path) -> None:
    if not directory.exists():
        raise NotInitializedError(directory)


def note_path(directory: Path, date_stamp: str) -> Path:
    """Return the path of the note for ``date_stamp`` (``YYYY-MM-DD``)."""

    return directory / f"{date_stamp}{NOTE_SUFFIX}"
