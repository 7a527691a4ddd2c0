"""Seed content resolution for today's standup note."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .storage import note_path

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "## Previous\n## Today\n"

# Fixed-width, zero-padded stems sort chronologically as plain strings.
_DATE_STEM_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def find_previous_standup(directory: Path) -> str | None:
    """Return the most recent dated stem found in ``directory``, if any.

    Entries whose stem is not exactly ``YYYY-MM-DD`` are ignored. Errors
    listing the directory propagate.
    """

    stems = [
        entry.stem
        for entry in directory.iterdir()
        if _DATE_STEM_RE.fullmatch(entry.stem)
    ]
    return max(stems, default=None)


def _read_text(path: Path) -> str | None:
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None


def resolve_content(directory: Path, template_path: Path, target: Path) -> str:
    """Return the text that should seed ``target`` before editing.

    An existing ``target`` is opened as-is, so the seed is empty. Otherwise
    the most recent dated note is carried forward, falling back to the user
    template and finally to :data:`DEFAULT_TEMPLATE`.
    """

    if target.exists():
        return ""

    previous = find_previous_standup(directory)
    if previous is not None:
        previous_path = note_path(directory, previous)
        content = _read_text(previous_path)
        if content is not None:
            logger.debug("Carrying forward %s", previous_path)
            return content
        logger.warning("Previous standup %s is unreadable", previous_path)

    content = _read_text(template_path)
    if content is not None:
        return content
    return DEFAULT_TEMPLATE
