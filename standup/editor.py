"""Utilities for launching an editor on today's standup note."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"


def build_editor_command(
    path: Path, content: str, editor: str = DEFAULT_EDITOR
) -> list[str]:
    """Return the argv enabling line numbers and inserting ``content`` into ``path``."""

    return [editor, "-c", "set number", "-c", f"normal i{content}", str(path)]


def open_editor(path: Path, content: str) -> int:
    """Open ``path`` in the editor, blocking until it exits.

    The editor inherits the terminal. Its exit status is returned but not
    interpreted; an editor that cannot be started raises ``OSError``.
    """

    command = build_editor_command(path, content)
    logger.debug("Launching %s on %s", command[0], path)
    process = subprocess.run(command, check=False)
    logger.debug("Editor exited with status %s", process.returncode)
    return process.returncode
