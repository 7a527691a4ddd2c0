"""Configuration management for Standup."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DIRECTORY = "standups"
DEFAULT_TEMPLATE_NAME = ".standup_template"


class StandupCommand(enum.Enum):
    """Operations selectable from the command line."""

    INITIALIZE = "init"
    RUN = "run"


@dataclass(frozen=True, slots=True)
class StandupConfig:
    """Paths and selected command for a single invocation."""

    directory: Path
    standup_template: Path
    # Records the selection; the CLI group routes on it when no token is given.
    command: StandupCommand = StandupCommand.RUN


def select_command(token: str | None) -> StandupCommand:
    """Map the optional subcommand token to a command.

    Only ``init`` is recognised; anything else, including no token at all,
    selects the default run command.
    """

    if token == StandupCommand.INITIALIZE.value:
        return StandupCommand.INITIALIZE
    return StandupCommand.RUN


def build_config(
    command: StandupCommand = StandupCommand.RUN, home: Path | None = None
) -> StandupConfig:
    """Build the configuration relative to ``home`` (the user's home by default).

    ``Path.home()`` raises ``RuntimeError`` when the home directory cannot be
    determined; that error is left to propagate.
    """

    base = home if home is not None else Path.home()
    return StandupConfig(
        directory=base / DEFAULT_DIRECTORY,
        standup_template=base / DEFAULT_TEMPLATE_NAME,
        command=command,
    )
