"""Run command for Standup CLI."""

from __future__ import annotations

import click

from ..editor import open_editor
from ..services.standup import run_standup
from ..storage import NotInitializedError
from ._common import StandupCliError, get_config


@click.command(name="run")
@click.pass_context
def run(ctx: click.Context) -> None:
    """Open today's standup in the editor (default)."""

    config = get_config(ctx)

    try:
        message = run_standup(config, edit_fn=open_editor)
    except NotInitializedError as exc:
        raise StandupCliError(str(exc)) from exc

    click.echo(message)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(run)
