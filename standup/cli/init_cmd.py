"""Init command for Standup CLI."""

from __future__ import annotations

import click

from ..services.standup import initialize
from ..storage import AlreadyExistsError
from ._common import StandupCliError, get_config


@click.command(name="init")
@click.pass_context
def init(ctx: click.Context) -> None:
    """Initiate the standup folder."""

    config = get_config(ctx)

    try:
        message = initialize(config)
    except AlreadyExistsError as exc:
        raise StandupCliError(str(exc)) from exc

    click.echo(message)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(init)
