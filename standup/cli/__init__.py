"""Standup CLI package."""

from __future__ import annotations

from typing import Sequence

import click

from .. import __version__
from ..app_logging import setup_logging
from ..config import select_command
from . import init_cmd, run_cmd
from ._common import CONTEXT_SETTINGS, StandupCliError, get_config

__all__ = ["cli", "main", "StandupCliError"]


class StandupGroup(click.Group):
    """Command group that falls back to ``run`` for unrecognised tokens."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        command = select_command(args[0] if args else None)
        return command.value, self.get_command(ctx, command.value), args[1:]


@click.group(
    cls=StandupGroup,
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
)
@click.version_option(__version__, "-V", "--version", prog_name="standup")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Logs standups for later viewing."""

    ctx.ensure_object(dict)
    ctx.obj["command"] = select_command(ctx.invoked_subcommand)

    if ctx.invoked_subcommand is None:
        config = get_config(ctx)
        ctx.invoke(cli.commands[config.command.value])


for register_command in (
    init_cmd.register,
    run_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="standup", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code or 0)
    return result if isinstance(result, int) else 0
