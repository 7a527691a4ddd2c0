"""Shared helpers for Standup CLI commands."""

from __future__ import annotations

from typing import IO, Any

import click

from ..config import StandupCommand, StandupConfig, build_config

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class StandupCliError(click.ClickException):
    """Click exception whose message is printed on stdout like any outcome."""

    def show(self, file: IO[Any] | None = None) -> None:
        click.echo(self.format_message(), file=file)


def get_config(ctx: click.Context) -> StandupConfig:
    """Return the configuration for the current CLI invocation, building it once."""

    config: StandupConfig | None = ctx.obj.get("config")
    if config is not None:
        return config

    command: StandupCommand = ctx.obj.get("command", StandupCommand.RUN)
    config = build_config(command)
    ctx.obj["config"] = config
    return config
