# topmark:header:start
#
#   project      : auto-header
#   file         : main.py
#   file_relpath : src/autoheader/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header command group.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import logging

import click

from autoheader.cli.commands.init_config import init_config_command
from autoheader.cli.commands.install import install_command
from autoheader.cli.commands.run import run_command
from autoheader.cli.commands.version import version_command
from autoheader.cli.console import ClickConsole
from autoheader.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from autoheader.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    setup_logging(level=resolve_env_log_level())

    mode: ColorMode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Keep author / created / last-modified headers up to date.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the auto-header CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]
    logger.debug("verbosity=%s", logging.getLevelName(ctx.obj["verbosity_level"]))

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'auto-header run FILES...' to update headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(run_command)

cli.add_command(install_command)

cli.add_command(init_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
