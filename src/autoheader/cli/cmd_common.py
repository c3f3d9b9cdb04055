# topmark:header:start
#
#   project      : auto-header
#   file         : cmd_common.py
#   file_relpath : src/autoheader/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Small helpers shared by the auto-header commands."""

from __future__ import annotations

import logging

import click

from autoheader.cli.console import ClickConsole


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored by the group, or a plain one when invoked standalone."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (a logging level; WARNING by default)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def is_quiet(ctx: click.Context) -> bool:
    """True when ``-q`` was given: only errors are printed."""
    return get_verbosity(ctx) >= logging.ERROR


def is_verbose(ctx: click.Context) -> bool:
    """True when at least one ``-v`` was given."""
    return get_verbosity(ctx) <= logging.INFO
