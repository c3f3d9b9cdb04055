# topmark:header:start
#
#   project      : auto-header
#   file         : version.py
#   file_relpath : src/autoheader/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header ``version`` command.

Prints the auto-header version installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from autoheader.cli.cmd_common import get_console, is_verbose
from autoheader.constants import AUTOHEADER_VERSION


@click.command(
    name="version",
    help="Show the current version of auto-header.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool) -> None:
    """Show the installed auto-header version.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    if as_json:
        console.print(json.dumps({"version": AUTOHEADER_VERSION}))
    elif is_verbose(ctx):
        console.print(console.styled("auto-header version:", bold=True, underline=True))
        console.print(f"    {console.styled(AUTOHEADER_VERSION, bold=True)}")
    else:
        console.print(console.styled(AUTOHEADER_VERSION, bold=True))
