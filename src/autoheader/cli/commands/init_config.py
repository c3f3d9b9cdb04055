# topmark:header:start
#
#   project      : auto-header
#   file         : init_config.py
#   file_relpath : src/autoheader/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header ``init-config`` command.

Prints the default ``auto-header.config.json`` to stdout, as a starting point
for a project's configuration (``install`` writes the same file).
"""

from __future__ import annotations

import click

from autoheader.cli.cmd_common import get_console, is_verbose
from autoheader.config.io import load_template_text
from autoheader.constants import GLOBAL_CONFIG_NAME, GLOBAL_CONFIG_TEMPLATE


@click.command(
    name="init-config",
    help=f"Display the default {GLOBAL_CONFIG_NAME}.",
)
def init_config_command() -> None:
    """Print the default global configuration to stdout."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if is_verbose(ctx):
        console.print(
            console.styled(f"Default {GLOBAL_CONFIG_NAME}:", bold=True, underline=True)
        )

    console.print(load_template_text(GLOBAL_CONFIG_TEMPLATE), nl=False)
