# topmark:header:start
#
#   project      : auto-header
#   file         : install.py
#   file_relpath : src/autoheader/cli/commands/install.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header ``install`` command.

Scaffolds auto-header into the project in the current directory: copies the
configuration templates, git-ignores the local configuration, installs the
pre-commit hook manager and registers the ``auto-header`` hook.
"""

from __future__ import annotations

from pathlib import Path

import click

from autoheader.cli.cmd_common import get_console
from autoheader.cli.errors import AutoHeaderInstallError
from autoheader.cli.options import CONTEXT_SETTINGS
from autoheader.config.logging import get_logger
from autoheader.constants import LOCAL_CONFIG_NAME, PRECOMMIT_CONFIG_NAME
from autoheader.errors import InstallError
from autoheader.installer import (
    HookConfigOutcome,
    activate_hooks,
    configure_precommit,
    copy_config_templates,
    ensure_gitignore_entry,
    hook_snippet,
    install_hook_manager,
)

logger = get_logger(__name__)

TOTAL_STEPS: int = 5


@click.command(
    name="install",
    help="Install and configure auto-header in the current project.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing configuration files with the templates.",
)
@click.option(
    "--no-install",
    "no_install",
    is_flag=True,
    help="Do not pip-install pre-commit (assume it is already available).",
)
def install_command(*, force: bool, no_install: bool) -> None:
    """Scaffold configuration and the pre-commit hook into the current project.

    Args:
        force (bool): Overwrite existing configuration files.
        no_install (bool): Skip installing the pre-commit package.

    Raises:
        AutoHeaderInstallError: If installing pre-commit or activating the hook fails.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    root: Path = Path.cwd()

    def step(n: int, text: str) -> None:
        console.print(console.styled(f"{n}/{TOTAL_STEPS} - {text}", fg="blue"))

    def done(text: str) -> None:
        console.print(console.styled(f"  ✓ {text}", fg="green"))

    console.print(console.styled("Running auto-header installer...", fg="green"))

    try:
        step(1, "Copying configuration files...")
        for path, written in copy_config_templates(root, force=force):
            done(f"{path.name} {'written' if written else 'kept (already exists)'}.")

        step(2, "Updating .gitignore...")
        try:
            added: bool = ensure_gitignore_entry(root)
        except OSError as exc:
            logger.warning("Cannot update .gitignore: %s", exc)
            console.warn(
                f"  - Could not update .gitignore. Please add '{LOCAL_CONFIG_NAME}' manually."
            )
        else:
            done(".gitignore updated." if added else ".gitignore already lists the local config.")

        step(3, "Installing the pre-commit hook manager...")
        if no_install:
            done("Skipped (--no-install).")
        else:
            install_hook_manager(root)
            done("pre-commit installed.")

        step(4, f"Configuring {PRECOMMIT_CONFIG_NAME}...")
        outcome: HookConfigOutcome = configure_precommit(root)
        if outcome is HookConfigOutcome.MANUAL_EDIT_REQUIRED:
            console.warn(
                f"  - {PRECOMMIT_CONFIG_NAME} exists without an auto-header hook. "
                "Add this entry under 'repos:':"
            )
            console.print(hook_snippet(), nl=False)
        else:
            done(f"{PRECOMMIT_CONFIG_NAME} {outcome.value}.")

        step(5, "Activating the git pre-commit hook...")
        activate_hooks(root)
        done("pre-commit hook installed.")
    except (InstallError, OSError) as exc:
        console.error(f"  ✗ {exc}")
        raise AutoHeaderInstallError(
            "Installation failed. Please check the errors above."
        ) from exc

    console.print()
    console.print(console.styled("auto-header installation complete!", fg="green", bold=True))
    console.print("  - Configuration files have been created.")
    console.print(
        console.styled(
            f"  - IMPORTANT: Edit '{LOCAL_CONFIG_NAME}' with your name and email.", fg="yellow"
        )
    )
    console.print("  - Headers will be updated automatically on commit.")
