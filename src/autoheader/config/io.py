# topmark:header:start
#
#   project      : auto-header
#   file         : io.py
#   file_relpath : src/autoheader/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Load auto-header configuration documents.

The global configuration is read from ``auto-header.config.json`` in the
project root. When that file is absent, a ``[tool.auto-header]`` table in
``pyproject.toml`` is used instead (parsed with `tomlkit`). The local
configuration is always ``.auto-header-local.json``.

Both documents are read fresh on every call; nothing is cached between runs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from autoheader.config.logging import get_logger
from autoheader.config.model import GlobalConfig, HeaderConfig
from autoheader.constants import (
    GLOBAL_CONFIG_NAME,
    LOCAL_CONFIG_NAME,
    PYPROJECT_NAME,
    PYPROJECT_SECTION,
    TEMPLATES_DIR,
    TEMPLATES_PACKAGE,
)
from autoheader.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from autoheader.config.logging import AutoHeaderLogger

logger: AutoHeaderLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Both configuration documents of a run, loaded together."""

    config: GlobalConfig
    header: HeaderConfig


def load_json_dict(path: Path) -> dict[str, Any]:
    """Load a JSON document that must hold an object.

    Args:
        path (Path): Path to the JSON document.

    Returns:
        dict[str, Any]: The parsed object.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON or not an object.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top-level value must be an object")
    logger.trace("Loaded %s: %s", path, data)
    return cast("dict[str, Any]", data)


def load_pyproject_section(path: Path) -> dict[str, Any] | None:
    """Return the ``[tool.auto-header]`` table of a pyproject.toml, if any.

    Args:
        path (Path): Path to ``pyproject.toml``.

    Returns:
        dict[str, Any] | None: The table as a plain dict, or None when the file
        or the table is absent.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    if not path.is_file():
        return None
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Error decoding TOML from {path}: {exc}") from exc
    data: Any = doc.unwrap()
    tool: Any = data.get("tool", {}) if isinstance(data, dict) else {}
    section: Any = tool.get(PYPROJECT_SECTION) if isinstance(tool, dict) else None
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION}] must be a table")
    return cast("dict[str, Any]", section)


def load_global_config(root: Path) -> GlobalConfig:
    """Load the global configuration for the project rooted at ``root``.

    Raises:
        ConfigError: If neither ``auto-header.config.json`` nor a
            ``[tool.auto-header]`` table exists, or the content is invalid.
    """
    json_path: Path = root / GLOBAL_CONFIG_NAME
    if json_path.exists():
        return GlobalConfig.from_dict(load_json_dict(json_path), source=GLOBAL_CONFIG_NAME)

    section = load_pyproject_section(root / PYPROJECT_NAME)
    if section is not None:
        logger.debug("Using [tool.%s] from %s", PYPROJECT_SECTION, root / PYPROJECT_NAME)
        return GlobalConfig.from_dict(
            section, source=f"{PYPROJECT_NAME} [tool.{PYPROJECT_SECTION}]"
        )

    raise ConfigError(
        f"Configuration file not found: {json_path} "
        f"(and no [tool.{PYPROJECT_SECTION}] table in {PYPROJECT_NAME})"
    )


def load_header_config(root: Path) -> HeaderConfig:
    """Load the author/email configuration for the project rooted at ``root``."""
    return HeaderConfig.from_dict(
        load_json_dict(root / LOCAL_CONFIG_NAME), source=LOCAL_CONFIG_NAME
    )


def load_settings(root: Path) -> Settings:
    """Load both configuration documents; any problem is fatal.

    Raises:
        ConfigError: If either document is missing or invalid.
    """
    header = load_header_config(root)
    config = load_global_config(root)
    return Settings(config=config, header=header)


def load_template_text(name: str) -> str:
    """Return the text of a bundled template (see ``autoheader/templates``)."""
    resource = files(TEMPLATES_PACKAGE).joinpath(TEMPLATES_DIR).joinpath(name)
    return resource.read_text(encoding="utf-8")
