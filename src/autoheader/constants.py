# topmark:header:start
#
#   project      : auto-header
#   file         : constants.py
#   file_relpath : src/autoheader/constants.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

AUTOHEADER_VERSION: str = get_version("auto-header")

HEADER_START_MARKER: str = "@auto-header-start"
HEADER_END_MARKER: str = "@auto-header-end"

# Versioned, project-wide configuration (extensions and comment styles):
GLOBAL_CONFIG_NAME: str = "auto-header.config.json"
# Per-developer configuration (author and email), kept out of version control:
LOCAL_CONFIG_NAME: str = ".auto-header-local.json"

# Fallback location of the global configuration: `[tool.auto-header]` in pyproject.toml
PYPROJECT_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "auto-header"

# Bundled templates used by `auto-header install` and `auto-header init-config`:
TEMPLATES_PACKAGE: str = "autoheader"
TEMPLATES_DIR: str = "templates"
GLOBAL_CONFIG_TEMPLATE: str = "auto-header.config.json"
LOCAL_CONFIG_TEMPLATE: str = "auto-header-local.json"
PRECOMMIT_CONFIG_TEMPLATE: str = "pre-commit-config.yaml"

PRECOMMIT_CONFIG_NAME: str = ".pre-commit-config.yaml"
PRECOMMIT_HOOK_ID: str = "auto-header"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV: str = "AUTOHEADER_LOG_LEVEL"
