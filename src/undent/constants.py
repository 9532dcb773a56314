# topmark:header:start
#
#   project      : Undent
#   file         : constants.py
#   file_relpath : src/undent/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    UNDENT_VERSION: str = get_version("undent")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    UNDENT_VERSION = "0.0.0"

# Configuration file names and tables
UNDENT_TOML_NAME: Final[str] = "undent.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
UNDENT_TOML_TABLE: Final[str] = "undent"

# Environment variable consulted by the CLI logging setup
UNDENT_LOG_LEVEL_ENV: Final[str] = "UNDENT_LOG_LEVEL"

# Default configuration values
DEFAULT_INDENT: Final[int] = 0
DEFAULT_INDENT_CHAR: Final[str] = " "
DEFAULT_NEWLINE: Final[str] = "\n"
DEFAULT_TEMPLATE_VALUE_START: Final[str] = "{{"
DEFAULT_TEMPLATE_VALUE_END: Final[str] = "}}"

# Line markers
PRESERVE_TRAILING_MARKER: Final[str] = "|"
CONTINUATION_MARKER: Final[str] = "\\"
