# topmark:header:start
#
#   project      : Undent
#   file         : keys.py
#   file_relpath : src/undent/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML keys recognized in Undent configuration files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Key names for the ``[undent]`` / ``[tool.undent]`` table."""

    INDENT: Final[str] = "indent"
    INDENT_CHAR: Final[str] = "indent_char"
    NEWLINE: Final[str] = "newline"
    TEMPLATE_VALUE_START: Final[str] = "template_value_start"
    TEMPLATE_VALUE_END: Final[str] = "template_value_end"

    # Table names
    TOOL: Final[str] = "tool"

    ALL: Final[frozenset[str]] = frozenset(
        {
            INDENT,
            INDENT_CHAR,
            NEWLINE,
            TEMPLATE_VALUE_START,
            TEMPLATE_VALUE_END,
        }
    )
