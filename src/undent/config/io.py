# topmark:header:start
#
#   project      : Undent
#   file         : io.py
#   file_relpath : src/undent/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Undent configuration.

This module provides:
- `load_toml_dict`: parse a TOML file with `tomlkit` into a plain ``dict``.
- `extract_undent_table`: locate the Undent table inside ``undent.toml`` or
  ``pyproject.toml`` documents.
- Checked value getters that log a warning and fall back to ``None`` when a
  value has the wrong shape.
- `to_toml`: render a plain ``dict`` back to TOML text.

Parsing errors never propagate: they are logged and an empty table is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from undent.config.keys import Toml
from undent.config.logging import get_logger
from undent.constants import PYPROJECT_TOML_NAME, UNDENT_TOML_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from undent.config.logging import UndentLogger

TomlTable = dict[str, Any]

logger: UndentLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``undent.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_undent_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the Undent settings table from a parsed TOML document.

    ``pyproject.toml`` documents must carry a ``[tool.undent]`` table.
    ``undent.toml`` documents may use an ``[undent]`` table or place the keys
    at top level.

    Args:
        data (TomlTable): Parsed TOML document.
        is_pyproject (bool): Whether the document is a ``pyproject.toml``.

    Returns:
        TomlTable | None: The settings table, or ``None`` when the document has none.
    """
    if is_pyproject:
        tool: Any = data.get(Toml.TOOL)
        if not isinstance(tool, dict):
            return None
        table: Any = cast("TomlTable", tool).get(UNDENT_TOML_TABLE)
        return cast("TomlTable", table) if isinstance(table, dict) else None

    nested: Any = data.get(UNDENT_TOML_TABLE)
    if isinstance(nested, dict):
        return cast("TomlTable", nested)
    return data


def is_pyproject_path(path: Path) -> bool:
    """Return True if ``path`` names a ``pyproject.toml`` file."""
    return path.name == PYPROJECT_TOML_NAME


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent or of the wrong type.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected integer for '%s', got %r; ignoring", key, value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or of the wrong type.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected string for '%s', got %r; ignoring", key, value)
    return None


def warn_unknown_keys(table: TomlTable, *, source: str) -> list[str]:
    """Log a warning for every key in ``table`` that Undent does not recognize.

    Args:
        table (TomlTable): Settings table.
        source (str): Human-readable origin used in the log message.

    Returns:
        list[str]: The unknown keys, sorted.
    """
    unknown: list[str] = sorted(k for k in table if k not in Toml.ALL)
    for key in unknown:
        logger.warning("Unknown configuration key '%s' in %s; ignoring", key, source)
    return unknown


def to_toml(toml_dict: TomlTable) -> str:
    """Render a plain dict as TOML text.

    Args:
        toml_dict (TomlTable): Mapping to serialize.

    Returns:
        str: TOML document text.
    """
    return tomlkit.dumps(toml_dict)
