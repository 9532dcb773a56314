# topmark:header:start
#
#   project      : Undent
#   file         : cmd_common.py
#   file_relpath : src/undent/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for Undent CLI commands.

These helpers translate raw Click option values into library objects and
raise the CLI error types on invalid input.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from undent.cli.errors import (
    UndentConfigError,
    UndentEncodingError,
    UndentFileNotFoundError,
    UndentIOError,
    UndentPermissionDeniedError,
    UndentUsageError,
)
from undent.config import ArgsLike, MutableConfig
from undent.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from undent.cli.console import ConsoleLike
    from undent.config.logging import UndentLogger

logger: UndentLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root Click context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def decode_escapes(value: str, *, option: str) -> str:
    r"""Decode backslash escapes (``\n``, ``\r\n``, ``\t``) in an option value.

    Characters outside ASCII are kept as typed; only backslash sequences are
    interpreted.

    Args:
        value (str): Raw option value.
        option (str): Option name used in error messages.

    Returns:
        str: The decoded value.

    Raises:
        UndentUsageError: If the value holds an invalid escape sequence.
    """
    try:
        return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as exc:
        raise UndentUsageError(f"Invalid escape sequence in {option} {value!r}: {exc}") from exc


def parse_values(raw: Sequence[str]) -> list[tuple[str, str]]:
    """Parse repeated ``KEY=VALUE`` arguments into ordered pairs.

    Only the first ``=`` separates key from value, so values may contain ``=``.

    Args:
        raw (Sequence[str]): Raw ``--value`` arguments in command-line order.

    Returns:
        list[tuple[str, str]]: The ``(key, value)`` pairs in the same order.

    Raises:
        UndentUsageError: If an argument holds no ``=``.
    """
    pairs: list[tuple[str, str]] = []
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep:
            raise UndentUsageError(f"Invalid --value {item!r}: expected KEY=VALUE.")
        pairs.append((key, value))
    return pairs


def build_config_draft(
    *,
    config_files: Sequence[Path],
    no_config: bool,
    indent: int | None,
    indent_char: str | None,
    newline: str | None,
    template_value_start: str | None,
    template_value_end: str | None,
) -> MutableConfig:
    """Layer configuration files and CLI overrides into a draft.

    Args:
        config_files (Sequence[Path]): Explicit ``--config`` files, in order.
        no_config (bool): Skip discovery of a local configuration file.
        indent (int | None): ``--indent`` override.
        indent_char (str | None): ``--indent-char`` override (escapes not yet decoded).
        newline (str | None): ``--newline`` override (escapes not yet decoded).
        template_value_start (str | None): ``--start`` override.
        template_value_end (str | None): ``--end`` override.

    Returns:
        MutableConfig: The merged draft, ready to freeze.

    Raises:
        UndentUsageError: If ``--indent-char`` is not a single character.
        UndentConfigError: If an explicit configuration file is missing or unreadable.
    """
    if indent_char is not None:
        indent_char = decode_escapes(indent_char, option="--indent-char")
    if indent_char is not None and len(indent_char) != 1:
        raise UndentUsageError(f"--indent-char must be a single character (got {indent_char!r}).")

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            cwd=Path.cwd(),
            extra_config_files=list(config_files),
            no_config=no_config,
        )
    except FileNotFoundError as exc:
        raise UndentConfigError(f"Configuration file not found: {exc}") from exc
    except ValueError as exc:
        raise UndentConfigError(str(exc)) from exc

    args: ArgsLike = {
        "indent": indent,
        "indent_char": indent_char,
        "newline": decode_escapes(newline, option="--newline") if newline is not None else None,
        "template_value_start": template_value_start,
        "template_value_end": template_value_end,
    }
    return draft.apply_cli_args(args)


def read_input_text(path: Path | None) -> str:
    r"""Read the input text from ``path`` or, when ``path`` is None or ``-``, from stdin.

    Both sources are read as bytes and decoded as UTF-8 so that ``\r\n``
    reaches the splitter unchanged.

    Args:
        path (Path | None): Input file path.

    Returns:
        str: The decoded text.

    Raises:
        UndentFileNotFoundError: If the file does not exist.
        UndentPermissionDeniedError: If the file cannot be read.
        UndentEncodingError: If the input is not valid UTF-8.
        UndentIOError: On other I/O errors.
    """
    if path is None or str(path) == "-":
        logger.debug("Reading input from stdin")
        try:
            return click.get_binary_stream("stdin").read().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UndentEncodingError(f"Cannot decode stdin as UTF-8: {exc}") from exc

    logger.debug("Reading input from %s", path)
    try:
        return path.read_bytes().decode("utf-8")
    except FileNotFoundError as exc:
        raise UndentFileNotFoundError(f"File not found: {path}") from exc
    except PermissionError as exc:
        raise UndentPermissionDeniedError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise UndentEncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise UndentIOError(f"Cannot read {path}: {exc}") from exc
