# topmark:header:start
#
#   project      : Undent
#   file         : format.py
#   file_relpath : src/undent/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent `format` command.

Reads a file (or stdin), normalizes it with the effective configuration and
writes the result to stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from undent.api import format_with, format_with_values
from undent.cli.cmd_common import build_config_draft, get_console, parse_values, read_input_text
from undent.cli.options import common_config_options
from undent.config.logging import get_logger

if TYPE_CHECKING:
    from undent.cli.console import ConsoleLike
    from undent.config import Config
    from undent.config.logging import UndentLogger

logger: UndentLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Strip the common indentation from PATH (or stdin) and print the result.",
)
@click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path, allow_dash=True),
)
@common_config_options
@click.option(
    "-V",
    "--value",
    "values",
    multiple=True,
    metavar="KEY=VALUE",
    help="Replace the placeholder KEY with VALUE (repeatable; applied in order).",
)
@click.option(
    "--final-newline/--no-final-newline",
    default=True,
    help="Terminate the output with a newline (default: on).",
)
def format_command(
    *,
    path: Path | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    indent: int | None,
    indent_char: str | None,
    newline: str | None,
    template_value_start: str | None,
    template_value_end: str | None,
    values: tuple[str, ...],
    final_newline: bool,
) -> None:
    """Format PATH (or stdin) and print the result.

    Args:
        path (Path | None): Input file; ``None`` or ``-`` reads stdin.
        config_files (tuple[Path, ...]): Explicit ``--config`` files.
        no_config (bool): Skip local configuration discovery.
        indent (int | None): ``--indent`` override.
        indent_char (str | None): ``--indent-char`` override.
        newline (str | None): ``--newline`` override.
        template_value_start (str | None): ``--start`` override.
        template_value_end (str | None): ``--end`` override.
        values (tuple[str, ...]): Raw ``--value`` arguments.
        final_newline (bool): Whether to terminate the output with a newline.
    """
    console: ConsoleLike = get_console(click.get_current_context())

    pairs: list[tuple[str, str]] = parse_values(values)
    config: Config = build_config_draft(
        config_files=config_files,
        no_config=no_config,
        indent=indent,
        indent_char=indent_char,
        newline=newline,
        template_value_start=template_value_start,
        template_value_end=template_value_end,
    ).freeze()

    text: str = read_input_text(path)

    if pairs:
        result: str = format_with_values(config, pairs, text)
    else:
        result = format_with(config, text)

    logger.info("Formatted %d char(s) into %d char(s)", len(text), len(result))
    console.print(result, nl=final_newline)
