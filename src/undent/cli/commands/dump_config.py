# topmark:header:start
#
#   project      : Undent
#   file         : dump_config.py
#   file_relpath : src/undent/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent `dump-config` command.

Prints the effective configuration (defaults, discovered file, ``--config``
files and CLI overrides, in that order of precedence) as TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from undent.cli.cmd_common import build_config_draft, get_console
from undent.cli.options import common_config_options
from undent.config.io import to_toml
from undent.constants import UNDENT_TOML_TABLE

if TYPE_CHECKING:
    from undent.cli.console import ConsoleLike
    from undent.config import Config, MutableConfig


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
)
@common_config_options
def dump_config_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    indent: int | None,
    indent_char: str | None,
    newline: str | None,
    template_value_start: str | None,
    template_value_end: str | None,
) -> None:
    """Print the effective configuration as an ``[undent]`` TOML table."""
    console: ConsoleLike = get_console(click.get_current_context())

    draft: MutableConfig = build_config_draft(
        config_files=config_files,
        no_config=no_config,
        indent=indent,
        indent_char=indent_char,
        newline=newline,
        template_value_start=template_value_start,
        template_value_end=template_value_end,
    )
    config: Config = draft.freeze()

    for source in draft.config_files:
        console.print(f"# source: {source}")
    console.print(to_toml({UNDENT_TOML_TABLE: config.to_toml_dict()}), nl=False)
