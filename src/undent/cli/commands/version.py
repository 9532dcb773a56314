# topmark:header:start
#
#   project      : Undent
#   file         : version.py
#   file_relpath : src/undent/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent `version` command.

Prints the current Undent version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from undent.cli.cmd_common import get_console
from undent.constants import UNDENT_VERSION

if TYPE_CHECKING:
    from undent.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Undent.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of Undent.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    console: ConsoleLike = get_console(click.get_current_context())

    if output_format == "json":
        console.print(json.dumps({"version": UNDENT_VERSION}))
    else:
        console.print(console.styled(UNDENT_VERSION, bold=True))
