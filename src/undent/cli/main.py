# topmark:header:start
#
#   project      : Undent
#   file         : main.py
#   file_relpath : src/undent/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI entry point for Undent.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from undent.cli.commands.dump_config import dump_config_command
from undent.cli.commands.format import format_command
from undent.cli.commands.version import version_command
from undent.cli.console import ClickConsole
from undent.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from undent.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from undent.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & console) on the Click context.

    ``UNDENT_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Undent CLI: strip the indentation of multiline text blocks.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Undent CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'undent format [PATH]' to dedent a file or stdin.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(format_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
