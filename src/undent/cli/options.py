# topmark:header:start
#
#   project      : Undent
#   file         : options.py
#   file_relpath : src/undent/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based Undent CLI.

This module centralizes reusable options (verbosity, color, configuration)
so commands and groups can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from undent.cli.errors import UndentUsageError
from undent.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: The logging level.

    Raises:
        UndentUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise UndentUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color option to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add configuration file and formatting override options to a command.

    Adds ``--config``, ``--no-config``, ``--indent``, ``--indent-char``,
    ``--newline``, ``--start`` and ``--end``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--end",
        "template_value_end",
        default=None,
        metavar="TEXT",
        help="Closing placeholder delimiter (default: '}}').",
    )(f)
    f = click.option(
        "--start",
        "template_value_start",
        default=None,
        metavar="TEXT",
        help="Opening placeholder delimiter (default: '{{').",
    )(f)
    f = click.option(
        "--newline",
        default=None,
        metavar="TEXT",
        help=r"Line delimiter; backslash escapes such as '\r\n' are decoded (default: '\n').",
    )(f)
    f = click.option(
        "--indent-char",
        default=None,
        metavar="CHAR",
        help=(
            r"Character used to render the indentation; backslash escapes such as"
            r" '\t' are decoded (default: space)."
        ),
    )(f)
    f = click.option(
        "--indent",
        type=click.IntRange(min=0),
        default=None,
        help="Number of indentation units prepended to every output line (default: 0).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Do not load undent.toml / pyproject.toml from the current directory.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Additional TOML configuration file (repeatable; later files win).",
    )(f)
    return f
