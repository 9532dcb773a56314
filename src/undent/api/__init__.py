# topmark:header:start
#
#   project      : Undent
#   file         : __init__.py
#   file_relpath : src/undent/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for Undent.

Three pure functions, each running a fresh pipeline over its input:

- [`format`][undent.api.format]: default configuration.
- [`format_with`][undent.api.format_with]: explicit configuration.
- [`format_with_values`][undent.api.format_with_values]: explicit
  configuration plus ordered placeholder substitution.

None of them raises for any input text; degenerate configurations (empty
newline or delimiters) produce defined but unspecified output. Calls share no
state and are safe to make concurrently.

Applying a function to its own output is not guaranteed to be a no-op: with a
non-zero ``indent`` every pass adds another level of indentation, and a
preserved trailing space followed by ``|`` survives only the first pass.

Examples:
    ```python
    from undent import Config, format_with_values

    html = format_with_values(
        Config(indent=2),
        [("title", "Hello")],
        '''
        <h1>{{title}}</h1>
        <p>Body</p>
        ''',
    )
    assert html == "  <h1>Hello</h1>\\n  <p>Body</p>"
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from undent.config import Config
from undent.config.logging import get_logger
from undent.pipeline import FormatContext, Pipeline, run

if TYPE_CHECKING:
    from collections.abc import Iterable

    from undent.config.logging import UndentLogger

logger: UndentLogger = get_logger(__name__)

DEFAULT_CONFIG: Config = Config()

__all__ = [
    "DEFAULT_CONFIG",
    "format",
    "format_with",
    "format_with_values",
]


def _result(ctx: FormatContext) -> str:
    return ctx.result if ctx.result is not None else ""


def format(text: str) -> str:  # noqa: A001
    """Normalize ``text`` using the default configuration.

    Args:
        text (str): Raw multiline literal.

    Returns:
        str: The de-indented text.
    """
    return format_with(DEFAULT_CONFIG, text)


def format_with(config: Config, text: str) -> str:
    """Normalize ``text`` using ``config``.

    Args:
        config (Config): Formatting configuration.
        text (str): Raw multiline literal.

    Returns:
        str: The de-indented, re-indented text.
    """
    ctx: FormatContext = FormatContext.bootstrap(config=config, text=text)
    return _result(run(ctx, Pipeline.FORMAT.steps))


def format_with_values(
    config: Config,
    values: Iterable[tuple[str, str]] | Mapping[str, str],
    text: str,
) -> str:
    """Normalize ``text`` and substitute placeholders.

    Args:
        config (Config): Formatting configuration (supplies the delimiters).
        values (Iterable[tuple[str, str]] | Mapping[str, str]): Ordered
            ``(key, value)`` pairs, applied one after another. A mapping is
            applied in its iteration order.
        text (str): Raw multiline literal.

    Returns:
        str: The de-indented text with placeholders replaced.
    """
    pairs: tuple[tuple[str, str], ...] = tuple(
        values.items() if isinstance(values, Mapping) else values
    )
    logger.debug("format_with_values: %d substitution(s)", len(pairs))
    ctx: FormatContext = FormatContext.bootstrap(config=config, text=text, values=pairs)
    return _result(run(ctx, Pipeline.FORMAT_WITH_VALUES.steps))
