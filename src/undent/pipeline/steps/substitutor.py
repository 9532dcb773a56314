# topmark:header:start
#
#   project      : Undent
#   file         : substitutor.py
#   file_relpath : src/undent/pipeline/steps/substitutor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that substitutes ``{{key}}`` placeholders.

Pairs are applied one after another, each replacing every literal occurrence
of ``start + key + end``. A value inserted by an earlier pair can therefore be
matched by a later key.

Sets:
  - ``ctx.result``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from undent.config.logging import get_logger
from undent.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Iterable

    from undent.config import Config
    from undent.config.logging import UndentLogger
    from undent.pipeline.context import FormatContext

logger: UndentLogger = get_logger(__name__)


def substitute(text: str, values: Iterable[tuple[str, str]], config: Config) -> str:
    """Replace placeholders in ``text`` sequentially.

    Args:
        text (str): Text containing placeholders.
        values (Iterable[tuple[str, str]]): Ordered ``(key, value)`` pairs.
        config (Config): Supplies the placeholder delimiters.

    Returns:
        str: The text after every replacement.
    """
    for key, value in values:
        token: str = config.placeholder(key)
        logger.trace("substitutor: %r -> %r (%d occurrence(s))", token, value, text.count(token))
        text = text.replace(token, value)
    return text


class SubstitutorStep(BaseStep):
    """Apply the ordered placeholder substitutions to the joined text."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: FormatContext) -> bool:
        """Run only once the joiner produced a result."""
        return ctx.result is not None

    def run(self, ctx: FormatContext) -> None:
        """Rewrite ``ctx.result`` with ``ctx.values`` substituted."""
        ctx.result = substitute(cast("str", ctx.result), ctx.values, ctx.config)
