# topmark:header:start
#
#   project      : Undent
#   file         : splitter.py
#   file_relpath : src/undent/pipeline/steps/splitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that splits the raw text into lines.

One leading ``newline`` token is dropped first: it is the line break that
follows the opening delimiter of the caller's literal. The remainder is split
on every literal occurrence of ``newline``.

Sets:
  - ``ctx.lines``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from undent.config.logging import get_logger
from undent.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from undent.config.logging import UndentLogger
    from undent.pipeline.context import FormatContext

logger: UndentLogger = get_logger(__name__)


def split_lines(text: str, newline: str) -> list[str]:
    """Split ``text`` on ``newline`` after dropping one leading ``newline``.

    Args:
        text (str): Raw input text.
        newline (str): Line delimiter. An empty delimiter disables splitting.

    Returns:
        list[str]: The raw lines; always at least one element.
    """
    if not newline:
        return [text]
    if text.startswith(newline):
        text = text[len(newline) :]
    return text.split(newline)


class SplitterStep(BaseStep):
    """Split the raw input into an ordered line sequence."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: FormatContext) -> None:
        """Populate ``ctx.lines`` from ``ctx.text``."""
        ctx.lines = split_lines(ctx.text, ctx.config.newline)
        logger.debug("splitter: %d line(s)", len(ctx.lines))
