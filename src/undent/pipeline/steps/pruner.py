# topmark:header:start
#
#   project      : Undent
#   file         : pruner.py
#   file_relpath : src/undent/pipeline/steps/pruner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that drops a single trailing empty line.

The empty last line is the artifact of a closing delimiter that sits on its
own line. Exactly one line is dropped, never more.

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


def drop_blank_tail(lines: list[str]) -> list[str]:
    """Return ``lines`` without its last element when that element is empty."""
    if lines and lines[-1] == "":
        return lines[:-1]
    return lines


class PrunerStep(BaseStep):
    """Remove the closing-delimiter artifact line."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: FormatContext) -> None:
        """Drop one trailing empty line from ``ctx.lines``."""
        before: int = len(ctx.lines)
        ctx.lines = drop_blank_tail(ctx.lines)
        if len(ctx.lines) != before:
            logger.debug("pruner: dropped trailing empty line")
