# topmark:header:start
#
#   project      : Undent
#   file         : joiner.py
#   file_relpath : src/undent/pipeline/steps/joiner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that joins the trimmed lines into the output text.

Lines are folded left to right:

* When the text built so far ends with ``\\``, the marker is dropped and the
  next line is appended directly (no newline, no indentation).
* Otherwise ``newline`` is inserted, followed by the indentation prefix and
  the next line.

The whole result is finally prefixed with the indentation once more, so the
first line carries the same indentation as every line that follows a
newline. A leading empty line is dropped when more lines follow it.

A ``\\`` on the last line (or on a single line) has nothing to join with and
is kept verbatim.

Sets:
  - ``ctx.result``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from undent.config.logging import get_logger
from undent.constants import CONTINUATION_MARKER
from undent.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from undent.config.logging import UndentLogger
    from undent.pipeline.context import FormatContext

logger: UndentLogger = get_logger(__name__)


def join_lines(lines: Sequence[str], *, newline: str, padding: str) -> str:
    """Join ``lines`` honoring the continuation marker and re-indentation.

    Args:
        lines (Sequence[str]): Trimmed lines (trailing blank already pruned).
        newline (str): Separator inserted between lines.
        padding (str): Indentation prefix (``indent_char * indent``).

    Returns:
        str: The joined text, prefixed with ``padding``.
    """
    if len(lines) > 1 and lines[0] == "":
        lines = lines[1:]

    if not lines:
        return padding

    joined: str = lines[0]
    for line in lines[1:]:
        if joined.endswith(CONTINUATION_MARKER):
            joined = joined[: -len(CONTINUATION_MARKER)] + line
        else:
            joined = joined + newline + padding + line

    return padding + joined


class JoinerStep(BaseStep):
    """Fold the line sequence into a single string."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: FormatContext) -> None:
        """Set ``ctx.result`` from ``ctx.lines``."""
        ctx.result = join_lines(
            ctx.lines,
            newline=ctx.config.newline,
            padding=ctx.config.padding,
        )
        logger.debug("joiner: %d line(s) -> %d char(s)", len(ctx.lines), len(ctx.result))
