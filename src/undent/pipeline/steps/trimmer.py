# topmark:header:start
#
#   project      : Undent
#   file         : trimmer.py
#   file_relpath : src/undent/pipeline/steps/trimmer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that de-indents and right-trims each line.

Per line:

1. If the line starts with ``width`` spaces, or with ``width`` tabs, exactly
   ``width`` characters are dropped. Any other prefix (mixed spaces and tabs,
   or a shorter run) falls back to stripping all leading whitespace.
2. Trailing whitespace is stripped.
3. A trailing ``|`` left after step 2 is dropped, so whitespace written
   before it survives.

Sets:
  - ``ctx.lines``
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from undent.config.logging import get_logger
from undent.constants import PRESERVE_TRAILING_MARKER
from undent.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from undent.config.logging import UndentLogger
    from undent.pipeline.context import FormatContext

logger: UndentLogger = get_logger(__name__)


def trim_line(line: str, width: int) -> str:
    """Return ``line`` de-indented by ``width`` and right-trimmed.

    Args:
        line (str): Raw line.
        width (int): Common indentation width.

    Returns:
        str: The trimmed line with any trailing ``|`` marker removed.
    """
    if line.startswith(" " * width) or line.startswith("\t" * width):
        line = line[width:]
    else:
        line = line.lstrip(string.whitespace)

    line = line.rstrip(string.whitespace)

    if line.endswith(PRESERVE_TRAILING_MARKER):
        line = line[: -len(PRESERVE_TRAILING_MARKER)]
    return line


class TrimmerStep(BaseStep):
    """Strip the common indentation and handle the trailing-whitespace marker."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: FormatContext) -> None:
        """Rewrite ``ctx.lines`` in place, preserving order."""
        trimmed: list[str] = []
        for line in ctx.lines:
            out: str = trim_line(line, ctx.indent_width)
            logger.trace("trimmer: %r -> %r", line, out)
            trimmed.append(out)
        ctx.lines = trimmed
