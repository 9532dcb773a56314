# topmark:header:start
#
#   project      : Undent
#   file         : analyzer.py
#   file_relpath : src/undent/pipeline/steps/analyzer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline step that computes the common indentation width.

The width is the minimum length of the leading whitespace run over every
non-empty line. A non-empty line without leading whitespace contributes 0;
empty lines do not contribute. Whitespace-only lines do contribute their full
length. When no line contributes, the width is 0.

Sets:
  - ``ctx.indent_width``
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from undent.config.logging import get_logger
from undent.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Iterable

    from undent.config.logging import UndentLogger
    from undent.pipeline.context import FormatContext

logger: UndentLogger = get_logger(__name__)

_LEADING_WS_RE: re.Pattern[str] = re.compile(r"\s*", re.ASCII)


def leading_whitespace_width(line: str) -> int | None:
    """Return the length of the leading whitespace run, or None for an empty line."""
    if not line:
        return None
    m: re.Match[str] | None = _LEADING_WS_RE.match(line)
    return m.end() if m else 0


def common_indent_width(lines: Iterable[str]) -> int:
    """Return the minimum leading-whitespace width across contributing lines.

    Args:
        lines (Iterable[str]): Raw lines.

    Returns:
        int: The common indentation width (0 when no line contributes).
    """
    widths: list[int] = [w for w in map(leading_whitespace_width, lines) if w is not None]
    return min(widths, default=0)


class AnalyzerStep(BaseStep):
    """Compute the indentation width to strip from every line."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: FormatContext) -> None:
        """Set ``ctx.indent_width`` from ``ctx.lines``."""
        ctx.indent_width = common_indent_width(ctx.lines)
        logger.debug("analyzer: common indent width = %d", ctx.indent_width)
