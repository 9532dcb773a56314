# topmark:header:start
#
#   project      : Undent
#   file         : runner.py
#   file_relpath : src/undent/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run an Undent pipeline over a single input text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from undent.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from undent.config.logging import UndentLogger

    from .context import FormatContext
    from .contracts import Step

logger: UndentLogger = get_logger(__name__)


def run(ctx: FormatContext, steps: Sequence[Step]) -> FormatContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (FormatContext): Fresh processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.

    Returns:
        FormatContext: The final processing context after all steps have run.
    """
    logger.info(
        "Running %d step(s): indent=%d, indent_char=%r, newline=%r",
        len(steps),
        ctx.config.indent,
        ctx.config.indent_char,
        ctx.config.newline,
    )
    for step in steps:
        ctx = step(ctx)
    return ctx
