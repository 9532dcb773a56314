# topmark:header:start
#
#   project      : Undent
#   file         : base.py
#   file_relpath : src/undent/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from undent.config.logging import get_logger

if TYPE_CHECKING:
    from undent.config.logging import UndentLogger
    from undent.pipeline.context import FormatContext

logger: UndentLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``run()`` and,
    optionally, ``may_proceed()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
    """

    name: str

    def __call__(self, ctx: FormatContext) -> FormatContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (FormatContext): The mutable processing context for the current call.

        Returns:
            FormatContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("BaseStep: pipeline step %s - running", self.name)
            self.run(ctx)
        else:
            logger.debug("BaseStep: pipeline step %s may not proceed", self.name)

        return ctx

    def may_proceed(self, ctx: FormatContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True`` (always run).

        Args:
            ctx (FormatContext): The mutable processing context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return True

    def run(self, ctx: FormatContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place.

        Args:
            ctx (FormatContext): The mutable processing context.
        """
        pass
