# topmark:header:start
#
#   project      : Undent
#   file         : contracts.py
#   file_relpath : src/undent/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps (runner-facing).

Steps are instantiated objects that are *callable*; the runner invokes them as
``step(ctx)`` where ``ctx`` is a `FormatContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import FormatContext


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass [`undent.pipeline.steps.base.BaseStep`][].
    """

    name: str

    def may_proceed(self, ctx: FormatContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: FormatContext) -> None:
        """Execute the step, mutating the context in place.

        Implementations must not raise: every input produces a defined result.
        """
        ...

    def __call__(self, ctx: FormatContext) -> FormatContext:
        """Run the full step lifecycle and return the context."""
        ...
