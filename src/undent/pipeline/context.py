# topmark:header:start
#
#   project      : Undent
#   file         : context.py
#   file_relpath : src/undent/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-invocation processing context.

A `FormatContext` is created for every call to the public API, threaded
through the pipeline steps, and discarded afterwards. Steps mutate it in
place; the `Config` it carries is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from undent.config import Config
    from undent.pipeline.contracts import Step


@dataclass
class FormatContext:
    """Mutable state flowing through the formatting pipeline.

    Attributes:
        config (Config): Immutable configuration for this invocation.
        text (str): The raw input text.
        values (tuple[tuple[str, str], ...]): Ordered placeholder substitutions.
        lines (list[str]): Current line sequence (set by the splitter, rewritten
            by the trimmer and pruner).
        indent_width (int): Common indentation width computed by the analyzer.
        result (str | None): Output text (set by the joiner, rewritten by the
            substitutor).
        steps (list[Step]): Steps that have been invoked, in order.
    """

    config: Config
    text: str
    values: tuple[tuple[str, str], ...] = ()
    lines: list[str] = field(default_factory=lambda: [])
    indent_width: int = 0
    result: str | None = None
    steps: list[Step] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(
        cls,
        *,
        config: Config,
        text: str,
        values: tuple[tuple[str, str], ...] = (),
    ) -> FormatContext:
        """Create a fresh context for one invocation."""
        return cls(config=config, text=text, values=values)
