# topmark:header:start
#
#   project      : Undent
#   file         : pipelines.py
#   file_relpath : src/undent/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants for Undent (immutable, typed step sequences).

Overview
--------
- ``FORMAT``: split → analyze → trim → prune → join
- ``FORMAT_WITH_VALUES``: FORMAT + substitute

Notes:
* Pipelines are immutable (``Final[tuple[Step, ...]]``) and steps are
  instantiated objects (not functions). Steps hold no per-call state, so the
  same instances serve concurrent calls.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from undent.pipeline.contracts import Step

from .steps import analyzer, joiner, pruner, splitter, substitutor, trimmer

FORMAT_PIPELINE: Final[tuple[Step, ...]] = (
    splitter.SplitterStep(),  # Drop the leading newline and split into lines
    analyzer.AnalyzerStep(),  # Compute the common indentation width
    trimmer.TrimmerStep(),  # De-indent, right-trim, handle the `|` marker
    pruner.PrunerStep(),  # Drop the closing-delimiter artifact line
    joiner.JoinerStep(),  # Join lines, handle the `\` marker, re-indent
)

FORMAT_WITH_VALUES_PIPELINE: Final[tuple[Step, ...]] = FORMAT_PIPELINE + (
    substitutor.SubstitutorStep(),  # Replace `{{key}}` placeholders in order
)


class Pipeline(tuple[Step, ...], Enum):
    """Available pipelines, mapped to their step sequences."""

    FORMAT = FORMAT_PIPELINE
    FORMAT_WITH_VALUES = FORMAT_WITH_VALUES_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the instantiated, ordered step sequence for this pipeline."""
        return self.value
