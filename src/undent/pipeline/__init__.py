# topmark:header:start
#
#   project      : Undent
#   file         : __init__.py
#   file_relpath : src/undent/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent formatting pipeline: context, step contracts, named pipelines and runner."""

from __future__ import annotations

from undent.pipeline.context import FormatContext
from undent.pipeline.pipelines import Pipeline
from undent.pipeline.runner import run

__all__ = [
    "FormatContext",
    "Pipeline",
    "run",
]
