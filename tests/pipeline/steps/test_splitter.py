# topmark:header:start
#
#   project      : Undent
#   file         : test_splitter.py
#   file_relpath : tests/pipeline/steps/test_splitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the `splitter` pipeline step."""

from __future__ import annotations

import pytest

from undent.config import Config
from undent.pipeline.context import FormatContext
from undent.pipeline.steps.splitter import SplitterStep, split_lines


@pytest.mark.parametrize(
    "text, newline, expected",
    [
        ("", "\n", [""]),
        ("a", "\n", ["a"]),
        ("\na\nb", "\n", ["a", "b"]),
        ("\n\na", "\n", ["", "a"]),
        ("a\n", "\n", ["a", ""]),
        ("a\r\nb", "\r\n", ["a", "b"]),
        ("a\nb", "\r\n", ["a\nb"]),
        ("||a||b", "||", ["a", "b"]),
        ("a|||b", "||", ["a", "|b"]),
        ("anything", "", ["anything"]),
    ],
)
def test_split_lines(text: str, newline: str, expected: list[str]) -> None:
    """One leading token is dropped; the rest is split literally and greedily."""
    assert split_lines(text, newline) == expected


def test_splitter_step_populates_lines() -> None:
    """The step stores the split lines on the context."""
    ctx = FormatContext.bootstrap(config=Config(), text="\n  x\n  y")
    step = SplitterStep()
    out = step(ctx)
    assert out is ctx
    assert ctx.lines == ["  x", "  y"]
    assert ctx.steps == [step]
