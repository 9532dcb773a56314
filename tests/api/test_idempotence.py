# topmark:header:start
#
#   project      : Undent
#   file         : test_idempotence.py
#   file_relpath : tests/api/test_idempotence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting is applied once: re-running it on its own output may change the text.

These tests document that a second pass is *not* a no-op in general, and pin
the cases where it happens to be one.
"""

from __future__ import annotations

from undent import Config, format, format_with


def test_second_pass_adds_indentation_again() -> None:
    """Non-whitespace padding is not recognized as indentation on the next pass."""
    cfg = Config(indent=2, indent_char=".")
    once = format_with(cfg, "a\nb")
    assert once == "..a\n..b"
    assert format_with(cfg, once) == "....a\n....b"


def test_second_pass_drops_preserved_trailing_whitespace() -> None:
    """Whitespace kept by ``|`` is trimmed on the next pass, the marker being gone."""
    once = format("\n    kept   |\n    ")
    assert once == "kept   "
    assert format(once) == "kept"


def test_second_pass_consumes_a_leading_empty_line() -> None:
    """A leading newline kept by the first pass is absorbed by the second."""
    once = format("\n\n\nx")
    assert once == "\nx"
    assert format(once) == "x"


def test_second_pass_on_flush_text_is_stable() -> None:
    """Already-flush text without markers is a fixed point of the default configuration."""
    once = format("\n    alpha\n      beta\n    ")
    assert format(once) == once
