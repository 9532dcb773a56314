# topmark:header:start
#
#   project      : Undent
#   file         : test_cli_cmd_common.py
#   file_relpath : tests/cli/test_cli_cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the option-value helpers shared by CLI commands."""

from __future__ import annotations

import pytest

from undent.cli.cmd_common import decode_escapes, parse_values
from undent.cli.errors import UndentUsageError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("\\n", "\n"),
        ("\\r\\n", "\r\n"),
        ("\\t", "\t"),
        ("\\\\", "\\"),
        ("<br>", "<br>"),
        ("¶", "¶"),
        ("→\\n", "→\n"),
        ("\t", "\t"),
    ],
)
def test_decode_escapes(raw: str, expected: str) -> None:
    """Backslash sequences are decoded; other characters are kept as typed."""
    assert decode_escapes(raw, option="--newline") == expected


def test_decode_escapes_rejects_dangling_backslash() -> None:
    """A lone trailing backslash is a usage error naming the option."""
    with pytest.raises(UndentUsageError, match="--indent-char"):
        decode_escapes("\\", option="--indent-char")


def test_parse_values_keeps_order_and_splits_on_first_equals() -> None:
    """Pairs keep command-line order; values may contain ``=``."""
    assert parse_values(["b=2", "a=x=y", "c="]) == [("b", "2"), ("a", "x=y"), ("c", "")]
