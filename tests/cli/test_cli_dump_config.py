# topmark:header:start
#
#   project      : Undent
#   file         : test_cli_dump_config.py
#   file_relpath : tests/cli/test_cli_dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `undent dump-config`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def _parse(stdout: str) -> dict[str, Any]:
    return tomlkit.parse(stdout).unwrap()


def test_dump_defaults(tmp_path: Path) -> None:
    """Without configuration files the defaults are printed."""
    result = run_cli_in(tmp_path, ["dump-config"])
    assert_SUCCESS(result)
    assert "# source:" not in result.stdout
    assert _parse(result.stdout) == {
        "undent": {
            "indent": 0,
            "indent_char": " ",
            "newline": "\n",
            "template_value_start": "{{",
            "template_value_end": "}}",
        }
    }


def test_dump_layers_file_and_overrides(tmp_path: Path) -> None:
    """File values and CLI overrides both show up, CLI last."""
    (tmp_path / "undent.toml").write_text(
        '[undent]\nindent = 3\nnewline = "\\r\\n"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["dump-config", "--indent-char", "\t"])
    assert_SUCCESS(result)
    assert "# source: " in result.stdout
    table = _parse(result.stdout)["undent"]
    assert table["indent"] == 3
    assert table["newline"] == "\r\n"
    assert table["indent_char"] == "\t"


def test_dump_newline_escape_is_decoded(tmp_path: Path) -> None:
    """`--newline` escapes are decoded before they reach the config."""
    result = run_cli_in(tmp_path, ["dump-config", "--newline", "\\t"])
    assert_SUCCESS(result)
    assert _parse(result.stdout)["undent"]["newline"] == "\t"
