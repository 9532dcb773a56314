# topmark:header:start
#
#   project      : Undent
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Config` / `MutableConfig` and configuration file discovery."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

import pytest

from undent.config import Config, MutableConfig

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """The default configuration is flush, LF-delimited with `{{ }}` placeholders."""
    config = Config()
    assert config.indent == 0
    assert config.indent_char == " "
    assert config.newline == "\n"
    assert config.placeholder("k") == "{{k}}"
    assert config.padding == ""


def test_config_is_frozen() -> None:
    """`Config` rejects attribute assignment."""
    config = Config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.indent = 3  # type: ignore[misc]


def test_padding_and_placeholder() -> None:
    """Padding repeats the indent char; placeholders use the configured delimiters."""
    config = Config(indent=3, indent_char="\t", template_value_start="<", template_value_end=">")
    assert config.padding == "\t\t\t"
    assert config.placeholder("name") == "<name>"


def test_thaw_freeze_roundtrip() -> None:
    """Thawing and freezing yields an equal config."""
    config = Config(indent=2, indent_char=".", newline="\r\n")
    assert config.thaw().freeze() == config


def test_freeze_fills_unset_fields_with_defaults() -> None:
    """Fields never set by any layer fall back to the defaults."""
    assert MutableConfig(indent=5).freeze() == Config(indent=5)


def test_merge_with_prefers_values_set_in_other() -> None:
    """`merge_with` keeps ``self`` values where ``other`` left them unset."""
    base = MutableConfig.from_defaults()
    override = MutableConfig(indent=4, newline="\r\n")
    merged = base.merge_with(override)
    assert merged.indent == 4
    assert merged.newline == "\r\n"
    assert merged.indent_char == " "
    assert base.indent == 0


def test_apply_cli_args_ignores_none() -> None:
    """`None` CLI values leave the draft untouched."""
    draft = MutableConfig.from_defaults()
    out = draft.apply_cli_args({"indent": 2, "indent_char": None, "template_value_start": "<%"})
    assert out is draft
    assert draft.indent == 2
    assert draft.indent_char == " "
    assert draft.template_value_start == "<%"


def test_sanitize_repairs_bad_values(caplog: pytest.LogCaptureFixture) -> None:
    """Negative indents are clamped and multi-character indent chars are reset."""
    with caplog.at_level(logging.WARNING):
        config = MutableConfig(indent=-2, indent_char="ab").freeze()
    assert config.indent == 0
    assert config.indent_char == " "
    assert "Negative indent" in caplog.text
    assert "single character" in caplog.text


def test_sanitize_warns_on_degenerate_values(caplog: pytest.LogCaptureFixture) -> None:
    """Empty newline and delimiters are kept but reported."""
    with caplog.at_level(logging.WARNING):
        config = MutableConfig(newline="", template_value_start="").freeze()
    assert config.newline == ""
    assert config.template_value_start == ""
    assert "Empty newline" in caplog.text
    assert "Empty placeholder delimiter" in caplog.text


def test_to_toml_dict() -> None:
    """The TOML view lists every setting."""
    assert Config(indent=1).to_toml_dict() == {
        "indent": 1,
        "indent_char": " ",
        "newline": "\n",
        "template_value_start": "{{",
        "template_value_end": "}}",
    }


def test_from_toml_dict_skips_wrong_types_and_unknown_keys(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Wrongly typed and unknown keys are logged and ignored."""
    with caplog.at_level(logging.WARNING):
        draft = MutableConfig.from_toml_dict(
            {"indent": "four", "indent_char": ".", "colour": "red"}, source="test"
        )
    assert draft.indent is None
    assert draft.indent_char == "."
    assert "Expected integer for 'indent'" in caplog.text
    assert "Unknown configuration key 'colour' in test" in caplog.text


def test_from_toml_file_top_level_keys(tmp_path: Path) -> None:
    """`undent.toml` may place its keys at top level."""
    path = tmp_path / "undent.toml"
    path.write_text('indent = 2\nindent_char = "."\n', encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.indent == 2
    assert draft.indent_char == "."
    assert draft.config_files == [path]


def test_from_toml_file_undent_table(tmp_path: Path) -> None:
    """`undent.toml` may wrap its keys in an ``[undent]`` table."""
    path = tmp_path / "undent.toml"
    path.write_text('[undent]\nnewline = "\\r\\n"\n', encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.newline == "\r\n"


def test_from_toml_file_pyproject(tmp_path: Path) -> None:
    """`pyproject.toml` settings live under ``[tool.undent]``."""
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.undent]\nindent = 6\n',
        encoding="utf-8",
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.indent == 6


def test_from_toml_file_pyproject_without_table(tmp_path: Path) -> None:
    """A `pyproject.toml` without ``[tool.undent]`` yields no draft."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(path) is None


def test_discovery_prefers_undent_toml(tmp_path: Path) -> None:
    """`undent.toml` wins over a `pyproject.toml` in the same directory."""
    (tmp_path / "undent.toml").write_text("indent = 1\n", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[tool.undent]\nindent = 2\n", encoding="utf-8")
    assert MutableConfig.discover_local_config_file(tmp_path) == tmp_path / "undent.toml"


def test_discovery_skips_unrelated_pyproject(tmp_path: Path) -> None:
    """A `pyproject.toml` without an Undent table is not a config file."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.discover_local_config_file(tmp_path) is None


def test_load_merged_layers_local_and_explicit_files(tmp_path: Path) -> None:
    """Explicit files override the discovered file, which overrides defaults."""
    (tmp_path / "undent.toml").write_text('indent = 2\nindent_char = "."\n', encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text("indent = 8\n", encoding="utf-8")

    draft = MutableConfig.load_merged(cwd=tmp_path, extra_config_files=[extra])
    config = draft.freeze()
    assert config.indent == 8
    assert config.indent_char == "."
    assert draft.config_files == [tmp_path / "undent.toml", extra]


def test_load_merged_no_config_skips_discovery(tmp_path: Path) -> None:
    """With ``no_config`` the local file is ignored."""
    (tmp_path / "undent.toml").write_text("indent = 2\n", encoding="utf-8")
    draft = MutableConfig.load_merged(cwd=tmp_path, no_config=True)
    assert draft.freeze() == Config()
    assert draft.config_files == []


def test_load_merged_missing_explicit_file(tmp_path: Path) -> None:
    """A missing explicit file is an error."""
    with pytest.raises(FileNotFoundError):
        MutableConfig.load_merged(cwd=tmp_path, extra_config_files=[tmp_path / "nope.toml"])


def test_load_merged_unreadable_explicit_file(tmp_path: Path) -> None:
    """An explicit file that does not parse is an error."""
    bad = tmp_path / "bad.toml"
    bad.write_text("indent = = 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="No Undent configuration"):
        MutableConfig.load_merged(cwd=tmp_path, no_config=True, extra_config_files=[bad])
