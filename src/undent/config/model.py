# topmark:header:start
#
#   project      : Undent
#   file         : model.py
#   file_relpath : src/undent/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable value read by every pipeline step.
    - `MutableConfig`: a mutable builder used while layering TOML files and
      CLI flags; it can be frozen into `Config` and thawed back for edits.

Immutability:
    - `Config` is ``frozen=True``. No pipeline step mutates it; use
      `Config.thaw` → edit → `MutableConfig.freeze` for safe updates.

Validation:
    - `Config` itself is not validated. Degenerate values (empty newline,
      empty delimiters) produce defined but unspecified output.
    - `MutableConfig.sanitize` repairs values coming from TOML or the CLI and
      logs a warning for each repair.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypedDict

from undent.config.io import (
    extract_undent_table,
    get_int_value_or_none,
    get_string_value_or_none,
    is_pyproject_path,
    load_toml_dict,
    warn_unknown_keys,
)
from undent.config.keys import Toml
from undent.config.logging import get_logger
from undent.constants import (
    DEFAULT_INDENT,
    DEFAULT_INDENT_CHAR,
    DEFAULT_NEWLINE,
    DEFAULT_TEMPLATE_VALUE_END,
    DEFAULT_TEMPLATE_VALUE_START,
    PYPROJECT_TOML_NAME,
    UNDENT_TOML_NAME,
)

if TYPE_CHECKING:
    from undent.config.io import TomlTable
    from undent.config.logging import UndentLogger

logger: UndentLogger = get_logger(__name__)


class ArgsLike(TypedDict, total=False):
    """CLI overrides accepted by `MutableConfig.apply_cli_args`.

    Keys left out (or set to ``None``) keep the current value.
    """

    indent: int | None
    indent_char: str | None
    newline: str | None
    template_value_start: str | None
    template_value_end: str | None


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable formatting configuration.

    Attributes:
        indent (int): Number of ``indent_char`` units prepended to the output and
            to every line that follows an inserted newline.
        indent_char (str): Character used to render ``indent``.
        newline (str): Token that delimits input lines and is inserted between
            output lines.
        template_value_start (str): Opening placeholder delimiter.
        template_value_end (str): Closing placeholder delimiter.
    """

    indent: int = DEFAULT_INDENT
    indent_char: str = DEFAULT_INDENT_CHAR
    newline: str = DEFAULT_NEWLINE
    template_value_start: str = DEFAULT_TEMPLATE_VALUE_START
    template_value_end: str = DEFAULT_TEMPLATE_VALUE_END

    @property
    def padding(self) -> str:
        """Return the rendered indentation prefix (``indent_char * indent``)."""
        return self.indent_char * self.indent

    def placeholder(self, key: str) -> str:
        """Return the delimited placeholder token for ``key``."""
        return f"{self.template_value_start}{key}{self.template_value_end}"

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a plain TOML-ready mapping."""
        return {
            Toml.INDENT: self.indent,
            Toml.INDENT_CHAR: self.indent_char,
            Toml.NEWLINE: self.newline,
            Toml.TEMPLATE_VALUE_START: self.template_value_start,
            Toml.TEMPLATE_VALUE_END: self.template_value_end,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            indent=self.indent,
            indent_char=self.indent_char,
            newline=self.newline,
            template_value_start=self.template_value_start,
            template_value_end=self.template_value_end,
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left at ``None`` have not been set by any layer and fall back to
    the defaults on `freeze`. This lets `merge_with` distinguish "set to the
    default value" from "not set".

    Attributes:
        indent (int | None): Indentation unit count.
        indent_char (str | None): Indentation character.
        newline (str | None): Line delimiter.
        template_value_start (str | None): Opening placeholder delimiter.
        template_value_end (str | None): Closing placeholder delimiter.
        config_files (list[Path]): Files that contributed to this draft, in load order.
    """

    indent: int | None = None
    indent_char: str | None = None
    newline: str | None = None
    template_value_start: str | None = None
    template_value_end: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Sanitize and return an immutable `Config` snapshot."""
        self.sanitize()
        return Config(
            indent=DEFAULT_INDENT if self.indent is None else self.indent,
            indent_char=DEFAULT_INDENT_CHAR if self.indent_char is None else self.indent_char,
            newline=DEFAULT_NEWLINE if self.newline is None else self.newline,
            template_value_start=(
                DEFAULT_TEMPLATE_VALUE_START
                if self.template_value_start is None
                else self.template_value_start
            ),
            template_value_end=(
                DEFAULT_TEMPLATE_VALUE_END
                if self.template_value_end is None
                else self.template_value_end
            ),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        return cls(
            indent=DEFAULT_INDENT,
            indent_char=DEFAULT_INDENT_CHAR,
            newline=DEFAULT_NEWLINE,
            template_value_start=DEFAULT_TEMPLATE_VALUE_START,
            template_value_end=DEFAULT_TEMPLATE_VALUE_END,
        )

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: str = "<toml>") -> MutableConfig:
        """Build a draft from an Undent settings table.

        Wrongly typed values are logged and left unset; unknown keys are logged
        and ignored.

        Args:
            table (TomlTable): The ``[undent]`` / ``[tool.undent]`` table contents.
            source (str): Human-readable origin used in log messages.

        Returns:
            MutableConfig: A draft holding only the keys present in ``table``.
        """
        warn_unknown_keys(table, source=source)
        return cls(
            indent=get_int_value_or_none(table, Toml.INDENT),
            indent_char=get_string_value_or_none(table, Toml.INDENT_CHAR),
            newline=get_string_value_or_none(table, Toml.NEWLINE),
            template_value_start=get_string_value_or_none(table, Toml.TEMPLATE_VALUE_START),
            template_value_end=get_string_value_or_none(table, Toml.TEMPLATE_VALUE_END),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``undent.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Configuration file path.

        Returns:
            MutableConfig | None: The loaded draft, or ``None`` when the file could
                not be parsed or holds no Undent table.
        """
        data: TomlTable = load_toml_dict(path)
        if not data:
            logger.debug("No TOML content loaded from %s", path)
            return None

        table: TomlTable | None = extract_undent_table(data, is_pyproject=is_pyproject_path(path))
        if table is None:
            logger.debug("No Undent table found in %s", path)
            return None

        draft: MutableConfig = cls.from_toml_dict(table, source=str(path))
        draft.config_files.append(path)
        logger.info("Loaded configuration from %s", path)
        return draft

    @classmethod
    def discover_local_config_file(cls, start: Path) -> Path | None:
        """Return the configuration file to use for directory ``start``.

        ``undent.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
        counts when it holds a ``[tool.undent]`` table.

        Args:
            start (Path): Directory to inspect (not searched upwards).

        Returns:
            Path | None: The discovered file, or ``None``.
        """
        candidate: Path = start / UNDENT_TOML_NAME
        if candidate.is_file():
            return candidate

        pyproject: Path = start / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            data: TomlTable = load_toml_dict(pyproject)
            if extract_undent_table(data, is_pyproject=True) is not None:
                return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Layer defaults, the discovered local file and explicit files.

        Args:
            cwd (Path | None): Directory used for discovery (default: ``Path.cwd()``).
            extra_config_files (list[Path] | None): Explicit files merged last, in order.
            no_config (bool): Skip discovery of a local configuration file.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            FileNotFoundError: If an explicit configuration file does not exist.
            ValueError: If an explicit configuration file cannot be parsed or holds
                no Undent table.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            local: Path | None = cls.discover_local_config_file(cwd or Path.cwd())
            if local is not None:
                loaded: MutableConfig | None = cls.from_toml_file(local)
                if loaded is not None:
                    draft = draft.merge_with(loaded)

        for path in extra_config_files or []:
            if not path.is_file():
                raise FileNotFoundError(path)
            explicit: MutableConfig | None = cls.from_toml_file(path)
            if explicit is None:
                raise ValueError(f"No Undent configuration could be read from {path}")
            draft = draft.merge_with(explicit)

        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override ``self``.

        Args:
            other (MutableConfig): Higher-precedence draft.

        Returns:
            MutableConfig: The merged draft.
        """

        def _pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableConfig(
            indent=_pick(self.indent, other.indent),
            indent_char=_pick(self.indent_char, other.indent_char),
            newline=_pick(self.newline, other.newline),
            template_value_start=_pick(self.template_value_start, other.template_value_start),
            template_value_end=_pick(self.template_value_end, other.template_value_end),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place.

        Args:
            args (ArgsLike): Parsed CLI values; ``None`` entries are ignored.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if args.get("indent") is not None:
            self.indent = args["indent"]
        if args.get("indent_char") is not None:
            self.indent_char = args["indent_char"]
        if args.get("newline") is not None:
            self.newline = args["newline"]
        if args.get("template_value_start") is not None:
            self.template_value_start = args["template_value_start"]
        if args.get("template_value_end") is not None:
            self.template_value_end = args["template_value_end"]
        return self

    def sanitize(self) -> None:
        """Repair values that would make the output surprising, logging each repair."""
        if self.indent is not None and self.indent < 0:
            logger.warning("Negative indent %d clamped to 0", self.indent)
            self.indent = 0
        if self.indent_char is not None and len(self.indent_char) != 1:
            logger.warning(
                "indent_char must be a single character (got %r); using %r",
                self.indent_char,
                DEFAULT_INDENT_CHAR,
            )
            self.indent_char = DEFAULT_INDENT_CHAR
        if self.newline == "":
            logger.warning("Empty newline: input will not be split into lines")
        if self.template_value_start == "" or self.template_value_end == "":
            logger.warning("Empty placeholder delimiter: keys will be replaced as bare text")
