# topmark:header:start
#
#   project      : Undent
#   file         : __init__.py
#   file_relpath : src/undent/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent package.

Undent normalizes indented multiline string literals: it strips the common
indentation, honours the trailing ``|`` (keep trailing whitespace) and
trailing ``\\`` (join with the next line) markers, optionally re-indents the
result and substitutes ``{{key}}`` placeholders.

Examples:
    >>> import undent
    >>> undent.format('''
    ...     Hello,
    ...       World!
    ...     ''')
    'Hello,\\n  World!'
"""

from __future__ import annotations

from undent.api import format, format_with, format_with_values
from undent.config import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
    "format",
    "format_with",
    "format_with_values",
]
