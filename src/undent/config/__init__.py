# topmark:header:start
#
#   project      : Undent
#   file         : __init__.py
#   file_relpath : src/undent/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public configuration surface for Undent.

Re-exports the immutable `Config` value and its `MutableConfig` builder.
"""

from __future__ import annotations

from undent.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
