# topmark:header:start
#
#   project      : Undent
#   file         : __init__.py
#   file_relpath : src/undent/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Undent command-line interface (Click)."""
