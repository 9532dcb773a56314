# topmark:header:start
#
#   project      : Undent
#   file         : __main__.py
#   file_relpath : src/undent/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Undent via ``python -m undent``.

Delegates to [`undent.cli.main.cli`][], the same entry point used by the
``undent`` console script.

Examples:
    Dedent a file::

        python -m undent format snippet.txt
"""

from __future__ import annotations

from undent.cli.main import cli

if __name__ == "__main__":
    cli()
