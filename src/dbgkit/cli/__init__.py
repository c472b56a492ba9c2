# topmark:header:start
#
#   project      : DbgKit
#   file         : __init__.py
#   file_relpath : src/dbgkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        dbgkit = "dbgkit.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
