# topmark:header:start
#
#   project      : DbgKit
#   file         : __main__.py
#   file_relpath : src/dbgkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DbgKit via ``python -m dbgkit``.

Examples:
    Show every emitter and check::

        python -m dbgkit demo
"""

from __future__ import annotations

from dbgkit.cli.main import cli

if __name__ == "__main__":
    cli()
