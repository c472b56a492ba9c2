# topmark:header:start
#
#   project      : DbgKit
#   file         : std_console.py
#   file_relpath : src/dbgkit/console/std_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stdlib-based console implementation (no Click)."""

from __future__ import annotations

import sys
from typing import TextIO

from dbgkit.console.api import ConsoleLike


class StdConsole(ConsoleLike):
    """Simple console writing straight to text streams.

    Args:
        out (TextIO | None): Stream for primary output. Defaults to sys.stdout.
        err (TextIO | None): Stream for error output. Defaults to sys.stderr.
    """

    def __init__(self, *, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to the primary stream."""
        self.out.write(text + ("\n" if nl else ""))

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a message to the error stream."""
        self.err.write(text + ("\n" if nl else ""))
