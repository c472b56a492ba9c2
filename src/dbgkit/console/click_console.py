# topmark:header:start
#
#   project      : DbgKit
#   file         : click_console.py
#   file_relpath : src/dbgkit/console/click_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based console, the default emission target."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from dbgkit.console.api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Args:
        out (TextIO | None): Stream for primary output. When `None`, the current
            `sys.stdout` is looked up on every write.
        err (TextIO | None): Stream for error output. When `None`, the current
            `sys.stderr` is looked up on every write.

    Notes:
        Colors are decided by the active palette, so Click is told never to strip
        escape sequences (``color=True``); a plain palette simply emits none.
    """

    def __init__(self, *, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        """Return the primary stream."""
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        """Return the error stream."""
        return self._err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to the primary stream.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=True)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a message to the error stream.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=True)
