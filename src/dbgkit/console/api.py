# topmark:header:start
#
#   project      : DbgKit
#   file         : api.py
#   file_relpath : src/dbgkit/console/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for emitted text.

This protocol is the only surface the emission sink writes to. Replacing the
active console (see `dbgkit.config.runtime.set_console`) redirects every
emission of the library at once.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console receiving DbgKit emissions.

    Text handed to a console is fully rendered: color sequences (if any) are
    already applied and the trailing newline is part of the text, so the sink
    calls both methods with ``nl=False``.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write text to the primary stream."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write text to the error stream."""
        ...
