# topmark:header:start
#
#   project      : DbgKit
#   file         : __init__.py
#   file_relpath : src/dbgkit/console/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console implementations that back the emission sink.

- `ClickConsole`: default; writes through `click.echo`.
- `StdConsole`: plain stream writes, handy for capturing into `io.StringIO`.
- `LoggingConsole`: forwards emissions into the `logging` module.
"""

from __future__ import annotations

from dbgkit.console.api import ConsoleLike
from dbgkit.console.click_console import ClickConsole
from dbgkit.console.logging_console import LoggingConsole
from dbgkit.console.std_console import StdConsole

__all__ = [
    "ClickConsole",
    "ConsoleLike",
    "LoggingConsole",
    "StdConsole",
]
