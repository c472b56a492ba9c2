# topmark:header:start
#
#   project      : DbgKit
#   file         : logging_console.py
#   file_relpath : src/dbgkit/console/logging_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console that forwards emissions into the `logging` module.

Install it to route all DbgKit output through an application's logging setup:

```python
from dbgkit import set_console
from dbgkit.console import LoggingConsole

set_console(LoggingConsole("myapp.debug"))
```
"""

from __future__ import annotations

import logging

import click

from dbgkit.console.api import ConsoleLike


class LoggingConsole(ConsoleLike):
    """Console logging primary text at INFO and error text at ERROR.

    Escape sequences are removed and the trailing newline is dropped, since log
    handlers apply their own formatting.

    Args:
        name (str): Name of the logger receiving the records.
        level (int): Level used for primary-stream text.
        error_level (int): Level used for error-stream text.
    """

    def __init__(
        self,
        name: str = "dbgkit.output",
        *,
        level: int = logging.INFO,
        error_level: int = logging.ERROR,
    ) -> None:
        self.logger = logging.getLogger(name)
        self.level = level
        self.error_level = error_level

    def _log(self, level: int, text: str) -> None:
        plain: str = click.unstyle(text).rstrip("\n")
        if plain:
            # Emission text may contain '%' once rendered; never re-format it.
            self.logger.log(level, "%s", plain)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Log primary-stream text."""
        self._log(self.level, text)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Log error-stream text."""
        self._log(self.error_level, text)
