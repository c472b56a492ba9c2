# topmark:header:start
#
#   project      : DbgKit
#   file         : sink.py
#   file_relpath : src/dbgkit/core/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emission sink: the single point where finished text leaves the library."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from dbgkit.config.logging import get_logger
from dbgkit.config.runtime import get_config
from dbgkit.core.exit_codes import ExitCode
from dbgkit.core.streams import Stream

if TYPE_CHECKING:
    from dbgkit.console.api import ConsoleLike

logger = get_logger(__name__)


def emit(stream: Stream, text: str) -> None:
    """Write fully rendered `text` to `stream` of the active console.

    Args:
        stream (Stream): Target stream class.
        text (str): Rendered text, including its trailing newline.
    """
    console: ConsoleLike = get_config().console
    if stream is Stream.ERROR:
        console.error(text, nl=False)
    else:
        console.print(text, nl=False)


def terminate(reason: str) -> NoReturn:
    """Hand control to the configured terminator with `ExitCode.FATAL`.

    Args:
        reason (str): Short description logged before terminating.
    """
    logger.debug("terminating process: %s", reason)
    get_config().terminator(ExitCode.FATAL)
    # A terminator must not return; a test double that does is a usage error.
    raise AssertionError("terminator returned")
