# topmark:header:start
#
#   project      : DbgKit
#   file         : trace.py
#   file_relpath : src/dbgkit/trace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-site tracing helpers.

``trace_here()`` answers "I am here", ``trace_from()`` answers "I was called
from there". Both accept the trace arguments:

- nothing: only the location is printed,
- ``fmt, *values``: formatted text (message color),
- ``err``: the error's text (error color),
- ``None``: the literal ``nil`` (info color), for "the error I got was absent".
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any, Final

from dbgkit.core.formatter import parse_check_args, render_trace_text
from dbgkit.core.frames import locate
from dbgkit.core.sink import emit
from dbgkit.core.streams import Stream
from dbgkit.emitters import message, warning

if TYPE_CHECKING:
    from types import FrameType

    from dbgkit.core.frames import CallSite

HERE_TAG: Final[str] = "TRC"
FROM_TAG: Final[str] = "WAS"

#: Maximum number of frames `stack_trace` prints.
STACK_TRACE_DEPTH: Final[int] = 10


def emit_trace(tag: str, args: tuple[Any, ...], *, skip: int) -> None:
    """Emit ``<tag> @ <line> in <file> <trace text>`` to the primary stream.

    Args:
        tag (str): `HERE_TAG` or `FROM_TAG`.
        args (tuple[Any, ...]): Trace arguments.
        skip (int): Frames between this helper and the reported call site.
    """
    site: CallSite | None = locate(skip + 1)
    where: str = f"{tag} {site.tag()} " if site else ""
    emit(Stream.PRIMARY, where + render_trace_text(parse_check_args(args)) + "\n")


def trace_here(*args: Any) -> None:
    """Print the calling location followed by the trace arguments."""
    emit_trace(HERE_TAG, args, skip=1)


def trace_if(cond: bool, *args: Any) -> None:
    """`trace_here` only if `cond` is true."""
    if cond:
        emit_trace(HERE_TAG, args, skip=1)


def trace_from(*args: Any) -> None:
    """Print the location the *calling function* was called from."""
    emit_trace(FROM_TAG, args, skip=2)


def stack_trace() -> None:
    """Print up to ten frames of the current call stack, innermost first.

    The first line is ``Depth: <n>``; each frame follows as
    ``  Func: <module.qualname> - <line>   <directory>``. Printing stops at the
    first frame without line information.
    """
    frames: list[FrameType] = []
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and len(frames) < STACK_TRACE_DEPTH:
        frames.append(frame)
        frame = frame.f_back

    message("Depth: %d", len(frames))
    for frm in frames:
        if frm.f_lineno is None:
            break
        code = frm.f_code
        module: str = frm.f_globals.get("__name__", "?")
        qualname: str = getattr(code, "co_qualname", code.co_name)
        warning("  Func: %s.%s - %d   %s", module, qualname, frm.f_lineno, os.path.dirname(code.co_filename))
