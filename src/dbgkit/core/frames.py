# topmark:header:start
#
#   project      : DbgKit
#   file         : frames.py
#   file_relpath : src/dbgkit/core/frames.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frame locator: resolve "who called me" by walking the interpreter stack.

All functions here take (or imply) a *skip* count measured from the caller of
the function itself, in the spirit of the ``stacklevel`` argument of the
`logging` and `warnings` modules:

- ``locate(0)`` describes the function that called `locate`,
- ``locate(1)`` describes *its* caller, and so on.

Every wrapper layer between user code and `locate` must add exactly one to the
skip count it passes down. Call sites are resolved on every call and never
cached.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import FrameType


@dataclass(frozen=True)
class CallSite:
    """A resolved source location.

    Attributes:
        file (str): Shortened source path (last two path segments).
        line (int): Line number.
        function (str): Bare function name (namespace prefix removed).
    """

    file: str
    line: int
    function: str

    def tag(self) -> str:
        """Return the ``"@ <line> in <file>"`` form used in emitted messages."""
        return f"@ {self.line} in {self.file}"


def short_name(path: str) -> str:
    """Return `path` reduced to its last two segments.

    Scans the path once from the start, remembering the position after the
    second-to-last separator. Both ``/`` and ``\\`` count as separators.

    Args:
        path (str): Full source path.

    Returns:
        str: E.g. ``"pkg/module.py"`` for ``"/src/pkg/module.py"``.
    """
    prev, last = 0, 0
    for i, ch in enumerate(path):
        if ch in "/\\":
            prev = last
            last = i + 1
    return path[prev:]


def short_func_name(name: str) -> str:
    """Return `name` without any dotted package/class prefix."""
    return name[name.rfind(".") + 1 :]


def _frame(skip: int) -> FrameType | None:
    # +2: this helper and its direct caller inside this module
    try:
        return sys._getframe(skip + 2)
    except ValueError:
        return None


def _site(frame: FrameType | None) -> CallSite | None:
    if frame is None or frame.f_lineno is None:
        return None
    code = frame.f_code
    return CallSite(
        file=short_name(code.co_filename),
        line=frame.f_lineno,
        function=short_func_name(getattr(code, "co_qualname", code.co_name)),
    )


def locate(skip: int = 0) -> CallSite | None:
    """Return the call site `skip` frames above the caller of `locate`.

    Args:
        skip (int): Number of frames to skip; 0 is the immediate caller.

    Returns:
        CallSite | None: The resolved site, or `None` when the stack is not that
            deep or the frame carries no line information.
    """
    return _site(_frame(skip))


# --- Location helpers --------------------------------------------------------


def i_am() -> str:
    """Return the name of the calling function."""
    site: CallSite | None = _site(_frame(0))
    return site.function if site else ""


def i_was() -> str:
    """Return the name of the function that called the calling function."""
    site: CallSite | None = _site(_frame(1))
    return site.function if site else ""


def im_at() -> str:
    """Return ``"@ <line> in <file>"`` for the calling line."""
    site: CallSite | None = _site(_frame(0))
    return site.tag() if site else ""


def was_at() -> str:
    """Return ``"@ <line> in <file>"`` for the line that called the calling function."""
    site: CallSite | None = _site(_frame(1))
    return site.tag() if site else ""


def err_at() -> tuple[str, int]:
    """Return ``(file, line)`` of the calling line, or ``("", 0)``."""
    site: CallSite | None = _site(_frame(0))
    return (site.file, site.line) if site else ("", 0)


def err_was_at() -> tuple[str, int]:
    """Return ``(file, line)`` of the caller's caller, or ``("", 0)``."""
    site: CallSite | None = _site(_frame(1))
    return (site.file, site.line) if site else ("", 0)
