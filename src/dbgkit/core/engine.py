# topmark:header:start
#
#   project      : DbgKit
#   file         : engine.py
#   file_relpath : src/dbgkit/core/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared building blocks of the check engine.

The public check functions, the gates and the trace helpers all funnel through
these helpers, so the emitted line layout and the call-site lookup exist once.

Skip counts passed here follow `dbgkit.core.frames.locate`: they count the
frames between the helper and the user's call, i.e. ``skip=1`` from a public
function means "report whoever called me".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NoReturn

from dbgkit.config.runtime import get_config
from dbgkit.core.errors import PanicError
from dbgkit.core.frames import locate
from dbgkit.core.sink import emit, terminate
from dbgkit.core.streams import Stream
from dbgkit.rendering.palette import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dbgkit.core.frames import CallSite
    from dbgkit.rendering.palette import Palette

CHECK_TAG: Final[str] = "CHK"
ERROR_TAG: Final[str] = "ERR"


def report(severity: Severity, tag: str, text: str, *, skip: int) -> None:
    """Emit a call-site-tagged failure line to the error stream.

    The layout is ``<tag> @ <line> in <file>  <text>``, where the tag and the
    location are colored with `severity` and the text is plain. Without frame
    information the location part is omitted.

    Args:
        severity (Severity): Severity coloring the tag.
        tag (str): Short tag, `CHECK_TAG` or `ERROR_TAG`.
        text (str): Rendered message text.
        skip (int): Frames between this helper and the reported call site.
    """
    site: CallSite | None = locate(skip + 1)
    where: str = f"{site.tag()}  " if site else ""
    pal: Palette = get_config().palette
    emit(Stream.ERROR, f"{pal.prefix(severity)}{tag} {where}{pal.suffix(severity)}{text}\n")


def escalate(text: str) -> NoReturn:
    """Raise `PanicError` carrying `text` (never a location tag)."""
    raise PanicError(text)


def report_fatal(text: str) -> NoReturn:
    """Emit `text` in danger colors to the error stream, then terminate."""
    emit(Stream.ERROR, get_config().palette.wrap(Severity.DANGER, text) + "\n")
    terminate("fatal")


def report_and_terminate(severity: Severity, tag: str, text: str, *, skip: int) -> NoReturn:
    """`report` a failure, then terminate the process.

    Args:
        severity (Severity): Severity coloring the tag.
        tag (str): Short tag.
        text (str): Rendered message text.
        skip (int): Frames between this helper and the reported call site.
    """
    report(severity, tag, text, skip=skip + 1)
    terminate(f"{tag.lower()} failed")


def is_ignored(err: BaseException, ignore: Iterable[BaseException]) -> bool:
    """Return True if `err` matches (by identity or equality) an entry of `ignore`."""
    return any(err is candidate or err == candidate for candidate in ignore)
