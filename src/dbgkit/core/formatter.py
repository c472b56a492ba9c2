# topmark:header:start
#
#   project      : DbgKit
#   file         : formatter.py
#   file_relpath : src/dbgkit/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message formatting and the closer protocol.

Public functions accept a loose positional tail (``*args``). It is turned into a
`CheckArgs` exactly once, at the API boundary, by `parse_check_args`:

=====================================  ===========================================
positional tail                        rendered text
=====================================  ===========================================
*(empty)*                              ``"Check failed"``
``fmt, *values``                       ``fmt % values`` (``fmt`` as is if no values)
``err``                                ``str(err)``
``err, fmt, *values``                  ``str(err) + fmt % values`` (no separator)
=====================================  ===========================================

The closer is never part of the positional tail; terminating variants take it as
the keyword-only ``closer=`` argument and `take_closer` splits it off.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Final

from dbgkit.config.runtime import get_config
from dbgkit.rendering.palette import Severity

if TYPE_CHECKING:
    from collections.abc import Callable

    from dbgkit.rendering.palette import Palette

    Closer = Callable[[], None]

DEFAULT_CHECK_TEXT: Final[str] = "Check failed"
NIL_TEXT: Final[str] = "nil"


@dataclass(frozen=True)
class CheckArgs:
    """Tagged form of a check call's message arguments.

    At most one of `fmt` / `error` drives the text; both are set for the
    "error plus extra context" composition.

    Attributes:
        fmt (str | None): printf-style format string.
        values (tuple[Any, ...]): Arguments substituted into `fmt`.
        error (BaseException | None): Error value whose text leads the message.
        closer (Closer | None): Zero-argument callback run before termination.
        explicit_none (bool): The tail was a single explicit `None` (an absent error).
    """

    fmt: str | None = None
    values: tuple[Any, ...] = ()
    error: BaseException | None = None
    closer: Closer | None = None
    explicit_none: bool = False

    @property
    def empty(self) -> bool:
        """Return True if no message content was supplied."""
        return self.fmt is None and self.error is None and not self.explicit_none


def parse_check_args(args: tuple[Any, ...], closer: Closer | None = None) -> CheckArgs:
    """Build a `CheckArgs` from a positional tail and an optional closer.

    Args:
        args (tuple[Any, ...]): Positional message arguments (see module docstring).
        closer (Closer | None): Optional zero-argument callback.

    Returns:
        CheckArgs: The tagged arguments.

    Raises:
        TypeError: If `closer` is given but not callable.
    """
    if closer is not None and not callable(closer):
        raise TypeError(f"closer must be a zero-argument callable, not {type(closer).__name__}")
    if not args:
        return CheckArgs(closer=closer)
    head: Any = args[0]
    if isinstance(head, str):
        return CheckArgs(fmt=head, values=tuple(args[1:]), closer=closer)
    if isinstance(head, BaseException):
        if len(args) > 1 and isinstance(args[1], str):
            return CheckArgs(fmt=args[1], values=tuple(args[2:]), error=head, closer=closer)
        return CheckArgs(error=head, closer=closer)
    if head is None and len(args) == 1:
        return CheckArgs(explicit_none=True, closer=closer)
    # Unrecognized leading value: fall back to the default text.
    return CheckArgs(closer=closer)


def take_closer(check_args: CheckArgs) -> tuple[CheckArgs, Closer | None]:
    """Split the closer off `check_args`.

    Returns:
        tuple[CheckArgs, Closer | None]: The arguments without a closer, and the closer.
    """
    if check_args.closer is None:
        return check_args, None
    return replace(check_args, closer=None), check_args.closer


def run_closer(check_args: CheckArgs) -> CheckArgs:
    """Invoke the closer of `check_args` (if any) exactly once and strip it.

    Returns:
        CheckArgs: The arguments without a closer.
    """
    remaining, closer = take_closer(check_args)
    if closer is not None:
        closer()
    return remaining


def error_text(err: BaseException) -> str:
    """Return the display text of an error value."""
    return str(err) or type(err).__name__


def _substitute(fmt: str, values: tuple[Any, ...]) -> str:
    return fmt % values if values else fmt


def render_text(check_args: CheckArgs) -> str:
    """Render the plain (uncolored) text of `check_args`.

    Returns:
        str: The message text, ``"Check failed"`` when nothing was supplied.
    """
    if check_args.error is not None:
        text: str = error_text(check_args.error)
        if check_args.fmt is not None:
            text += _substitute(check_args.fmt, check_args.values)
        return text
    if check_args.fmt is not None:
        return _substitute(check_args.fmt, check_args.values)
    return DEFAULT_CHECK_TEXT


def render_error_text(err: BaseException, check_args: CheckArgs) -> str:
    """Render the text for a failed error check.

    Explicit message arguments win; without any, the error's own text is used
    instead of the generic default.

    Args:
        err (BaseException): The error that failed the check.
        check_args (CheckArgs): The caller's message arguments.

    Returns:
        str: The message text.
    """
    if check_args.empty:
        return error_text(err)
    return render_text(check_args)


def format_message(severity: Severity, check_args: CheckArgs, palette: Palette | None = None) -> str:
    """Return `check_args` rendered, wrapped in the color of `severity`, newline-terminated.

    Args:
        severity (Severity): Severity whose color applies.
        check_args (CheckArgs): Message arguments.
        palette (Palette | None): Palette to use; defaults to the active one.

    Returns:
        str: The final emission text.
    """
    pal: Palette = palette or get_config().palette
    return pal.wrap(severity, render_text(check_args)) + "\n"


def render_trace_text(check_args: CheckArgs, palette: Palette | None = None) -> str:
    """Render trace arguments: format string, bare error, or an explicit ``nil``.

    Returns:
        str: Colored text; empty when no arguments were given.
    """
    pal: Palette = palette or get_config().palette
    if check_args.error is not None and check_args.fmt is None:
        return pal.wrap(Severity.ERROR, error_text(check_args.error))
    if check_args.fmt is not None or check_args.error is not None:
        return pal.wrap(Severity.MESSAGE, render_text(check_args))
    if check_args.explicit_none:
        return pal.wrap(Severity.INFO, NIL_TEXT)
    return ""
