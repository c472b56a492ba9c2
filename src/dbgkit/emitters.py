# topmark:header:start
#
#   project      : DbgKit
#   file         : emitters.py
#   file_relpath : src/dbgkit/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unconditional severity emitters.

Each function renders ``fmt % args`` in its severity's color and emits it on the
severity's stream. `echo` adds no color at all.
"""

from __future__ import annotations

from typing import Any

from dbgkit.config.runtime import get_config
from dbgkit.core.formatter import CheckArgs, format_message
from dbgkit.core.sink import emit
from dbgkit.core.streams import Stream
from dbgkit.rendering.palette import Banner, Palette, Severity


def say(severity: Severity, fmt: str, *args: Any) -> None:
    """Emit ``fmt % args`` with `severity`.

    Args:
        severity (Severity): Severity selecting color and stream.
        fmt (str): printf-style format string.
        *args (Any): Format arguments.
    """
    emit(severity.stream, format_message(severity, CheckArgs(fmt=fmt, values=args)))


def echo(fmt: str, *args: Any) -> None:
    """Emit plain text."""
    say(Severity.ECHO, fmt, *args)


def note(fmt: str, *args: Any) -> None:
    """Emit blue text."""
    say(Severity.NOTE, fmt, *args)


def info(fmt: str, *args: Any) -> None:
    """Emit green text."""
    say(Severity.INFO, fmt, *args)


def message(fmt: str, *args: Any) -> None:
    """Emit cyan text."""
    say(Severity.MESSAGE, fmt, *args)


def status(fmt: str, *args: Any) -> None:
    """Emit gray text."""
    say(Severity.STATUS, fmt, *args)


def warning(fmt: str, *args: Any) -> None:
    """Emit orange text."""
    say(Severity.WARNING, fmt, *args)


def caution(fmt: str, *args: Any) -> None:
    """Emit bright yellow text."""
    say(Severity.CAUTION, fmt, *args)


def failed(fmt: str, *args: Any) -> None:
    """Emit magenta text to the error stream."""
    say(Severity.FAILED, fmt, *args)


def error(fmt: str, *args: Any) -> None:
    """Emit red text to the error stream."""
    say(Severity.ERROR, fmt, *args)


def danger(fmt: str, *args: Any) -> None:
    """Emit bold white-on-red text to the error stream."""
    say(Severity.DANGER, fmt, *args)


# --- Banners -----------------------------------------------------------------


def banner(kind: Banner, fmt: str, *args: Any) -> None:
    """Emit ``<label> fmt % args`` where the label is an inverse-colored block.

    Args:
        kind (Banner): Which label block to show.
        fmt (str): printf-style format string.
        *args (Any): Format arguments.
    """
    pal: Palette = get_config().palette
    text: str = fmt % args if args else fmt
    emit(Stream.PRIMARY, f"{pal.banner(kind)} {text}\n")


def banner_warning(fmt: str, *args: Any) -> None:
    """Emit a message behind a black-on-orange ``WARNING`` block."""
    banner(Banner.WARNING, fmt, *args)


def banner_caution(fmt: str, *args: Any) -> None:
    """Emit a message behind a black-on-yellow ``CAUTION`` block."""
    banner(Banner.CAUTION, fmt, *args)


def banner_error(fmt: str, *args: Any) -> None:
    """Emit a message behind a white-on-red ``ERROR`` block."""
    banner(Banner.ERROR, fmt, *args)


def banner_fault(fmt: str, *args: Any) -> None:
    """Emit a message behind a black-on-magenta ``FAULT`` block."""
    banner(Banner.FAULT, fmt, *args)
