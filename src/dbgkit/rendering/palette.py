# topmark:header:start
#
#   project      : DbgKit
#   file         : palette.py
#   file_relpath : src/dbgkit/rendering/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity tags and the color tables used to render them.

A `Palette` maps every `Severity` (and every `Banner`) to the escape sequence that
opens its style, plus the sequence that resets it. Exactly two palettes exist:
`ANSI_PALETTE` and `PLAIN_PALETTE` (all empty strings). Toggling color swaps the
active palette as a whole, so the tags can never be partially remapped.

The ANSI sequences are produced by `click.style`, the same styling primitive the
consoles use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

import click

from dbgkit.core.streams import Stream

if TYPE_CHECKING:
    from collections.abc import Mapping


class Severity(str, Enum):
    """Named category of a message; controls its color and its output stream."""

    ECHO = "echo"
    NOTE = "note"
    INFO = "info"
    MESSAGE = "message"
    STATUS = "status"
    WARNING = "warning"
    CAUTION = "caution"
    FAILED = "failed"
    ERROR = "error"
    DANGER = "danger"

    @property
    def stream(self) -> Stream:
        """Return the stream this severity is routed to.

        Returns:
            Stream: `Stream.ERROR` for the failure class (failed, error, danger),
                `Stream.PRIMARY` otherwise.
        """
        if self in (Severity.FAILED, Severity.ERROR, Severity.DANGER):
            return Stream.ERROR
        return Stream.PRIMARY


class Banner(str, Enum):
    """Inverse-colored label blocks that prefix a message."""

    WARNING = " WARNING "
    CAUTION = " CAUTION "
    ERROR = "  ERROR  "
    FAULT = "  FAULT  "

    @property
    def label(self) -> str:
        """Return the padded label text."""
        return self.value


def _code(**style: Any) -> str:
    """Return the opening escape sequence for a click style."""
    return click.style("", reset=False, **style)


@dataclass(frozen=True)
class Palette:
    """Immutable color table.

    The mappings are wrapped in read-only proxies on construction, so a palette
    cannot be edited in place once created.

    Attributes:
        reset (str): Sequence that returns the terminal to normal text.
        codes (Mapping[Severity, str]): Opening sequence per severity.
        banners (Mapping[Banner, str]): Opening sequence per banner label.
    """

    reset: str
    codes: Mapping[Severity, str] = field(default_factory=dict)
    banners: Mapping[Banner, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", MappingProxyType(dict(self.codes)))
        object.__setattr__(self, "banners", MappingProxyType(dict(self.banners)))

    def prefix(self, severity: Severity) -> str:
        """Return the opening sequence for `severity` (empty if uncolored)."""
        return self.codes.get(severity, "")

    def suffix(self, severity: Severity) -> str:
        """Return the closing sequence for `severity` (empty if uncolored)."""
        return self.reset if self.prefix(severity) else ""

    def wrap(self, severity: Severity, text: str) -> str:
        """Wrap `text` in the color of `severity`.

        Args:
            severity (Severity): The severity whose color applies.
            text (str): The text to wrap.

        Returns:
            str: ``prefix + text + reset``, or `text` unchanged if the severity
                has no color in this palette.
        """
        return f"{self.prefix(severity)}{text}{self.suffix(severity)}"

    def banner(self, banner: Banner) -> str:
        """Return the colored label block for `banner`."""
        code: str = self.banners.get(banner, "")
        return f"{code}{banner.label}{self.reset if code else ''}"


ANSI_PALETTE: Final[Palette] = Palette(
    reset="\033[0m",
    codes={
        Severity.ECHO: "",
        Severity.NOTE: _code(fg="blue"),
        Severity.INFO: _code(fg="green"),
        Severity.MESSAGE: _code(fg="cyan"),
        Severity.STATUS: _code(fg="bright_black"),  # gray
        Severity.WARNING: _code(fg="yellow"),  # orange on most terminals
        Severity.CAUTION: _code(fg="bright_yellow"),
        Severity.FAILED: _code(fg="magenta"),
        Severity.ERROR: _code(fg="red"),
        Severity.DANGER: _code(fg="white", bg="red", bold=True),
    },
    banners={
        Banner.WARNING: _code(fg="black", bg="yellow"),
        Banner.CAUTION: _code(fg="black", bg="bright_yellow", bold=True),
        Banner.ERROR: _code(fg="white", bg="red", bold=True),
        Banner.FAULT: _code(fg="black", bg="bright_magenta"),
    },
)

PLAIN_PALETTE: Final[Palette] = Palette(
    reset="",
    codes=dict.fromkeys(Severity, ""),
    banners=dict.fromkeys(Banner, ""),
)
