# topmark:header:start
#
#   project      : DbgKit
#   file         : gates.py
#   file_relpath : src/dbgkit/gates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gated emitters: debug output that can be switched on and off.

Three independent policies share the severity vocabulary of
`dbgkit.emitters` and the check reporting of `dbgkit.checks`:

- `FlagGate`: on/off flag, with an optional countdown that terminates the
  process after ``max_out`` emissions (a guard against runaway debug loops).
- `LevelGate`: numeric level; a call passes its required level and is shown
  when ``0 < gate.level`` and ``required <= gate.level`` (a higher gate level
  shows more).
- `MaskGate`: bit mask; a call passes its bits and is shown when any of them
  is set in ``gate.mask``.

Gates are plain dataclasses owned by the caller; the predicate is evaluated on
every call. Check methods always return the real outcome, whether or not the
gate let the report through.

Example:
    ```python
    bug = FlagGate(enabled=True, max_out=100)
    bug.info("loop %d", i)

    lvl = LevelGate(level=3)
    lvl.note(2, "shown")     # 2 <= 3
    lvl.note(4, "hidden")    # 4 > 3
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dbgkit.config.logging import get_logger
from dbgkit.config.runtime import get_config
from dbgkit.core.engine import CHECK_TAG, ERROR_TAG, is_ignored, report
from dbgkit.core.formatter import parse_check_args, render_error_text, render_text
from dbgkit.core.frames import locate
from dbgkit.core.sink import emit, terminate
from dbgkit.core.streams import Stream
from dbgkit.emitters import say
from dbgkit.rendering.palette import Severity
from dbgkit.trace import FROM_TAG, HERE_TAG, emit_trace

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dbgkit.core.frames import CallSite

logger = get_logger(__name__)

COUNTDOWN_EXPIRED_TEXT = "--Countdown expired"


@dataclass
class FlagGate:
    """Debug output controlled by a boolean flag.

    Attributes:
        enabled (bool): Emit only while True.
        max_out (int): Remaining emissions before the process is terminated;
            0 means unlimited. Decremented on every emission of this gate.
    """

    enabled: bool = False
    max_out: int = 0

    def _count_down(self, *, skip: int) -> None:
        if self.max_out <= 0:
            return
        self.max_out -= 1
        if self.max_out == 0:
            site: CallSite | None = locate(skip + 1)
            text: str = f"{COUNTDOWN_EXPIRED_TEXT} {site.tag()}" if site else COUNTDOWN_EXPIRED_TEXT
            logger.debug("flag gate countdown expired")
            emit(Stream.ERROR, get_config().palette.wrap(Severity.ERROR, text) + "\n")
            terminate("flag gate countdown expired")

    def _say(self, severity: Severity, fmt: str, args: tuple[Any, ...]) -> None:
        if self.enabled:
            say(severity, fmt, *args)
            self._count_down(skip=2)

    def echo(self, fmt: str, *args: Any) -> None:
        """Emit plain text if enabled."""
        self._say(Severity.ECHO, fmt, args)

    def note(self, fmt: str, *args: Any) -> None:
        """Emit blue text if enabled."""
        self._say(Severity.NOTE, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        """Emit green text if enabled."""
        self._say(Severity.INFO, fmt, args)

    def message(self, fmt: str, *args: Any) -> None:
        """Emit cyan text if enabled."""
        self._say(Severity.MESSAGE, fmt, args)

    def status(self, fmt: str, *args: Any) -> None:
        """Emit gray text if enabled."""
        self._say(Severity.STATUS, fmt, args)

    def warning(self, fmt: str, *args: Any) -> None:
        """Emit orange text if enabled."""
        self._say(Severity.WARNING, fmt, args)

    def caution(self, fmt: str, *args: Any) -> None:
        """Emit bright yellow text if enabled."""
        self._say(Severity.CAUTION, fmt, args)

    def failed(self, fmt: str, *args: Any) -> None:
        """Emit magenta text to the error stream if enabled."""
        self._say(Severity.FAILED, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        """Emit red text to the error stream if enabled."""
        self._say(Severity.ERROR, fmt, args)

    def danger(self, fmt: str, *args: Any) -> None:
        """Emit white-on-red text to the error stream if enabled."""
        self._say(Severity.DANGER, fmt, args)

    def check(self, ok: bool, *args: Any) -> bool:
        """`dbgkit.checks.check`, reporting only while enabled."""
        if self.enabled and not ok:
            report(Severity.FAILED, CHECK_TAG, render_text(parse_check_args(args)), skip=1)
            self._count_down(skip=1)
        return not ok

    def check_err(self, err: BaseException | None, *args: Any) -> bool:
        """`dbgkit.checks.check_err`, reporting only while enabled."""
        if self.enabled and err is not None:
            report(Severity.ERROR, ERROR_TAG, render_error_text(err, parse_check_args(args)), skip=1)
            self._count_down(skip=1)
        return err is not None

    def check_err_ignoring(
        self,
        err: BaseException | None,
        ignore: Iterable[BaseException],
        *args: Any,
    ) -> bool:
        """`dbgkit.checks.check_err_ignoring`, reporting only while enabled."""
        if self.enabled and err is not None:
            if not is_ignored(err, ignore):
                report(
                    Severity.ERROR, ERROR_TAG, render_error_text(err, parse_check_args(args)), skip=1
                )
                self._count_down(skip=1)
        return err is not None

    def trace_here(self, *args: Any) -> None:
        """`dbgkit.trace.trace_here` if enabled."""
        if self.enabled:
            emit_trace(HERE_TAG, args, skip=1)
            self._count_down(skip=1)

    def trace_from(self, *args: Any) -> None:
        """`dbgkit.trace.trace_from` if enabled."""
        if self.enabled:
            emit_trace(FROM_TAG, args, skip=2)
            self._count_down(skip=1)


class _ThresholdGate:
    """Severity methods shared by gates that take a per-call threshold."""

    def allows(self, threshold: int) -> bool:
        """Return True if a call with `threshold` may emit."""
        raise NotImplementedError

    def _say(self, threshold: int, severity: Severity, fmt: str, args: tuple[Any, ...]) -> None:
        if self.allows(threshold):
            say(severity, fmt, *args)

    def echo(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit plain text if `threshold` is allowed."""
        self._say(threshold, Severity.ECHO, fmt, args)

    def note(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit blue text if `threshold` is allowed."""
        self._say(threshold, Severity.NOTE, fmt, args)

    def info(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit green text if `threshold` is allowed."""
        self._say(threshold, Severity.INFO, fmt, args)

    def message(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit cyan text if `threshold` is allowed."""
        self._say(threshold, Severity.MESSAGE, fmt, args)

    def status(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit gray text if `threshold` is allowed."""
        self._say(threshold, Severity.STATUS, fmt, args)

    def warning(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit orange text if `threshold` is allowed."""
        self._say(threshold, Severity.WARNING, fmt, args)

    def caution(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit bright yellow text if `threshold` is allowed."""
        self._say(threshold, Severity.CAUTION, fmt, args)

    def failed(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit magenta text to the error stream if `threshold` is allowed."""
        self._say(threshold, Severity.FAILED, fmt, args)

    def error(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit red text to the error stream if `threshold` is allowed."""
        self._say(threshold, Severity.ERROR, fmt, args)

    def danger(self, threshold: int, fmt: str, *args: Any) -> None:
        """Emit white-on-red text to the error stream if `threshold` is allowed."""
        self._say(threshold, Severity.DANGER, fmt, args)

    def check(self, threshold: int, ok: bool, *args: Any) -> bool:
        """`dbgkit.checks.check`, reporting only if `threshold` is allowed."""
        if self.allows(threshold) and not ok:
            report(Severity.FAILED, CHECK_TAG, render_text(parse_check_args(args)), skip=1)
        return not ok

    def check_err(self, threshold: int, err: BaseException | None, *args: Any) -> bool:
        """`dbgkit.checks.check_err`, reporting only if `threshold` is allowed."""
        if self.allows(threshold) and err is not None:
            report(Severity.ERROR, ERROR_TAG, render_error_text(err, parse_check_args(args)), skip=1)
        return err is not None


@dataclass
class LevelGate(_ThresholdGate):
    """Debug output controlled by a numeric level.

    A level of 0 (or below) disables all output; otherwise calls whose required
    level is at most `level` are shown.

    Attributes:
        level (int): Configured level.
    """

    level: int = 0

    def allows(self, threshold: int) -> bool:
        """Return True if ``0 < level`` and ``threshold <= level``."""
        return self.level > 0 and self.level >= threshold


@dataclass
class MaskGate(_ThresholdGate):
    """Debug output controlled by a bit mask.

    Attributes:
        mask (int): Configured bits.
    """

    mask: int = 0

    def allows(self, threshold: int) -> bool:
        """Return True if `threshold` shares any bit with `mask`."""
        return (self.mask & threshold) != 0


def level_message(level: int, fmt: str, *args: Any) -> None:
    """Emit a message if `level` is allowed by the global debug level.

    See `dbgkit.config.runtime.set_level`.
    """
    LevelGate(get_config().level).message(level, fmt, *args)


def mask_message(bits: int, fmt: str, *args: Any) -> None:
    """Emit a message if `bits` intersect the global debug mask.

    See `dbgkit.config.runtime.set_mask`.
    """
    MaskGate(get_config().mask).message(bits, fmt, *args)
