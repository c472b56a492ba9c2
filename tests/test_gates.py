# topmark:header:start
#
#   project      : DbgKit
#   file         : test_gates.py
#   file_relpath : tests/test_gates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `FlagGate`, `LevelGate`, `MaskGate` and the global level / mask."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dbgkit.config import set_level, set_mask
from dbgkit.core.exit_codes import ExitCode
from dbgkit.gates import (
    COUNTDOWN_EXPIRED_TEXT,
    FlagGate,
    LevelGate,
    MaskGate,
    level_message,
    mask_message,
)
from tests.helpers import Terminated, here

if TYPE_CHECKING:
    from tests.helpers import Captured

THIS_FILE = "tests/test_gates.py"

SEVERITY_METHODS = (
    "echo",
    "note",
    "info",
    "message",
    "status",
    "warning",
    "caution",
    "failed",
    "error",
    "danger",
)


class MyError(Exception):
    """Error value used by these tests."""


# --- FlagGate ------------------------------------------------------------------


def test_flag_gate_disabled_emits_nothing(captured: Captured) -> None:
    """A disabled gate is silent for every severity, check and trace."""
    bug = FlagGate(enabled=False, max_out=1)
    for name in SEVERITY_METHODS:
        getattr(bug, name)("bug{false} %s text FAILED", name)
    bug.trace_here("hidden")
    bug.trace_from()

    assert bug.check(False, "hidden") is True
    assert bug.check_err(MyError("hidden")) is True

    assert captured.stdout == ""
    assert captured.stderr == ""
    assert bug.max_out == 1


def test_flag_gate_enabled_routes_by_severity(captured: Captured) -> None:
    """Enabled gates behave like the plain emitters."""
    bug = FlagGate(enabled=True)
    for name in SEVERITY_METHODS:
        getattr(bug, name)("bug{true} %s text", name)

    assert captured.lines("out") == [
        f"bug{{true}} {name} text" for name in SEVERITY_METHODS[:7]
    ]
    assert captured.lines("err") == [
        f"bug{{true}} {name} text" for name in SEVERITY_METHODS[7:]
    ]


def test_flag_gate_can_be_toggled_between_calls(captured: Captured) -> None:
    """The flag is read on every call."""
    bug = FlagGate()
    bug.info("hidden")
    bug.enabled = True
    bug.info("shown")

    assert captured.lines("out") == ["shown"]


def test_flag_gate_countdown_terminates_on_last_emission(captured: Captured) -> None:
    """With ``max_out=2`` the second emission is printed, then the process ends."""
    bug = FlagGate(enabled=True, max_out=2)
    bug.echo("one")
    assert bug.max_out == 1

    with pytest.raises(Terminated) as excinfo:
        line: int = here() + 1
        bug.echo("two")

    assert excinfo.value.code == ExitCode.FATAL
    assert captured.lines("out") == ["one", "two"]
    assert captured.lines("err") == [f"{COUNTDOWN_EXPIRED_TEXT} @ {line} in {THIS_FILE}"]


def test_flag_gate_countdown_counts_checks_and_traces(captured: Captured) -> None:
    """Check reports and trace lines consume the countdown too."""
    bug = FlagGate(enabled=True, max_out=3)
    bug.check(False, "first")
    bug.trace_here()

    with pytest.raises(Terminated):
        bug.check_err(MyError("third"))

    assert captured.stderr.count(COUNTDOWN_EXPIRED_TEXT) == 1


def test_flag_gate_without_countdown_is_unlimited(captured: Captured) -> None:
    """``max_out=0`` never terminates."""
    bug = FlagGate(enabled=True)
    for i in range(50):
        bug.echo("%d", i)

    assert len(captured.lines("out")) == 50
    assert bug.max_out == 0


def test_flag_gate_check_reports_at_call_site(captured: Captured) -> None:
    """Gate checks carry the user's call site, not the gate's."""
    bug = FlagGate(enabled=True)
    line: int = here() + 1
    assert bug.check(False, "gated") is True

    assert captured.lines() == [f"CHK @ {line} in {THIS_FILE}  gated"]


def test_flag_gate_check_err_ignoring(captured: Captured) -> None:
    """Ignored errors stay silent and do not consume the countdown."""
    err = MyError("ignored")
    bug = FlagGate(enabled=True, max_out=5)

    assert bug.check_err_ignoring(err, [err]) is True
    assert captured.stderr == ""
    assert bug.max_out == 5


# --- LevelGate ---------------------------------------------------------------


def test_level_gate_zero_emits_nothing(captured: Captured) -> None:
    """Level 0 disables every call, whatever its required level."""
    lvl = LevelGate(level=0)
    for required, name in enumerate(SEVERITY_METHODS, start=1):
        getattr(lvl, name)(required, "lvl{0} %d", required)
    lvl.echo(0, "lvl{0} required 0")

    assert captured.stdout == ""
    assert captured.stderr == ""


def test_level_gate_threshold_boundaries(captured: Captured) -> None:
    """Calls at or below the gate level are shown, higher ones are not."""
    lvl = LevelGate(level=5)
    lvl.message(4, "below")
    lvl.message(5, "equal")
    lvl.message(6, "above FAILED")

    assert captured.lines("out") == ["below", "equal"]


def test_level_gate_sweep(captured: Captured) -> None:
    """Level 5 shows the first five severities of a 1..9 sweep."""
    lvl = LevelGate(level=5)
    for required, name in enumerate(SEVERITY_METHODS[:9], start=1):
        getattr(lvl, name)(required, "lvl{5} %d", required)

    shown: list[str] = captured.lines("out") + captured.lines("err")
    assert shown == [f"lvl{{5}} {n}" for n in range(1, 6)]


def test_level_gate_checks_return_outcome_even_when_hidden(captured: Captured) -> None:
    """A suppressed report still returns the real check outcome."""
    lvl = LevelGate(level=1)

    assert lvl.check(3, False, "hidden") is True
    assert lvl.check_err(3, MyError("hidden")) is True
    assert captured.stderr == ""

    line: int = here() + 1
    assert lvl.check(1, False, "shown") is True
    assert captured.lines() == [f"CHK @ {line} in {THIS_FILE}  shown"]


# --- MaskGate ----------------------------------------------------------------


def test_mask_gate_bit_intersection(captured: Captured) -> None:
    """Bits 0x1 miss mask 0xA; bits 0x2 hit it."""
    msk = MaskGate(mask=0xA)
    msk.info(0x1, "miss")
    msk.info(0x2, "hit")

    assert captured.lines("out") == ["hit"]


def test_mask_gate_sweep(captured: Captured) -> None:
    """Mask 0xA sweeps 1..9: bits 2, 3, 6, 7, 8 and 9 intersect."""
    msk = MaskGate(mask=0xA)
    for bits in range(1, 10):
        msk.message(bits, "msk %d", bits)

    assert captured.lines("out") == [f"msk {b}" for b in (2, 3, 6, 7, 8, 9)]


def test_mask_gate_zero_mask_is_silent(captured: Captured) -> None:
    """An empty mask never matches."""
    msk = MaskGate()
    msk.danger(0xFF, "hidden")
    assert msk.check(0xFF, False) is True

    assert captured.stderr == ""


# --- Global level / mask -------------------------------------------------------


def test_level_message_follows_global_level(captured: Captured) -> None:
    """`level_message` consults the level set by `set_level`."""
    level_message(1, "hidden")
    set_level(2)
    level_message(1, "shown 1")
    level_message(2, "shown 2")
    level_message(3, "hidden")

    assert captured.lines("out") == ["shown 1", "shown 2"]


def test_mask_message_follows_global_mask(captured: Captured) -> None:
    """`mask_message` consults the mask set by `set_mask`."""
    mask_message(0x1, "hidden")
    set_mask(0x5)
    mask_message(0x4, "shown")
    mask_message(0x2, "hidden")

    assert captured.lines("out") == ["shown"]
