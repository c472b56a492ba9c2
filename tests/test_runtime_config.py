# topmark:header:start
#
#   project      : DbgKit
#   file         : test_runtime_config.py
#   file_relpath : tests/test_runtime_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the process-wide runtime configuration."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

import dbgkit
from dbgkit.config import (
    get_config,
    init_config,
    reset_config,
    set_console,
    set_terminator,
    terminate_process,
)
from dbgkit.console import ClickConsole, StdConsole
from dbgkit.rendering.color import ColorMode
from dbgkit.rendering.palette import ANSI_PALETTE, PLAIN_PALETTE
from tests.helpers import Terminated, raising_terminator

if TYPE_CHECKING:
    from tests.helpers import Captured


def test_set_console_redirects_all_output(captured: Captured) -> None:
    """Swapping the console moves every later emission; the old one is returned."""
    out, err = io.StringIO(), io.StringIO()
    previous = set_console(StdConsole(out=out, err=err))

    dbgkit.info("to new console")
    dbgkit.check(False, "also redirected")

    assert captured.stdout == ""
    assert captured.stderr == ""
    assert out.getvalue() == "to new console\n"
    assert err.getvalue().endswith("  also redirected\n")

    set_console(previous)
    dbgkit.info("back")
    assert captured.stdout == "back\n"


def test_set_terminator_returns_previous() -> None:
    """The terminator seam is replaceable and restorable."""
    seen: list[int] = []

    def recording_terminator(code: int) -> None:
        seen.append(code)
        raise Terminated(code)

    previous = set_terminator(recording_terminator)  # type: ignore[arg-type]
    assert previous is raising_terminator

    with pytest.raises(Terminated):
        dbgkit.fatal("bye")
    assert seen == [255]


def test_terminator_that_returns_is_an_error() -> None:
    """A terminator must never hand control back to the fatal path."""
    set_terminator(lambda code: None)  # type: ignore[arg-type,return-value]

    with pytest.raises(AssertionError, match="terminator returned"):
        dbgkit.fatal("bye")


def test_init_config_respects_color_mode() -> None:
    """ALWAYS selects the ANSI palette, NEVER the plain one."""
    assert init_config(color_mode=ColorMode.ALWAYS).palette is ANSI_PALETTE
    assert init_config(color_mode=ColorMode.NEVER).palette is PLAIN_PALETTE


def test_default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """A fresh configuration uses the click console and the real terminator."""
    monkeypatch.setenv("NO_COLOR", "1")
    reset_config()

    cfg = get_config()
    assert isinstance(cfg.console, ClickConsole)
    assert cfg.terminator is terminate_process
    assert cfg.palette is PLAIN_PALETTE
    assert (cfg.level, cfg.mask) == (0, 0)
    assert get_config() is cfg
