# topmark:header:start
#
#   project      : DbgKit
#   file         : test_emitters.py
#   file_relpath : tests/test_emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the unconditional severity emitters and banners."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import dbgkit
from dbgkit.config import enable_color
from dbgkit.rendering.palette import ANSI_PALETTE, Banner, Severity

if TYPE_CHECKING:
    from tests.helpers import Captured


@pytest.mark.parametrize(
    "name",
    ["echo", "note", "info", "message", "status", "warning", "caution"],
)
def test_primary_severities(captured: Captured, name: str) -> None:
    """Non-failure severities write one line to the primary stream."""
    getattr(dbgkit, name)("%s text", name)

    assert captured.stdout == f"{name} text\n"
    assert captured.stderr == ""


@pytest.mark.parametrize("name", ["failed", "error", "danger"])
def test_error_severities(captured: Captured, name: str) -> None:
    """Failure severities write one line to the error stream."""
    getattr(dbgkit, name)("%s text", name)

    assert captured.stderr == f"{name} text\n"
    assert captured.stdout == ""


def test_emitter_colors_under_ansi(captured: Captured) -> None:
    """Each emission is wrapped in its severity color exactly once."""
    enable_color()
    dbgkit.info("green")
    dbgkit.echo("plain")
    dbgkit.danger("alarm")

    assert captured.lines("out") == [ANSI_PALETTE.wrap(Severity.INFO, "green"), "plain"]
    assert captured.lines("err") == [ANSI_PALETTE.wrap(Severity.DANGER, "alarm")]


def test_literal_percent_without_arguments(captured: Captured) -> None:
    """Text without format arguments is not %-formatted."""
    dbgkit.message("50% done")

    assert captured.stdout == "50% done\n"


@pytest.mark.parametrize(
    ("name", "label"),
    [
        ("banner_warning", " WARNING "),
        ("banner_caution", " CAUTION "),
        ("banner_error", "  ERROR  "),
        ("banner_fault", "  FAULT  "),
    ],
)
def test_banners(captured: Captured, name: str, label: str) -> None:
    """Banners prefix the text with a padded label on the primary stream."""
    getattr(dbgkit, name)("%s text", "banner")

    assert captured.stdout == f"{label} banner text\n"


def test_banner_colors_only_the_label(captured: Captured) -> None:
    """Under ANSI, the reset sequence follows the label, not the message."""
    enable_color()
    dbgkit.banner_fault("FAULT text")

    assert captured.stdout == f"{ANSI_PALETTE.banner(Banner.FAULT)} FAULT text\n"
    assert captured.stdout.split("\x1b[0m")[1] == " FAULT text\n"
