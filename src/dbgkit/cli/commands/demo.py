# topmark:header:start
#
#   project      : DbgKit
#   file         : demo.py
#   file_relpath : src/dbgkit/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit `demo` command.

Runs every emitter, banner, gate and report-only check once so the colors and
the call-site tags can be inspected in a real terminal. The ``--exit-*`` /
``--fatal*`` / ``--countdown`` switches each trigger one process-exit path; they
are checked in the order listed and the first one set ends the process.
"""

from __future__ import annotations

import click

from dbgkit import checks, emitters
from dbgkit.core.errors import PanicError
from dbgkit.gates import FlagGate, LevelGate, MaskGate
from dbgkit.trace import trace_here


class DemoError(Exception):
    """Error value used by the demo checks."""


def _closer() -> None:
    emitters.message("Closer was called")


def _run_fatal_switches(
    *,
    exit_check: bool,
    exit_check_err: bool,
    fatal: bool,
    fatal_if: bool,
    fatal_if_err: bool,
    countdown: bool,
) -> None:
    err = DemoError("MyErr")
    if exit_check:
        checks.check_or_exit(False, "False, exiting", closer=_closer)
    if exit_check_err:
        checks.check_err_or_exit(err, "Error, exiting", closer=_closer)
    if fatal:
        checks.fatal("Fatal, exiting", closer=_closer)
    if fatal_if:
        checks.fatal_if(True, "True, exiting")
    if fatal_if_err:
        checks.fatal_if_err(err, "Error, exiting")
    if countdown:
        bug = FlagGate(enabled=True, max_out=4)
        for remaining in ("3", "2", "1", "0"):
            bug.echo(remaining)


def _show_emitters() -> None:
    emitters.echo("Echo text")
    emitters.note("Note text")
    emitters.info("Info text")
    emitters.message("Message text")
    emitters.status("Status text")
    emitters.warning("Warning text")
    emitters.caution("Caution text")
    emitters.failed("Failed text")
    emitters.error("Error text")
    emitters.danger("Danger text")
    emitters.banner_warning("WARNING text")
    emitters.banner_caution("CAUTION text")
    emitters.banner_error("ERROR text")
    emitters.banner_fault("FAULT text")


def _show_gates() -> None:
    bug = FlagGate(enabled=True)
    bug.info("bug{true} Info text")
    bug.enabled = False
    bug.info("bug{false} Info text FAILED")

    lvl = LevelGate(level=5)
    for required in range(1, 10):
        lvl.message(required, "lvl{5} %d - Message text%s", required, "" if required <= 5 else " FAILED")

    msk = MaskGate(mask=0xA)
    for bits in range(1, 10):
        msk.message(bits, "msk{xA} %d - Message text%s", bits, "" if bits & 0xA else " FAILED")


def _show_checks() -> None:
    err = DemoError("MyErr")
    checks.check(False)
    checks.check(False, "My check text")
    checks.check_err(err)
    checks.check_err(err, "My error text")
    try:
        checks.check_or_panic(False, "Panic, %s", "supplied text", closer=_closer)
    except PanicError as exc:
        emitters.echo("panic:  '%s'", exc.message)
    trace_here("demo finished")


@click.command(
    name="demo",
    help="Show every emitter, gate and check; optionally trigger a fatal path.",
)
@click.option("--exit-check", is_flag=True, help="Trigger check_or_exit.")
@click.option("--exit-check-err", is_flag=True, help="Trigger check_err_or_exit.")
@click.option("--fatal", "fatal", is_flag=True, help="Trigger fatal.")
@click.option("--fatal-if", is_flag=True, help="Trigger fatal_if.")
@click.option("--fatal-if-err", is_flag=True, help="Trigger fatal_if_err.")
@click.option("--countdown", is_flag=True, help="Exhaust a FlagGate countdown.")
def demo_command(
    *,
    exit_check: bool,
    exit_check_err: bool,
    fatal: bool,
    fatal_if: bool,
    fatal_if_err: bool,
    countdown: bool,
) -> None:
    """Show every emitter, gate and check.

    Args:
        exit_check (bool): Trigger `check_or_exit`.
        exit_check_err (bool): Trigger `check_err_or_exit`.
        fatal (bool): Trigger `fatal`.
        fatal_if (bool): Trigger `fatal_if`.
        fatal_if_err (bool): Trigger `fatal_if_err`.
        countdown (bool): Exhaust a `FlagGate` countdown.
    """
    _run_fatal_switches(
        exit_check=exit_check,
        exit_check_err=exit_check_err,
        fatal=fatal,
        fatal_if=fatal_if,
        fatal_if_err=fatal_if_err,
        countdown=countdown,
    )
    if any((exit_check, exit_check_err, fatal, fatal_if, fatal_if_err, countdown)):
        emitters.banner_error("--- Well, we shouldn't be here...")

    _show_emitters()
    _show_gates()
    _show_checks()
