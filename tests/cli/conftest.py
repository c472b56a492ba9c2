# topmark:header:start
#
#   project      : DbgKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DbgKit in-process and in a child interpreter.

`run_cli` drives the Click group through `click.testing.CliRunner`; it is
suitable for every path that returns normally. The fatal paths end the process
with ``os._exit``, which would take the test runner down with them, so they are
run through `run_module` in a separate interpreter instead.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from dbgkit.cli.main import cli
from dbgkit.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence

SRC_DIR: Path = Path(__file__).resolve().parents[2] / "src"


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--no-color", "demo"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def run_module(*argv: str) -> subprocess.CompletedProcess[str]:
    """Run ``python -m dbgkit *argv`` in a child interpreter.

    The child sees `SRC_DIR` on ``PYTHONPATH`` so that the checkout is used even
    when the package is not installed. Color variables of the parent are removed.

    Args:
        *argv (str): Arguments after ``-m dbgkit``.

    Returns:
        subprocess.CompletedProcess[str]: Exit status and captured text streams.
    """
    env: dict[str, str] = {
        k: v for k, v in os.environ.items() if k not in {"NO_COLOR", "FORCE_COLOR", "DBGKIT_COLOR"}
    }
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "dbgkit", *argv],
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
        check=False,
    )


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with a Click usage error (code 2).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == 2, result.output
