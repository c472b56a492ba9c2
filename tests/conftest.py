# topmark:header:start
#
#   project      : DbgKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DbgKit test suite.

Every test starts from a fresh runtime configuration:

- emissions are captured by a `StdConsole` writing into two `io.StringIO`
  buffers, exposed through the `captured` fixture;
- the plain palette is active, so assertions can compare literal text;
- the terminator raises `tests.helpers.Terminated` instead of ending the test
  process.

Tests that need the real process exit run the package in a child interpreter
(see `tests/cli/conftest.py`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dbgkit.config import init_config, reset_config
from dbgkit.config import logging as dbg_logging
from dbgkit.console import StdConsole
from dbgkit.rendering.color import ColorMode
from tests.helpers import Captured, raising_terminator

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def captured(monkeypatch: pytest.MonkeyPatch) -> Iterator[Captured]:
    """Install a capturing console, the plain palette and the raising terminator.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear color and log level
            variables inherited from the developer's shell.

    Yields:
        Captured: The buffers receiving all emissions of the test.
    """
    for var in ("DBGKIT_LOG_LEVEL", "DBGKIT_COLOR", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(var, raising=False)

    cap = Captured()
    init_config(
        color_mode=ColorMode.NEVER,
        console=StdConsole(out=cap.out, err=cap.err),
        terminator=raising_terminator,
    )
    yield cap
    reset_config()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging of the library's own diagnostics during test runs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    dbg_logging.setup_logging(level=dbg_logging.TRACE_LEVEL)
