# topmark:header:start
#
#   project      : DbgKit
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared test doubles for the DbgKit test suite.

These live outside ``conftest.py`` so that test modules and fixtures import one
and the same class objects (``pytest.raises(Terminated)`` must match the type
the fixture's terminator raises).
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NoReturn, TypeVar, cast

import pytest

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_subprocess: DecoratorType[Any] = as_typed_mark(pytest.mark.subprocess)


class Terminated(Exception):
    """Raised by the test terminator in place of a process exit.

    Attributes:
        code (int): The exit status the library asked for.
    """

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def raising_terminator(code: int) -> NoReturn:
    """Terminator double that raises `Terminated`."""
    raise Terminated(code)


@dataclass
class Captured:
    """Buffers behind the test console.

    Attributes:
        out (io.StringIO): Primary stream.
        err (io.StringIO): Error stream.
    """

    out: io.StringIO = field(default_factory=io.StringIO)
    err: io.StringIO = field(default_factory=io.StringIO)

    @property
    def stdout(self) -> str:
        """Return everything written to the primary stream."""
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        """Return everything written to the error stream."""
        return self.err.getvalue()

    def lines(self, stream: str = "err") -> list[str]:
        """Return the captured lines of `stream` (``"out"`` or ``"err"``)."""
        buf: io.StringIO = self.out if stream == "out" else self.err
        return buf.getvalue().splitlines()

    def clear(self) -> None:
        """Discard everything captured so far."""
        for buf in (self.out, self.err):
            buf.seek(0)
            buf.truncate()


def here() -> int:
    """Return the line number of the line calling `here`."""
    return sys._getframe(1).f_lineno
