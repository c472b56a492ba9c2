# topmark:header:start
#
#   project      : DbgKit
#   file         : checks.py
#   file_relpath : src/dbgkit/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Check / assert functions.

Every check comes in up to three termination flavors:

- **report** (``check``, ``check_err``, ...): emit a call-site-tagged line to the
  error stream on failure and return ``True`` when the check *failed*, so it
  composes inside an ``if``::

      if check_err(err, "loading %s", path):
          return None

- **report + panic** (``*_or_panic``, ``panic*``): run the optional ``closer``,
  then raise `PanicError` with the rendered text (no location tag).
- **report + exit** (``*_or_exit``, ``fatal*``): run the optional ``closer``, emit
  the message, then terminate the process with `ExitCode.FATAL`. Nothing
  unwinds; the closer is the only cleanup that runs.

The positional message arguments are described in `dbgkit.core.formatter`.
Only terminating variants accept ``closer=``; report-only checks never run one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from dbgkit.core.engine import (
    CHECK_TAG,
    ERROR_TAG,
    escalate,
    is_ignored,
    report,
    report_and_terminate,
    report_fatal,
)
from dbgkit.core.errors import MissingValueError
from dbgkit.core.formatter import (
    CheckArgs,
    error_text,
    parse_check_args,
    render_error_text,
    render_text,
    run_closer,
)
from dbgkit.rendering.palette import Severity

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    Closer = Callable[[], None]


# --- Report-only checks ------------------------------------------------------


def check(ok: bool, *args: Any) -> bool:
    """Report if `ok` is false.

    Args:
        ok (bool): Condition expected to hold.
        *args (Any): Message arguments; defaults to ``"Check failed"``.

    Returns:
        bool: True if the check failed.
    """
    if not ok:
        report(Severity.FAILED, CHECK_TAG, render_text(parse_check_args(args)), skip=1)
    return not ok


def check_err(err: BaseException | None, *args: Any) -> bool:
    """Report if `err` is not None.

    Args:
        err (BaseException | None): Error to test.
        *args (Any): Message arguments; defaults to the error's own text.

    Returns:
        bool: True if `err` is not None.
    """
    if err is not None:
        report(Severity.ERROR, ERROR_TAG, render_error_text(err, parse_check_args(args)), skip=1)
    return err is not None


def check_errs(errs: Iterable[BaseException | None], *args: Any) -> bool:
    """Report every non-None error in `errs`.

    All errors are reported; the scan does not stop at the first one.

    Args:
        errs (Iterable[BaseException | None]): Errors to test.
        *args (Any): Message arguments applied to each report.

    Returns:
        bool: True if any error was present.
    """
    check_args: CheckArgs = parse_check_args(args)
    any_failed = False
    for err in errs:
        if err is not None:
            report(Severity.ERROR, ERROR_TAG, render_error_text(err, check_args), skip=1)
            any_failed = True
    return any_failed


def check_err_ignoring(
    err: BaseException | None,
    ignore: Iterable[BaseException],
    *args: Any,
) -> bool:
    """Like `check_err`, but stay silent for errors listed in `ignore`.

    Matching is by identity or equality. An ignored error is still a failure:
    the return value does not change, only the report is suppressed.

    Args:
        err (BaseException | None): Error to test.
        ignore (Iterable[BaseException]): Errors that are not reported.
        *args (Any): Message arguments.

    Returns:
        bool: True if `err` is not None.
    """
    if err is not None and not is_ignored(err, ignore):
        report(Severity.ERROR, ERROR_TAG, render_error_text(err, parse_check_args(args)), skip=1)
    return err is not None


def _describe(err: BaseException | None) -> str:
    return "None" if err is None else error_text(err)


def expect_err(err: BaseException | None, expected: BaseException | None) -> bool:
    """Report if `err` is not (by identity) the `expected` error.

    Returns:
        bool: True if the errors differ.
    """
    if err is not expected:
        text: str = f"Expected error ({_describe(expected)}) not given, got ({_describe(err)})"
        report(Severity.ERROR, ERROR_TAG, text, skip=1)
    return err is not expected


# --- Panicking checks --------------------------------------------------------


def check_or_panic(ok: bool, *args: Any, closer: Closer | None = None) -> None:
    """Raise `PanicError` if `ok` is false, after running `closer`.

    Raises:
        PanicError: If the check failed.
    """
    if not ok:
        escalate(render_text(run_closer(parse_check_args(args, closer))))


def check_err_or_panic(err: BaseException | None, *args: Any, closer: Closer | None = None) -> None:
    """Raise `PanicError` if `err` is not None, after running `closer`.

    Raises:
        PanicError: If `err` is not None.
    """
    if err is not None:
        escalate(render_error_text(err, run_closer(parse_check_args(args, closer))))


def panic(*args: Any, closer: Closer | None = None) -> NoReturn:
    """Run `closer`, then raise `PanicError` with the rendered message.

    Raises:
        PanicError: Always.
    """
    escalate(render_text(run_closer(parse_check_args(args, closer))))


def panic_if(cond: bool, *args: Any, closer: Closer | None = None) -> None:
    """`panic` if `cond` is true."""
    if cond:
        escalate(render_text(run_closer(parse_check_args(args, closer))))


def panic_if_err(err: BaseException | None, *args: Any, closer: Closer | None = None) -> None:
    """`panic` if `err` is not None, using the error's text by default."""
    if err is not None:
        escalate(render_error_text(err, run_closer(parse_check_args(args, closer))))


def must_have(*values: Any, error: BaseException | str | None = None) -> BaseException | None:
    """Return an error if any of `values` is None.

    Args:
        *values (Any): Values that must be present.
        error (BaseException | str | None): Error (or message) to return; defaults to
            ``MissingValueError("Missing value")``.

    Returns:
        BaseException | None: The error, or None when every value is present.
    """
    if all(value is not None for value in values):
        return None
    if isinstance(error, BaseException):
        return error
    return MissingValueError(error or MissingValueError.DEFAULT_TEXT)


def must_have_or_panic(*values: Any, error: BaseException | str | None = None) -> None:
    """Raise `PanicError` if any of `values` is None.

    Raises:
        PanicError: With the text of `error` (default ``"Missing value"``).
    """
    err: BaseException | None = must_have(*values, error=error)
    if err is not None:
        escalate(error_text(err))


# --- Fatal checks ------------------------------------------------------------


def check_or_exit(ok: bool, *args: Any, closer: Closer | None = None) -> None:
    """Report and terminate the process if `ok` is false, after running `closer`."""
    if not ok:
        text: str = render_text(run_closer(parse_check_args(args, closer)))
        report_and_terminate(Severity.FAILED, CHECK_TAG, text, skip=1)


def check_err_or_exit(err: BaseException | None, *args: Any, closer: Closer | None = None) -> None:
    """Report and terminate the process if `err` is not None, after running `closer`."""
    if err is not None:
        text: str = render_error_text(err, run_closer(parse_check_args(args, closer)))
        report_and_terminate(Severity.ERROR, ERROR_TAG, text, skip=1)


def fatal(*args: Any, closer: Closer | None = None) -> NoReturn:
    """Run `closer`, emit the message in danger colors, then terminate the process."""
    report_fatal(render_text(run_closer(parse_check_args(args, closer))))


def fatal_if(cond: bool, *args: Any, closer: Closer | None = None) -> None:
    """`fatal` if `cond` is true."""
    if cond:
        report_fatal(render_text(run_closer(parse_check_args(args, closer))))


def fatal_if_err(err: BaseException | None, *args: Any, closer: Closer | None = None) -> None:
    """`fatal` if `err` is not None, using the error's text by default."""
    if err is not None:
        report_fatal(render_error_text(err, run_closer(parse_check_args(args, closer))))
