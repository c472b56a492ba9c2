# topmark:header:start
#
#   project      : DbgKit
#   file         : errors.py
#   file_relpath : src/dbgkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by DbgKit.

Usage:
    Only the explicit panic variants (``panic*``, ``*_or_panic`` and
    ``must_have_or_panic``) raise `PanicError`. Report-only checks never raise and
    fatal checks never unwind.

Recovering:
    ```python
    try:
        check_or_panic(ok, "state %s is invalid", state, closer=conn.close)
    except PanicError as exc:
        print(exc.message)  # rendered text, no location tag, no color codes
    ```
"""

from __future__ import annotations


class DbgkitError(Exception):
    """Base class for all DbgKit errors."""


class PanicError(DbgkitError):
    """Escalated check failure.

    The payload is always the rendered message text so that callers catching the
    unwind can compare or pattern-match it without having to strip a location tag.

    Attributes:
        message (str): The rendered message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingValueError(DbgkitError):
    """Returned by `must_have` when a required value is None."""

    DEFAULT_TEXT = "Missing value"
