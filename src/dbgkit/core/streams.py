# topmark:header:start
#
#   project      : DbgKit
#   file         : streams.py
#   file_relpath : src/dbgkit/core/streams.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output stream classes."""

from __future__ import annotations

from enum import Enum


class Stream(str, Enum):
    """Output stream class an emission is routed to.

    Attributes:
        PRIMARY: Normal and informational text (stdout-like).
        ERROR: Failure-class text (stderr-like).
    """

    PRIMARY = "primary"
    ERROR = "error"
