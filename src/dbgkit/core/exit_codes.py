# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/dbgkit/core/exit_codes.py
#   project      : DbgKit
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes used by DbgKit.

The fatal paths (exit-variant checks, `fatal*` and an expired `FlagGate` countdown)
all terminate with `ExitCode.FATAL`. Command-line usage errors are left to Click,
which exits with status 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for DbgKit.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FATAL: Forced termination by a fatal check. This is the status a process
            exiting with ``-1`` reports on POSIX systems.
    """

    SUCCESS = 0
    FATAL = 255
