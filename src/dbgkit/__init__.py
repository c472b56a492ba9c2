# topmark:header:start
#
#   project      : DbgKit
#   file         : __init__.py
#   file_relpath : src/dbgkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit package.

DbgKit is a small runtime-diagnostics vocabulary: colored severity output,
checks that report (and optionally panic or exit) when a condition fails,
switchable debug output, and call-site tracing.

Quick tour:
    ```python
    import dbgkit as dbg

    dbg.info("loaded %d rows", n)
    if dbg.check_err(err, "reading %s", path):
        return
    dbg.check_or_exit(conn is not None, "no connection", closer=pool.close)

    bug = dbg.FlagGate(enabled=True, max_out=50)
    bug.note("iteration %d", i)

    dbg.trace_here()
    ```

Output goes through one console (see `set_console`); colors are switched with
`enable_color` / `disable_color`.
"""

from __future__ import annotations

from dbgkit.checks import (
    check,
    check_err,
    check_err_ignoring,
    check_err_or_exit,
    check_err_or_panic,
    check_errs,
    check_or_exit,
    check_or_panic,
    expect_err,
    fatal,
    fatal_if,
    fatal_if_err,
    must_have,
    must_have_or_panic,
    panic,
    panic_if,
    panic_if_err,
)
from dbgkit.config.runtime import (
    disable_color,
    enable_color,
    get_config,
    init_config,
    set_console,
    set_level,
    set_mask,
    set_terminator,
)
from dbgkit.core.errors import DbgkitError, MissingValueError, PanicError
from dbgkit.core.exit_codes import ExitCode
from dbgkit.core.frames import CallSite, err_at, err_was_at, i_am, i_was, im_at, locate, was_at
from dbgkit.emitters import (
    banner_caution,
    banner_error,
    banner_fault,
    banner_warning,
    caution,
    danger,
    echo,
    error,
    failed,
    info,
    message,
    note,
    status,
    warning,
)
from dbgkit.gates import FlagGate, LevelGate, MaskGate, level_message, mask_message
from dbgkit.rendering.color import ColorMode
from dbgkit.rendering.palette import Severity
from dbgkit.trace import stack_trace, trace_from, trace_here, trace_if

__all__ = [
    "CallSite",
    "ColorMode",
    "DbgkitError",
    "ExitCode",
    "FlagGate",
    "LevelGate",
    "MaskGate",
    "MissingValueError",
    "PanicError",
    "Severity",
    "banner_caution",
    "banner_error",
    "banner_fault",
    "banner_warning",
    "caution",
    "check",
    "check_err",
    "check_err_ignoring",
    "check_err_or_exit",
    "check_err_or_panic",
    "check_errs",
    "check_or_exit",
    "check_or_panic",
    "danger",
    "disable_color",
    "echo",
    "enable_color",
    "err_at",
    "err_was_at",
    "error",
    "expect_err",
    "failed",
    "fatal",
    "fatal_if",
    "fatal_if_err",
    "get_config",
    "i_am",
    "i_was",
    "im_at",
    "info",
    "init_config",
    "level_message",
    "locate",
    "mask_message",
    "message",
    "must_have",
    "must_have_or_panic",
    "note",
    "panic",
    "panic_if",
    "panic_if_err",
    "set_console",
    "set_level",
    "set_mask",
    "set_terminator",
    "stack_trace",
    "status",
    "trace_from",
    "trace_here",
    "trace_if",
    "warning",
    "was_at",
]
