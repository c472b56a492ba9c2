# topmark:header:start
#
#   project      : DbgKit
#   file         : __init__.py
#   file_relpath : src/dbgkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for DbgKit: runtime state and internal logging."""

from __future__ import annotations

from dbgkit.config.runtime import (
    RuntimeConfig,
    disable_color,
    enable_color,
    get_config,
    init_config,
    reset_config,
    set_console,
    set_level,
    set_mask,
    set_terminator,
    terminate_process,
)

__all__ = [
    "RuntimeConfig",
    "disable_color",
    "enable_color",
    "get_config",
    "init_config",
    "reset_config",
    "set_console",
    "set_level",
    "set_mask",
    "set_terminator",
    "terminate_process",
]
