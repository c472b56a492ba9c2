# topmark:header:start
#
#   project      : DbgKit
#   file         : runtime.py
#   file_relpath : src/dbgkit/config/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide runtime configuration.

All global state of the library lives in a single `RuntimeConfig` instance:

- the active `Palette` (ANSI or plain),
- the active console (the emission sink target),
- the terminator (the process-exit collaborator),
- the global debug level and debug mask used by `level_message` / `mask_message`.

The instance is created lazily by `get_config()`. None of the accessors are
synchronized: mutate the configuration from one thread only, typically at
start-up.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

from dbgkit.config.logging import get_logger
from dbgkit.console.click_console import ClickConsole
from dbgkit.core.exit_codes import ExitCode
from dbgkit.rendering.color import ColorMode, resolve_color_mode
from dbgkit.rendering.palette import ANSI_PALETTE, PLAIN_PALETTE, Palette

if TYPE_CHECKING:
    from collections.abc import Callable

    from dbgkit.console.api import ConsoleLike

logger = get_logger(__name__)


def terminate_process(code: int) -> NoReturn:
    """Terminate the process immediately with `code`.

    Pending stdout/stderr output is flushed first; nothing else runs: no
    ``finally`` blocks, no ``atexit`` handlers.

    Args:
        code (int): Process exit status.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass  # closed or broken stream; termination proceeds regardless
    os._exit(code)


@dataclass
class RuntimeConfig:
    """Mutable process-wide configuration.

    Attributes:
        palette (Palette): Active color table.
        console (ConsoleLike): Target of every emission.
        terminator (Callable[[int], NoReturn]): Called with the exit status by
            fatal paths.
        level (int): Global debug level for `level_message`.
        mask (int): Global debug bit mask for `mask_message`.
    """

    palette: Palette = PLAIN_PALETTE
    console: ConsoleLike = field(default_factory=ClickConsole)
    terminator: Callable[[int], NoReturn] = terminate_process
    level: int = 0
    mask: int = 0

    @property
    def color_enabled(self) -> bool:
        """Return True if the ANSI palette is active."""
        return self.palette is ANSI_PALETTE


_config: RuntimeConfig | None = None


def init_config(
    *,
    color_mode: ColorMode | None = None,
    console: ConsoleLike | None = None,
    terminator: Callable[[int], NoReturn] | None = None,
) -> RuntimeConfig:
    """Create (or re-create) the process-wide configuration.

    Args:
        color_mode (ColorMode | None): Explicit color intent; `None` resolves it from
            the environment and platform (see `resolve_color_mode`).
        console (ConsoleLike | None): Console to emit to; defaults to a `ClickConsole`.
        terminator (Callable[[int], NoReturn] | None): Exit collaborator; defaults to
            `terminate_process`.

    Returns:
        RuntimeConfig: The new active configuration.
    """
    global _config
    enabled: bool = resolve_color_mode(color_mode_override=color_mode)
    _config = RuntimeConfig(
        palette=ANSI_PALETTE if enabled else PLAIN_PALETTE,
        console=console or ClickConsole(),
        terminator=terminator or terminate_process,
    )
    logger.debug("runtime config initialized (color=%s)", enabled)
    return _config


def get_config() -> RuntimeConfig:
    """Return the active configuration, creating it on first use."""
    if _config is None:
        return init_config()
    return _config


def reset_config() -> None:
    """Drop the active configuration; the next `get_config()` re-creates it."""
    global _config
    _config = None


def enable_color() -> None:
    """Switch every severity to its ANSI color."""
    get_config().palette = ANSI_PALETTE
    logger.trace("color output enabled")


def disable_color() -> None:
    """Switch every severity to plain text."""
    get_config().palette = PLAIN_PALETTE
    logger.trace("color output disabled")


def set_console(console: ConsoleLike) -> ConsoleLike:
    """Replace the console all emissions are written to.

    Args:
        console (ConsoleLike): The new console.

    Returns:
        ConsoleLike: The previously active console, so callers can restore it.
    """
    cfg: RuntimeConfig = get_config()
    previous: ConsoleLike = cfg.console
    cfg.console = console
    logger.debug("console replaced: %s -> %s", type(previous).__name__, type(console).__name__)
    return previous


def set_terminator(terminator: Callable[[int], NoReturn]) -> Callable[[int], NoReturn]:
    """Replace the process-exit collaborator.

    Args:
        terminator (Callable[[int], NoReturn]): Called with the exit status; must not return.

    Returns:
        Callable[[int], NoReturn]: The previously active terminator.
    """
    cfg: RuntimeConfig = get_config()
    previous: Callable[[int], NoReturn] = cfg.terminator
    cfg.terminator = terminator
    logger.debug("terminator replaced")
    return previous


def set_level(level: int) -> None:
    """Set the global debug level used by `level_message`."""
    get_config().level = level


def set_mask(mask: int) -> None:
    """Set the global debug bit mask used by `mask_message`."""
    get_config().mask = mask
