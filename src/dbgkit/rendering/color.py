# topmark:header:start
#
#   project      : DbgKit
#   file         : color.py
#   file_relpath : src/dbgkit/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for DbgKit.

These helpers decide whether the ANSI palette or the plain palette is active when
the runtime configuration is first created. They are deliberately kept free of
console instances so they can be reused from the command line and from tests.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Final

from dbgkit.config.logging import get_logger

logger = get_logger(__name__)

#: Environment variable holding a `ColorMode` value (``auto``, ``always``, ``never``).
COLOR_ENV_VAR: Final[str] = "DBGKIT_COLOR"


class ColorMode(str, Enum):
    """User intent for colorized output.

    Attributes:
        AUTO: Enable color only on platforms whose terminals are known to
            understand ANSI sequences (Linux).
        ALWAYS: Force-enable color.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _env_color_mode() -> ColorMode | None:
    val: str | None = os.getenv(COLOR_ENV_VAR)
    if not val:
        return None
    try:
        return ColorMode(val.strip().lower())
    except ValueError:
        logger.warning("Ignoring invalid %s value: %r", COLOR_ENV_VAR, val)
        return None


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    platform: str | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
            - `DBGKIT_COLOR` (`always` / `never`) → True / False
        3. **Auto**: True only when the platform is Linux.

    Args:
        color_mode_override (ColorMode | None): Explicit mode, e.g. from `--color`;
            `None` or `AUTO` means "decide from the environment".
        platform (str | None): Platform string to test; defaults to `sys.platform`.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    env_mode: ColorMode | None = _env_color_mode()
    if env_mode == ColorMode.ALWAYS:
        return True
    if env_mode == ColorMode.NEVER:
        return False

    return (platform or sys.platform).startswith("linux")
