# topmark:header:start
#
#   project      : DbgKit
#   file         : constants.py
#   file_relpath : src/dbgkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    DBGKIT_VERSION: str = get_version("dbgkit")
except PackageNotFoundError:  # running from a source checkout
    DBGKIT_VERSION = "0.0.0+unknown"
