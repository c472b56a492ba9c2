# topmark:header:start
#
#   project      : DbgKit
#   file         : __init__.py
#   file_relpath : src/dbgkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit CLI subcommands."""
