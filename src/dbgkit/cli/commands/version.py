# topmark:header:start
#
#   project      : DbgKit
#   file         : version.py
#   file_relpath : src/dbgkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit `version` command."""

from __future__ import annotations

import click

from dbgkit.constants import DBGKIT_VERSION


@click.command(
    name="version",
    help="Show the current version of DbgKit.",
)
def version_command() -> None:
    """Print the DbgKit version as installed in the current Python environment."""
    click.echo(DBGKIT_VERSION)
