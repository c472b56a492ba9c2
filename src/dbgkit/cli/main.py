# topmark:header:start
#
#   project      : DbgKit
#   file         : main.py
#   file_relpath : src/dbgkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DbgKit command line.

Group-level options are resolved once: internal logging is configured and the
runtime configuration is (re)initialized with the requested color mode before
any subcommand runs.
"""

from __future__ import annotations

import click

from dbgkit.cli.commands.demo import demo_command
from dbgkit.cli.commands.version import version_command
from dbgkit.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from dbgkit.config.logging import get_logger, resolve_env_log_level, setup_logging
from dbgkit.config.runtime import init_config
from dbgkit.rendering.color import ColorMode

logger = get_logger(__name__)


def init_common_state(
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize logging and the runtime configuration.

    Args:
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    level: int | None = resolve_verbosity(verbose, quiet) if (verbose or quiet) else None
    level = level if level is not None else resolve_env_log_level()
    setup_logging(level=level)

    effective: ColorMode | None = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    )
    cfg = init_config(color_mode=effective)
    logger.debug("cli state: log level=%s, color=%s", level, cfg.color_enabled)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DbgKit CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the DbgKit CLI."""
    init_common_state(
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'dbgkit demo' to see every emitter and check.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
