"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from launchgrid import __version__
from launchgrid.exceptions import format_error_for_display

from .commands import list_ports, run

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level to ./launchgrid-debug.log
        log_file: Custom log file path (optional)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        log_path = log_file
    elif debug:
        log_path = Path.cwd() / "launchgrid-debug.log"
    else:
        log_dir = Path.home() / ".launchgrid" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "launchgrid.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


class ErrorReportingGroup(click.Group):
    """Click group that shows launchgrid errors without a traceback."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.Abort, click.exceptions.Exit):
            raise
        except Exception as e:
            logger.exception("Command failed")

            user_message, recovery_hint = format_error_for_display(e)
            click.echo("\n" + "=" * 70, err=True)
            click.echo(f"ERROR: {user_message}", err=True)
            click.echo("=" * 70, err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)

            log_path = ctx.meta.get("launchgrid.log_path")
            if log_path:
                click.echo(f"\nFor details, check the log file: {log_path}", err=True)
            sys.exit(1)


@click.group(cls=ErrorReportingGroup)
@click.version_option(version=__version__, prog_name="launchgrid")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./launchgrid-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.pass_context
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path]):
    """
    launchgrid - drive several Launchpads as one grid.

    \b
    Examples:
      # List MIDI ports and detected Launchpads
      launchgrid ports

      # Run a layout described in a JSON file
      launchgrid run layout.json
    """
    ctx.meta["launchgrid.log_path"] = setup_logging(verbose, debug, log_file)


cli.add_command(list_ports)
cli.add_command(run)

if __name__ == "__main__":
    cli()
