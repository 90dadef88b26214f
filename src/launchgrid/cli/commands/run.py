"""Run a layout from a configuration file."""

import logging
import time
from pathlib import Path

import click

from launchgrid.canvas import Press
from launchgrid.config import LayoutConfig, build_layout
from launchgrid.models import Color

logger = logging.getLogger(__name__)

IDLE_COLOR = Color(r=0.0, g=0.0, b=0.3)
PRESSED_COLOR = Color(r=1.0, g=0.6, b=0.0)


@click.command(name="run")
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--poll-interval",
    type=float,
    default=0.01,
    show_default=True,
    help="Seconds to sleep when no input is pending",
)
def run(config_path: Path, poll_interval: float):
    """
    Light every pad of a layout and echo presses in layout coordinates.

    Pressed pads light up until released. Press Ctrl+C to stop.

    \b
    Example layout file:
      {
        "light_threshold": 0.25,
        "devices": [
          {"x": 0, "y": 0, "model": "x"},
          {"x": 16, "y": 0, "model": "mini", "rotation": "left"}
        ]
      }
    """
    config = LayoutConfig.load(config_path)
    layout, poller = build_layout(config)

    with layout:
        click.echo(f"Layout ready: {len(layout.devices)} device(s), {len(layout)} pads")
        layout.fill(IDLE_COLOR)
        layout.flush()
        click.echo("Press Ctrl+C to stop\n")

        try:
            while True:
                changed = False
                for message in poller.iter_pending():
                    pressed = isinstance(message, Press)
                    click.echo(f"{'Press  ' if pressed else 'Release'} ({message.x}, {message.y})")
                    layout.set_pending(message.x, message.y, PRESSED_COLOR if pressed else IDLE_COLOR)
                    changed = True
                if changed:
                    layout.flush()
                else:
                    time.sleep(poll_interval)
        except KeyboardInterrupt:
            click.echo("\nStopping...")
            logger.info("Run interrupted by user")
