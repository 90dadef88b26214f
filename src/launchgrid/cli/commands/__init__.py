"""CLI commands for launchgrid."""

from .ports import list_ports
from .run import run

__all__ = ["list_ports", "run"]
