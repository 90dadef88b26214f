"""Hardware canvases."""

from .launchpad import LaunchpadCanvas, LaunchpadModel

__all__ = [
    "LaunchpadCanvas",
    "LaunchpadModel",
]
