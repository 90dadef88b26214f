"""launchgrid: compose several grid controllers into one canvas."""

__version__ = "0.1.0"

from .canvas import (
    Canvas,
    CanvasLayout,
    CanvasLayoutPoller,
    CanvasMessage,
    MemoryCanvas,
    Pad,
    Press,
    Release,
    Rotation,
)
from .config import LayoutConfig, build_layout
from .devices import LaunchpadCanvas, LaunchpadModel
from .models import Color

__all__ = [
    "Canvas",
    "CanvasLayout",
    "CanvasLayoutPoller",
    "CanvasMessage",
    "Color",
    "LaunchpadCanvas",
    "LaunchpadModel",
    "LayoutConfig",
    "MemoryCanvas",
    "Pad",
    "Press",
    "Release",
    "Rotation",
    "build_layout",
]
