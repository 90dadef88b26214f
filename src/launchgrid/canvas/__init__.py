"""Canvases and the layout that composes them."""

from .base import BaseCanvas
from .layout import (
    DEFAULT_LIGHT_THRESHOLD,
    CanvasLayout,
    LayoutDevice,
    Pixel,
    transform_channel,
    transform_color,
)
from .memory import MemoryCanvas
from .poller import DEFAULT_CAPACITY, CanvasLayoutPoller
from .protocols import (
    Canvas,
    CanvasFactory,
    CanvasMessage,
    MessageCallback,
    Pad,
    Press,
    Release,
)
from .rotation import Rotation, to_global, to_local

__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_LIGHT_THRESHOLD",
    "BaseCanvas",
    "Canvas",
    "CanvasFactory",
    "CanvasLayout",
    "CanvasLayoutPoller",
    "CanvasMessage",
    "LayoutDevice",
    "MemoryCanvas",
    "MessageCallback",
    "Pad",
    "Pixel",
    "Press",
    "Release",
    "Rotation",
    "to_global",
    "to_local",
    "transform_channel",
    "transform_color",
]
