"""Data models for launchgrid."""

from .color import Color

__all__ = [
    "Color",
]
