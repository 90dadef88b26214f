"""Rectangular in-memory canvas, the base of hardware canvases."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from launchgrid.models import Color

from .base import BaseCanvas
from .protocols import MessageCallback, Pad, Press, Release

logger = logging.getLogger(__name__)


class MemoryCanvas(BaseCanvas):
    """
    A width x height grid holding pending and committed colors.

    On its own it is a virtual device, useful for previews and tests.
    Hardware canvases subclass it and override ``_write`` to send the
    changed pads; the committed buffer is only updated after ``_write``
    returns.
    """

    def __init__(
        self,
        width: int,
        height: int,
        callback: MessageCallback | None = None,
        lowest_visible_brightness: float = 0.0,
    ):
        """
        Initialize canvas.

        Args:
            width: Number of columns
            height: Number of rows
            callback: Receives Press/Release messages in local coordinates
            lowest_visible_brightness: Smallest visible channel value, in [0, 1)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if not 0.0 <= lowest_visible_brightness < 1.0:
            raise ValueError(
                f"lowest_visible_brightness must be in [0, 1), got {lowest_visible_brightness}"
            )

        self._width = width
        self._height = height
        self._callback = callback
        self._lowest_visible_brightness = lowest_visible_brightness

        off = Color.off()
        self._pending: dict[Pad, Color] = {pad: off for pad in self.iter_pads()}
        self._committed: dict[Pad, Color] = dict(self._pending)

    # ================================================================
    # CANVAS
    # ================================================================

    def bounding_box(self) -> tuple[int, int]:
        return (self._width, self._height)

    def iter_pads(self) -> Iterator[Pad]:
        for y in range(self._height):
            for x in range(self._width):
                yield Pad(x, y)

    def get(self, x: int, y: int) -> Color | None:
        return self._committed.get(Pad(x, y))

    def get_pending(self, x: int, y: int) -> Color | None:
        return self._pending.get(Pad(x, y))

    def set_pending(self, x: int, y: int, color: Color) -> bool:
        pad = Pad(x, y)
        if pad not in self._pending:
            return False
        self._pending[pad] = color
        return True

    def lowest_visible_brightness(self) -> float:
        return self._lowest_visible_brightness

    def flush(self) -> None:
        """Write changed pads via ``_write``, then mark them committed."""
        changes = self.changed_pads()
        if not changes:
            return

        self._write(changes)

        for pad, color in changes:
            self._committed[pad] = color
        logger.debug(f"Flushed {len(changes)} pad(s) on {self}")

    def _write(self, changes: list[tuple[Pad, Color]]) -> None:
        """Push changed pads to the hardware. Nothing to do in memory."""

    # ================================================================
    # INPUT
    # ================================================================

    def press(self, x: int, y: int) -> None:
        """Report a press at local (x, y) to the callback."""
        self._emit(Press(x, y))

    def release(self, x: int, y: int) -> None:
        """Report a release at local (x, y) to the callback."""
        self._emit(Release(x, y))

    def _emit(self, message: Press | Release) -> None:
        if Pad(message.x, message.y) not in self._pending:
            logger.warning(f"Ignoring {message} outside {self._width}x{self._height} grid")
            return
        if self._callback is not None:
            self._callback(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height})"
