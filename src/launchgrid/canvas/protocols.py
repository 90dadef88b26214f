"""Canvas protocols and input messages."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from launchgrid.models import Color


class Pad(NamedTuple):
    """An addressable (x, y) position on a canvas."""

    x: int
    y: int


@dataclass(frozen=True)
class CanvasMessage:
    """Input from a canvas, at the coordinates of whoever receives it."""

    x: int
    y: int

    @property
    def pad(self) -> Pad:
        return Pad(self.x, self.y)

    def moved_to(self, x: int, y: int) -> CanvasMessage:
        """Same kind of message at other coordinates."""
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class Press(CanvasMessage):
    """Pad was pressed."""


@dataclass(frozen=True)
class Release(CanvasMessage):
    """Pad was released."""


# Invoked from whichever thread the device delivers input on, possibly
# from several devices at once.
MessageCallback = Callable[[CanvasMessage], None]


class Canvas(Protocol):
    """Protocol every grid device (and every layout of devices) implements.

    Coordinates are the canvas' own. Colors written with ``set_pending``
    only reach the hardware on ``flush``.
    """

    def bounding_box(self) -> tuple[int, int]:
        """(width, height) of the canvas' own grid."""
        ...

    def iter_pads(self) -> Iterator[Pad]:
        """Every addressable pad."""
        ...

    def get(self, x: int, y: int) -> Color | None:
        """Color last sent to the hardware, or None if (x, y) is not a pad."""
        ...

    def get_pending(self, x: int, y: int) -> Color | None:
        """Color waiting for the next flush, or None if (x, y) is not a pad."""
        ...

    def set_pending(self, x: int, y: int, color: Color) -> bool:
        """
        Stage a color for the next flush.

        Returns:
            True if (x, y) is a pad, False otherwise
        """
        ...

    def flush(self) -> None:
        """
        Send pending colors to the hardware.

        Raises:
            DeviceTransportError: If the hardware could not be written
        """
        ...

    def lowest_visible_brightness(self) -> float:
        """Smallest channel value the hardware visibly lights, in [0, 1)."""
        ...

    def close(self) -> None:
        """Release the hardware. No further input is delivered."""
        ...


# Builds a canvas that reports input to the given callback.
CanvasFactory = Callable[[MessageCallback], Canvas]
