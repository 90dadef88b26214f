"""Shared canvas behaviour built on the low-level canvas operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from launchgrid.models import Color

from .protocols import Pad


class BaseCanvas(ABC):
    """
    Base class for canvases.

    Subclasses implement the low-level pixel access, ``flush`` and
    ``lowest_visible_brightness``; this class adds the conveniences
    every canvas has (iteration, fill, clear, context manager).
    """

    @abstractmethod
    def bounding_box(self) -> tuple[int, int]:
        pass

    @abstractmethod
    def iter_pads(self) -> Iterator[Pad]:
        pass

    @abstractmethod
    def get(self, x: int, y: int) -> Color | None:
        pass

    @abstractmethod
    def get_pending(self, x: int, y: int) -> Color | None:
        pass

    @abstractmethod
    def set_pending(self, x: int, y: int, color: Color) -> bool:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def lowest_visible_brightness(self) -> float:
        pass

    def close(self) -> None:
        """Release resources. Default: nothing to release."""

    # ================================================================
    # CONVENIENCE
    # ================================================================

    @property
    def width(self) -> int:
        return self.bounding_box()[0]

    @property
    def height(self) -> int:
        return self.bounding_box()[1]

    def __iter__(self) -> Iterator[Pad]:
        return self.iter_pads()

    def __contains__(self, pad: object) -> bool:
        if not isinstance(pad, tuple) or len(pad) != 2:
            return False
        return self.get_pending(*pad) is not None

    def fill(self, color: Color) -> None:
        """Stage ``color`` on every pad."""
        for pad in self.iter_pads():
            self.set_pending(pad.x, pad.y, color)

    def clear(self) -> None:
        """Stage every pad to off."""
        self.fill(Color.off())

    def changed_pads(self) -> list[tuple[Pad, Color]]:
        """Pads whose pending color differs from the committed one."""
        changes = []
        for pad in self.iter_pads():
            pending = self.get_pending(pad.x, pad.y)
            if pending is not None and pending != self.get(pad.x, pad.y):
                changes.append((pad, pending))
        return changes

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
