"""Rotation of a device within a layout, and the coordinate transforms built on it."""

from enum import Enum


class Rotation(Enum):
    """Quarter-turn rotations of a device relative to the layout."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    UPSIDE_DOWN = "upside_down"

    def inverse(self) -> "Rotation":
        """Rotation that undoes this one."""
        return _INVERSE[self]

    def __neg__(self) -> "Rotation":
        return self.inverse()

    def compose(self, other: "Rotation") -> "Rotation":
        """Rotation equivalent to applying ``self`` and then ``other``."""
        return _BY_QUARTERS[(_QUARTERS[self] + _QUARTERS[other]) % 4]

    def translate(self, x: int, y: int) -> tuple[int, int]:
        """Rotate the point (x, y) around the origin."""
        if self is Rotation.NONE:
            return (x, y)
        if self is Rotation.UPSIDE_DOWN:
            return (-x, -y)
        if self is Rotation.LEFT:
            return (-y, x)
        return (y, -x)


_INVERSE = {
    Rotation.NONE: Rotation.NONE,
    Rotation.UPSIDE_DOWN: Rotation.UPSIDE_DOWN,
    Rotation.LEFT: Rotation.RIGHT,
    Rotation.RIGHT: Rotation.LEFT,
}

# Quarter turns in the direction of LEFT
_QUARTERS = {
    Rotation.NONE: 0,
    Rotation.LEFT: 1,
    Rotation.UPSIDE_DOWN: 2,
    Rotation.RIGHT: 3,
}
_BY_QUARTERS = {quarters: rotation for rotation, quarters in _QUARTERS.items()}


def to_global(x: int, y: int, rotation: Rotation, x_offset: int, y_offset: int) -> tuple[int, int]:
    """Device-local coordinate to layout coordinate."""
    x, y = rotation.translate(x, y)
    return (x + x_offset, y + y_offset)


def to_local(x: int, y: int, rotation: Rotation, x_offset: int, y_offset: int) -> tuple[int, int]:
    """Layout coordinate to device-local coordinate. Exact inverse of ``to_global``."""
    return rotation.inverse().translate(x - x_offset, y - y_offset)
