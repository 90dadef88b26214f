"""Color model for LED control."""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Normalized RGB color.

    Each channel is a float between 0.0 (dark) and 1.0 (full brightness).
    Device-specific conversions (e.g., 7-bit for MIDI SysEx) are handled
    by device adapters.

    The model is frozen so colors can be shared between the layout's
    pixel map and device buffers without copying.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(default=0.0, ge=0.0, le=1.0, description="Red (0.0-1.0)")
    g: float = Field(default=0.0, ge=0.0, le=1.0, description="Green (0.0-1.0)")
    b: float = Field(default=0.0, ge=0.0, le=1.0, description="Blue (0.0-1.0)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0.0, g=0.0, b=0.0)

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> "Color":
        """Create a color, clamping each channel into [0, 1]."""
        return cls(r=min(max(r, 0.0), 1.0), g=min(max(g, 0.0), 1.0), b=min(max(b, 0.0), 1.0))

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from 8-bit channel values (0-255)."""
        return cls(r=r / 255, g=g / 255, b=b / 255)

    def map_channels(self, fn: Callable[[float], float]) -> "Color":
        """Apply ``fn`` to every channel, clamping the result."""
        return Color.clamped(fn(self.r), fn(self.g), fn(self.b))

    def is_off(self) -> bool:
        """True if every channel is zero."""
        return self.r == 0.0 and self.g == 0.0 and self.b == 0.0

    def to_rgb_tuple(self) -> tuple[float, float, float]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_7bit(self) -> tuple[int, int, int]:
        """Convert to 7-bit RGB for MIDI SysEx messages.

        Returns:
            tuple[int, int, int]: RGB values in 0-127 range

        Example:
            >>> Color(r=1.0, g=0.5, b=0.0).to_7bit()
            (127, 64, 0)
        """
        return (round(self.r * 127), round(self.g * 127), round(self.b * 127))

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        r, g, b = (round(c * 255) for c in self.to_rgb_tuple())
        return f"#{r:02X}{g:02X}{b:02X}"
