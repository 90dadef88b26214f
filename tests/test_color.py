"""Unit tests for the Color model."""

import pytest
from pydantic import ValidationError

from launchgrid.models import Color


class TestColor:
    """Test Color construction and conversions."""

    def test_off(self):
        """off() is black."""
        assert Color.off().to_rgb_tuple() == (0.0, 0.0, 0.0)
        assert Color.off().is_off()

    def test_out_of_range_rejected(self):
        """Channels outside [0, 1] fail validation."""
        with pytest.raises(ValidationError):
            Color(r=1.5, g=0.0, b=0.0)
        with pytest.raises(ValidationError):
            Color(r=0.0, g=-0.1, b=0.0)

    def test_clamped(self):
        """clamped() forces channels into range."""
        assert Color.clamped(1.5, -0.2, 0.5) == Color(r=1.0, g=0.0, b=0.5)

    def test_frozen(self):
        """Colors are immutable and hashable."""
        color = Color(r=0.5, g=0.5, b=0.5)
        with pytest.raises(ValidationError):
            color.r = 1.0
        assert {color, Color(r=0.5, g=0.5, b=0.5)} == {color}

    def test_from_rgb8(self):
        """8-bit values are normalized."""
        color = Color.from_rgb8(255, 0, 51)
        assert color.r == 1.0
        assert color.b == pytest.approx(0.2)

    def test_to_7bit(self):
        """Channels scale to the 0-127 MIDI range."""
        assert Color(r=1.0, g=0.5, b=0.0).to_7bit() == (127, 64, 0)

    def test_to_hex(self):
        """Hex strings use 8-bit channels."""
        assert Color(r=1.0, g=0.0, b=0.0).to_hex() == "#FF0000"

    def test_map_channels(self):
        """map_channels applies the function to every channel and clamps."""
        assert Color(r=0.2, g=0.4, b=0.8).map_channels(lambda c: c * 2) == Color(
            r=0.4, g=0.8, b=1.0
        )
