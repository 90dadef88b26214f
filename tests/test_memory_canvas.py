"""Unit tests for MemoryCanvas and the BaseCanvas helpers."""

import pytest

from launchgrid.canvas import MemoryCanvas, Pad, Press, Release
from launchgrid.models import Color

GREEN = Color(r=0.0, g=1.0, b=0.0)


class TestMemoryCanvas:
    """Test the in-memory grid."""

    @pytest.fixture
    def received(self):
        return []

    @pytest.fixture
    def canvas(self, received):
        return MemoryCanvas(4, 3, received.append, lowest_visible_brightness=0.1)

    def test_bounding_box(self, canvas):
        """Bounding box is (width, height)."""
        assert canvas.bounding_box() == (4, 3)
        assert canvas.width == 4
        assert canvas.height == 3

    def test_iter_pads_covers_grid(self, canvas):
        """Every pad is yielded once, row by row."""
        pads = list(canvas.iter_pads())
        assert len(pads) == 12
        assert pads[0] == Pad(0, 0)
        assert pads[-1] == Pad(3, 2)

    def test_starts_off(self, canvas):
        """All pads start off, pending and committed."""
        assert canvas.get(2, 2) == Color.off()
        assert canvas.get_pending(2, 2) == Color.off()

    def test_out_of_range(self, canvas):
        """Out-of-range access returns None / False."""
        assert canvas.get(4, 0) is None
        assert canvas.get_pending(0, 3) is None
        assert canvas.set_pending(-1, 0, GREEN) is False
        assert (4, 0) not in canvas
        assert (3, 2) in canvas

    def test_flush_commits(self, canvas):
        """Pending colors become committed on flush."""
        canvas.set_pending(1, 1, GREEN)
        assert canvas.get(1, 1) == Color.off()
        assert canvas.changed_pads() == [(Pad(1, 1), GREEN)]

        canvas.flush()

        assert canvas.get(1, 1) == GREEN
        assert canvas.changed_pads() == []

    def test_write_failure_keeps_pending(self):
        """If _write raises, nothing is committed."""

        class Broken(MemoryCanvas):
            def _write(self, changes):
                raise OSError("unplugged")

        canvas = Broken(2, 2)
        canvas.set_pending(0, 0, GREEN)

        with pytest.raises(OSError):
            canvas.flush()
        assert canvas.get(0, 0) == Color.off()
        assert canvas.get_pending(0, 0) == GREEN

    def test_fill_and_clear(self, canvas):
        """fill() stages every pad, clear() turns them off again."""
        canvas.fill(GREEN)
        assert all(canvas.get_pending(x, y) == GREEN for x, y in canvas)

        canvas.clear()
        assert all(canvas.get_pending(x, y) == Color.off() for x, y in canvas)

    def test_press_and_release(self, canvas, received):
        """press()/release() deliver messages to the callback."""
        canvas.press(3, 2)
        canvas.release(3, 2)
        assert received == [Press(3, 2), Release(3, 2)]

    def test_press_outside_grid_ignored(self, canvas, received):
        """Input outside the grid is dropped."""
        canvas.press(9, 9)
        assert received == []

    def test_lowest_visible_brightness(self, canvas):
        """The configured floor is reported."""
        assert canvas.lowest_visible_brightness() == 0.1

    @pytest.mark.parametrize("kwargs", [{"width": 0, "height": 1}, {"width": 2, "height": -1}])
    def test_invalid_size(self, kwargs):
        """Sizes must be positive."""
        with pytest.raises(ValueError):
            MemoryCanvas(**kwargs)

    def test_invalid_floor(self):
        """The floor must be in [0, 1)."""
        with pytest.raises(ValueError):
            MemoryCanvas(2, 2, lowest_visible_brightness=1.0)

    def test_message_moved_to_keeps_kind(self):
        """moved_to() changes coordinates only."""
        moved = Release(1, 2).moved_to(5, 6)
        assert moved == Release(5, 6)
        assert moved.pad == Pad(5, 6)
