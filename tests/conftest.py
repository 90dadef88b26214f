"""Pytest fixtures for tests."""

import pytest

from launchgrid.canvas import CanvasLayout, MemoryCanvas
from launchgrid.exceptions import DeviceTransportError


class RecordingCanvas(MemoryCanvas):
    """MemoryCanvas that records flushes and closes into shared lists."""

    def __init__(self, name, journal, width=8, height=8, callback=None, lowest_visible_brightness=0.0):
        super().__init__(width, height, callback, lowest_visible_brightness)
        self.name = name
        self.journal = journal
        self.written = []
        self.closed = False

    def _write(self, changes):
        self.journal.append(("flush", self.name))
        self.written.extend(changes)

    def close(self):
        self.journal.append(("close", self.name))
        self.closed = True


class FailingCanvas(RecordingCanvas):
    """Canvas whose hardware write always fails."""

    def _write(self, changes):
        self.journal.append(("flush", self.name))
        raise DeviceTransportError(self.name, "port vanished")


@pytest.fixture
def messages():
    """List collecting every message delivered to the layout callback."""
    return []


@pytest.fixture
def layout(messages):
    """Empty layout that appends its messages to ``messages``."""
    return CanvasLayout(messages.append)


@pytest.fixture
def journal():
    """Shared list of (event, canvas name) tuples."""
    return []


@pytest.fixture
def make_canvas(journal):
    """Factory fixture: ``make_canvas("a")`` returns a canvas factory for layout.add."""

    created = {}

    def make(name, cls=RecordingCanvas, **kwargs):
        def factory(callback):
            canvas = cls(name, journal, callback=callback, **kwargs)
            created[name] = canvas
            return canvas

        return factory

    make.created = created
    return make
