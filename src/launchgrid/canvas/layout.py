"""
Compose several canvases into one.

Layout Overview
===============

Line up a few Launchpads on the table and address them as if they were a
single device::

    layout = CanvasLayout(lambda msg: print("Got a message:", msg))

    # A Launchpad X and, one column further right, a Launchpad Mini
    layout.add_by_guess(0, 0, model=LaunchpadModel.X)
    layout.add_by_guess(9, 0, model=LaunchpadModel.MINI_MK3)

    layout.fill(Color(r=1.0, g=0.0, b=0.0))   # both Launchpads turn red
    layout.flush()

Coordinates
-----------

Every device is placed with an offset and a ``Rotation``. A device-local
pad (x, y) lives at ``rotation.translate(x, y) + offset`` in the layout.
Input travels the same way (local to layout) and output the opposite way
(layout to local), and the two transforms round-trip exactly.

Registration claims every pad a device exposes. A layout coordinate
belongs to exactly one device; claiming one twice raises
``LayoutOverlapError``.

Brightness
----------

Devices disagree about how dim a channel value can be and still light
up. The layout has its own ``light_threshold``; on flush every pending
color is remapped so that the layout's threshold lands on the device's
``lowest_visible_brightness()`` while 1.0 stays 1.0. The layout keeps
the colors exactly as the client wrote them; only device buffers hold
remapped values.

Channels run from 0.0 (off) to 1.0 (full), so the fixed point is full
brightness, not off. When a device's floor is above ``light_threshold``,
0.0 maps above zero and pads written as off glow faintly on that device.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from launchgrid.exceptions import ErrorContext, LayoutOverlapError
from launchgrid.models import Color

from .base import BaseCanvas
from .protocols import Canvas, CanvasFactory, CanvasMessage, MessageCallback, Pad
from .rotation import Rotation, to_global, to_local

if TYPE_CHECKING:
    from launchgrid.devices.launchpad import LaunchpadModel

    from .poller import CanvasLayoutPoller

logger = logging.getLogger(__name__)

DEFAULT_LIGHT_THRESHOLD = 0.25


def transform_channel(value: float, source: float, target: float) -> float:
    """
    Remap one channel from one brightness floor to another.

    Affine in ``value``: ``source`` maps to ``target`` and 1.0 maps to 1.0.

    Args:
        value: Channel value as authored
        source: Lowest visible brightness the value was authored against
        target: Lowest visible brightness of the device it is sent to
    """
    return (value - 1.0) * (1.0 - target) / (1.0 - source) + 1.0


def transform_color(color: Color, source: float, target: float) -> Color:
    """Remap every channel of ``color``, clamped into [0, 1]."""
    return color.map_channels(lambda value: transform_channel(value, source, target))


@dataclass(frozen=True)
class LayoutDevice:
    """A canvas and where it sits in the layout."""

    canvas: Canvas
    rotation: Rotation
    x_offset: int
    y_offset: int

    def to_local(self, x: int, y: int) -> tuple[int, int]:
        return to_local(x, y, self.rotation, self.x_offset, self.y_offset)

    def to_global(self, x: int, y: int) -> tuple[int, int]:
        return to_global(x, y, self.rotation, self.x_offset, self.y_offset)


@dataclass(slots=True)
class Pixel:
    """Per-coordinate layout state."""

    device_index: int
    color_pending: Color
    color_committed: Color


class CanvasLayout(BaseCanvas):
    """
    A canvas made of other canvases.

    Devices are added once and never removed; a device's index (the
    order it was added in) identifies it for the lifetime of the layout.
    ``add`` and ``flush`` must not run concurrently with each other or
    with themselves. Input callbacks may arrive from any thread at any
    time after ``add`` returns.
    """

    def __init__(self, callback: MessageCallback, light_threshold: float = DEFAULT_LIGHT_THRESHOLD):
        """
        Initialize an empty layout.

        Args:
            callback: Receives Press/Release messages in layout coordinates.
                      May be called from several device threads at once; the
                      layout does no locking around it.
            light_threshold: Lowest visible brightness colors are authored against
        """
        self._devices: list[LayoutDevice] = []
        self._pixels: dict[tuple[int, int], Pixel] = {}
        self._callback = callback
        self._poller: CanvasLayoutPoller | None = None
        self.light_threshold = light_threshold

    @classmethod
    def polling(
        cls, capacity: int | None = None, light_threshold: float = DEFAULT_LIGHT_THRESHOLD
    ) -> tuple[CanvasLayout, CanvasLayoutPoller]:
        """
        Create a layout whose messages are queued for polling.

        Args:
            capacity: Queue size (None = DEFAULT_CAPACITY); producers block while it is full
            light_threshold: Lowest visible brightness colors are authored against

        Returns:
            (layout, poller) tuple. Closing the layout also closes the poller.
        """
        from .poller import DEFAULT_CAPACITY, CanvasLayoutPoller

        poller = CanvasLayoutPoller(DEFAULT_CAPACITY if capacity is None else capacity)
        layout = cls(poller.sink, light_threshold=light_threshold)
        layout._poller = poller
        return layout, poller

    # ================================================================
    # CONFIGURATION
    # ================================================================

    @property
    def light_threshold(self) -> float:
        return self._light_threshold

    @light_threshold.setter
    def light_threshold(self, value: float) -> None:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"light_threshold must be in [0, 1), got {value}")
        self._light_threshold = value

    @property
    def devices(self) -> tuple[LayoutDevice, ...]:
        """Placed devices, in index order."""
        return tuple(self._devices)

    # ================================================================
    # REGISTRATION
    # ================================================================

    def add(
        self,
        x_offset: int,
        y_offset: int,
        rotation: Rotation,
        factory: CanvasFactory,
    ) -> int:
        """
        Add a device at the given offset and rotation.

        ``factory`` is called once with a callback that already translates
        the device's local coordinates into layout coordinates, and must
        return the device's canvas. Whatever the factory raises reaches the
        caller unchanged.

        Layouts nest, since a layout is itself a canvas::

            layout.add(0, 0, Rotation.NONE, lambda callback: CanvasLayout(callback))

        Args:
            x_offset: Layout x of the device's local origin
            y_offset: Layout y of the device's local origin
            rotation: Device rotation about its local origin
            factory: Builds the canvas from a message callback

        Returns:
            The new device's index

        Raises:
            LayoutOverlapError: If any pad of the device lands on a coordinate
                another device already owns. The layout is left unchanged and
                the new canvas is closed.

        Anything else the new canvas raises while its pads are read also
        closes it and leaves the layout unchanged.
        """
        callback = self._callback

        def route(message: CanvasMessage) -> None:
            x, y = to_global(message.x, message.y, rotation, x_offset, y_offset)
            callback(message.moved_to(x, y))

        canvas = factory(route)

        index = len(self._devices)
        try:
            claimed = self._claim(canvas, index, rotation, x_offset, y_offset)
        except BaseException:
            with ErrorContext(f"close rejected canvas {canvas}", logger, re_raise=False):
                canvas.close()
            raise

        self._pixels.update(claimed)
        self._devices.append(LayoutDevice(canvas, rotation, x_offset, y_offset))
        logger.info(
            f"Added device {index} ({canvas}) at ({x_offset}, {y_offset}), "
            f"rotation {rotation.value}, {len(claimed)} pads"
        )
        return index

    def _claim(
        self, canvas: Canvas, index: int, rotation: Rotation, x_offset: int, y_offset: int
    ) -> dict[tuple[int, int], Pixel]:
        """Pixels the canvas would own, seeded from its buffers. Nothing is stored."""
        claimed: dict[tuple[int, int], Pixel] = {}
        for pad in canvas.iter_pads():
            coords = to_global(pad.x, pad.y, rotation, x_offset, y_offset)
            existing = self._pixels.get(coords)
            if existing is not None:
                error = LayoutOverlapError(coords, existing.device_index, index)
                logger.error(error.technical_message)
                raise error

            claimed[coords] = Pixel(
                device_index=index,
                color_pending=canvas.get_pending(pad.x, pad.y) or Color.off(),
                color_committed=canvas.get(pad.x, pad.y) or Color.off(),
            )
        return claimed

    def add_by_guess(
        self,
        x_offset: int,
        y_offset: int,
        rotation: Rotation = Rotation.NONE,
        model: LaunchpadModel | None = None,
    ) -> int:
        """
        Add a Launchpad found by its MIDI port name.

        Args:
            x_offset: Layout x of the device's local origin
            y_offset: Layout y of the device's local origin
            rotation: Device rotation
            model: Launchpad model to look for (None = any supported model)

        Raises:
            DeviceNotFoundError: If no matching Launchpad ports exist
        """
        from launchgrid.devices.launchpad import LaunchpadCanvas

        claimed_ports = self.launchpad_port_names()
        return self.add(
            x_offset,
            y_offset,
            rotation,
            lambda callback: LaunchpadCanvas.guess(callback, model=model, exclude=claimed_ports),
        )

    def launchpad_port_names(self) -> set[str]:
        """MIDI ports held by Launchpads in this layout, nested layouts included."""
        from launchgrid.devices.launchpad import LaunchpadCanvas

        ports: set[str] = set()
        for device in self._devices:
            canvas = device.canvas
            if isinstance(canvas, LaunchpadCanvas):
                ports.update((canvas.input_port_name, canvas.output_port_name))
            elif isinstance(canvas, CanvasLayout):
                ports |= canvas.launchpad_port_names()
        return ports

    # ================================================================
    # CANVAS
    # ================================================================

    def bounding_box(self) -> tuple[int, int]:
        """Componentwise maximum of the devices' own bounding boxes.

        Offsets are not taken into account.
        """
        width = 0
        height = 0
        for device in self._devices:
            device_width, device_height = device.canvas.bounding_box()
            width = max(width, device_width)
            height = max(height, device_height)
        return (width, height)

    def iter_pads(self) -> Iterator[Pad]:
        for x, y in self._pixels:
            yield Pad(x, y)

    def get(self, x: int, y: int) -> Color | None:
        pixel = self._pixels.get((x, y))
        return pixel.color_committed if pixel is not None else None

    def get_pending(self, x: int, y: int) -> Color | None:
        pixel = self._pixels.get((x, y))
        return pixel.color_pending if pixel is not None else None

    def set_pending(self, x: int, y: int, color: Color) -> bool:
        pixel = self._pixels.get((x, y))
        if pixel is None:
            return False
        pixel.color_pending = color
        return True

    def lowest_visible_brightness(self) -> float:
        return self._light_threshold

    def device_index_at(self, x: int, y: int) -> int | None:
        """Index of the device owning layout coordinate (x, y)."""
        pixel = self._pixels.get((x, y))
        return pixel.device_index if pixel is not None else None

    def __len__(self) -> int:
        return len(self._pixels)

    def flush(self) -> None:
        """
        Remap pending colors into the devices and flush them.

        Devices are flushed in index order. The first failing device stops
        the loop and its error propagates. Pixels are marked committed only
        for the devices that flushed successfully.
        """
        floors = [device.canvas.lowest_visible_brightness() for device in self._devices]

        for (x, y), pixel in self._pixels.items():
            device = self._devices[pixel.device_index]
            color = transform_color(pixel.color_pending, self._light_threshold, floors[pixel.device_index])
            local_x, local_y = device.to_local(x, y)
            device.canvas.set_pending(local_x, local_y, color)

        flushed: set[int] = set()
        try:
            for index, device in enumerate(self._devices):
                device.canvas.flush()
                flushed.add(index)
        except Exception as e:
            logger.error(f"Flush failed on device {len(flushed)}, skipped remaining devices: {e}")
            raise
        finally:
            for pixel in self._pixels.values():
                if pixel.device_index in flushed:
                    pixel.color_committed = pixel.color_pending

        logger.debug(f"Flushed {len(self._pixels)} pixels across {len(self._devices)} device(s)")

    # ================================================================
    # TEARDOWN
    # ================================================================

    def close(self) -> None:
        """Close every device, then the poller if the layout owns one.

        A device that fails to close does not stop the others from closing.
        """
        for index, device in enumerate(self._devices):
            with ErrorContext(f"close device {index}", logger, re_raise=False):
                device.canvas.close()
        if self._poller is not None:
            self._poller.close()
        logger.info(f"Closed layout with {len(self._devices)} device(s)")

    def __repr__(self) -> str:
        return f"CanvasLayout({len(self._devices)} devices, {len(self._pixels)} pads)"
