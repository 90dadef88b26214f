"""
Launchpad canvas: an 8x8 MemoryCanvas backed by MIDI ports.

Input Flow
==========

::

    Hardware pad press
          ↓
    [MIDI: note_on 81, velocity 100]        (mido I/O thread)
          ↓
    LaunchpadCanvas._handle_message
      mapper.note_to_xy(81) → (0, 0)
          ↓
    Press(x=0, y=0) → callback
          ↓ (inside a layout)
    Press at layout coordinates → client

Output Flow
===========

``flush`` collects every pad whose pending color changed, converts each
to a note and 7-bit RGB, and sends them all in one LED lighting SysEx
message. A failed send raises DeviceTransportError and leaves the pads
uncommitted, so the next flush sends them again.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

import mido

from launchgrid.canvas.memory import MemoryCanvas
from launchgrid.canvas.protocols import MessageCallback, Pad
from launchgrid.exceptions import (
    DeviceNotFoundError,
    DeviceTransportError,
    ErrorContext,
    wrap_transport_error,
)
from launchgrid.models import Color

from .mapper import LaunchpadNoteMapper
from .model import LaunchpadModel
from .sysex import LaunchpadSysEx

logger = logging.getLogger(__name__)


def select_port(
    ports: list[str], model: LaunchpadModel | None = None, exclude: Collection[str] = ()
) -> str | None:
    """
    Pick the first Launchpad MIDI port.

    DAW ports are skipped; only the MIDI port carries programmer mode
    notes and LED messages.

    Args:
        ports: Available port names
        model: Required model (None = any supported model)
        exclude: Port names already in use

    Returns:
        Port name or None if nothing matches
    """
    for port in ports:
        if port in exclude or "DAW" in port.upper():
            continue
        detected = LaunchpadModel.detect(port)
        if detected is not None and (model is None or detected is model):
            return port
    return None


class LaunchpadCanvas(MemoryCanvas):
    """Canvas for a Launchpad X / Mini MK3 / Pro MK3 in programmer mode."""

    def __init__(
        self,
        model: LaunchpadModel,
        input_port_name: str,
        output_port_name: str,
        callback: MessageCallback | None = None,
    ):
        """
        Open the device's ports and enter programmer mode.

        Args:
            model: Launchpad model
            input_port_name: MIDI input port to read pad presses from
            output_port_name: MIDI output port to send LED messages to
            callback: Receives Press/Release messages in canvas coordinates

        Raises:
            DeviceTransportError: If a port cannot be opened
        """
        super().__init__(
            model.grid_size,
            model.grid_size,
            callback=callback,
            lowest_visible_brightness=model.lowest_visible_brightness,
        )
        self.model = model
        self.mapper = LaunchpadNoteMapper(model)
        self.sysex = LaunchpadSysEx(model.sysex_header)
        self.input_port_name = input_port_name
        self.output_port_name = output_port_name
        self._input: mido.ports.BaseInput | None = None
        self._output: mido.ports.BaseOutput | None = None

        try:
            self._output = mido.open_output(output_port_name)
            self._send(self.sysex.programmer_mode(enable=True))
            self._input = mido.open_input(input_port_name, callback=self._handle_message)
        except Exception as e:
            self.close()
            raise wrap_transport_error(e, model.display_name) from e

        logger.info(
            f"Opened {model.display_name} (in: {input_port_name}, out: {output_port_name})"
        )

    @classmethod
    def guess(
        cls,
        callback: MessageCallback | None = None,
        model: LaunchpadModel | None = None,
        exclude: Collection[str] = (),
    ) -> LaunchpadCanvas:
        """
        Open the first connected Launchpad found by port name.

        Args:
            callback: Receives Press/Release messages in canvas coordinates
            model: Required model (None = any supported model)
            exclude: Port names already claimed by other canvases

        Raises:
            DeviceNotFoundError: If no matching input or output port exists
        """
        description = model.display_name if model else "Launchpad"

        input_names = mido.get_input_names()
        input_name = select_port(input_names, model, exclude)
        if input_name is None:
            raise DeviceNotFoundError(description, input_names)

        detected = model or LaunchpadModel.detect(input_name)

        output_names = mido.get_output_names()
        if input_name in output_names and input_name not in exclude:
            output_name = input_name
        else:
            output_name = select_port(output_names, detected, exclude)
        if output_name is None:
            raise DeviceNotFoundError(f"{description} output", output_names)

        logger.debug(f"Guessed {detected.display_name}: in={input_name}, out={output_name}")
        return cls(detected, input_name, output_name, callback)

    # ================================================================
    # OUTPUT
    # ================================================================

    def _write(self, changes: list[tuple[Pad, Color]]) -> None:
        specs = []
        for pad, color in changes:
            note = self.mapper.xy_to_note(pad.x, pad.y)
            if note is None:
                logger.warning(f"Skipping pad without note: {pad}")
                continue
            specs.append(self.sysex.rgb(note, *color.to_7bit()))

        if specs:
            self._send(self.sysex.led_lighting(specs))
            logger.debug(f"Set {len(specs)} LEDs on {self.model.display_name}")

    def _send(self, message: mido.Message) -> None:
        if self._output is None:
            raise DeviceTransportError(self.model.display_name, "output port is closed")
        try:
            self._output.send(message)
        except Exception as e:
            raise wrap_transport_error(e, self.model.display_name) from e

    # ================================================================
    # INPUT
    # ================================================================

    def _handle_message(self, msg: mido.Message) -> None:
        """
        Translate a MIDI message into a Press/Release.

        Called from mido's internal I/O thread.
        """
        try:
            if msg.type not in ("note_on", "note_off"):
                logger.debug(f"Unhandled message: {msg}")
                return

            x, y = self.mapper.note_to_xy(msg.note)
            if x is None or y is None:
                logger.debug(f"Ignoring note outside grid: {msg.note}")
                return

            # Note on with velocity 0 is actually note off
            if msg.type == "note_on" and msg.velocity > 0:
                self.press(x, y)
            else:
                self.release(x, y)
        except Exception as e:
            logger.error(f"Error handling MIDI message {msg}: {e}", exc_info=True)

    # ================================================================
    # LIFECYCLE
    # ================================================================

    @property
    def is_open(self) -> bool:
        return self._output is not None

    def close(self) -> None:
        """Turn the LEDs off, leave programmer mode and close both ports."""
        if self._input is not None:
            with ErrorContext(f"close {self.input_port_name}", logger, re_raise=False):
                self._input.close()
            self._input = None

        if self._output is not None:
            with ErrorContext(f"reset {self.model.display_name}", logger, re_raise=False):
                off = [
                    self.sysex.rgb(self.mapper.xy_to_note(pad.x, pad.y), 0, 0, 0)
                    for pad in self.iter_pads()
                ]
                self._send(self.sysex.led_lighting(off))
                self._send(self.sysex.programmer_mode(enable=False))
            with ErrorContext(f"close {self.output_port_name}", logger, re_raise=False):
                self._output.close()
            self._output = None
            logger.info(f"Closed {self.model.display_name}")

    def __repr__(self) -> str:
        return f"LaunchpadCanvas({self.model.display_name}, {self.input_port_name!r})"
