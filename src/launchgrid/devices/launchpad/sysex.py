"""
Low-level SysEx message builder for Launchpad devices.

SysEx messages are manufacturer-specific MIDI messages that allow control
beyond standard MIDI. For Novation Launchpad devices::

    [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0C, ...]
     │     └──────┬──────┘  │    └─ Model ID (0x0C = X, 0x0D = Mini, 0x0E = Pro)
     │         Novation      └─ Product family
     Start of SysEx

mido adds the leading 0xF0 and trailing 0xF7 itself.

Commands used here:

- **0x03**: LED lighting. Followed by one spec per LED:
  ``(lighting_type, led_note, *data)``. For RGB (type 3) the data is
  three 7-bit channels.
- **0x0E**: Programmer mode (1 = on, 0 = off).

Several LEDs fit in one message, which is how a whole canvas flush goes
out in a single write.

This module only knows MIDI notes and byte sequences; coordinates and
colors are translated by LaunchpadCanvas.
"""

from enum import Enum

import mido


class LightingMode(Enum):
    """LED lighting types."""

    STATIC = 0  # Static color from palette
    FLASHING = 1  # Flashing between two colors
    PULSING = 2  # Pulsing color
    RGB = 3  # Direct RGB color


LED_LIGHTING_COMMAND = 0x03
PROGRAMMER_MODE_COMMAND = 0x0E


class LaunchpadSysEx:
    """Low-level SysEx message builder for Launchpad devices."""

    def __init__(self, header: list[int]):
        """
        Initialize with SysEx header.

        Args:
            header: Raw SysEx header bytes
        """
        self.header = header

    def programmer_mode(self, enable: bool) -> mido.Message:
        """Build programmer mode toggle message."""
        data = [*self.header, PROGRAMMER_MODE_COMMAND, 1 if enable else 0]
        return mido.Message("sysex", data=data)

    def led_lighting(self, specs: list[tuple[int, ...]]) -> mido.Message:
        """
        Build LED lighting SysEx message.

        Args:
            specs: List of (lighting_type, led_note, *data_bytes)
                   NOTE: led_note is hardware MIDI note, not a coordinate
        """
        data = [*self.header, LED_LIGHTING_COMMAND]
        for spec in specs:
            data.extend(spec)
        return mido.Message("sysex", data=data)

    def rgb(self, note: int, r: int, g: int, b: int) -> tuple[int, ...]:
        """LED spec lighting ``note`` with a 7-bit RGB color."""
        return (LightingMode.RGB.value, note, r, g, b)
