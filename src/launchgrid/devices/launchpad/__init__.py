"""Launchpad MK3 family (X, Mini, Pro) canvas over MIDI."""

from .canvas import LaunchpadCanvas, select_port
from .mapper import LaunchpadNoteMapper
from .model import LaunchpadModel
from .sysex import LaunchpadSysEx, LightingMode

__all__ = [
    "LaunchpadCanvas",
    "LaunchpadModel",
    "LaunchpadNoteMapper",
    "LaunchpadSysEx",
    "LightingMode",
    "select_port",
]
