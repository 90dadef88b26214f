"""Supported Launchpad models and how to recognize them."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

NOVATION_SYSEX_PREFIX = (0x00, 0x20, 0x29, 0x02)


@dataclass(frozen=True)
class _ModelInfo:
    display_name: str
    sysex_model_id: int
    # Upper-case fragments of the port names the model shows up under
    port_tags: tuple[str, ...]


_INFO = {
    "x": _ModelInfo("Launchpad X", 0x0C, ("LPX",)),
    "mini": _ModelInfo("Launchpad Mini MK3", 0x0D, ("LPMINIMK3", "MINI")),
    "pro": _ModelInfo("Launchpad Pro MK3", 0x0E, ("LPPROMK3", "PRO")),
}


class LaunchpadModel(Enum):
    """Launchpad MK3 family members. Values are the names used in layout files."""

    X = "x"
    MINI_MK3 = "mini"
    PRO_MK3 = "pro"

    @property
    def _info(self) -> _ModelInfo:
        return _INFO[self.value]

    @property
    def sysex_header(self) -> list[int]:
        """Manufacturer and model bytes that start every SysEx message."""
        return [*NOVATION_SYSEX_PREFIX, self._info.sysex_model_id]

    @property
    def display_name(self) -> str:
        return self._info.display_name

    @property
    def grid_size(self) -> int:
        """Pads per row and column. All current models are 8x8."""
        return 8

    @property
    def lowest_visible_brightness(self) -> float:
        """Dimmest channel value that still lights a pad (one 7-bit RGB step)."""
        return 1 / 127

    @classmethod
    def detect(cls, port_name: str) -> Optional["LaunchpadModel"]:
        """
        Recognize the model from a MIDI port name.

        Mini and Pro are checked first since their names also contain
        "Launchpad". Any other Launchpad port is assumed to be an X.

        Returns:
            The model, or None if the port is not a Launchpad
        """
        name = port_name.upper()
        for model in (cls.MINI_MK3, cls.PRO_MK3, cls.X):
            if any(tag in name for tag in model._info.port_tags):
                return model
        if "LAUNCHPAD" in name:
            return cls.X
        return None
