"""Programmer-mode note numbering of the Launchpad grid."""

from typing import Optional, Tuple

from .model import LaunchpadModel


class LaunchpadNoteMapper:
    """
    Translate between programmer-mode MIDI notes and canvas pads.

    The hardware numbers rows from the bottom, the canvas from the top::

        y=0:  81 82 83 84 85 86 87 88
        y=1:  71 72 73 74 75 76 77 78
        ...
        y=7:  11 12 13 14 15 16 17 18

    Notes ending in 9 (and the top row of function buttons) are not grid
    pads.
    """

    FIRST_NOTE = 11
    ROW_STRIDE = 10

    def __init__(self, model: LaunchpadModel):
        self.model = model
        self.size = model.grid_size

    def note_to_xy(self, note: int) -> Tuple[Optional[int], Optional[int]]:
        """
        Pad coordinates of ``note``.

        Returns:
            (x, y), or (None, None) if the note is not a grid pad
        """
        if note < self.FIRST_NOTE:
            return (None, None)

        row_from_bottom, x = divmod(note - self.FIRST_NOTE, self.ROW_STRIDE)
        if x >= self.size or row_from_bottom >= self.size:
            return (None, None)
        return (x, self.size - 1 - row_from_bottom)

    def xy_to_note(self, x: int, y: int) -> Optional[int]:
        """Note of pad (x, y), or None outside the grid."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        row_from_bottom = self.size - 1 - y
        return self.FIRST_NOTE + row_from_bottom * self.ROW_STRIDE + x
