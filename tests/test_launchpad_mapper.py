"""Unit tests for LaunchpadNoteMapper and LaunchpadModel."""

import pytest

from launchgrid.devices.launchpad import LaunchpadModel, LaunchpadNoteMapper


class TestLaunchpadNoteMapper:
    """Test note mapping between MIDI notes and canvas coordinates."""

    @pytest.fixture
    def mapper(self):
        """Create a LaunchpadNoteMapper for testing."""
        return LaunchpadNoteMapper(LaunchpadModel.MINI_MK3)

    def test_note_to_xy_corners(self, mapper):
        """Top row is y=0, bottom row is y=7."""
        assert mapper.note_to_xy(81) == (0, 0)  # Top-left
        assert mapper.note_to_xy(88) == (7, 0)  # Top-right
        assert mapper.note_to_xy(11) == (0, 7)  # Bottom-left
        assert mapper.note_to_xy(18) == (7, 7)  # Bottom-right

    def test_note_to_xy_middle(self, mapper):
        """Note 44 = row 3 from the bottom, column 3."""
        assert mapper.note_to_xy(44) == (3, 4)

    def test_note_to_xy_invalid(self, mapper):
        """Notes outside the grid return (None, None)."""
        assert mapper.note_to_xy(0) == (None, None)
        assert mapper.note_to_xy(10) == (None, None)
        assert mapper.note_to_xy(19) == (None, None)  # Column 8
        assert mapper.note_to_xy(89) == (None, None)
        assert mapper.note_to_xy(91) == (None, None)  # Row 8

    def test_xy_to_note_corners(self, mapper):
        """Corner pads map back to their notes."""
        assert mapper.xy_to_note(0, 0) == 81
        assert mapper.xy_to_note(7, 0) == 88
        assert mapper.xy_to_note(0, 7) == 11
        assert mapper.xy_to_note(7, 7) == 18

    def test_xy_to_note_invalid(self, mapper):
        """Invalid coordinates return None."""
        assert mapper.xy_to_note(-1, 0) is None
        assert mapper.xy_to_note(0, 8) is None
        assert mapper.xy_to_note(8, 0) is None

    def test_every_pad_round_trips(self, mapper):
        """xy → note → xy is the identity on the grid."""
        for x in range(8):
            for y in range(8):
                assert mapper.note_to_xy(mapper.xy_to_note(x, y)) == (x, y)


class TestLaunchpadModel:
    """Test model metadata and detection."""

    @pytest.mark.parametrize(
        "port_name, expected",
        [
            ("Launchpad Mini MK3 LPMiniMK3 MIDI", LaunchpadModel.MINI_MK3),
            ("MIDIIN2 (LPMiniMK3 MIDI) 1", LaunchpadModel.MINI_MK3),
            ("Launchpad Pro MK3 LPProMK3 MIDI", LaunchpadModel.PRO_MK3),
            ("Launchpad X LPX MIDI", LaunchpadModel.X),
            ("Launchpad", LaunchpadModel.X),
            ("IAC Driver Bus 1", None),
        ],
    )
    def test_detect(self, port_name, expected):
        """Models are recognized from port names."""
        assert LaunchpadModel.detect(port_name) is expected

    def test_sysex_headers(self):
        """Each model has its own SysEx model byte."""
        assert LaunchpadModel.X.sysex_header[-1] == 0x0C
        assert LaunchpadModel.MINI_MK3.sysex_header[-1] == 0x0D
        assert LaunchpadModel.PRO_MK3.sysex_header[-1] == 0x0E

    def test_brightness_floor(self):
        """The floor is one 7-bit step."""
        assert LaunchpadModel.X.lowest_visible_brightness == pytest.approx(1 / 127)
