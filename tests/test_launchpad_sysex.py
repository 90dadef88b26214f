"""Unit tests for LaunchpadSysEx."""

import pytest

from launchgrid.devices.launchpad import LaunchpadModel, LaunchpadSysEx, LightingMode


class TestLaunchpadSysEx:
    """Test SysEx message building."""

    @pytest.fixture
    def sysex_mini(self):
        """Create SysEx builder for Mini MK3."""
        return LaunchpadSysEx(LaunchpadModel.MINI_MK3.sysex_header)

    def test_programmer_mode_enable(self, sysex_mini):
        """Test enabling programmer mode."""
        msg = sysex_mini.programmer_mode(enable=True)

        assert msg.type == "sysex"
        assert list(msg.data) == [0x00, 0x20, 0x29, 0x02, 0x0D, 0x0E, 0x01]

    def test_programmer_mode_disable(self, sysex_mini):
        """Test disabling programmer mode."""
        msg = sysex_mini.programmer_mode(enable=False)
        assert list(msg.data) == [0x00, 0x20, 0x29, 0x02, 0x0D, 0x0E, 0x00]

    def test_programmer_mode_different_models(self):
        """Each model puts its own byte in the header."""
        for model, model_byte in [
            (LaunchpadModel.X, 0x0C),
            (LaunchpadModel.MINI_MK3, 0x0D),
            (LaunchpadModel.PRO_MK3, 0x0E),
        ]:
            msg = LaunchpadSysEx(model.sysex_header).programmer_mode(enable=True)
            assert msg.data[4] == model_byte

    def test_rgb_spec(self, sysex_mini):
        """RGB specs start with the RGB lighting type."""
        assert sysex_mini.rgb(81, 127, 0, 64) == (LightingMode.RGB.value, 81, 127, 0, 64)

    def test_led_lighting_batches_specs(self, sysex_mini):
        """Several LEDs go out in one message."""
        msg = sysex_mini.led_lighting([sysex_mini.rgb(81, 127, 0, 0), sysex_mini.rgb(11, 0, 0, 127)])

        assert list(msg.data) == [
            0x00, 0x20, 0x29, 0x02, 0x0D, 0x03,
            3, 81, 127, 0, 0,
            3, 11, 0, 0, 127,
        ]

    def test_led_lighting_empty(self, sysex_mini):
        """No specs still yields a valid message."""
        assert list(sysex_mini.led_lighting([]).data) == [0x00, 0x20, 0x29, 0x02, 0x0D, 0x03]
