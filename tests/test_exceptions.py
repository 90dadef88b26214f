"""Tests for the launchgrid exception hierarchy and handlers."""

import logging

import pytest
from pydantic import ValidationError

from launchgrid.config import LayoutConfig
from launchgrid.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DeviceError,
    DeviceNotFoundError,
    DeviceTransportError,
    ErrorContext,
    LaunchGridError,
    LayoutOverlapError,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)


class TestExceptionHierarchy:
    """Test messages and hierarchy."""

    def test_overlap_message(self):
        """Overlap errors name the coordinate and both device indices."""
        error = LayoutOverlapError((3, 5), 0, 2)

        assert str(error) == (
            "Found overlap at (3|5) with canvas 0 while adding canvas 2 to layout (zero-indexed)"
        )
        assert not error.recoverable
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, LaunchGridError)

    def test_device_not_found(self):
        """Device errors carry a hint pointing at the ports command."""
        error = DeviceNotFoundError("Launchpad Mini MK3", ["IAC Driver Bus 1"])

        assert str(error) == "Could not find a connected Launchpad Mini MK3"
        assert "IAC Driver Bus 1" in error.technical_message
        assert "launchgrid ports" in error.recovery_hint
        assert isinstance(error, DeviceError)

    def test_full_message_includes_hint(self):
        """get_full_message appends the suggestion."""
        error = DeviceTransportError("Launchpad X")
        assert error.get_full_message().endswith("Suggestion: Reconnect the device and try again")

    def test_trailing_comma_hint(self):
        """Trailing commas get a dedicated message."""
        error = ConfigFileInvalidError("layout.json", "trailing comma at line 3")
        assert error.user_message == "Layout file has a trailing comma"


class TestHandlers:
    """Test error conversion helpers."""

    def test_wrap_transport_error(self):
        """Low-level errors are wrapped with the device name."""
        error = wrap_transport_error(OSError("gone"), "Launchpad X")

        assert isinstance(error, DeviceTransportError)
        assert error.device_name == "Launchpad X"
        assert error.original_error == "OSError: gone"

    def test_wrap_transport_error_passthrough(self):
        """Transport errors are not wrapped twice."""
        original = DeviceTransportError("Launchpad X")
        assert wrap_transport_error(original, "other") is original

    def test_wrap_pydantic_error_single_field(self):
        """A single validation error names its field."""
        with pytest.raises(ValidationError) as exc_info:
            LayoutConfig(poller_capacity=0)

        error = wrap_pydantic_error(exc_info.value, "layout.json")

        assert isinstance(error, ConfigValidationError)
        assert error.field == "poller_capacity"
        assert error.file_path == "layout.json"

    def test_wrap_pydantic_error_multiple_fields(self):
        """Several validation errors are summarized."""
        with pytest.raises(ValidationError) as exc_info:
            LayoutConfig(poller_capacity=0, light_threshold=2.0)

        error = wrap_pydantic_error(exc_info.value, "layout.json")

        assert error.field == "multiple fields"
        assert "2 validation errors" in error.error_msg

    def test_format_error_for_display(self):
        """Library errors show their message and hint; others their type."""
        assert format_error_for_display(DeviceTransportError("Launchpad X")) == (
            "Lost communication with Launchpad X",
            "Reconnect the device and try again",
        )
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)


class TestErrorContext:
    """Test the ErrorContext context manager."""

    def test_re_raises_by_default(self):
        with pytest.raises(RuntimeError):
            with ErrorContext("do work"):
                raise RuntimeError("boom")

    def test_suppresses_and_records(self, caplog):
        """re_raise=False logs the failure and keeps the error."""
        with caplog.at_level(logging.ERROR):
            with ErrorContext("close canvas", re_raise=False) as ctx:
                raise DeviceTransportError("Launchpad X", "port vanished")

        assert isinstance(ctx.error, DeviceTransportError)
        assert "Failed to close canvas" in caplog.text

    def test_no_error(self):
        with ErrorContext("do work") as ctx:
            pass
        assert ctx.error is None
