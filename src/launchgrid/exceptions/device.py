"""Device-related exceptions.

- DeviceError: Base class for hardware problems
- DeviceNotFoundError: No MIDI ports matched the requested device
- DeviceTransportError: Sending to or receiving from a device failed
"""

from .base import LaunchGridError


class DeviceError(LaunchGridError):
    """Base class for device errors."""
    pass


class DeviceNotFoundError(DeviceError):
    """No connected device matched the request."""

    def __init__(self, description: str, available_ports: list[str] | None = None):
        """
        Initialize device not found error.

        Args:
            description: What was being looked for (e.g. "Launchpad Mini MK3")
            available_ports: Port names that were inspected
        """
        technical = f"No MIDI ports matched {description}"
        if available_ports is not None:
            technical += f" (available: {available_ports})"

        super().__init__(
            user_message=f"Could not find a connected {description}",
            technical_message=technical,
            recoverable=True,
            recovery_hint=(
                "Check that the device is plugged in and not used by another application.\n"
                "Run 'launchgrid ports' to see available MIDI ports"
            )
        )
        self.description = description
        self.available_ports = available_ports or []


class DeviceTransportError(DeviceError):
    """I/O with a device failed."""

    def __init__(self, device_name: str, original_error: str | None = None):
        """
        Initialize transport error.

        Args:
            device_name: Human-readable device name
            original_error: Underlying error message
        """
        technical = f"Transport failure on {device_name}"
        if original_error:
            technical += f": {original_error}"

        super().__init__(
            user_message=f"Lost communication with {device_name}",
            technical_message=technical,
            recoverable=True,
            recovery_hint="Reconnect the device and try again"
        )
        self.device_name = device_name
        self.original_error = original_error
