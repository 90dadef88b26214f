"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Layout file has invalid syntax
- ConfigValidationError: Layout values fail validation
- LayoutOverlapError: Two devices were placed on the same pad
"""

from typing import Any

from .base import LaunchGridError


class ConfigurationError(LaunchGridError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Layout file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid layout file
            parse_error: The parsing error message
        """
        user_msg = "Layout file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Layout file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "empty" in parse_error.lower():
            user_msg = "Layout file is empty"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Layout values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the layout file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your layout file"
        if file_path:
            recovery += f"\nLayout file: {file_path}"

        if "rotation" in field.lower():
            recovery += "\nValid rotations: none, left, right, upside_down"
        elif "light_threshold" in field.lower():
            recovery += "\nThe threshold must be at least 0.0 and below 1.0"
        elif "model" in field.lower():
            recovery += "\nValid models: x, mini, pro"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.error_msg = error_msg
        self.file_path = file_path


class LayoutOverlapError(ConfigurationError):
    """Two devices in a layout claim the same global coordinate.

    This is always a placement bug, never a runtime condition, so it is
    flagged as non-recoverable.
    """

    def __init__(self, coordinate: tuple[int, int], existing_index: int, new_index: int):
        """
        Initialize overlap error.

        Args:
            coordinate: Global (x, y) claimed twice
            existing_index: Index of the device that already owns the coordinate
            new_index: Index the device being added would have received
        """
        x, y = coordinate
        super().__init__(
            user_message=(
                f"Found overlap at ({x}|{y}) with canvas {existing_index} "
                f"while adding canvas {new_index} to layout (zero-indexed)"
            ),
            technical_message=(
                f"Layout overlap: global ({x}, {y}) owned by device {existing_index}, "
                f"claimed again by device {new_index}"
            ),
            recoverable=False,
            recovery_hint="Move one of the devices so that their pads no longer share coordinates"
        )
        self.coordinate = coordinate
        self.existing_index = existing_index
        self.new_index = new_index
