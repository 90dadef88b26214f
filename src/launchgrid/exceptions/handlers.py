"""
Helpers for raising, converting and reporting launchgrid errors.

| Scenario | Use This |
|----------|----------|
| Layout file syntax error | `ConfigFileInvalidError` |
| Layout value invalid | `ConfigValidationError` (via `wrap_pydantic_error`) |
| Two devices on the same pad | `LayoutOverlapError` |
| MIDI port failure | `DeviceTransportError` (via `wrap_transport_error`) |
| Cleanup that must not stop other cleanup | `with ErrorContext("close canvas", re_raise=False): ...` |
"""

import logging
from typing import Optional

from .base import LaunchGridError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import DeviceTransportError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log failures of a block and optionally swallow them.

    Teardown code uses ``re_raise=False`` so that one device failing to
    close does not keep the rest open::

        for device in devices:
            with ErrorContext(f"close {device}", logger, re_raise=False) as ctx:
                device.close()
            if ctx.error:
                failed.append(device)
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Args:
            operation: What the block does, used in log messages ("close launchpad")
            logger_instance: Logger to report to (defaults to this module's)
            re_raise: Let the exception propagate after logging it
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None:
            return False

        self.error = exc_val
        if isinstance(exc_val, LaunchGridError):
            # Expected failure, the message says it all
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def _field_name(error_details: dict) -> str:
    return ".".join(str(loc) for loc in error_details.get("loc", ("unknown",)))


def wrap_pydantic_error(error: Exception, file_path: str) -> LaunchGridError:
    """
    Turn a pydantic ValidationError raised while loading a layout file into
    a configuration error.

    JSON syntax errors become ConfigFileInvalidError; everything else a
    ConfigValidationError naming the offending field (or summarizing all
    of them when several fail).
    """
    from pydantic import ValidationError

    message = str(error)
    if "json_invalid" in message or "Invalid JSON" in message:
        # "Invalid JSON: <parser message> [type=json_invalid, ..."
        parse_error = message.split("Invalid JSON:", 1)[-1].split("[type=", 1)[0].strip()
        return ConfigFileInvalidError(file_path, parse_error)

    details = error.errors() if isinstance(error, ValidationError) else []
    if len(details) == 1:
        return ConfigValidationError(
            field=_field_name(details[0]),
            value=details[0].get("input"),
            error_msg=details[0].get("msg", "validation failed"),
            file_path=file_path,
        )
    if details:
        lines = [f"  - {_field_name(d)}: {d.get('msg', 'validation failed')}" for d in details]
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(details)} validation errors:\n" + "\n".join(lines),
            file_path=file_path,
        )
    return ConfigValidationError(field="unknown", value=None, error_msg=message, file_path=file_path)


def wrap_transport_error(error: Exception, device_name: str) -> DeviceTransportError:
    """
    Wrap an exception from mido or its backend as a DeviceTransportError.

    Transport errors pass through as they are.
    """
    if isinstance(error, DeviceTransportError):
        return error
    return DeviceTransportError(device_name, original_error=f"{type(error).__name__}: {error}")


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Message and recovery hint to show the user for ``error``.

    Errors outside the launchgrid hierarchy are shown as
    ``"<ExceptionType>: <message>"`` without a hint.
    """
    if isinstance(error, LaunchGridError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
