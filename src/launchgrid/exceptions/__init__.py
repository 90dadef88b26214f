"""
Custom exception hierarchy for launchgrid.

## Exception Hierarchy

```
LaunchGridError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   ├── ConfigValidationError
│   └── LayoutOverlapError
└── DeviceError
    ├── DeviceNotFoundError
    └── DeviceTransportError
```

All custom exceptions inherit from `LaunchGridError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

### Example: Overlapping devices

```python
from launchgrid.exceptions import LayoutOverlapError

try:
    layout.add(4, 0, Rotation.NONE, lambda cb: MemoryCanvas(8, 8, cb))
except LayoutOverlapError as e:
    print(e.coordinate, e.existing_index, e.new_index)
```

Errors raised by a device factory passed to `CanvasLayout.add` are not
wrapped; they reach the caller exactly as the factory raised them.
"""

from .base import LaunchGridError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    LayoutOverlapError,
)
from .device import DeviceError, DeviceNotFoundError, DeviceTransportError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)

__all__ = [
    # Base
    "LaunchGridError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "LayoutOverlapError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "DeviceTransportError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
