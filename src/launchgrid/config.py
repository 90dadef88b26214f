"""Layout configuration model and layout construction from it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError

from launchgrid.canvas.rotation import Rotation
from launchgrid.devices.launchpad.model import LaunchpadModel
from launchgrid.exceptions import ConfigFileInvalidError, wrap_pydantic_error

if TYPE_CHECKING:
    from launchgrid.canvas import CanvasLayout, CanvasLayoutPoller, MessageCallback

logger = logging.getLogger(__name__)


class DevicePlacement(BaseModel):
    """Where one Launchpad sits in the layout."""

    x: int = Field(default=0, ge=0, description="Layout x of the device's local origin")
    y: int = Field(default=0, ge=0, description="Layout y of the device's local origin")
    rotation: Rotation = Field(default=Rotation.NONE, description="Device rotation")
    model: LaunchpadModel | None = Field(
        default=None, description="Launchpad model to look for (None = any supported model)"
    )


class LayoutConfig(BaseModel):
    """Layout settings and device placements."""

    light_threshold: float = Field(
        default=0.25,
        ge=0.0,
        lt=1.0,
        description="Lowest visible brightness colors are authored against",
    )
    poller_capacity: int = Field(
        default=50, gt=0, description="Queued input messages before devices block"
    )
    devices: list[DevicePlacement] = Field(
        default_factory=list, description="Devices, in the order they are added"
    )

    @classmethod
    def load(cls, path: Path) -> LayoutConfig:
        """
        Load a layout configuration from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid
            ConfigValidationError: If values fail validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        content = path.read_text()
        if not content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            config = cls.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Validation error loading layout from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded layout with {len(config.devices)} device(s) from {path}")
        return config

    def save(self, path: Path) -> None:
        """Save the configuration as JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))


def build_layout(
    config: LayoutConfig, callback: MessageCallback | None = None
) -> tuple[CanvasLayout, CanvasLayoutPoller | None]:
    """
    Create a layout and add every configured Launchpad to it.

    Args:
        config: Layout configuration
        callback: Message callback. If None, a polling layout is created.

    Returns:
        (layout, poller) tuple; poller is None when a callback was given

    Raises:
        DeviceNotFoundError: If a configured Launchpad is not connected
        LayoutOverlapError: If two placements overlap
    """
    from launchgrid.canvas import CanvasLayout

    poller = None
    if callback is None:
        layout, poller = CanvasLayout.polling(
            capacity=config.poller_capacity, light_threshold=config.light_threshold
        )
    else:
        layout = CanvasLayout(callback, light_threshold=config.light_threshold)

    try:
        for placement in config.devices:
            layout.add_by_guess(placement.x, placement.y, placement.rotation, model=placement.model)
    except Exception:
        layout.close()
        raise

    return layout, poller
