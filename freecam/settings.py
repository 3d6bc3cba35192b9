"""Camera configuration and parameter helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Tuple

from .exceptions import SettingsError


DEFAULT_MOVEMENT_SPEED = 0.1
DEFAULT_ROTATION_SPEED = 0.01
DEFAULT_Y_MOVEMENT_MULTIPLIER = 0.5


@dataclass
class CameraSettings:
    """Speeds and home orientation handed to a camera by its host."""

    movement_speed: float = DEFAULT_MOVEMENT_SPEED
    rotation_speed: float = DEFAULT_ROTATION_SPEED
    y_movement_multiplier: float = DEFAULT_Y_MOVEMENT_MULTIPLIER
    initial_yaw: float = 0.0  # radians
    initial_pitch: float = 0.0
    initial_roll: float = 0.0

    def home_angles(self) -> Tuple[float, float, float]:
        return self.initial_yaw, self.initial_pitch, self.initial_roll

    def validate(self) -> None:
        for name, value in self.__dict__.items():
            if not math.isfinite(value):
                raise SettingsError(f"{name} must be finite, got {value!r}")

    def reset_defaults(self) -> None:
        self.__dict__.update(CameraSettings().__dict__)


@dataclass
class ControllerConfig:
    camera: CameraSettings = field(default_factory=CameraSettings)
    log_steps: bool = False
    step_dt: float = 1.0 / 60.0

    def reset_defaults(self) -> None:
        """Restore defaults in place so running controllers see the change."""
        self.camera.reset_defaults()
        defaults = ControllerConfig()
        self.log_steps = defaults.log_steps
        self.step_dt = defaults.step_dt
