"""Free camera orientation and movement core."""

from .angles import TWO_PI, normalize_angle
from .camera import CameraState
from .controller import CameraController, InputFrame, StepResult
from .exceptions import FreecamError, NonFiniteAngleError, SettingsError
from .settings import CameraSettings, ControllerConfig

__all__ = [
    "TWO_PI",
    "normalize_angle",
    "CameraState",
    "CameraController",
    "InputFrame",
    "StepResult",
    "FreecamError",
    "NonFiniteAngleError",
    "SettingsError",
    "CameraSettings",
    "ControllerConfig",
]
