"""Free camera orientation and movement state."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Optional, Tuple

import numpy as np
from pygame.math import Vector3

from . import quaternion
from .angles import normalize_angle
from .exceptions import NonFiniteAngleError
from .settings import CameraSettings


@dataclass
class CameraState:
    """Orientation and pending movement of a single free camera.

    World space is Y up, Z out of the screen, X to the right. Angles are
    radians kept in ``[0, 2*pi)``. Deltas and the movement vector only cover
    the current step: the driver reads them after applying a step's input and
    then calls :meth:`reset_deltas` once. Reading before all input has been
    applied gives a partial update.
    """

    settings: CameraSettings = field(default_factory=CameraSettings)
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    yaw_delta: float = 0.0
    pitch_delta: float = 0.0
    roll_delta: float = 0.0
    movement_vector: Vector3 = field(default_factory=Vector3)
    movement_occurred: bool = False
    movement_speed: Optional[float] = None
    rotation_speed: Optional[float] = None

    def __post_init__(self) -> None:
        if self.movement_speed is None:
            self.movement_speed = self.settings.movement_speed
        if self.rotation_speed is None:
            self.rotation_speed = self.settings.rotation_speed
        self.yaw = normalize_angle(self.yaw)
        self.pitch = normalize_angle(self.pitch)
        self.roll = normalize_angle(self.roll)

    # ------------------------------------------------------------------
    # Orientation
    # ------------------------------------------------------------------

    def set_yaw(self, angle: float) -> None:
        self.yaw = self._checked("yaw", angle)

    def set_pitch(self, angle: float) -> None:
        self.pitch = self._checked("pitch", angle)

    def set_roll(self, angle: float) -> None:
        self.roll = self._checked("roll", angle)

    @staticmethod
    def _checked(axis: str, angle: float) -> float:
        if not math.isfinite(angle):
            raise NonFiniteAngleError(axis, angle)
        return normalize_angle(angle)

    def rotate_yaw(self, amount: float) -> None:
        step = self.rotation_speed * amount
        self.yaw = normalize_angle(self.yaw + step)
        self.yaw_delta = normalize_angle(self.yaw_delta + step)

    def rotate_pitch(self, amount: float) -> None:
        step = self.rotation_speed * amount
        self.pitch = normalize_angle(self.pitch + step)
        self.pitch_delta = normalize_angle(self.pitch_delta + step)

    def rotate_roll(self, amount: float) -> None:
        """Roll by ``amount``.

        Unlike yaw and pitch, the roll delta holds only the latest call's
        rotation rather than the sum over the step.
        """
        step = self.rotation_speed * amount
        self.roll = normalize_angle(self.roll + step)
        self.roll_delta = normalize_angle(step)

    def reset_angles(self) -> None:
        """Return to the home orientation from the settings."""
        initial_yaw, initial_pitch, initial_roll = self.settings.home_angles()
        self.set_pitch(initial_pitch)
        self.set_roll(initial_roll)
        self.set_yaw(initial_yaw)

    def angles(self) -> Tuple[float, float, float]:
        return self.yaw, self.pitch, self.roll

    def deltas(self) -> Tuple[float, float, float]:
        return self.yaw_delta, self.pitch_delta, self.roll_delta

    def look_quaternion(self) -> np.ndarray:
        """Unit wxyz quaternion for the current angles.

        Yaw is the outermost rotation, so it always turns about world up
        whatever the current pitch and roll. Changing the composition order
        changes how combined yaw, pitch and roll look on screen.
        """
        pitch_q = quaternion.from_axis_angle(quaternion.X_AXIS, -self.pitch)
        yaw_q = quaternion.from_axis_angle(quaternion.Y_AXIS, -self.yaw)
        roll_q = quaternion.from_axis_angle(quaternion.Z_AXIS, -self.roll)

        pitch_roll = quaternion.compose(pitch_q, roll_q)
        look = quaternion.compose(yaw_q, pitch_roll)
        return quaternion.normalize(look)

    def look_matrix(self, look_q: Optional[np.ndarray] = None) -> np.ndarray:
        if look_q is None:
            look_q = self.look_quaternion()
        return quaternion.to_matrix(look_q)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def set_movement_speed(self, speed: float) -> None:
        self.movement_speed = speed

    def set_rotation_speed(self, speed: float) -> None:
        self.rotation_speed = speed

    def move_forward(self, amount: float) -> None:
        # Z is out of the screen, so forward accumulates negative.
        self.movement_vector.z -= self.movement_speed * amount
        self.movement_occurred = True

    def move_right(self, amount: float) -> None:
        self.movement_vector.x += self.movement_speed * amount
        self.movement_occurred = True

    def move_up(self, amount: float) -> None:
        self.movement_vector.y += (
            self.movement_speed * amount * self.settings.y_movement_multiplier
        )
        self.movement_occurred = True

    def new_position(
        self, current_position, look_q: Optional[np.ndarray] = None
    ) -> Vector3:
        """Position after applying this step's movement to ``current_position``.

        Right and forward follow the camera orientation; up is always world Y.
        Without any movement call this step the result equals the input.
        """
        position = Vector3(current_position)
        if not self.movement_occurred:
            return position

        look = self.look_matrix(look_q)
        right = Vector3(*look[:, 0])
        forward = Vector3(*look[:, 2])
        position += right * self.movement_vector.x
        position += forward * -self.movement_vector.z
        position.y += self.movement_vector.y
        return position

    def reset_deltas(self) -> None:
        self.movement_occurred = False
        self.movement_vector = Vector3()
        self.yaw_delta = 0.0
        self.pitch_delta = 0.0
        self.roll_delta = 0.0
