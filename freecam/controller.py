"""Per-step driver around a single free camera."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Tuple

import numpy as np
from pygame.math import Vector3

from .camera import CameraState
from .settings import ControllerConfig

logger = logging.getLogger(__name__)


@dataclass
class InputFrame:
    """Signed input amounts for one step, already scaled by elapsed time."""

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    forward: float = 0.0
    right: float = 0.0
    up: float = 0.0

    def is_idle(self) -> bool:
        return not any(
            (self.yaw, self.pitch, self.roll, self.forward, self.right, self.up)
        )

    def scaled(self, factor: float) -> "InputFrame":
        return InputFrame(
            self.yaw * factor,
            self.pitch * factor,
            self.roll * factor,
            self.forward * factor,
            self.right * factor,
            self.up * factor,
        )


@dataclass
class StepResult:
    """What the host needs after a step: absolute pose plus relative motion."""

    position: Vector3
    look_quaternion: np.ndarray
    angles: Tuple[float, float, float]
    deltas: Tuple[float, float, float]
    moved: bool


class CameraController:
    """Applies input frames to a :class:`CameraState` and tracks its position."""

    def __init__(
        self,
        config: Optional[ControllerConfig] = None,
        position=(0.0, 0.0, 0.0),
    ) -> None:
        self.config = config or ControllerConfig()
        self.config.camera.validate()
        self.camera = CameraState(self.config.camera)
        self.position = Vector3(position)
        self.step_index = 0

    def step(self, frame: InputFrame) -> StepResult:
        camera = self.camera
        if frame.yaw:
            camera.rotate_yaw(frame.yaw)
        if frame.pitch:
            camera.rotate_pitch(frame.pitch)
        if frame.roll:
            camera.rotate_roll(frame.roll)
        if frame.forward:
            camera.move_forward(frame.forward)
        if frame.right:
            camera.move_right(frame.right)
        if frame.up:
            camera.move_up(frame.up)

        look_q = camera.look_quaternion()
        self.position = camera.new_position(self.position, look_q)
        result = StepResult(
            position=Vector3(self.position),
            look_quaternion=look_q,
            angles=camera.angles(),
            deltas=camera.deltas(),
            moved=camera.movement_occurred,
        )
        if self.config.log_steps:
            logger.debug(
                "step %d: position=%s angles=%s deltas=%s",
                self.step_index,
                tuple(self.position),
                result.angles,
                result.deltas,
            )
        camera.reset_deltas()
        self.step_index += 1
        return result

    def recenter(self) -> None:
        self.camera.reset_angles()
        logger.info("Camera recentered to %s", self.camera.angles())

    def teleport(self, position) -> None:
        self.position = Vector3(position)
        logger.info("Camera moved to %s", tuple(self.position))

    def set_speeds(
        self,
        movement_speed: Optional[float] = None,
        rotation_speed: Optional[float] = None,
    ) -> None:
        if movement_speed is not None:
            self.camera.set_movement_speed(movement_speed)
        if rotation_speed is not None:
            self.camera.set_rotation_speed(rotation_speed)
