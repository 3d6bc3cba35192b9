"""Pytest configuration and shared fixtures."""

import pytest

from freecam import CameraSettings, CameraState


@pytest.fixture
def settings():
    """Settings with round numbers so expected offsets are easy to read."""
    return CameraSettings(
        movement_speed=2.0,
        rotation_speed=0.5,
        y_movement_multiplier=0.25,
    )


@pytest.fixture
def camera(settings):
    return CameraState(settings)
