"""Errors raised by the camera core."""

from __future__ import annotations


class FreecamError(Exception):
    """Base class for all camera errors."""


class NonFiniteAngleError(FreecamError, ValueError):
    """An absolute angle was set to NaN or infinity."""

    def __init__(self, axis: str, value: float):
        super().__init__(f"{axis} must be a finite angle, got {value!r}")
        self.axis = axis
        self.value = value


class SettingsError(FreecamError, ValueError):
    """Camera settings hold a value the camera cannot work with."""
