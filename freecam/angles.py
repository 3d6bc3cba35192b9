"""Angle helpers."""
from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` (radians) into ``[0, 2*pi)``.

    ``2*pi`` maps to ``0`` and negative angles wrap to the top of the range.
    Python's modulo already returns a non-negative result for a positive
    divisor, but a tiny negative input can round up to exactly ``2*pi``.
    NaN and infinities come back as NaN.
    """
    wrapped = angle % TWO_PI
    if wrapped >= TWO_PI:
        return 0.0
    return wrapped
