"""Quaternion helpers for camera orientation.

Quaternions are ``np.ndarray`` of shape (4,) in wxyz order: ``w`` is the scalar
part, ``(x, y, z)`` the vector part.
"""
from __future__ import annotations

import math

import numpy as np

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])

IDENTITY = np.array([1.0, 0.0, 0.0, 0.0])


def from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotation of ``angle`` radians about the unit vector ``axis``.

    ``axis`` is expected to be normalized already.
    """
    half = angle / 2.0
    s = math.sin(half)
    return np.array([math.cos(half), axis[0] * s, axis[1] * s, axis[2] * s])


def multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Hamilton product ``q1 * q2``."""
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def compose(first: np.ndarray, then: np.ndarray) -> np.ndarray:
    """Rotation ``first`` followed by rotation ``then``.

    Equivalent to the Hamilton product ``then * first``.
    """
    return multiply(then, first)


def normalize(q: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(q)
    if norm == 0.0:
        return IDENTITY.copy()
    return q / norm


def to_matrix(q: np.ndarray) -> np.ndarray:
    """3x3 rotation matrix of ``q`` in row-vector convention.

    Points are transformed as ``v @ m``, so the columns of the result are the
    rows of the usual column-vector matrix. For a camera orientation the first
    column is the world-space right axis and the third column the look axis.
    """
    w, x, y, z = q
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z
    return np.array(
        [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy)],
            [2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx)],
            [2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy)],
        ]
    )
