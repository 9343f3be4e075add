"""Small linear-algebra helpers for 3D transforms.

Matrices are 4x4 numpy arrays indexed ``[row, column]`` and act on column
vectors, so ``matrix @ point`` transforms a homogeneous point.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

Vector = Sequence[float] | np.ndarray


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Return a three-component float vector."""
    return np.array([x, y, z], dtype=float)


def normalize(v: Vector) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def _from_columns(*values: float) -> np.ndarray:
    """Build a matrix from 16 values listed column by column."""
    return np.array(values, dtype=float).reshape(4, 4).T


def translate3d(vector: Vector) -> np.ndarray:
    """Return a translation matrix by ``vector``."""
    x, y, z = (float(c) for c in vector)
    return _from_columns(
        1, 0, 0, 0,
        0, 1, 0, 0,
        0, 0, 1, 0,
        x, y, z, 1,
    )


def scale3d(vector: Vector) -> np.ndarray:
    """Return a scaling matrix with per-axis factors from ``vector``."""
    x, y, z = (float(c) for c in vector)
    return np.diag([x, y, z, 1.0])


def rotate3d(axis: str, angle: float) -> np.ndarray:
    """Return a rotation of ``angle`` degrees about the ``'x'``, ``'y'`` or ``'z'`` axis.

    Any other axis name yields the identity matrix.
    """
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    if axis == "x":
        return _from_columns(
            1, 0, 0, 0,
            0, c, s, 0,
            0, -s, c, 0,
            0, 0, 0, 1,
        )
    if axis == "y":
        return _from_columns(
            c, 0, -s, 0,
            0, 1, 0, 0,
            s, 0, c, 0,
            0, 0, 0, 1,
        )
    if axis == "z":
        return _from_columns(
            c, s, 0, 0,
            -s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        )
    return np.identity(4)


def rotation(degrees: float, axis: Vector) -> np.ndarray:
    """Return a rotation of ``degrees`` about an arbitrary ``axis``."""
    a = normalize(axis)
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    result = np.identity(4)
    result[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return result


def look_at(eye: Vector, center: Vector, view_up: Vector) -> np.ndarray:
    """Return a view matrix for an eye at ``eye`` looking towards ``center``."""
    eye_arr = np.asarray(eye, dtype=float)
    n = eye_arr - np.asarray(center, dtype=float)
    v = np.asarray(view_up, dtype=float)
    u = np.cross(n, v)

    n = normalize(n)
    v = normalize(v)
    u = normalize(u)

    switch_systems = np.identity(4)
    switch_systems[0, :3] = u
    switch_systems[1, :3] = v
    switch_systems[2, :3] = n
    return switch_systems @ translate3d(-eye_arr)


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Return a perspective projection matrix for the given view volume."""
    return _from_columns(
        (2 * near) / (right - left), 0, 0, 0,
        0, (2 * near) / (top - bottom), 0, 0,
        (right + left) / (right - left),
        (top + bottom) / (top - bottom),
        -((far + near) / (far - near)),
        -1,
        0, 0, (-2 * far * near) / (far - near), 1,
    )