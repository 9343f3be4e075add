"""Perspective camera."""

from __future__ import annotations

import math

import numpy as np

from .glmath import frustum, look_at
from .transformable import Transformable


class Camera(Transformable):
    """A camera looking along its negative front axis."""

    def __init__(
        self,
        near_plane: float = 1.0,
        far_plane: float = 10.0,
        fov_half_angle: float = 45.0,
        aspect_ratio: float = 1.6,
    ) -> None:
        super().__init__(True)
        self.near_plane = near_plane
        self.far_plane = far_plane
        self.fov_half_angle = fov_half_angle
        self.aspect_ratio = aspect_ratio

    def view_matrix(self) -> np.ndarray:
        """Return the world-to-eye matrix."""
        return look_at(self.position, self.position - self.front, self.up)

    def perspective_matrix(self) -> np.ndarray:
        """Return the projection matrix for this camera's view volume."""
        height = 2 * self.near_plane * math.tan(math.radians(self.fov_half_angle))
        width = height * self.aspect_ratio
        return frustum(
            -width / 2, width / 2, -height / 2, height / 2, self.near_plane, self.far_plane
        )

    def eye_position(self) -> np.ndarray:
        """Return the camera position."""
        return self.position.copy()