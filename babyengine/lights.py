"""Point and spot light sources."""

from __future__ import annotations

import math

import numpy as np

from .glmath import Vector, frustum, look_at
from .transformable import Transformable

DEPTH_MAP_SIZE = 1024


class Light(Transformable):
    """A positioned light with ambient and source intensities and a depth-map size."""

    def __init__(
        self,
        ambient_intensity: Vector = (0.5, 0.5, 0.5),
        source_intensity: Vector = (1.0, 1.0, 1.0),
    ) -> None:
        super().__init__(False)
        self.ambient_intensity = np.array(ambient_intensity, dtype=float)
        self.source_intensity = np.array(source_intensity, dtype=float)
        self.depth_map_width = DEPTH_MAP_SIZE
        self.depth_map_height = DEPTH_MAP_SIZE


class ReflectorLight(Light):
    """A spot light that looks along its front axis."""

    def __init__(self) -> None:
        super().__init__()
        self.near_plane = 0.1
        self.far_plane = 10.0
        self.fov_half_angle = 15.0
        self.aspect_ratio = 1.6

    def view_matrix(self) -> np.ndarray:
        """Return the world-to-light matrix."""
        return look_at(self.position, self.position + self.front, self.up)

    def perspective_matrix(self) -> np.ndarray:
        """Return the projection matrix of the light's cone."""
        height = 2 * self.near_plane * math.tan(math.radians(self.fov_half_angle))
        width = height * self.aspect_ratio
        return frustum(
            -width / 2, width / 2, -height / 2, height / 2, self.near_plane, self.far_plane
        )