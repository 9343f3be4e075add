"""Indexed triangle meshes."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .glmath import Vector, scale3d, translate3d


class Mesh:
    """Vertices with optional normals and texture coordinates, plus face indices."""

    def __init__(
        self,
        vertices: Iterable[Vector],
        indices: Iterable[int] = (),
        normals: Iterable[Vector] | None = None,
        uv_coords: Iterable[Vector] | None = None,
    ) -> None:
        self.vertices = np.array(list(vertices), dtype=float).reshape(-1, 3)
        self.indices = np.array(list(indices), dtype=int)
        self.normals = np.array(list(normals or ()), dtype=float).reshape(-1, 3)
        self.uv_coords = np.array(list(uv_coords or ()), dtype=float).reshape(-1, 2)

    def bounding_box(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the minimum and maximum corner of the axis-aligned bounds."""
        if len(self.vertices) == 0:
            raise ValueError("an empty mesh has no bounding box")
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def apply_transform(self, matrix: np.ndarray) -> None:
        """Transform every vertex as a homogeneous point by ``matrix``."""
        homogeneous = np.hstack([self.vertices, np.ones((len(self.vertices), 1))])
        self.vertices = (homogeneous @ np.asarray(matrix, dtype=float).T)[:, :3]

    def normalize(self) -> None:
        """Center the mesh on the origin and scale its largest extent to 2."""
        low, high = self.bounding_box()
        center = (low + high) / 2
        extent = float(np.max(high - low))
        if extent == 0.0:
            raise ValueError("cannot normalize a mesh with zero extent")
        factor = 2.0 / extent
        self.apply_transform(scale3d((factor, factor, factor)) @ translate3d(-center))