"""Polylines sampled from control points."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .glmath import Vector


class Curve:
    """An ordered list of sampled vertices with the control points they came from."""

    def __init__(self, control_vertices: Iterable[Vector] = ()) -> None:
        self.control_vertices = [np.array(v, dtype=float) for v in control_vertices]
        self.vertices: list[np.ndarray] = []
        self.color = np.array([1.0, 1.0, 1.0])

    def add_vertex(self, vertex: Vector) -> None:
        """Append a sampled vertex."""
        self.vertices.append(np.array(vertex, dtype=float))

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.vertices[index]

    def __iter__(self):
        return iter(self.vertices)