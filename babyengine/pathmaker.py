"""Builds a control polygon, Bezier, interpolation and B-spline curves from points."""

from __future__ import annotations

import math

import numpy as np

from .curve import Curve
from .glmath import Vector

_SAMPLES = 100
_SEGMENT_SAMPLES = 20
_TANGENT_STRIDE = 10

# Interpolation basis, listed column by column, scaled by 1/18.
_INTERPOLATION = (
    np.array(
        [
            18.0, 0.0, 0.0, 0.0,
            -33.0, 54.0, -27.0, 6.0,
            21.0, -81.0, 81.0, -21.0,
            -6.0, 27.0, -54.0, 33.0,
        ]
    ).reshape(4, 4).T
    / 18.0
)

# Uniform cubic B-spline basis, listed column by column, scaled by 1/6.
_BSPLINE = (
    np.array(
        [
            -1.0, 3.0, -3.0, 1.0,
            3.0, -6.0, 0.0, 4.0,
            -3.0, 3.0, 3.0, 1.0,
            1.0, 0.0, 0.0, 0.0,
        ]
    ).reshape(4, 4).T
    / 6.0
)


def _unit(v: np.ndarray) -> np.ndarray:
    """Scale to unit length; a zero vector gives NaN components."""
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


class Pathmaker:
    """Collects control points and derives the curves used for animation paths.

    After :meth:`remake_curves`, ``curves`` holds, as far as there are enough
    points: the control polygon (2+), the Bezier approximation (3+), the
    interpolation through the last four points (4+), the B-spline (4+) and the
    tangent segments along the B-spline.
    """

    def __init__(self) -> None:
        self.control_vertices: list[np.ndarray] = []
        self.curves: list[Curve] = []
        self.tangent_vectors: list[np.ndarray] = []
        self.second_derivatives: list[np.ndarray] = []
        self.ready_to_animate = False

    def add_control_point(self, point: Vector) -> None:
        """Append a control point."""
        self.control_vertices.append(np.array(point, dtype=float))

    def remake_curves(self) -> None:
        """Rebuild every curve from the current control points."""
        self.curves = []
        self.tangent_vectors = []
        self.second_derivatives = []
        self.ready_to_animate = False

        self._make_control_polygon()
        self._make_approximation_curve()
        self._make_interpolation_curve()
        self._make_bspline_curve()
        self._make_tangents()

        self.ready_to_animate = True

    def animation_curve(self) -> Curve:
        """Return the B-spline curve that animations follow."""
        if len(self.curves) < 4:
            raise LookupError("no B-spline curve: at least four control points are needed")
        return self.curves[3]

    def _make_control_polygon(self) -> None:
        if len(self.control_vertices) < 2:
            return
        curve = Curve(self.control_vertices)
        for vertex in self.control_vertices:
            curve.add_vertex(vertex)
        self.curves.append(curve)

    def _make_approximation_curve(self) -> None:
        if len(self.control_vertices) < 3:
            return
        curve = Curve(self.control_vertices)
        n = len(self.control_vertices) - 1
        for i in range(_SAMPLES + 1):
            t = i / _SAMPLES
            point = sum(
                (
                    vertex * (math.comb(n, j) * t**j * (1 - t) ** (n - j))
                    for j, vertex in enumerate(self.control_vertices)
                ),
                np.zeros(3),
            )
            curve.add_vertex(point)
        curve.color = np.array([1.0, 0.0, 1.0])
        self.curves.append(curve)

    def _make_interpolation_curve(self) -> None:
        if len(self.control_vertices) < 4:
            return
        last_four = self.control_vertices[-4:]
        curve = Curve(last_four)
        a0, a1, a2, a3 = _INTERPOLATION.T @ np.array(last_four)
        for i in range(_SAMPLES + 1):
            t = i / _SAMPLES
            point = (
                a0
                + a1 * (3 * t - 3 * t**2 + t**3)
                + a2 * (3 * t**2 - 2 * t**3)
                + a3 * t**3
            )
            curve.add_vertex(point)
        curve.color = np.array([0.2, 0.2, 1.0])
        self.curves.append(curve)

    def _make_bspline_curve(self) -> None:
        if len(self.control_vertices) < 4:
            return
        curve = Curve(self.control_vertices)
        points = np.array(self.control_vertices)
        for start in range(len(points) - 3):
            segment = np.zeros((4, 4))
            segment[:, :3] = points[start:start + 4]
            basis = _BSPLINE @ segment
            for i in range(_SEGMENT_SAMPLES):
                t = i / _SEGMENT_SAMPLES
                curve.add_vertex((np.array([t**3, t**2, t, 1.0]) @ basis)[:3])
                tangent = np.array([3 * t**2, 2 * t, 1.0, 0.0]) @ basis
                self.tangent_vectors.append(_unit(tangent[:3]))
                second = np.array([6 * t, 2.0, 0.0, 0.0]) @ basis
                self.second_derivatives.append(_unit(second[:3]))
        curve.color = np.array([0.8, 0.1, 0.1])
        self.curves.append(curve)

    def _make_tangents(self) -> None:
        if len(self.curves) < 4:
            return
        spline = self.curves[3]
        tangents = Curve()
        for i in range(0, len(self.tangent_vectors), _TANGENT_STRIDE):
            tangents.add_vertex(spline[i])
            tangents.add_vertex(spline[i] + 0.5 * self.tangent_vectors[i])
        tangents.color = np.array([0.9, 0.9, 0.0])
        self.curves.append(tangents)