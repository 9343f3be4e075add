"""Objects with a position, an orientation frame and a scale."""

from __future__ import annotations

import numpy as np

from .glmath import Vector, normalize, rotation, scale3d, translate3d

_Y_AXIS = np.array([0.0, 1.0, 0.0])


class Transformable:
    """Something placed in the world by a position, a front/up/right frame and a scale."""

    def __init__(self, is_camera: bool = False) -> None:
        self.position = np.zeros(3)
        self.front = np.array([0.0, 0.0, -1.0 if is_camera else 1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.scale = np.ones(3)
        self.pitch_deg = 0.0

    def model_matrix(self) -> np.ndarray:
        """Return translation * orientation * scale."""
        orientation = np.identity(4)
        orientation[:3, 0] = self.right
        orientation[:3, 1] = self.up
        orientation[:3, 2] = self.front
        return translate3d(self.position) @ orientation @ scale3d(self.scale)

    def rotate(self, rot: np.ndarray) -> None:
        """Apply ``rot`` to the orientation frame, keeping each axis unit length."""

        def turn(v: np.ndarray) -> np.ndarray:
            out = rot @ np.append(v, 1.0)
            return normalize(out[:3] / out[3])

        self.front = turn(self.front)
        self.up = turn(self.up)
        self.right = turn(self.right)

    def global_move(self, delta: Vector) -> None:
        """Translate by ``delta`` in world coordinates."""
        self.position = self.position + np.asarray(delta, dtype=float)

    def set_orientation(self, front: Vector, up: Vector, right: Vector) -> None:
        """Replace the orientation frame."""
        self.front = np.array(front, dtype=float)
        self.up = np.array(up, dtype=float)
        self.right = np.array(right, dtype=float)

    def rotate_fps(
        self, x_offset: float, y_offset: float, constrain_pitch: float
    ) -> np.ndarray:
        """Return a one-degree yaw/pitch step for the given cursor offsets.

        Pitch is tracked in whole degrees and kept within ``constrain_pitch``.
        """
        matrix = np.identity(4)

        if x_offset < 0:
            matrix = matrix @ rotation(-1.0, _Y_AXIS)
        elif x_offset > 0:
            matrix = matrix @ rotation(1.0, _Y_AXIS)

        if y_offset > 0 and self.pitch_deg > -constrain_pitch:
            matrix = matrix @ rotation(-1.0, self.right)
            self.pitch_deg -= 1
        elif y_offset < 0 and self.pitch_deg < constrain_pitch:
            matrix = matrix @ rotation(1.0, self.right)
            self.pitch_deg += 1

        return matrix