"""Moves a transformable along a curve, orienting it by the curve's frame."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .curve import Curve
from .transformable import Transformable

FRAMES_PER_STEP = 30


class Animator:
    """Steps a transformable through the vertices of a curve."""

    def __init__(
        self,
        transformable: Transformable,
        curve: Curve,
        tangents: Sequence[np.ndarray],
        second_derivatives: Sequence[np.ndarray],
    ) -> None:
        self.transformable = transformable
        self.curve = curve
        self.tangents = tangents
        self.second_derivatives = second_derivatives
        self.next_index = 1
        self.frame_counter = 0
        self.set_to_animate = False

    def _place_at(self, index: int) -> None:
        self.transformable.position = np.array(self.curve[index], dtype=float)
        front = np.asarray(self.tangents[index], dtype=float)
        up = np.cross(front, np.asarray(self.second_derivatives[index], dtype=float))
        right = np.cross(front, up)
        self.transformable.set_orientation(front, up, right)

    def move_to_starting_position(self) -> None:
        """Place the transformable at the curve's first vertex and arm the animation."""
        self._place_at(0)
        self.set_to_animate = True

    def animate(self) -> bool:
        """Advance one frame; return whether the animation is still running.

        The transformable moves to the next vertex every ``FRAMES_PER_STEP + 1``
        frames. When the end is reached the animation rewinds and reports False.
        """
        if not self.set_to_animate:
            return False

        if self.next_index == len(self.curve):
            self.next_index = 1
            return False

        if self.frame_counter >= FRAMES_PER_STEP:
            self._place_at(self.next_index)
            self.next_index += 1
            self.frame_counter = 0
        else:
            self.frame_counter += 1
        return True