"""Keyboard and mouse handling for a flying camera and a controllable vehicle."""

from __future__ import annotations

import enum
import random

import numpy as np

from .animator import Animator
from .glmath import normalize
from .scenegraph import SceneGraph, SGNode
from .transformable import Transformable

_Y_AXIS = np.array([0.0, 1.0, 0.0])


class InputProfile(enum.Enum):
    """What the movement keys control."""

    FLYING_CAMERA = enum.auto()
    VEHICLE_CONTROL = enum.auto()


class Key(enum.IntEnum):
    """Keys the input manager reacts to, numbered as window toolkits report them."""

    A = 65
    D = 68
    E = 69
    Q = 81
    S = 83
    W = 87
    KEY_1 = 49
    KEY_2 = 50
    ESCAPE = 256
    ENTER = 257
    BACKSPACE = 259


class KeyAction(enum.IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


_MOVEMENT_KEYS = frozenset({Key.W, Key.S, Key.A, Key.D, Key.Q, Key.E})

Cursor = tuple[float, float] | None


class InputManager:
    """Turns key and cursor events into movement of transformables and scene-graph nodes.

    In the flying-camera profile W/S/A/D/Q/E fly the camera; in the vehicle
    profile W/S drive the vehicle and A/D/Q/E roll and pitch it. ENTER starts
    and stops an attached animation, 1 and 2 switch profiles and BACKSPACE
    blows the vehicle apart (from the flying-camera profile only).
    """

    def __init__(
        self,
        width: int,
        height: int,
        scene_graph: SceneGraph,
        camera_node: SGNode,
        camera_mount_node: SGNode,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.scene_graph = scene_graph
        self.camera_node = camera_node
        self.camera_mount_node = camera_mount_node
        self.rng = rng if rng is not None else random.Random()

        self.current_input_profile = InputProfile.FLYING_CAMERA
        self._held: set[Key] = set()
        self.movement_vector = np.zeros(3)
        self.rotation_matrix = np.identity(4)

        self.animator: Animator | None = None
        self.set_to_animate = False
        self.animating = False

        self.x_mouse = 0.0
        self.y_mouse = 0.0

        self.roll_deg = 0.0
        self.roll_constraint = 80.0
        self.pitch_deg = 0.0
        self.pitch_constraint = 45.0

        self.camera_pitch_deg = 0.0
        self.camera_pitch_constraint = 80.0

        self.reflector_node: SGNode | None = None

        self.camera_velocity = 0.02
        self.vehicle_velocity = 0.025
        self.camera_turn_rate = 1.5
        self.vehicle_turn_rate = 0.1

        self.vehicle_destroyed = False
        self.part_directions: list[np.ndarray] = []

    @property
    def held_keys(self) -> frozenset[Key]:
        """Movement keys currently held down."""
        return frozenset(self._held)

    @property
    def cursor_center(self) -> tuple[int, int]:
        """Where the cursor is put back after every mouse reading."""
        return self.width // 2, self.height // 2

    def key_event(self, key: int, action: int) -> None:
        """React to a key event; keys and actions not listed are ignored."""
        try:
            key = Key(key)
            action = KeyAction(action)
        except ValueError:
            return

        if key in _MOVEMENT_KEYS:
            if action is KeyAction.PRESS:
                self._held.add(key)
            elif action is KeyAction.RELEASE:
                self._held.discard(key)
        elif key is Key.ENTER:
            if action is KeyAction.PRESS:
                if self.animating:
                    self.animating = False
                else:
                    self.set_to_animate = True
            elif action is KeyAction.RELEASE:
                self.animating = True
        elif key is Key.KEY_1:
            if action is KeyAction.RELEASE:
                self.set_input_profile(InputProfile.FLYING_CAMERA)
        elif key is Key.KEY_2:
            if action is KeyAction.RELEASE:
                self.set_input_profile(InputProfile.VEHICLE_CONTROL)
        elif key is Key.BACKSPACE:
            if action is KeyAction.RELEASE:
                self.self_destruct()

    def handle_input(self, transformable: Transformable, cursor: Cursor) -> tuple[int, int] | None:
        """Move and turn ``transformable`` directly and drive the animator.

        ``cursor`` is the pointer position in window pixels, or None when the
        window has no focus. Returns where the cursor should be put back to,
        or None when it was not read.
        """
        self.handle_keyboard_input(transformable)
        recenter = self.handle_mouse_input(transformable, cursor, True)

        transformable.global_move(self.movement_vector)
        transformable.rotate(self.rotation_matrix)

        self.movement_vector = np.zeros(3)
        self.rotation_matrix = np.identity(4)

        if self.animator is not None:
            if self.set_to_animate:
                self.animator.move_to_starting_position()
                self.set_to_animate = False
            if self.animating:
                self.animating = self.animator.animate()

        return recenter

    def _tilt(self, node: SGNode, axis: np.ndarray, degrees: float) -> None:
        """Rotate ``node``'s subtree while leaving the camera node out."""
        self.camera_node.do_rotate = False
        try:
            self.scene_graph.rotate_subtree(node.name, axis, degrees)
        finally:
            self.camera_node.do_rotate = True

    def handle_node_input(
        self, node: SGNode, cursor: Cursor, delta_time: float
    ) -> tuple[int, int] | None:
        """Move and turn a scene-graph subtree, scaled by ``delta_time``.

        Returns where the cursor should be put back to, or None when it was not read.
        """
        item = node.item
        self.handle_keyboard_input(item)
        recenter = self.handle_mouse_input(item, cursor, False)

        self.scene_graph.move_subtree(node.name, self.movement_vector * delta_time)

        if self.x_mouse < 0:
            self.scene_graph.rotate_subtree(node.name, _Y_AXIS, -self.camera_turn_rate)
        elif self.x_mouse > 0:
            self.scene_graph.rotate_subtree(node.name, _Y_AXIS, self.camera_turn_rate)

        if self.y_mouse > 0 and self.camera_pitch_deg > -self.camera_pitch_constraint:
            self.scene_graph.rotate_subtree(node.name, item.right.copy(), -self.camera_turn_rate)
            self.camera_pitch_deg -= 1
        elif self.y_mouse < 0 and self.camera_pitch_deg < self.camera_pitch_constraint:
            self.scene_graph.rotate_subtree(node.name, item.right.copy(), self.camera_turn_rate)
            self.camera_pitch_deg += 1

        if self.current_input_profile is InputProfile.VEHICLE_CONTROL:
            step = self.vehicle_turn_rate * delta_time
            held = self._held

            if Key.A in held and self.roll_deg < self.roll_constraint:
                self._tilt(node, item.front.copy(), step)
                self.roll_deg += step
            elif Key.A not in held and self.roll_deg > 0.0:
                self._tilt(node, item.front.copy(), -step)
                self.roll_deg -= step

            if Key.D in held and self.roll_deg > -self.roll_constraint:
                self._tilt(node, item.front.copy(), -step)
                self.roll_deg -= step
            elif Key.D not in held and self.roll_deg < 0.0:
                self._tilt(node, item.front.copy(), step)
                self.roll_deg += step

            if Key.Q in held and self.pitch_deg > -self.pitch_constraint:
                self._tilt(node, item.right.copy(), -step)
                self.pitch_deg -= step
            elif Key.Q not in held and self.pitch_deg < 0.0:
                self._tilt(node, item.right.copy(), step)
                self.pitch_deg += step

            if Key.E in held and self.pitch_deg < self.pitch_constraint:
                self._tilt(node, item.right.copy(), step)
                self.pitch_deg += step
            elif Key.E not in held and self.pitch_deg > 0.0:
                self._tilt(node, item.right.copy(), -step)
                self.pitch_deg -= step

        self.movement_vector = np.zeros(3)
        return recenter

    def handle_keyboard_input(self, transformable: Transformable) -> None:
        """Add the held movement keys' contribution to the pending movement."""
        held = self._held
        if self.current_input_profile is InputProfile.FLYING_CAMERA:
            v = self.camera_velocity
            if Key.W in held:
                self.movement_vector = self.movement_vector - v * transformable.front
            if Key.S in held:
                self.movement_vector = self.movement_vector + v * transformable.front
            if Key.D in held:
                self.movement_vector = self.movement_vector + v * transformable.right
            if Key.A in held:
                self.movement_vector = self.movement_vector - v * transformable.right
            if Key.Q in held:
                self.movement_vector = self.movement_vector + v * transformable.up
            if Key.E in held:
                self.movement_vector = self.movement_vector - v * transformable.up
        elif self.current_input_profile is InputProfile.VEHICLE_CONTROL:
            v = self.vehicle_velocity
            if Key.W in held:
                self.movement_vector = self.movement_vector + v * transformable.front
            if Key.S in held:
                self.movement_vector = self.movement_vector - v * transformable.front

    def handle_mouse_input(
        self, transformable: Transformable, cursor: Cursor, calc_matrix: bool
    ) -> tuple[int, int] | None:
        """Read the cursor into offsets in [-1, 1] and optionally a turn matrix.

        Without a cursor the previous offsets are kept. Returns the position
        the cursor should be put back to, or None when it was not read.
        """
        if cursor is None:
            return None
        x, y = cursor
        self.x_mouse = (2.0 * x) / self.width - 1.0
        self.y_mouse = -1.0 * ((2.0 * y) / self.height - 1.0)
        if calc_matrix:
            self.rotation_matrix = transformable.rotate_fps(self.x_mouse, self.y_mouse, 85.0)
        return self.cursor_center

    def add_animator(self, animator: Animator) -> None:
        """Attach the animator that ENTER controls."""
        self.animator = animator

    def set_input_profile(self, profile: InputProfile) -> None:
        """Switch profile, mounting the camera behind the vehicle or freeing it."""
        if profile is self.current_input_profile:
            return

        camera = self.camera_node
        mount = self.camera_mount_node
        if profile is InputProfile.VEHICLE_CONTROL:
            self.scene_graph.root.children.pop()
            mount.children.append(camera)

            camera.item.position = mount.item.position.copy()
            camera.item.set_orientation(-mount.item.front, mount.item.up, mount.item.right)

            self.scene_graph.move_subtree(camera.name, 8.0 * camera.item.up)
            self.scene_graph.move_subtree(camera.name, 10.0 * camera.item.front)
            self.scene_graph.rotate_subtree(camera.name, camera.item.right.copy(), 25.0)
        else:
            mount.children.pop()
            self.scene_graph.root.children.append(camera)

        self.current_input_profile = profile

    def set_reflector(self, node: SGNode) -> None:
        """Remember the node carrying the vehicle's reflector light."""
        self.reflector_node = node

    def _random_direction(self) -> np.ndarray:
        return normalize([self.rng.random() * 2 - 1 for _ in range(3)])

    def self_destruct(self) -> None:
        """Break the vehicle apart and give every loose part a random direction.

        Only works from the flying-camera profile.
        """
        if self.current_input_profile is not InputProfile.FLYING_CAMERA:
            return

        graph = self.scene_graph
        graph.destroy_subtree(self.camera_mount_node.name)
        for node in graph.detached_nodes:
            graph.root.children.append(node)
            self.part_directions.append(self._random_direction())

        self.vehicle_destroyed = True