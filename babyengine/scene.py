"""The spaceship-in-an-asteroid-field scene and its per-frame update."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from .camera import Camera
from .collision import check_for_collision, handle_collision
from .input import InputManager, InputProfile
from .lights import Light, ReflectorLight
from .particles import MoveMode, ParticleEmitter, ParticleSpawner
from .scenegraph import SceneGraph, SGNode
from .transformable import Transformable

WIDTH = 1280
HEIGHT = 800
ASTEROID_COUNT = 100

CAMERA_TIME_SCALE = 500.0
VEHICLE_TIME_SCALE = 600.0
PARTICLE_TIME_SCALE = 1000.0
DEBRIS_SPEED = 0.2

# Ship parts in collision order, each with the part it hangs from.
_SHIP_LAYOUT = (
    ("base", None),
    ("cockpit", "base"),
    ("right_wing_base", "base"),
    ("left_wing_base", "base"),
    ("pike", "cockpit"),
    ("glass", "cockpit"),
    ("right_wing", "right_wing_base"),
    ("left_wing", "left_wing_base"),
    ("right_wing_tip", "right_wing"),
    ("left_wing_tip", "left_wing"),
)

_SHIP_OFFSETS = (
    ("base", (0.0, 0.0, -10.0)),
    ("cockpit", (0.0, 0.0, 1.4)),
    ("right_wing_base", (-0.45, -0.1, 0.0)),
    ("left_wing_base", (0.45, -0.1, 0.0)),
    ("pike", (0.0, 0.0, 1.5)),
    ("glass", (0.0, 0.45, -0.2)),
    ("right_wing", (-2.05, -0.1, 0.0)),
    ("left_wing", (2.05, -0.1, 0.0)),
    ("right_wing_tip", (-1.525, -0.15, 0.55)),
    ("left_wing_tip", (1.525, -0.15, 0.55)),
)

_SHIP_SCALES = (
    ("right_wing_base", 0.7),
    ("left_wing_base", 0.7),
    ("glass", 0.5),
    ("right_wing", 1.4),
    ("left_wing", 1.4),
    ("right_wing_tip", 0.75),
    ("left_wing_tip", 0.75),
)


@dataclass
class SpaceScene:
    """Everything the main loop updates: the graph, its actors and the input state.

    ``cursor`` is the pointer position in window pixels, or None while the
    window has no focus; ``cursor_reset`` holds where the last step asked for
    the pointer to be put back.
    """

    scene_graph: SceneGraph
    input: InputManager
    camera: Camera
    light: Light
    reflector: ReflectorLight
    nodes: dict[str, SGNode]
    ship_parts: list[SGNode]
    asteroids: list[SGNode]
    emitters: list[ParticleEmitter]
    camera_node: SGNode
    cursor: tuple[float, float] | None = None
    cursor_reset: tuple[int, int] | None = field(default=None)

    def step(self, delta_time: float) -> str | None:
        """Advance one frame; return the name of a ship part that hit an asteroid, if any."""
        if self.input.current_input_profile is InputProfile.FLYING_CAMERA:
            self.cursor_reset = self.input.handle_node_input(
                self.camera_node, self.cursor, delta_time * CAMERA_TIME_SCALE
            )
        else:
            self.cursor_reset = self.input.handle_node_input(
                self.nodes["base"], self.cursor, delta_time * VEHICLE_TIME_SCALE
            )

        collided = check_for_collision(self.ship_parts, self.asteroids)
        if collided is not None:
            handle_collision(self.ship_parts, collided, self.scene_graph)

        if self.input.vehicle_destroyed:
            for node, direction in zip(
                self.scene_graph.detached_nodes, self.input.part_directions
            ):
                self.scene_graph.move_subtree(node.name, DEBRIS_SPEED * direction)

        for emitter in self.emitters:
            emitter.update(delta_time * PARTICLE_TIME_SCALE)

        return collided


def build_scene(
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> SpaceScene:
    """Assemble the spaceship, asteroid field, particle clouds, lights and camera."""
    rng = rng if rng is not None else random.Random()

    camera = Camera(0.005, 10.0, 30.0, WIDTH / HEIGHT)
    light = Light((0.1, 0.1, 0.1), (0.5, 0.5, 0.5))
    reflector = ReflectorLight()
    reflector.ambient_intensity = np.array([0.2, 0.2, 0.2])
    reflector.source_intensity = np.array([0.9, 0.9, 0.9])

    emitters = [
        ParticleEmitter(
            (0.0, 0.0, 0.0),
            ParticleSpawner(
                200.0, 200.0, 10000, 1000, 0.5, 10.0, 0.001,
                MoveMode.UP_AND_OUTWARD, (1.0, 1.0, 0.0), clock,
            ),
            rng,
        ),
        ParticleEmitter(
            (0.0, 0.0, 0.0),
            ParticleSpawner(
                50.0, 50.0, 10000, 10, 0.001, 10.0, 0.1,
                MoveMode.UP_AND_OUTWARD, (0.4, 0.0, 0.4), clock,
            ),
            rng,
        ),
    ]

    graph = SceneGraph()
    ship = {name: SGNode(Transformable(False), name, False) for name, _ in _SHIP_LAYOUT}
    asteroids = [
        SGNode(Transformable(False), f"asteroid_{i}", False) for i in range(ASTEROID_COUNT)
    ]
    particle_nodes = [
        SGNode(emitter, f"particles_{i}", True) for i, emitter in enumerate(emitters, 1)
    ]
    camera_node = SGNode(camera, "camera_1", False)
    reflector_node = SGNode(reflector, "reflector_1", False)

    input_manager = InputManager(WIDTH, HEIGHT, graph, camera_node, ship["base"], rng)

    for name, parent in _SHIP_LAYOUT:
        holder = graph.root if parent is None else ship[parent]
        holder.children.append(ship[name])

    for asteroid in asteroids:
        graph.root.children.append(asteroid)
        offset = [rng.random() * 100.0 - 50.0 for _ in range(3)]
        graph.move_subtree(asteroid.name, offset)
        base_factor = rng.random() * 2.0 + 1.0
        graph.scale_subtree(asteroid.name, [base_factor + rng.random() for _ in range(3)])
        for axis in ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)):
            graph.rotate_subtree(asteroid.name, axis, rng.random() * 90.0)

    graph.root.children.extend(particle_nodes)
    ship["base"].children.append(reflector_node)
    graph.root.children.append(camera_node)

    for name, offset in _SHIP_OFFSETS:
        graph.move_subtree(name, offset)

    graph.move_subtree("reflector_1", (0.0, 0.0, 2.7))
    input_manager.set_reflector(reflector_node)

    graph.move_subtree("particles_1", (0.0, 0.0, 50.0))
    graph.rotate_subtree("particles_1", (1.0, 0.0, 0.0), 45.0)

    for name, factor in _SHIP_SCALES:
        graph.scale_subtree(name, (factor, factor, factor))

    camera.position = ship["base"].item.position.copy()
    graph.move_subtree("camera_1", (2.5, 1.0, 5.0))
    graph.rotate_subtree("camera_1", (0.0, 1.0, 0.0), 200.0)

    nodes: dict[str, SGNode] = dict(ship)
    nodes.update((node.name, node) for node in asteroids)
    nodes.update((node.name, node) for node in particle_nodes)
    nodes[camera_node.name] = camera_node
    nodes[reflector_node.name] = reflector_node

    return SpaceScene(
        scene_graph=graph,
        input=input_manager,
        camera=camera,
        light=light,
        reflector=reflector,
        nodes=nodes,
        ship_parts=[ship[name] for name, _ in _SHIP_LAYOUT],
        asteroids=asteroids,
        emitters=emitters,
        camera_node=camera_node,
    )