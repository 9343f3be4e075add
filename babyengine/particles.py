"""Particles, particle spawners and the emitters that feed them."""

from __future__ import annotations

import enum
import random
import time
from collections.abc import Callable

import numpy as np

from .glmath import Vector
from .transformable import Transformable

Clock = Callable[[], float]

_UP = np.array([0.0, 1.0, 0.0])


class MoveMode(enum.IntEnum):
    """How particles drift from their spawner."""

    UP = 0
    UP_AND_OUTWARD = 1
    OUTWARD = 2


def _unit_or_zero(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    return v / length if length else np.zeros(3)


class Particle(Transformable):
    """A point particle that remembers when it was created."""

    def __init__(self, creation_time: float | None = None) -> None:
        super().__init__(False)
        self.creation_time = time.monotonic() if creation_time is None else creation_time
        self.movement_direction = np.zeros(3)


class ParticleSpawner:
    """Holds live particles, moves them and drops the ones that have expired."""

    def __init__(
        self,
        width: float,
        height: float,
        max_particles: int,
        batch_size: int,
        batch_spawn_frequency: float,
        batch_duration: float,
        move_speed: float,
        move_mode: MoveMode | int,
        base_color: Vector,
        clock: Clock = time.monotonic,
    ) -> None:
        self.width = width
        self.height = height
        self.max_particles = max_particles
        self.batch_size = batch_size
        self.batch_spawn_frequency = batch_spawn_frequency
        self.batch_duration = batch_duration
        self.move_speed = move_speed
        self.move_mode = MoveMode(move_mode)
        self.base_color = np.array(base_color, dtype=float)
        self.clock = clock
        self.particles: list[Particle] = []
        self.vertices: list[np.ndarray] = []
        self.life_times: list[float] = []
        self.spawner_location = np.zeros(3)
        self.move_direction = np.zeros(3)

    def add_particle(self, particle: Particle) -> None:
        """Add a particle with a life time of zero."""
        self.particles.append(particle)
        self.vertices.append(particle.position.copy())
        self.life_times.append(0.0)

    def cleanup(self) -> None:
        """Drop particles older than the batch duration and refresh the ages of the rest."""
        now = self.clock()
        kept = [
            (particle, now - particle.creation_time)
            for particle in self.particles
            if now - particle.creation_time < self.batch_duration
        ]
        self.particles = [particle for particle, _ in kept]
        self.vertices = [particle.position.copy() for particle in self.particles]
        self.life_times = [age for _, age in kept]

    def _direction_for(self, vertex: np.ndarray) -> np.ndarray:
        if self.move_mode is MoveMode.UP:
            return _UP.copy()
        if self.move_mode is MoveMode.UP_AND_OUTWARD:
            return _unit_or_zero(_UP + (vertex - self.spawner_location))
        return _unit_or_zero(vertex - self.spawner_location)

    def move_particles(self, delta_time: float) -> None:
        """Advance every particle by ``move_speed * delta_time`` in its mode's direction."""
        now = self.clock()
        for i, particle in enumerate(self.particles):
            self.move_direction = self._direction_for(self.vertices[i])
            particle.global_move(self.move_direction * self.move_speed * delta_time)
            self.vertices[i] = particle.position.copy()
            self.life_times[i] = now - particle.creation_time

    def __len__(self) -> int:
        return len(self.vertices)


class ParticleEmitter(Transformable):
    """A placed object that spawns batches of particles into a spawner over time."""

    def __init__(
        self,
        position: Vector,
        spawner: ParticleSpawner,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(False)
        self.position = np.array(position, dtype=float)
        self.spawner = spawner
        self.rng = rng if rng is not None else random.Random()
        now = spawner.clock()
        self.start_time = now
        self.time_of_last_batch = now
        self.time_of_last_cleanup = now
        self.spawner.spawner_location = self.position.copy()
        self.load_particles()

    def load_particles(self) -> None:
        """Spawn one batch scattered around the emitter, unless the spawner is full."""
        spawner = self.spawner
        if len(spawner) >= spawner.max_particles:
            return
        for _ in range(spawner.batch_size):
            offset = np.array(
                [
                    -spawner.width / 2 + self.rng.random() * spawner.width,
                    -0.5 + self.rng.random(),
                    -spawner.height / 2 + self.rng.random() * spawner.height,
                ]
            )
            particle = Particle(spawner.clock())
            particle.position = self.position + offset
            spawner.add_particle(particle)

    def update(self, delta_time: float) -> None:
        """Move particles, spawn and clean up on schedule, and follow the emitter."""
        spawner = self.spawner
        spawner.move_particles(delta_time)

        if spawner.clock() - self.time_of_last_batch >= spawner.batch_spawn_frequency:
            self.load_particles()
            self.time_of_last_batch = spawner.clock()

        if spawner.clock() - self.time_of_last_cleanup >= spawner.batch_duration:
            spawner.cleanup()
            self.time_of_last_cleanup = spawner.clock()

        if not np.array_equal(self.position, spawner.spawner_location):
            spawner.spawner_location = self.position.copy()

    def move_location(self, new_location: Vector) -> None:
        """Place the emitter and its spawner at ``new_location``."""
        self.position = np.array(new_location, dtype=float)
        self.spawner.spawner_location = self.position.copy()