import random

import numpy as np
import pytest

from babyengine.particles import MoveMode, Particle, ParticleEmitter, ParticleSpawner


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _spawner(clock, mode=MoveMode.UP, **overrides):
    params = dict(
        width=2.0,
        height=4.0,
        max_particles=50,
        batch_size=10,
        batch_spawn_frequency=0.5,
        batch_duration=10.0,
        move_speed=0.1,
        move_mode=mode,
        base_color=(1.0, 1.0, 0.0),
        clock=clock,
    )
    params.update(overrides)
    return ParticleSpawner(**params)


def test_move_mode_values_match_ids():
    assert MoveMode(0) is MoveMode.UP
    assert MoveMode(1) is MoveMode.UP_AND_OUTWARD
    assert MoveMode(2) is MoveMode.OUTWARD


def test_particle_keeps_given_creation_time():
    assert Particle(12.5).creation_time == 12.5
    assert np.allclose(Particle(0.0).position, [0.0, 0.0, 0.0])


def test_add_particle_starts_with_zero_life():
    spawner = _spawner(FakeClock())
    particle = Particle(0.0)
    particle.position = np.array([1.0, 2.0, 3.0])
    spawner.add_particle(particle)
    assert len(spawner) == 1
    assert spawner.life_times == [0.0]
    assert np.allclose(spawner.vertices[0], particle.position)


def test_invalid_move_mode_rejected():
    with pytest.raises(ValueError):
        _spawner(FakeClock(), mode=7)


def test_move_up_and_ages_update():
    clock = FakeClock()
    spawner = _spawner(clock)
    spawner.add_particle(Particle(0.0))
    clock.now = 2.0
    spawner.move_particles(3.0)
    assert np.allclose(spawner.vertices[0], [0.0, 0.1 * 3.0, 0.0])
    assert spawner.life_times == [2.0]


def test_move_outward_goes_away_from_spawner():
    clock = FakeClock()
    spawner = _spawner(clock, mode=MoveMode.OUTWARD, move_speed=1.0)
    spawner.spawner_location = np.array([1.0, 1.0, 1.0])
    particle = Particle(0.0)
    particle.position = np.array([2.0, 1.0, 1.0])
    spawner.add_particle(particle)
    spawner.move_particles(0.5)
    assert np.allclose(spawner.vertices[0], [2.5, 1.0, 1.0])
    assert np.allclose(spawner.move_direction, [1.0, 0.0, 0.0])


def test_move_up_and_outward_direction_is_unit():
    spawner = _spawner(FakeClock(), mode=MoveMode.UP_AND_OUTWARD)
    particle = Particle(0.0)
    particle.position = np.array([3.0, 0.0, 4.0])
    spawner.add_particle(particle)
    spawner.move_particles(1.0)
    assert np.isclose(np.linalg.norm(spawner.move_direction), 1.0)
    assert spawner.vertices[0][1] > 0.0


def test_cleanup_drops_expired_particles():
    clock = FakeClock()
    spawner = _spawner(clock, batch_duration=5.0)
    old, young = Particle(0.0), Particle(4.0)
    spawner.add_particle(old)
    spawner.add_particle(young)
    clock.now = 6.0
    spawner.cleanup()
    assert spawner.particles == [young]
    assert len(spawner) == 1
    assert spawner.life_times == [2.0]


def test_emitter_loads_a_batch_inside_its_area():
    clock = FakeClock()
    spawner = _spawner(clock)
    emitter = ParticleEmitter((10.0, 0.0, -3.0), spawner, random.Random(1))
    assert len(spawner) == spawner.batch_size
    assert np.allclose(spawner.spawner_location, [10.0, 0.0, -3.0])
    for vertex in spawner.vertices:
        offset = vertex - emitter.position
        assert -1.0 <= offset[0] <= 1.0
        assert -0.5 <= offset[1] <= 0.5
        assert -2.0 <= offset[2] <= 2.0


def test_emitter_stops_at_max_particles():
    spawner = _spawner(FakeClock(), max_particles=10)
    emitter = ParticleEmitter((0.0, 0.0, 0.0), spawner, random.Random(2))
    emitter.load_particles()
    assert len(spawner) == 10


def test_update_spawns_on_schedule_and_cleans_up():
    clock = FakeClock()
    spawner = _spawner(clock, batch_duration=1.0)
    emitter = ParticleEmitter((0.0, 0.0, 0.0), spawner, random.Random(3))
    clock.now = 0.2
    emitter.update(1.0)
    assert len(spawner) == 10
    clock.now = 0.6
    emitter.update(1.0)
    assert len(spawner) == 20
    clock.now = 1.5
    emitter.update(1.0)
    assert all(clock.now - p.creation_time < 1.0 for p in spawner.particles)
    assert len(spawner) == 20 - 10


def test_update_follows_moved_emitter():
    spawner = _spawner(FakeClock())
    emitter = ParticleEmitter((0.0, 0.0, 0.0), spawner, random.Random(4))
    emitter.global_move((1.0, 2.0, 3.0))
    emitter.update(0.0)
    assert np.allclose(spawner.spawner_location, emitter.position)


def test_move_location_updates_spawner():
    spawner = _spawner(FakeClock())
    emitter = ParticleEmitter((0.0, 0.0, 0.0), spawner, random.Random(5))
    emitter.move_location((4.0, 5.0, 6.0))
    assert np.allclose(emitter.position, [4.0, 5.0, 6.0])
    assert np.allclose(spawner.spawner_location, [4.0, 5.0, 6.0])