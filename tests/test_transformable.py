import numpy as np
import pytest

from babyengine.glmath import rotation
from babyengine.transformable import Transformable


def test_default_frame_of_object():
    t = Transformable(False)
    assert np.array_equal(t.position, [0.0, 0.0, 0.0])
    assert np.array_equal(t.front, [0.0, 0.0, 1.0])
    assert np.array_equal(t.up, [0.0, 1.0, 0.0])
    assert np.array_equal(t.right, [1.0, 0.0, 0.0])
    assert np.array_equal(t.scale, [1.0, 1.0, 1.0])


def test_camera_faces_negative_z():
    t = Transformable(True)
    assert np.array_equal(t.front, [0.0, 0.0, -1.0])


def test_default_model_matrix_is_identity():
    assert np.allclose(Transformable(False).model_matrix(), np.identity(4))


def test_global_move_accumulates_and_shows_in_model_matrix():
    t = Transformable(False)
    t.global_move([1.0, 2.0, 3.0])
    t.global_move([0.5, -2.0, 1.0])
    assert np.allclose(t.position, [1.5, 0.0, 4.0])
    assert np.allclose(t.model_matrix()[:3, 3], t.position)


def test_global_move_does_not_alias_argument():
    t = Transformable(False)
    delta = np.array([1.0, 1.0, 1.0])
    t.global_move(delta)
    t.global_move(delta)
    assert np.allclose(delta, [1.0, 1.0, 1.0])


def test_model_matrix_applies_scale_along_axes():
    t = Transformable(False)
    t.scale = np.array([2.0, 3.0, 4.0])
    m = t.model_matrix()
    assert np.allclose(np.linalg.norm(m[:3, :3], axis=0), t.scale)


def test_set_orientation_replaces_frame():
    t = Transformable(False)
    t.set_orientation([1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 1.0, 0.0])
    assert np.array_equal(t.front, [1.0, 0.0, 0.0])
    assert np.array_equal(t.up, [0.0, 0.0, 1.0])
    assert np.array_equal(t.right, [0.0, 1.0, 0.0])


def test_rotate_keeps_frame_orthonormal():
    t = Transformable(False)
    t.rotate(rotation(33.0, [1.0, 1.0, 0.0]))
    frame = np.stack([t.right, t.up, t.front])
    assert np.allclose(frame @ frame.T, np.identity(3))


def test_rotate_back_restores_frame():
    t = Transformable(False)
    t.rotate(rotation(70.0, [0.3, 1.0, -0.2]))
    t.rotate(rotation(-70.0, [0.3, 1.0, -0.2]))
    assert np.allclose(t.front, [0.0, 0.0, 1.0])
    assert np.allclose(t.up, [0.0, 1.0, 0.0])
    assert np.allclose(t.right, [1.0, 0.0, 0.0])


def test_rotate_fps_no_offset_is_identity():
    t = Transformable(True)
    assert np.allclose(t.rotate_fps(0.0, 0.0, 85.0), np.identity(4))
    assert t.pitch_deg == 0


def test_rotate_fps_yaw_direction():
    t = Transformable(True)
    assert np.allclose(t.rotate_fps(0.4, 0.0, 85.0), rotation(1.0, [0.0, 1.0, 0.0]))
    assert np.allclose(t.rotate_fps(-0.4, 0.0, 85.0), rotation(-1.0, [0.0, 1.0, 0.0]))


def test_rotate_fps_pitch_is_clamped():
    t = Transformable(True)
    for _ in range(5):
        t.rotate_fps(0.0, 0.5, 2.0)
    assert t.pitch_deg == pytest.approx(-2.0)
    assert np.allclose(t.rotate_fps(0.0, 0.5, 2.0), np.identity(4))


def test_rotate_fps_pitch_up_counts_back():
    t = Transformable(True)
    t.rotate_fps(0.0, 0.5, 10.0)
    m = t.rotate_fps(0.0, -0.5, 10.0)
    assert t.pitch_deg == 0
    assert np.allclose(m, rotation(1.0, t.right))