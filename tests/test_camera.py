import numpy as np
import pytest

from babyengine.camera import Camera
from babyengine.glmath import rotation


def _apply(matrix, point):
    out = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return out[:3] / out[3]


def test_default_parameters():
    cam = Camera()
    assert (cam.near_plane, cam.far_plane, cam.fov_half_angle) == (1.0, 10.0, 45.0)
    assert cam.aspect_ratio == pytest.approx(1.6)
    assert np.array_equal(cam.front, [0.0, 0.0, -1.0])


def test_view_maps_eye_to_origin():
    cam = Camera()
    cam.global_move([3.0, -1.0, 2.0])
    assert np.allclose(_apply(cam.view_matrix(), cam.position), 0.0)


def test_view_rotation_is_orthonormal_after_turning():
    cam = Camera()
    cam.rotate(rotation(50.0, [0.0, 1.0, 0.0]))
    r = cam.view_matrix()[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))


def test_view_keeps_distances():
    cam = Camera()
    cam.global_move([1.0, 2.0, 3.0])
    cam.rotate(rotation(20.0, [1.0, 0.0, 0.0]))
    a, b = np.array([0.0, 0.0, 0.0]), np.array([4.0, -2.0, 1.0])
    v = cam.view_matrix()
    assert np.linalg.norm(_apply(v, a) - _apply(v, b)) == pytest.approx(
        np.linalg.norm(a - b)
    )


def test_perspective_reflects_aspect_ratio():
    cam = Camera(0.005, 10.0, 30.0, 1280 / 800)
    p = cam.perspective_matrix()
    assert p[1, 1] / p[0, 0] == pytest.approx(1280 / 800)
    assert p[3, 2] == -1


def test_wider_angle_gives_smaller_focal_scale():
    narrow = Camera(1.0, 10.0, 20.0, 1.0).perspective_matrix()
    wide = Camera(1.0, 10.0, 40.0, 1.0).perspective_matrix()
    assert wide[1, 1] < narrow[1, 1]


def test_eye_position_is_a_copy_of_position():
    cam = Camera()
    cam.global_move([0.5, 0.5, 0.5])
    eye = cam.eye_position()
    eye[0] = 99.0
    assert np.allclose(cam.position, [0.5, 0.5, 0.5])