import numpy as np
import pytest

from babyengine.glmath import (
    frustum,
    look_at,
    normalize,
    rotate3d,
    rotation,
    scale3d,
    translate3d,
    vec3,
)


def _apply(matrix, point):
    out = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return out[:3] / out[3]


def test_vec3_holds_components():
    assert np.array_equal(vec3(1, 2, 3), np.array([1.0, 2.0, 3.0]))


def test_normalize_gives_unit_length():
    v = normalize([3.0, -4.0, 12.0])
    assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.allclose(np.cross(v, [3.0, -4.0, 12.0]), 0.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_translate_moves_point():
    m = translate3d([1.5, -2.0, 7.0])
    assert np.allclose(_apply(m, [0.0, 0.0, 0.0]), [1.5, -2.0, 7.0])


def test_translate_inverse_is_identity():
    v = np.array([0.3, 4.0, -9.0])
    assert np.allclose(translate3d(v) @ translate3d(-v), np.identity(4))


def test_scale_is_diagonal():
    m = scale3d([2.0, 3.0, 4.0])
    assert np.allclose(np.diag(m), [2.0, 3.0, 4.0, 1.0])
    assert np.allclose(m - np.diag(np.diag(m)), 0.0)


@pytest.mark.parametrize(
    "axis,vector",
    [("x", [1.0, 0.0, 0.0]), ("y", [0.0, 1.0, 0.0]), ("z", [0.0, 0.0, 1.0])],
)
def test_rotate3d_matches_axis_rotation(axis, vector):
    assert np.allclose(rotate3d(axis, 37.0), rotation(37.0, vector))


def test_rotate3d_unknown_axis_is_identity():
    assert np.array_equal(rotate3d("w", 45.0), np.identity(4))


def test_rotation_is_orthonormal():
    r = rotation(63.0, [1.0, 2.0, -0.5])
    assert np.allclose(r[:3, :3] @ r[:3, :3].T, np.identity(3))
    assert np.linalg.det(r[:3, :3]) == pytest.approx(1.0)


def test_rotation_keeps_axis_fixed():
    axis = np.array([0.2, -1.0, 0.7])
    assert np.allclose(_apply(rotation(110.0, axis), axis), axis)


def test_rotation_opposite_angles_cancel():
    axis = [0.0, 1.0, 1.0]
    assert np.allclose(rotation(40.0, axis) @ rotation(-40.0, axis), np.identity(4))


def test_look_at_maps_eye_to_origin():
    eye = [1.0, 2.0, 3.0]
    m = look_at(eye, [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    assert np.allclose(_apply(m, eye), 0.0)


def test_look_at_puts_center_on_negative_z():
    eye = np.array([4.0, 0.0, 0.0])
    center = np.array([0.0, 0.0, 0.0])
    m = look_at(eye, center, [0.0, 1.0, 0.0])
    mapped = _apply(m, center)
    assert np.allclose(mapped[:2], 0.0)
    assert mapped[2] == pytest.approx(-np.linalg.norm(eye - center))


def test_frustum_fixed_entries():
    m = frustum(-1.0, 1.0, -0.5, 0.5, 0.1, 10.0)
    assert m[3, 2] == -1
    assert m[3, 3] == 1


def test_symmetric_frustum_has_no_skew():
    m = frustum(-2.0, 2.0, -1.0, 1.0, 0.5, 20.0)
    assert m[0, 2] == pytest.approx(0.0)
    assert m[1, 2] == pytest.approx(0.0)
    assert m[0, 0] / m[1, 1] == pytest.approx(0.5)