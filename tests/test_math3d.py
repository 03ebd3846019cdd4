import math

import numpy as np
import pytest

from modelkit import math3d


def test_identity_leaves_point_unchanged():
    point = np.array([1.5, -2.0, 3.0])
    assert np.allclose(math3d.transform_coord(point, math3d.identity()), point)


def test_rotation_x_quarter_turn_moves_y_to_z():
    result = math3d.transform_normal([0, 1, 0], math3d.rotation_x(math.pi / 2))
    assert np.allclose(result, [0, 0, 1])


def test_rotation_matrices_are_orthonormal():
    for m in (math3d.rotation_x(0.7), math3d.rotation_y(-1.3)):
        assert np.allclose(m @ m.T, np.eye(4))


def test_translation_ignored_by_transform_normal():
    t = math3d.translation(4, 5, 6)
    assert np.allclose(math3d.transform_normal([1, 2, 3], t), [1, 2, 3])
    assert np.allclose(math3d.transform_coord([1, 2, 3], t), [5, 7, 9])


def test_inverse_round_trip():
    m = math3d.scaling(2, 3, 4) @ math3d.rotation_y(0.4) @ math3d.translation(1, -2, 3)
    assert np.allclose(math3d.inverse(m) @ m, np.eye(4))


def test_inverse_singular_raises():
    with pytest.raises(ValueError):
        math3d.inverse(np.zeros((4, 4)))


def test_normalize_unit_length_and_zero():
    assert math.isclose(np.linalg.norm(math3d.normalize([3, 4, 12])), 1.0)
    assert np.allclose(math3d.normalize([0, 0, 0]), [0, 0, 0])


def test_quaternion_identity_gives_identity_matrix():
    assert np.allclose(math3d.quaternion_matrix([0, 0, 0, 1]), np.eye(4))


def test_decompose_round_trip():
    angle = 0.9
    q = np.array([0.0, math.sin(angle / 2), 0.0, math.cos(angle / 2)])
    m = math3d.scaling(2, 3, 4) @ math3d.quaternion_matrix(q) @ math3d.translation(7, 8, 9)
    scale, rotation, trans = math3d.decompose(m)
    assert np.allclose(scale, [2, 3, 4])
    assert np.allclose(rotation, q) or np.allclose(rotation, -q)
    assert np.allclose(trans, [7, 8, 9])


@pytest.mark.parametrize("matrix", [math3d.rotation_x(2.9), math3d.rotation_y(3.0)])
def test_decompose_large_rotations(matrix):
    _, rotation, _ = math3d.decompose(matrix)
    assert np.allclose(math3d.quaternion_matrix(rotation), matrix)


def test_decompose_zero_scale_raises():
    with pytest.raises(ValueError):
        math3d.decompose(math3d.scaling(0, 1, 1))


def test_look_at_maps_eye_to_origin_and_target_to_forward():
    eye = [1, 2, -5]
    at = [1, 2, 5]
    view = math3d.look_at_lh(eye, at, [0, 1, 0])
    assert np.allclose(math3d.transform_coord(eye, view), [0, 0, 0])
    moved = math3d.transform_coord(at, view)
    assert np.allclose(moved[:2], [0, 0])
    assert moved[2] > 0


def test_perspective_maps_near_and_far_planes():
    proj = math3d.perspective_fov_lh(math.pi / 4, 16 / 9, 0.1, 1000.0)
    assert math.isclose(math3d.transform_coord([0, 0, 0.1], proj)[2], 0.0, abs_tol=1e-9)
    assert math.isclose(math3d.transform_coord([0, 0, 1000.0], proj)[2], 1.0)


def test_plane_normalize_and_dot_coord():
    plane = math3d.plane_normalize([0, 0, 2, -4])
    assert math.isclose(np.linalg.norm(plane[:3]), 1.0)
    assert math.isclose(math3d.plane_dot_coord(plane, [9, 9, 2]), 0.0, abs_tol=1e-12)
    assert math3d.plane_dot_coord(plane, [0, 0, 5]) > 0