import numpy as np
import pytest

from modelkit.camera import Camera, Perspective
from modelkit.frustum import Frustum


@pytest.fixture
def frustum():
    camera = Camera()
    perspective = Perspective(800, 600)
    f = Frustum(100.0, camera, perspective)
    f.update()
    return f


def test_planes_are_normalized(frustum):
    lengths = np.linalg.norm(frustum.planes[:, :3], axis=1)
    assert np.allclose(lengths, 1.0)


def test_point_in_front_is_inside(frustum):
    assert frustum.contain_point([0, 0, 10]) is True


def test_point_behind_is_outside(frustum):
    assert frustum.contain_point([0, 0, -10]) is False


def test_far_plane_uses_z_far(frustum):
    assert frustum.contain_point([0, 0, 50]) is True
    assert frustum.contain_point([0, 0, 200]) is False


def test_near_plane_cuts_close_points(frustum):
    assert frustum.contain_point([0, 0, 0.05]) is False


def test_point_far_to_the_side_is_outside(frustum):
    assert frustum.contain_point([100, 0, 10]) is False
    assert frustum.contain_point([0, 100, 10]) is False


def test_z_far_change_takes_effect_after_update(frustum):
    frustum.z_far = 500.0
    frustum.update()
    assert frustum.contain_point([0, 0, 200]) is True


def test_rect_behind_is_outside(frustum):
    assert frustum.contain_rect([0, 0, -10], [1, 1, 1]) is False


def test_rect_straddling_is_inside(frustum):
    assert frustum.contain_rect([0, 0, -10], [20, 20, 20]) is True


def test_rect_in_front_is_inside(frustum):
    assert frustum.contain_rect([0, 0, 10], [1, 1, 1]) is True


def test_cube_matches_rect_with_equal_extents(frustum):
    for center in ([0, 0, 10], [0, 0, -10], [50, 0, 10], [0, 0, 150]):
        assert frustum.contain_cube(center, 2.0) == frustum.contain_rect(center, [2, 2, 2])


def test_turned_camera_sees_other_side():
    camera = Camera()
    camera.rotation_degree = [0, 180]
    f = Frustum(100.0, camera, Perspective(800, 600))
    f.update()
    assert f.contain_point([0, 0, -10]) is True
    assert f.contain_point([0, 0, 10]) is False