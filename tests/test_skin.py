import numpy as np
import pytest

from modelkit import math3d
from modelkit.skin import (
    NEGATIVE,
    BlendWeight,
    BoneWeights,
    flip_uv,
    to_matrix,
    to_normal,
    to_position,
)


def test_blend_weight_set_fills_slot():
    blend = BlendWeight()
    blend.set(2, 7, 0.25)
    assert blend.indices.tolist() == [0.0, 0.0, 7.0, 0.0]
    assert blend.weights.tolist() == [0.0, 0.0, 0.25, 0.0]


def test_blend_weight_ignores_out_of_range_slot():
    blend = BlendWeight()
    blend.set(4, 9, 0.5)
    assert blend.indices.tolist() == [0.0] * 4
    assert blend.weights.tolist() == [0.0] * 4


def test_add_weights_sorts_descending():
    bw = BoneWeights()
    bw.add_weights(1, 0.2)
    bw.add_weights(2, 0.7)
    bw.add_weights(3, 0.4)
    assert [bone for bone, _ in bw.weights] == [2, 3, 1]


def test_add_weights_equal_goes_after():
    bw = BoneWeights()
    bw.add_weights(1, 0.5)
    bw.add_weights(2, 0.5)
    assert [bone for bone, _ in bw.weights] == [1, 2]


def test_add_weights_drops_non_positive():
    bw = BoneWeights()
    bw.add_weights(1, 0.0)
    bw.add_weights(2, -0.3)
    assert bw.weights == []


def test_normalize_keeps_four_and_sums_to_one():
    bw = BoneWeights()
    for bone, w in enumerate([0.1, 0.5, 0.3, 0.9, 0.2, 0.4]):
        bw.add_weights(bone, w)
    bw.normalize()
    pairs = bw.weights
    assert len(pairs) == 4
    assert [bone for bone, _ in pairs] == [3, 1, 5, 2]
    assert sum(w for _, w in pairs) == pytest.approx(1.0)


def test_normalize_empty_is_harmless():
    bw = BoneWeights()
    bw.normalize()
    assert bw.weights == []


def test_blend_weights_packs_in_order():
    bw = BoneWeights()
    bw.add_weights(5, 0.25)
    bw.add_weights(8, 0.75)
    blend = bw.blend_weights()
    assert blend.indices.tolist() == [8.0, 5.0, 0.0, 0.0]
    assert blend.weights.tolist() == [0.75, 0.25, 0.0, 0.0]


def test_to_matrix_translation_left_handed():
    m = to_matrix([1, 1, 1], [0, 0, 0, 1], [1, 2, 3], False)
    assert np.allclose(m[3, :3], [1, 2, 3])
    assert np.allclose(m[:3, :3], np.eye(3))


def test_to_matrix_right_handed_mirrors_z():
    m = to_matrix([1, 1, 1], [0, 0, 0, 1], [1, 2, 3], True)
    assert np.allclose(m[3, :3], [1, 2, -3])


def test_to_matrix_round_trips_through_decompose():
    m = to_matrix([2, 3, 4], [0, 0, 0, 1], [5, 6, 7], False)
    scale, rot, trans = math3d.decompose(m)
    assert np.allclose(scale, [2, 3, 4])
    assert np.allclose(trans, [5, 6, 7])
    assert np.allclose(np.abs(rot), [0, 0, 0, 1])


def test_to_matrix_right_handed_identity_stays_identity():
    m = to_matrix([1, 1, 1], [0, 0, 0, 1], [0, 0, 0], True)
    assert np.allclose(m, np.eye(4))


def test_negative_mirror_applied_twice_restores_point():
    once = math3d.transform_coord([1, 2, 3], NEGATIVE)
    assert np.allclose(once, [1, 2, -3])
    twice = math3d.transform_coord(once, NEGATIVE)
    assert np.allclose(twice, [1, 2, 3])


def test_to_position():
    assert np.allclose(to_position([1, 2, 3, 1], True), [1, 2, -3])
    assert np.allclose(to_position([1, 2, 3, 1], False), [1, 2, 3])


def test_to_normal():
    assert np.allclose(to_normal([0, 0, 1, 0], True), [0, 0, -1])
    assert np.allclose(to_normal([0, 0, 1, 0], False), [0, 0, 1])


def test_flip_uv():
    assert np.allclose(flip_uv([0.25, 0.25], True), [0.25, 0.75])
    assert np.allclose(flip_uv([0.25, 0.25], False), [0.25, 0.25])