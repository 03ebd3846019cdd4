"""Skinning weights and coordinate-system conversion for imported meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from . import math3d

MAX_INFLUENCES = 4

# Mirrors the Z axis to move between right- and left-handed coordinates.
NEGATIVE = np.diag([1.0, 1.0, -1.0, 1.0])


@dataclass
class BlendWeight:
    """Up to four bone indices and their weights for one vertex."""

    indices: np.ndarray = field(default_factory=lambda: np.zeros(MAX_INFLUENCES))
    weights: np.ndarray = field(default_factory=lambda: np.zeros(MAX_INFLUENCES))

    def set(self, index: int, bone_index: int, weight: float) -> None:
        """Store a bone influence in slot ``index``; other slots are ignored."""
        if 0 <= index < MAX_INFLUENCES:
            self.indices[index] = float(bone_index)
            self.weights[index] = float(weight)


class BoneWeights:
    """Bone influences on a control point, kept sorted by descending weight."""

    def __init__(self) -> None:
        self._pairs: list[tuple[int, float]] = []

    @property
    def weights(self) -> list[tuple[int, float]]:
        """The (bone index, weight) pairs in order."""
        return list(self._pairs)

    def add_weights(self, bone_index: int, weight: float) -> None:
        """Insert an influence before the first lighter one; non-positive weights are dropped."""
        if weight <= 0.0:
            return
        pair = (bone_index, float(weight))
        for position, (_, existing) in enumerate(self._pairs):
            if weight > existing:
                self._pairs.insert(position, pair)
                return
        self._pairs.append(pair)

    def normalize(self) -> None:
        """Keep the four heaviest influences and scale them to sum to one."""
        del self._pairs[MAX_INFLUENCES:]
        total = sum(w for _, w in self._pairs)
        if total == 0.0:
            return
        scale = 1.0 / total
        self._pairs = [(bone, w * scale) for bone, w in self._pairs]

    def blend_weights(self) -> BlendWeight:
        """The first four influences packed into a :class:`BlendWeight`."""
        blend = BlendWeight()
        for slot, (bone, w) in enumerate(self._pairs[:MAX_INFLUENCES]):
            blend.set(slot, bone, w)
        return blend


def to_matrix(
    scale: Sequence[float],
    rotation: Sequence[float],
    translation: Sequence[float],
    right_handed: bool,
) -> np.ndarray:
    """Compose scale, quaternion rotation (xyzw) and translation into a matrix.

    A right-handed source is mirrored into left-handed space.
    """
    sx, sy, sz = np.asarray(scale, dtype=float).reshape(3)
    tx, ty, tz = np.asarray(translation, dtype=float).reshape(3)
    m = (
        math3d.scaling(sx, sy, sz)
        @ math3d.quaternion_matrix(rotation)
        @ math3d.translation(tx, ty, tz)
    )
    if right_handed:
        return NEGATIVE @ m @ NEGATIVE
    return m


def to_position(vec: Sequence[float], right_handed: bool) -> np.ndarray:
    """A control-point position, mirrored on Z for right-handed sources."""
    position = np.asarray(vec, dtype=float).reshape(-1)[:3].copy()
    if right_handed:
        return math3d.transform_coord(position, NEGATIVE)
    return position


def to_normal(vec: Sequence[float], right_handed: bool) -> np.ndarray:
    """A vertex normal, mirrored on Z for right-handed sources."""
    normal = np.asarray(vec, dtype=float).reshape(-1)[:3].copy()
    if right_handed:
        return math3d.transform_normal(normal, NEGATIVE)
    return normal


def flip_uv(uv: Sequence[float], right_handed: bool) -> np.ndarray:
    """Texture coordinate with V flipped for right-handed sources."""
    u, v = np.asarray(uv, dtype=float).reshape(-1)[:2]
    if right_handed:
        return np.array([u, 1.0 - v])
    return np.array([u, v])