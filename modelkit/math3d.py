"""Vector, matrix and plane helpers using the row-vector, left-handed convention.

Points are multiplied on the left of a matrix (``v @ M``), so translation
lives in the last row and matrices compose left to right.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

ArrayLike = Sequence[float] | np.ndarray


def _vec(v: ArrayLike, size: int) -> np.ndarray:
    arr = np.asarray(v, dtype=float).reshape(-1)
    if arr.shape[0] < size:
        raise ValueError(f"expected at least {size} components, got {arr.shape[0]}")
    return arr[:size].copy()


def _mat(m: ArrayLike) -> np.ndarray:
    arr = np.asarray(m, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4)


def rotation_x(angle: float) -> np.ndarray:
    """Rotation about the X axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, s, 0.0],
            [0.0, -s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(angle: float) -> np.ndarray:
    """Rotation about the Y axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> np.ndarray:
    """Scaling matrix."""
    return np.diag([float(x), float(y), float(z), 1.0])


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Translation matrix."""
    m = np.eye(4)
    m[3, :3] = (x, y, z)
    return m


def quaternion_matrix(q: ArrayLike) -> np.ndarray:
    """Rotation matrix for a unit quaternion given as ``(x, y, z, w)``."""
    x, y, z, w = _vec(q, 4)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y + z * w), 2 * (x * z - y * w), 0.0],
            [2 * (x * y - z * w), 1 - 2 * (x * x + z * z), 2 * (y * z + x * w), 0.0],
            [2 * (x * z + y * w), 2 * (y * z - x * w), 1 - 2 * (x * x + y * y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def normalize(v: ArrayLike) -> np.ndarray:
    """Unit vector in the direction of ``v``; a zero vector stays zero."""
    arr = np.asarray(v, dtype=float).reshape(-1).copy()
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        return np.zeros_like(arr)
    return arr / length


def look_at_lh(eye: ArrayLike, at: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Left-handed view matrix looking from ``eye`` towards ``at``."""
    eye_v = _vec(eye, 3)
    z_axis = normalize(_vec(at, 3) - eye_v)
    x_axis = normalize(np.cross(_vec(up, 3), z_axis))
    y_axis = np.cross(z_axis, x_axis)
    m = np.eye(4)
    m[:3, 0] = x_axis
    m[:3, 1] = y_axis
    m[:3, 2] = z_axis
    m[3, :3] = (-x_axis @ eye_v, -y_axis @ eye_v, -z_axis @ eye_v)
    return m


def perspective_fov_lh(fov: float, aspect: float, zn: float, zf: float) -> np.ndarray:
    """Left-handed perspective projection from a vertical field of view."""
    y_scale = 1.0 / math.tan(fov / 2.0)
    x_scale = y_scale / aspect
    depth = zf / (zf - zn)
    m = np.zeros((4, 4))
    m[0, 0] = x_scale
    m[1, 1] = y_scale
    m[2, 2] = depth
    m[2, 3] = 1.0
    m[3, 2] = -zn * depth
    return m


def inverse(m: ArrayLike) -> np.ndarray:
    """Inverse of a 4x4 matrix; raises ValueError if it is singular."""
    mat = _mat(m)
    if abs(np.linalg.det(mat)) < 1e-12:
        raise ValueError("matrix is singular")
    return np.linalg.inv(mat)


def transform_coord(v: ArrayLike, m: ArrayLike) -> np.ndarray:
    """Transform a point (w = 1) and project back by dividing by w."""
    out = np.append(_vec(v, 3), 1.0) @ _mat(m)
    w = out[3]
    if w == 0.0:
        return np.zeros(3)
    return out[:3] / w


def transform_normal(v: ArrayLike, m: ArrayLike) -> np.ndarray:
    """Transform a direction (w = 0), ignoring translation."""
    return (np.append(_vec(v, 3), 0.0) @ _mat(m))[:3]


def _quaternion_from_rotation(r: np.ndarray) -> np.ndarray:
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        return np.array(
            [(r[1, 2] - r[2, 1]) / s, (r[2, 0] - r[0, 2]) / s, (r[0, 1] - r[1, 0]) / s, 0.25 * s]
        )
    if r[0, 0] >= r[1, 1] and r[0, 0] >= r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
        return np.array(
            [0.25 * s, (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s, (r[1, 2] - r[2, 1]) / s]
        )
    if r[1, 1] >= r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
        return np.array(
            [(r[0, 1] + r[1, 0]) / s, 0.25 * s, (r[1, 2] + r[2, 1]) / s, (r[2, 0] - r[0, 2]) / s]
        )
    s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
    return np.array(
        [(r[0, 2] + r[2, 0]) / s, (r[1, 2] + r[2, 1]) / s, 0.25 * s, (r[0, 1] - r[1, 0]) / s]
    )


def decompose(m: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a transform into (scale, rotation quaternion xyzw, translation).

    Raises ValueError when a scale component is zero.
    """
    mat = _mat(m)
    scale = np.linalg.norm(mat[:3, :3], axis=1)
    if np.any(scale == 0.0):
        raise ValueError("matrix has a zero scale component")
    rotation = mat[:3, :3] / scale[:, None]
    return scale, _quaternion_from_rotation(rotation), mat[3, :3].copy()


def plane_normalize(plane: ArrayLike) -> np.ndarray:
    """Scale a plane (a, b, c, d) so that its normal has unit length."""
    p = _vec(plane, 4)
    length = float(np.linalg.norm(p[:3]))
    if length == 0.0:
        return np.zeros(4)
    return p / length


def plane_dot_coord(plane: ArrayLike, point: ArrayLike) -> float:
    """Signed distance-like value ``a*x + b*y + c*z + d``."""
    p = _vec(plane, 4)
    return float(p[:3] @ _vec(point, 3) + p[3])