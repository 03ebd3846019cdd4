"""Cameras, perspective projection and viewport picking."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from . import math3d

# Degrees-to-radians factor used when setting a rotation in degrees.
_DEG_TO_RAD = 0.01745328


class Camera:
    """Position and pitch/yaw rotation that produce a view matrix."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._rotation = np.zeros(2)
        self.forward = np.array([0.0, 0.0, 1.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self._mat_rotation = np.eye(4)
        self._mat_view = np.eye(4)
        self._rotate()
        self._move()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.asarray(value, dtype=float).reshape(3).copy()
        self._view()

    @property
    def rotation(self) -> np.ndarray:
        """Pitch and yaw in radians."""
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: Sequence[float]) -> None:
        self._rotation = np.asarray(value, dtype=float).reshape(2).copy()
        self._rotate()

    @property
    def rotation_degree(self) -> np.ndarray:
        return self._rotation * 180.0 / math.pi

    @rotation_degree.setter
    def rotation_degree(self, value: Sequence[float]) -> None:
        self._rotation = np.asarray(value, dtype=float).reshape(2) * _DEG_TO_RAD
        self._rotate()

    @property
    def matrix(self) -> np.ndarray:
        """The current view matrix."""
        return self._mat_view.copy()

    def update(self) -> None:
        """Recompute the rotation axes and the view matrix."""
        self._rotate()
        self._view()

    def _move(self) -> None:
        self._view()

    def _rotate(self) -> None:
        self._mat_rotation = math3d.rotation_x(self._rotation[0]) @ math3d.rotation_y(
            self._rotation[1]
        )
        self.forward = math3d.transform_normal([0, 0, 1], self._mat_rotation)
        self.right = math3d.transform_normal([1, 0, 0], self._mat_rotation)
        self.up = math3d.transform_normal([0, 1, 0], self._mat_rotation)

    def _view(self) -> None:
        self._mat_view = math3d.look_at_lh(self._position, self._position + self.forward, self.up)


class Fixity(Camera):
    """A camera that only refreshes its matrices each frame."""

    def update(self) -> None:
        self._rotate()
        self._view()


class Freedom(Camera):
    """A fly camera driven by WASD/QE keys while the right mouse button is held."""

    def __init__(self, move_speed: float = 20.0, rotation_speed: float = 2.5) -> None:
        super().__init__()
        self.move_speed = move_speed
        self.rotation_speed = rotation_speed

    def update(
        self,
        delta: float = 0.0,
        mouse_pressed: bool = False,
        keys: Iterable[str] = (),
        mouse_move: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        """Advance one frame of ``delta`` seconds from the given input state."""
        if not mouse_pressed:
            return

        pressed = {k.upper() for k in keys}
        forward, right, up = self.forward, self.right, self.up
        step = self.move_speed * delta

        position = self.position
        for positive, negative, axis in (("W", "S", forward), ("D", "A", right), ("E", "Q", up)):
            if axis is forward or axis is up:
                first, second, sign = positive, negative, 1.0
            else:
                first, second, sign = negative, positive, -1.0
            if first in pressed:
                position = position + sign * axis * step
            elif second in pressed:
                position = position - sign * axis * step
        self.position = position

        move = np.asarray(mouse_move, dtype=float).reshape(-1)
        rotation = self.rotation
        rotation[0] += move[1] * self.rotation_speed * delta
        rotation[1] += move[0] * self.rotation_speed * delta
        self.rotation = rotation


class Perspective:
    """Perspective projection defined by screen size and field of view."""

    def __init__(
        self,
        width: float,
        height: float,
        fov: float = math.pi * 0.25,
        zn: float = 0.1,
        zf: float = 1000.0,
    ) -> None:
        self.set(width, height, fov, zn, zf)

    def set(
        self,
        width: float,
        height: float,
        fov: float = math.pi * 0.25,
        zn: float = 0.1,
        zf: float = 1000.0,
    ) -> None:
        """Replace all parameters and rebuild the projection matrix."""
        self.width = float(width)
        self.height = float(height)
        self.fov = float(fov)
        self.aspect = self.width / self.height
        self.zn = float(zn)
        self.zf = float(zf)
        self._projection = math3d.perspective_fov_lh(self.fov, self.aspect, self.zn, self.zf)

    @property
    def matrix(self) -> np.ndarray:
        return self._projection.copy()


class Viewport:
    """Screen rectangle and depth range used for picking."""

    def __init__(
        self,
        width: float,
        height: float,
        x: float = 0.0,
        y: float = 0.0,
        min_depth: float = 0.0,
        max_depth: float = 1.0,
    ) -> None:
        self.set(width, height, x, y, min_depth, max_depth)

    def set(
        self,
        width: float,
        height: float,
        x: float = 0.0,
        y: float = 0.0,
        min_depth: float = 0.0,
        max_depth: float = 1.0,
    ) -> None:
        """Replace the viewport rectangle and depth range."""
        self.width = float(width)
        self.height = float(height)
        self.x = float(x)
        self.y = float(y)
        self.min_depth = float(min_depth)
        self.max_depth = float(max_depth)

    def get_direction(self, view, projection, mouse: Sequence[float]) -> np.ndarray:
        """World-space unit direction through the mouse position on screen."""
        mouse_v = np.asarray(mouse, dtype=float).reshape(-1)
        proj = np.asarray(projection, dtype=float)

        px = (2.0 * mouse_v[0]) / self.width - 1.0
        py = -((2.0 * mouse_v[1]) / self.height - 1.0)
        px /= proj[0, 0]
        py /= proj[1, 1]

        inv_view = math3d.inverse(view)
        direction = math3d.transform_normal([px, py, 1.0], inv_view)
        return math3d.normalize(direction)