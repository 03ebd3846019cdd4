"""View frustum built from a camera and a perspective projection."""

from __future__ import annotations

from itertools import product
from typing import Sequence

import numpy as np

from . import math3d
from .camera import Camera, Perspective


class Frustum:
    """Six clipping planes (near, far, left, right, top, bottom) for culling.

    The far plane is placed at ``z_far`` instead of the projection's own far
    distance. Call :meth:`update` after the camera or projection changes.
    """

    def __init__(self, z_far: float, camera: Camera, perspective: Perspective) -> None:
        self.z_far = float(z_far)
        self.camera = camera
        self.perspective = perspective
        self.planes = np.zeros((6, 4))

    def update(self) -> None:
        """Rebuild the planes from the current view and projection matrices."""
        view = self.camera.matrix
        projection = self.perspective.matrix

        z_near = -projection[3, 2] / projection[2, 2]
        r = self.z_far / (self.z_far - z_near)
        projection[2, 2] = r
        projection[3, 2] = -r * z_near

        m = view @ projection
        col = [m[:, i] for i in range(4)]

        raw = [
            col[3] + col[2],  # near
            col[3] - col[2],  # far
            col[3] + col[0],  # left
            col[3] - col[0],  # right
            col[3] - col[1],  # top
            col[3] + col[1],  # bottom
        ]
        self.planes = np.array([math3d.plane_normalize(p) for p in raw])

    def contain_point(self, position: Sequence[float]) -> bool:
        """True when the point lies on the inner side of every plane."""
        return all(math3d.plane_dot_coord(plane, position) >= 0.0 for plane in self.planes)

    def _contains_box(self, center: np.ndarray, half: np.ndarray) -> bool:
        corners = [center + np.array(signs) * half for signs in product((-1.0, 1.0), repeat=3)]
        return all(
            any(math3d.plane_dot_coord(plane, corner) >= 0.0 for corner in corners)
            for plane in self.planes
        )

    def contain_rect(self, center: Sequence[float], size: Sequence[float]) -> bool:
        """True unless some plane has all eight box corners outside it.

        ``size`` holds the half extents along each axis.
        """
        return self._contains_box(
            np.asarray(center, dtype=float).reshape(3),
            np.asarray(size, dtype=float).reshape(3),
        )

    def contain_cube(self, center: Sequence[float], radius: float) -> bool:
        """Like :meth:`contain_rect` for a cube with half extent ``radius``."""
        return self._contains_box(
            np.asarray(center, dtype=float).reshape(3),
            np.full(3, float(radius)),
        )