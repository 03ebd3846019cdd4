"""Ray, axis-aligned box and sphere bounding volumes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from . import math3d

_EPSILON = 1e-6


def _vec3(v=(0.0, 0.0, 0.0)) -> np.ndarray:
    return np.asarray(v, dtype=float).reshape(3).copy()


@dataclass
class Ray:
    """A ray with a start position, a direction and a drawing length."""

    position: np.ndarray = field(default_factory=_vec3)
    direction: np.ndarray = field(default_factory=_vec3)
    distance: float = 10.0

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.direction = _vec3(self.direction)

    def get_line(self, world=None) -> list[np.ndarray]:
        """Two points of the drawn segment; the world matrix is not applied."""
        return [self.position.copy(), self.position + self.direction * self.distance]


@dataclass
class BBox:
    """Axis-aligned bounding box."""

    min: np.ndarray = field(default_factory=_vec3)
    max: np.ndarray = field(default_factory=_vec3)

    def __post_init__(self) -> None:
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    def intersect(self, ray: Ray) -> float | None:
        """Distance along the ray to the box, or None when it misses."""
        near, far = 0.0, math.inf
        for axis in range(3):
            origin = ray.position[axis]
            direction = ray.direction[axis]
            if abs(direction) >= _EPSILON:
                inv = 1.0 / direction
                t0 = (self.min[axis] - origin) * inv
                t1 = (self.max[axis] - origin) * inv
                if t0 > t1:
                    t0, t1 = t1, t0
                near = max(t0, near)
                far = min(t1, far)
                if near > far:
                    return None
            elif origin < self.min[axis] or origin > self.max[axis]:
                return None
        return float(near)

    def get_line(self, world) -> list[np.ndarray]:
        """Twelve edges (24 points) of the box after transforming its corners."""
        lo = math3d.transform_coord(self.min, world)
        hi = math3d.transform_coord(self.max, world)

        def p(x, y, z):
            return np.array([x[0], y[1], z[2]])

        lines = []
        for z in (lo, hi):
            lines += [
                p(lo, lo, z), p(hi, lo, z),
                p(lo, hi, z), p(hi, hi, z),
                p(lo, lo, z), p(lo, hi, z),
                p(hi, lo, z), p(hi, hi, z),
            ]
        for x, y in ((lo, lo), (hi, lo), (lo, hi), (hi, hi)):
            lines += [p(x, y, lo), p(x, y, hi)]
        return lines


@dataclass
class BSphere:
    """Bounding sphere with a tessellation used for drawing."""

    center: np.ndarray = field(default_factory=_vec3)
    radius: float = 0.0
    stack_count: int = 20
    slice_count: int = 20

    def __post_init__(self) -> None:
        self.center = _vec3(self.center)

    def intersect(self, ray: Ray) -> float | None:
        """Distance along the ray to the sphere, or None when it misses.

        The test is made against a sphere of this radius about the origin;
        a ray starting inside it gives a distance of 0.
        """
        offset = -ray.position
        sqr = float(offset @ offset)
        radius_sq = self.radius * self.radius
        if sqr <= radius_sq:
            return 0.0
        along = float(offset @ ray.direction)
        if along < 0.0:
            return None
        rest = sqr - along * along
        if rest > radius_sq:
            return None
        return along - math.sqrt(radius_sq - rest)

    def transform(self, world) -> "BSphere":
        """Sphere moved by the world matrix and scaled by its largest diagonal."""
        m = np.asarray(world, dtype=float)
        center = math3d.transform_normal(self.center, m)
        scale = max(m[0, 0], m[1, 1], m[2, 2])
        return BSphere(center, float(scale * self.radius))

    def get_line(self, world) -> list[np.ndarray]:
        """Wireframe of the sphere as pairs of points."""
        sphere = self.transform(world)
        stacks, slices = self.stack_count, self.slice_count
        phi_step = math.pi / stacks
        theta_step = 2.0 * math.pi / slices

        vertices = [sphere.center + np.array([0.0, sphere.radius, 0.0])]
        for i in range(1, stacks):
            phi = i * phi_step
            for k in range(slices + 1):
                theta = k * theta_step
                vertices.append(
                    sphere.center
                    + sphere.radius
                    * np.array(
                        [
                            math.sin(phi) * math.cos(theta),
                            math.cos(phi),
                            math.sin(phi) * math.sin(theta),
                        ]
                    )
                )
        vertices.append(sphere.center + np.array([0.0, -sphere.radius, 0.0]))

        lines: list[np.ndarray] = []
        for i in range(1, slices + 1):
            lines += [vertices[0], vertices[i]]

        base = 1
        ring = slices + 1
        for i in range(stacks - 1):
            for k in range(slices):
                current = base + i * ring + k
                if i < stacks - 2:
                    lines += [vertices[current], vertices[current + ring]]
                lines += [vertices[current], vertices[current + 1]]

        south = len(vertices) - 1
        base = south - ring
        for i in range(slices):
            lines += [vertices[south], vertices[base + i]]

        return [v.copy() for v in lines]