"""Rays, hit records, bounding boxes and the primitives rays can strike."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .materials import Material
from .vector import Vec3

_TRIANGLE_EPSILON = 1e-4


@dataclass(frozen=True)
class Ray:
    origin: Vec3
    direction: Vec3


@dataclass
class Hit:
    """The closest intersection found so far along a ray.

    Intersections beyond ``t`` or (for spheres) before ``t_min`` are ignored.
    """

    t: float = math.inf
    t_min: float = 0.0
    position: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    material: Optional[Material] = None
    found: bool = False

    def _record(self, t: float, ray: Ray, normal: Vec3) -> None:
        self.found = True
        self.t = t
        self.position = ray.origin.scale_add(t, ray.direction)
        self.normal = normal


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box."""

    minimum: Vec3
    maximum: Vec3

    @property
    def center(self) -> Vec3:
        return (self.minimum + self.maximum).scale(0.5)

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> AABB:
        pts = list(points)
        if not pts:
            raise ValueError("cannot bound an empty set of points")
        return cls(
            Vec3(*(min(axis) for axis in zip(*pts))),
            Vec3(*(max(axis) for axis in zip(*pts))),
        )

    def merge(self, other: AABB) -> AABB:
        """Return the smallest box enclosing both boxes."""
        return AABB(
            Vec3(*map(min, self.minimum, other.minimum)),
            Vec3(*map(max, self.maximum, other.maximum)),
        )

    def intersects(self, ray: Ray) -> bool:
        """Slab test: does the ray's line pass through the box?"""
        t_near, t_far = -math.inf, math.inf
        for origin, direction, lo, hi in zip(ray.origin, ray.direction, self.minimum, self.maximum):
            if direction != 0:
                t1 = (lo - origin) / direction
                t2 = (hi - origin) / direction
                t_near = max(t_near, min(t1, t2))
                t_far = min(t_far, max(t1, t2))
                if t_far <= t_near:
                    return False
            elif origin < lo or origin > hi:
                return False
        return True


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float

    def bounds(self) -> AABB:
        r = Vec3(self.radius, self.radius, self.radius)
        return AABB(self.center - r, self.center + r)

    def intersect(self, ray: Ray, hit: Hit) -> bool:
        """Update ``hit`` if the ray strikes the sphere closer than its current ``t``."""
        to_origin = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * to_origin.dot(ray.direction)
        c = to_origin.dot(to_origin) - self.radius * self.radius

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return False
        root = math.sqrt(discriminant)
        t = (-b - root) / (2.0 * a)
        if t < 0:
            t = (-b + root) / (2.0 * a)
            if t < 0:
                return False

        if t > hit.t or t < hit.t_min:
            return False
        position = ray.origin.scale_add(t, ray.direction)
        hit._record(t, ray, (position - self.center).normalize())
        return True


@dataclass(frozen=True)
class Triangle:
    """A triangle; its normal defaults to the normalised (p1-p0) x (p2-p0)."""

    p0: Vec3
    p1: Vec3
    p2: Vec3
    normal: Optional[Vec3] = None

    def __post_init__(self) -> None:
        if self.normal is None:
            normal = (self.p1 - self.p0).cross(self.p2 - self.p0).normalize()
            object.__setattr__(self, "normal", normal)

    def bounds(self) -> AABB:
        return AABB.from_points((self.p0, self.p1, self.p2))

    def intersect(self, ray: Ray, hit: Hit) -> bool:
        """Möller-Trumbore test; updates ``hit`` when closer than its current ``t``."""
        edge1 = self.p1 - self.p0
        edge2 = self.p2 - self.p0

        p = ray.direction.cross(edge2)
        determinant = edge1.dot(p)
        if abs(determinant) < _TRIANGLE_EPSILON:
            return False
        inverse = 1.0 / determinant
        to_origin = ray.origin - self.p0

        u = inverse * to_origin.dot(p)
        if u < 0.0 or u > 1.0:
            return False

        q = to_origin.cross(edge1)
        v = inverse * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return False

        t = inverse * edge2.dot(q)
        if t < _TRIANGLE_EPSILON or t > hit.t:
            return False
        hit._record(t, ray, self.normal)
        return True