"""Three-component vectors used for points, directions and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

# Normalised vectors are nudged by this amount on every axis.
_NORMALIZE_OFFSET = 0.0001


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def scale(self, s: float) -> Vec3:
        """Return the vector multiplied by the scalar ``s``."""
        return Vec3(s * self.x, s * self.y, s * self.z)

    def scale_add(self, s: float, other: Vec3) -> Vec3:
        """Return ``self + s * other``."""
        return Vec3(self.x + s * other.x, self.y + s * other.y, self.z + s * other.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vec3:
        """Return the unit vector plus a small offset on each axis.

        A zero vector has no direction and yields NaN components.
        """
        length = math.sqrt(self.dot(self))
        if length == 0:
            return Vec3(math.nan, math.nan, math.nan)
        return Vec3(
            self.x / length + _NORMALIZE_OFFSET,
            self.y / length + _NORMALIZE_OFFSET,
            self.z / length + _NORMALIZE_OFFSET,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def __str__(self) -> str:
        return f"x: {self.x:f} y: {self.y:f} z: {self.z:f}"