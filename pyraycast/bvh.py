"""Bounding volume hierarchy used to skip objects a ray cannot hit."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

from .geometry import AABB, Hit, Ray
from .vector import Vec3

# Nodes holding fewer primitives than this become leaves.
LEAF_SIZE = 10

_EMPTY_BOUNDS = AABB(
    Vec3(math.inf, math.inf, math.inf),
    Vec3(-math.inf, -math.inf, -math.inf),
)


class Bounded(Protocol):
    """Anything the hierarchy can hold: bounds, a material and an intersection test."""

    bounds: AABB
    material: Any

    def intersect(self, ray: Ray, hit: Hit) -> bool: ...


def merge_bounds(b1: AABB, b2: AABB) -> AABB:
    """Return the smallest box enclosing both boxes."""
    return b1.merge(b2)


@dataclass(frozen=True)
class BVHNode:
    """A node of the hierarchy; leaves have no children."""

    bounds: AABB
    indexes: tuple[int, ...]
    left: Optional[BVHNode] = None
    right: Optional[BVHNode] = None

    def is_leaf(self) -> bool:
        return self.left is None

    def intersect(self, ray: Ray, objects: Sequence[Bounded], hit: Hit) -> None:
        """Update ``hit`` with the closest primitive under this node the ray strikes."""
        if not self.bounds.intersects(ray):
            return
        if self.is_leaf():
            for index in self.indexes:
                obj = objects[index]
                if obj.intersect(ray, hit):
                    hit.material = obj.material
            return
        self.left.intersect(ray, objects, hit)
        self.right.intersect(ray, objects, hit)


def _build(objects: Sequence[Bounded], indexes: tuple[int, ...]) -> BVHNode:
    bounds = functools.reduce(
        merge_bounds, (objects[i].bounds for i in indexes), _EMPTY_BOUNDS
    )
    if len(indexes) < LEAF_SIZE:
        return BVHNode(bounds, indexes)
    half = len(indexes) // 2
    return BVHNode(
        bounds,
        indexes,
        _build(objects, indexes[:half]),
        _build(objects, indexes[half:]),
    )


def build_bvh(objects: Sequence[Bounded]) -> BVHNode:
    """Build a hierarchy over ``objects`` by halving them in their given order."""
    return _build(objects, tuple(range(len(objects))))