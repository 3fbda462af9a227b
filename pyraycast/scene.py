"""Scenes: the objects and lights a ray tracer renders."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from os import PathLike
from typing import Optional, Union

from .bvh import BVHNode, build_bvh
from .geometry import AABB, Hit, Ray, Sphere, Triangle
from .materials import Light, Material
from .vector import Vec3

MAX_OBJECTS = 8000
MAX_LIGHTS = 100

# Model vertices are halved and pushed away from the camera.
_MODEL_SCALE = 0.5
_MODEL_OFFSET = Vec3(0.0, 0.0, 5.0)

Shape = Union[Sphere, Triangle]


@dataclass(frozen=True)
class SceneObject:
    """A shape together with its material and cached bounding box."""

    shape: Shape
    material: Material
    bounds: AABB = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bounds", self.shape.bounds())

    def intersect(self, ray: Ray, hit: Hit) -> bool:
        return self.shape.intersect(ray, hit)


class Scene:
    """A collection of objects and lights with an acceleration hierarchy."""

    def __init__(self) -> None:
        self.objects: list[SceneObject] = []
        self.lights: list[Light] = []
        self.root: Optional[BVHNode] = None

    def _add_object(self, obj: SceneObject) -> None:
        if len(self.objects) >= MAX_OBJECTS:
            raise ValueError(f"scene holds at most {MAX_OBJECTS} objects")
        self.objects.append(obj)
        self.root = None

    def add_sphere(self, sphere: Sphere, material: Material) -> None:
        self._add_object(SceneObject(sphere, material))

    def add_triangle(self, triangle: Triangle, material: Material) -> None:
        """Add a triangle, recomputing its normal from its vertices."""
        self._add_object(SceneObject(dataclasses.replace(triangle, normal=None), material))

    def add_model(self, path: Union[str, PathLike], material: Material) -> int:
        """Load triangles from a Wavefront OBJ file; return how many were added."""
        vertices: list[Vec3] = []
        added = 0
        with open(path, encoding="utf-8") as fh:
            for line in fh:
                if line.startswith("v "):
                    coords = line[2:].split()[:3]
                    if len(coords) < 3:
                        raise ValueError(f"malformed vertex line: {line.strip()!r}")
                    vertex = Vec3(*map(float, coords)).scale(_MODEL_SCALE)
                    vertices.append(vertex + _MODEL_OFFSET)
                elif line.startswith("f "):
                    refs = [int(tok.split("/")[0]) for tok in line[2:].split()[:3]]
                    if len(refs) < 3:
                        raise ValueError(f"malformed face line: {line.strip()!r}")
                    if any(not 1 <= ref <= len(vertices) for ref in refs):
                        raise ValueError(f"face refers to unknown vertex: {line.strip()!r}")
                    p0, p1, p2 = (vertices[ref - 1] for ref in refs)
                    self.add_triangle(Triangle(p0, p1, p2), material)
                    added += 1
        return added

    def add_light(self, light: Light) -> None:
        if len(self.lights) >= MAX_LIGHTS:
            raise ValueError(f"scene holds at most {MAX_LIGHTS} lights")
        self.lights.append(light)

    def build_bvh(self) -> BVHNode:
        """Sort objects by bounding-box centre x and build the hierarchy."""
        self.objects.sort(key=lambda obj: obj.bounds.center.x)
        self.root = build_bvh(self.objects)
        return self.root

    def closest_intersection(self, ray: Ray, hit: Hit) -> Hit:
        """Update ``hit`` with the closest object along ``ray`` and normalise its normal."""
        root = self.root if self.root is not None else self.build_bvh()
        root.intersect(ray, self.objects, hit)
        hit.normal = hit.normal.normalize()
        return hit