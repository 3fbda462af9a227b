"""Camera mapping and per-ray colour computation."""

from __future__ import annotations

import math

from .colour import RGB, WHITE
from .geometry import Hit, Ray
from .lighting import compute_lighting
from .scene import Scene
from .vector import Vec3

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512

# Primary rays ignore sphere hits nearer than the viewport plane.
_PRIMARY_T_MIN = 1.0


def canvas_to_viewport(x: int, y: int, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Vec3:
    """Map pixel (x, y) to a point on the viewport plane at z = 1.

    Both axes are divided by the width so pixels stay square.
    """
    return Vec3((x - width / 2.0) / width, (y - height / 2.0) / width, 1.0)


def trace_ray(ray: Ray, scene: Scene, depth: int) -> RGB:
    """Return the colour seen along ``ray``; white where nothing is hit."""
    hit = Hit(t=math.inf, t_min=_PRIMARY_T_MIN)
    scene.closest_intersection(ray, hit)
    if not hit.found:
        return WHITE

    intensity = compute_lighting(hit, ray, scene)
    local_colour = hit.material.colour.scale(intensity)

    if depth <= 0 or hit.material.reflective <= 0:
        return local_colour
    return local_colour