"""Light intensity at a surface point: ambient, diffuse, specular and shadows."""

from __future__ import annotations

import math

from .geometry import Hit, Ray
from .materials import LightType
from .scene import Scene

# Shadow rays ignore sphere hits closer than this to avoid self-shadowing.
_SHADOW_T_MIN = 0.001


def compute_lighting(hit: Hit, ray: Ray, scene: Scene) -> float:
    """Return the total light intensity reaching ``hit`` as seen along ``ray``."""
    intensity = 0.0
    for light in scene.lights:
        if light.type is LightType.AMBIENT:
            intensity += light.intensity
            continue

        if light.type is LightType.DIRECTION:
            direction = light.direction
        else:
            direction = light.position - hit.position

        shadow = Hit(t=math.inf, t_min=_SHADOW_T_MIN)
        scene.closest_intersection(Ray(hit.position, direction), shadow)
        if shadow.found:
            continue

        normal_dot_direction = hit.normal.dot(direction)
        if normal_dot_direction > 0:
            intensity += (
                light.intensity
                * normal_dot_direction
                / (hit.normal.magnitude() * direction.magnitude())
            )

        if hit.material.specular != -1:
            reflected = hit.normal.scale(2 * normal_dot_direction) - direction
            view = -ray.direction
            reflected_dot_view = reflected.dot(view)
            if reflected_dot_view > 0:
                cosine = reflected_dot_view / (reflected.magnitude() * view.magnitude())
                intensity += light.intensity * cosine ** hit.material.specular
    return intensity