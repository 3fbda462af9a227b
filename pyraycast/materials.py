"""Surface materials and light sources."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .colour import RGB
from .vector import Vec3


@dataclass(frozen=True)
class Material:
    """Surface appearance. A ``specular`` of -1 disables highlights."""

    colour: RGB
    specular: float
    reflective: float


class LightType(enum.Enum):
    AMBIENT = enum.auto()
    DIRECTION = enum.auto()
    POINT = enum.auto()


@dataclass(frozen=True)
class Light:
    """A light source; only the fields relevant to its type are used."""

    type: LightType
    intensity: float
    direction: Vec3 = Vec3()
    position: Vec3 = Vec3()

    @classmethod
    def ambient(cls, intensity: float) -> Light:
        return cls(LightType.AMBIENT, intensity)

    @classmethod
    def point(cls, intensity: float, position: Vec3) -> Light:
        return cls(LightType.POINT, intensity, position=position)

    @classmethod
    def directional(cls, intensity: float, direction: Vec3) -> Light:
        return cls(LightType.DIRECTION, intensity, direction=direction)