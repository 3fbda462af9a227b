"""Command-line entry point that renders the demo scene to a PPM file."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from typing import Optional, Sequence, Union

from .colour import BLUE, GREEN, RED, YELLOW
from .geometry import Ray, Sphere
from .image import DEFAULT_HEIGHT, DEFAULT_WIDTH, Image
from .materials import Light, Material
from .raytracer import canvas_to_viewport, trace_ray
from .scene import Scene
from .vector import Vec3

DEFAULT_MODEL = "models/teapot.obj"
DEFAULT_OUTPUT = "images/image.ppm"
DEFAULT_DEPTH = 3

_CAMERA = Vec3(0.0, 0.0, 0.0)


def build_demo_scene(model_path: Optional[Union[str, PathLike]] = DEFAULT_MODEL) -> Scene:
    """Build the demo scene: a model, four spheres and three lights.

    Pass ``None`` for ``model_path`` to leave the model out.
    """
    scene = Scene()
    if model_path is not None:
        scene.add_model(model_path, Material(GREEN, specular=50, reflective=0.3))

    scene.add_sphere(Sphere(Vec3(0, -1, 3), 1), Material(RED, specular=500, reflective=0.2))
    scene.add_sphere(Sphere(Vec3(2, 0, 4), 1), Material(BLUE, specular=500, reflective=0.3))
    scene.add_sphere(Sphere(Vec3(-2, 0, 4), 1), Material(GREEN, specular=10, reflective=0.4))
    scene.add_sphere(
        Sphere(Vec3(0, -5001, 0), 5000), Material(YELLOW, specular=1000, reflective=0.5)
    )
    scene.build_bvh()

    scene.add_light(Light.ambient(0.2))
    scene.add_light(Light.point(0.6, Vec3(2, 1, 0)))
    scene.add_light(Light.directional(0.2, Vec3(1, 4, 4)))
    return scene


def render(
    scene: Scene,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    depth: int = DEFAULT_DEPTH,
) -> Image:
    """Cast one ray per pixel from the camera and return the image."""
    image = Image(width, height)
    for x in range(width):
        for y in range(height):
            target = canvas_to_viewport(x, y, width, height)
            ray = Ray(_CAMERA, (target - _CAMERA).normalize())
            image.put_pixel(x, y, trace_ray(ray, scene, depth))
    return image


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the demo scene to a PPM image.")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="OBJ model to include")
    parser.add_argument("--no-model", action="store_true", help="render without the model")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="PPM file to write")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--depth", type=int, default=DEFAULT_DEPTH)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        print("width and height must be positive", file=sys.stderr)
        return 2
    try:
        scene = build_demo_scene(None if args.no_model else args.model)
    except (OSError, ValueError) as exc:
        print(f"Error loading model: {exc}", file=sys.stderr)
        return 1

    image = render(scene, args.width, args.height, args.depth)
    try:
        image.write_ppm(args.output)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    print("Image created!!")
    return 0


if __name__ == "__main__":
    sys.exit(main())