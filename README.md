# pyraycast

A small ray tracer with no dependencies. It renders scenes made of spheres
and triangle meshes, lit by ambient, point and directional lights, and writes
the result as a plain-text PPM (P3) image.

Features:

- Sphere intersection by the quadratic formula and triangle intersection by
  the Möller–Trumbore algorithm (`pyraycast.geometry`).
- A bounding volume hierarchy over axis-aligned bounding boxes
  (`pyraycast.bvh`). `Scene.build_bvh()` sorts the objects by the x
  coordinate of their box centres, then nodes are split in halves until fewer
  than ten objects remain in a node.
- Diffuse and specular lighting with hard shadows (`pyraycast.lighting`).
- Loading triangle meshes from simple Wavefront OBJ files: `v` and `f` lines
  are read, the first three entries of each are used, and in a face entry
  such as `3/1/2` only the vertex index counts. Model vertices are scaled by
  0.5 and moved 5 units along +z.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `pyraycast` command renders the demo scene (a mesh model, four spheres
and three lights) and writes it out as a PPM image:

```
pyraycast
```

By default it reads the model from `models/teapot.obj` and writes
`images/image.ppm`, both relative to the current directory; the output
directory must already exist. Options:

- `--model PATH` – OBJ model to include
- `--no-model` – render without a model
- `--output PATH` – PPM file to write
- `--width N`, `--height N` – image size in pixels (default 512 × 512)
- `--depth N` – recursion depth passed to `trace_ray` (default 3)

It prints `Image created!!` on success, and exits with status 1 if the model
cannot be loaded or the image cannot be written, or 2 if the size is not
positive.

## Using the library

```python
from pyraycast.vector import Vec3
from pyraycast.colour import RGB
from pyraycast.materials import Material, Light
from pyraycast.geometry import Sphere
from pyraycast.scene import Scene
from pyraycast.cli import render

scene = Scene()
scene.add_sphere(Sphere(Vec3(0, -1, 3), 1), Material(RGB(255, 0, 0), 500, 0.2))
scene.add_sphere(Sphere(Vec3(0, -5001, 0), 5000), Material(RGB(255, 255, 0), 1000, 0.5))
scene.build_bvh()

scene.add_light(Light.ambient(0.2))
scene.add_light(Light.point(0.6, Vec3(2, 1, 0)))
scene.add_light(Light.directional(0.2, Vec3(1, 4, 4)))

image = render(scene, 256, 256, 3)
image.write_ppm("image.ppm")
```

Triangle meshes are added with `Scene.add_model(path, material)`, which
returns the number of triangles added and raises `ValueError` on malformed
lines or unknown vertex references. Adding an object discards the current
hierarchy; `Scene.closest_intersection` rebuilds it when needed. A scene holds
at most 8000 objects and 100 lights; going past either raises `ValueError`.

Other pieces:

- `Vec3` – immutable vector with `+`, `-`, unary `-`, `scale`, `scale_add`,
  `dot`, `cross`, `magnitude` and `normalize` (which adds 0.0001 to each
  component of the unit vector).
- `RGB` – colour with 0–255 float channels; `+` clamps each channel at 255,
  `scale` multiplies, `as_ints` truncates. `GREY`, `WHITE`, `RED`, `GREEN`,
  `BLUE` and `YELLOW` are predefined in `pyraycast.colour`.
- `Material(colour, specular, reflective)` – a `specular` of -1 turns off
  highlights.
- `AABB`, `Ray`, `Hit`, `Sphere`, `Triangle` in `pyraycast.geometry`;
  `BVHNode`, `build_bvh` and `merge_bounds` in `pyraycast.bvh`.
- `trace_ray` and `canvas_to_viewport` in `pyraycast.raytracer`;
  `compute_lighting` in `pyraycast.lighting`.
- `Image(width, height, background)` in `pyraycast.image` – pixels addressed
  as `(x, y)` with y counted from the bottom row; `put_pixel` raises
  `IndexError` outside the image; `to_ppm` returns the P3 text and
  `write_ppm` saves it.

The camera sits at the origin looking along +z. Rays that hit nothing come
back white.

## Limitations

- Reflections are not rendered: a material's `reflective` value is stored
  but `trace_ray` returns the locally lit colour whatever the depth.
- Output is PPM text only; there is no window or live preview.