[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyraycast"
version = "0.1.0"
description = "A small ray tracer that renders spheres and triangle meshes to PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "bvh", "ppm", "3d", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pyraycast = "pyraycast.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pyraycast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
