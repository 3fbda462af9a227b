"""A small ray tracer for spheres and triangle meshes with PPM output."""

__version__ = "0.1.0"