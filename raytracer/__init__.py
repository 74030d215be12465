"""A small path tracer for spheres of diffuse, metallic and glass materials."""

__version__ = "0.1.0"