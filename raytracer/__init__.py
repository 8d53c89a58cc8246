"""A small path tracer rendering spheres with diffuse, metal and glass materials to PNG or PPM."""

__version__ = "0.1.0"