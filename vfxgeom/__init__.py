"""Geometry building blocks: 2D/3D lines, plane projection, meshes, remapping and hole bridging."""

__version__ = "0.1.0"
__all__ = ["enums", "exceptions", "holes", "line2", "line3", "mesh", "projection", "remap"]