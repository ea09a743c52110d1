"""Vectors, octant hashing, occupancy bitmaps, look-up tables and ray/cube intersection."""

__version__ = "0.1.0"
__all__ = ["vector", "math", "lut", "cube", "raytracing"]