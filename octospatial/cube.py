"""Axis aligned cubes bounding octree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from octospatial.lut import OCTANT_OFFSET_REGION_LUT
from octospatial.vector import V3c


@dataclass(frozen=True)
class Cube:
    """A cube given by its minimum corner and edge length."""

    min_position: V3c = field(default_factory=lambda: V3c(0.0, 0.0, 0.0))
    size: float = 0.0

    @classmethod
    def root_bounds(cls, size: float) -> Cube:
        """A cube of edge ``size`` starting at the origin."""
        return cls(V3c.unit(0.0), size)

    def child_bounds_for(self, octant: int) -> Cube:
        """Bounds of the given octant (0..7) inside this cube."""
        if not 0 <= octant < len(OCTANT_OFFSET_REGION_LUT):
            raise ValueError(f"Octant {octant} out of range 0..7")
        child_size = self.size / 2.0
        return Cube(
            self.min_position + OCTANT_OFFSET_REGION_LUT[octant] * child_size,
            child_size,
        )