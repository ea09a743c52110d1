"""Ray casting against axis aligned cubes, plus octant stepping helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from octospatial.cube import Cube
from octospatial.lut import OCTANT_STEP_RESULT_LUT
from octospatial.vector import V3c

FLOAT_ERROR_TOLERANCE = 0.00001


@dataclass(frozen=True)
class Ray:
    """A half line starting at ``origin`` going towards ``direction``."""

    origin: V3c
    direction: V3c

    def is_valid(self) -> bool:
        """True if the direction has unit length."""
        return abs(1.0 - self.direction.length()) < 0.000001

    def point_at(self, d: float) -> V3c:
        """The point at distance ``d`` along the ray."""
        return self.origin + self.direction * d


@dataclass(frozen=True)
class CubeRayIntersection:
    """Result of a ray hitting a cube.

    ``impact_distance`` is ``None`` when the ray starts inside the cube.
    """

    impact_distance: Optional[float] = None


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division following IEEE rules for a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def intersect_ray(cube: Cube, ray: Ray) -> Optional[CubeRayIntersection]:
    """Intersect ``ray`` with ``cube``.

    Returns ``None`` when the ray misses the cube or the cube lies behind it.
    """
    low = cube.min_position
    high = low + V3c.unit(cube.size)
    origin = ray.origin
    direction = ray.direction

    t1 = _divide(low.x - origin.x, direction.x)
    t2 = _divide(high.x - origin.x, direction.x)
    t3 = _divide(low.y - origin.y, direction.y)
    t4 = _divide(high.y - origin.y, direction.y)
    t5 = _divide(low.z - origin.z, direction.z)
    t6 = _divide(high.z - origin.z, direction.z)

    tmin = _fmax(_fmax(_fmin(t1, t2), _fmin(t3, t4)), _fmin(t5, t6))
    tmax = _fmin(_fmin(_fmax(t1, t2), _fmax(t3, t4)), _fmax(t5, t6))

    if tmax < 0.0 or tmin > tmax:
        return None
    if tmin < 0.0:
        return CubeRayIntersection(impact_distance=None)
    return CubeRayIntersection(impact_distance=tmin)


def _step_index(value: float) -> int:
    """Sign of the value truncated towards zero, shifted to 0..2."""
    value = float(value)
    if math.isnan(value):
        return 1
    if value >= 1.0:
        return 2
    if value <= -1.0:
        return 0
    return 1


def step_octant(octant: int, step: V3c) -> int:
    """Octant reached from ``octant`` by stepping towards ``step``.

    Components are truncated to integers before their sign is taken.
    Returns 8 when the step leaves the parent region.
    """
    if not 0 <= octant < 8:
        raise ValueError(f"Octant {octant} out of range 0..7")
    shift = 4 * octant
    packed = OCTANT_STEP_RESULT_LUT[_step_index(step.x)][_step_index(step.y)][
        _step_index(step.z)
    ]
    return (packed >> shift) & 0x0F


def plane_line_intersection(
    plane_point: V3c, plane_normal: V3c, line_origin: V3c, line_direction: V3c
) -> Optional[float]:
    """Signed distance along the line to the plane, or ``None`` if they never meet."""
    origins_diff = plane_point - line_origin
    distance_to_plane = origins_diff.dot(plane_normal)
    directions_dot = line_direction.dot(plane_normal)
    if directions_dot == 0:
        if distance_to_plane == 0:
            return 0.0
        return None
    return distance_to_plane / directions_dot


def cube_impact_normal(cube: Cube, impact_point: V3c) -> V3c:
    """Unit normal of the cube face (or edge, corner) nearest to ``impact_point``."""
    mid_to_impact = cube.min_position + V3c.unit(cube.size / 2.0) - impact_point
    max_component = max(abs(component) for component in mid_to_impact)
    normal = V3c(
        *(
            -component if abs(component) == max_component else 0.0
            for component in mid_to_impact
        )
    )
    if not normal.length() > 0.0:
        raise ValueError(
            f"Impact point {impact_point!r} is at the centre of cube {cube!r}"
        )
    return normal.normalized()