"""Octant hashing, index projection and 64 bit occupancy bitmaps."""

from __future__ import annotations

import enum
from typing import Any, Callable, Dict, Tuple

from octospatial.vector import V3c

BITMAP_DIMENSION = 4
_BITMAP_FULL = 0xFFFF_FFFF_FFFF_FFFF


def hash_region(offset: V3c, size_half: float) -> int:
    """Index of the octant that ``offset`` falls in, for a region of half size ``size_half``."""
    return (
        int(offset.x >= size_half)
        + int(offset.z >= size_half) * 2
        + int(offset.y >= size_half) * 4
    )


def hash_direction(direction: V3c) -> int:
    """Index of the octant a direction vector points to."""
    return hash_region(V3c.unit(1.0) + direction, 1.0)


def flat_projection(x: int, y: int, z: int, size: int) -> int:
    """Map a 3D coordinate inside a cube of edge ``size`` to a flat index."""
    return x + y * size + z * size * size


def matrix_index_for(bounds: Any, position: V3c, matrix_dimension: int) -> V3c:
    """Index inside a matrix of ``matrix_dimension`` spanning ``bounds`` for ``position``.

    ``bounds`` needs ``min_position`` and ``size`` attributes.
    """
    low = bounds.min_position
    size = bounds.size
    inside = all(
        lo <= p < lo + size
        for lo, p in zip(low, position)
    )
    if not inside:
        raise ValueError(f"Position {position!r} not inside bounds {bounds!r}")

    index = (
        ((position.to_float() - low) * float(matrix_dimension) / size).floor()
    ).to_int()
    if any(component >= matrix_dimension for component in index):
        raise ValueError(
            f"Matrix index {index!r} out of range for dimension {matrix_dimension}"
        )
    return index


def position_in_bitmap_64bits(index_in_brick: V3c, brick_size: int) -> int:
    """Bit position in a 4x4x4 bitmap for an index inside a brick of ``brick_size``."""
    scaled = []
    for component in index_in_brick:
        value = component * BITMAP_DIMENSION // brick_size
        if value >= BITMAP_DIMENSION:
            raise ValueError(
                f"Expected coordinate {value} == ({component} * {BITMAP_DIMENSION} / "
                f"{brick_size}) to be < bitmap dimension({BITMAP_DIMENSION})"
            )
        scaled.append(value)
    return flat_projection(scaled[0], scaled[1], scaled[2], BITMAP_DIMENSION)


def set_occupancy_in_bitmap_64bits(
    position: V3c, size: int, brick_dim: int, occupied: bool, bitmap: int
) -> int:
    """Return ``bitmap`` with the region at ``position`` of ``size`` set or cleared."""
    if not (brick_dim >= 4 or brick_dim in (1, 2)):
        raise ValueError(f"Unsupported brick dimension {brick_dim}")
    for component in position:
        if component >= brick_dim:
            raise ValueError(
                f"Expected coordinate {component} < brick size({brick_dim})"
            )

    if brick_dim == 1:
        return _BITMAP_FULL if occupied else 0

    update_count = -(-size * BITMAP_DIMENSION // brick_dim)
    start = V3c(*(c * BITMAP_DIMENSION // brick_dim for c in position))

    def span(begin: int) -> range:
        return range(begin, min(begin + update_count, BITMAP_DIMENSION))

    for x in span(start.x):
        for y in span(start.y):
            for z in span(start.z):
                mask = 1 << position_in_bitmap_64bits(V3c(x, y, z), BITMAP_DIMENSION)
                if occupied:
                    bitmap |= mask
                else:
                    bitmap &= ~mask
    return bitmap & _BITMAP_FULL


class CoordinateSystemType(enum.Enum):
    """Handedness and up axis of a coordinate system."""

    LZUP = "left_z_up"
    LYUP = "left_y_up"
    RZUP = "right_z_up"
    RYUP = "right_y_up"


_Conversion = Callable[[V3c], V3c]
_T = CoordinateSystemType


def _flip_z(c: V3c) -> V3c:
    return V3c(c.x, c.y, -c.z)


def _flip_y(c: V3c) -> V3c:
    return V3c(c.x, -c.y, c.z)


def _y_up_to_z_up(c: V3c) -> V3c:
    return V3c(c.x, -c.z, c.y)


def _z_up_to_y_up(c: V3c) -> V3c:
    return V3c(c.x, c.z, -c.y)


def _swap_y_z(c: V3c) -> V3c:
    return V3c(c.x, c.z, c.y)


_CONVERSIONS: Dict[Tuple[CoordinateSystemType, CoordinateSystemType], _Conversion] = {
    (_T.LYUP, _T.RYUP): _flip_z,
    (_T.RYUP, _T.LYUP): _flip_z,
    (_T.LZUP, _T.RZUP): _flip_y,
    (_T.RZUP, _T.LZUP): _flip_y,
    (_T.LYUP, _T.LZUP): _y_up_to_z_up,
    (_T.RYUP, _T.RZUP): _y_up_to_z_up,
    (_T.LZUP, _T.LYUP): _z_up_to_y_up,
    (_T.RZUP, _T.RYUP): _z_up_to_y_up,
    (_T.LYUP, _T.RZUP): _swap_y_z,
    (_T.RZUP, _T.LYUP): _swap_y_z,
    (_T.RYUP, _T.LZUP): _swap_y_z,
    (_T.LZUP, _T.RYUP): _swap_y_z,
}


def convert_coordinate(
    c: V3c, src_type: CoordinateSystemType, dst_type: CoordinateSystemType
) -> V3c:
    """Convert a coordinate from one coordinate system to another."""
    if src_type is dst_type:
        return c
    return _CONVERSIONS[(src_type, dst_type)](c)