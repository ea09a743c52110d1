"""Look-up tables for octant stepping, bitmap indexing and ray occupancy masks."""

from __future__ import annotations

from itertools import product
from typing import List, Tuple

from octospatial.math import (
    BITMAP_DIMENSION,
    hash_direction,
    hash_region,
    position_in_bitmap_64bits,
    set_occupancy_in_bitmap_64bits,
)
from octospatial.vector import V3c

OOB_OCTANT = 8
"""Result of an octant step that leaves the parent region."""

OCTANT_OFFSET_REGION_LUT: Tuple[V3c, ...] = (
    V3c(0.0, 0.0, 0.0),
    V3c(1.0, 0.0, 0.0),
    V3c(0.0, 0.0, 1.0),
    V3c(1.0, 0.0, 1.0),
    V3c(0.0, 1.0, 0.0),
    V3c(1.0, 1.0, 0.0),
    V3c(0.0, 1.0, 1.0),
    V3c(1.0, 1.0, 1.0),
)
"""Relative offset of each octant inside its parent, in units of the child size."""

BITMAP_MASK_FOR_OCTANT_LUT: Tuple[int, ...] = (
    0x0000000000330033,
    0x0000000000CC00CC,
    0x0033003300000000,
    0x00CC00CC00000000,
    0x0000000033003300,
    0x00000000CC00CC00,
    0x3300330000000000,
    0xCC00CC0000000000,
)
"""Bits of a 4x4x4 occupancy bitmap that belong to each octant."""

BITMAP_INDEX_LUT: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    (
        (0, 16, 32, 48),
        (4, 20, 36, 52),
        (8, 24, 40, 56),
        (12, 28, 44, 60),
    ),
    (
        (1, 17, 33, 49),
        (5, 21, 37, 53),
        (9, 25, 41, 57),
        (13, 29, 45, 61),
    ),
    (
        (2, 18, 34, 50),
        (6, 22, 38, 54),
        (10, 26, 42, 58),
        (14, 30, 46, 62),
    ),
    (
        (3, 19, 35, 51),
        (7, 23, 39, 55),
        (11, 27, 43, 59),
        (15, 31, 47, 63),
    ),
)
"""Bit position inside a 4x4x4 bitmap, indexed as ``[x][y][z]``."""

OCTANT_STEP_RESULT_LUT: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    (
        (143165576, 671647880, 2284357768),
        (1216874632, 1749559304, 2288551976),
        (2290632840, 2290640968, 2290649192),
    ),
    (
        (277383304, 839944328, 2285013128),
        (1418203272, 1985229328, 2289469490),
        (2290635912, 2290644564, 2290649206),
    ),
    (
        (2173208712, 2206304392, 2290321544),
        (2240315784, 2273674113, 2290583683),
        (2290648456, 2290648965, 2290649223),
    ),
)
"""Octant reached by a step, indexed by step sign + 1 per axis.

Each entry packs the result for source octant ``n`` into the four bits at ``4 * n``.
"""

_SPACE_SIZE = 12.0


def _int_sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _octant_after_step(step: V3c, octant: int) -> int:
    center = V3c.unit(_SPACE_SIZE / 4.0) + OCTANT_OFFSET_REGION_LUT[octant] * (
        _SPACE_SIZE / 2.0
    )
    direction = V3c(_int_sign(step.x), _int_sign(step.y), _int_sign(step.z))
    moved = center + direction * (_SPACE_SIZE / 2.0)
    if any(component < 0.0 or component > _SPACE_SIZE for component in moved):
        return OOB_OCTANT
    return hash_region(moved, _SPACE_SIZE / 2.0)


def convert_8bit_bitmap_to_64bit() -> List[int]:
    """Expand each octant of an 8 bit occupancy map into its 64 bit bitmap mask."""
    masks = []
    for offset in OCTANT_OFFSET_REGION_LUT:
        low = V3c(int(offset.x) * 2, int(offset.y) * 2, int(offset.z) * 2)
        mask = 0
        for x, y, z in product(
            range(low.x, low.x + 2), range(low.y, low.y + 2), range(low.z, low.z + 2)
        ):
            mask = set_occupancy_in_bitmap_64bits(
                V3c(x, y, z), 1, BITMAP_DIMENSION, True, mask
            )
        masks.append(mask)
    return masks


def generate_lut_64_bits() -> Tuple[Tuple[int, ...], ...]:
    """Occupancy masks a ray passes through, by bitmap position and diagonal direction.

    The outer index is the bit position of the start cell, the inner index the
    octant hash of the direction the ray travels in.
    """
    table = [[0] * 8 for _ in range(64)]
    last = BITMAP_DIMENSION - 1
    for x, y, z in product(range(BITMAP_DIMENSION), repeat=3):
        position = position_in_bitmap_64bits(V3c(x, y, z), BITMAP_DIMENSION)
        for dx, dy, dz in product((-1, 1), repeat=3):
            direction = hash_direction(V3c(float(dx), float(dy), float(dz)))
            ends = [
                (start, min(max(start + delta * BITMAP_DIMENSION, 0), last))
                for start, delta in ((x, dx), (y, dy), (z, dz))
            ]
            spans = [range(min(a, b), max(a, b) + 1) for a, b in ends]
            mask = 0
            for bx, by, bz in product(*spans):
                mask |= 1 << position_in_bitmap_64bits(
                    V3c(bx, by, bz), BITMAP_DIMENSION
                )
            table[position][direction] = mask
    return tuple(tuple(row) for row in table)


def generate_octant_step_result_lut() -> Tuple[Tuple[Tuple[int, ...], ...], ...]:
    """Build the packed table of octants reached by stepping in each direction."""
    table = [[[0] * 3 for _ in range(3)] for _ in range(3)]
    for octant in range(8):
        shift = 4 * octant
        for x, y, z in product((-1, 0, 1), repeat=3):
            result = _octant_after_step(V3c(x, y, z), octant)
            table[x + 1][y + 1][z + 1] |= (result & 0x0F) << shift
    return tuple(tuple(tuple(column) for column in plane) for plane in table)


def generate_bitmap_flat_index_lut() -> Tuple[Tuple[Tuple[int, ...], ...], ...]:
    """Build the ``[x][y][z]`` table of bit positions inside a 4x4x4 bitmap."""
    return tuple(
        tuple(
            tuple(
                position_in_bitmap_64bits(V3c(x, y, z), BITMAP_DIMENSION)
                for z in range(BITMAP_DIMENSION)
            )
            for y in range(BITMAP_DIMENSION)
        )
        for x in range(BITMAP_DIMENSION)
    )


RAY_TO_NODE_OCCUPANCY_BITMASK_LUT: Tuple[Tuple[int, ...], ...] = generate_lut_64_bits()
"""Bitmap cells a ray may touch, indexed by start bit position and direction octant."""