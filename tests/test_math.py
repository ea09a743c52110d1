from dataclasses import dataclass

import pytest

from octospatial.math import (
    CoordinateSystemType,
    convert_coordinate,
    flat_projection,
    hash_direction,
    hash_region,
    matrix_index_for,
    position_in_bitmap_64bits,
    set_occupancy_in_bitmap_64bits,
)
from octospatial.vector import V3c

U64_MAX = 0xFFFFFFFFFFFFFFFF


@dataclass
class _Bounds:
    min_position: V3c
    size: float


def test_hash_region():
    assert hash_region(V3c(0.0, 0.0, 0.0), 5.0) == 0
    assert hash_region(V3c(6.0, 0.0, 0.0), 5.0) == 1
    assert hash_region(V3c(0.0, 0.0, 6.0), 5.0) == 2
    assert hash_region(V3c(6.0, 0.0, 6.0), 5.0) == 3
    assert hash_region(V3c(0.0, 6.0, 0.0), 5.0) == 4
    assert hash_region(V3c(6.0, 6.0, 0.0), 5.0) == 5
    assert hash_region(V3c(0.0, 6.0, 6.0), 5.0) == 6
    assert hash_region(V3c(6.0, 6.0, 6.0), 5.0) == 7


def test_hash_direction():
    assert hash_direction(V3c(-1.0, -1.0, -1.0)) == 0
    assert hash_direction(V3c(1.0, -1.0, -1.0)) == 1
    assert hash_direction(V3c(-1.0, -1.0, 1.0)) == 2
    assert hash_direction(V3c(-1.0, 1.0, -1.0)) == 4
    assert hash_direction(V3c(1.0, 1.0, 1.0)) == 7


def test_flat_projection():
    dimension = 10
    assert flat_projection(0, 0, 0, dimension) == 0
    assert flat_projection(10, 0, 0, dimension) == dimension
    assert flat_projection(0, 1, 0, dimension) == dimension
    assert flat_projection(0, 0, 1, dimension) == dimension * dimension
    assert flat_projection(0, 0, 4, dimension) == dimension * dimension * 4
    assert flat_projection(3, 0, 4, dimension) == dimension * dimension * 4 + 3
    assert (
        flat_projection(3, 2, 4, dimension)
        == dimension * dimension * 4 + dimension * 2 + 3
    )

    seen = set()
    for x in range(dimension):
        for y in range(dimension):
            for z in range(dimension):
                address = flat_projection(x, y, z, dimension)
                assert address not in seen
                seen.add(address)
    assert len(seen) == dimension ** 3


def test_bitmap_flat_projection_exact_size_match():
    assert position_in_bitmap_64bits(V3c(0, 0, 0), 4) == 0
    assert position_in_bitmap_64bits(V3c(0, 0, 2), 4) == 32
    assert position_in_bitmap_64bits(V3c(3, 3, 3), 4) == 63


def test_bitmap_flat_projection_greater_dimension():
    assert position_in_bitmap_64bits(V3c(0, 0, 0), 10) == 0
    assert position_in_bitmap_64bits(V3c(0, 0, 5), 10) == 32
    assert position_in_bitmap_64bits(V3c(5, 5, 5), 10) == 42
    assert position_in_bitmap_64bits(V3c(9, 9, 9), 10) == 63


def test_bitmap_flat_projection_smaller_dimension():
    assert position_in_bitmap_64bits(V3c(0, 0, 0), 2) == 0
    assert position_in_bitmap_64bits(V3c(1, 0, 0), 2) == 2
    assert position_in_bitmap_64bits(V3c(0, 1, 0), 2) == 8
    assert position_in_bitmap_64bits(V3c(1, 1, 0), 2) == 10
    assert position_in_bitmap_64bits(V3c(0, 0, 1), 2) == 32
    assert position_in_bitmap_64bits(V3c(1, 0, 1), 2) == 34
    assert position_in_bitmap_64bits(V3c(0, 1, 1), 2) == 40
    assert position_in_bitmap_64bits(V3c(1, 1, 1), 2) == 42


def test_bitmap_projection_out_of_range():
    with pytest.raises(ValueError, match="bitmap dimension"):
        position_in_bitmap_64bits(V3c(4, 0, 0), 4)


def test_occupancy_bitmap_aligned_dim():
    mask = set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 1, 4, True, 0)
    assert mask == 0x0000000000000001
    mask = set_occupancy_in_bitmap_64bits(V3c(3, 3, 3), 1, 4, True, mask)
    assert mask == 0x8000000000000001
    mask = set_occupancy_in_bitmap_64bits(V3c(2, 2, 2), 1, 4, True, mask)
    assert mask == 0x8000040000000001


def test_occupancy_bitmap_clear():
    mask = set_occupancy_in_bitmap_64bits(V3c(3, 3, 3), 1, 4, False, U64_MAX)
    assert mask == 0x7FFFFFFFFFFFFFFF


def test_occupancy_bitmap_where_dim_is_1():
    mask = set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 1, 1, False, U64_MAX)
    assert mask == 0
    mask = set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 1, 1, True, mask)
    assert mask == U64_MAX


def test_occupancy_bitmap_where_dim_is_2():
    mask = set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 1, 2, True, 0)
    assert mask == 0x0000000000330033
    mask = set_occupancy_in_bitmap_64bits(V3c(1, 1, 1), 1, 2, True, mask)
    assert mask == 0xCC00CC0000330033


@pytest.mark.parametrize(
    "position, brick_dim, message",
    [
        (V3c(5, 5, 5), 4, "Expected coordinate 5 < brick size(4)"),
        (V3c(3, 1, 9), 4, "Expected coordinate 9 < brick size(4)"),
        (V3c(2, 2, 3), 1, "Expected coordinate 2 < brick size(1)"),
        (V3c(4, 4, 4), 2, "Expected coordinate 4 < brick size(2)"),
    ],
)
def test_occupancy_bitmap_position_overflow(position, brick_dim, message):
    with pytest.raises(ValueError) as excinfo:
        set_occupancy_in_bitmap_64bits(position, 1, brick_dim, True, 0)
    assert message in str(excinfo.value)


def test_occupancy_bitmap_unsupported_dim():
    with pytest.raises(ValueError):
        set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 1, 3, True, 0)


def test_occupancy_bitmap_sized_set_aligned_dim():
    assert set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 3, 4, True, 0) == 0x77707770777


def test_occupancy_bitmap_sized_set_where_dim_is_2():
    assert set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 2, 2, True, 0) == U64_MAX


def test_occupancy_bitmap_sized_set_aligned_dim_overflow():
    assert set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 5, 4, True, 0) == U64_MAX


def test_occupancy_bitmap_sized_set_where_dim_is_2_overflow():
    assert set_occupancy_in_bitmap_64bits(V3c(0, 0, 0), 3, 2, True, 0) == U64_MAX


def test_matrix_index_for():
    bounds = _Bounds(V3c(0.0, 0.0, 0.0), 8.0)
    assert matrix_index_for(bounds, V3c(4, 2, 7), 4) == V3c(2, 1, 3)
    offset = _Bounds(V3c(8.0, 8.0, 8.0), 8.0)
    assert matrix_index_for(offset, V3c(8, 15, 12), 8) == V3c(0, 7, 4)


def test_matrix_index_for_outside_bounds():
    bounds = _Bounds(V3c(0.0, 0.0, 0.0), 8.0)
    with pytest.raises(ValueError, match="not inside bounds"):
        matrix_index_for(bounds, V3c(8, 0, 0), 4)


def test_coordinate_conversion():
    source = V3c(1.0, 2.0, 3.0)
    assert (
        convert_coordinate(source, CoordinateSystemType.RZUP, CoordinateSystemType.RZUP)
        == V3c(1.0, 2.0, 3.0)
    )
    assert (
        convert_coordinate(source, CoordinateSystemType.LZUP, CoordinateSystemType.RYUP)
        == V3c(1.0, 3.0, 2.0)
    )
    assert (
        convert_coordinate(source, CoordinateSystemType.RZUP, CoordinateSystemType.RYUP)
        == V3c(1.0, 3.0, -2.0)
    )
    assert (
        convert_coordinate(source, CoordinateSystemType.LYUP, CoordinateSystemType.RYUP)
        == V3c(1.0, 2.0, -3.0)
    )


def test_coordinate_conversion_round_trip():
    source = V3c(1.0, 2.0, 3.0)
    for src in CoordinateSystemType:
        for dst in CoordinateSystemType:
            there = convert_coordinate(source, src, dst)
            back = convert_coordinate(there, dst, src)
            if {src, dst} in (
                {CoordinateSystemType.LYUP, CoordinateSystemType.LZUP},
                {CoordinateSystemType.RYUP, CoordinateSystemType.RZUP},
            ):
                assert back == source
            assert abs(there.length() - source.length()) < 1e-9