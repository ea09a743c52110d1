# octospatial

Geometry building blocks for sparse voxel octrees: a small 3D vector type,
octant hashing, 64-bit occupancy bitmaps, precomputed look-up tables and
ray/cube intersection helpers. Pure Python, no dependencies.

## Installation

```
pip install octospatial
```

For running the test suite:

```
pip install "octospatial[test]"
pytest
```

## Modules

### `octospatial.vector`

`V3c` is an immutable (frozen, ordered) dataclass with `x`, `y`, `z`
components. It supports `+`, `-`, unary `-`, `*` by a scalar or
component-wise by another vector, `/` by a scalar, and iteration.

- `V3c.unit(scale)`, `V3c.from_sequence(values)` (raises `ValueError` for
  fewer than three items)
- `dot`, `cross`, `length`, `normalized`
- `abs`, `modulo` (remainder keeps the sign of each component), `signum`,
  `floor`, `ceil`, `round` (halves away from zero)
- `to_float`, `to_int` (rounds halves away from zero)
- `cut_each_component(value)`, `cut_by(other)`: component-wise minimum

### `octospatial.math`

- `hash_region(offset, size_half)`: octant index 0..7 of a point
  (x adds 1, z adds 2, y adds 4).
- `hash_direction(direction)`: octant a direction vector points to.
- `flat_projection(x, y, z, size)`: `x + y*size + z*size*size`.
- `matrix_index_for(bounds, position, matrix_dimension)`: matrix index of a
  position inside any object with `min_position` and `size`.
- `position_in_bitmap_64bits(index_in_brick, brick_size)`: bit position in a
  4x4x4 bitmap.
- `set_occupancy_in_bitmap_64bits(position, size, brick_dim, occupied, bitmap)`:
  returns the updated 64-bit bitmap.
- `convert_coordinate(c, src_type, dst_type)` with the
  `CoordinateSystemType` enum (`LZUP`, `LYUP`, `RZUP`, `RYUP`).
- `BITMAP_DIMENSION` (4).

Out-of-range coordinates, positions outside the bounds and unsupported
brick dimensions raise `ValueError`.

### `octospatial.lut`

Tables: `OOB_OCTANT`, `OCTANT_OFFSET_REGION_LUT`,
`BITMAP_MASK_FOR_OCTANT_LUT`, `BITMAP_INDEX_LUT` (`[x][y][z]`),
`OCTANT_STEP_RESULT_LUT` and `RAY_TO_NODE_OCCUPANCY_BITMASK_LUT`
(built at import by `generate_lut_64_bits`).

Generators: `generate_lut_64_bits`, `generate_octant_step_result_lut`,
`generate_bitmap_flat_index_lut` and `convert_8bit_bitmap_to_64bit`
(the 64-bit mask of each octant).

### `octospatial.cube`

`Cube(min_position, size)` with `Cube.root_bounds(size)` and
`child_bounds_for(octant)` (raises `ValueError` outside 0..7).

### `octospatial.raytracing`

- `Ray(origin, direction)` with `is_valid()` (unit-length direction) and
  `point_at(d)`.
- `intersect_ray(cube, ray)`: `None` on a miss or when the cube is behind
  the ray; otherwise a `CubeRayIntersection` whose `impact_distance` is the
  entry distance, or `None` when the ray starts inside the cube.
- `step_octant(octant, step)`: octant reached by a step, 8 when it leaves
  the parent.
- `plane_line_intersection(plane_point, plane_normal, line_origin, line_direction)`
- `cube_impact_normal(cube, impact_point)`: raises `ValueError` at the
  cube's centre.
- `FLOAT_ERROR_TOLERANCE`.

## Example

```python
from octospatial.vector import V3c
from octospatial.cube import Cube
from octospatial.math import hash_region, set_occupancy_in_bitmap_64bits
from octospatial.raytracing import Ray, intersect_ray

# Which octant of a 10-unit node does a point fall into?
octant = hash_region(V3c(6.0, 0.0, 6.0), 5.0)   # 3

# Bounds of that child node
child = Cube.root_bounds(10.0).child_bounds_for(octant)

# Mark a voxel as occupied in a 4x4x4 occupancy bitmap
bitmap = set_occupancy_in_bitmap_64bits(V3c(2, 2, 2), 1, 4, True, 0)

# Cast a ray straight down onto a cube
ray = Ray(origin=V3c(2.0, 5.0, 2.0), direction=V3c(0.0, -1.0, 0.0))
hit = intersect_ray(Cube(V3c.unit(0.0), 4.0), ray)
if hit is not None:
    print(hit.impact_distance)  # 1.0
```

Bitmaps are plain Python integers holding 64 bits; functions that update
a bitmap return the new value rather than modifying it in place.

## What it does not do

This package has no octree container: there is no voxel storage, no
insert/get/clear, no tree traversal or ray casting through a whole tree,
no saving or loading, and no rendering. It provides the spatial helpers
such a structure would be built on.