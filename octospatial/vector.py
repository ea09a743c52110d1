"""Three component vectors with arithmetic and conversion helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

Number = Union[int, float]


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, with halves going away from zero."""
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def _signum(value: Number) -> float:
    value = float(value)
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


def _remainder(value: Number, operand: Number) -> Number:
    """Remainder carrying the sign of the dividend."""
    if isinstance(value, int) and isinstance(operand, int):
        rest = abs(value) % abs(operand)
        return -rest if value < 0 else rest
    return math.fmod(value, operand)


def _floor(value: Number) -> float:
    value = float(value)
    return value if not math.isfinite(value) else float(math.floor(value))


def _ceil(value: Number) -> float:
    value = float(value)
    return value if not math.isfinite(value) else float(math.ceil(value))


@dataclass(frozen=True, order=True)
class V3c:
    """An immutable vector of three numeric components."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    @classmethod
    def unit(cls, scale: Number) -> V3c:
        """A vector with every component set to ``scale``."""
        return cls(scale, scale, scale)

    @classmethod
    def from_sequence(cls, values: Iterable[Number]) -> V3c:
        """Build a vector from the first three items of ``values``."""
        items = list(values)
        if len(items) < 3:
            raise ValueError(f"Expected at least 3 components, got {len(items)}")
        return cls(items[0], items[1], items[2])

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: V3c) -> V3c:
        if not isinstance(other, V3c):
            return NotImplemented
        return V3c(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: V3c) -> V3c:
        if not isinstance(other, V3c):
            return NotImplemented
        return V3c(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[V3c, Number]) -> V3c:
        if isinstance(other, V3c):
            return V3c(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return V3c(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> V3c:
        if isinstance(other, (int, float)):
            return V3c(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, scalar: Number) -> V3c:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return V3c(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> V3c:
        return V3c(-self.x, -self.y, -self.z)

    def abs(self) -> V3c:
        """Component-wise absolute value."""
        return V3c(abs(self.x), abs(self.y), abs(self.z))

    def modulo(self, operand: Number) -> V3c:
        """Component-wise remainder; each result keeps the sign of its component."""
        return V3c(
            _remainder(self.x, operand),
            _remainder(self.y, operand),
            _remainder(self.z, operand),
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> V3c:
        """The vector scaled to unit length, with float components."""
        return self.to_float() / self.length()

    def signum(self) -> V3c:
        """Sign of each component as 1.0 or -1.0 (signed zero keeps its sign)."""
        return V3c(_signum(self.x), _signum(self.y), _signum(self.z))

    def floor(self) -> V3c:
        return V3c(_floor(self.x), _floor(self.y), _floor(self.z))

    def ceil(self) -> V3c:
        return V3c(_ceil(self.x), _ceil(self.y), _ceil(self.z))

    def round(self) -> V3c:
        """Round each component, halves away from zero."""
        return V3c(
            _round_half_away(float(self.x)),
            _round_half_away(float(self.y)),
            _round_half_away(float(self.z)),
        )

    def to_float(self) -> V3c:
        return V3c(float(self.x), float(self.y), float(self.z))

    def to_int(self) -> V3c:
        """Integer vector, rounding each component halves away from zero."""
        rounded = self.round()
        return V3c(int(rounded.x), int(rounded.y), int(rounded.z))

    def cut_each_component(self, value: Number) -> V3c:
        """Clamp every component to at most ``value``."""
        return V3c(min(self.x, value), min(self.y, value), min(self.z, value))

    def cut_by(self, value: V3c) -> V3c:
        """Component-wise minimum with another vector."""
        return V3c(min(self.x, value.x), min(self.y, value.y), min(self.z, value.z))

    def dot(self, other: V3c) -> Number:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: V3c) -> V3c:
        return V3c(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )