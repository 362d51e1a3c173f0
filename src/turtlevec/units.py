"""Unit-tagged value types: positions, angles and distances."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def origin(cls) -> "Position":
        return cls(0.0, 0.0)

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Position":
        return Position(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def min(self, other: "Position") -> "Position":
        """Componentwise minimum."""
        return Position(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: "Position") -> "Position":
        """Componentwise maximum."""
        return Position(max(self.x, other.x), max(self.y, other.y))

    def flip_y(self) -> "Position":
        return Position(self.x, -self.y)

    def distance_to(self, other: "Position") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Degree:
    value: float

    def to_radians(self) -> "Radian":
        return Radian(math.radians(self.value))


@dataclass(frozen=True)
class Radian:
    value: float

    def to_degrees(self) -> Degree:
        return Degree(math.degrees(self.value))


@dataclass(frozen=True)
class Distance:
    value: float

    def __neg__(self) -> "Distance":
        return Distance(-self.value)


def as_degrees(angle: float | Degree | Radian) -> Degree:
    """Plain numbers are taken as degrees; radians are converted explicitly."""
    if isinstance(angle, Degree):
        return angle
    if isinstance(angle, Radian):
        return angle.to_degrees()
    return Degree(float(angle))


def as_distance(distance: float | Distance) -> Distance:
    if isinstance(distance, Distance):
        return distance
    return Distance(float(distance))
