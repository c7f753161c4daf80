"""Three-component real vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

_FIELDS = ("x", "y", "z")


@dataclass
class Vec3:
    """A mutable 3D vector of real components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def versor(self) -> Vec3:
        """Return the unit vector with the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return (1.0 / self.length()) * self

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    @staticmethod
    def _field(i: int) -> str:
        if not isinstance(i, int) or not 0 <= i < 3:
            raise IndexError(f"Vec3 index out of range: {i!r}")
        return _FIELDS[i]

    def __getitem__(self, i: int) -> float:
        return getattr(self, self._field(i))

    def __setitem__(self, i: int, value: float) -> None:
        setattr(self, self._field(i), value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g},{self.z:g})"