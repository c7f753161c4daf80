"""Axis-aligned bounding boxes in 3D."""

from __future__ import annotations

from .vec3 import Vec3

FLT_MAX = 3.4028234663852886e38


class Bounds3:
    """An axis-aligned box; starts empty and grows with inflate()."""

    def __init__(self) -> None:
        self._p1 = Vec3()
        self._p2 = Vec3()
        self.set_empty()

    def min(self) -> Vec3:
        """Return a copy of the minimum corner."""
        return Vec3(*self._p1)

    def max(self) -> Vec3:
        """Return a copy of the maximum corner."""
        return Vec3(*self._p2)

    def __getitem__(self, i: int) -> Vec3:
        if i == 0:
            return self.min()
        if i == 1:
            return self.max()
        raise IndexError(f"Bounds3 index out of range: {i!r}")

    def contains(self, p: Vec3) -> bool:
        """Tell whether point p lies inside the box, borders included."""
        return all(lo <= c <= hi for lo, c, hi in zip(self._p1, p, self._p2))

    def set_empty(self) -> None:
        """Reset the box to the empty state."""
        self._p1 = Vec3(FLT_MAX, FLT_MAX, FLT_MAX)
        self._p2 = Vec3(-FLT_MAX, -FLT_MAX, -FLT_MAX)

    def _is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self._p1, self._p2))

    def inflate(self, item: Vec3 | Bounds3) -> None:
        """Grow the box to enclose a point or another box."""
        if isinstance(item, Bounds3):
            if not item._is_empty():
                self.inflate(item._p1)
                self.inflate(item._p2)
            return
        if not isinstance(item, Vec3):
            raise TypeError(f"cannot inflate bounds with {type(item).__name__}")
        for i, c in enumerate(item):
            if c < self._p1[i]:
                self._p1[i] = c
            if c > self._p2[i]:
                self._p2[i] = c

    def __str__(self) -> str:
        return f"min{self._p1} max{self._p2}"