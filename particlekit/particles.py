"""Particle buffers and the particle systems that own them."""

from __future__ import annotations

import itertools
from typing import Any, Iterator

from .actor import Actor
from .bounds3 import Bounds3
from .renderer import Renderer
from .shared import ObjectPtr, SharedObject
from .soa import SoA, SoARow
from .vec3 import Vec3


def _copy(value: Any) -> Any:
    return Vec3(*value) if isinstance(value, Vec3) else value


class ParticleBuffer(SharedObject):
    """Fixed-capacity storage of particle positions plus extra vector fields.

    Array 0 holds positions; arrays 1..field_count hold the extra fields.
    """

    def __init__(self, capacity: int, field_count: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        if field_count < 0:
            raise ValueError(f"field count must not be negative: {field_count}")
        self._capacity = capacity
        self._field_count = field_count
        self._particle_count = 0
        self._soa = SoA(capacity, *([Vec3] * (field_count + 1)))

    def particle_count(self) -> int:
        """Return the number of particles added."""
        return self._particle_count

    def capacity(self) -> int:
        """Return the maximum number of particles."""
        return self._capacity

    def add(self, p: Vec3, *args: Any) -> bool:
        """Append a particle; ignored (returning False) when the buffer is full."""
        if len(args) != self._field_count:
            raise TypeError(
                f"expected {self._field_count} fields, got {len(args)}"
            )
        if self._particle_count >= self._capacity:
            return False
        self._soa.set(self._particle_count, _copy(p), *map(_copy, args))
        self._particle_count += 1
        return True

    def clear(self) -> None:
        """Forget all particles, keeping the capacity."""
        self._particle_count = 0

    def position(self, index: int) -> Vec3:
        """Return the position stored at a slot."""
        return self._soa.get(0, index)

    def get_attribute(self, n: int, index: int) -> Any:
        """Return attribute n (0 is the position) at a slot."""
        return self._soa.get(n, index)

    def set_attribute(self, n: int, index: int, value: Vec3) -> None:
        """Replace attribute n (0 is the position) at a slot."""
        self._soa.put(n, index, _copy(value))

    def __iter__(self) -> Iterator[SoARow]:
        """Iterate over every slot of the buffer, used or not."""
        return iter(self._soa)

    def bounds(self) -> Bounds3:
        """Return the box enclosing the positions of all particles."""
        b = Bounds3()
        for i in range(self._particle_count):
            b.inflate(self._soa.get(0, i))
        return b

    def render(self, renderer: Renderer) -> None:
        """Draw each particle position."""
        for i in range(self._particle_count):
            renderer.draw("Particle", self._soa.get(0, i))


class ParticleSystem(Actor):
    """An actor owning a shared particle buffer; named "PS <n>"."""

    _ids = itertools.count(1)

    def __init__(self, field_count: int = 0) -> None:
        super().__init__()
        self.set_name("PS %d", next(ParticleSystem._ids))
        self._field_count = field_count
        self._particles = ObjectPtr()

    def set_particle_buffer(self, capacity: int) -> None:
        """Give the system a buffer of the given capacity."""
        current = self._particles.get()
        if current is not None:
            if current.capacity() == capacity:
                return
            self._particles.assign(None)
        elif not capacity:
            return
        self._particles.assign(ParticleBuffer(capacity, self._field_count))

    def particles(self) -> ParticleBuffer | None:
        """Return the particle buffer, or None."""
        return self._particles.get()

    def bounds(self) -> Bounds3:
        """Return the bounds of the particles, empty without a buffer."""
        buffer = self._particles.get()
        return buffer.bounds() if buffer is not None else Bounds3()

    def render(self, renderer: Renderer) -> None:
        """Draw the particles."""
        buffer = self._particles.get()
        if buffer is None:
            raise RuntimeError(f"{self.name()} has no particle buffer")
        buffer.render(renderer)