# particlekit

A small toolkit that stores particles in a structure-of-arrays layout.

Each particle has a position (`Vec3`) and a fixed number of extra `Vec3`
fields, such as velocity or colour. A `ParticleSystem` owns a
`ParticleBuffer` with a fixed capacity. The system can report the
axis-aligned `Bounds3` of all positions and draw them through a plain-text
`Renderer`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from particlekit.particles import ParticleSystem
from particlekit.vec3 import Vec3
from particlekit.renderer import Renderer

ps = ParticleSystem(2)           # two fields besides the position
ps.set_particle_buffer(2)        # room for two particles
pb = ps.particles()

pb.add(Vec3(10, 10, 10), Vec3(0, 0, 0), Vec3(0, 0, 1))
pb.add(Vec3(11, 11, 11), Vec3(10, 20, 30), Vec3(1, 0, 0))

for row in pb:                   # every slot of the buffer, used or not
    print(row.get(0), row.get(1), row.get(2))

pb.set_attribute(1, 1, Vec3(1, 1, 1))   # attribute 1 (velocity) of particle 1

print(ps.name(), pb.capacity(), pb.particle_count())
print(ps.bounds())               # min(10,10,10) max(11,11,11)
ps.render(Renderer())            # one "Particle(x,y,z)" line per particle
```

`ParticleBuffer.add` copies the vectors it is given and returns `True`. When
the buffer is full it stores nothing and returns `False`. It raises
`TypeError` if the number of fields is wrong. Attribute `0` is the position.

Every new `ParticleSystem` is named `PS <n>`, with `n` counting up from 1.

`set_particle_buffer(capacity)` works as follows:

- If the current buffer already has that capacity, it is kept.
- Otherwise the system gets a fresh, empty buffer.
- A capacity of 0 creates no buffer when there is none yet.

`render` raises `RuntimeError` when the system has no buffer.

## Other building blocks

- `particlekit.vec3.Vec3` is a mutable vector. It supports `+`, `-`,
  scaling by a number, indexing, `length()` and `versor()`. It prints as
  `(x,y,z)`.
- `particlekit.bounds3.Bounds3` is an axis-aligned box. It starts empty and
  grows with `inflate()`, which takes a point or another box. `contains()`
  includes the borders.
- `particlekit.soa.SoA` holds parallel arrays of the same length. You build
  it from one default-element factory per array, e.g. `SoA(4, int, Vec3)`.
  It offers element and row access, `tuple`/`set_tuple`, `swap` and
  `reallocate`. Iterating it yields `SoARow` views.
- `particlekit.object_list.ObjectList` is an intrusive doubly linked list of
  `ObjectListNode` objects. A node belongs to at most one list, and adding it
  to another list moves it there.
- `particlekit.shared.SharedObject` and `ObjectPtr` provide use counting.
  `destroy()` is called when the last `ObjectPtr` lets go.
- `particlekit.nameable.NameableObject` is a base class with a name set from
  a `%`-style format. The name is capped at 127 characters.
- `particlekit.actor.Actor` is the abstract base for objects that have
  `bounds()` and `render()`.

## Command line

```
particlekit
```

This builds a sample system with two particles and prints each one's
position, velocity and colour. The labels are in Portuguese: "Posição",
"Velocidade" and "Cor". It then changes one velocity and prints the
particles again. Next it prints the system's name, the buffer's capacity,
the particle count and the bounds. Finally it waits for one character on
standard input before exiting.

## What it does not do

- There is no simulation step. Particles only move when you set their
  attributes yourself.
- There is no scene type. `Actor.scene()` returns `None` unless something
  sets it.
- The only output is the text `Renderer`. There is no graphical display.