"""Demonstration command: fills a small particle system and prints it."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .particles import ParticleBuffer, ParticleSystem
from .vec3 import Vec3


def _dump(buffer: ParticleBuffer) -> None:
    for row in buffer:
        print(f"Posição: {row.get(0)}")
        print(f"Velocidade: {row.get(1)}")
        print(f"Cor: {row.get(2)}")
        print()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the particle demo and wait for a key before exiting."""
    parser = argparse.ArgumentParser(
        prog="particlekit", description="Particle system demo."
    )
    parser.parse_args(argv)

    ps = ParticleSystem(2)
    ps.set_particle_buffer(2)
    pb = ps.particles()

    pb.add(Vec3(10, 10, 10), Vec3(), Vec3(0, 0, 1))
    pb.add(Vec3(11, 11, 11), Vec3(10, 20, 30), Vec3(1, 0, 0))
    _dump(pb)

    pb.set_attribute(1, 1, Vec3(1, 1, 1))

    print("-----------------------")
    _dump(pb)
    print()

    pc = pb.particle_count()
    print(f"{ps.name()} (capacity: {pb.capacity()})")
    print(f"Particles: {pc}\nBounds: ", end="")
    print(ps.bounds() if pc else "<empty>")
    print("Press any key to exit...")
    sys.stdout.flush()
    sys.stdin.read(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())