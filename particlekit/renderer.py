"""A textual renderer that prints labelled values."""

from __future__ import annotations

import sys
from numbers import Real
from typing import TextIO

from .vec3 import Vec3


class Renderer:
    """Writes one line per drawn item to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def draw(self, label: str, value: Vec3 | float) -> Renderer:
        """Write a labelled vector or scalar and return the renderer."""
        if isinstance(value, Vec3):
            text = f"{label}{value}"
        elif isinstance(value, Real):
            text = f"{label}:{float(value):g}"
        else:
            raise TypeError(f"cannot draw {type(value).__name__}")
        out = self._stream if self._stream is not None else sys.stdout
        out.write(text + "\n")
        return self