"""Particle buffers stored as structures of arrays, with bounds, actors and a text renderer."""

__version__ = "0.1.0"