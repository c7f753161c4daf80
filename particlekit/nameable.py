"""Objects that carry a printable name."""

from __future__ import annotations

_NAME_LIMIT = 127


class NameableObject:
    """Base for objects with a name that can be set from a format string."""

    def __init__(self, name: str = "") -> None:
        self._name = name

    def name(self) -> str:
        """Return the current name."""
        return self._name

    def set_name(self, fmt: str, *args: object) -> None:
        """Set the name from a printf-style format, capped at 127 characters."""
        self._name = (fmt % args)[:_NAME_LIMIT]