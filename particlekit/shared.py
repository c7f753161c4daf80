"""Reference-counted shared objects and the pointers that hold them."""

from __future__ import annotations

from typing import Any


def _require_shared(obj: object) -> None:
    if not isinstance(obj, SharedObject):
        raise TypeError(f"shared object expected, got {type(obj).__name__}")


class SharedObject:
    """An object whose lifetime is governed by a use count."""

    _use_count = 0

    def use_count(self) -> int:
        """Return the number of current users."""
        return self._use_count

    @staticmethod
    def make_use(obj: SharedObject | None) -> SharedObject | None:
        """Register one more user of obj and return it."""
        if obj is None:
            return None
        _require_shared(obj)
        obj._use_count += 1
        return obj

    @staticmethod
    def release(obj: SharedObject | None) -> None:
        """Drop one user of obj, destroying it when none remain."""
        if obj is None:
            return
        _require_shared(obj)
        obj._use_count -= 1
        if obj._use_count <= 0:
            obj.destroy()

    def destroy(self) -> None:
        """Called once the last user is gone; subclasses free resources here."""
        self._use_count = 0


def _target(ptr: Any) -> SharedObject | None:
    if isinstance(ptr, ObjectPtr):
        return ptr._ptr
    if ptr is not None:
        _require_shared(ptr)
    return ptr


class ObjectPtr:
    """A counted reference to a SharedObject."""

    __slots__ = ("_ptr",)

    def __init__(self, ptr: SharedObject | ObjectPtr | None = None) -> None:
        self._ptr: SharedObject | None = None
        self._ptr = SharedObject.make_use(_target(ptr))

    def assign(self, ptr: SharedObject | ObjectPtr | None) -> ObjectPtr:
        """Point at another object, releasing the current one."""
        target = _target(ptr)
        if target is not self._ptr:
            SharedObject.release(self._ptr)
            self._ptr = SharedObject.make_use(target)
        return self

    def get(self) -> SharedObject | None:
        """Return the referenced object, or None."""
        return self._ptr

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObjectPtr):
            return self._ptr is other._ptr
        if other is None or isinstance(other, SharedObject):
            return self._ptr is other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return self._ptr is not None

    def __del__(self) -> None:
        ptr = getattr(self, "_ptr", None)
        if ptr is not None:
            self._ptr = None
            SharedObject.release(ptr)

    def __repr__(self) -> str:
        return f"ObjectPtr({self._ptr!r})"