"""Structure-of-arrays storage: parallel arrays addressed by row index."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


class SoA:
    """A fixed number of parallel arrays, all of the same length.

    Each array is described by a factory that builds its default element,
    e.g. ``SoA(4, int, Vec3)`` holds four ints and four vectors.
    """

    def __init__(self, size: int = 0, *args: Callable[[], Any]) -> None:
        if size < 0:
            raise ValueError(f"SoA size must not be negative: {size}")
        self._factories = args
        self._size = 0
        self._arrays: list[list[Any]] = []
        self._allocate(size)

    def _allocate(self, size: int) -> None:
        self._size = size
        self._arrays = [[factory() for _ in range(size)] for factory in self._factories]

    def _array(self, array: int) -> list[Any]:
        if not 0 <= array < len(self._arrays):
            raise IndexError(f"SoA: array index out of bounds: {array}")
        return self._arrays[array]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"SoA: row index out of range: {index}")

    def _check_arity(self, values: tuple[Any, ...]) -> None:
        if len(values) != len(self._arrays):
            raise TypeError(
                f"SoA: expected {len(self._arrays)} values, got {len(values)}"
            )

    def size(self) -> int:
        """Return the number of rows."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def array_count(self) -> int:
        """Return the number of parallel arrays."""
        return len(self._factories)

    def data(self, array: int) -> list[Any]:
        """Return the underlying list of one array."""
        return self._array(array)

    def get(self, array: int, index: int) -> Any:
        """Return the element of an array at a row."""
        data = self._array(array)
        self._check_index(index)
        return data[index]

    def put(self, array: int, index: int, value: Any) -> None:
        """Store one element of an array at a row."""
        data = self._array(array)
        self._check_index(index)
        data[index] = value

    def set(self, index: int, *args: Any) -> None:
        """Store one value per array at a row."""
        self.set_tuple(index, args)

    def tuple(self, index: int) -> tuple[Any, ...]:
        """Return the row as a tuple with one value per array."""
        self._check_index(index)
        return tuple(data[index] for data in self._arrays)

    def set_tuple(self, index: int, values: Iterable[Any]) -> None:
        """Store a tuple of values, one per array, at a row."""
        values = tuple(values)
        self._check_arity(values)
        self._check_index(index)
        for data, value in zip(self._arrays, values):
            data[index] = value

    def swap(self, i: int, j: int) -> None:
        """Exchange two rows in every array."""
        self._check_index(i)
        self._check_index(j)
        for data in self._arrays:
            data[i], data[j] = data[j], data[i]

    def reallocate(self, size: int) -> bool:
        """Resize to fresh default rows; False if the size is unchanged."""
        if size < 0:
            raise ValueError(f"SoA size must not be negative: {size}")
        if size == self._size:
            return False
        self._allocate(size)
        return True

    def __iter__(self) -> Iterator[SoARow]:
        for index in range(self._size):
            yield SoARow(self, index)


class SoARow:
    """A view of one row of a SoA."""

    __slots__ = ("_soa", "_index")

    def __init__(self, soa: SoA, index: int) -> None:
        self._soa = soa
        self._index = index

    def index(self) -> int:
        """Return the row index."""
        return self._index

    def get(self, array: int) -> Any:
        """Return this row's element of an array."""
        return self._soa.get(array, self._index)

    def set(self, *args: Any) -> None:
        """Store one value per array in this row."""
        self._soa.set(self._index, *args)

    def tuple(self) -> tuple[Any, ...]:
        """Return this row as a tuple."""
        return self._soa.tuple(self._index)

    def set_tuple(self, values: Iterable[Any]) -> None:
        """Store a tuple of values in this row."""
        self._soa.set_tuple(self._index, values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoARow):
            return NotImplemented
        return self._soa is other._soa and self._index == other._index

    __hash__ = None  # type: ignore[assignment]