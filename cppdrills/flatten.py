"""A random-access view over a list of lists, as if it were one flat list."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from itertools import accumulate, chain
from typing import Any


class FlatIterator:
    """Random-access position inside a :class:`FlattenedVector`."""

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: FlattenedVector, index: int) -> None:
        self._owner = owner
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def get(self) -> Any:
        """Return the element at this position."""
        return self._owner[self._index]

    def set(self, value: Any) -> None:
        """Replace the element at this position."""
        self._owner[self._index] = value

    def __getitem__(self, n: int) -> Any:
        return self._owner[self._index + n]

    def __setitem__(self, n: int, value: Any) -> None:
        self._owner[self._index + n] = value

    def __add__(self, n: int) -> FlatIterator:
        if not isinstance(n, int):
            return NotImplemented
        return FlatIterator(self._owner, self._index + n)

    def __radd__(self, n: int) -> FlatIterator:
        return self.__add__(n)

    def __sub__(self, other: FlatIterator | int) -> FlatIterator | int:
        if isinstance(other, FlatIterator):
            self._check_same(other)
            return self._index - other._index
        if isinstance(other, int):
            return FlatIterator(self._owner, self._index - other)
        return NotImplemented

    def __iadd__(self, n: int) -> FlatIterator:
        self._index += n
        return self

    def __isub__(self, n: int) -> FlatIterator:
        self._index -= n
        return self

    def _check_same(self, other: FlatIterator) -> None:
        if other._owner is not self._owner:
            raise ValueError("iterators belong to different vectors")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatIterator):
            return NotImplemented
        return self._owner is other._owner and self._index == other._index

    def __lt__(self, other: FlatIterator) -> bool:
        self._check_same(other)
        return self._index < other._index

    def __le__(self, other: FlatIterator) -> bool:
        self._check_same(other)
        return self._index <= other._index

    def __gt__(self, other: FlatIterator) -> bool:
        self._check_same(other)
        return self._index > other._index

    def __ge__(self, other: FlatIterator) -> bool:
        self._check_same(other)
        return self._index >= other._index

    def __hash__(self) -> int:
        return hash((id(self._owner), self._index))

    def __repr__(self) -> str:
        return f"FlatIterator(index={self._index})"


class FlattenedVector:
    """View over ``vectors`` (a list of lists) indexed as one flat sequence.

    The view refers to the given lists; writes through it change them.
    Sublist lengths are taken once, at construction.
    """

    def __init__(self, vectors: list[list[Any]]) -> None:
        self._vectors = vectors
        self._starts = [0, *accumulate(len(sub) for sub in vectors)]

    def _locate(self, index: int) -> tuple[list[Any], int]:
        if not isinstance(index, int):
            raise TypeError("FlattenedVector indices must be integers")
        if not 0 <= index < self._starts[-1]:
            raise IndexError("FlattenedVector index out of range")
        row = bisect_right(self._starts, index) - 1
        return self._vectors[row], index - self._starts[row]

    def begin(self) -> FlatIterator:
        return FlatIterator(self, 0)

    def end(self) -> FlatIterator:
        return FlatIterator(self, self._starts[-1])

    def __iter__(self) -> Iterator[Any]:
        return chain.from_iterable(self._vectors)

    def __len__(self) -> int:
        return self._starts[-1]

    def __getitem__(self, index: int) -> Any:
        sub, offset = self._locate(index)
        return sub[offset]

    def __setitem__(self, index: int, value: Any) -> None:
        sub, offset = self._locate(index)
        sub[offset] = value

    def sort(self) -> None:
        """Sort all elements in flat order, keeping every sublist's length."""
        values = sorted(self)
        position = 0
        for sub in self._vectors:
            sub[:] = values[position:position + len(sub)]
            position += len(sub)