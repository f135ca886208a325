"""A character string whose copies share one buffer until one of them writes."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field

_FILL = "\0"


@dataclass(eq=False)
class _Buffer:
    chars: list[str] = field(default_factory=lambda: [_FILL] * 2)
    size: int = 0
    owners: weakref.WeakSet = field(default_factory=weakref.WeakSet)

    @property
    def capacity(self) -> int:
        return len(self.chars)

    def clone(self) -> _Buffer:
        chars = self.chars[:self.size] + [_FILL] * (self.capacity - self.size)
        return _Buffer(chars=chars, size=self.size)


def _check_char(value: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


class CowString:
    """Copy-on-write string: ``CowString(other)`` shares ``other``'s buffer."""

    def __init__(self, other: CowString | None = None) -> None:
        self._buffer = other._buffer if other is not None else _Buffer()
        self._buffer.owners.add(self)

    def _attach(self, buffer: _Buffer) -> None:
        self._buffer.owners.discard(self)
        self._buffer = buffer
        buffer.owners.add(self)

    def _detach(self) -> None:
        if len(self._buffer.owners) > 1:
            self._attach(self._buffer.clone())

    def assign(self, other: CowString) -> None:
        """Make this string share ``other``'s contents."""
        if self._buffer is not other._buffer:
            self._attach(other._buffer)

    def shares_buffer_with(self, other: CowString) -> bool:
        return self._buffer is other._buffer

    def reserve(self, new_capacity: int) -> None:
        """Set the buffer capacity; it may not drop below the current size."""
        if new_capacity < self._buffer.size:
            raise ValueError("capacity cannot be smaller than size")
        self._detach()
        buf = self._buffer
        buf.chars = buf.chars[:buf.size] + [_FILL] * (new_capacity - buf.size)

    def resize(self, new_size: int) -> None:
        """Change the size, doubling past the new size if the buffer must grow."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        self._detach()
        if new_size > self._buffer.capacity:
            self.reserve(new_size * 2)
        self._buffer.size = new_size

    def _index(self, index: int) -> int:
        if not 0 <= index < self._buffer.size:
            raise IndexError("CowString index out of range")
        return index

    def at(self, index: int) -> str:
        return self._buffer.chars[self._index(index)]

    def back(self) -> str:
        if self._buffer.size == 0:
            raise IndexError("back() on empty CowString")
        return self._buffer.chars[self._buffer.size - 1]

    def push_back(self, value: str) -> None:
        _check_char(value)
        self._detach()
        buf = self._buffer
        if buf.size == buf.capacity:
            self.reserve(max(1, buf.capacity * 2))
        buf.chars[buf.size] = value
        buf.size += 1

    def size(self) -> int:
        return self._buffer.size

    def capacity(self) -> int:
        return self._buffer.capacity

    def __getitem__(self, index: int) -> str:
        return self.at(index)

    def __setitem__(self, index: int, value: str) -> None:
        _check_char(value)
        self._index(index)
        self._detach()
        self._buffer.chars[index] = value

    def __len__(self) -> int:
        return self._buffer.size

    def __str__(self) -> str:
        return "".join(self._buffer.chars[:self._buffer.size])

    def __repr__(self) -> str:
        return f"CowString({str(self)!r})"