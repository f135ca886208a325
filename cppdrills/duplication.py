"""Sharing equal strings between list slots, and splitting shared ones apart again."""

from __future__ import annotations

from collections.abc import Iterable


class Text:
    """A mutable box around a string; identity tells shared boxes from copies."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Text({self.value!r})"


def deduplicate(items: Iterable[Text]) -> list[Text]:
    """Return new boxes where every equal value is represented by one shared box."""
    shared: dict[str, Text] = {}
    return [shared.setdefault(item.value, Text(item.value)) for item in items]


def duplicate(items: Iterable[Text]) -> list[Text]:
    """Return a fresh, unshared box for every item."""
    return [Text(item.value) for item in items]