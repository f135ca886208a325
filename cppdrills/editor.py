"""A single-buffer text editor driven by command objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cppdrills.commands import Command


class TextEditor:
    """Holds a text buffer, a cursor, a clipboard and an optional selection.

    Commands work on the public ``buffer``, ``cursor`` and ``clipboard_text``
    attributes. A selection runs from the cursor up to ``selection()[1]``.
    """

    def __init__(self) -> None:
        self.buffer = ""
        self.cursor = 0
        self.clipboard_text = ""
        self._selection_end: int | None = None

    def apply_command(self, command: Command) -> None:
        """Run ``command`` against this editor."""
        command.apply(self)

    def select_text(self, start: int, end: int) -> None:
        """Select ``[start, end)`` and move the cursor to its start.

        The bounds may be given in either order. An empty range, or one that
        reaches past the end of the buffer, leaves the editor unchanged.
        """
        if end < start:
            start, end = end, start
        if start == end:
            return
        if end > len(self.buffer) or start > len(self.buffer):
            return
        self.cursor = start
        self._selection_end = end

    def unselect_text(self) -> None:
        self._selection_end = None

    def selection(self) -> tuple[int, int | None]:
        """Return ``(cursor, selection end)``; the end is None without a selection."""
        return self.cursor, self._selection_end

    def has_selection(self) -> bool:
        return self._selection_end is not None

    def text(self) -> str:
        return self.buffer

    def cursor_position(self) -> int:
        return self.cursor

    def char_under_cursor(self) -> str:
        """Return the character at the cursor, or an empty string past the end."""
        if 0 <= self.cursor < len(self.buffer):
            return self.buffer[self.cursor]
        return ""

    def clipboard(self) -> str:
        return self.clipboard_text