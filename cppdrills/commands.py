"""Editing commands for :class:`~cppdrills.editor.TextEditor` and visitors over them."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from cppdrills.editor import TextEditor

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _char_at(buffer: str, index: int) -> str:
    """Character at ``index``, or an empty string outside the buffer."""
    if 0 <= index < len(buffer):
        return buffer[index]
    return ""


def _splice(buffer: str, start: int, end: int, text: str) -> str:
    return buffer[:start] + text + buffer[end:]


def _translate_target(editor: TextEditor, table: dict[int, int]) -> None:
    buffer = editor.buffer
    if editor.has_selection():
        start, end = editor.selection()
        editor.buffer = _splice(buffer, start, end, buffer[start:end].translate(table))
    elif 0 <= editor.cursor < len(buffer):
        pos = editor.cursor
        editor.buffer = _splice(buffer, pos, pos + 1, buffer[pos].translate(table))


class Command(ABC):
    """An action that can be applied to an editor and visited."""

    @abstractmethod
    def apply(self, editor: TextEditor) -> None:
        """Perform the action on ``editor``."""

    def accept(self, visitor: CommandVisitor) -> None:
        visitor.visit(self)


class MoveCursorLeftCommand(Command):
    def apply(self, editor: TextEditor) -> None:
        if editor.cursor > 0:
            editor.cursor -= 1


class MoveCursorRightCommand(Command):
    def apply(self, editor: TextEditor) -> None:
        if editor.cursor != len(editor.buffer) - 1:
            editor.cursor += 1


class MoveCursorUpCommand(Command):
    """Move to the same column of the previous line."""

    def apply(self, editor: TextEditor) -> None:
        buffer = editor.buffer
        position = editor.cursor
        if position == 0:
            return
        cursor = position - 1
        if cursor == 0:
            return
        while cursor != 0 and _char_at(buffer, cursor) != "\n":
            cursor -= 1
        column = position - cursor - 1
        if cursor == 0:
            return
        line_start = cursor - 1
        while line_start != 0 and _char_at(buffer, line_start) != "\n":
            line_start -= 1
        editor.cursor = line_start + column if line_start == 0 else line_start + column + 1


class MoveCursorDownCommand(Command):
    """Move to the same column of the next line."""

    def apply(self, editor: TextEditor) -> None:
        buffer = editor.buffer
        last = len(buffer) - 1
        if not buffer or editor.cursor == last:
            return
        cursor = editor.cursor
        column = 0
        while cursor > 0 and _char_at(buffer, cursor) != "\n":
            cursor -= 1
            column += 1
        if cursor == last:
            return
        line_end = cursor + 1
        while line_end < last and _char_at(buffer, line_end) != "\n":
            line_end += 1
        editor.cursor = line_end + column if line_end >= last else line_end + column + 1


class SelectTextCommand(Command):
    """Select ``selection`` characters starting at the cursor."""

    def __init__(self, selection: int) -> None:
        self.selection = selection

    def apply(self, editor: TextEditor) -> None:
        editor.select_text(editor.cursor, editor.cursor + self.selection)


class InsertTextCommand(Command):
    """Insert text at the cursor, replacing the selection if there is one."""

    def __init__(self, text: str) -> None:
        self.text = text

    def apply(self, editor: TextEditor) -> None:
        if editor.has_selection():
            start, end = editor.selection()
        else:
            start = end = editor.cursor
        editor.buffer = _splice(editor.buffer, start, end, self.text)
        editor.cursor += len(self.text)
        editor.unselect_text()


class DeleteTextCommand(Command):
    """Erase the whole buffer."""

    def apply(self, editor: TextEditor) -> None:
        editor.buffer = ""


class CopyTextCommand(Command):
    """Copy the selection, or the character before the cursor, to the clipboard."""

    def apply(self, editor: TextEditor) -> None:
        if editor.has_selection():
            start, end = editor.selection()
            editor.clipboard_text = editor.buffer[start:end]
            editor.unselect_text()
        else:
            editor.clipboard_text = _char_at(editor.buffer, editor.cursor - 1)


class PasteTextCommand(Command):
    """Insert the clipboard at the cursor, replacing the selection if there is one."""

    def apply(self, editor: TextEditor) -> None:
        if editor.has_selection():
            start, end = editor.selection()
        else:
            start = end = editor.cursor
        editor.buffer = _splice(editor.buffer, start, end, editor.clipboard_text)
        editor.cursor += len(editor.clipboard_text)
        editor.unselect_text()


class UppercaseTextCommand(Command):
    """Upper-case the selection, or the character under the cursor."""

    def apply(self, editor: TextEditor) -> None:
        _translate_target(editor, _TO_UPPER)


class LowercaseTextCommand(Command):
    """Lower-case the selection, or the character under the cursor."""

    def apply(self, editor: TextEditor) -> None:
        _translate_target(editor, _TO_LOWER)


class MoveToEndCommand(Command):
    """Move the cursor to the end of its line."""

    def apply(self, editor: TextEditor) -> None:
        buffer = editor.buffer
        while editor.cursor < len(buffer) and buffer[editor.cursor] != "\n":
            editor.cursor += 1


class MoveToStartCommand(Command):
    """Move the cursor to the start of its line."""

    def apply(self, editor: TextEditor) -> None:
        while editor.cursor > 0 and _char_at(editor.buffer, editor.cursor - 1) != "\n":
            editor.cursor -= 1


class DeleteWordCommand(Command):
    """Delete from the cursor up to the next space or end of line."""

    def apply(self, editor: TextEditor) -> None:
        buffer = editor.buffer
        end = editor.cursor
        while end < len(buffer) and buffer[end] not in "\n ":
            end += 1
        editor.buffer = _splice(buffer, editor.cursor, end, "")
        editor.unselect_text()


class MacroCommand(Command):
    """Runs its subcommands in order; visitors see each subcommand."""

    def __init__(self, subcommands: Iterable[Command]) -> None:
        self.subcommands = tuple(subcommands)

    def apply(self, editor: TextEditor) -> None:
        for command in self.subcommands:
            command.apply(editor)

    def accept(self, visitor: CommandVisitor) -> None:
        for command in self.subcommands:
            command.accept(visitor)


class CommandVisitor(ABC):
    """Something that acts on each command it is shown."""

    @abstractmethod
    def visit(self, command: Command) -> None:
        """Handle one (non-macro) command."""


_LOG_CODES: dict[type[Command], str] = {
    MoveCursorLeftCommand: "h",
    MoveCursorRightCommand: "l",
    MoveCursorUpCommand: "k",
    MoveCursorDownCommand: "j",
    SelectTextCommand: "v",
    InsertTextCommand: "i",
    DeleteTextCommand: "d",
    CopyTextCommand: "y",
    PasteTextCommand: "p",
    UppercaseTextCommand: "U",
    LowercaseTextCommand: "u",
    MoveToEndCommand: "$",
    MoveToStartCommand: "0",
    DeleteWordCommand: "dE",
}


class CommandLoggerVisitor(CommandVisitor):
    """Writes a vi-like key code for every command it visits."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def visit(self, command: Command) -> None:
        for cls in type(command).__mro__:
            code = _LOG_CODES.get(cls)
            if code is not None:
                self._stream.write(code)
                return
        raise TypeError(f"no log code for {type(command).__name__}")