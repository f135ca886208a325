import io

import pytest

from cppdrills.commands import (
    Command,
    CommandLoggerVisitor,
    CommandVisitor,
    CopyTextCommand,
    DeleteTextCommand,
    DeleteWordCommand,
    InsertTextCommand,
    LowercaseTextCommand,
    MacroCommand,
    MoveCursorDownCommand,
    MoveCursorLeftCommand,
    MoveCursorRightCommand,
    MoveCursorUpCommand,
    MoveToEndCommand,
    MoveToStartCommand,
    PasteTextCommand,
    SelectTextCommand,
    UppercaseTextCommand,
)
from cppdrills.editor import TextEditor


def apply_multiple(editor, command, times):
    for _ in range(times):
        editor.apply_command(command)


def fedor_macro():
    return MacroCommand([
        DeleteWordCommand(),
        InsertTextCommand("Fedor"),
        MoveCursorDownCommand(),
        MoveToStartCommand(),
    ])


def test_one_line():
    editor = TextEditor()
    assert editor.text() == ""
    assert editor.cursor_position() == 0
    assert editor.char_under_cursor() == ""

    editor.apply_command(InsertTextCommand("Hello world"))
    assert editor.text() == "Hello world"
    assert editor.cursor_position() == 11

    apply_multiple(editor, MoveCursorLeftCommand(), 6)
    assert editor.cursor_position() == 5
    assert editor.char_under_cursor() == " "

    editor.apply_command(InsertTextCommand(","))
    assert editor.text() == "Hello, world"
    assert editor.cursor_position() == 6
    assert editor.char_under_cursor() == " "

    editor.apply_command(MoveToEndCommand())
    assert editor.text() == "Hello, world"
    assert editor.cursor_position() == 12
    assert editor.char_under_cursor() == ""

    editor.apply_command(InsertTextCommand("!"))
    assert editor.text() == "Hello, world!"
    assert editor.cursor_position() == 13
    assert editor.char_under_cursor() == ""


def test_copy_paste():
    editor = TextEditor()

    editor.apply_command(InsertTextCommand("Vasya was here\n"))
    assert editor.text() == "Vasya was here\n"
    assert editor.cursor_position() == 15
    assert editor.char_under_cursor() == ""

    editor.apply_command(MoveCursorUpCommand())
    editor.apply_command(SelectTextCommand(15))
    assert editor.selection() == (0, 15)
    assert editor.char_under_cursor() == "V"

    editor.apply_command(CopyTextCommand())
    editor.apply_command(SelectTextCommand(15))
    assert editor.clipboard() == editor.text()

    editor.apply_command(PasteTextCommand())
    editor.apply_command(MoveCursorUpCommand())
    assert editor.clipboard() == editor.text()
    assert editor.char_under_cursor() == "V"
    assert editor.cursor_position() == 0
    assert not editor.has_selection()

    editor.apply_command(PasteTextCommand())
    assert editor.text() == "Vasya was here\nVasya was here\n"
    assert editor.char_under_cursor() == "V"
    assert editor.cursor_position() == 15
    assert not editor.has_selection()

    editor.apply_command(MoveToEndCommand())
    editor.apply_command(InsertTextCommand("\nIvan is cool"))
    assert editor.text() == "Vasya was here\nVasya was here\nIvan is cool\n"
    assert editor.cursor_position() == len(editor.text()) - 1
    assert editor.char_under_cursor() == "\n"

    editor.apply_command(MoveCursorUpCommand())
    assert editor.cursor_position() == 27
    assert editor.char_under_cursor() == "r"

    apply_multiple(editor, MoveCursorUpCommand(), 8)
    assert editor.text() == "Vasya was here\nVasya was here\nIvan is cool\n"
    assert editor.cursor_position() == 12
    assert editor.char_under_cursor() == "r"

    editor.apply_command(MoveToStartCommand())
    assert editor.cursor_position() == 0
    assert editor.char_under_cursor() == "V"

    apply_multiple(editor, fedor_macro(), 3)
    assert editor.text() == "Fedor was here\nFedor was here\nFedor is cool\n"


def test_logging():
    editor = TextEditor()
    log = io.StringIO()
    logger = CommandLoggerVisitor(log)

    def run(command):
        command.accept(logger)
        editor.apply_command(command)

    run(InsertTextCommand("Quick brown fox jumps\nover the lazy dog"))
    run(MoveCursorUpCommand())
    run(MoveToStartCommand())
    run(MoveCursorDownCommand())
    run(MoveToEndCommand())
    run(MoveToStartCommand())
    run(SelectTextCommand(4))
    run(CopyTextCommand())
    run(DeleteWordCommand())
    run(PasteTextCommand())
    assert editor.text() == "Quick brown fox jumps\nover the lazy dog"

    left = MoveCursorLeftCommand()
    for _ in range(26):
        run(left)
    run(SelectTextCommand(5))
    run(UppercaseTextCommand())
    assert editor.text() == "QUICK brown fox jumps\nover the lazy dog"

    run(SelectTextCommand(5))
    run(LowercaseTextCommand())
    assert editor.text() == "quick brown fox jumps\nover the lazy dog"

    macro = fedor_macro()
    run(macro)
    run(macro)
    assert editor.text() == "Fedor brown fox jumps\nFedor the lazy dog"

    assert log.getvalue() == "ik0j$0vydEphhhhhhhhhhhhhhhhhhhhhhhhhhvUvudEij0dEij0"


@pytest.mark.parametrize(
    ("command", "code"),
    [
        (MoveCursorLeftCommand(), "h"),
        (MoveCursorRightCommand(), "l"),
        (MoveCursorUpCommand(), "k"),
        (MoveCursorDownCommand(), "j"),
        (SelectTextCommand(1), "v"),
        (InsertTextCommand("x"), "i"),
        (DeleteTextCommand(), "d"),
        (CopyTextCommand(), "y"),
        (PasteTextCommand(), "p"),
        (UppercaseTextCommand(), "U"),
        (LowercaseTextCommand(), "u"),
        (MoveToEndCommand(), "$"),
        (MoveToStartCommand(), "0"),
        (DeleteWordCommand(), "dE"),
    ],
)
def test_logger_codes(command, code):
    log = io.StringIO()
    command.accept(CommandLoggerVisitor(log))
    assert log.getvalue() == code


def test_empty_macro_logs_nothing():
    log = io.StringIO()
    MacroCommand([]).accept(CommandLoggerVisitor(log))
    assert log.getvalue() == ""


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Command()
    with pytest.raises(TypeError):
        CommandVisitor()


def test_move_left_stops_at_start():
    editor = TextEditor()
    editor.apply_command(MoveCursorLeftCommand())
    assert editor.cursor_position() == 0


def test_move_right_then_left_round_trip():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("Hello world"))
    apply_multiple(editor, MoveCursorLeftCommand(), 6)
    editor.apply_command(MoveCursorRightCommand())
    editor.apply_command(MoveCursorLeftCommand())
    assert editor.cursor_position() == 5


def test_delete_text_clears_buffer():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("Hello world"))
    editor.apply_command(DeleteTextCommand())
    assert editor.text() == ""


def test_copy_without_selection_takes_char_before_cursor():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("Hello world"))
    editor.apply_command(CopyTextCommand())
    assert editor.clipboard() == editor.text()[-1]


def test_uppercase_then_lowercase_selection_round_trip():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("quick brown"))
    editor.apply_command(MoveToStartCommand())
    editor.apply_command(SelectTextCommand(len("quick brown")))
    editor.apply_command(UppercaseTextCommand())
    assert editor.text() == "QUICK BROWN"
    assert editor.has_selection()
    editor.apply_command(LowercaseTextCommand())
    assert editor.text() == "quick brown"


def test_lowercase_without_selection_changes_char_under_cursor():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("QUICK"))
    editor.apply_command(MoveToStartCommand())
    editor.apply_command(LowercaseTextCommand())
    assert editor.text() == "qUICK"


def test_insert_replaces_selection():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("Hello world"))
    editor.apply_command(MoveToStartCommand())
    editor.apply_command(SelectTextCommand(5))
    editor.apply_command(InsertTextCommand("Fedor"))
    assert editor.text() == "Fedor world"
    assert not editor.has_selection()
    assert editor.cursor_position() == 5


def test_delete_word_stops_at_space():
    editor = TextEditor()
    editor.apply_command(InsertTextCommand("Hello world"))
    editor.apply_command(MoveToStartCommand())
    editor.apply_command(DeleteWordCommand())
    assert editor.text() == " world"
    assert editor.cursor_position() == 0


def test_move_down_on_empty_buffer_does_nothing():
    editor = TextEditor()
    editor.apply_command(MoveCursorDownCommand())
    assert editor.cursor_position() == 0
    assert editor.text() == ""