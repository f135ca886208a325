# cppdrills

This package is a set of small, self-contained data structures and text utilities. It has no dependencies outside the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `cppdrills.textfuncs` provides the following functions:
  - `is_alpha(c)` and `to_lower(c)` work on single characters and recognise Latin letters only.
  - `concat(lhs, rhs)` joins two strings.
  - `is_palindrome(s)` compares only the Latin letters of `s` and ignores case.
  - `normalize(path)` shortens a Unix path by collapsing `//`, `.` and `..` where it can.
- `cppdrills.lru`: `LruCache(capacity)` is a least-recently-used cache.
  - It has `put(key, value)`, `get(key, default=None)`, `len()` and `in`.
  - Both `put` and `get` mark an entry as most recently used.
  - A capacity below 1 raises `ValueError`.
- `cppdrills.timing` provides two timing helpers:
  - `Timer(duration)` takes a `timedelta` or a number of seconds. `expired()` becomes true once that many whole milliseconds have passed.
  - `TimeMeasurer(stream=None)` is a context manager. When its block ends, it writes `Elapsed time: <ms>` and a newline to `stream`, or to standard output if no stream is given.
- `cppdrills.duplication`: `Text` is a mutable box around a string.
  - `deduplicate(items)` returns new boxes in which equal values share one box.
  - `duplicate(items)` returns a fresh, unshared box for every item.
- `cppdrills.cow_string`: `CowString` is a copy-on-write character buffer.
  - `CowString(other)` and `assign(other)` share `other`'s buffer.
  - The buffer is copied only when `push_back`, `resize`, `reserve` or item assignment is called on a shared string.
  - `shares_buffer_with(other)` tells whether two strings still share a buffer.
  - Other members are `at`, `back`, `size`, `capacity`, indexing, `len()` and `str()`.
- `cppdrills.flatten`: `FlattenedVector(vectors)` is a writable flat view over a list of lists.
  - It supports `len()`, iteration, indexing, item assignment and `sort()`.
  - `sort()` sorts all elements while keeping each sublist's length.
  - `begin()` and `end()` return a random-access `FlatIterator`.
  - A `FlatIterator` supports `get`, `set`, `it[n]`, `+`, `-`, `+=`, `-=` and comparisons.
- `cppdrills.editor`: `TextEditor` holds a text buffer, a cursor, a clipboard and an optional selection. Commands are run on it with `apply_command(command)`.
- `cppdrills.commands` provides the editing commands:
  - The commands are `MoveCursorLeftCommand`, `MoveCursorRightCommand`, `MoveCursorUpCommand`, `MoveCursorDownCommand`, `SelectTextCommand(selection)`, `InsertTextCommand(text)`, `DeleteTextCommand`, `CopyTextCommand`, `PasteTextCommand`, `UppercaseTextCommand`, `LowercaseTextCommand`, `MoveToEndCommand`, `MoveToStartCommand`, `DeleteWordCommand` and `MacroCommand(subcommands)`.
  - Every command accepts a `CommandVisitor`.
  - `CommandLoggerVisitor(stream)` writes a vi-like key code for each command it visits: `h`, `l`, `k`, `j`, `v`, `i`, `d`, `y`, `p`, `U`, `u`, `$`, `0` or `dE`.

## Examples

```python
from cppdrills.lru import LruCache

cache = LruCache(2)
cache.put(1, "a")
cache.put(2, "b")
cache.put(3, "c")        # evicts key 1
cache.get(1)             # -> None
cache.get(3)             # -> "c"
```

```python
import io
from cppdrills.editor import TextEditor
from cppdrills.commands import InsertTextCommand, CommandLoggerVisitor

editor = TextEditor()
command = InsertTextCommand("Hello world")
editor.apply_command(command)
editor.text()            # -> "Hello world"

log = io.StringIO()
command.accept(CommandLoggerVisitor(log))
log.getvalue()           # -> "i"
```

```python
from cppdrills.cow_string import CowString

a = CowString()
a.push_back("x")
b = CowString(a)
b.shares_buffer_with(a)  # -> True
b[0] = "y"
str(a), str(b)           # -> ("x", "y")
```

```python
from cppdrills.flatten import FlattenedVector

fv = FlattenedVector([[1], [], [2, 3]])
len(fv)                  # -> 3
(fv.begin() + 1).get()   # -> 2
```

```python
from cppdrills.textfuncs import normalize, is_palindrome

normalize("/../../foo/././bar/../bar/./baz//1.txt")   # -> "/foo/bar/baz/1.txt"
is_palindrome("Do geese see God?")                    # -> True
```

## What it does not do

There is no fluent builder for commands and no ready-made wrapper that logs a command while applying it. Instead, commands are constructed directly. To log a command, call its `accept` method with a `CommandLoggerVisitor`.

The package does not include:

- a stepped integer range type;
- a growable array type with its own iterator;
- a command-line program.