"""Small data structures, a flat list view, text utilities and a command-driven text editor."""

__version__ = "0.1.0"

__all__ = [
    "textfuncs",
    "lru",
    "timing",
    "duplication",
    "cow_string",
    "flatten",
    "editor",
    "commands",
]