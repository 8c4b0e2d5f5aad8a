"""C-style character, string, memory, list, printf and line-reading helpers, with isometric line drawing."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "text",
    "output",
    "linked_list",
    "errors",
    "draw",
    "printf",
    "line_reader",
]