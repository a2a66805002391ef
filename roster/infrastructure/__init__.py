"""
Infrastructure package for the employee roster.

Holds the line codec and the roster file access layer. Keep this layer focused
on text and file I/O, decoupled from the store and the console controller.
"""

from roster.infrastructure.codec import HEADER, format_line, parse_line
from roster.infrastructure.roster_file import (
    append_line,
    append_record,
    load_store,
    read_lines,
)

__all__ = [
    "HEADER",
    "append_line",
    "append_record",
    "format_line",
    "load_store",
    "parse_line",
    "read_lines",
]
