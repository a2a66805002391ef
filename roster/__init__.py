"""
Employee Roster - console application for an employee roster file.

This package loads employee records from a comma-separated text file and lets
a user:

- Sort the roster by full name (insertion sort) and list the top entries
- Search by full name (binary search over the sorted roster)
- Add records interactively or generate random ones
- Persist new records by appending them to the same file
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from roster.config import Settings, get_settings
from roster.controller import MenuOption, RosterController
from roster.domain.models import Employee
from roster.infrastructure.codec import format_line, parse_line
from roster.infrastructure.roster_file import append_record, load_store
from roster.store import RecordStore
from roster.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Core
    "Employee",
    "RecordStore",
    # Persistence
    "append_record",
    "format_line",
    "load_store",
    "parse_line",
    # Console
    "MenuOption",
    "RosterController",
    # Logging
    "configure_logging",
    "get_logger",
]
