"""
Roster file access.

The backing file holds one header line followed by one employee per line.
Reading returns every line; writing only ever appends a single line, so
previously written records are never rewritten. I/O failures are logged and
turned into no-ops: a failed read yields no lines and a failed append reports
False, leaving the interactive session running.

The file is not locked; a single writer process is assumed.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from roster.domain.categories import CategoryError, check_categories
from roster.domain.models import Employee
from roster.infrastructure.codec import HEADER, format_line, parse_line
from roster.store import RecordStore
from roster.utils.logging import get_logger

log = get_logger(__name__)


def read_lines(path: Path | str) -> List[str]:
    """
    Return every line of `path`, stripped. Returns [] if the file cannot be read.

    Bytes that are not valid UTF-8 become U+FFFD so the rest of the line is kept.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            return [line.strip() for line in f]
    except OSError as exc:
        log.error(f"Error reading file: {exc}", extra={"path": str(path)})
        return []


def _ends_with_newline(path: Path) -> bool:
    with path.open("rb") as f:
        f.seek(-1, 2)
        return f.read(1) == b"\n"


def append_line(path: Path | str, line: str) -> bool:
    """
    Append `line` to `path`. A missing file is created with the header first.

    Returns True on success, False (after logging) when the write fails.
    """
    path = Path(path)
    try:
        needs_header = not path.exists() or path.stat().st_size == 0
        prefix = HEADER + "\n" if needs_header else ""
        if not needs_header and not _ends_with_newline(path):
            prefix = "\n"
        with path.open("a", encoding="utf-8") as f:
            f.write(prefix + line + "\n")
    except OSError as exc:
        log.error(f"Error appending to file: {exc}", extra={"path": str(path)})
        return False
    return True


def append_record(path: Path | str, record: Employee) -> bool:
    """Serialize `record` and append it to the roster file."""
    return append_line(path, format_line(record))


def load_store(path: Path | str, strict_categories: bool = False) -> RecordStore:
    """
    Build a `RecordStore` from the roster file at `path`.

    The first line is treated as the header and discarded. Lines with too few
    fields are skipped. With `strict_categories`, records whose gender,
    department or position fall outside the closed sets are skipped as well.
    """
    lines = read_lines(path)
    store = RecordStore()
    skipped = 0

    for line_no, line in enumerate(lines[1:], start=2):
        record = parse_line(line)
        if record is None:
            log.debug("Skipping malformed line", extra={"line_no": line_no})
            skipped += 1
            continue
        if strict_categories:
            try:
                check_categories(record)
            except CategoryError as exc:
                log.warning(f"Skipping line {line_no}: {exc}", extra={"line_no": line_no})
                skipped += 1
                continue
        store.add(record)

    log.info(
        "Roster loaded",
        extra={"path": str(path), "records": len(store), "skipped": skipped},
    )
    return store


__all__ = ["append_line", "append_record", "load_store", "read_lines"]
