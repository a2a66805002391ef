"""
In-memory record store for the employee roster.

The store owns the ordered sequence of employees for the lifetime of a run and
provides the two algorithms the console is built around:

- an in-place, stable insertion sort on the case-insensitive full-name key
  ("first last"), and
- a binary search on that same key.

Searching always sorts first. That side effect is part of the contract: after a
search the store is left in full-name order, exactly as after an explicit sort.

The store is single-threaded; a host that shares one instance across threads
must serialize access itself.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from roster.domain.models import Employee
from roster.utils.logging import get_logger

log = get_logger(__name__)


class RecordStore:
    """
    Ordered, append-only collection of employees.

    Load/insertion order is kept until the first sort; afterwards the sequence
    is ordered by `Employee.full_name_key`. Callers get tuples, never the
    underlying list.
    """

    def __init__(self, records: Optional[Iterable[Employee]] = None) -> None:
        self._records: List[Employee] = list(records) if records is not None else []

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: Employee) -> None:
        """Append a record. No deduplication or validation."""
        self._records.append(record)

    def sort_by_full_name(self) -> None:
        """
        Insertion-sort the records by full-name key, in place.

        Only a strictly greater key is shifted past the held element, so records
        with equal keys keep their relative order.
        """
        records = self._records
        for i in range(1, len(records)):
            key_record = records[i]
            key = key_record.full_name_key
            j = i - 1
            while j >= 0 and records[j].full_name_key > key:
                records[j + 1] = records[j]
                j -= 1
            records[j + 1] = key_record
        log.debug("Sorted roster by full name", extra={"records": len(records)})

    def search_by_full_name(self, query: str) -> Optional[Employee]:
        """
        Find a record whose full name matches `query`, ignoring case and
        surrounding whitespace.

        The store is sorted first, so the call reorders it as a side effect.
        When several records share the key, which one is returned depends on
        the midpoints visited and is not guaranteed to be the first or last.
        """
        self.sort_by_full_name()
        wanted = query.strip().casefold()

        left, right = 0, len(self._records) - 1
        while left <= right:
            mid = left + (right - left) // 2
            candidate = self._records[mid]
            mid_key = candidate.full_name_key
            if mid_key == wanted:
                return candidate
            if mid_key < wanted:
                left = mid + 1
            else:
                right = mid - 1

        log.debug("Full name not found", extra={"query": query})
        return None

    def top_n(self, n: int) -> Tuple[Employee, ...]:
        """First `min(n, len(store))` records in the current order."""
        return tuple(self._records[: max(n, 0)])

    def all(self) -> Tuple[Employee, ...]:
        """Every record in the current order."""
        return tuple(self._records)


__all__ = ["RecordStore"]
