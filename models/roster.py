# models/roster.py

"""
The Roster model is the in-memory "source of truth" for every tracked student record.

Records are kept in a list in insertion order, which is the canonical order of the roster.
Duplicate records and duplicate names are allowed.

Every query that returns a collection returns a new list, so callers can sort, filter, or
mutate a result without affecting the roster's internal order.

Saving and loading is handled by `core.persistence`, which reads and writes the roster as a whole.
`has_unsaved_changes` tracks whether the roster was mutated since it was last saved or loaded.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from core.grade_calculator import GradeStatistics, semester_average, statistics
from models.student_record import StudentRecord

logger = logging.getLogger(__name__)


class Roster:

    def __init__(self, records: Iterable[StudentRecord] | None = None):
        self._records: list[StudentRecord] = list(records or [])
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === data accessors ===

    def all(self) -> list[StudentRecord]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def get_records(
        self,
        predicate: Callable[[StudentRecord], bool] | None = None,
    ) -> list[StudentRecord]:
        """
        Fetches records in roster order, optionally filtered by a predicate.

        Args:
            predicate (Callable[[StudentRecord], bool] | None): Optional filter function. If omitted, all records are returned.

        Returns:
            A new list of matching records (may be empty).
        """
        if predicate is None:
            return list(self._records)

        return [record for record in self._records if predicate(record)]

    def find_by_name(self, name: str) -> StudentRecord | None:
        """
        Finds the first record whose name matches the given name, ignoring case.

        Args:
            name (str): The name to look up. Must match the whole record name, not a substring.

        Returns:
            The first matching record in roster order, or None if no record matches.
        """
        normalized = self._normalize(name)

        for record in self._records:
            if self._normalize(record.name) == normalized:
                return record

        return None

    def honor_roll_members(self) -> list[StudentRecord]:
        return self.get_records(lambda x: x.is_honor_roll)

    def group_by_honor_roll(self) -> dict[bool, list[StudentRecord]]:
        groups: dict[bool, list[StudentRecord]] = {True: [], False: []}

        for record in self._records:
            groups[record.is_honor_roll].append(record)

        return groups

    def average_gpa(self) -> float:
        return semester_average(record.gpa for record in self._records)

    def gpa_statistics(self) -> GradeStatistics:
        return statistics(record.gpa for record in self._records)

    def ranked_by_gpa(self) -> list[StudentRecord]:
        """
        Returns the records sorted by GPA, highest first, with ties broken by name (case-insensitive, ascending).

        Notes:
            - This method is read-only. Each call returns a new list.
            - The sort is stable, so records that compare equal keep their roster order.
        """
        return sorted(self._records, key=StudentRecord.sort_key)

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    def mark_clean(self) -> None:
        self._unsaved_changes = False

    def insert(self, record: StudentRecord) -> None:
        self._records.append(record)
        self._mark_dirty()

        logger.debug("Inserted %r (roster size: %d)", record, len(self._records))

    def remove(self, name: str) -> bool:
        """
        Removes every record whose name matches the given name, ignoring case.

        Args:
            name (str): The name to remove.

        Returns:
            True if at least one record was removed, False otherwise.
        """
        normalized = self._normalize(name)
        remaining = [
            record
            for record in self._records
            if self._normalize(record.name) != normalized
        ]
        removed = len(self._records) - len(remaining)

        if not removed:
            return False

        self._records = remaining
        self._mark_dirty()

        logger.debug("Removed %d record(s) named %r", removed, name)

        return True

    def replace_all(self, records: Iterable[StudentRecord]) -> None:
        """
        Replaces the roster contents with the given records in a single step.

        Notes:
            - The input is fully materialized before the swap, so a failing iterable leaves the roster unchanged.
            - Clears the unsaved changes marker, since the new contents came from a saved source.
        """
        new_records = list(records)
        self._records = new_records
        self.mark_clean()

    # === helper methods ===

    def _normalize(self, name: str) -> str:
        return name.lower()

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    def __repr__(self) -> str:
        return f"Roster({len(self._records)} records)"
