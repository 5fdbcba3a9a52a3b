"""
Case-insensitive course index.

This module holds the exact-match store used for course lookups.
"""

from typing import Optional

from ..models import CourseRecord, normalize_identifier


class CatalogIndex:
    """
    Exact-match store keyed by normalized course identifier.

    LOOKUP RULES:
    -------------
    - "CSCI200", "csci200" and "Csci200" all reach the same record.
    - Inserting a second record with the same normalized identifier
      replaces the first (last write wins).
    - A miss returns None; it is never an exception.

    Insert and find are O(1) on average.
    """

    def __init__(self):
        self._records = {}  # normalized identifier -> CourseRecord

    def insert(self, record: CourseRecord):
        """Store a record, overwriting any record with the same identifier."""
        self._records[record.key] = record

    def find(self, identifier: str) -> Optional[CourseRecord]:
        """Return the record for an identifier (any case), or None."""
        return self._records.get(normalize_identifier(identifier))

    def count(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def all_records(self) -> list:
        """
        Every stored record.

        The order is whatever the underlying mapping yields. Use
        StableSorter for a canonical listing.
        """
        return list(self._records.values())

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, identifier: str) -> bool:
        return normalize_identifier(identifier) in self._records
