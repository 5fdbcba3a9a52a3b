"""
Stable merge sort for course listings.

This module produces the canonical course order shown to users. It uses
a top-down merge sort so the worst case stays O(n log n) and records
sharing an identifier keep their input order.
"""

from ..models import CourseRecord


def _identifier(record: CourseRecord) -> str:
    return record.identifier


class StableSorter:
    """
    Deterministic, stable ordering of course records by raw identifier.

    ORDERING:
    ---------
    Identifiers are compared as plain strings (codepoint order), with no
    case folding. "CSCI100" sorts before "Csci100", which sorts before
    "csci100". There is no secondary key.

    COMPARISON COUNT:
    -----------------
    Every key comparison made by the last sort is counted in
    `comparisons`, so callers can check the O(n log n) bound on
    reverse-sorted or all-equal inputs.

    Usage:
        sorter = StableSorter()
        ordered = sorter.sort_by_identifier(records)
        sorter.comparisons  # key comparisons used by that call
    """

    def __init__(self, key=_identifier):
        self.key = key
        self.comparisons = 0

    def sort_by_identifier(self, records) -> list:
        """
        Return a new list of the records sorted by identifier.

        The input sequence is left untouched.
        Time Complexity: O(n log n) in all cases
        Space Complexity: O(n) for the merge buffers
        """
        self.comparisons = 0
        items = list(records)
        if len(items) > 1:
            self._merge_sort(items, 0, len(items) - 1)
        return items

    def _merge_sort(self, items: list, left: int, right: int):
        if left < right:
            mid = left + (right - left) // 2

            self._merge_sort(items, left, mid)
            self._merge_sort(items, mid + 1, right)

            self._merge(items, left, mid, right)

    def _merge(self, items: list, left: int, mid: int, right: int):
        """Merge the sorted runs items[left..mid] and items[mid+1..right]."""
        left_run = items[left:mid + 1]
        right_run = items[mid + 1:right + 1]

        i = j = 0
        k = left

        while i < len(left_run) and j < len(right_run):
            self.comparisons += 1
            # <= takes from the left run on ties, which keeps the sort stable
            if self.key(left_run[i]) <= self.key(right_run[j]):
                items[k] = left_run[i]
                i += 1
            else:
                items[k] = right_run[j]
                j += 1
            k += 1

        while i < len(left_run):
            items[k] = left_run[i]
            i += 1
            k += 1

        while j < len(right_run):
            items[k] = right_run[j]
            j += 1
            k += 1


def sort_by_identifier(records) -> list:
    """Convenience wrapper: stable sort of course records by identifier."""
    return StableSorter().sort_by_identifier(records)
