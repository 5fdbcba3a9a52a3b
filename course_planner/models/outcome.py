"""
Load outcome models.

A catalog load never raises. Instead it reports what happened through
a LoadOutcome, so callers can tell an empty input apart from a real load.
"""

from dataclasses import dataclass
from enum import Enum


class LoadStatus(Enum):
    """
    Possible results of Catalog.load().

    EMPTY: The input had zero records; the previous catalog state is kept
    LOADED: Records were indexed, graphed and sorted
    """
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True)
class LoadOutcome:
    """Result of one load cycle: the status and how many records were taken."""
    status: LoadStatus
    count: int = 0

    @classmethod
    def empty(cls) -> "LoadOutcome":
        return cls(LoadStatus.EMPTY, 0)

    @classmethod
    def loaded(cls, count: int) -> "LoadOutcome":
        return cls(LoadStatus.LOADED, count)

    @property
    def is_empty(self) -> bool:
        return self.status is LoadStatus.EMPTY

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadStatus.LOADED
