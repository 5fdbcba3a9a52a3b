"""
Course Catalog.

This module holds the Catalog, which ties the index, the prerequisite
graph and the stable sort together into one load cycle.
"""

from typing import Optional

from ..models import CourseRecord, LoadOutcome
from .graph import PrerequisiteGraph
from .index import CatalogIndex
from .sorter import StableSorter


class Catalog:
    """
    In-memory course catalog for one session.

    ═══════════════════════════════════════════════════════════════════════════
    LOAD CYCLE
    ═══════════════════════════════════════════════════════════════════════════

    load() builds a fresh CatalogIndex and PrerequisiteGraph from the input
    records (in input order), sorts the records with StableSorter, and only
    then swaps all three in together. Readers therefore never see an index
    from one load next to a listing from another.

    An empty input is reported as LoadOutcome.empty() and leaves whatever
    was loaded before untouched.

    ═══════════════════════════════════════════════════════════════════════════
    OWNERSHIP
    ═══════════════════════════════════════════════════════════════════════════

    Each Catalog owns its structures exclusively. Create one per session
    (or per test); there is no shared module-level catalog. If a host uses
    threads, guard the whole Catalog with a single lock around load and
    reads.

    The catalog never prints or logs. Lookup misses return None and an
    empty load returns an outcome value; the caller decides what to show.

    Usage:
        catalog = Catalog()
        outcome = catalog.load(records)
        catalog.list_all()                   # sorted by raw identifier
        catalog.find_by_identifier("csci200")
        catalog.find_unlocked_by("CSCI100")
    """

    def __init__(self, sorter: Optional[StableSorter] = None):
        self.sorter = sorter or StableSorter()
        self._index = CatalogIndex()
        self._graph = PrerequisiteGraph()
        self._listing = []

    def load(self, records) -> LoadOutcome:
        """
        Replace the catalog contents with a new set of course records.

        Args:
            records: Sequence of CourseRecord, in input order

        Returns:
            LoadOutcome.empty() for zero records, else LoadOutcome.loaded(n)
        """
        records = list(records)
        if not records:
            return LoadOutcome.empty()

        index = CatalogIndex()
        graph = PrerequisiteGraph()
        for record in records:
            index.insert(record)
            graph.add_course(record)

        listing = self.sorter.sort_by_identifier(records)

        self._index, self._graph, self._listing = index, graph, listing
        return LoadOutcome.loaded(len(records))

    def list_all(self) -> list:
        """The canonical listing from the last load, or [] if none."""
        return list(self._listing)

    def find_by_identifier(self, identifier: str) -> Optional[CourseRecord]:
        return self._index.find(identifier)

    def find_unlocked_by(self, completed_identifier: str) -> list:
        return self._graph.find_unlocked_by(completed_identifier)

    def prerequisites_of(self, identifier: str) -> list:
        return self._graph.prerequisites_of(identifier)

    @property
    def is_loaded(self) -> bool:
        return len(self._listing) > 0

    @property
    def count(self) -> int:
        return len(self._listing)
