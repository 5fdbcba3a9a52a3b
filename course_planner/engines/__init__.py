"""
Catalog engines.

This package contains the in-memory structures that do the real work of
the planner: the lookup index, the prerequisite graph, the stable sort,
and the Catalog that composes them.
"""

from .index import CatalogIndex
from .graph import PrerequisiteGraph
from .sorter import StableSorter, sort_by_identifier
from .catalog import Catalog

__all__ = [
    "CatalogIndex",
    "PrerequisiteGraph",
    "StableSorter",
    "sort_by_identifier",
    "Catalog",
]
