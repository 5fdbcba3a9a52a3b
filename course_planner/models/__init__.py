"""
Data models for the course planner.

This package contains the dataclasses and enums passed between the
loader, the catalog and the display. These serve as "contracts" between
the different parts of the system.
"""

from .course import CourseRecord, normalize_identifier
from .outcome import LoadOutcome, LoadStatus

__all__ = [
    # Course models
    "CourseRecord",
    "normalize_identifier",
    # Load results
    "LoadOutcome",
    "LoadStatus",
]
