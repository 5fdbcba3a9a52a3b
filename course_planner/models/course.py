"""
Course data models.

Contains the CourseRecord dataclass that represents one line of the
course file, plus the identifier normalization shared by every keyed
lookup structure.
"""

from dataclasses import dataclass, field


def normalize_identifier(identifier: str) -> str:
    """
    Case-fold a course identifier for keyed lookups.

    Only the index and the prerequisite graph key on this form. The
    listing order always uses the raw identifier.
    """
    return identifier.casefold()


@dataclass(frozen=True)
class CourseRecord:
    """
    A single course as it appears in the course file.

    Records are immutable once parsed. A new load replaces them wholesale
    rather than updating them in place.

    Attributes:
        identifier: Course number as written in the file (e.g., "CSCI200")
        display_name: Human-readable course title
        prerequisite_identifiers: Course numbers this course requires, in
            file order. They may name courses that are not in the catalog.
    """
    identifier: str
    display_name: str
    prerequisite_identifiers: tuple = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence from callers but store an immutable tuple
        if not isinstance(self.prerequisite_identifiers, tuple):
            object.__setattr__(
                self, "prerequisite_identifiers", tuple(self.prerequisite_identifiers)
            )

    @property
    def key(self) -> str:
        """Normalized identifier used by the index and the graph."""
        return normalize_identifier(self.identifier)

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisite_identifiers) > 0
