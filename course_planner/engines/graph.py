"""
Prerequisite Graph.

This module models prerequisite relationships as a directed graph and
answers "which courses open up once I finish this one?".
"""

from collections import defaultdict, deque

from ..models import CourseRecord, normalize_identifier


class PrerequisiteGraph:
    """
    Adjacency-list graph of prerequisite relationships.

    ═══════════════════════════════════════════════════════════════════════════
    EDGE STORAGE
    ═══════════════════════════════════════════════════════════════════════════

    Two mappings, both keyed and valued by normalized identifiers:

    - prerequisites: course -> the courses it requires (forward edges)
    - dependents:    course -> the courses that require it (reverse edges)

    Edges are appended as courses are added and are never deduplicated,
    so adding the same course twice doubles its reverse edges (its forward
    list is replaced, not extended). A prerequisite does
    not have to be a course in the catalog (dangling references are fine),
    and nothing stops the input from forming a cycle.

    ═══════════════════════════════════════════════════════════════════════════
    UNLOCK POLICY
    ═══════════════════════════════════════════════════════════════════════════

    find_unlocked_by() treats a course as unlocked only when the completed
    course is its ENTIRE prerequisite list (possibly repeated). A course
    needing the completed course plus anything else stays locked:

        A            (no prerequisites)
        B  <- A      unlocked by A
        C  <- B      unlocked by B, not by A
        D  <- A, B   never unlocked by A alone

    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self):
        self._prerequisites = {}  # course -> [prerequisite, ...]
        self._dependents = defaultdict(list)  # prerequisite -> [course, ...]

    def add_course(self, record: CourseRecord):
        """
        Add a course and its prerequisite edges.

        The forward list for the course is reset, then one forward and one
        reverse edge is appended per listed prerequisite.
        Time Complexity: O(p) where p is the number of prerequisites.
        """
        course_key = record.key
        self._prerequisites[course_key] = []

        for prereq in record.prerequisite_identifiers:
            prereq_key = normalize_identifier(prereq)
            self._prerequisites[course_key].append(prereq_key)
            self._dependents[prereq_key].append(course_key)

    def prerequisites_of(self, identifier: str) -> list:
        """Forward edges for a course, or an empty list if it was never added."""
        return list(self._prerequisites.get(normalize_identifier(identifier), []))

    def dependents_of(self, identifier: str) -> list:
        """Reverse edges: every course that lists this one as a prerequisite."""
        return list(self._dependents.get(normalize_identifier(identifier), []))

    def find_unlocked_by(self, completed_identifier: str) -> list:
        """
        Find the courses that become available after completing one course.

        Breadth-first from the direct dependents of the completed course.
        Each candidate is visited once; it qualifies if every entry in its
        prerequisite list is the completed course, and a qualifying
        candidate's own dependents are queued in turn.

        Args:
            completed_identifier: Course number that has been completed

        Returns:
            Normalized identifiers of unlocked courses, in first-reached
            order. Unknown courses and courses without dependents give [].

        Time Complexity: O(V + E) over the reachable subgraph.
        """
        completed_key = normalize_identifier(completed_identifier)
        available = []

        if completed_key not in self._dependents:
            return available

        queue = deque(self._dependents[completed_key])
        visited = set()

        while queue:
            current = queue.popleft()

            if current in visited:
                continue
            visited.add(current)

            # A dependent always has at least one prerequisite (the
            # completed course), so all() is never vacuously true here
            all_prereqs_met = all(
                prereq == completed_key
                for prereq in self._prerequisites.get(current, [])
            )

            if all_prereqs_met:
                available.append(current)
                for following in self._dependents.get(current, []):
                    if following not in visited:
                        queue.append(following)

        return available
