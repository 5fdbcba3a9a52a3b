"""
Course Planner - Main Orchestrator.

This module contains the CoursePlanner class that connects the catalog
to the course file loader and to the presentation layer.
"""

import logging
from typing import Optional

from .data import CourseFileLoader
from .engines import Catalog
from .models import CourseRecord, LoadOutcome
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class CoursePlanner:
    """
    Main interface for the course planner.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Reads course records through the CourseFileLoader
    2. Loads them into its own Catalog (pure data, no printing)
    3. Passes the results to the display

    Every method also returns the data it displayed, so the planner can be
    driven from code or tests without reading the terminal.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object with the same method names:
        planner = CoursePlanner(path, display=WebDisplay())

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        planner = CoursePlanner("data/courses.txt")
        planner.load_courses()
        planner.print_course_list()
        planner.print_course("csci300")
        planner.print_unlocked_courses("CSCI100")
    """

    def __init__(self, courses_path=None, loader: Optional[CourseFileLoader] = None,
                 display=None):
        self.loader = loader or CourseFileLoader(courses_path)
        self.catalog = Catalog()
        self.display = display or TerminalDisplay()

    def load_courses(self) -> Optional[LoadOutcome]:
        """
        Read the course file and (re)load the catalog.

        Returns:
            The LoadOutcome, or None if the course file could not be read.
            In that case the previously loaded catalog is kept.
        """
        try:
            records = self.loader.read_records()
        except OSError as e:
            logger.error("Could not read course file %s: %s", self.loader.path, e)
            self.display.print_load_failure(self.loader.path)
            return None

        outcome = self.catalog.load(records)
        if outcome.is_empty:
            logger.warning("Course file %s contained no courses", self.loader.path)
        else:
            logger.info("Loaded %d courses", outcome.count)

        self.display.print_load_outcome(outcome)
        return outcome

    def print_course_list(self) -> list:
        """Display every course in canonical (sorted) order."""
        courses = self.catalog.list_all()
        self.display.print_course_list(courses)
        return courses

    def print_course(self, identifier: str) -> Optional[CourseRecord]:
        """
        Look up and display a single course.

        If nothing has been loaded yet the user is reminded to load first,
        and the lookup still runs (it simply misses).
        """
        if not self.catalog.is_loaded:
            self.display.print_not_loaded()

        course = self.catalog.find_by_identifier(identifier)
        if course is not None:
            self.display.print_course(course)
        else:
            logger.debug("Lookup miss for %r", identifier)
            self.display.print_not_found(identifier)
        return course

    def print_unlocked_courses(self, identifier: str) -> list:
        """
        Display the courses unlocked by completing `identifier`.

        Returns:
            The unlocked CourseRecords, in the order the graph reached them
        """
        if not self.catalog.is_loaded:
            self.display.print_not_loaded()

        unlocked = []
        for key in self.catalog.find_unlocked_by(identifier):
            course = self.catalog.find_by_identifier(key)
            # Graph dependents always come from loaded records
            if course is not None:
                unlocked.append(course)

        self.display.print_unlocked(identifier, unlocked)
        return unlocked
