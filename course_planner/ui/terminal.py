"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the course_planner package.

To create a different UI (web, JSON, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import CourseRecord, LoadOutcome


class TerminalDisplay:
    """
    Terminal output for catalog results.

    The catalog returns plain data (records, outcomes, identifier lists);
    this class decides how each of them reads on screen.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"

    MENU_OPTIONS = (
        ("1", "Load Data Structure."),
        ("2", "Print Course List."),
        ("3", "Print Course."),
        ("4", "Print Unlocked Courses."),
        ("9", "Exit"),
    )

    @classmethod
    def print_welcome(cls):
        print(f"{cls.BOLD}{cls.CYAN}Welcome to the course planner.{cls.RESET}")
        print()

    @classmethod
    def print_goodbye(cls):
        print("Thank you for using the course planner!")

    @classmethod
    def print_menu(cls):
        """Print the numbered main menu."""
        for number, label in cls.MENU_OPTIONS:
            print(f"\t {number}. {label}")
        print()

    @classmethod
    def print_invalid_option(cls, choice: str):
        print(f"{cls.YELLOW}{choice} is not a valid option.{cls.RESET}")

    @classmethod
    def print_course(cls, course: CourseRecord):
        """
        Print one course and its prerequisites.

        Prerequisites are shown as written in the course file, not in
        their normalized form.
        """
        print(f"{course.identifier}, {course.display_name}")

        if not course.has_prerequisites:
            print("No prerequisites")
            print()
            return

        print(f"Prerequisites: {', '.join(course.prerequisite_identifiers)}")
        print()

    @classmethod
    def print_course_list(cls, courses: list):
        """Print every course in the order given (already sorted by the catalog)."""
        if not courses:
            print(f"{cls.YELLOW}No courses loaded. Please load data first.{cls.RESET}")
            print()
            return

        for course in courses:
            cls.print_course(course)

    @classmethod
    def print_load_outcome(cls, outcome: LoadOutcome):
        if outcome.is_loaded:
            print(f"{cls.GREEN}Data successfully loaded.{cls.RESET} ({outcome.count} courses)")
            print()
        else:
            print(f"{cls.YELLOW}Courses file appears to be empty.{cls.RESET}")

    @classmethod
    def print_load_failure(cls, path):
        print(f"{cls.RED}Could not access courses file. Please check if loaded properly.{cls.RESET}")
        print(f"  {cls.DIM}{path}{cls.RESET}")

    @classmethod
    def print_not_loaded(cls):
        print(f"{cls.YELLOW}Please load courses first.{cls.RESET}")

    @classmethod
    def print_not_found(cls, identifier: str):
        print(f"Course {identifier} not found.")
        print()

    @classmethod
    def print_unlocked(cls, identifier: str, unlocked: list):
        """Print the course records that open up once `identifier` is completed."""
        if not unlocked:
            print(f"No courses are unlocked by completing {identifier}.")
            print()
            return

        print(f"{cls.BOLD}Completing {identifier} unlocks:{cls.RESET}")
        for course in unlocked:
            print(f"  {course.identifier}, {course.display_name}")
        print()
