"""
Command-Line Interface for the Course Planner.

This module provides the interactive menu loop. It handles user input and
hands every choice to the CoursePlanner.

MENU:
-----
1. Load Data Structure   - read the course file into the catalog
2. Print Course List     - every course, sorted by course number
3. Print Course          - one course and its prerequisites
4. Print Unlocked Courses - courses opened up by completing a course
9. Exit

Run from the repository root:
    python -m course_planner --courses data/courses.txt
"""

import argparse
import logging

from .config import DEFAULT_LOG_LEVEL, default_courses_path
from .logging_config import setup_logging
from .planner import CoursePlanner
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

EXIT_CHOICE = "9"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="course-planner",
        description="Interactive course catalog: load, list and look up courses.",
    )
    parser.add_argument("--courses", "-c", default=None,
                        help=f"Path to the course file (default: {default_courses_path()})")
    parser.add_argument("--log-level", default=logging.getLevelName(DEFAULT_LOG_LEVEL),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging verbosity.")
    parser.add_argument("--log-file", default=None,
                        help="Also write log messages to this file.")
    return parser


def _prompt(message: str) -> str:
    """Read one token of user input; raises EOFError when input is exhausted."""
    return input(message).strip()


def run_menu(planner: CoursePlanner):
    """
    Run the menu loop until the user exits or input runs out.

    End of input (Ctrl-D, or a closed pipe) is treated the same as Exit.
    """
    display = planner.display

    while True:
        display.print_menu()
        try:
            choice = _prompt("What would you like to do? ")
        except EOFError:
            print()
            break
        print()

        if choice == EXIT_CHOICE:
            break
        elif choice == "1":
            planner.load_courses()
        elif choice == "2":
            planner.print_course_list()
        elif choice == "3":
            try:
                identifier = _prompt("What course do you want to know about? ")
            except EOFError:
                break
            print()
            planner.print_course(identifier)
        elif choice == "4":
            try:
                identifier = _prompt("Which course have you completed? ")
            except EOFError:
                break
            print()
            planner.print_unlocked_courses(identifier)
        else:
            display.print_invalid_option(choice)


def main(argv=None) -> int:
    """
    Command-line entry point.

    Parses options, configures logging, then runs the interactive menu.
    Returns the process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(getattr(logging, args.log_level), args.log_file)
    except OSError as e:
        parser.error(f"cannot open log file {args.log_file}: {e.strerror or e}")

    planner = CoursePlanner(args.courses)
    logger.info("Using course file %s", planner.loader.path)

    TerminalDisplay.print_welcome()
    run_menu(planner)
    TerminalDisplay.print_goodbye()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
