"""
Configuration constants for the course planner.

This module contains all configuration values and constants used by the
loader, the CLI and the logging setup. Centralizing these makes it easy to
point the planner at a different course file or input format.
"""

import logging
import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_COURSES_FILE = DATA_DIR / "courses.txt"

# Environment variable that overrides DEFAULT_COURSES_FILE
COURSES_FILE_ENV_VAR = "COURSE_PLANNER_COURSES_FILE"


def default_courses_path() -> Path:
    """Return the course file to load when none is given on the command line."""
    override = os.environ.get(COURSES_FILE_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_COURSES_FILE


# =============================================================================
# COURSE FILE FORMAT
# =============================================================================
# One course per line:
#   IDENTIFIER,Display Name,PREREQ1,PREREQ2,...
# A line holding only the sentinel ends the input.

FIELD_DELIMITER = ","
END_OF_INPUT_SENTINEL = "-1"


# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAMESPACE = "course_planner"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
DEFAULT_LOG_LEVEL = logging.WARNING
