"""
Course Planner Package
======================

An in-memory course catalog: load a course list, look courses up by
number, list them in a stable order, and ask which courses a completed
course unlocks.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                          CATALOG LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌────────────────────┐  ┌─────────────────────────┐  │
│  │ CatalogIndex │  │ PrerequisiteGraph  │  │      StableSorter       │  │
│  │ (lookup)     │  │ (unlock queries)   │  │  (canonical ordering)   │  │
│  └──────────────┘  └────────────────────┘  └─────────────────────────┘  │
│                                                                         │
│  ┌───────────────────────────────────────────────────────────────────┐  │
│  │                    Catalog (owns all three)                       │  │
│  └───────────────────────────────────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
          ▲ CourseRecords                       │ Records / outcomes
          │                                     ▼
┌──────────────────────────┐     ┌─────────────────────────────────────────┐
│  CourseFileLoader (I/O)  │     │   TerminalDisplay (presentation)        │
│  CourseLineParser        │     │                                         │
└──────────────────────────┘     └─────────────────────────────────────────┘
                    ▲                               ▲
                    └──────── CoursePlanner ────────┘
                              (orchestrator)

PACKAGE STRUCTURE
-----------------

course_planner/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── logging_config.py    # Package logger setup
├── planner.py           # CoursePlanner orchestrator
├── cli.py               # Interactive menu
│
├── models/              # CourseRecord, LoadOutcome
├── data/                # CourseFileLoader, CourseLineParser
├── engines/             # CatalogIndex, PrerequisiteGraph, StableSorter, Catalog
└── ui/                  # TerminalDisplay

USAGE
-----

    from course_planner import Catalog, CourseRecord

    catalog = Catalog()
    catalog.load([
        CourseRecord("CSCI100", "Introduction to Computer Science"),
        CourseRecord("CSCI200", "Data Structures", ("CSCI100",)),
    ])
    catalog.find_by_identifier("csci200")
    catalog.find_unlocked_by("CSCI100")   # ["csci200"]

Running from command line:

    python -m course_planner --courses data/courses.txt

"""

# Version
__version__ = "1.0.0"

# Main exports
from .planner import CoursePlanner
from .cli import main

# Model exports
from .models import (
    CourseRecord,
    LoadOutcome,
    LoadStatus,
    normalize_identifier,
)

# Engine exports
from .engines import (
    Catalog,
    CatalogIndex,
    PrerequisiteGraph,
    StableSorter,
    sort_by_identifier,
)

# Data exports
from .data import CourseFileLoader, CourseLineParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    DEFAULT_COURSES_FILE,
    FIELD_DELIMITER,
    END_OF_INPUT_SENTINEL,
    default_courses_path,
)
from .logging_config import setup_logging

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CoursePlanner",
    "main",
    # Models
    "CourseRecord",
    "LoadOutcome",
    "LoadStatus",
    "normalize_identifier",
    # Engines
    "Catalog",
    "CatalogIndex",
    "PrerequisiteGraph",
    "StableSorter",
    "sort_by_identifier",
    # Data
    "CourseFileLoader",
    "CourseLineParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "DEFAULT_COURSES_FILE",
    "FIELD_DELIMITER",
    "END_OF_INPUT_SENTINEL",
    "default_courses_path",
    "setup_logging",
]
