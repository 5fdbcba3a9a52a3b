"""
Course file loading.

This module reads the course file from disk and hands parsed records
to the catalog.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import default_courses_path
from .parser import CourseLineParser

logger = logging.getLogger(__name__)


class CourseFileLoader:
    """
    Reads course records from a line-oriented text file.

    WHY A SEPARATE LOADER: The catalog only deals with already-parsed
    records. Everything that can go wrong with the file itself (missing,
    unreadable) is raised from here, so it is never confused with a file
    that was read but held no courses.

    ERRORS:
    - FileNotFoundError if the file does not exist
    - OSError for other read failures (permissions, directories, a file
      that is not UTF-8 text)
    An existing file with no course lines gives an empty list.

    Usage:
        loader = CourseFileLoader("data/courses.txt")
        records = loader.read_records()
    """

    def __init__(self, path=None, parser: Optional[CourseLineParser] = None):
        self.path = Path(path) if path is not None else default_courses_path()
        self.parser = parser or CourseLineParser()

    def read_records(self) -> list:
        """
        Read and parse every course line up to the sentinel.

        Returns:
            List of CourseRecord in file order
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Course file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = self.parser.parse_lines(f)
        except UnicodeDecodeError as e:
            raise OSError(f"Course file is not valid UTF-8: {self.path} ({e.reason})") from e

        logger.info("Read %d course records from %s", len(records), self.path)
        return records
