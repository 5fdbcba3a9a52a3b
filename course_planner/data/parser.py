"""
Course line parsing.

This module turns raw lines of the course file into CourseRecord objects.
"""

import logging
from typing import Optional

from ..config import FIELD_DELIMITER, END_OF_INPUT_SENTINEL
from ..models import CourseRecord

logger = logging.getLogger(__name__)


class CourseLineParser:
    """
    Parses comma-delimited course lines.

    LINE FORMAT:
    ------------
        CSCI300,Introduction to Algorithms,CSCI200,MATH201

    - Field 1 is the course identifier
    - Field 2 is the display name
    - Every remaining field is a prerequisite identifier

    CLEANUP RULES:
    --------------
    - Fields are stripped of surrounding whitespace (this also drops the
      "\\r" left by files saved with Windows line endings)
    - Empty prerequisite fields, such as a trailing comma, are dropped
    - A line with no display name or an empty identifier is malformed;
      parse_line() returns None and parse_lines() skips it with a warning
    """

    def __init__(self, delimiter: str = FIELD_DELIMITER,
                 sentinel: str = END_OF_INPUT_SENTINEL):
        self.delimiter = delimiter
        self.sentinel = sentinel

    def is_sentinel(self, line: str) -> bool:
        return line.strip() == self.sentinel

    def parse_line(self, line: str) -> Optional[CourseRecord]:
        """
        Parse a single course line.

        Returns:
            CourseRecord, or None if the line is blank or malformed
        """
        fields = [f.strip() for f in line.split(self.delimiter)]

        if len(fields) < 2 or not fields[0]:
            return None

        return CourseRecord(
            identifier=fields[0],
            display_name=fields[1],
            prerequisite_identifiers=tuple(p for p in fields[2:] if p),
        )

    def parse_lines(self, lines) -> list:
        """
        Parse lines until the end-of-input sentinel.

        Args:
            lines: Any iterable of strings (an open file works)

        Returns:
            List of CourseRecord in input order
        """
        records = []

        for line_number, line in enumerate(lines, 1):
            if self.is_sentinel(line):
                break
            if not line.strip():
                continue

            record = self.parse_line(line)
            if record is None:
                logger.warning("Skipping malformed course line %d: %r", line_number, line.rstrip("\r\n"))
                continue

            records.append(record)

        return records
