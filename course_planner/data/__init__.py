"""
Data loading and parsing module.

This package handles all file I/O and course line parsing.
"""

from .loader import CourseFileLoader
from .parser import CourseLineParser

__all__ = ["CourseFileLoader", "CourseLineParser"]
