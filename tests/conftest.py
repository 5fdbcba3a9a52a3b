import logging

import pytest

from course_planner import Catalog, CourseRecord


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by main() so they don't outlive a test's capture."""
    yield
    logger = logging.getLogger("course_planner")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# ============================================================================
# Fixtures - small course lists in the shape of the course file
# ============================================================================

@pytest.fixture
def chain_records():
    """A -> B -> C chain plus D, which needs both A and B."""
    return [
        CourseRecord("A", "Course A"),
        CourseRecord("B", "Course B", ("A",)),
        CourseRecord("C", "Course C", ("B",)),
        CourseRecord("D", "Course D", ("A", "B")),
    ]


@pytest.fixture
def cs_records():
    return [
        CourseRecord("MATH201", "Discrete Mathematics"),
        CourseRecord("CSCI300", "Introduction to Algorithms", ("CSCI200", "MATH201")),
        CourseRecord("CSCI101", "Introduction to Programming in C++", ("CSCI100",)),
        CourseRecord("CSCI100", "Introduction to Computer Science"),
        CourseRecord("CSCI200", "Data Structures", ("CSCI101",)),
    ]


@pytest.fixture
def loaded_catalog(cs_records):
    catalog = Catalog()
    catalog.load(cs_records)
    return catalog


@pytest.fixture
def courses_file(tmp_path):
    """Write a course file and return its path."""
    path = tmp_path / "courses.txt"
    path.write_text(
        "MATH201,Discrete Mathematics\n"
        "CSCI300,Introduction to Algorithms,CSCI200,MATH201\n"
        "CSCI101,Introduction to Programming in C++,CSCI100\n"
        "CSCI100,Introduction to Computer Science\n"
        "CSCI200,Data Structures,CSCI101\n"
        "-1\n",
        encoding="utf-8",
    )
    return path
