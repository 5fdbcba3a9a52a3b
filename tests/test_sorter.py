import math
import random

import pytest

from course_planner import CourseRecord, StableSorter, sort_by_identifier


def _records(identifiers):
    return [CourseRecord(ident, f"Course {i}") for i, ident in enumerate(identifiers)]


def _ids(records):
    return [r.identifier for r in records]


def test_sorts_by_identifier():
    records = _records(["CSCI300", "MATH201", "CSCI100", "CSCI200"])

    assert _ids(sort_by_identifier(records)) == ["CSCI100", "CSCI200", "CSCI300", "MATH201"]


def test_does_not_modify_input():
    records = _records(["B", "A"])
    sort_by_identifier(records)

    assert _ids(records) == ["B", "A"]


def test_empty_and_single():
    assert sort_by_identifier([]) == []
    single = _records(["A"])
    assert sort_by_identifier(single) == single


def test_raw_case_ordering():
    # Uppercase sorts before lowercase; no case folding in the listing
    records = _records(["csci100", "CSCI200", "Csci150"])

    assert _ids(sort_by_identifier(records)) == ["CSCI200", "Csci150", "csci100"]


def test_stable_for_duplicate_identifiers():
    records = [
        CourseRecord("B", "first B"),
        CourseRecord("A", "only A"),
        CourseRecord("B", "second B"),
        CourseRecord("B", "third B"),
    ]

    result = sort_by_identifier(records)

    assert [r.display_name for r in result] == ["only A", "first B", "second B", "third B"]


def test_matches_builtin_sorted_on_random_input():
    rng = random.Random(42)
    identifiers = [f"C{rng.randint(0, 50):03d}" for _ in range(500)]
    records = _records(identifiers)

    expected = sorted(records, key=lambda r: r.identifier)

    assert sort_by_identifier(records) == expected


@pytest.mark.parametrize("kind", ["reversed", "all_equal", "sorted"])
def test_comparisons_stay_n_log_n(kind):
    n = 2048
    if kind == "reversed":
        identifiers = [f"C{i:05d}" for i in range(n, 0, -1)]
    elif kind == "all_equal":
        identifiers = ["SAME"] * n
    else:
        identifiers = [f"C{i:05d}" for i in range(n)]

    sorter = StableSorter()
    result = sorter.sort_by_identifier(_records(identifiers))

    assert _ids(result) == sorted(identifiers)
    assert sorter.comparisons <= n * math.ceil(math.log2(n))


def test_comparison_counter_resets_between_calls():
    sorter = StableSorter()
    sorter.sort_by_identifier(_records(["C", "B", "A", "D"]))
    first = sorter.comparisons
    sorter.sort_by_identifier(_records(["A"]))

    assert first > 0
    assert sorter.comparisons == 0
