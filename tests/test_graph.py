from course_planner import CourseRecord, PrerequisiteGraph


def _graph(records):
    graph = PrerequisiteGraph()
    for r in records:
        graph.add_course(r)
    return graph


def test_add_course_records_forward_and_reverse_edges():
    graph = _graph([CourseRecord("CSCI200", "Data Structures", ("CSCI101", "MATH201"))])

    assert graph.prerequisites_of("CSCI200") == ["csci101", "math201"]
    assert graph.dependents_of("CSCI101") == ["csci200"]
    assert graph.dependents_of("math201") == ["csci200"]


def test_round_trip_for_every_edge(chain_records):
    graph = _graph(chain_records)

    for record in chain_records:
        for prereq in record.prerequisite_identifiers:
            assert prereq.lower() in graph.prerequisites_of(record.identifier)
            assert record.identifier.lower() in graph.dependents_of(prereq)


def test_dangling_prerequisite_is_kept():
    graph = _graph([CourseRecord("CSCI300", "Algorithms", ("NOPE100",))])

    assert graph.prerequisites_of("CSCI300") == ["nope100"]
    assert graph.dependents_of("NOPE100") == ["csci300"]
    assert graph.prerequisites_of("NOPE100") == []


def test_prerequisites_of_unknown_course():
    assert PrerequisiteGraph().prerequisites_of("ZZZ999") == []
    assert PrerequisiteGraph().dependents_of("ZZZ999") == []


def test_adding_course_twice_duplicates_reverse_edges():
    record = CourseRecord("B", "Course B", ("A",))
    graph = _graph([record, record])

    assert graph.prerequisites_of("B") == ["a"]
    assert graph.dependents_of("A") == ["b", "b"]


def test_duplicate_prerequisites_are_not_deduplicated():
    graph = _graph([CourseRecord("B", "Course B", ("A", "a"))])

    assert graph.prerequisites_of("B") == ["a", "a"]
    assert graph.dependents_of("A") == ["b", "b"]


def test_unlock_example(chain_records):
    graph = _graph(chain_records)

    assert graph.find_unlocked_by("A") == ["b"]
    assert graph.find_unlocked_by("B") == ["c"]


def test_course_with_other_prerequisite_is_not_unlocked(chain_records):
    graph = _graph(chain_records)

    assert "d" not in graph.find_unlocked_by("A")
    assert "d" not in graph.find_unlocked_by("B")


def test_unlock_is_case_insensitive(chain_records):
    graph = _graph(chain_records)

    assert graph.find_unlocked_by("a") == ["b"]


def test_repeated_completed_prerequisite_still_unlocks():
    graph = _graph([CourseRecord("A", "Course A"), CourseRecord("B", "Course B", ("A", "A"))])

    # Reverse list holds "b" twice; the visited guard reports it once
    assert graph.find_unlocked_by("A") == ["b"]


def test_unlock_order_is_first_reached():
    graph = _graph([
        CourseRecord("A", "Course A"),
        CourseRecord("Z", "Course Z", ("A",)),
        CourseRecord("M", "Course M", ("A",)),
    ])

    assert graph.find_unlocked_by("A") == ["z", "m"]


def test_unlock_with_no_dependents_or_unknown_course(chain_records):
    graph = _graph(chain_records)

    assert graph.find_unlocked_by("D") == []
    assert graph.find_unlocked_by("ZZZ999") == []


def test_cycle_terminates():
    graph = _graph([
        CourseRecord("X", "Course X", ("Y",)),
        CourseRecord("Y", "Course Y", ("X",)),
    ])

    result = graph.find_unlocked_by("X")

    assert result == ["y"]


def test_self_cycle_terminates():
    graph = _graph([CourseRecord("X", "Course X", ("X",))])

    assert graph.find_unlocked_by("X") == ["x"]


def test_readding_course_replaces_forward_list():
    graph = _graph([
        CourseRecord("B", "Course B", ("A",)),
        CourseRecord("B", "Course B", ("C",)),
    ])

    assert graph.prerequisites_of("B") == ["c"]
    # Reverse edges from the first add are kept
    assert graph.dependents_of("A") == ["b"]
    assert graph.dependents_of("C") == ["b"]
