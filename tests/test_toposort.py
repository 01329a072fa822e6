import pytest

from chapterkit.toposort import PREREQS, main, topo_sort


def test_every_course_follows_its_prerequisites():
    order = topo_sort(PREREQS)
    position = {course: i for i, course in enumerate(order)}
    for course, needs in PREREQS.items():
        for need in needs:
            assert position[need] < position[course]


def test_each_course_appears_once():
    order = topo_sort(PREREQS)
    everything = set(PREREQS) | {n for needs in PREREQS.values() for n in needs}
    assert len(order) == len(set(order))
    assert set(order) == everything


def test_first_course_is_the_root_prerequisite():
    assert topo_sort(PREREQS)[0] == "intro to programming"


def test_result_is_deterministic():
    reordered = dict(reversed(list(PREREQS.items())))
    assert topo_sort(reordered) == topo_sort(PREREQS)


def test_cycle_does_not_loop_forever():
    order = topo_sort({"a": ["b"], "b": ["a"]})
    assert sorted(order) == ["a", "b"]


def test_empty_graph():
    assert topo_sort({}) == []


def test_main_numbers_lines(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    order = topo_sort(PREREQS)
    assert len(lines) == len(order)
    assert lines[0] == f"1:\t{order[0]}"
    assert lines[-1] == f"{len(order)}:\t{order[-1]}"


@pytest.mark.parametrize("course", sorted(PREREQS))
def test_key_courses_present(course):
    assert course in topo_sort(PREREQS)