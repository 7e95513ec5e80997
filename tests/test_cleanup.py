import pytest

from aocpuzzles.cleanup import (
    count_fully_contained,
    count_overlapping,
    fully_contains,
    main,
    ordered,
    overlaps,
    parse_assignment,
    parse_pair,
)

EXAMPLE = [
    "2-4,6-8",
    "2-3,4-5",
    "5-7,7-9",
    "2-8,3-7",
    "6-6,4-6",
    "2-6,4-8",
]


def test_parse_assignment():
    assert parse_assignment("2-4") == (2, 4)


def test_parse_pair():
    assert parse_pair("2-8,3-7") == ((2, 8), (3, 7))


@pytest.mark.parametrize("text", ["5", "a-b", "", "3--1"])
def test_parse_assignment_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_assignment(text)


def test_parse_pair_requires_two_assignments():
    with pytest.raises(ValueError):
        parse_pair("2-4")


def test_ordered_puts_earliest_start_first():
    assert ordered((6, 6), (4, 6)) == ((4, 6), (6, 6))
    assert ordered((4, 6), (6, 6)) == ((4, 6), (6, 6))


def test_ordered_puts_longer_first_on_equal_start():
    assert ordered((2, 4), (2, 8)) == ((2, 8), (2, 4))
    assert ordered((2, 8), (2, 4)) == ((2, 8), (2, 4))


def test_fully_contains():
    assert fully_contains((2, 8), (3, 7)) is True
    assert fully_contains((2, 6), (4, 8)) is False


def test_overlaps():
    assert overlaps((5, 7), (7, 9)) is True
    assert overlaps((2, 4), (6, 8)) is False


def test_example_counts():
    assert count_fully_contained(EXAMPLE) == 2
    assert count_overlapping(EXAMPLE) == 4


def test_containment_implies_overlap():
    for line in EXAMPLE:
        early, late = ordered(*parse_pair(line))
        if fully_contains(early, late):
            assert overlaps(early, late)
    assert count_fully_contained(EXAMPLE) <= count_overlapping(EXAMPLE)


def test_count_is_independent_of_pair_order():
    swapped = [",".join(reversed(line.split(","))) for line in EXAMPLE]
    assert count_fully_contained(swapped) == count_fully_contained(EXAMPLE)
    assert count_overlapping(swapped) == count_overlapping(EXAMPLE)


def test_empty_input_counts_nothing():
    assert count_fully_contained([]) == 0
    assert count_overlapping([]) == 0


def test_main_prints_both_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert f"se superposant : {count_fully_contained(EXAMPLE)}" in out
    assert f"se superposant : {count_overlapping(EXAMPLE)}" in out
    assert "Partie 1" in out and "Partie 2" in out