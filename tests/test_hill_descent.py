import pytest

from aocpuzzles.hill_climb import parse_heightmap
from aocpuzzles.hill_descent import (
    build_descent_tree,
    fewest_steps_from_any_start,
    is_possible_start,
    lowest_step,
    main,
    possible_starts,
)

EXAMPLE = [
    "Sabqponm",
    "abcryxxl",
    "accszExk",
    "acctuvwj",
    "abdefghi",
]


def test_worked_example():
    assert fewest_steps_from_any_start(EXAMPLE) == 29


def test_possible_starts_are_low_border_squares():
    heightmap = parse_heightmap(EXAMPLE)
    starts = possible_starts(heightmap)
    assert (4, 0) in starts
    height, width = len(heightmap), len(heightmap[0])
    for y, x in starts:
        assert y in (0, height - 1) or x in (0, width - 1)
        assert heightmap[y][x] in (96, 97)


def test_interior_low_square_is_not_a_start():
    heightmap = parse_heightmap(["bbb", "bab", "bbb"])
    assert possible_starts(heightmap) == []


def test_is_possible_start_needs_climbable_neighbour():
    assert is_possible_start([[97, 99], [99, 99]], 0, 0, 97) is False
    assert is_possible_start([[97, 98], [99, 99]], 0, 0, 97) is True


def test_descent_tree_root_is_end_with_zero_steps():
    heightmap = parse_heightmap(EXAMPLE)
    tree = build_descent_tree(heightmap)
    root = tree.find_by_position((2, 5))
    assert root is tree.root
    assert root.position == 0


def test_descent_tree_neighbour_of_end_is_one_step():
    heightmap = parse_heightmap(["aSzE"])
    tree = build_descent_tree(heightmap)
    assert tree.find_by_position((0, 2)).position == 1


def test_lowest_step_without_reachable_start_raises():
    heightmap = parse_heightmap(["aE"])
    tree = build_descent_tree(heightmap)
    with pytest.raises(ValueError):
        lowest_step(tree, [(5, 5)])


def test_lowest_step_picks_minimum():
    heightmap = parse_heightmap(EXAMPLE)
    tree = build_descent_tree(heightmap)
    starts = possible_starts(heightmap)
    best = lowest_step(tree, starts)
    assert all(
        tree.find_by_position(start) is None
        or tree.find_by_position(start).position >= best
        for start in starts
    )


def test_missing_end_raises():
    with pytest.raises(ValueError):
        fewest_steps_from_any_start(["Sabc"])


def test_main_prints_result(tmp_path, capsys):
    puzzle = tmp_path / "input.txt"
    puzzle.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    main([str(puzzle)])
    out = capsys.readouterr().out
    assert "Plus petit nombre de pas : 29" in out