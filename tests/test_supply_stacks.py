import pytest

from aocpuzzles.supply_stacks import (
    Procedure,
    main,
    move_in_blocks,
    move_one_by_one,
    parse_procedures,
    parse_stacks,
    split_stacks_and_procedures,
    top_crates,
)

EXAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def _example():
    drawing, steps = split_stacks_and_procedures(EXAMPLE)
    return parse_stacks(drawing), parse_procedures(steps)


def test_split_drops_label_line():
    drawing, steps = split_stacks_and_procedures(EXAMPLE)
    assert drawing.splitlines() == ["    [D]    ", "[N] [C]    ", "[Z] [M] [P]"]
    assert steps.splitlines()[0] == "move 1 from 2 to 1"
    assert len(steps.splitlines()) == 4


def test_parse_stacks():
    stacks, _ = _example()
    assert stacks == {1: ["Z", "N"], 2: ["M", "C", "D"], 3: ["P"]}


def test_parse_procedures():
    _, procedures = _example()
    assert procedures[0] == Procedure(quantity=1, origin=2, destination=1)
    assert procedures[1] == Procedure(quantity=3, origin=1, destination=3)


def test_parse_procedures_rejects_short_line():
    with pytest.raises(ValueError):
        parse_procedures("move 1 from 2")


def test_example_results():
    stacks, procedures = _example()
    assert top_crates(move_one_by_one(stacks, procedures)) == "CMZ"
    assert top_crates(move_in_blocks(stacks, procedures)) == "MCD"


def test_moves_do_not_mutate_input():
    stacks, procedures = _example()
    before = {k: list(v) for k, v in stacks.items()}
    move_one_by_one(stacks, procedures)
    move_in_blocks(stacks, procedures)
    assert stacks == before


def test_moves_preserve_crates():
    stacks, procedures = _example()
    everything = sorted(c for s in stacks.values() for c in s)
    for result in (move_one_by_one(stacks, procedures), move_in_blocks(stacks, procedures)):
        assert sorted(c for s in result.values() for c in s) == everything


def test_single_crate_moves_agree():
    stacks, _ = _example()
    steps = [Procedure(1, 2, 1), Procedure(1, 1, 3)]
    assert move_one_by_one(stacks, steps) == move_in_blocks(stacks, steps)


def test_block_move_keeps_order_and_single_move_reverses():
    stacks = {1: ["A", "B", "C"], 2: []}
    step = [Procedure(3, 1, 2)]
    assert move_in_blocks(stacks, step)[2] == ["A", "B", "C"]
    assert move_one_by_one(stacks, step)[2] == ["C", "B", "A"]


def test_quantity_larger_than_stack_moves_what_exists():
    stacks = {1: ["A"], 2: ["B"]}
    step = [Procedure(5, 1, 2)]
    assert move_one_by_one(stacks, step) == {1: [], 2: ["B", "A"]}
    assert move_in_blocks(stacks, step) == {1: [], 2: ["B", "A"]}


def test_same_origin_and_destination_is_an_error():
    with pytest.raises(ValueError):
        move_one_by_one({1: ["A"]}, [Procedure(1, 1, 1)])
    with pytest.raises(ValueError):
        move_in_blocks({1: ["A"]}, [Procedure(1, 1, 1)])


def test_unknown_stack_is_an_error():
    with pytest.raises(KeyError):
        move_one_by_one({1: ["A"]}, [Procedure(1, 1, 9)])


def test_top_crates_of_empty_stack_is_an_error():
    with pytest.raises(ValueError):
        top_crates({1: ["A"], 2: []})


def test_main_prints_tops(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main([str(path)])
    stacks, procedures = _example()
    lines = capsys.readouterr().out.splitlines()
    assert top_crates(move_one_by_one(stacks, procedures)) in lines
    assert top_crates(move_in_blocks(stacks, procedures)) in lines