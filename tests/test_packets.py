import pytest

from aocpuzzles.packets import (
    Order,
    compare_packets,
    main,
    parse_pairs,
    split_values,
    sum_ordered_pair_indices,
)

EXAMPLE = """[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]""".splitlines()

EXPECTED_ORDERS = [
    Order.LEFT,
    Order.LEFT,
    Order.RIGHT,
    Order.LEFT,
    Order.RIGHT,
    Order.LEFT,
    Order.RIGHT,
    Order.RIGHT,
]


def test_split_values_top_level_only():
    assert split_values("[1,[2,3],10]") == ["1", "[2,3]", "10"]


def test_split_values_empty_list():
    assert split_values("[]") == []


def test_split_values_nested_empty_list():
    assert split_values("[[],[[]]]") == ["[]", "[[]]"]


@pytest.mark.parametrize("signal", ["1,2", "[1,[2]", "[1,,2]", "[1,2]]", "["])
def test_split_values_rejects_malformed(signal):
    with pytest.raises(ValueError):
        split_values(signal)


@pytest.mark.parametrize(
    "pair, expected", list(zip(parse_pairs(EXAMPLE), EXPECTED_ORDERS))
)
def test_compare_example_pairs(pair, expected):
    assert compare_packets(*pair) is expected


@pytest.mark.parametrize("pair", parse_pairs(EXAMPLE))
def test_compare_is_antisymmetric(pair):
    left, right = pair
    forward = compare_packets(left, right)
    backward = compare_packets(right, left)
    assert {forward, backward} == {Order.LEFT, Order.RIGHT}


@pytest.mark.parametrize("packet", [line for line in EXAMPLE if line])
def test_packet_equals_itself(packet):
    assert compare_packets(packet, packet) is Order.SAME


def test_integer_and_single_item_list_are_same():
    assert compare_packets("[5]", "[[5]]") is Order.SAME


def test_large_numbers_compare_numerically():
    assert compare_packets("[100]", "[99]") is Order.RIGHT


def test_parse_pairs_groups_lines():
    pairs = parse_pairs(EXAMPLE)
    non_blank = [line for line in EXAMPLE if line]
    assert pairs == list(zip(non_blank[::2], non_blank[1::2]))


def test_parse_pairs_rejects_unpaired_packet():
    with pytest.raises(ValueError):
        parse_pairs(["[1]", "[2]", "", "[3]"])


def test_sum_ordered_pair_indices_example():
    assert sum_ordered_pair_indices(parse_pairs(EXAMPLE)) == 13


def test_sum_of_no_pairs_is_zero():
    assert sum_ordered_pair_indices([]) == 0


def test_main_prints_total(tmp_path, capsys):
    path = tmp_path / "signals.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    total = sum_ordered_pair_indices(parse_pairs(EXAMPLE))
    assert f"nombre de paires ordonnées : {total}" in out