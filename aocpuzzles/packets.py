"""Distress signal: comparing nested list packets."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from enum import Enum
from itertools import zip_longest
from pathlib import Path

DEFAULT_INPUT = "13_12.txt"


class Order(Enum):
    """Outcome of comparing two packets."""

    LEFT = "left"
    RIGHT = "right"
    SAME = "same"


def _inner(signal: str) -> str:
    if len(signal) < 2 or signal[0] != "[" or signal[-1] != "]":
        raise ValueError(f"not a bracketed list: {signal!r}")
    return signal[1:-1]


def split_values(signal: str) -> list[str]:
    """Split a packet such as ``"[1,[2,3],10]"`` into its top-level values."""
    inner = _inner(signal)
    if not inner:
        return []
    values: list[str] = []
    current: list[str] = []
    depth = 0
    for char in inner:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                raise ValueError(f"unbalanced brackets: {signal!r}")
        if char == "," and depth == 0:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
    if depth != 0:
        raise ValueError(f"unbalanced brackets: {signal!r}")
    values.append("".join(current))
    if any(not value for value in values):
        raise ValueError(f"empty value in packet: {signal!r}")
    return values


def compare_packets(left: str, right: str) -> Order:
    """Compare two packets; ``Order.LEFT`` means they are in the right order."""
    for left_value, right_value in zip_longest(
        split_values(left), split_values(right)
    ):
        if left_value is None:
            return Order.LEFT
        if right_value is None:
            return Order.RIGHT

        left_is_list = left_value.startswith("[")
        right_is_list = right_value.startswith("[")

        if not left_is_list and not right_is_list:
            left_number, right_number = int(left_value), int(right_value)
            if left_number < right_number:
                return Order.LEFT
            if left_number > right_number:
                return Order.RIGHT
            continue

        order = compare_packets(
            left_value if left_is_list else f"[{left_value}]",
            right_value if right_is_list else f"[{right_value}]",
        )
        if order is not Order.SAME:
            return order
    return Order.SAME


def parse_pairs(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Group packet lines into pairs; blank lines between pairs are skipped."""
    pairs = []
    remaining = iter(lines)
    for left in remaining:
        if not left:
            continue
        right = next(remaining, "")
        if not right:
            raise ValueError(f"packet without a partner: {left!r}")
        pairs.append((left, right))
    return pairs


def sum_ordered_pair_indices(pairs: Iterable[tuple[str, str]]) -> int:
    """Sum the 1-based indices of the pairs already in the right order."""
    return sum(
        index
        for index, (left, right) in enumerate(pairs, start=1)
        if compare_packets(left, right) is Order.LEFT
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Distress signal puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 13/12 Partie 1")
    total = sum_ordered_pair_indices(parse_pairs(lines))
    print(f"nombre de paires ordonnées : {total}")


if __name__ == "__main__":
    main()