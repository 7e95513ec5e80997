"""Distress signal, part two: ordering every packet with a binary search tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import prod
from pathlib import Path

from aocpuzzles.packets import Order, compare_packets

DEFAULT_INPUT = "13_12.txt"
DIVIDER_PACKETS = ("[[2]]", "[[6]]")


@dataclass(slots=True)
class _TreeNode:
    value: str
    left: _TreeNode | None = None
    right: _TreeNode | None = None


class PacketTree:
    """A binary search tree of packets ordered by :func:`compare_packets`."""

    def __init__(self, signals: Iterable[str] = ()) -> None:
        self._root: _TreeNode | None = None
        for signal in signals:
            self.add(signal)

    def add(self, value: str) -> None:
        """Insert a packet into the tree."""
        new_node = _TreeNode(value)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            order = compare_packets(node.value, value)
            if order is Order.RIGHT:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left

    def _in_order(self) -> list[str]:
        values: list[str] = []
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            values.append(node.value)
            node = node.right
        return values

    def sorted_signals(self) -> list[str]:
        """Every packet in the tree, from the smallest to the largest."""
        values = self._in_order()
        values.reverse()
        return values


def decoder_key(sorted_signals: Sequence[str], divider_packets: Iterable[str]) -> int:
    """Multiply the 1-based positions of the divider packets in the sorted list."""
    positions = []
    for divider in divider_packets:
        try:
            positions.append(list(sorted_signals).index(divider) + 1)
        except ValueError:
            raise ValueError(f"divider packet not found: {divider!r}") from None
    return prod(positions)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Distress signal puzzle, part two")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()
    signals = [line for line in lines if line]
    signals.extend(DIVIDER_PACKETS)

    print("Puzzle du 13/12 Partie 2")
    tree = PacketTree(signals)
    key = decoder_key(tree.sorted_signals(), DIVIDER_PACKETS)
    print(f"Decoder key : {key}")


if __name__ == "__main__":
    main()