"""Cathode-ray tube: a tiny CPU driving a 40-pixel-wide screen."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = "10_12.txt"
SCREEN_WIDTH = 40


@dataclass(frozen=True)
class Instruction:
    """A CPU instruction: how many cycles it takes and what it adds to X."""

    delta: int = 0
    cycles: int = 1


NOOP = Instruction()


def parse_instruction(line: str) -> Instruction:
    """Parse ``"noop"`` or ``"addx V"``; a line without an argument is a no-op."""
    if " " not in line:
        return NOOP
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"missing argument: {line!r}")
    return Instruction(delta=int(parts[1]), cycles=2)


def _register_during_cycles(lines: Iterable[str]) -> Iterator[int]:
    x = 1
    for instruction in map(parse_instruction, lines):
        for _ in range(instruction.cycles):
            yield x
        x += instruction.delta


def signal_strength(lines: Iterable[str]) -> int:
    """Sum cycle × X during cycles 20, 60, 100, …"""
    return sum(
        cycle * x
        for cycle, x in enumerate(_register_during_cycles(lines), start=1)
        if cycle % 20 == 0 and (cycle // 20) % 2 == 1
    )


def crt_image(lines: Iterable[str]) -> list[str]:
    """Draw the screen rows; an unfinished last row is left out."""
    rows: list[str] = []
    row: list[str] = []
    for x in _register_during_cycles(lines):
        row.append("#" if abs(x - len(row)) <= 1 else ".")
        if len(row) == SCREEN_WIDTH:
            rows.append("".join(row))
            row = []
    return rows


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cathode-ray tube puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    lines = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 10/12 Partie 1")
    print(f"signal_strenght total : {signal_strength(lines)}")
    print("Puzzle du 10/12 Partie 2")
    for row in crt_image(lines):
        print(row)


if __name__ == "__main__":
    main()