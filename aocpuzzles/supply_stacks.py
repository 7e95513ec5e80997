"""Supply stacks: crates moved between stacks by a crane."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

Stacks = dict[int, list[str]]

DEFAULT_INPUT = "05_12.txt"


@dataclass(frozen=True)
class Procedure:
    """One crane step: move ``quantity`` crates from ``origin`` to ``destination``."""

    quantity: int
    origin: int
    destination: int


def split_stacks_and_procedures(text: str) -> tuple[str, str]:
    """Split the puzzle into the stack drawing and the procedure list.

    The line of stack labels just above the blank separator is dropped.
    """
    drawing: list[str] = []
    procedures: list[str] = []
    in_procedures = False
    for line in text.splitlines():
        if not line:
            if not in_procedures:
                if not drawing:
                    raise ValueError("no stack drawing before the separator")
                drawing.pop()
                in_procedures = True
            continue
        (procedures if in_procedures else drawing).append(line)
    return "\n".join(drawing), "\n".join(procedures)


def parse_stacks(text: str) -> Stacks:
    """Read the stack drawing into stacks numbered from 1, bottom crate first."""
    stacks: Stacks = {}
    for line in reversed(text.splitlines()):
        for index, crate in enumerate(line[1::4]):
            if crate.isspace():
                continue
            stacks.setdefault(index + 1, []).append(crate)
    return stacks


def parse_procedures(text: str) -> list[Procedure]:
    """Read lines such as ``"move 1 from 2 to 1"`` into procedures."""
    procedures = []
    for line in text.splitlines():
        numbers = [int(token) for token in line.split() if token.isdecimal()]
        if len(numbers) < 3:
            raise ValueError(f"invalid procedure: {line!r}")
        procedures.append(Procedure(*numbers[:3]))
    return procedures


def _copy(stacks: Stacks) -> Stacks:
    return {number: list(crates) for number, crates in stacks.items()}


def _endpoints(stacks: Stacks, procedure: Procedure) -> tuple[list[str], list[str]]:
    if procedure.origin == procedure.destination:
        raise ValueError(f"origin and destination are the same stack: {procedure}")
    return stacks[procedure.origin], stacks[procedure.destination]


def move_one_by_one(stacks: Stacks, procedures: Iterable[Procedure]) -> Stacks:
    """Apply the procedures moving one crate at a time; return the new stacks."""
    result = _copy(stacks)
    for procedure in procedures:
        origin, destination = _endpoints(result, procedure)
        for _ in range(procedure.quantity):
            if not origin:
                break
            destination.append(origin.pop())
    return result


def move_in_blocks(stacks: Stacks, procedures: Iterable[Procedure]) -> Stacks:
    """Apply the procedures moving crates together, keeping their order."""
    result = _copy(stacks)
    for procedure in procedures:
        origin, destination = _endpoints(result, procedure)
        count = min(procedure.quantity, len(origin))
        if count:
            destination.extend(origin[-count:])
            del origin[-count:]
    return result


def top_crates(stacks: Stacks) -> str:
    """Return the top crate of every stack, in stack order."""
    tops = []
    for number in sorted(stacks):
        if not stacks[number]:
            raise ValueError(f"stack {number} is empty")
        tops.append(stacks[number][-1])
    return "".join(tops)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Supply stacks puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    drawing, steps = split_stacks_and_procedures(
        Path(args.input).read_text(encoding="utf-8")
    )
    stacks = parse_stacks(drawing)
    procedures = parse_procedures(steps)

    print("Puzzle du 05/12 Partie 1")
    print(top_crates(move_one_by_one(stacks, procedures)))
    print("Puzzle du 05/12 Partie 2")
    print(top_crates(move_in_blocks(stacks, procedures)))


if __name__ == "__main__":
    main()