"""Tuning trouble: locating start markers in a datastream."""

from __future__ import annotations

import argparse
from pathlib import Path

DEFAULT_INPUT = "06_12.txt"
PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def find_marker(datastream: str, size: int) -> int | None:
    """Return how many characters are read once ``size`` distinct ones end a window.

    Returns ``None`` when the stream holds no such window.
    """
    if size <= 0:
        raise ValueError("marker size must be positive")
    for end in range(size, len(datastream) + 1):
        if len(set(datastream[end - size:end])) == size:
            return end
    return None


def start_of_packet(datastream: str) -> int | None:
    """Position just after the start-of-packet marker."""
    return find_marker(datastream, PACKET_MARKER_SIZE)


def start_of_message(datastream: str) -> int | None:
    """Position just after the start-of-message marker."""
    return find_marker(datastream, MESSAGE_MARKER_SIZE)


def _report(datastream: str, size: int) -> None:
    index = find_marker(datastream, size)
    if index is None:
        return
    marker = list(datastream[index - size:index])
    print(f"flux : {datastream},\nmarqueur : {marker},\nindex : {index}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Tuning trouble puzzle")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    datastreams = Path(args.input).read_text(encoding="utf-8").splitlines()

    print("Puzzle du 06/12 Partie 1")
    for datastream in datastreams:
        _report(datastream, PACKET_MARKER_SIZE)
    print("Puzzle du 06/12 Partie 2")
    for datastream in datastreams:
        _report(datastream, MESSAGE_MARKER_SIZE)


if __name__ == "__main__":
    main()