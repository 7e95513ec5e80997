# aocpuzzles

Solvers for a run of December programming puzzles. Each puzzle is a small
module of plain functions you can call from Python, plus a console command
that reads a puzzle input file and prints the answer. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command takes one optional argument, the path of the input file. When
it is left out, the file named in the table is read from the current
directory. The messages the commands print are in French.

| Command             | Default input | Prints                                                        |
|---------------------|---------------|---------------------------------------------------------------|
| `aoc-cleanup`       | `04_12.txt`   | pairs where one assignment contains the other, and overlapping pairs |
| `aoc-supply-stacks` | `05_12.txt`   | top crates moving one crate at a time, then moving blocks     |
| `aoc-tuning`        | `06_12.txt`   | start-of-packet and start-of-message markers of each stream   |
| `aoc-cpu`           | `10_12.txt`   | total signal strength and the CRT image                       |
| `aoc-treehouse`     | `08_12.txt`   | visible trees and the highest scenic score                    |
| `aoc-rope`          | `09_12.txt`   | positions visited by the tail of a 2-knot and a 10-knot rope  |
| `aoc-packets`       | `13_12.txt`   | sum of the indices of pairs in the right order                |
| `aoc-packet-tree`   | `13_12.txt`   | decoder key from the sorted packets and the dividers          |
| `aoc-sand`          | `14_12.txt`   | sand units at rest before one falls into the abyss            |
| `aoc-sand-floor`    | `14_12.txt`   | the floor's y and the sand units until the source is blocked  |
| `aoc-hill-climb`    | `12_12.txt`   | position of the summit and fewest steps from `S` to `E`       |
| `aoc-hill-descent`  | `12_12.txt`   | fewest steps to `E` from the best lowest square on the border |

`aoc-tuning` prints nothing for a stream that holds no marker.

## Library use

```python
from aocpuzzles.cleanup import count_fully_contained, count_overlapping
from aocpuzzles.tuning import start_of_packet, start_of_message
from aocpuzzles.rope import tail_positions

lines = ["2-4,6-8", "2-8,3-7", "6-6,4-6"]
print(count_fully_contained(lines))   # 2
print(count_overlapping(lines))       # 2
print(start_of_packet("mjqjpqmgbljsphdztnvjfqwrcgsmlb"))  # 7
print(len(tail_positions(["R 4", "U 4"], knots=2)))
```

The modules and their main entry points:

- `aocpuzzles.cleanup`: `parse_pair`, `ordered`, `fully_contains`, `overlaps`,
  `count_fully_contained`, `count_overlapping`.
- `aocpuzzles.supply_stacks`: `Procedure`, `split_stacks_and_procedures`,
  `parse_stacks`, `parse_procedures`, `move_one_by_one`, `move_in_blocks`,
  `top_crates`. The move functions return new stacks and leave their input
  untouched.
- `aocpuzzles.tuning`: `find_marker`, `start_of_packet`, `start_of_message`;
  they return `None` when no marker is found.
- `aocpuzzles.cpu`: `Instruction`, `parse_instruction`, `signal_strength`,
  `crt_image` (an unfinished last row is left out).
- `aocpuzzles.treehouse`: `parse_grid`, `count_visible_trees`, `scenic_score`,
  `highest_scenic_score`.
- `aocpuzzles.rope`: `Point`, `parse_move`, `tail_positions(lines, knots=2)`.
- `aocpuzzles.packets`: `Order`, `split_values`, `compare_packets`,
  `parse_pairs`, `sum_ordered_pair_indices`.
- `aocpuzzles.packet_tree`: `PacketTree` (with `add` and `sorted_signals`)
  and `decoder_key`.
- `aocpuzzles.rock_line`: `Direction` and `Line`, a rock segment built with
  `Line.from_points("x,y", "x,y")`; two lines with the same direction and
  coordinate and the same end points in either order are equal.
- `aocpuzzles.sand`: `parse_rock_paths`, `can_move`, `next_drop_point`,
  `count_resting_sand`.
- `aocpuzzles.sand_floor`: `floor_coordinate`, `count_sand_until_blocked`.
- `aocpuzzles.hill_graph`: `Point`, `Node` and `Tree`, the graph of reachable
  squares with `Tree.count_steps`.
- `aocpuzzles.hill_climb`: `parse_heightmap`, `find_position`,
  `possible_ways`, `build_tree`, `fewest_steps`.
- `aocpuzzles.hill_descent`: `build_descent_tree`, `possible_starts`,
  `is_possible_start`, `lowest_step`, `fewest_steps_from_any_start`.

Malformed input raises `ValueError`.

## What the package does not do

It does not download puzzle inputs; each command expects the input file to be
on disk already. It covers only the puzzles listed above.