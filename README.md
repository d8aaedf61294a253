# katanuki

A small toolkit for the die-cutting puzzle. A rectangular board of digits
is reshaped by stamping a cutting pattern onto it and sliding the cut
pieces to one edge. The aim is to turn a start board into a goal board.

The package provides:

- `katanuki.game`: the board model (`Board`, `Pattern`, `Operation`,
  `Problem`, `Answer`, `Direction`), the operation itself (`operate`),
  the list of candidate moves (`available_operations`), the 25 built-in
  cutting patterns (`standard_patterns`), and JSON reading and writing
  (`load_problem`, `write_answer`).
- `katanuki.solver`: a weighted A* search (`AStarSolver`), the `Node` type
  it searches over, `reconstruct_path`, and two trivial solvers (`Solver`,
  `ExampleSolver`) that return an empty, unsolved `Answer`.
- `katanuki.display`: `format_board` and `show_board`, which render a board
  with the piece values 0 to 3 coloured by ANSI escape codes.
- `katanuki.cli`: the `katanuki` command and `format_replay`, which shows
  the start board and the board after each operation of an answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The rules

An operation `Operation(p, x, y, s)` places pattern `p` with its top-left
corner at board column `x`, row `y`; both may be negative or run past the
board edge. Every board cell under a `1` of the pattern is picked, and the
picked pieces slide towards side `s` within their column or row, keeping
their order, while the other pieces close up behind them. `operate` returns
a new `Board` and leaves the given one unchanged.

| `Direction` | value |
|-------------|-------|
| `UP`        | 0     |
| `DOWN`      | 1     |
| `LEFT`      | 2     |
| `RIGHT`     | 3     |

Pattern `0` is a single cell. Patterns `1` to `24` are square patterns of
sizes 2, 4, … 256, three per size: fully filled, every other row filled
(starting with the first), every other column filled (starting with the
first). `load_problem` puts the patterns given in the problem file after
them.

## File formats

A problem file. Each row is a string of digits; the `general` section is
optional:

```json
{
    "board": {
        "width": 4,
        "height": 2,
        "start": ["0123", "3210"],
        "goal":  ["3210", "0123"]
    },
    "general": {
        "patterns": [
            {"p": 25, "width": 2, "height": 1, "cells": ["10"]}
        ]
    }
}
```

An answer file written by `write_answer`. Keys are sorted and indented by
four spaces; `ops` is left out when there are no operations:

```json
{
    "n": 1,
    "ops": [
        {
            "p": 0,
            "s": 2,
            "x": 1,
            "y": 0
        }
    ]
}
```

## Library use

```python
from katanuki.game import load_problem, write_answer
from katanuki.solver import AStarSolver
from katanuki.cli import format_replay

problem = load_problem("problem.json")
answer = AStarSolver(max_expansions=10_000).solve(problem)

print(answer.solved, len(answer.operations))
print(format_replay(problem, answer))
write_answer(answer, "answer.json")
```

`AStarSolver` takes `move_cost` (default 1.0), `weight` (default 2.0),
`mode` and `max_expansions` (default `None`, no limit). Each node is scored
by its cost plus `weight` times a heuristic chosen by `mode`:

- `1`: the number of cells that differ from the goal;
- `2`: for each goal cell, how far away (up to two cells) the wanted value
  is found on the current board, plus a fixed penalty per cell.

Any other mode raises `ValueError`. When the search ends without reaching
the goal, the answer has `solved=False` and holds the path to the best
remaining open node.

The search tries every placement of every pattern in all four directions,
except the patterns at positions 10 to 24, which are left out to keep the
branching factor manageable. On anything but small boards it can take a
long time; set `max_expansions` to bound it.

Progress is reported through the `logging` module under the
`katanuki.solver` logger.

## Command line

```
katanuki --help
```

```
katanuki [problem] [-o ANSWER] [-q] [--mode {1,2}]
```

- `problem`: the problem JSON file (default `json/problem.json`).
- `-o`, `--answer`: also write the answer JSON to this file.
- `-q`, `--quiet`: do not print the replay of the moves.
- `--mode`: the heuristic for the A* search (default 1).

The command loads the problem, solves it with `AStarSolver` and, unless
`--quiet` is given, prints the start board followed by each operation and
the board it produces. It exits with status 1 if the problem cannot be read
or the answer cannot be written.

## What it does not do

The package works only with local JSON files. It does not fetch problems
from or submit answers to a competition server; use another tool to move
the files back and forth.