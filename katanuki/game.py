"""Boards, cutting patterns and the rules of the die-cutting puzzle."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from typing import Iterable, Union

PathArg = Union[str, "PathLike[str]"]

# Patterns with these indices are left out of the move generator to keep
# the search tree small.
_SKIPPED_PATTERNS = range(10, 25)

# Cells picked by a pattern are temporarily lowered by this amount so that
# they can be told apart from the others while they are moved.
_LIFT = 10


class Direction(IntEnum):
    """The direction in which picked pieces are pushed."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


@dataclass
class Board:
    """A grid of pieces, stored row by row."""

    width: int = 0
    height: int = 0
    cells: list[list[int]] = field(default_factory=list)

    def copy(self) -> "Board":
        return Board(self.width, self.height, [list(row) for row in self.cells])


@dataclass
class Pattern:
    """A cutting die; cells equal to 1 pick the piece beneath them."""

    p: int = 0
    width: int = 0
    height: int = 0
    cells: list[list[int]] = field(default_factory=list)


@dataclass(frozen=True)
class Operation:
    """Apply pattern ``p`` with its top-left corner at (x, y), pushing toward ``s``."""

    p: int = 0
    x: int = 0
    y: int = 0
    s: int = Direction.UP


@dataclass
class Problem:
    """A start board, the goal board and the patterns that may be used."""

    start_board: Board = field(default_factory=Board)
    goal_board: Board = field(default_factory=Board)
    patterns: list[Pattern] = field(default_factory=list)


@dataclass
class Answer:
    """The operations found by a solver and whether they reach the goal."""

    solved: bool = False
    operations: list[Operation] = field(default_factory=list)


def _parse_rows(rows: Iterable[str]) -> list[list[int]]:
    return [[ord(ch) - ord("0") for ch in row] for row in rows]


def load_problem(path: PathArg) -> Problem:
    """Read a problem description from a JSON file."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)

    board = data["board"]
    width = int(board["width"])
    height = int(board["height"])
    start = Board(width, height, _parse_rows(board["start"]))
    goal = Board(width, height, _parse_rows(board["goal"]))

    patterns = standard_patterns()
    general = data.get("general") or {}
    for entry in general.get("patterns") or []:
        patterns.append(
            Pattern(
                p=int(entry["p"]),
                width=int(entry["width"]),
                height=int(entry["height"]),
                cells=_parse_rows(entry["cells"]),
            )
        )
    return Problem(start, goal, patterns)


def write_answer(answer: Answer, path: PathArg) -> None:
    """Write the answer's operations to a JSON file."""
    data: dict = {"n": len(answer.operations)}
    if answer.operations:
        data["ops"] = [
            {"p": int(op.p), "x": int(op.x), "y": int(op.y), "s": int(op.s)}
            for op in answer.operations
        ]
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(json.dumps(data, indent=4, sort_keys=True))


def _gather(line: list[int], positions: Iterable[int], toward_start: bool, length: int) -> None:
    """Move the lifted pieces met at ``positions`` to one end of ``line``, in order."""
    count = 0
    for pos in positions:
        if not 0 <= pos < len(line) or line[pos] >= 0:
            continue
        target = count if toward_start else length - 1 - count
        if (toward_start and pos > target) or (not toward_start and pos < target):
            line.insert(target, line.pop(pos))
        count += 1


def operate(board: Board, op: Operation, pattern: Pattern) -> Board:
    """Return the board that results from applying ``op`` with ``pattern``."""
    cells = [list(row) for row in board.cells]
    rows = len(cells)
    cols = len(cells[0]) if cells else 0

    for i, pattern_row in enumerate(pattern.cells[: pattern.height]):
        y = op.y + i
        if not 0 <= y < rows:
            continue
        for j, picked in enumerate(pattern_row[: pattern.width]):
            x = op.x + j
            if picked == 1 and 0 <= x < cols:
                cells[y][x] -= _LIFT

    direction = op.s
    if direction in (Direction.UP, Direction.DOWN):
        upward = direction == Direction.UP
        offsets = range(pattern.height) if upward else reversed(range(pattern.height))
        offsets = list(offsets)
        for j in range(pattern.width):
            x = op.x + j
            if not 0 <= x < cols:
                continue
            column = [row[x] for row in cells]
            _gather(column, (op.y + i for i in offsets), upward, board.height)
            for row, value in zip(cells, column):
                row[x] = value
    elif direction in (Direction.LEFT, Direction.RIGHT):
        leftward = direction == Direction.LEFT
        offsets = range(pattern.width) if leftward else reversed(range(pattern.width))
        offsets = list(offsets)
        for i in range(pattern.height):
            y = op.y + i
            if not 0 <= y < rows:
                continue
            _gather(cells[y], (op.x + j for j in offsets), leftward, board.width)

    restored = [[value + _LIFT if value < 0 else value for value in row] for row in cells]
    return Board(board.width, board.height, restored)


def available_operations(board: Board, patterns: list[Pattern]) -> list[Operation]:
    """List every operation the search considers on ``board``."""
    operations = []
    for index, pattern in enumerate(patterns):
        if index in _SKIPPED_PATTERNS:
            continue
        for y in range(-pattern.height + 1, board.height + pattern.height - 1):
            for x in range(-pattern.width + 1, board.width + pattern.width - 1):
                operations.extend(Operation(index, x, y, s) for s in Direction)
    return operations


def standard_patterns() -> list[Pattern]:
    """Return the 25 fixed-form cutting dies."""
    patterns = [Pattern(0, 1, 1, [[1]])]
    p = 1
    size = 2
    while size <= 256:
        full = [[1] * size for _ in range(size)]
        even_rows = [[1 if i % 2 == 0 else 0] * size for i in range(size)]
        even_cols = [[1 if j % 2 == 0 else 0 for j in range(size)] for _ in range(size)]
        for cells in (full, even_rows, even_cols):
            patterns.append(Pattern(p, size, size, cells))
            p += 1
        size *= 2
    return patterns