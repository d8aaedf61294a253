"""Search strategies that turn a start board into the goal board."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .game import Answer, Board, Operation, Problem, available_operations, operate

log = logging.getLogger(__name__)

# Offsets searched by the neighbourhood heuristic, nearest first.
_NEIGHBOURHOOD = (
    (0, 0),
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
    (2, 0), (-2, 0), (0, 2), (0, -2),
    (2, 2), (2, -2), (-2, 2), (-2, -2),
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
)
_DISTANCE_MAX = 2
_MODES = (1, 2)


def _board_key(board: Board) -> tuple:
    return tuple(tuple(row) for row in board.cells)


@dataclass(eq=False)
class Node:
    """A board reached during the search, with the move that produced it."""

    board: Board
    operation: Operation = field(default_factory=Operation)
    cost: float = 0.0
    heuristic: float = 0.0
    parent: Optional["Node"] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.board == other.board

    __hash__ = None  # type: ignore[assignment]

    @property
    def score(self) -> float:
        return self.cost + self.heuristic

    def heuristic_to(self, goal: Union["Node", Board], mode: int = 1) -> float:
        """Estimate the distance from this board to ``goal``.

        Mode 1 counts the cells that differ; mode 2 scores how far away each
        goal value is found in the current board.
        """
        goal_cells = goal.cells if isinstance(goal, Board) else goal.board.cells
        cells = self.board.cells
        width, height = self.board.width, self.board.height

        if mode == 1:
            return float(
                sum(
                    current != wanted
                    for row, goal_row in zip(cells[:height], goal_cells)
                    for current, wanted in zip(row[:width], goal_row)
                )
            )
        if mode == 2:
            total = 0
            for i, goal_row in enumerate(goal_cells[:height]):
                for j, target in enumerate(goal_row[:width]):
                    for dx, dy in _NEIGHBOURHOOD:
                        x, y = j + dx, i + dy
                        if 0 <= x < width and 0 <= y < height and cells[y][x] == target:
                            total += max(abs(dx), abs(dy))
                            break
                    total += _DISTANCE_MAX + 1
            return float(total)
        raise ValueError(f"unknown heuristic mode: {mode}")

    def describe(self) -> str:
        """Return a multi-line, human-readable summary of the node."""
        lines = ["board: "]
        for row in self.board.cells:
            lines.append("".join(("  " if -10 < n < 10 else " ") + str(n) for n in row))
        op = self.operation
        lines.append(f"operation; p:{op.p} x:{op.x} y:{op.y} s:{int(op.s)}")
        lines.append(f"cost: {self.cost:g}")
        lines.append(f"heuristic: {self.heuristic:g}")
        if self.parent is None:
            lines.append("parent: none")
        else:
            pop = self.parent.operation
            lines.append(f"parent: p:{pop.p} x:{pop.x} y:{pop.y} s:{int(pop.s)}")
        return "\n".join(lines) + "\n"


def reconstruct_path(node: Node) -> list[Operation]:
    """Return the operations leading from the root to ``node``, in order."""
    path = []
    while node.parent is not None:
        path.append(node.operation)
        node = node.parent
    path.reverse()
    return path


class Solver:
    """A solver that gives up at once."""

    def solve(self, problem: Problem) -> Answer:
        return Answer()


class ExampleSolver(Solver):
    """A template solver that returns an empty, unsolved answer."""

    def solve(self, problem: Problem) -> Answer:
        return Answer()


class AStarSolver(Solver):
    """Weighted A* search over boards."""

    def __init__(
        self,
        move_cost: float = 1.0,
        weight: float = 2.0,
        mode: int = 1,
        max_expansions: Optional[int] = None,
    ) -> None:
        if mode not in _MODES:
            raise ValueError(f"unknown heuristic mode: {mode}")
        if max_expansions is not None and max_expansions < 1:
            raise ValueError("max_expansions must be positive")
        self.move_cost = move_cost
        self.weight = weight
        self.mode = mode
        self.max_expansions = max_expansions

    def _estimate(self, node: Node, goal: Board) -> float:
        return node.heuristic_to(goal, self.mode) * self.weight

    def solve(self, problem: Problem) -> Answer:
        goal = problem.goal_board
        start = Node(problem.start_board)
        start.heuristic = self._estimate(start, goal)

        tie = itertools.count()
        open_heap = [(start.score, next(tie), start)]
        closed: set[tuple] = set()
        last = start
        expansions = 0

        log.info("solver started")
        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            key = _board_key(current.board)
            if key in closed:
                continue
            expansions += 1
            last = current
            log.debug(
                "solver count: %d  cost: %g  heuristic: %g",
                expansions, current.cost, current.heuristic,
            )

            if current.board == goal:
                log.info("solver finished; solved")
                return Answer(True, reconstruct_path(current))

            closed.add(key)
            for op in available_operations(current.board, problem.patterns):
                board = operate(current.board, op, problem.patterns[op.p])
                if _board_key(board) in closed:
                    continue
                child = Node(board, op, current.cost + self.move_cost, 0.0, current)
                child.heuristic = self._estimate(child, goal)
                heapq.heappush(open_heap, (child.score, next(tie), child))

            if self.max_expansions is not None and expansions >= self.max_expansions:
                break

        log.info("solver finished; unsolved")
        best = open_heap[0][2] if open_heap else last
        return Answer(False, reconstruct_path(best))