"""Command line entry point: load a problem, solve it and report the moves."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .game import Answer, Board, Problem, load_problem, operate, write_answer
from .solver import AStarSolver


def _format_cells(board: Board) -> str:
    return "".join("".join(f"{value} " for value in row) + "\n" for row in board.cells)


def format_replay(problem: Problem, answer: Answer) -> str:
    """Show the start board and the board after each operation of ``answer``."""
    board = problem.start_board
    parts = [_format_cells(board), "\n"]
    for op in answer.operations:
        parts.append(f"{{p:{op.p}, x:{op.x}, y:{op.y}, s:{int(op.s)}}}\n")
        board = operate(board, op, problem.patterns[op.p])
        parts.append(_format_cells(board))
        parts.append("\n")
    return "".join(parts)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="katanuki",
        description="Solve a die-cutting board puzzle with A* search.",
    )
    parser.add_argument(
        "problem", nargs="?", default="json/problem.json", help="problem JSON file"
    )
    parser.add_argument("-o", "--answer", help="write the answer JSON to this file")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="do not print the move replay"
    )
    parser.add_argument(
        "--mode", type=int, choices=(1, 2), default=1, help="heuristic to use"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)

    try:
        problem = load_problem(args.problem)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"error: cannot load problem {args.problem}: {exc}", file=sys.stderr)
        return 1
    print("log: problem loaded.")

    answer = AStarSolver(mode=args.mode).solve(problem)
    print("log: solver finished.")
    print(f"log: answer: {len(answer.operations)} operations.")

    if not args.quiet:
        print("log: answer operations:")
        print(format_replay(problem, answer), end="")

    if args.answer:
        try:
            write_answer(answer, args.answer)
        except OSError as exc:
            print(f"error: cannot write answer {args.answer}: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())