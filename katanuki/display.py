"""Coloured terminal rendering of boards."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO, Union

from .game import Board

_COLOURS = {
    0: "\033[31m",
    1: "\033[32m",
    2: "\033[33m",
    3: "\033[34m",
}
_RESET = "\033[39m"

Grid = Union[Board, Sequence[Sequence[int]]]


def format_board(board: Grid) -> str:
    """Render a board with one ANSI colour per piece value, one row per line."""
    rows = board.cells if isinstance(board, Board) else board
    lines = []
    for row in rows:
        lines.append(
            "".join(f"{_COLOURS.get(value, '')}{value}{_RESET}" for value in row) + "\n"
        )
    return "".join(lines)


def show_board(board: Grid, stream: Optional[TextIO] = None) -> None:
    """Write the coloured rendering of ``board`` to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(format_board(board))
    out.flush()