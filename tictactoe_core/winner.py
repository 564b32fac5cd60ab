from __future__ import annotations

from typing import Optional

from .board import WINNING_LINES, Board, Cell, Line


def winning_line(board: Board) -> Optional[Line]:
    """Returns the first line whose three squares hold the same mark, or None."""
    for a, b, c in WINNING_LINES:
        mark = board[a]
        if mark is not Cell.EMPTY and mark is board[b] and mark is board[c]:
            return (a, b, c)
    return None


def evaluate(board: Board) -> Cell:
    """Returns the winning mark, or Cell.EMPTY when no line is complete."""
    line = winning_line(board)
    if line is None:
        return Cell.EMPTY
    return board[line[0]]


class WinDetector:
    """Object form of `evaluate` / `winning_line` for callers that hold a detector."""

    def evaluate(self, board: Board) -> Cell:
        return evaluate(board)

    def winning_line(self, board: Board) -> Optional[Line]:
        return winning_line(board)
