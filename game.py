from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# The Flask app and tests import from here; single-responsibility modules live under tictactoe_core/*.

from tictactoe_core.board import CELLS, SIZE, WINNING_LINES, Board, Cell, Line, check_index
from tictactoe_core.winner import WinDetector, evaluate, winning_line
from tictactoe_core.state import GameState
from tictactoe_core.config import Settings, configure_logging

__all__ = [
    "CELLS",
    "SIZE",
    "WINNING_LINES",
    "Board",
    "Cell",
    "Line",
    "check_index",
    "WinDetector",
    "evaluate",
    "winning_line",
    "GameState",
    "Settings",
    "configure_logging",
    "main",
]


def main() -> None:
    # CLI driver delegated to tictactoe_core.cli
    from tictactoe_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
