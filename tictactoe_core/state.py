from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from .board import Board, Cell, Line, check_index
from .winner import WinDetector

logger = logging.getLogger(__name__)

Listener = Callable[["GameState"], None]


class GameState:
    """
    Authoritative holder of a tic-tac-toe game.

    Keeps the full list of board snapshots and a cursor (step number) into it.
    Whose turn it is comes from the cursor's parity alone: X on even steps,
    O on odd ones. Snapshots are never mutated; each accepted move appends a
    new one, dropping any snapshots after the cursor first.
    """

    def __init__(self, detector: Optional[WinDetector] = None) -> None:
        self._history: List[Board] = [Board.empty()]
        self._cursor = 0
        self._detector = detector or WinDetector()
        self._listeners: List[Listener] = []

    @property
    def history(self) -> Tuple[Board, ...]:
        return tuple(self._history)

    @property
    def step_number(self) -> int:
        return self._cursor

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a state-changed callback; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def current_snapshot(self) -> Board:
        return self._history[self._cursor]

    def next_player(self) -> Cell:
        return Cell.X if self._cursor % 2 == 0 else Cell.O

    def winner(self) -> Cell:
        return self._detector.evaluate(self.current_snapshot())

    def winning_line(self) -> Optional[Line]:
        return self._detector.winning_line(self.current_snapshot())

    def is_over(self) -> bool:
        return self.winner() is not Cell.EMPTY

    def current_status(self) -> str:
        winner = self.winner()
        if winner is not Cell.EMPTY:
            return f"Winner: {winner.value}"
        return f"Next player: {self.next_player().value}"

    def apply_move(self, index: int) -> bool:
        """
        Places the active player's mark on square `index`.

        Returns False without touching anything when the viewed snapshot is
        already won or the square is taken. An index outside 0..8 raises
        ValueError.
        """
        check_index(index)
        current = self.current_snapshot()
        if self._detector.evaluate(current) is not Cell.EMPTY or current[index] is not Cell.EMPTY:
            logger.debug("ignored move at %d on step %d", index, self._cursor)
            return False

        mark = self.next_player()
        del self._history[self._cursor + 1:]
        self._history.append(current.place(index, mark))
        self._cursor = len(self._history) - 1
        logger.debug("%s played %d, now at step %d", mark.value, index, self._cursor)
        self._notify()
        return True

    def jump_to(self, step: int) -> None:
        """Moves the cursor to an existing snapshot; history is left as is."""
        if isinstance(step, bool) or not isinstance(step, int):
            raise ValueError(f"step must be an int, got {step!r}")
        if not 0 <= step < len(self._history):
            raise ValueError(f"step {step} out of range 0..{len(self._history) - 1}")
        self._cursor = step
        logger.debug("jumped to step %d", step)
        self._notify()

    def move_descriptions(self) -> Iterator[str]:
        for move in range(len(self._history)):
            yield f"Go to move #{move}" if move else "Go to game start"
