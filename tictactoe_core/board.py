from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

SIZE = 3
CELLS = SIZE * SIZE

Line = Tuple[int, int, int]

# Order matters: the first uniform line is the one reported.
WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Cell(Enum):
    """Contents of a single square."""
    EMPTY = ""
    X = "X"
    O = "O"


def check_index(index: int) -> int:
    """Rejects anything that is not a square index 0..8."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"cell index must be an int, got {index!r}")
    if not 0 <= index < CELLS:
        raise ValueError(f"cell index {index} out of range 0..{CELLS - 1}")
    return index


@dataclass(frozen=True)
class Board:
    """An immutable 3x3 snapshot, row-major."""
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != CELLS:
            raise ValueError(f"board needs {CELLS} cells, got {len(self.cells)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(cells=(Cell.EMPTY,) * CELLS)

    @classmethod
    def from_marks(cls, marks: Iterable[str]) -> "Board":
        """Builds a board from strings like 'X', 'O' and '' (or '.', ' ' for empty)."""
        cells = tuple(Cell.EMPTY if m in ("", ".", " ", None) else Cell(m) for m in marks)
        return cls(cells=cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return CELLS

    def place(self, index: int, mark: Cell) -> "Board":
        """Returns a copy of this board with `mark` at `index`."""
        check_index(index)
        squares = list(self.cells)
        squares[index] = mark
        return Board(cells=tuple(squares))

    def empty_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell is Cell.EMPTY]

    def marks(self) -> List[str]:
        return [cell.value for cell in self.cells]

    def pretty(self) -> str:
        """Generates a human-readable grid; empty squares show their index."""
        lines: List[str] = []
        for r in range(SIZE):
            row: List[str] = []
            for c in range(SIZE):
                i = r * SIZE + c
                cell = self.cells[i]
                row.append(cell.value if cell is not Cell.EMPTY else str(i))
            lines.append(" | ".join(row))
        return "\n---------\n".join(lines)
