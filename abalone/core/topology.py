from __future__ import annotations

from typing import Dict, FrozenSet, NamedTuple, Tuple

ROW_COUNT = 9
CENTRE = 5


class Cell(NamedTuple):
    """Axial board coordinate; also used for direction deltas."""

    row: int
    col: int

    @property
    def code(self) -> int:
        return self.row * 10 + self.col

    @staticmethod
    def from_code(code: int) -> "Cell":
        return Cell(code // 10, code % 10)

    def __add__(self, other) -> "Cell":  # type: ignore[override]
        return Cell(self.row + other[0], self.col + other[1])

    def __sub__(self, other) -> "Cell":
        return Cell(self.row - other[0], self.col - other[1])

    def __neg__(self) -> "Cell":
        return Cell(-self.row, -self.col)


# Wire-code offsets +1, -1, +9, -9, +10, -10 in that order.
DIRECTIONS: Tuple[Cell, ...] = (
    Cell(0, 1),
    Cell(0, -1),
    Cell(1, -1),
    Cell(-1, 1),
    Cell(1, 0),
    Cell(-1, 0),
)
LINE_STEPS: Tuple[Cell, ...] = (Cell(0, 1), Cell(1, -1), Cell(1, 0))


def _on_board(row: int, col: int) -> bool:
    return 1 <= row <= ROW_COUNT and 1 <= col <= ROW_COUNT and 6 <= row + col <= 14


CELLS: Tuple[Cell, ...] = tuple(
    Cell(row, col) for row in range(1, ROW_COUNT + 1) for col in range(1, ROW_COUNT + 1) if _on_board(row, col)
)
CELL_SET: FrozenSet[Cell] = frozenset(CELLS)
CELL_INDEX: Dict[Cell, int] = {cell: idx for idx, cell in enumerate(CELLS)}
ROWS: Tuple[Tuple[Cell, ...], ...] = tuple(
    tuple(cell for cell in CELLS if cell.row == row) for row in range(1, ROW_COUNT + 1)
)


def is_valid_cell(cell) -> bool:
    return cell in CELL_SET


def shift(cell: Cell, direction: Cell, times: int = 1) -> Cell:
    return Cell(cell.row + direction.row * times, cell.col + direction.col * times)


def _build_neighbors() -> Dict[Cell, FrozenSet[Cell]]:
    table: Dict[Cell, FrozenSet[Cell]] = {}
    for cell in CELLS:
        table[cell] = frozenset(cell + d for d in DIRECTIONS if (cell + d) in CELL_SET)
    return table


_NEIGHBORS = _build_neighbors()


def neighbors(cell: Cell) -> FrozenSet[Cell]:
    """Valid cells one step away; off-board input has no neighbours."""
    return _NEIGHBORS.get(cell, frozenset())
