from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Tuple

from abalone.core import Action, Board, Cell, Move
from abalone.core.topology import CENTRE

Cube = Tuple[int, int, int]


class Transform(Enum):
    IDENTITY = auto()
    ROT60 = auto()
    ROT120 = auto()
    ROT180 = auto()
    ROT240 = auto()
    ROT300 = auto()
    MIRROR = auto()
    MIRROR_ROT60 = auto()
    MIRROR_ROT120 = auto()
    MIRROR_ROT180 = auto()
    MIRROR_ROT240 = auto()
    MIRROR_ROT300 = auto()


# (mirror first, number of 60 degree turns)
_COMPOSITION = {
    Transform.IDENTITY: (False, 0),
    Transform.ROT60: (False, 1),
    Transform.ROT120: (False, 2),
    Transform.ROT180: (False, 3),
    Transform.ROT240: (False, 4),
    Transform.ROT300: (False, 5),
    Transform.MIRROR: (True, 0),
    Transform.MIRROR_ROT60: (True, 1),
    Transform.MIRROR_ROT120: (True, 2),
    Transform.MIRROR_ROT180: (True, 3),
    Transform.MIRROR_ROT240: (True, 4),
    Transform.MIRROR_ROT300: (True, 5),
}


def all_transforms() -> Iterable[Transform]:
    return list(Transform)


def _rotate(cube: Cube) -> Cube:
    x, y, z = cube
    return -z, -x, -y


def _mirror(cube: Cube) -> Cube:
    x, y, z = cube
    return x, z, y


def _apply(transform: Transform, cube: Cube) -> Cube:
    mirrored, turns = _COMPOSITION[transform]
    if mirrored:
        cube = _mirror(cube)
    for _ in range(turns):
        cube = _rotate(cube)
    return cube


def transform_direction(transform: Transform, direction: Tuple[int, int]) -> Cell:
    """Map a delta; deltas rotate about the origin rather than the board centre."""
    dr, dc = direction
    x, _, z = _apply(transform, (dc, -dc - dr, dr))
    return Cell(z, x)


def transform_cell(transform: Transform, cell: Tuple[int, int]) -> Cell:
    row, col = cell
    centred = transform_direction(transform, (row - CENTRE, col - CENTRE))
    return Cell(centred.row + CENTRE, centred.col + CENTRE)


def transform_board(board: Board, transform: Transform) -> Board:
    return {transform_cell(transform, cell): color for cell, color in board.items()}


def transform_move(transform: Transform, move: Move) -> Move:
    return Move(
        kind=move.kind,
        direction=transform_direction(transform, move.direction),
        targets=tuple(sorted(transform_cell(transform, cell) for cell in move.targets)),
        pushed=tuple(transform_cell(transform, cell) for cell in move.pushed),
        front=None if move.front is None else transform_cell(transform, move.front),
        push_to=None if move.push_to is None else transform_cell(transform, move.push_to),
    )


def transform_action(transform: Transform, action: Action) -> Action:
    selection = tuple(sorted(transform_cell(transform, cell) for cell in action.selection))
    return Action(selection, transform_direction(transform, action.direction))
