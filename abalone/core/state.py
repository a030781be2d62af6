from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .topology import ROWS, Cell

WIN_SCORE = 6
MAX_SELECTION = 3


class PlayerColor(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "PlayerColor":
        return PlayerColor.WHITE if self is PlayerColor.BLACK else PlayerColor.BLACK


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"


class MoveKind(Enum):
    SIMPLE = "move"
    PUSH = "push"


Board = Dict[Cell, PlayerColor]
Selection = Tuple[Cell, ...]
Scores = Dict[PlayerColor, int]


def empty_scores() -> Scores:
    return {PlayerColor.WHITE: 0, PlayerColor.BLACK: 0}


@dataclass(frozen=True)
class Move:
    kind: MoveKind
    direction: Cell
    targets: Tuple[Cell, ...]
    pushed: Tuple[Cell, ...] = ()
    front: Optional[Cell] = None
    push_to: Optional[Cell] = None

    @property
    def is_push(self) -> bool:
        return self.kind is MoveKind.PUSH


@dataclass(frozen=True)
class Action:
    """A selection and the direction to move it in."""

    selection: Selection
    direction: Cell


@dataclass(frozen=True)
class MoveRecord:
    player: PlayerColor
    selection: Selection
    move: Move
    ejected: int = 0
    resulted_in: GameResult = GameResult.ONGOING


@dataclass
class GameState:
    board: Board
    scores: Scores = field(default_factory=empty_scores)
    current_player: PlayerColor = PlayerColor.BLACK
    selection: Selection = ()
    winner: Optional[PlayerColor] = None
    ply_count: int = 0
    last_move: Optional[MoveRecord] = None

    def copy(self) -> "GameState":
        return GameState(
            board=dict(self.board),
            scores=dict(self.scores),
            current_player=self.current_player,
            selection=self.selection,
            winner=self.winner,
            ply_count=self.ply_count,
            last_move=self.last_move,
        )

    @property
    def result(self) -> GameResult:
        if self.winner is PlayerColor.BLACK:
            return GameResult.BLACK_WIN
        if self.winner is PlayerColor.WHITE:
            return GameResult.WHITE_WIN
        return GameResult.ONGOING

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None

    def occupied_positions(self, color: PlayerColor) -> Iterable[Cell]:
        for cell in sorted(self.board):
            if self.board[cell] is color:
                yield cell

    def piece_count(self, color: PlayerColor) -> int:
        return sum(1 for value in self.board.values() if value is color)

    def __repr__(self) -> str:
        symbols = {PlayerColor.BLACK: "@", PlayerColor.WHITE: "O"}
        lines = []
        for row in ROWS:
            pad = " " * abs(5 - row[0].row)
            lines.append(pad + " ".join(symbols.get(self.board.get(cell), ".") for cell in row))
        board_str = "\n".join(lines)
        return (
            f"GameState(current={self.current_player.value}, result={self.result.value}, ply={self.ply_count})\n"
            f"{board_str}"
        )
