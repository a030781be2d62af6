from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .state import (
    MAX_SELECTION,
    WIN_SCORE,
    Action,
    Board,
    GameState,
    Move,
    MoveKind,
    MoveRecord,
    PlayerColor,
    Scores,
    Selection,
    empty_scores,
)
from .topology import CELL_INDEX, CELLS, DIRECTIONS, LINE_STEPS, Cell, is_valid_cell, shift

WHITE_INITIAL: Tuple[int, ...] = (15, 16, 17, 18, 19, 24, 25, 26, 27, 28, 29, 35, 36, 37)
BLACK_INITIAL: Tuple[int, ...] = (73, 74, 75, 81, 82, 83, 84, 85, 86, 91, 92, 93, 94, 95)

ACTION_VECTOR_SIZE = len(CELLS) * len(LINE_STEPS) * MAX_SELECTION * len(DIRECTIONS)


class SelectionRejection(Enum):
    NOT_OWN_PIECE = "Not your piece!"
    SELECTION_FULL = "Max 3 balls!"
    NOT_IN_LINE = "Must form a line!"
    GAME_OVER = "Game is over!"


class SelectionUpdate(NamedTuple):
    selection: Selection
    rejection: Optional[SelectionRejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class MoveOutcome(NamedTuple):
    board: Board
    scores: Scores
    winner: Optional[PlayerColor]


# ----------------------------------------------------------------------
# Selection
# ----------------------------------------------------------------------
def is_line(cells: Sequence[Cell]) -> bool:
    """Sorted cells advance by one constant line step."""
    if len(cells) <= 1:
        return True
    ordered = sorted(Cell(*cell) for cell in cells)
    step = ordered[1] - ordered[0]
    if step not in LINE_STEPS:
        return False
    return all(ordered[i] - ordered[i - 1] == step for i in range(2, len(ordered)))


def extend_selection(current: Sequence[Cell], cell: Cell, board: Board, player: PlayerColor) -> SelectionUpdate:
    cell = Cell(*cell)
    unchanged = tuple(Cell(*c) for c in current)
    if cell in unchanged:
        return SelectionUpdate(tuple(c for c in unchanged if c != cell))
    if board.get(cell) is not player:
        return SelectionUpdate(unchanged, SelectionRejection.NOT_OWN_PIECE)
    if len(unchanged) >= MAX_SELECTION:
        return SelectionUpdate(unchanged, SelectionRejection.SELECTION_FULL)
    extended = tuple(sorted(unchanged + (cell,)))
    if not is_line(extended):
        return SelectionUpdate(unchanged, SelectionRejection.NOT_IN_LINE)
    return SelectionUpdate(extended)


# ----------------------------------------------------------------------
# Move enumeration and resolution
# ----------------------------------------------------------------------
def compute_moves(board: Board, selection: Sequence[Cell], player: PlayerColor) -> List[Move]:
    if not selection:
        return []
    ordered = sorted(Cell(*cell) for cell in selection)
    members = set(ordered)
    step = ordered[1] - ordered[0] if len(ordered) > 1 else None
    moves: List[Move] = []

    for direction in DIRECTIONS:
        targets = tuple(cell + direction for cell in ordered)
        if not all(is_valid_cell(target) for target in targets):
            continue

        if all(target not in board or target in members for target in targets):
            moves.append(Move(MoveKind.SIMPLE, direction, targets))
            continue

        if step is None or (direction != step and direction != -step):
            continue
        front = ordered[-1] if direction in LINE_STEPS else ordered[0]
        pushed: List[Cell] = []
        current = front + direction
        while is_valid_cell(current) and current in board and board[current] is not player:
            pushed.append(current)
            current = current + direction
        if pushed and len(pushed) < len(ordered):
            if not is_valid_cell(current) or current not in board:
                moves.append(Move(MoveKind.PUSH, direction, targets, tuple(pushed), front, current))
    return moves


def winner_for(scores: Scores) -> Optional[PlayerColor]:
    if scores.get(PlayerColor.WHITE, 0) >= WIN_SCORE:
        return PlayerColor.WHITE
    if scores.get(PlayerColor.BLACK, 0) >= WIN_SCORE:
        return PlayerColor.BLACK
    return None


def apply_move(
    board: Board,
    move: Move,
    selection: Sequence[Cell],
    player: PlayerColor,
    scores: Scores,
) -> MoveOutcome:
    new_board = dict(board)
    new_scores = dict(scores)
    new_scores.setdefault(player, 0)

    if move.kind is MoveKind.PUSH:
        for cell in move.pushed:
            new_board.pop(cell, None)
        for cell in move.pushed:
            destination = cell + move.direction
            if is_valid_cell(destination):
                new_board[destination] = player.opponent
            else:
                new_scores[player] += 1

    # Targets are written after the pushed run so the vacated tail reads as empty.
    for cell in selection:
        new_board.pop(cell, None)
    for cell in move.targets:
        new_board[cell] = player

    return MoveOutcome(new_board, new_scores, winner_for(new_scores))


# ----------------------------------------------------------------------
# Game state helpers
# ----------------------------------------------------------------------
def initialize_game_state() -> GameState:
    board: Board = {}
    for code in WHITE_INITIAL:
        board[Cell.from_code(code)] = PlayerColor.WHITE
    for code in BLACK_INITIAL:
        board[Cell.from_code(code)] = PlayerColor.BLACK
    return GameState(board=board, scores=empty_scores(), current_player=PlayerColor.BLACK)


def select_cell(state: GameState, cell: Cell) -> SelectionUpdate:
    if state.is_terminal:
        return SelectionUpdate(state.selection, SelectionRejection.GAME_OVER)
    return extend_selection(state.selection, cell, state.board, state.current_player)


def move_at(state: GameState, cell: Cell) -> Optional[Move]:
    """Return the move triggered by clicking ``cell`` with the current selection."""
    lookup: Dict[Cell, Move] = {}
    for move in compute_moves(state.board, state.selection, state.current_player):
        if move.is_push:
            lookup[move.pushed[0]] = move
            lookup[move.front] = move
        else:
            target = next((c for c in move.targets if c not in state.selection), None)
            if target is not None:
                lookup[target] = move
    return lookup.get(cell)


def play_move(state: GameState, move: Move, *, in_place: bool = False) -> GameState:
    source_state = state if in_place else state.copy()
    if source_state.is_terminal:
        raise ValueError("Cannot play a move in a finished game.")
    if not source_state.selection:
        raise ValueError("No pieces selected.")

    player = source_state.current_player
    if move not in compute_moves(source_state.board, source_state.selection, player):
        raise ValueError("Move is not legal for the current selection.")

    before = source_state.scores.get(player, 0)
    outcome = apply_move(source_state.board, move, source_state.selection, player, source_state.scores)
    source_state.board = outcome.board
    source_state.scores = outcome.scores
    source_state.winner = outcome.winner
    source_state.ply_count += 1
    source_state.last_move = MoveRecord(
        player=player,
        selection=tuple(sorted(source_state.selection)),
        move=move,
        ejected=outcome.scores[player] - before,
        resulted_in=source_state.result,
    )
    source_state.selection = ()
    source_state.current_player = player.opponent
    return source_state


def apply_action(state: GameState, action: Action, *, in_place: bool = False) -> GameState:
    source_state = state if in_place else state.copy()
    selection = tuple(sorted(action.selection))
    for cell in selection:
        if source_state.board.get(cell) is not source_state.current_player:
            raise ValueError("Action selects a cell the current player does not hold.")
    if len(selection) > MAX_SELECTION or not is_line(selection):
        raise ValueError("Action selection is not a straight line of up to three pieces.")

    moves = compute_moves(source_state.board, selection, source_state.current_player)
    move = next((m for m in moves if m.direction == action.direction), None)
    if move is None:
        raise ValueError("Action has no legal move in that direction.")
    source_state.selection = selection
    return play_move(source_state, move, in_place=True)


def enumerate_legal_actions(state: GameState, player: Optional[PlayerColor] = None) -> List[Action]:
    if player is None:
        player = state.current_player

    legal: List[Action] = []
    for anchor in state.occupied_positions(player):
        for axis_index, step in enumerate(LINE_STEPS):
            for length in range(1, MAX_SELECTION + 1):
                if length == 1 and axis_index != 0:
                    continue
                selection = tuple(shift(anchor, step, i) for i in range(length))
                if not all(state.board.get(cell) is player for cell in selection):
                    break
                for move in compute_moves(state.board, selection, player):
                    legal.append(Action(selection, move.direction))
    return legal


# ----------------------------------------------------------------------
# Flat action indexing
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class ActionVector:
    anchor: Cell
    axis_index: int
    length: int
    direction_index: int

    def to_action(self) -> Action:
        step = LINE_STEPS[self.axis_index]
        selection = tuple(shift(self.anchor, step, i) for i in range(self.length))
        return Action(selection, DIRECTIONS[self.direction_index])

    @staticmethod
    def from_action(action: Action) -> "ActionVector":
        selection = sorted(Cell(*cell) for cell in action.selection)
        if not 1 <= len(selection) <= MAX_SELECTION:
            raise ValueError("Action selection must hold one to three cells.")
        if not is_line(selection):
            raise ValueError("Action selection is not a gap-free line.")
        if selection[0] not in CELL_INDEX:
            raise ValueError("Action anchor is off the board.")
        if action.direction not in DIRECTIONS:
            raise ValueError("Action direction is not a unit hex step.")
        axis_index = 0 if len(selection) == 1 else LINE_STEPS.index(selection[1] - selection[0])
        return ActionVector(selection[0], axis_index, len(selection), DIRECTIONS.index(action.direction))

    def to_index(self) -> int:
        base = CELL_INDEX[self.anchor] * len(LINE_STEPS) + self.axis_index
        base = base * MAX_SELECTION + (self.length - 1)
        return base * len(DIRECTIONS) + self.direction_index

    @staticmethod
    def from_index(index: int) -> "ActionVector":
        if not 0 <= index < ACTION_VECTOR_SIZE:
            raise ValueError("Action index out of range.")
        direction_index = index % len(DIRECTIONS)
        index //= len(DIRECTIONS)
        length = (index % MAX_SELECTION) + 1
        index //= MAX_SELECTION
        axis_index = index % len(LINE_STEPS)
        index //= len(LINE_STEPS)
        return ActionVector(CELLS[index], axis_index, length, direction_index)


def encode_action(action: Action) -> int:
    return ActionVector.from_action(action).to_index()


def decode_action(index: int) -> Action:
    return ActionVector.from_index(index).to_action()
