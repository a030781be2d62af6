"""Core game logic for the Abalone engine."""

from .topology import CELLS, DIRECTIONS, LINE_STEPS, ROWS, Cell, is_valid_cell, neighbors, shift
from .state import (
    MAX_SELECTION,
    WIN_SCORE,
    Action,
    Board,
    GameResult,
    GameState,
    Move,
    MoveKind,
    MoveRecord,
    PlayerColor,
    Selection,
)
from .rules import (
    ACTION_VECTOR_SIZE,
    BLACK_INITIAL,
    WHITE_INITIAL,
    ActionVector,
    MoveOutcome,
    SelectionRejection,
    SelectionUpdate,
    apply_action,
    apply_move,
    compute_moves,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    extend_selection,
    initialize_game_state,
    is_line,
    move_at,
    play_move,
    select_cell,
    winner_for,
)

__all__ = [
    "Cell",
    "CELLS",
    "ROWS",
    "DIRECTIONS",
    "LINE_STEPS",
    "is_valid_cell",
    "neighbors",
    "shift",
    "MAX_SELECTION",
    "WIN_SCORE",
    "Action",
    "ActionVector",
    "ACTION_VECTOR_SIZE",
    "Board",
    "GameResult",
    "GameState",
    "Move",
    "MoveKind",
    "MoveOutcome",
    "MoveRecord",
    "PlayerColor",
    "Selection",
    "SelectionRejection",
    "SelectionUpdate",
    "BLACK_INITIAL",
    "WHITE_INITIAL",
    "apply_action",
    "apply_move",
    "compute_moves",
    "decode_action",
    "encode_action",
    "enumerate_legal_actions",
    "extend_selection",
    "initialize_game_state",
    "is_line",
    "move_at",
    "play_move",
    "select_cell",
    "winner_for",
]
