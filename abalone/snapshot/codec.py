from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from abalone.core import Board, Cell, GameState, PlayerColor
from abalone.core.state import empty_scores
from abalone.validation import board_entries, validate_snapshot


def encode_board(board: Board) -> Dict[str, str]:
    return {str(cell.code): board[cell].value for cell in sorted(board)}


def decode_board(raw: Any) -> Board:
    return {Cell.from_code(code): PlayerColor(tag) for code, tag in board_entries(raw)}


def encode_snapshot(state: GameState, base: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Serialise ``state``; fields of ``base`` the engine does not own are kept."""
    snapshot: Dict[str, Any] = dict(base) if base else {}
    snapshot["board"] = encode_board(state.board)
    snapshot["currentTurn"] = state.current_player.value
    snapshot["scores"] = {
        PlayerColor.WHITE.value: int(state.scores.get(PlayerColor.WHITE, 0)),
        PlayerColor.BLACK.value: int(state.scores.get(PlayerColor.BLACK, 0)),
    }
    snapshot["winner"] = state.winner.value if state.winner is not None else None
    return snapshot


def decode_snapshot(data: Mapping[str, Any]) -> GameState:
    validate_snapshot(data)
    scores = empty_scores()
    for tag, value in (data.get("scores") or {}).items():
        scores[PlayerColor(tag)] = value
    winner = data.get("winner")
    return GameState(
        board=decode_board(data.get("board")),
        scores=scores,
        current_player=PlayerColor(data.get("currentTurn") or PlayerColor.BLACK.value),
        winner=PlayerColor(winner) if winner else None,
    )
