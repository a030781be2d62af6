from __future__ import annotations

from typing import Tuple

import numpy as np

from abalone.core import CELLS, WIN_SCORE, GameState, PlayerColor
from abalone.core.topology import ROW_COUNT

BOARD_DIM = ROW_COUNT
BOARD_CHANNELS = 3  # black, white, valid-cell mask
AUX_VECTOR_SIZE = 4  # current player one-hot (2) + scaled scores (2)

_COLOR_CHANNEL = {PlayerColor.BLACK: 0, PlayerColor.WHITE: 1}
_COLOR_ORDER = (PlayerColor.BLACK, PlayerColor.WHITE)


def _valid_mask() -> np.ndarray:
    mask = np.zeros((BOARD_DIM, BOARD_DIM), dtype=np.float32)
    for cell in CELLS:
        mask[cell.row - 1, cell.col - 1] = 1.0
    return mask


VALID_MASK = _valid_mask()


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (3, 9, 9) channel-first, indexed [row - 1, col - 1]."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_DIM, BOARD_DIM), dtype=np.float32)
    for cell, color in state.board.items():
        tensor[_COLOR_CHANNEL[color], cell.row - 1, cell.col - 1] = 1.0
    tensor[2] = VALID_MASK
    return tensor


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[_COLOR_CHANNEL[state.current_player]] = 1.0
    for offset, color in enumerate(_COLOR_ORDER):
        aux[2 + offset] = min(state.scores.get(color, 0), WIN_SCORE) / WIN_SCORE
    return aux


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)
