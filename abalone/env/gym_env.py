from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from abalone.core import (
    ACTION_VECTOR_SIZE,
    ROWS,
    Board,
    GameResult,
    PlayerColor,
    apply_action,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    initialize_game_state,
)
from abalone.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    Transform,
    build_aux_vector,
    build_board_tensor,
    transform_board,
)
from abalone.features.observation import BOARD_DIM

SYMBOLS = {PlayerColor.BLACK: "@", PlayerColor.WHITE: "O"}


def format_board(board: Board, transform: Transform = Transform.IDENTITY) -> str:
    """Render the hexagon as text, one board row per line."""
    view = transform_board(board, transform) if transform is not Transform.IDENTITY else board
    lines = []
    for row in ROWS:
        pad = " " * (len(ROWS[len(ROWS) // 2]) - len(row))
        lines.append(pad + " ".join(SYMBOLS.get(view.get(cell), ".") for cell in row))
    return "\n".join(lines)


class AbaloneEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        max_ply: int = 400,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_ply = max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_DIM, BOARD_DIM)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self._state = initialize_game_state()
        self._last_info: Dict[str, np.ndarray] = {}

    @property
    def state(self):
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if options and "max_ply" in options:
            self._max_ply = options["max_ply"]
        self._state = initialize_game_state()
        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        action = decode_action(int(action_index))
        self._state = apply_action(self._state, action, in_place=False)

        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info

        reward = self._compute_reward(self._state.result)
        terminated = self._state.is_terminal
        truncated = not terminated and self._state.ply_count >= self._max_ply

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._state.is_terminal:
            return mask
        for action in enumerate_legal_actions(self._state):
            mask[encode_action(action)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return format_board(self._state.board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        board = build_board_tensor(self._state)
        aux = build_aux_vector(self._state)
        return {"board": board, "aux": aux}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.BLACK_WIN:
            return 1.0
        if result == GameResult.WHITE_WIN:
            return -1.0
        return 0.0
