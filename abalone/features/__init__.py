"""Feature extraction helpers for the Abalone engine."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
)
from .symmetry import (
    Transform,
    all_transforms,
    transform_action,
    transform_board,
    transform_cell,
    transform_direction,
    transform_move,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
    "Transform",
    "all_transforms",
    "transform_action",
    "transform_board",
    "transform_cell",
    "transform_direction",
    "transform_move",
]
