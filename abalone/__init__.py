"""Abalone rules engine package."""

from . import core, env, features, snapshot, validation
from .env import AbaloneEnv, format_board
from .features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    Transform,
    all_transforms,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
    transform_action,
    transform_board,
    transform_cell,
    transform_direction,
    transform_move,
)
from .snapshot import decode_snapshot, encode_snapshot
from .validation import SnapshotError, validate_snapshot

__all__ = [
    "core",
    "env",
    "features",
    "snapshot",
    "validation",
    "AbaloneEnv",
    "format_board",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "Transform",
    "all_transforms",
    "build_aux_vector",
    "build_board_tensor",
    "state_to_numpy",
    "transform_action",
    "transform_board",
    "transform_cell",
    "transform_direction",
    "transform_move",
    "decode_snapshot",
    "encode_snapshot",
    "SnapshotError",
    "validate_snapshot",
]
