from .snapshot_checks import SnapshotError, board_entries, validate_board, validate_scores, validate_snapshot

__all__ = ["SnapshotError", "board_entries", "validate_board", "validate_scores", "validate_snapshot"]
