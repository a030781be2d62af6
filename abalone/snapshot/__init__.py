"""Stored game snapshot format."""

from .codec import decode_board, decode_snapshot, encode_board, encode_snapshot

__all__ = ["decode_board", "decode_snapshot", "encode_board", "encode_snapshot"]
