from __future__ import annotations

from typing import Any, Iterator, Mapping, Tuple

from abalone.core import Cell, PlayerColor, is_valid_cell

COLOR_TAGS = frozenset(color.value for color in PlayerColor)


class SnapshotError(ValueError):
    pass


def _parse_code(key: Any) -> int:
    if isinstance(key, bool):
        raise SnapshotError(f"board key {key!r} is not a cell code")
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdecimal():
        return int(key)
    raise SnapshotError(f"board key {key!r} is not a cell code")


def board_entries(raw: Any) -> Iterator[Tuple[int, Any]]:
    """Yield (code, tag) pairs from a stored board.

    Stores that turn integer-like keys into arrays hand the board back as a
    list indexed by cell code, with ``None`` in the holes.
    """
    if raw is None:
        return
    if isinstance(raw, Mapping):
        for key, value in raw.items():
            yield _parse_code(key), value
    elif isinstance(raw, list):
        for code, value in enumerate(raw):
            if value is not None:
                yield code, value
    else:
        raise SnapshotError("board must be a mapping or a list")


def validate_board(raw: Any) -> None:
    seen = set()
    for code, tag in board_entries(raw):
        if code in seen:
            raise SnapshotError(f"cell {code} appears twice")
        seen.add(code)
        if not 0 <= code <= 99 or not is_valid_cell(Cell.from_code(code)):
            raise SnapshotError(f"cell {code} is not on the board")
        if tag not in COLOR_TAGS:
            raise SnapshotError(f"cell {code} holds unknown colour {tag!r}")


def validate_scores(raw: Any) -> None:
    if raw is None:
        return
    if not isinstance(raw, Mapping):
        raise SnapshotError("scores must be a mapping")
    for key, value in raw.items():
        if key not in COLOR_TAGS:
            raise SnapshotError(f"scores contain unknown colour {key!r}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise SnapshotError(f"score for {key} must be an integer")
        if value < 0:
            raise SnapshotError(f"score for {key} must not be negative")


def validate_snapshot(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise SnapshotError("snapshot must be a mapping")
    validate_board(data.get("board"))
    validate_scores(data.get("scores"))
    turn = data.get("currentTurn")
    if turn is not None and turn not in COLOR_TAGS:
        raise SnapshotError(f"currentTurn {turn!r} is not a colour")
    winner = data.get("winner")
    if winner is not None and winner not in COLOR_TAGS:
        raise SnapshotError(f"winner {winner!r} is not a colour")
