#!/usr/bin/env python3
"""Play Abalone hot-seat in the console, with optional logging & replay."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from abalone import Transform, format_board
from abalone.core import (
    Action,
    GameState,
    PlayerColor,
    apply_action,
    compute_moves,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    initialize_game_state,
)


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def describe_action(state: GameState, action: Action) -> str:
    cells = " ".join(str(cell.code) for cell in action.selection)
    offset = action.direction.row * 10 + action.direction.col
    moves = compute_moves(state.board, action.selection, state.current_player)
    pushing = any(move.is_push and move.direction == action.direction for move in moves)
    return f"{cells} {offset:+d}{' push' if pushing else ''}"


def view_for(state: GameState, rotate_for_white: bool) -> str:
    transform = Transform.ROT180 if rotate_for_white and state.current_player is PlayerColor.WHITE else Transform.IDENTITY
    return format_board(state.board, transform)


def list_moves(state: GameState) -> List[Tuple[int, Action]]:
    return [(encode_action(action), action) for action in enumerate_legal_actions(state)]


def prompt_move(state: GameState) -> int:
    moves = list_moves(state)
    move_indices = {entry[0] for entry in moves}
    print("Legal moves:")
    for idx, action in moves:
        print(f"  {idx}: {describe_action(state, action)}")
    while True:
        raw = input("Move index (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Leaving the game.")
            sys.exit(0)
        if not raw.isdigit():
            print("Please enter a number.")
            continue
        idx = int(raw)
        if idx in move_indices:
            return idx
        print("Not a legal move index, try again.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Saved log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    state = initialize_game_state()
    if verbose:
        print("Replaying logged game.")
        print(format_board(state.board))
    for entry in moves:
        action = decode_action(entry["action_index"])
        if verbose:
            print(f"{state.current_player.value}: {describe_action(state, action)}")
        state = apply_action(state, action)
        if verbose:
            print(format_board(state.board))
    summary = {
        "result": state.result.value,
        "moves": len(moves),
        "scores": {color.value: state.scores[color] for color in PlayerColor},
        "board": {str(cell.code): color.value for cell, color in sorted(state.board.items())},
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    log_records: List[Dict] = []
    state = initialize_game_state()
    move_index = 0

    while not state.is_terminal and move_index < args.max_ply:
        print("\nCurrent board:")
        print(view_for(state, args.rotate_for_white))
        scores = state.scores
        print(
            f"Turn: {state.current_player.value} "
            f"(black {scores[PlayerColor.BLACK]} / white {scores[PlayerColor.WHITE]})"
        )

        action_index = prompt_move(state)
        action = decode_action(action_index)
        log_records.append(
            {
                "move_index": move_index,
                "player": state.current_player.value,
                "action_index": int(action_index),
                "selection": [cell.code for cell in action.selection],
                "direction": action.direction.row * 10 + action.direction.col,
            }
        )
        state = apply_action(state, action)
        move_index += 1

    print("\nFinal board:")
    print(format_board(state.board))
    if state.winner is not None:
        print(f"{state.winner.value} wins!")
    else:
        print("Stopped before a winner.")

    if args.log_file:
        metadata = {"max_ply": args.max_ply, "result": state.result.value}
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Abalone in the console, two players on one keyboard.")
    parser.add_argument("--config", type=str, default="configs/console.yaml")
    parser.add_argument("--max-ply", type=int, default=None)
    parser.add_argument("--rotate-for-white", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    return parser


def resolve_args(args: argparse.Namespace, cfg: Dict) -> argparse.Namespace:
    if args.max_ply is None:
        args.max_ply = int(cfg.get("max_ply", 400))
    if args.rotate_for_white is None:
        args.rotate_for_white = bool(cfg.get("rotate_for_white", True))
    if args.log_file is None:
        args.log_file = cfg.get("log_file")
    return args


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    args = resolve_args(args, load_yaml_config(args.config))

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
