import random

import pytest

from abalone.core import (
    ACTION_VECTOR_SIZE,
    Action,
    Cell,
    GameResult,
    GameState,
    MoveKind,
    PlayerColor,
    SelectionRejection,
    apply_action,
    compute_moves,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    initialize_game_state,
    move_at,
    play_move,
    select_cell,
)

BLACK = PlayerColor.BLACK
WHITE = PlayerColor.WHITE


def c(code: int) -> Cell:
    return Cell.from_code(code)


def state_with(black=(), white=(), **kwargs) -> GameState:
    board = {c(code): BLACK for code in black}
    board.update({c(code): WHITE for code in white})
    return GameState(board=board, **kwargs)


def test_initial_layout() -> None:
    state = initialize_game_state()
    assert state.piece_count(BLACK) == 14
    assert state.piece_count(WHITE) == 14
    assert state.current_player is BLACK
    assert state.scores == {WHITE: 0, BLACK: 0}
    assert state.board[c(15)] is WHITE
    assert state.board[c(95)] is BLACK
    assert state.result is GameResult.ONGOING


def test_select_cell_uses_current_player() -> None:
    state = initialize_game_state()
    assert select_cell(state, c(73)).selection == (c(73),)
    assert select_cell(state, c(15)).rejection is SelectionRejection.NOT_OWN_PIECE


def test_select_cell_refused_after_game_over() -> None:
    state = state_with(black=(55,), winner=WHITE)
    update = select_cell(state, c(55))
    assert update.rejection is SelectionRejection.GAME_OVER
    assert update.selection == ()


def test_move_at_maps_clicks_to_moves() -> None:
    state = state_with(black=(62, 63), white=(64,), selection=(c(62), c(63)))
    push = move_at(state, c(64))
    assert push is not None and push.kind is MoveKind.PUSH
    assert move_at(state, c(63)) == push

    slide = move_at(state, c(61))
    assert slide is not None and slide.direction == Cell(0, -1)
    assert move_at(state, c(55)) is None


def test_play_move_alternates_turn_and_clears_selection() -> None:
    state = state_with(black=(62, 63), white=(64,), selection=(c(62), c(63)))
    push = move_at(state, c(64))
    next_state = play_move(state, push)

    assert next_state.board == {c(63): BLACK, c(64): BLACK, c(65): WHITE}
    assert next_state.current_player is WHITE
    assert next_state.selection == ()
    assert next_state.ply_count == 1
    assert next_state.last_move.move == push
    assert next_state.last_move.ejected == 0
    # Original state untouched.
    assert state.current_player is BLACK
    assert state.board[c(62)] is BLACK


def test_play_move_records_ejection_and_win() -> None:
    state = state_with(
        black=(57, 58),
        white=(59, 15),
        scores={WHITE: 0, BLACK: 5},
        selection=(c(57), c(58)),
    )
    push = next(m for m in compute_moves(state.board, state.selection, BLACK) if m.kind is MoveKind.PUSH)
    next_state = play_move(state, push)

    assert next_state.scores[BLACK] == 6
    assert next_state.winner is BLACK
    assert next_state.result is GameResult.BLACK_WIN
    assert next_state.last_move.ejected == 1
    assert next_state.last_move.resulted_in is GameResult.BLACK_WIN
    # Turn still passes to the other colour.
    assert next_state.current_player is WHITE

    with pytest.raises(ValueError):
        play_move(next_state, push)


def test_play_move_rejects_illegal_move() -> None:
    state = state_with(black=(55, 56), white=(57, 58), selection=(c(55), c(56)))
    legal = compute_moves(state.board, state.selection, BLACK)
    assert all(m.direction != Cell(0, 1) for m in legal)
    other = state_with(black=(55, 56), white=(57,), selection=(c(55), c(56)))
    push = next(m for m in compute_moves(other.board, other.selection, BLACK) if m.kind is MoveKind.PUSH)
    with pytest.raises(ValueError):
        play_move(state, push)


def test_play_move_requires_selection() -> None:
    state = state_with(black=(55,))
    move = compute_moves(state.board, (c(55),), BLACK)[0]
    with pytest.raises(ValueError):
        play_move(state, move)


def test_apply_action_plays_matching_move() -> None:
    state = initialize_game_state()
    action = Action((c(73), c(74), c(75)), Cell(-1, 0))
    next_state = apply_action(state, action)
    assert {c(63), c(64), c(65)} <= set(next_state.occupied_positions(BLACK))
    assert c(73) not in next_state.board
    assert next_state.current_player is WHITE


def test_apply_action_rejects_foreign_or_blocked_actions() -> None:
    state = initialize_game_state()
    with pytest.raises(ValueError):
        apply_action(state, Action((c(15),), Cell(1, 0)))
    with pytest.raises(ValueError):
        # 91 is hemmed in towards 81.
        apply_action(state, Action((c(91),), Cell(-1, 0)))


def test_enumerated_actions_are_playable() -> None:
    state = initialize_game_state()
    actions = enumerate_legal_actions(state)
    assert actions
    assert len(set(actions)) == len(actions)
    for action in actions:
        apply_action(state, action)


def test_action_index_layout() -> None:
    assert ACTION_VECTOR_SIZE == 61 * 3 * 3 * 6
    action = Action((c(73), c(74), c(75)), Cell(-1, 0))
    assert decode_action(encode_action(action)) == action
    assert encode_action(Action((c(15),), Cell(0, 1))) == 0


def test_gapped_selection_has_no_index() -> None:
    with pytest.raises(ValueError):
        encode_action(Action((c(55), c(57)), Cell(0, 1)))
    with pytest.raises(ValueError):
        decode_action(ACTION_VECTOR_SIZE)


def test_turn_alternates_through_random_game() -> None:
    rng = random.Random(3)
    state = initialize_game_state()
    for _ in range(60):
        actions = enumerate_legal_actions(state)
        if not actions or state.is_terminal:
            break
        before = state.current_player
        state = apply_action(state, rng.choice(actions))
        assert state.current_player is before.opponent
        assert state.piece_count(BLACK) == 14 - state.scores[WHITE]
        assert state.piece_count(WHITE) == 14 - state.scores[BLACK]


def test_action_index_accepts_plain_tuples() -> None:
    action = Action(((7, 3), (7, 4), (7, 5)), Cell(-1, 0))
    expected = encode_action(Action((c(73), c(74), c(75)), Cell(-1, 0)))
    assert encode_action(action) == expected
    with pytest.raises(ValueError):
        encode_action(Action(((5, 5), (5, 7)), Cell(0, 1)))
