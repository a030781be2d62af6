import numpy as np
import pytest

from abalone import AbaloneEnv
from abalone.core import ACTION_VECTOR_SIZE, encode_action, enumerate_legal_actions


def test_reset_returns_valid_observation():
    env = AbaloneEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (3, 9, 9)
    assert obs["aux"].shape == (4,)
    assert "legal_action_mask" in info
    assert info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)


def test_legal_mask_matches_enumeration():
    env = AbaloneEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = enumerate_legal_actions(env.state)
    ones = np.count_nonzero(mask)
    assert ones == len(legal)
    for action in legal:
        assert mask[encode_action(action)] == 1


def test_step_advances_state_and_returns_reward():
    env = AbaloneEnv()
    obs, info = env.reset()
    legal_actions = np.flatnonzero(info["legal_action_mask"])
    action = int(legal_actions[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs["board"] != obs["board"])
    assert next_obs["aux"][1] == 1.0
    assert next_info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)


def test_illegal_action_rejected():
    env = AbaloneEnv()
    _, info = env.reset()
    illegal = int(np.flatnonzero(info["legal_action_mask"] == 0)[0])
    with pytest.raises(ValueError):
        env.step(illegal)
    with pytest.raises(ValueError):
        env.step(ACTION_VECTOR_SIZE)


def test_truncates_at_max_ply():
    env = AbaloneEnv(max_ply=1)
    _, info = env.reset()
    action = int(np.flatnonzero(info["legal_action_mask"])[0])
    _, _, terminated, truncated, _ = env.step(action)
    assert truncated
    assert not terminated


def test_render_ansi():
    env = AbaloneEnv(render_mode="ansi")
    env.reset()
    lines = env.render().split("\n")
    assert len(lines) == 9
    assert lines[0] == "    O O O O O"
    assert lines[4] == ". . . . . . . . ."
    assert lines[8] == "    @ @ @ @ @"
