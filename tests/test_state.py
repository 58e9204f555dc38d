"""Tests for state module."""
from clickerengine.state import GameState

from conftest import make_definition


def test_initial():
    state = GameState.initial(make_definition())
    assert state.score == 0.0
    assert [g.id for g in state.generators] == ["A", "B"]
    assert state.counts() == {"A": 0, "B": 0}


def test_count_and_get():
    state = GameState.initial(make_definition())
    state.get("B").count = 3
    assert state.count("B") == 3
    assert state.count("nonexistent") == 0
    assert state.get("nonexistent") is None


def test_copy_is_independent():
    state = GameState.initial(make_definition())
    clone = state.copy()
    clone.get("A").count = 4
    clone.score = 10
    assert state.count("A") == 0
    assert state.score == 0
    assert clone != state
