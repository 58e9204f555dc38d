"""Tests for engine module."""
import pytest

from clickerengine import engine
from clickerengine.engine import Click, Outcome, Purchase, Tick
from clickerengine.state import GameState

from conftest import make_definition


@pytest.fixture
def state(definition):
    return GameState.initial(definition)


def test_compute_cost_tracks_owned_count(definition, state):
    a = definition.get_generator("A")
    assert engine.compute_cost(definition, a, state) == 15
    state.get("A").count = 1
    assert engine.compute_cost(definition, a, state) == 17


def test_production_rate_sums_generators(definition, state):
    assert engine.compute_production_rate(definition, state) == 0
    state.get("A").count = 2
    state.get("B").count = 3
    assert engine.compute_production_rate(definition, state) == pytest.approx(26.0)


def test_click_adds_one(definition, state):
    state.get("B").count = 2
    assert engine.apply_click(definition, state) is Outcome.APPLIED
    assert state.score == 1
    assert state.counts() == {"A": 0, "B": 2}


def test_click_value_from_config(state):
    defn = make_definition(click_value=3)
    engine.apply_click(defn, state)
    assert state.score == 3


def test_click_then_buy_scenario(definition, state):
    for _ in range(15):
        engine.apply_click(definition, state)
    assert state.score == 15

    assert engine.apply_purchase(definition, state, "A") is Outcome.APPLIED
    assert state.score == 0
    assert state.count("A") == 1
    assert engine.compute_cost(definition, definition.get_generator("A"), state) == 17


def test_purchase_insufficient_funds(definition, state):
    state.score = 14
    before = state.copy()
    assert engine.apply_purchase(definition, state, "A") is Outcome.INSUFFICIENT_FUNDS
    assert state == before


def test_purchase_unknown_generator(definition, state):
    state.score = 500
    state.get("A").count = 2
    before = state.copy()
    assert engine.apply_purchase(definition, state, "ghost") is Outcome.UNKNOWN_GENERATOR
    assert state == before


@pytest.mark.parametrize("score", [0, 1, 14, 15, 16.5, 99, 100, 1000])
def test_purchase_never_goes_negative(definition, state, score):
    state.score = score
    outcome = engine.apply_purchase(definition, state, "B")
    if score >= 100:
        assert outcome is Outcome.APPLIED
        assert state.score == pytest.approx(score - 100)
    else:
        assert outcome is Outcome.INSUFFICIENT_FUNDS
        assert state.score == score
    assert state.score >= 0


def test_tick_adds_rate(definition, state):
    state.get("B").count = 3
    state.score = 5
    assert engine.apply_tick(definition, state) is Outcome.APPLIED
    assert state.score == pytest.approx(29.0)


def test_tick_idle_leaves_state_untouched(definition, state):
    state.score = 7.25
    before = state.copy()
    assert engine.apply_tick(definition, state) is Outcome.IDLE
    assert state == before


def test_reduce_dispatch(definition, state):
    for _ in range(20):
        engine.reduce(definition, state, Click())
    assert engine.reduce(definition, state, Purchase("A")) is Outcome.APPLIED
    assert engine.reduce(definition, state, Tick()) is Outcome.APPLIED
    assert state.score == pytest.approx(20 - 15 + 1)


def test_reduce_rejects_unknown_event(definition, state):
    with pytest.raises(TypeError):
        engine.reduce(definition, state, object())


def test_outcome_applied_flag():
    assert Outcome.APPLIED.applied
    assert not Outcome.IDLE.applied
    assert not Outcome.INSUFFICIENT_FUNDS.applied
