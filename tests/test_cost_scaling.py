"""Tests for cost_scaling module."""
import math

import pytest

from clickerengine.cost_scaling import CostScaling


def test_fixed():
    cs = CostScaling.fixed()
    assert cs.compute(100.0, 0) == 100
    assert cs.compute(100.0, 10) == 100


def test_exponential_default_rate():
    cs = CostScaling.exponential()
    assert cs.compute(15, 0) == 15
    assert cs.compute(15, 1) == 17
    assert cs.compute(15, 2) == 19
    assert cs.compute(15, 3) == 22


def test_exponential_matches_floor_formula():
    cs = CostScaling.exponential(1.15)
    previous = 0
    for n in range(60):
        cost = cs.compute(120, n)
        assert cost == math.floor(120 * 1.15 ** n)
        assert cost >= previous
        previous = cost


def test_exponential_custom_rate():
    cs = CostScaling.exponential(2.0)
    assert [cs.compute(100, n) for n in range(4)] == [100, 200, 400, 800]


def test_results_are_ints():
    assert isinstance(CostScaling.exponential().compute(15, 5), int)


@pytest.mark.parametrize("count,expected", [(0, 100), (1, 110), (5, 150)])
def test_linear(count, expected):
    cs = CostScaling.linear(0.10)
    assert cs.compute(100.0, count) == expected


def test_custom():
    def my_fn(base, count):
        return base * (count + 1) ** 2

    cs = CostScaling.custom(my_fn)
    assert cs.compute(10.0, 0) == 10
    assert cs.compute(10.0, 1) == 40
    assert cs.compute(10.5, 2) == 94


@pytest.mark.parametrize("count", [5100, 6000, 10**6])
def test_exponential_saturates_at_infinity(count):
    cs = CostScaling.exponential(1.15)
    assert cs.compute(15, count) == math.inf


@pytest.mark.parametrize("result", [math.inf, math.nan])
def test_non_finite_custom_cost(result):
    cs = CostScaling.custom(lambda base, count: result)
    assert cs.compute(10.0, 1) == math.inf


def test_custom_overflow():
    cs = CostScaling.custom(lambda base, count: base * 10.0 ** count)
    assert cs.compute(1.0, 400) == math.inf
