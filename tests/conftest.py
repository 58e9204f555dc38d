import os
import sys

import pytest

# Ensure examples can be imported
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from clickerengine.cost_scaling import CostScaling
from clickerengine.definition import GameConfig, GameDefinition
from clickerengine.generator import GeneratorDef


def make_definition(**config) -> GameDefinition:
    """Two generators: A (15, 1/tick) and B (100, 8/tick)."""
    return GameDefinition(
        config=GameConfig(name="Test", save_key="test-save", **config),
        generators=[
            GeneratorDef("A", "Alpha", base_cost=15, production=1),
            GeneratorDef("B", "Beta", base_cost=100, production=8),
        ],
        cost_scaling=CostScaling.exponential(1.15),
    )


@pytest.fixture
def definition() -> GameDefinition:
    return make_definition()
