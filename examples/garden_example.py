"""A third catalog defined outside the package.

Load it with ``python -m clickerengine --game examples.garden_example status``.
"""
from __future__ import annotations

from clickerengine.cost_scaling import CostScaling
from clickerengine.definition import GameConfig, GameDefinition
from clickerengine.formatting import NumberFormat
from clickerengine.generator import GeneratorDef
from clickerengine.presentation import Presentation


def define_game() -> GameDefinition:
    return GameDefinition(
        config=GameConfig(
            name="Garden",
            tick_interval=0.5,
            click_value=2,
            save_key="garden-v1",
        ),
        generators=[
            GeneratorDef("seed", "Seed Tray", base_cost=20, production=0.5),
            GeneratorDef("bed", "Raised Bed", base_cost=250, production=4),
            GeneratorDef("greenhouse", "Greenhouse", base_cost=4000, production=30),
        ],
        cost_scaling=CostScaling.linear(0.25),
        presentation=Presentation(
            number_format=NumberFormat("de-DE"),
            score_label="Harvest",
            rate_label="Per tick",
            per_second_suffix="/tick",
        ),
    )
