"""Built-in game definitions.

The two variants share every rule and differ only in catalog, labels,
number style and where the save lives.
"""

from __future__ import annotations

from typing import Callable

from clickerengine.cost_scaling import CostScaling
from clickerengine.definition import GameConfig, GameDefinition
from clickerengine.formatting import NumberFormat
from clickerengine.generator import GeneratorDef
from clickerengine.presentation import Presentation


def classic() -> GameDefinition:
    return GameDefinition(
        config=GameConfig(
            name="Incremental Clicker",
            tick_interval=1.0,
            save_key="incremental-clicker-v2",
            score_field="score",
        ),
        generators=[
            GeneratorDef("cursor", "Cursor", base_cost=15, production=1),
            GeneratorDef("miner", "Miner", base_cost=120, production=8),
            GeneratorDef("plant", "Power Plant", base_cost=900, production=40),
        ],
        cost_scaling=CostScaling.exponential(1.15),
        presentation=Presentation(
            number_format=NumberFormat("en-US", small_style="plain"),
        ),
    )


def japanese() -> GameDefinition:
    return GameDefinition(
        config=GameConfig(
            name="インクリメンタルクリッカー",
            tick_interval=1.0,
            save_key="incremental-clicker-save-v1",
            score_field="points",
        ),
        generators=[
            GeneratorDef("generator", "発電機", base_cost=10, production=1),
            GeneratorDef("factory", "工場", base_cost=100, production=8),
            GeneratorDef("lab", "研究所", base_cost=1000, production=45),
        ],
        cost_scaling=CostScaling.exponential(1.15),
        presentation=Presentation(
            number_format=NumberFormat("ja-JP", small_style="adaptive"),
            score_label="ポイント",
            rate_label="毎秒",
            cost_label="価格",
            output_label="生産",
            owned_label="所持",
            reset_prompt="セーブデータをリセットしますか？",
        ),
    )


VARIANTS: dict[str, Callable[[], GameDefinition]] = {
    "classic": classic,
    "japanese": japanese,
}
