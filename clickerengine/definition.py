from __future__ import annotations

import math
from dataclasses import dataclass, field

from clickerengine.cost_scaling import CostScaling
from clickerengine.generator import GeneratorDef
from clickerengine.presentation import Presentation

SCORE_FIELDS = ("score", "points")


@dataclass
class GameConfig:
    """Top-level game configuration."""

    name: str = "Untitled"
    tick_interval: float = 1.0
    click_value: float = 1.0
    save_key: str = "incremental-clicker"
    score_field: str = "score"


@dataclass
class GameDefinition:
    """Complete static definition of a clicker game."""

    config: GameConfig = field(default_factory=GameConfig)
    generators: list[GeneratorDef] = field(default_factory=list)
    cost_scaling: CostScaling = field(default_factory=CostScaling.exponential)
    presentation: Presentation = field(default_factory=Presentation)

    _generators_by_id: dict[str, GeneratorDef] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._generators_by_id = {g.id: g for g in self.generators}

    def get_generator(self, id: str) -> GeneratorDef | None:
        return self._generators_by_id.get(id)

    def generator_ids(self) -> list[str]:
        return [g.id for g in self.generators]

    def validate(self) -> list[str]:
        """Check for common definition errors. Returns list of error messages."""
        errors: list[str] = []

        seen: set[str] = set()
        for g in self.generators:
            if not g.id:
                errors.append("Generator with empty ID")
            if g.id in seen:
                errors.append(f"Duplicate generator ID: {g.id!r}")
            seen.add(g.id)

            if not math.isfinite(g.base_cost) or g.base_cost <= 0:
                errors.append(
                    f"Generator {g.id!r} must have a positive base_cost, got {g.base_cost!r}"
                )
            if not math.isfinite(g.production) or g.production < 0:
                errors.append(
                    f"Generator {g.id!r} has negative production {g.production!r}"
                )

        cfg = self.config
        if cfg.tick_interval <= 0:
            errors.append(f"tick_interval must be positive, got {cfg.tick_interval!r}")
        if cfg.click_value < 0:
            errors.append(f"click_value must not be negative, got {cfg.click_value!r}")
        if not cfg.save_key:
            errors.append("save_key must not be empty")
        if cfg.score_field not in SCORE_FIELDS:
            errors.append(
                f"Unknown score_field {cfg.score_field!r}. Expected one of {list(SCORE_FIELDS)}"
            )

        return errors
