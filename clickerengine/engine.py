"""Game rules as plain functions over an explicit state value.

Each mutating rule takes the definition and the state it may change and
returns an :class:`Outcome`. Anything other than ``Outcome.APPLIED`` means
the state was left exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from clickerengine.definition import GameDefinition
    from clickerengine.generator import GeneratorDef
    from clickerengine.state import GameState


class Outcome(Enum):
    APPLIED = auto()
    INSUFFICIENT_FUNDS = auto()
    UNKNOWN_GENERATOR = auto()
    IDLE = auto()  # tick with nothing producing

    @property
    def applied(self) -> bool:
        return self is Outcome.APPLIED


@dataclass(frozen=True)
class Click:
    pass


@dataclass(frozen=True)
class Purchase:
    generator_id: str


@dataclass(frozen=True)
class Tick:
    pass


Event = Union[Click, Purchase, Tick]


# ── Derived values ───────────────────────────────────────────────────


def compute_cost(
    definition: GameDefinition, generator: GeneratorDef, state: GameState
) -> float:
    """Current price of one more unit of *generator*."""
    return definition.cost_scaling.compute(
        generator.base_cost, state.count(generator.id)
    )


def compute_production_rate(definition: GameDefinition, state: GameState) -> float:
    """Points produced per tick by everything owned."""
    return sum(g.production * state.count(g.id) for g in definition.generators)


def can_afford(
    definition: GameDefinition, generator: GeneratorDef, state: GameState
) -> bool:
    return state.score >= compute_cost(definition, generator, state)


# ── Rules ────────────────────────────────────────────────────────────


def apply_click(definition: GameDefinition, state: GameState) -> Outcome:
    state.score += definition.config.click_value
    return Outcome.APPLIED


def apply_purchase(
    definition: GameDefinition, state: GameState, generator_id: str
) -> Outcome:
    gdef = definition.get_generator(generator_id)
    gs = state.get(generator_id)
    if gdef is None or gs is None:
        return Outcome.UNKNOWN_GENERATOR

    cost = compute_cost(definition, gdef, state)
    if state.score < cost:
        return Outcome.INSUFFICIENT_FUNDS

    state.score -= cost
    gs.count += 1
    return Outcome.APPLIED


def apply_tick(definition: GameDefinition, state: GameState) -> Outcome:
    rate = compute_production_rate(definition, state)
    if rate <= 0:
        return Outcome.IDLE
    state.score += rate
    return Outcome.APPLIED


def reduce(definition: GameDefinition, state: GameState, event: Event) -> Outcome:
    """Apply one event to *state*."""
    if isinstance(event, Click):
        return apply_click(definition, state)
    if isinstance(event, Purchase):
        return apply_purchase(definition, state, event.generator_id)
    if isinstance(event, Tick):
        return apply_tick(definition, state)
    raise TypeError(f"Unknown event: {event!r}")
