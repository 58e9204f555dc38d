from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from clickerengine.engine import compute_cost, compute_production_rate

if TYPE_CHECKING:
    from clickerengine.definition import GameDefinition
    from clickerengine.state import GameState


@dataclass(frozen=True)
class GeneratorView:
    """Read-only snapshot of one shop entry, ready for display."""

    id: str
    display_name: str
    count: int
    cost: float
    cost_text: str
    production_text: str
    purchasable: bool


@dataclass(frozen=True)
class GameView:
    """Everything a render sink needs to draw the game."""

    score: float
    score_text: str
    rate: float
    rate_text: str
    generators: tuple[GeneratorView, ...]


RenderSink = Callable[[GameView], None]


def build_view(definition: GameDefinition, state: GameState) -> GameView:
    pres = definition.presentation
    rate = compute_production_rate(definition, state)

    generators = []
    for gdef in definition.generators:
        cost = compute_cost(definition, gdef, state)
        generators.append(
            GeneratorView(
                id=gdef.id,
                display_name=gdef.display_name,
                count=state.count(gdef.id),
                cost=cost,
                cost_text=pres.fmt(cost),
                production_text=pres.fmt(gdef.production),
                purchasable=state.score >= cost,
            )
        )

    return GameView(
        score=state.score,
        score_text=pres.fmt(state.score),
        rate=rate,
        rate_text=pres.fmt(rate),
        generators=tuple(generators),
    )


def format_text_view(view: GameView, definition: GameDefinition) -> str:
    """Format a game view for console output."""
    pres = definition.presentation
    lines: list[str] = []

    lines.append(f"== {definition.config.name} ==")
    lines.append(f"{pres.score_label}: {view.score_text}")
    lines.append(f"{pres.rate_label}: {view.rate_text}")
    lines.append("")

    for g in view.generators:
        marker = "  *" if g.purchasable else "   "
        lines.append(
            f"{marker} {g.display_name} [{g.id}]  "
            f"{pres.cost_label}: {g.cost_text}  "
            f"{pres.output_label}: +{g.production_text}{pres.per_second_suffix}  "
            f"{pres.owned_label}: {g.count}"
        )

    return "\n".join(lines)
