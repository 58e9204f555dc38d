from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from clickerengine.generator import GeneratorState

if TYPE_CHECKING:
    from clickerengine.definition import GameDefinition


@dataclass
class GameState:
    """Mutable runtime container holding the score and owned counts.

    ``generators`` follows catalog order, one entry per catalog id.
    """

    score: float = 0.0
    generators: list[GeneratorState] = field(default_factory=list)

    @classmethod
    def initial(cls, definition: GameDefinition) -> GameState:
        """Fresh state: zero score, nothing owned."""
        return cls(
            score=0.0,
            generators=[GeneratorState(id=g.id) for g in definition.generators],
        )

    def get(self, id: str) -> GeneratorState | None:
        for gs in self.generators:
            if gs.id == id:
                return gs
        return None

    def count(self, id: str) -> int:
        gs = self.get(id)
        return gs.count if gs else 0

    def counts(self) -> dict[str, int]:
        return {gs.id: gs.count for gs in self.generators}

    def copy(self) -> GameState:
        return copy.deepcopy(self)
