from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorDef:
    """Static definition of a purchasable point generator."""

    id: str
    display_name: str = ""
    base_cost: float = 0.0
    production: float = 0.0

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", self.id)


@dataclass
class GeneratorState:
    """Mutable runtime state for one generator."""

    id: str
    count: int = 0
