from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine.formatting import NumberFormat


@dataclass(frozen=True)
class Presentation:
    """Labels and number style injected into the view layer."""

    number_format: NumberFormat = field(default_factory=NumberFormat)
    score_label: str = "Score"
    rate_label: str = "Per second"
    cost_label: str = "Cost"
    output_label: str = "Output"
    owned_label: str = "Owned"
    per_second_suffix: str = "/sec"
    reset_prompt: str = "Reset all progress?"

    def fmt(self, value: float) -> str:
        return self.number_format.format(value)
