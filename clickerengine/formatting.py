from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

# (group separator, decimal separator)
_SEPARATORS: dict[str, tuple[str, str]] = {
    "en-US": (",", "."),
    "en-GB": (",", "."),
    "ja-JP": (",", "."),
    "de-DE": (".", ","),
    "fr-FR": (" ", ","),
}

SCIENTIFIC_THRESHOLD = 1e6
GROUPING_THRESHOLD = 1000

SMALL_STYLES = ("plain", "adaptive")

# enough digits to hold any float exactly
_EXACT_PRECISION = 1100


def _to_fixed(value: float, digits: int) -> str:
    """Fixed-point text with half-up rounding on the exact binary value."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _to_exponential(value: float, digits: int = 2) -> str:
    """Scientific notation with an unpadded, signed exponent: ``1.23e+6``.

    Ties round away from zero on the exact binary value.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        exact = Decimal(value)
        power = exact.adjusted() if exact else 0
        mantissa = exact.scaleb(-power).quantize(quantum, rounding=ROUND_HALF_UP)
        if abs(mantissa) >= 10:
            # rounding carried into the next power of ten
            power += 1
            mantissa = exact.scaleb(-power).quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "+" if power >= 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"


@dataclass(frozen=True)
class NumberFormat:
    """Presentation-only number rendering.

    Values from one million up use scientific notation, values from one
    thousand up use locale grouping with at most two fraction digits, and
    smaller values follow ``small_style``:

    * ``"plain"``: integers bare, anything else with two decimals.
    * ``"adaptive"``: no decimals from ten up, two decimals below ten,
      a trailing ``.00`` dropped.
    """

    locale: str = "en-US"
    small_style: str = "plain"

    def __post_init__(self) -> None:
        if self.locale not in _SEPARATORS:
            raise ValueError(
                f"Unsupported locale: {self.locale!r}. Expected one of {list(_SEPARATORS)}"
            )
        if self.small_style not in SMALL_STYLES:
            raise ValueError(
                f"Unknown small_style: {self.small_style!r}. Expected one of {list(SMALL_STYLES)}"
            )

    def format(self, value: float) -> str:
        if value >= SCIENTIFIC_THRESHOLD:
            return _to_exponential(value, 2)
        if value >= GROUPING_THRESHOLD:
            return self._grouped(value)
        return self._small(value)

    __call__ = format

    def _grouped(self, value: float) -> str:
        group, decimal = _SEPARATORS[self.locale]
        text = f"{Decimal(_to_fixed(value, 2)):,}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text.replace(",", "\0").replace(".", decimal).replace("\0", group)

    def _small(self, value: float) -> str:
        if self.small_style == "adaptive":
            text = _to_fixed(value, 0 if value >= 10 else 2)
            return text[:-3] if text.endswith(".00") else text
        if float(value).is_integer():
            return str(int(value))
        return _to_fixed(value, 2)
