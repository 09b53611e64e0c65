from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import REPORT_DECIMAL_PLACES


def round_half_up(value: Decimal, places: int = REPORT_DECIMAL_PLACES) -> float:
    """Round half away from zero, e.g. 42.855 -> 42.86 (``round()`` would give 42.85)."""
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return round_half_up(Decimal(part) * 100 / Decimal(whole))


def mean(total: int, count: int) -> float:
    if count <= 0:
        return 0.0
    return round_half_up(Decimal(total) / Decimal(count))
