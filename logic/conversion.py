"""logic/conversion.py — Report → purple-equivalent / experience conversion.

    purple = white/200 + blue/20 + orange/5 + purple
    exp    = purple * 10000

Values are never rounded here; only ``conversion_lines`` rounds, and
only for display.
"""

from __future__ import annotations
from typing import Sequence

from components.reports import ConversionResult, Reports
from core.constants import EXP_PER_PURPLE, ORANGE_PER_PURPLE, TIER_COUNT, TIER_WEIGHTS


def convert(quantities: Sequence[float]) -> ConversionResult:
    """Convert ``[white, blue, orange, purple]`` counts.

    >>> convert([200, 0, 0, 0])
    ConversionResult(purple_reports=1.0, exp=10000.0)
    """
    if len(quantities) != TIER_COUNT:
        raise ValueError(f"expected {TIER_COUNT} quantities, got {len(quantities)}")
    purple = sum(q / w for q, w in zip(quantities, TIER_WEIGHTS))
    return ConversionResult(purple_reports=purple, exp=purple * EXP_PER_PURPLE)


def apply_conversion(reports: Reports) -> ConversionResult:
    """Run ``convert`` on *reports* and store the result on it."""
    result = convert(reports.quantities)
    reports.conversion = result
    return result


def clear(reports: Reports) -> None:
    """Drop any stored conversion.  Safe to call repeatedly."""
    reports.conversion = None


def orange_equivalent(purple_reports: float) -> float:
    return purple_reports * ORANGE_PER_PURPLE


def set_quantity(reports: Reports, tier: int, value: float,
                 max_quantity: float | None = None) -> float:
    """Store *value* for *tier*, clamped to ``[0, max_quantity]``.

    Returns the value actually stored.
    """
    value = max(0.0, float(value))
    if max_quantity is not None:
        value = min(value, float(max_quantity))
    reports.quantities[tier] = value
    return value


def conversion_lines(result: ConversionResult) -> list[str]:
    """Display strings for a conversion, in on-screen order."""
    return [
        f"Quantity of Orange Reports: {orange_equivalent(result.purple_reports):.2f}",
        f"Quantity of Purple Reports: {result.purple_reports:.2f}",
        f"Quantity of EXP: {_plain_number(result.exp)}",
    ]


def _plain_number(value: float) -> str:
    # 30000.0 -> "30000", 12.5 -> "12.5", 350.00000000000006 -> "350"
    value = round(value, 6)
    if value == int(value):
        return str(int(value))
    return str(value)
