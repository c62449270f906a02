"""Display formatting shared by every renderer of projection results.

Currency has no sub-dollar precision; percentages are rendered from
decimal fractions (0.07 -> "7.0%"). Ties round half away from zero on the
exact binary value of the float, the way browser number formatting does,
so 2.5 -> "$3" and -3.25 -> "-3.3%".
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from math import copysign
from typing import Dict

from growthcalc.schemas.projection import ComparisonRow, ScenarioResult, StrategyProfile


def _round_half_up(magnitude: float, decimals: int) -> Decimal:
    return Decimal(magnitude).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _to_fixed(value: float, decimals: int) -> str:
    # a minus sign only for values strictly below zero; -0.0 renders unsigned
    sign = "-" if value < 0 else ""
    return f"{sign}{_round_half_up(abs(value), decimals):f}"


def format_currency(value: float) -> str:
    # negative values keep their sign even when they round to zero ("-$0")
    sign = "-" if copysign(1.0, value) < 0 else ""
    return f"{sign}${_round_half_up(abs(value), 0):,f}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{_to_fixed(value * 100, decimals)}%"


def format_return_percent(percent: float) -> str:
    """Signed one-decimal string for a value already expressed in percent."""
    sign = "+" if percent >= 0 else ""
    return f"{sign}{_to_fixed(percent, 1)}%"


def summary_display(result: ScenarioResult, strategy: StrategyProfile) -> Dict[str, str]:
    """Formatted figures for the primary results panel."""
    if result.totalContributed == 0:
        gain_fraction = 0.0
    else:
        gain_fraction = result.totalGain / result.totalContributed

    return {
        "finalValue": format_currency(result.expected),
        "totalInvested": format_currency(result.totalContributed),
        "totalGain": format_currency(result.totalGain),
        "gainPercent": format_percentage(gain_fraction),
        "avgReturn": format_percentage(strategy.avgReturn),
        "bestCase": format_return_percent(result.scenarios.best.returnPercent),
        "expectedCase": format_return_percent(result.scenarios.expected.returnPercent),
        "worstCase": format_return_percent(result.scenarios.worst.returnPercent),
    }


def comparison_display(row: ComparisonRow) -> Dict[str, str]:
    """Cells of one strategy comparison table row."""
    return {
        "finalValue": format_currency(row.finalValue),
        "totalGain": format_currency(row.totalGain),
        "avgReturn": format_percentage(row.avgReturn),
        "volatility": format_percentage(row.volatility),
    }
