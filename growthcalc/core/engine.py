"""
Projection engine: compound growth, annuity summation and scenario bands.

Every function here is pure. Inputs are plain numbers and ``StrategyProfile``
records; outputs are fresh pydantic value objects.

Scenario bands are a closed-form heuristic, not a simulation:
  - expected uses the strategy's average annual return;
  - volatility is scaled to the horizon as ``volatility * sqrt(years)``;
  - best/worst shift the annual rate by ``Z_SCORE * adjusted_vol / years``,
    capped at ``BEST_RATE_CAP`` and floored at ``WORST_TOTAL_LOSS / years``.
"""

from __future__ import annotations

import logging
from math import isfinite, sqrt
from typing import Dict, Iterable, List, Mapping, Sequence

from growthcalc.core.catalog import ALLOCATION_COLORS, STRATEGIES
from growthcalc.exceptions import InvalidArgumentError
from growthcalc.schemas.projection import (
    AllocationSlice,
    ComparisonRow,
    ScenarioBand,
    ScenarioBands,
    ScenarioResult,
    StrategyProfile,
    YearlyPoint,
)

logger = logging.getLogger(__name__)

# one-sided 95th percentile of the standard normal
Z_SCORE = 1.645
BEST_RATE_CAP = 0.50
WORST_TOTAL_LOSS = -0.30
MONTHS_PER_YEAR = 12


# -----------------------------
# Input checks
# -----------------------------


def _check_amount(name: str, value: float) -> float:
    if not isfinite(value) or value < 0:
        raise InvalidArgumentError(f"{name} must be a finite number >= 0, got {value!r}")
    return float(value)


def _check_rate(name: str, value: float) -> float:
    if not isfinite(value) or value <= -1:
        raise InvalidArgumentError(f"{name} must be a finite rate > -1, got {value!r}")
    return float(value)


def _check_years(years: float, minimum: int = 0, integer: bool = False) -> float:
    if isinstance(years, bool) or not isfinite(years) or years < minimum:
        raise InvalidArgumentError(f"years must be a finite number >= {minimum}, got {years!r}")
    if integer:
        if years != int(years):
            raise InvalidArgumentError(f"years must be a whole number, got {years!r}")
        return int(years)
    return years


# -----------------------------
# Growth formulas
# -----------------------------


def monthly_equivalent_rate(annual_rate: float) -> float:
    """Monthly rate that compounds to ``annual_rate`` over twelve months."""
    annual_rate = _check_rate("annual_rate", annual_rate)
    return (1.0 + annual_rate) ** (1.0 / MONTHS_PER_YEAR) - 1.0


def future_value(principal: float, annual_rate: float, years: float) -> float:
    """Compound ``principal`` annually: ``principal * (1 + rate) ** years``."""
    principal = _check_amount("principal", principal)
    annual_rate = _check_rate("annual_rate", annual_rate)
    years = _check_years(years)
    return principal * (1.0 + annual_rate) ** years


def future_value_with_contributions(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: float,
) -> float:
    """
    Future value of ``principal`` plus a monthly annuity of ``monthly_contribution``.

    The annual rate is converted to its monthly equivalent and the annuity is
    summed over ``years * 12`` months. A zero monthly rate collapses the
    annuity to ``contribution * months``.
    """
    fv_initial = future_value(principal, annual_rate, years)
    monthly_contribution = _check_amount("monthly_contribution", monthly_contribution)

    if monthly_contribution == 0:
        return fv_initial

    monthly_rate = monthly_equivalent_rate(annual_rate)
    months = years * MONTHS_PER_YEAR

    if monthly_rate == 0:
        fv_contributions = monthly_contribution * months
    else:
        fv_contributions = monthly_contribution * (
            ((1.0 + monthly_rate) ** months - 1.0) / monthly_rate
        )

    return fv_initial + fv_contributions


# -----------------------------
# Scenarios
# -----------------------------


def _band(value: float, total_contributed: float) -> ScenarioBand:
    # nothing contributed -> report 0% rather than divide by zero
    if total_contributed == 0:
        return_percent = 0.0
    else:
        return_percent = (value / total_contributed - 1.0) * 100.0
    return ScenarioBand(
        value=value,
        gain=value - total_contributed,
        returnPercent=return_percent,
    )


def scenario_rates(strategy: StrategyProfile, years: int) -> tuple[float, float]:
    """Return ``(best_rate, worst_rate)`` annual returns for a horizon."""
    years = _check_years(years, minimum=1, integer=True)
    time_adjusted_volatility = strategy.volatility * sqrt(years)
    shift = Z_SCORE * time_adjusted_volatility / years

    best_rate = min(strategy.avgReturn + shift, BEST_RATE_CAP)
    worst_rate = max(strategy.avgReturn - shift, WORST_TOTAL_LOSS / years)
    return best_rate, worst_rate


def calculate_scenarios(
    principal: float,
    monthly_contribution: float,
    strategy: StrategyProfile,
    years: int,
) -> ScenarioResult:
    """Best / expected / worst outcomes for ``strategy`` over ``years`` years."""
    principal = _check_amount("principal", principal)
    monthly_contribution = _check_amount("monthly_contribution", monthly_contribution)
    years = _check_years(years, minimum=1, integer=True)

    total_contributed = principal + monthly_contribution * years * MONTHS_PER_YEAR

    expected = future_value_with_contributions(
        principal, monthly_contribution, strategy.avgReturn, years
    )

    best_rate, worst_rate = scenario_rates(strategy, years)
    logger.debug(
        "scenario rates for %s over %d years: best=%.5f expected=%.5f worst=%.5f",
        strategy.id,
        years,
        best_rate,
        strategy.avgReturn,
        worst_rate,
    )

    best_case = future_value_with_contributions(
        principal, monthly_contribution, best_rate, years
    )
    worst_case = future_value_with_contributions(
        principal, monthly_contribution, worst_rate, years
    )

    return ScenarioResult(
        expected=expected,
        bestCase=best_case,
        worstCase=worst_case,
        totalContributed=total_contributed,
        totalGain=expected - total_contributed,
        avgAnnualReturn=strategy.avgReturn,
        scenarios=ScenarioBands(
            expected=_band(expected, total_contributed),
            best=_band(best_case, total_contributed),
            worst=_band(worst_case, total_contributed),
        ),
    )


def year_by_year(
    principal: float,
    monthly_contribution: float,
    strategy: StrategyProfile,
    years: int,
) -> List[YearlyPoint]:
    """
    Trajectory for charting: year 0 at ``principal`` then one point per year.

    Each year re-runs ``calculate_scenarios`` for that partial horizon, so the
    bands widen the same way the final figures do.
    """
    principal = _check_amount("principal", principal)
    monthly_contribution = _check_amount("monthly_contribution", monthly_contribution)
    years = _check_years(years, integer=True)

    points: List[YearlyPoint] = [
        YearlyPoint(year=0, expected=principal, best=principal, worst=principal)
    ]
    for year in range(1, years + 1):
        result = calculate_scenarios(principal, monthly_contribution, strategy, year)
        points.append(
            YearlyPoint(
                year=year,
                expected=result.expected,
                best=result.bestCase,
                worst=result.worstCase,
            )
        )
    return points


# -----------------------------
# Allocation and comparison
# -----------------------------


def allocation_amounts(final_value: float, allocation: Mapping[str, float]) -> Dict[str, float]:
    """Split ``final_value`` by allocation fractions (no renormalisation)."""
    return {key: final_value * fraction for key, fraction in allocation.items()}


def allocation_breakdown(
    final_value: float,
    strategy: StrategyProfile,
    colors: Sequence[str] = ALLOCATION_COLORS,
) -> List[AllocationSlice]:
    if len(strategy.allocation) > len(colors):
        raise InvalidArgumentError(
            f"{len(colors)} colors cannot cover {len(strategy.allocation)} allocation keys"
        )
    amounts = allocation_amounts(final_value, strategy.allocation)
    return [
        AllocationSlice(
            key=key,
            label=strategy.allocationLabels[key],
            fraction=fraction,
            amount=amounts[key],
            color=colors[index],
        )
        for index, (key, fraction) in enumerate(strategy.allocation.items())
    ]


def compare_strategies(
    principal: float,
    monthly_contribution: float,
    years: int,
    strategies: Iterable[StrategyProfile] = STRATEGIES,
) -> List[ComparisonRow]:
    """One row per strategy, in catalog order, using the expected outcome."""
    rows: List[ComparisonRow] = []
    for strategy in strategies:
        result = calculate_scenarios(principal, monthly_contribution, strategy, years)
        rows.append(
            ComparisonRow(
                strategyId=strategy.id,
                strategyName=strategy.name,
                finalValue=result.expected,
                totalGain=result.totalGain,
                avgReturn=strategy.avgReturn,
                riskLevel=strategy.riskLevel,
                volatility=strategy.volatility,
            )
        )
    return rows


__all__ = [
    "BEST_RATE_CAP",
    "WORST_TOTAL_LOSS",
    "Z_SCORE",
    "allocation_amounts",
    "allocation_breakdown",
    "calculate_scenarios",
    "compare_strategies",
    "future_value",
    "future_value_with_contributions",
    "monthly_equivalent_rate",
    "scenario_rates",
    "year_by_year",
]
