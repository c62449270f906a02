from __future__ import annotations

from math import isclose, nan

import pytest

from growthcalc.core.catalog import STRATEGIES, get_strategy
from growthcalc.core.engine import (
    BEST_RATE_CAP,
    allocation_amounts,
    allocation_breakdown,
    calculate_scenarios,
    compare_strategies,
    future_value,
    future_value_with_contributions,
    monthly_equivalent_rate,
    scenario_rates,
    year_by_year,
)
from growthcalc.exceptions import InvalidArgumentError
from growthcalc.schemas.projection import StrategyProfile


def volatile_strategy(volatility: float, avg_return: float = 0.07) -> StrategyProfile:
    return StrategyProfile(
        id="volatile",
        name="Volatile",
        description="single-asset profile with adjustable volatility",
        avgReturn=avg_return,
        volatility=volatility,
        allocation={"stocks": 1.0},
        allocationLabels={"stocks": "Stocks"},
        riskLevel="High",
        timeHorizon="any",
        expectedReturnRange="n/a",
        bestFor="stress checks",
    )


# -----------------------------
# Growth formulas
# -----------------------------


def test_future_value_ten_years_at_seven_percent():
    assert isclose(future_value(10000, 0.07, 10), 19671.51, abs_tol=0.01)


@pytest.mark.parametrize("rate", [-0.5, 0.0, 0.07, 0.5])
def test_future_value_zero_years_returns_principal(rate):
    assert future_value(1234.56, rate, 0) == 1234.56


@pytest.mark.parametrize("rate,years", [(0.05, 1), (0.07, 10), (0.0, 5), (-0.2, 3)])
def test_zero_contribution_matches_plain_future_value(rate, years):
    assert future_value_with_contributions(5000, 0, rate, years) == future_value(5000, rate, years)


def test_monthly_equivalent_rate_compounds_back_to_annual():
    monthly = monthly_equivalent_rate(0.07)
    assert isclose(monthly, 0.005654, abs_tol=1e-6)
    assert isclose((1 + monthly) ** 12, 1.07, rel_tol=1e-12)


def test_contributions_add_monthly_annuity():
    monthly = (1.07) ** (1 / 12) - 1
    annuity = 500 * ((1 + monthly) ** 120 - 1) / monthly
    total = future_value_with_contributions(10000, 500, 0.07, 10)

    assert isclose(total, 10000 * 1.07**10 + annuity, abs_tol=1e-2)
    assert 105_000 < total < 105_400


def test_zero_rate_with_contributions_sums_deposits():
    # 1000 untouched + 24 deposits of 100
    assert isclose(future_value_with_contributions(1000, 100, 0.0, 2), 3400.0, abs_tol=1e-9)


# -----------------------------
# Scenarios
# -----------------------------


def test_scenarios_one_year_conservative_bands():
    conservative = get_strategy("conservative")
    result = calculate_scenarios(10000, 0, conservative, 1)

    assert isclose(result.expected, 10500.0, abs_tol=1e-6)
    assert isclose(result.bestCase, 11816.0, abs_tol=1e-6)  # 5% + 1.645 * 8%
    assert isclose(result.worstCase, 9184.0, abs_tol=1e-6)  # 5% - 1.645 * 8%
    assert result.totalContributed == 10000
    assert isclose(result.totalGain, 500.0, abs_tol=1e-6)
    assert result.avgAnnualReturn == 0.05


def test_scenario_bands_report_gain_and_return_percent(moderate):
    result = calculate_scenarios(10000, 0, moderate, 10)
    expected = result.scenarios.expected

    assert isclose(expected.value, 19671.51, abs_tol=0.01)
    assert isclose(expected.gain, 9671.51, abs_tol=0.01)
    assert isclose(expected.returnPercent, 96.7151, abs_tol=1e-3)
    assert result.scenarios.best.value == result.bestCase
    assert result.scenarios.worst.value == result.worstCase


def test_total_contributed_counts_every_month(moderate):
    result = calculate_scenarios(10000, 500, moderate, 10)
    assert result.totalContributed == 10000 + 500 * 120
    assert isclose(result.totalGain, result.expected - 70000, abs_tol=1e-9)


@pytest.mark.parametrize("strategy", STRATEGIES, ids=lambda s: s.id)
@pytest.mark.parametrize("years", [1, 5, 10, 30, 50])
def test_best_expected_worst_ordering(strategy, years):
    result = calculate_scenarios(10000, 500, strategy, years)
    assert result.bestCase >= result.expected >= result.worstCase


def test_best_rate_is_capped_and_worst_rate_floored():
    strategy = volatile_strategy(volatility=2.0)

    assert scenario_rates(strategy, 1) == (BEST_RATE_CAP, -0.30)
    best, worst = scenario_rates(strategy, 10)
    assert best == BEST_RATE_CAP
    assert isclose(worst, -0.03, abs_tol=1e-12)

    result = calculate_scenarios(10000, 0, strategy, 1)
    assert isclose(result.bestCase, 15000.0, abs_tol=1e-6)
    assert isclose(result.worstCase, 7000.0, abs_tol=1e-6)


@pytest.mark.parametrize("years", [1, 2, 5, 10, 25, 50])
def test_worst_case_total_loss_stays_near_thirty_percent(years):
    result = calculate_scenarios(10000, 0, volatile_strategy(volatility=3.0), years)
    assert result.worstCase >= 7000.0 - 1e-6
    assert result.scenarios.worst.returnPercent >= -30.0 - 1e-9


def test_nothing_contributed_reports_zero_percent(moderate):
    result = calculate_scenarios(0, 0, moderate, 5)

    assert result.expected == result.bestCase == result.worstCase == 0
    assert result.scenarios.expected.returnPercent == 0.0
    assert result.scenarios.best.returnPercent == 0.0
    assert result.scenarios.worst.returnPercent == 0.0


# -----------------------------
# Year-by-year trajectory
# -----------------------------


def test_year_by_year_starts_at_principal(moderate):
    points = year_by_year(10000, 500, moderate, 10)

    assert len(points) == 11
    first = points[0]
    assert first.year == 0
    assert first.expected == first.best == first.worst == 10000
    assert [point.year for point in points] == list(range(11))


def test_year_by_year_matches_partial_horizons(moderate):
    points = year_by_year(10000, 500, moderate, 6)
    for point in points[1:]:
        result = calculate_scenarios(10000, 500, moderate, point.year)
        assert point.expected == result.expected
        assert point.best == result.bestCase
        assert point.worst == result.worstCase


def test_year_by_year_zero_horizon(moderate):
    points = year_by_year(2500, 100, moderate, 0)
    assert len(points) == 1
    assert points[0].expected == 2500


def test_expected_path_grows_every_year(moderate):
    points = year_by_year(10000, 500, moderate, 20)
    values = [point.expected for point in points]
    assert values == sorted(values)


# -----------------------------
# Allocation and comparison
# -----------------------------


def test_allocation_amounts_splits_final_value():
    amounts = allocation_amounts(100000, {"a": 0.6, "b": 0.4})

    assert set(amounts) == {"a", "b"}
    assert isclose(amounts["a"], 60000.0, abs_tol=1e-9)
    assert isclose(amounts["b"], 40000.0, abs_tol=1e-9)


def test_allocation_amounts_does_not_renormalise():
    amounts = allocation_amounts(1000, {"a": 0.5, "b": 0.25})
    assert sum(amounts.values()) == 750


def test_allocation_breakdown_pairs_labels_and_colors():
    aggressive = get_strategy("aggressive")
    slices = allocation_breakdown(50000, aggressive)

    assert [s.key for s in slices] == ["stocks", "international", "alternatives", "bonds"]
    assert [s.color for s in slices] == ["#3b82f6", "#8b5cf6", "#f59e0b", "#10b981"]
    assert slices[0].label == "Stock Index Funds/Individual Stocks"
    assert isclose(slices[0].amount, 35000.0, abs_tol=1e-9)
    assert isclose(sum(s.amount for s in slices), 50000.0, abs_tol=1e-6)


def test_allocation_breakdown_needs_enough_colors(moderate):
    with pytest.raises(InvalidArgumentError):
        allocation_breakdown(1000, moderate, colors=["#000000"])


def test_compare_strategies_keeps_catalog_order():
    rows = compare_strategies(10000, 500, 10)

    assert [row.strategyId for row in rows] == ["conservative", "moderate", "aggressive", "income"]
    assert rows[2].strategyName == "Aggressive"
    assert rows[2].riskLevel == "High"
    assert rows[2].volatility == 0.18


def test_compare_strategies_uses_expected_outcome():
    for row, strategy in zip(compare_strategies(10000, 500, 10), STRATEGIES):
        result = calculate_scenarios(10000, 500, strategy, 10)
        assert row.finalValue == result.expected
        assert row.totalGain == result.totalGain
        assert row.avgReturn == strategy.avgReturn


def test_compare_strategies_accepts_custom_list(moderate):
    rows = compare_strategies(1000, 0, 3, strategies=[moderate])
    assert len(rows) == 1
    assert rows[0].strategyId == "moderate"


# -----------------------------
# Input contract
# -----------------------------


@pytest.mark.parametrize(
    "call",
    [
        lambda: future_value(-1, 0.07, 1),
        lambda: future_value(1000, -1.0, 1),
        lambda: future_value(1000, nan, 1),
        lambda: future_value(1000, 0.07, -1),
        lambda: future_value_with_contributions(1000, -50, 0.07, 1),
        lambda: calculate_scenarios(1000, 0, get_strategy("moderate"), 0),
        lambda: calculate_scenarios(1000, 0, get_strategy("moderate"), 2.5),
        lambda: calculate_scenarios(1000, 0, get_strategy("moderate"), True),
        lambda: year_by_year(1000, -1, get_strategy("moderate"), 3),
        lambda: year_by_year(1000, 0, get_strategy("moderate"), -1),
        lambda: compare_strategies(1000, 0, 0),
    ],
)
def test_invalid_inputs_fail_fast(call):
    with pytest.raises(InvalidArgumentError):
        call()


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        future_value(-5, 0.05, 1)


def test_whole_float_years_are_accepted(moderate):
    assert calculate_scenarios(1000, 0, moderate, 3.0) == calculate_scenarios(1000, 0, moderate, 3)
