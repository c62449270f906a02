"""Static catalog of allocation strategies offered by the calculator."""

from __future__ import annotations

from typing import Optional, Tuple

from growthcalc.constants import DEFAULT_STRATEGY_ID
from growthcalc.exceptions import UnknownStrategyError
from growthcalc.schemas.projection import StrategyProfile

STRATEGIES: Tuple[StrategyProfile, ...] = (
    StrategyProfile(
        id="conservative",
        name="Conservative",
        description="Capital preservation with modest growth. Focus on bonds and stable assets.",
        avgReturn=0.05,
        volatility=0.08,
        allocation={
            "bonds": 0.60,
            "moneyMarket": 0.20,
            "dividendStocks": 0.15,
            "commodities": 0.05,
        },
        allocationLabels={
            "bonds": "Bonds (Government/Corporate)",
            "moneyMarket": "Money Market/HYSA",
            "dividendStocks": "Dividend-Paying Stocks",
            "commodities": "Gold/Commodities",
        },
        riskLevel="Low",
        timeHorizon="1-5 years",
        expectedReturnRange="4-6%",
        bestFor="Capital preservation, near-term goals, risk-averse investors",
    ),
    StrategyProfile(
        id="moderate",
        name="Moderate",
        description="Balanced growth with manageable risk. Mix of stocks and bonds.",
        avgReturn=0.07,
        volatility=0.12,
        allocation={
            "stocks": 0.50,
            "bonds": 0.30,
            "reits": 0.10,
            "international": 0.10,
        },
        allocationLabels={
            "stocks": "Stock Index Funds/ETFs",
            "bonds": "Bond Funds",
            "reits": "REITs",
            "international": "International Equities",
        },
        riskLevel="Medium",
        timeHorizon="5-15 years",
        expectedReturnRange="6-8%",
        bestFor="Balanced growth, medium-term goals, moderate risk tolerance",
    ),
    StrategyProfile(
        id="aggressive",
        name="Aggressive",
        description="Maximum long-term growth potential. Stock-heavy portfolio.",
        avgReturn=0.09,
        volatility=0.18,
        allocation={
            "stocks": 0.70,
            "international": 0.15,
            "alternatives": 0.10,
            "bonds": 0.05,
        },
        allocationLabels={
            "stocks": "Stock Index Funds/Individual Stocks",
            "international": "International/Emerging Markets",
            "alternatives": "Alternative Investments",
            "bonds": "Bonds",
        },
        riskLevel="High",
        timeHorizon="15+ years",
        expectedReturnRange="8-10%+",
        bestFor="Long-term wealth building, high risk tolerance, young investors",
    ),
    StrategyProfile(
        id="income",
        name="Income-Focused",
        description="Generate regular cash flow. Focus on dividend and income-producing assets.",
        # 4-6% yield plus 3-5% appreciation
        avgReturn=0.08,
        volatility=0.12,
        allocation={
            "dividendStocks": 0.40,
            "reits": 0.30,
            "bonds": 0.20,
            "preferredStocks": 0.10,
        },
        allocationLabels={
            "dividendStocks": "Dividend Stocks/Dividend ETFs",
            "reits": "REITs",
            "bonds": "Bonds",
            "preferredStocks": "Preferred Stocks/High-Yield Bonds",
        },
        riskLevel="Medium",
        timeHorizon="5+ years",
        expectedReturnRange="7-11%",
        bestFor="Regular income generation, retirees, income-focused investors",
    ),
)

# Used positionally when rendering allocation breakdowns.
ALLOCATION_COLORS: Tuple[str, ...] = (
    "#3b82f6",  # blue
    "#8b5cf6",  # purple
    "#f59e0b",  # orange
    "#10b981",  # green
    "#ef4444",  # red
)


def list_strategies() -> Tuple[StrategyProfile, ...]:
    """Return every strategy in catalog order."""
    return STRATEGIES


def find_strategy(strategy_id: str) -> Optional[StrategyProfile]:
    for strategy in STRATEGIES:
        if strategy.id == strategy_id:
            return strategy
    return None


def get_strategy(strategy_id: str) -> StrategyProfile:
    """Like ``find_strategy`` but raises ``UnknownStrategyError`` on a miss."""
    strategy = find_strategy(strategy_id)
    if strategy is None:
        raise UnknownStrategyError(strategy_id)
    return strategy


__all__ = [
    "ALLOCATION_COLORS",
    "DEFAULT_STRATEGY_ID",
    "STRATEGIES",
    "find_strategy",
    "get_strategy",
    "list_strategies",
]
