"""Data contracts for strategy profiles, projection results and API payloads."""

from __future__ import annotations

from math import isclose
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from growthcalc.constants import (
    DEFAULT_INITIAL_AMOUNT,
    DEFAULT_MONTHLY_CONTRIBUTION,
    DEFAULT_STRATEGY_ID,
    DEFAULT_YEARS,
    MAX_INITIAL_AMOUNT,
    MAX_MONTHLY_CONTRIBUTION,
    MAX_YEARS,
    MIN_INITIAL_AMOUNT,
    MIN_YEARS,
)

RiskLevel = Literal["Low", "Medium", "High"]


class StrategyProfile(BaseModel):
    """One allocation strategy of the static catalog.

    Only ``avgReturn``, ``volatility`` and ``allocation`` take part in the
    arithmetic; the rest is descriptive metadata for the page. Both mappings
    are stored read-only so catalog records cannot be edited in place.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    description: str
    avgReturn: float = Field(gt=-1, lt=1)
    volatility: float = Field(ge=0)
    allocation: Mapping[str, float]
    allocationLabels: Mapping[str, str]
    riskLevel: RiskLevel
    timeHorizon: str
    expectedReturnRange: str
    bestFor: str

    @field_validator("allocation", "allocationLabels", mode="after")
    @classmethod
    def freeze_mapping(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @field_serializer("allocation", "allocationLabels")
    def dump_mapping(self, value: Mapping) -> dict:
        return dict(value)

    @model_validator(mode="after")
    def check_allocation(self) -> "StrategyProfile":
        if any(fraction < 0 for fraction in self.allocation.values()):
            raise ValueError(f"{self.id}: allocation fractions must be non-negative")
        if not isclose(sum(self.allocation.values()), 1.0, abs_tol=1e-9):
            raise ValueError(f"{self.id}: allocation fractions must sum to 1.0")
        if set(self.allocation) != set(self.allocationLabels):
            raise ValueError(f"{self.id}: allocationLabels keys must match allocation keys")
        return self


class ScenarioBand(BaseModel):
    value: float
    gain: float
    returnPercent: float


class ScenarioBands(BaseModel):
    expected: ScenarioBand
    best: ScenarioBand
    worst: ScenarioBand


class ScenarioResult(BaseModel):
    """Best / expected / worst outcome set for one strategy and horizon."""

    expected: float
    bestCase: float
    worstCase: float
    totalContributed: float
    totalGain: float
    avgAnnualReturn: float
    scenarios: ScenarioBands


class YearlyPoint(BaseModel):
    year: int = Field(ge=0)
    expected: float
    best: float
    worst: float


class ComparisonRow(BaseModel):
    strategyId: str
    strategyName: str
    finalValue: float
    totalGain: float
    avgReturn: float
    riskLevel: RiskLevel
    volatility: float


class AllocationSlice(BaseModel):
    """Single slice of the allocation breakdown, colored positionally."""

    key: str
    label: str
    fraction: float
    amount: float
    color: str


# -----------------------------
# API payloads
# -----------------------------


class ProjectionRequest(BaseModel):
    """Inputs of the calculator form; bounds match the page's input ranges."""

    model_config = ConfigDict(extra="forbid")

    strategyId: str = DEFAULT_STRATEGY_ID
    initialAmount: float = Field(DEFAULT_INITIAL_AMOUNT, ge=MIN_INITIAL_AMOUNT, le=MAX_INITIAL_AMOUNT)
    monthlyContribution: float = Field(DEFAULT_MONTHLY_CONTRIBUTION, ge=0, le=MAX_MONTHLY_CONTRIBUTION)
    years: int = Field(DEFAULT_YEARS, ge=MIN_YEARS, le=MAX_YEARS)


class ComparisonRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strategyId: Optional[str] = None
    initialAmount: float = Field(DEFAULT_INITIAL_AMOUNT, ge=MIN_INITIAL_AMOUNT, le=MAX_INITIAL_AMOUNT)
    monthlyContribution: float = Field(DEFAULT_MONTHLY_CONTRIBUTION, ge=0, le=MAX_MONTHLY_CONTRIBUTION)
    years: int = Field(DEFAULT_YEARS, ge=MIN_YEARS, le=MAX_YEARS)


class ProjectionResponse(BaseModel):
    strategy: StrategyProfile
    results: ScenarioResult
    yearly: List[YearlyPoint]
    allocation: List[AllocationSlice]
    display: Dict[str, str]


class ComparisonTableRow(ComparisonRow):
    """Comparison row plus the formatted cells of the comparison table."""

    selected: bool = False
    display: Dict[str, str]


class ComparisonResponse(BaseModel):
    rows: List[ComparisonTableRow]
    selectedStrategyId: Optional[str] = None


class StrategyCatalogResponse(BaseModel):
    strategies: List[StrategyProfile]
    allocationColors: List[str]
    defaultStrategyId: str
