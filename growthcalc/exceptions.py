"""Exception hierarchy for the projection engine and its HTTP surface."""


class GrowthCalcError(Exception):
    """Base class for all growthcalc errors."""


class InvalidArgumentError(GrowthCalcError, ValueError):
    """An engine input is outside its contract (negative amount, bad horizon, rate <= -1)."""


class UnknownStrategyError(InvalidArgumentError, LookupError):
    def __init__(self, strategy_id: str):
        super().__init__(f"unknown strategy id: {strategy_id!r}")
        self.strategy_id = strategy_id
