"""
Defaults and input bounds shared by the catalog, the schemas and the API.

The bounds mirror the calculator form: initial amount 100 to 1,000,000,
monthly contribution 0 to 10,000, horizon 1 to 50 years.
"""

__all__ = [
    "DEFAULT_STRATEGY_ID",
    "DEFAULT_INITIAL_AMOUNT",
    "DEFAULT_MONTHLY_CONTRIBUTION",
    "DEFAULT_YEARS",
    "MIN_INITIAL_AMOUNT",
    "MAX_INITIAL_AMOUNT",
    "MAX_MONTHLY_CONTRIBUTION",
    "MIN_YEARS",
    "MAX_YEARS",
]

DEFAULT_STRATEGY_ID: str = "aggressive"
"""Strategy preselected when the request does not name one."""

DEFAULT_INITIAL_AMOUNT: float = 10_000.0
DEFAULT_MONTHLY_CONTRIBUTION: float = 500.0
DEFAULT_YEARS: int = 10

MIN_INITIAL_AMOUNT: float = 100.0
MAX_INITIAL_AMOUNT: float = 1_000_000.0
MAX_MONTHLY_CONTRIBUTION: float = 10_000.0
MIN_YEARS: int = 1
MAX_YEARS: int = 50
