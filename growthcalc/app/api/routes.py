"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from growthcalc import __version__
from growthcalc.core.catalog import (
    ALLOCATION_COLORS,
    DEFAULT_STRATEGY_ID,
    get_strategy,
    list_strategies,
)
from growthcalc.core.engine import (
    allocation_breakdown,
    calculate_scenarios,
    compare_strategies,
    year_by_year,
)
from growthcalc.core.formatting import comparison_display, summary_display
from growthcalc.exceptions import InvalidArgumentError, UnknownStrategyError
from growthcalc.schemas.ping import PingResponse
from growthcalc.schemas.projection import (
    ComparisonRequest,
    ComparisonResponse,
    ComparisonTableRow,
    ProjectionRequest,
    ProjectionResponse,
    StrategyCatalogResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected %s %s: %d validation errors", request.method, request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(UnknownStrategyError)
def _handle_unknown_strategy(exc: UnknownStrategyError):
    logger.warning("unknown strategy requested: %s", exc.strategy_id)
    return jsonify({"detail": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.errorhandler(InvalidArgumentError)
def _handle_invalid_argument(exc: InvalidArgumentError):
    logger.warning("invalid engine input: %s", exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    settings = current_app.config["SETTINGS"]
    response = PingResponse(message="pong", service=settings.service_name, version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/strategies")
def strategies() -> Any:
    """Full strategy catalog plus the allocation palette."""
    response = StrategyCatalogResponse(
        strategies=list(list_strategies()),
        allocationColors=list(ALLOCATION_COLORS),
        defaultStrategyId=DEFAULT_STRATEGY_ID,
    )
    return jsonify(response.model_dump())


@api_bp.get("/strategies/<strategy_id>")
def strategy_detail(strategy_id: str) -> Any:
    return jsonify(get_strategy(strategy_id).model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Scenario figures, yearly trajectory and allocation for one strategy."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    strategy = get_strategy(payload.strategyId)
    logger.info(
        "projection strategy=%s amount=%.2f monthly=%.2f years=%d",
        strategy.id,
        payload.initialAmount,
        payload.monthlyContribution,
        payload.years,
    )

    results = calculate_scenarios(
        payload.initialAmount, payload.monthlyContribution, strategy, payload.years
    )
    response = ProjectionResponse(
        strategy=strategy,
        results=results,
        yearly=year_by_year(
            payload.initialAmount, payload.monthlyContribution, strategy, payload.years
        ),
        allocation=allocation_breakdown(results.expected, strategy),
        display=summary_display(results, strategy),
    )
    return jsonify(response.model_dump())


@api_bp.post("/comparison")
def comparison() -> Any:
    """Expected outcome of every strategy for the same inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ComparisonRequest.model_validate(raw_payload)
    if payload.strategyId is not None:
        get_strategy(payload.strategyId)

    rows = compare_strategies(payload.initialAmount, payload.monthlyContribution, payload.years)
    response = ComparisonResponse(
        rows=[
            ComparisonTableRow(
                **row.model_dump(),
                selected=row.strategyId == payload.strategyId,
                display=comparison_display(row),
            )
            for row in rows
        ],
        selectedStrategyId=payload.strategyId,
    )
    return jsonify(response.model_dump())
