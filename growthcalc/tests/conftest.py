from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from growthcalc.app import create_app
from growthcalc.config import AppSettings
from growthcalc.core.catalog import get_strategy
from growthcalc.schemas.projection import StrategyProfile


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        log_level="WARNING",
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture()
def client(settings: AppSettings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def moderate() -> StrategyProfile:
    return get_strategy("moderate")
