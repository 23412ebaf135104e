"""
Test API structure and endpoint definitions.

These tests verify the API is properly configured without exercising the
calculators themselves.
"""

import pytest
from fastapi.testclient import TestClient


def test_api_can_import():
    """Test that API modules can be imported."""
    from fintool.api import main
    from fintool.api import schemas
    from fintool.api.routes import mortgage, compound_interest, fire, budget

    assert main.app is not None
    assert hasattr(schemas, "MortgageRequest")
    assert hasattr(mortgage, "router")
    assert hasattr(compound_interest, "router")
    assert hasattr(fire, "router")
    assert hasattr(budget, "router")


def test_schemas_defined():
    """Test that all required Pydantic schemas are defined."""
    from fintool.api.schemas import (
        MortgageRequest,
        MortgageScheduleResponse,
        MortgageYearlyResponse,
        CompoundInterestRequest,
        CompoundInterestResponse,
        FireSimpleRequest,
        FireAdvancedRequest,
        YearsToTargetRequest,
        RedistributeRequest,
        BudgetSummaryRequest,
        NormalizeRequest,
        ErrorResponse,
    )

    assert MortgageRequest is not None
    assert CompoundInterestRequest is not None
    assert FireSimpleRequest is not None
    assert BudgetSummaryRequest is not None


def test_rate_accepts_percent_strings():
    """Rates may be sent as "3.5%"."""
    from fintool.api.schemas import MortgageRequest

    request = MortgageRequest(principal=100000, annual_rate_pct="3.5%", term_years=10)
    assert request.annual_rate_pct == 3.5


def test_app_routes_registered():
    """Test that all calculator routes are registered in the app."""
    from fintool.api.main import app

    routes = set(app.openapi()["paths"])

    assert "/health" in routes
    assert "/" in routes
    assert "/api/mortgage/schedule" in routes
    assert "/api/mortgage/yearly" in routes
    assert "/api/mortgage/compare" in routes
    assert "/api/compound-interest/projection" in routes
    assert "/api/fire/simple" in routes
    assert "/api/fire/advanced" in routes
    assert "/api/fire/years-to-target" in routes
    assert "/api/budget/allocation/redistribute" in routes
    assert "/api/budget/summary" in routes
    assert "/api/budget/normalize" in routes


def test_health_endpoint():
    """Test health check endpoint."""
    from fintool.api.main import app

    client = TestClient(app)
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "fintool-api"


def test_root_endpoint():
    """Test root endpoint."""
    from fintool.api.main import app

    client = TestClient(app)
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "FinTool API"
    assert data["docs"] == "/api/docs"


def test_openapi_docs():
    """Test that OpenAPI documentation is generated."""
    from fintool.api.main import app

    client = TestClient(app)
    response = client.get("/api/openapi.json")

    assert response.status_code == 200
    openapi = response.json()
    assert openapi["info"]["title"] == "FinTool API"
    assert "/api/mortgage/schedule" in openapi["paths"]


def test_cors_middleware():
    """Test that CORS middleware is configured."""
    from fintool.api.main import app

    client = TestClient(app)
    response = client.options(
        "/health",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_settings_from_environment(monkeypatch):
    """Settings carry only the values the API reads, taken from the environment."""
    from fintool.config import Settings

    monkeypatch.setenv("CORS_ORIGINS", "https://example.org, http://localhost:3000")
    monkeypatch.setenv("FINTOOL_STRICT_FREQUENCY", "false")
    monkeypatch.setenv("FINTOOL_SCHEDULE_PAGE_SIZE", "25")
    monkeypatch.setenv("FINTOOL_MAX_PAGE_SIZE", "100")

    settings = Settings()

    assert settings.cors_origins == ["https://example.org", "http://localhost:3000"]
    assert settings.strict_frequency is False
    assert settings.schedule_page_size == 25
    assert settings.max_page_size == 100
    assert set(vars(settings)) == {"cors_origins", "strict_frequency", "schedule_page_size", "max_page_size"}
