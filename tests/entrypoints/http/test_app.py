"""
Unit tests for FastAPI application setup and configuration.

Verifies the application wiring:
- build_app() creates a configured FastAPI instance
- Router registration (health, payments under /v1)
- OpenAPI schema generation
- Logging level taken from configuration
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from deal_payments.entrypoints.http.app import build_app


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Deal Payments API"
    assert app.version == "0.1.0"
    assert "Payment calculation for vehicle deals" in app.description
    assert app.license_info == {"name": "Proprietary"}


def test_build_app_applies_configured_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_PAYMENTS_LOG_LEVEL", "WARNING")
    logger = logging.getLogger("deal_payments")
    previous = logger.level

    try:
        build_app()
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_registers_paths() -> None:
    paths = build_app().openapi()["paths"]

    assert "/health" in paths
    assert "/v1/deals/payments" in paths
    assert "/deals/payments" not in paths


def test_openapi_documents_payments_endpoint() -> None:
    operation = build_app().openapi()["paths"]["/v1/deals/payments"]["post"]

    assert operation["tags"] == ["Payments"]
    assert operation["summary"] == "Quote bundle payments for a deal"
    assert "requestBody" in operation


def test_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


def test_health_endpoint_responds() -> None:
    response = TestClient(build_app()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_app_returns_404_for_unknown_routes() -> None:
    client = TestClient(build_app())

    assert client.get("/unknown").status_code == 404
    assert client.get("/v1/unknown").status_code == 404


def test_module_level_app_is_from_build_app() -> None:
    from deal_payments.entrypoints.http.app import app

    assert isinstance(app, FastAPI)
    assert app.title == "Deal Payments API"
