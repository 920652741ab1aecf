"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Credit request outcomes are counted
3. Credit lookups are counted by outcome
"""

from datetime import date

import pytest
from httpx import AsyncClient

from src.application.services.credit_service import add_months
from src.core.metrics import REGISTRY


def sample(name: str, **labels) -> float:
    """Current value of a counter sample, 0 when never incremented."""
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        assert response.status_code == 200

        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type

        content = response.text
        assert "# HELP" in content
        assert "credit_app_credit_requests_total" in content
        assert "credit_app_credit_latency_seconds" in content


class TestCreditMetrics:
    """Tests for credit-related metrics tracking."""

    @pytest.mark.asyncio
    async def test_created_credit_increments_counter(
        self,
        client: AsyncClient,
        registered_customer: dict,
        credit_request_for,
    ):
        before = sample("credit_app_credit_requests_total", outcome="created")

        response = await client.post(
            "/v1/credits",
            json=credit_request_for(registered_customer["id"]),
        )
        assert response.status_code == 201

        assert sample("credit_app_credit_requests_total", outcome="created") == before + 1

        metrics_response = await client.get("/metrics")
        assert 'credit_app_credit_value_bucket_total{bucket="100k-1m"}' in metrics_response.text

    @pytest.mark.asyncio
    async def test_rejected_credit_increments_counter(
        self,
        client: AsyncClient,
        registered_customer: dict,
        credit_request_for,
    ):
        before = sample("credit_app_credit_requests_total", outcome="invalid_date")

        response = await client.post(
            "/v1/credits",
            json=credit_request_for(
                registered_customer["id"],
                day_first_installment=add_months(date.today(), 36),
            ),
        )
        assert response.status_code == 400

        assert sample("credit_app_credit_requests_total", outcome="invalid_date") == before + 1

    @pytest.mark.asyncio
    async def test_denied_lookup_increments_counter(
        self,
        client: AsyncClient,
        registered_customer: dict,
        other_customer_request: dict,
        credit_request_for,
    ):
        other = (await client.post("/v1/customers", json=other_customer_request)).json()
        created = (
            await client.post(
                "/v1/credits",
                json=credit_request_for(registered_customer["id"]),
            )
        ).json()
        before = sample("credit_app_credit_lookups_total", operation="by_code", outcome="denied")

        response = await client.get(
            f"/v1/credits/{created['credit_code']}",
            params={"customer_id": other["id"]},
        )
        assert response.status_code == 403

        assert sample("credit_app_credit_lookups_total", operation="by_code", outcome="denied") == before + 1

    @pytest.mark.asyncio
    async def test_registration_increments_counter(
        self,
        client: AsyncClient,
        customer_request: dict,
    ):
        before = sample("credit_app_customers_registered_total")

        response = await client.post("/v1/customers", json=customer_request)
        assert response.status_code == 201

        assert sample("credit_app_customers_registered_total") == before + 1
