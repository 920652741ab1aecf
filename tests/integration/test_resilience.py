"""
Integration tests for store failure handling.

These tests verify:
1. Store failures surface as 500 INTERNAL_ERROR, never as a business error
2. A failed credit write leaves no credit behind
"""

import pytest
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_credit_repository, get_customer_repository
from src.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)


class FailingCreditRepository(PostgresCreditRepository):
    """Credit repository whose writes always fail, as on a lost connection."""

    async def save(self, credit):
        raise ConnectionError("database unavailable")


class TestStoreFailure:
    """Tests for store failures while creating credits."""

    @pytest.mark.asyncio
    async def test_store_failure_returns_500(
        self,
        test_session,
        customer_request: dict,
        credit_request_for,
    ):
        async def override_get_customer_repository():
            return PostgresCustomerRepository(test_session)

        async def override_get_credit_repository():
            return FailingCreditRepository(test_session)

        app.dependency_overrides[get_customer_repository] = override_get_customer_repository
        app.dependency_overrides[get_credit_repository] = override_get_credit_repository

        # The catch-all handler renders the response, then Starlette re-raises
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            customer = (await client.post("/v1/customers", json=customer_request)).json()

            response = await client.post("/v1/credits", json=credit_request_for(customer["id"]))

            assert response.status_code == 500

            data = response.json()
            assert data["error"] == "INTERNAL_ERROR"
            assert "database" not in data["message"]

        app.dependency_overrides.clear()

        credits = await PostgresCreditRepository(test_session).get_all_by_customer_id(customer["id"])
        assert credits == []
