"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Test client for FastAPI app with repositories bound to the test session
- Request bodies for the standard customer and credit
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.application.services.credit_service import add_months
from src.core.dependencies import (
    get_credit_repository,
    get_customer_repository,
)
from src.infrastructure.database import Base
from src.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SQLite leaves foreign keys unenforced unless asked
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def customer_repository(test_session: AsyncSession) -> PostgresCustomerRepository:
    return PostgresCustomerRepository(test_session)


@pytest.fixture
def credit_repository(test_session: AsyncSession) -> PostgresCreditRepository:
    return PostgresCreditRepository(test_session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client uses an in-memory SQLite database shared by every
    request made within a test.
    """
    async def override_get_customer_repository():
        return PostgresCustomerRepository(test_session)

    async def override_get_credit_repository():
        return PostgresCreditRepository(test_session)

    app.dependency_overrides[get_customer_repository] = override_get_customer_repository
    app.dependency_overrides[get_credit_repository] = override_get_credit_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_request() -> dict:
    """Request body for the standard customer."""
    return {
        "first_name": "Gabriel",
        "last_name": "Galera",
        "cpf": "44444444433",
        "income": "1000.00",
        "email": "gabgalera@hotmail.com",
        "password": "minhaSenha",
        "zip_code": "88888333",
        "street": "Rua dos Galeras",
    }


@pytest.fixture
def other_customer_request() -> dict:
    """Request body for a second, unrelated customer."""
    return {
        "first_name": "Camila",
        "last_name": "Souza",
        "cpf": "371.923.854-76",
        "income": "5400.50",
        "email": "camila.souza@example.com",
        "password": "outraSenha",
        "zip_code": "01310100",
        "street": "Avenida Paulista",
    }


def one_month_from_today() -> date:
    return add_months(date.today(), 1)


@pytest.fixture
def credit_request_for():
    """Build a credit request body for a given customer id."""
    def _build(
        customer_id: int,
        credit_value: str = "1000000.00",
        day_first_installment: date | None = None,
        number_of_installments: int = 3,
    ) -> dict:
        return {
            "customer_id": customer_id,
            "credit_value": credit_value,
            "day_first_installment": (day_first_installment or one_month_from_today()).isoformat(),
            "number_of_installments": number_of_installments,
        }

    return _build


@pytest_asyncio.fixture
async def registered_customer(client: AsyncClient, customer_request: dict) -> dict:
    """Register the standard customer through the API and return its view."""
    response = await client.post("/v1/customers", json=customer_request)
    assert response.status_code == 201
    return response.json()
