"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)
from src.application.services import CreditService, CustomerService


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresCustomerRepository:
    """Get a CustomerRepository instance."""
    return PostgresCustomerRepository(session)


async def get_credit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresCreditRepository:
    """Get a CreditRepository instance."""
    return PostgresCreditRepository(session)


# Service dependencies
async def get_customer_service(
    customer_repo: Annotated[PostgresCustomerRepository, Depends(get_customer_repository)],
) -> CustomerService:
    """Get a CustomerService instance."""
    return CustomerService(customer_repository=customer_repo)


async def get_credit_service(
    credit_repo: Annotated[PostgresCreditRepository, Depends(get_credit_repository)],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CreditService:
    """Get a CreditService instance with all dependencies."""
    return CreditService(
        credit_repository=credit_repo,
        customer_service=customer_service,
    )
