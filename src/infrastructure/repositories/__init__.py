"""Repository implementations."""

from .customer_repository import PostgresCustomerRepository
from .credit_repository import PostgresCreditRepository

__all__ = [
    "PostgresCustomerRepository",
    "PostgresCreditRepository",
]
