"""Application services (use cases)."""

from .customer_service import CustomerService
from .credit_service import CreditService

__all__ = [
    "CustomerService",
    "CreditService",
]
