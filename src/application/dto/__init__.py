"""Data Transfer Objects for application layer."""

from .customer import CustomerRequest, CustomerUpdateRequest, CustomerView
from .credit import CreditRequest, CreditCreatedView, CreditSummaryView, CreditView

__all__ = [
    "CustomerRequest",
    "CustomerUpdateRequest",
    "CustomerView",
    "CreditRequest",
    "CreditCreatedView",
    "CreditSummaryView",
    "CreditView",
]
