"""Pydantic schemas for API request/response validation."""

from .customer import (
    CustomerRequestSchema,
    CustomerUpdateSchema,
    CustomerResponseSchema,
)
from .credit import (
    CreditRequestSchema,
    CreditCreatedSchema,
    CreditSummarySchema,
    CreditDetailSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "CustomerRequestSchema",
    "CustomerUpdateSchema",
    "CustomerResponseSchema",
    "CreditRequestSchema",
    "CreditCreatedSchema",
    "CreditSummarySchema",
    "CreditDetailSchema",
    "ErrorResponseSchema",
]
