"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, NotFoundException
from .customer import (
    CustomerAlreadyExistsException,
    CustomerNotFoundException,
)
from .credit import (
    CreditAccessDeniedException,
    CreditNotFoundException,
    CustomerCreditsNotFoundException,
    InvalidCreditRequestException,
)

__all__ = [
    "DomainException",
    "NotFoundException",
    "CustomerAlreadyExistsException",
    "CustomerNotFoundException",
    "CreditAccessDeniedException",
    "CreditNotFoundException",
    "CustomerCreditsNotFoundException",
    "InvalidCreditRequestException",
]
