"""Domain Entities - Core business objects."""

from .customer import Address, Customer
from .credit import Credit, CreditStatus

__all__ = [
    "Address",
    "Customer",
    "Credit",
    "CreditStatus",
]
