"""Credit entity representing a customer's credit request."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from .customer import Customer


class CreditStatus(str, Enum):
    """Lifecycle state of a credit. Only IN_PROGRESS is assigned by the service."""

    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class Credit:
    """
    A credit line requested by a customer.

    The credit code is the external handle; the numeric id is assigned
    by the store and never exposed to callers. The owning customer is
    referenced by ``customer_id``. ``customer`` is attached once the
    owner has been resolved and takes no part in equality.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int = 0
    customer_id: Optional[int] = None
    status: CreditStatus = CreditStatus.IN_PROGRESS
    credit_code: UUID = field(default_factory=uuid4)
    id: Optional[int] = None
    customer: Optional[Customer] = field(default=None, compare=False, repr=False)
