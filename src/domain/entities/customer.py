"""Customer entity and its embedded address."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer. Has no identity of its own."""

    zip_code: str
    street: str


@dataclass
class Customer:
    """
    A registered customer who may apply for credit.

    cpf and email are unique across all customers; the store enforces it.
    Credits are not held here, they reference the customer by id.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    password: str
    address: Address
    income: Decimal = Decimal("0")
    id: Optional[int] = None
