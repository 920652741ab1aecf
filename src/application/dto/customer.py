"""Data transfer objects for customer operations."""

from dataclasses import dataclass, replace
from decimal import Decimal

from src.domain.entities import Address, Customer


@dataclass(frozen=True)
class CustomerRequest:
    """Input data for registering a customer."""

    first_name: str
    last_name: str
    cpf: str
    income: Decimal
    email: str
    password: str
    zip_code: str
    street: str

    def to_entity(self) -> Customer:
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            cpf=self.cpf,
            email=self.email,
            password=self.password,
            income=self.income,
            address=Address(zip_code=self.zip_code, street=self.street),
        )


@dataclass(frozen=True)
class CustomerUpdateRequest:
    """Fields a customer may change after registration."""

    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str

    def apply_to(self, customer: Customer) -> Customer:
        """Return a copy of ``customer`` carrying the new values."""
        return replace(
            customer,
            first_name=self.first_name,
            last_name=self.last_name,
            income=self.income,
            address=Address(zip_code=self.zip_code, street=self.street),
        )


@dataclass(frozen=True)
class CustomerView:
    """Response data for a customer. Never carries the password."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    income: Decimal
    email: str
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerView":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            income=customer.income,
            email=customer.email,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )
