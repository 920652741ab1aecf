"""Data transfer objects for credit operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List

from src.domain.entities import Credit


@dataclass(frozen=True)
class CreditRequest:
    """Input data for requesting a credit."""

    customer_id: int
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


@dataclass(frozen=True)
class CreditCreatedView:
    """Response data for a newly created credit."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int
    status: str
    email_customer: str
    credit_value_total: Decimal

    @classmethod
    def from_entity(cls, credit: Credit, credit_value_total: Decimal) -> "CreditCreatedView":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            email_customer=credit.customer.email,
            credit_value_total=credit_value_total,
        )


@dataclass(frozen=True)
class CreditSummaryView:
    """A credit as listed for its customer."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditSummaryView":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
        )

    @classmethod
    def from_entities(cls, credits: List[Credit]) -> List["CreditSummaryView"]:
        return [cls.from_entity(credit) for credit in credits]


@dataclass(frozen=True)
class CreditView:
    """Detailed view of a single credit, including its owner's contact data."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int
    status: str
    email_customer: str
    income_customer: Decimal

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditView":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            email_customer=credit.customer.email,
            income_customer=credit.customer.income,
        )
