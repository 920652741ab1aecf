"""
Integration tests for the SQLAlchemy repositories.

These tests verify:
1. Credits are found by credit code with their owner attached
2. Credits are listed by customer id in insertion order
3. Customers get ids on save and cpf/email stay unique
"""

from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from src.domain.entities import Address, Credit, CreditStatus, Customer
from src.domain.exceptions import CustomerAlreadyExistsException


def build_customer(
    cpf: str = "44444444433",
    email: str = "gabgalera@hotmail.com",
) -> Customer:
    return Customer(
        first_name="Gabriel",
        last_name="Galera",
        cpf=cpf,
        email=email,
        password="minhaSenha",
        income=Decimal("1000.00"),
        address=Address(zip_code="88888333", street="Rua dos Galeras"),
    )


def build_credit(customer_id: int, credit_value: str = "500.00") -> Credit:
    return Credit(
        credit_value=Decimal(credit_value),
        day_first_installment=date(2023, 4, 22),
        number_of_installments=5,
        customer_id=customer_id,
    )


class TestCreditRepository:
    """Tests for PostgresCreditRepository."""

    @pytest.mark.asyncio
    async def test_find_credit_by_credit_code(
        self,
        customer_repository,
        credit_repository,
    ):
        customer = await customer_repository.save(build_customer())
        credit1 = build_credit(customer.id)
        credit1.credit_code = UUID("6a86dcf5-38cd-45bf-bea6-864e6204df4c")
        credit2 = build_credit(customer.id)
        credit2.credit_code = UUID("c19fd6ed-0542-45da-a3f2-fbb83d2a4adb")
        await credit_repository.save(credit1)
        await credit_repository.save(credit2)

        found1 = await credit_repository.get_by_credit_code(credit1.credit_code)
        found2 = await credit_repository.get_by_credit_code(credit2.credit_code)

        assert found1 == credit1
        assert found2 == credit2
        assert found1.customer.id == customer.id
        assert found1.customer.email == "gabgalera@hotmail.com"

    @pytest.mark.asyncio
    async def test_unknown_credit_code_returns_none(self, credit_repository):
        assert await credit_repository.get_by_credit_code(uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_all_credits_by_customer_id(
        self,
        customer_repository,
        credit_repository,
    ):
        customer = await customer_repository.save(build_customer())
        credit1 = await credit_repository.save(build_credit(customer.id))
        credit2 = await credit_repository.save(build_credit(customer.id, "750.00"))

        credits = await credit_repository.get_all_by_customer_id(customer.id)

        assert credits == [credit1, credit2]
        assert all(c.status == CreditStatus.IN_PROGRESS for c in credits)

    @pytest.mark.asyncio
    async def test_find_all_for_customer_without_credits_is_empty(
        self,
        customer_repository,
        credit_repository,
    ):
        customer = await customer_repository.save(build_customer())

        assert await credit_repository.get_all_by_customer_id(customer.id) == []

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, customer_repository, credit_repository):
        customer = await customer_repository.save(build_customer())

        credit = await credit_repository.save(build_credit(customer.id))

        assert credit.id is not None


class TestCustomerRepository:
    """Tests for PostgresCustomerRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_round_trips(self, customer_repository):
        saved = await customer_repository.save(build_customer())

        found = await customer_repository.get_by_id(saved.id)

        assert saved.id is not None
        assert found == saved

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, customer_repository):
        assert await customer_repository.get_by_id(123) is None

    @pytest.mark.asyncio
    async def test_duplicate_cpf_is_rejected(self, customer_repository):
        await customer_repository.save(build_customer())

        with pytest.raises(CustomerAlreadyExistsException):
            await customer_repository.save(build_customer(email="other@example.com"))

    @pytest.mark.asyncio
    async def test_delete_cascades_to_credits(
        self,
        customer_repository,
        credit_repository,
    ):
        customer = await customer_repository.save(build_customer())
        credit = await credit_repository.save(build_credit(customer.id))

        await customer_repository.delete(customer.id)

        assert await customer_repository.get_by_id(customer.id) is None
        assert await credit_repository.get_by_credit_code(credit.credit_code) is None
