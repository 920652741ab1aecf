"""PostgreSQL implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.domain.entities import Address, Customer
from src.domain.exceptions import CustomerAlreadyExistsException
from src.domain.interfaces import CustomerRepository
from src.infrastructure.database.models import CustomerModel


class PostgresCustomerRepository(CustomerRepository):
    """
    PostgreSQL implementation of the Customer repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """Persist a new customer, rejecting a taken cpf or email."""
        if await self._exists(customer.cpf, customer.email):
            raise CustomerAlreadyExistsException()

        model = CustomerModel(
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            email=customer.email,
            password=customer.password,
            income=customer.income,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Lost a race against a concurrent registration
            raise CustomerAlreadyExistsException() from exc

        customer.id = model.id
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by id."""
        model = await self._session.get(CustomerModel, customer_id)

        if model is None:
            return None

        return self.to_entity(model)

    async def update(self, customer: Customer) -> Customer:
        """Write first/last name, income and address of an existing customer."""
        model = await self._session.get(CustomerModel, customer.id)

        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.income = customer.income
        model.zip_code = customer.address.zip_code
        model.street = customer.address.street

        await self._session.flush()

        return self.to_entity(model)

    async def delete(self, customer_id: int) -> None:
        """Delete a customer together with its credits."""
        stmt = (
            select(CustomerModel)
            .options(selectinload(CustomerModel.credits))
            .where(CustomerModel.id == customer_id)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return

        await self._session.delete(model)
        await self._session.flush()

    async def _exists(self, cpf: str, email: str) -> bool:
        stmt = select(CustomerModel.id).where(
            or_(CustomerModel.cpf == cpf, CustomerModel.email == email)
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    @staticmethod
    def to_entity(model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        return Customer(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            cpf=model.cpf,
            email=model.email,
            password=model.password,
            income=model.income,
            address=Address(zip_code=model.zip_code, street=model.street),
        )
