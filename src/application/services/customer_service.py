"""Customer service - registration, lookup and maintenance of customers."""

import structlog

from src.domain.entities import Customer
from src.domain.exceptions import CustomerNotFoundException
from src.domain.interfaces import CustomerRepository
from src.application.dto import CustomerUpdateRequest

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for customer use cases.

    Also acts as the customer directory other services resolve
    customer ids through.
    """

    def __init__(self, customer_repository: CustomerRepository):
        self._customer_repo = customer_repository

    async def save(self, customer: Customer) -> Customer:
        """
        Register a new customer.

        Raises:
            CustomerAlreadyExistsException: If the cpf or email is taken
        """
        saved = await self._customer_repo.save(customer)
        logger.info("customer_registered", customer_id=saved.id)
        return saved

    async def find_by_id(self, customer_id: int) -> Customer:
        """
        Get a customer by id.

        Args:
            customer_id: The customer's numeric identifier

        Returns:
            The customer entity

        Raises:
            CustomerNotFoundException: If the customer does not exist
        """
        customer = await self._customer_repo.get_by_id(customer_id)
        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)
        return customer

    async def update(self, customer_id: int, changes: CustomerUpdateRequest) -> Customer:
        """
        Replace the mutable fields of a customer.

        cpf, email and password are left untouched.

        Raises:
            CustomerNotFoundException: If the customer does not exist
        """
        customer = await self.find_by_id(customer_id)
        updated = await self._customer_repo.update(changes.apply_to(customer))
        logger.info("customer_updated", customer_id=customer_id)
        return updated

    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer and all of its credits.

        Raises:
            CustomerNotFoundException: If the customer does not exist
        """
        await self.find_by_id(customer_id)
        await self._customer_repo.delete(customer_id)
        logger.info("customer_deleted", customer_id=customer_id)
