"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Credit, Customer


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new customer.

        Args:
            customer: The customer to save

        Returns:
            The saved customer with its id assigned

        Raises:
            CustomerAlreadyExistsException: If the cpf or email is taken
        """
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a customer by id.

        Args:
            customer_id: The customer's numeric identifier

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Write the mutable fields of an existing customer.

        Args:
            customer: The customer carrying the new values

        Returns:
            The updated customer
        """
        ...

    @abstractmethod
    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer and, with it, all of its credits.

        Args:
            customer_id: The customer's numeric identifier
        """
        ...


class CreditRepository(ABC):
    """
    Abstract repository for Credit persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, credit: Credit) -> Credit:
        """
        Persist a credit.

        Args:
            credit: The credit to save

        Returns:
            The saved credit with its id assigned
        """
        ...

    @abstractmethod
    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """
        Retrieve a credit by its credit code.

        Args:
            credit_code: The credit's external identifier

        Returns:
            The credit with its owning customer attached, None if not found
        """
        ...

    @abstractmethod
    async def get_all_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Retrieve every credit referencing a customer.

        Args:
            customer_id: The owning customer's identifier

        Returns:
            List of credits ordered by id, empty when there are none
        """
        ...
