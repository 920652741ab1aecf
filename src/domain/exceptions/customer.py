"""Customer-related domain exceptions."""

from .base import DomainException, NotFoundException


class CustomerNotFoundException(NotFoundException):
    """Raised when a customer cannot be found by id."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Id {customer_id} not found",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class CustomerAlreadyExistsException(DomainException):
    """Raised when a customer's cpf or email is already registered."""

    def __init__(self):
        super().__init__(
            message="Customer with this cpf or email already exists",
            code="CUSTOMER_ALREADY_EXISTS",
        )
