"""Credit-related domain exceptions."""

from uuid import UUID

from .base import DomainException, NotFoundException


class CreditNotFoundException(NotFoundException):
    """Raised when no credit has the given credit code."""

    def __init__(self, credit_code: UUID):
        super().__init__(
            message=f"Creditcode {credit_code} not found",
            code="CREDIT_NOT_FOUND",
        )
        self.credit_code = credit_code


class CustomerCreditsNotFoundException(NotFoundException):
    """Raised when the store holds no credits for a customer id."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Id {customer_id} not found",
            code="CREDITS_NOT_FOUND",
        )
        self.customer_id = customer_id


class InvalidCreditRequestException(DomainException):
    """Raised when a credit request breaks a business rule."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_CREDIT_REQUEST",
        )


class CreditAccessDeniedException(DomainException):
    """
    Raised when a credit exists but belongs to another customer.

    The message stays generic so callers cannot tell which customer
    owns the credit.
    """

    def __init__(self):
        super().__init__(
            message="Contact admin",
            code="CREDIT_ACCESS_DENIED",
        )
