"""Credit service - validates, stores and discloses credit requests."""

import calendar
from dataclasses import replace
from datetime import date
from typing import Callable, List
from uuid import UUID, uuid4

import structlog

from src.core.config import settings
from src.domain.entities import Credit, CreditStatus
from src.domain.exceptions import (
    CreditAccessDeniedException,
    CreditNotFoundException,
    CustomerCreditsNotFoundException,
    InvalidCreditRequestException,
)
from src.domain.interfaces import CreditRepository
from .customer_service import CustomerService

logger = structlog.get_logger(__name__)


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole calendar months, clamping to the month's last day."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class CreditService:
    """
    Application service for credit use cases.

    Every operation resolves its inputs from the store; nothing is cached
    between calls.
    """

    def __init__(
        self,
        credit_repository: CreditRepository,
        customer_service: CustomerService,
        today: Callable[[], date] = date.today,
        max_first_installment_months: int | None = None,
    ):
        self._credit_repo = credit_repository
        self._customer_service = customer_service
        self._today = today
        self._window_months = (
            max_first_installment_months
            if max_first_installment_months is not None
            else settings.max_first_installment_months
        )

    async def save(self, credit: Credit) -> Credit:
        """
        Validate and persist a new credit request.

        Args:
            credit: The requested credit, carrying the owner's customer_id

        Returns:
            The persisted credit, status IN_PROGRESS, owner attached

        Raises:
            CustomerNotFoundException: If the customer does not exist
            InvalidCreditRequestException: If the first installment is
                beyond the allowed window
        """
        customer = await self._customer_service.find_by_id(credit.customer_id)

        log = logger.bind(
            customer_id=customer.id,
            day_first_installment=credit.day_first_installment.isoformat(),
        )

        latest = add_months(self._today(), self._window_months)
        if credit.day_first_installment > latest:
            log.info("credit_rejected", reason="invalid_date", latest=latest.isoformat())
            raise InvalidCreditRequestException("Invalid Date")

        candidate = replace(
            credit,
            id=None,
            credit_code=uuid4(),
            status=CreditStatus.IN_PROGRESS,
            customer_id=customer.id,
            customer=customer,
        )

        saved = await self._credit_repo.save(candidate)
        saved.customer = customer

        log.info(
            "credit_created",
            credit_id=saved.id,
            credit_code=str(saved.credit_code),
            number_of_installments=saved.number_of_installments,
        )

        return saved

    async def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        """
        List every credit of a customer, in store order.

        Raises:
            CustomerCreditsNotFoundException: If the store holds no credits
                for the customer
        """
        credits = await self._credit_repo.get_all_by_customer_id(customer_id)
        self._require_credits(customer_id, credits)

        logger.info("customer_credits_retrieved", customer_id=customer_id, count=len(credits))
        return credits

    async def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        """
        Get a credit by its code on behalf of a customer.

        Raises:
            CreditNotFoundException: If no credit has this code
            CreditAccessDeniedException: If the credit belongs to another
                customer
        """
        credit = await self._credit_repo.get_by_credit_code(credit_code)

        if credit is None:
            logger.warning("credit_not_found", credit_code=str(credit_code))
            raise CreditNotFoundException(credit_code)

        if credit.customer_id != customer_id:
            logger.warning(
                "credit_access_denied",
                credit_code=str(credit_code),
                customer_id=customer_id,
            )
            raise CreditAccessDeniedException()

        return credit

    @staticmethod
    def _require_credits(customer_id: int, credits: List[Credit]) -> None:
        """
        An empty result is reported as not found.

        This does not distinguish a customer without credits from an
        unknown customer.
        """
        if not credits:
            raise CustomerCreditsNotFoundException(customer_id)
