"""Credit API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from src.application.dto import (
    CreditRequest,
    CreditCreatedView,
    CreditSummaryView,
    CreditView,
)
from src.application.services import CreditService
from src.core.dependencies import get_credit_service
from src.core.metrics import (
    record_credit_lookup,
    record_credit_request,
    track_credit_latency,
)
from src.domain.exceptions import (
    CreditAccessDeniedException,
    CustomerNotFoundException,
    InvalidCreditRequestException,
    NotFoundException,
)
from src.presentation.schemas import (
    CreditRequestSchema,
    CreditCreatedSchema,
    CreditSummarySchema,
    CreditDetailSchema,
    ErrorResponseSchema,
)

credit_router = APIRouter(
    prefix="/credits",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer or credit not found"},
    },
)


@credit_router.post(
    "",
    response_model=CreditCreatedSchema,
    status_code=201,
    summary="Request Credit",
    description="""
    Request a new credit for an existing customer.

    The first installment must fall within three months from today.
    The credit starts IN_PROGRESS.
    """,
    responses={
        201: {"description": "Credit created"},
        400: {"model": ErrorResponseSchema, "description": "Invalid Date"},
    },
)
async def create_credit(
    request: CreditRequestSchema,
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditCreatedSchema:
    dto = CreditRequest(
        customer_id=request.customer_id,
        credit_value=request.credit_value,
        day_first_installment=request.day_first_installment,
        number_of_installments=request.number_of_installments,
    )

    try:
        with track_credit_latency("save"):
            credit = await credit_service.save(dto.to_entity())
    except InvalidCreditRequestException:
        record_credit_request("invalid_date")
        raise
    except CustomerNotFoundException:
        record_credit_request("customer_not_found")
        raise

    record_credit_request("created", credit.credit_value)

    view = CreditCreatedView.from_entity(credit, credit_value_total=request.credit_value)
    return CreditCreatedSchema(
        credit_code=view.credit_code,
        credit_value=view.credit_value,
        number_of_installments=view.number_of_installments,
        status=view.status,
        email_customer=view.email_customer,
        credit_value_total=view.credit_value_total,
    )


@credit_router.get(
    "",
    response_model=list[CreditSummarySchema],
    summary="List Customer Credits",
    description="List every credit of a customer, oldest first.",
)
async def list_credits(
    customer_id: Annotated[int, Query(ge=1, description="Id of the owning customer")],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> list[CreditSummarySchema]:
    try:
        with track_credit_latency("find_all_by_customer"):
            credits = await credit_service.find_all_by_customer(customer_id)
    except NotFoundException:
        record_credit_lookup("list", "not_found")
        raise

    record_credit_lookup("list", "found")

    return [
        CreditSummarySchema(
            credit_code=view.credit_code,
            credit_value=view.credit_value,
            number_of_installments=view.number_of_installments,
        )
        for view in CreditSummaryView.from_entities(credits)
    ]


@credit_router.get(
    "/{credit_code}",
    response_model=CreditDetailSchema,
    summary="Get Credit",
    description="""
    Retrieve a credit by its code.

    Only the owning customer may see the credit.
    """,
    responses={
        403: {"model": ErrorResponseSchema, "description": "Credit belongs to another customer"},
    },
)
async def get_credit(
    credit_code: Annotated[UUID, Path(description="UUID of the credit")],
    customer_id: Annotated[int, Query(ge=1, description="Id of the requesting customer")],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditDetailSchema:
    try:
        with track_credit_latency("find_by_credit_code"):
            credit = await credit_service.find_by_credit_code(customer_id, credit_code)
    except NotFoundException:
        record_credit_lookup("by_code", "not_found")
        raise
    except CreditAccessDeniedException:
        record_credit_lookup("by_code", "denied")
        raise

    record_credit_lookup("by_code", "found")

    view = CreditView.from_entity(credit)
    return CreditDetailSchema(
        credit_code=view.credit_code,
        credit_value=view.credit_value,
        number_of_installments=view.number_of_installments,
        status=view.status,
        email_customer=view.email_customer,
        income_customer=view.income_customer,
    )
