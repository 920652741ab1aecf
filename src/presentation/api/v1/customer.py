"""Customer API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from src.application.dto import CustomerRequest, CustomerUpdateRequest, CustomerView
from src.application.services import CustomerService
from src.core.dependencies import get_customer_service
from src.core.metrics import record_customer_registered
from src.presentation.schemas import (
    CustomerRequestSchema,
    CustomerUpdateSchema,
    CustomerResponseSchema,
    ErrorResponseSchema,
)

customer_router = APIRouter(
    prefix="/customers",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)


def _to_schema(view: CustomerView) -> CustomerResponseSchema:
    return CustomerResponseSchema(
        id=view.id,
        first_name=view.first_name,
        last_name=view.last_name,
        cpf=view.cpf,
        income=view.income,
        email=view.email,
        zip_code=view.zip_code,
        street=view.street,
    )


@customer_router.post(
    "",
    response_model=CustomerResponseSchema,
    status_code=201,
    summary="Register Customer",
    responses={
        201: {"description": "Customer registered"},
        409: {"model": ErrorResponseSchema, "description": "cpf or email already registered"},
    },
)
async def create_customer(
    request: CustomerRequestSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    dto = CustomerRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        cpf=request.cpf,
        income=request.income,
        email=request.email,
        password=request.password,
        zip_code=request.zip_code,
        street=request.street,
    )

    customer = await customer_service.save(dto.to_entity())
    record_customer_registered()

    return _to_schema(CustomerView.from_entity(customer))


@customer_router.get(
    "/{customer_id}",
    response_model=CustomerResponseSchema,
    summary="Get Customer",
)
async def get_customer(
    customer_id: Annotated[int, Path(ge=1, description="Id of the customer")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    customer = await customer_service.find_by_id(customer_id)
    return _to_schema(CustomerView.from_entity(customer))


@customer_router.patch(
    "",
    response_model=CustomerResponseSchema,
    summary="Update Customer",
    description="""
    Update a customer's name, income and address.

    cpf, email and password cannot be changed.
    """,
)
async def update_customer(
    customer_id: Annotated[int, Query(ge=1, description="Id of the customer to update")],
    request: CustomerUpdateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    changes = CustomerUpdateRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        income=request.income,
        zip_code=request.zip_code,
        street=request.street,
    )

    customer = await customer_service.update(customer_id, changes)
    return _to_schema(CustomerView.from_entity(customer))


@customer_router.delete(
    "/{customer_id}",
    status_code=204,
    summary="Delete Customer",
    description="Delete a customer together with all of its credits.",
)
async def delete_customer(
    customer_id: Annotated[int, Path(ge=1, description="Id of the customer")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> Response:
    await customer_service.delete(customer_id)
    return Response(status_code=204)
