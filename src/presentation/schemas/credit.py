"""Credit-related Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, ConfigDict


class CreditRequestSchema(BaseModel):
    """Schema for POST /v1/credits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "customer_id": 1,
                    "credit_value": "1000000.00",
                    "day_first_installment": "2026-11-19",
                    "number_of_installments": 3,
                }
            ]
        }
    )
    customer_id: int = Field(
        ...,
        ge=1,
        description="Id of the customer requesting the credit",
        examples=[1],
    )
    credit_value: Decimal = Field(
        ...,
        gt=0,
        max_digits=14,
        decimal_places=2,
        description="Requested credit value",
        examples=["1000000.00"],
    )
    day_first_installment: date = Field(
        ...,
        description="Due date of the first installment (YYYY-MM-DD)",
        examples=["2026-11-19"],
    )
    number_of_installments: int = Field(
        ...,
        ge=0,
        description="Number of installments",
        examples=[3],
    )

    @field_validator("day_first_installment")
    @classmethod
    def validate_future_date(cls, v: date) -> date:
        """The first installment cannot be due today or earlier."""
        if v <= date.today():
            raise ValueError("day_first_installment must be a future date")
        return v


class CreditCreatedSchema(BaseModel):
    """Schema for POST /v1/credits response body."""

    credit_code: str = Field(
        ...,
        description="UUID identifying the credit",
        examples=["6a86dcf5-38cd-45bf-bea6-864e6204df4c"],
    )
    credit_value: Decimal = Field(..., description="Credit value")
    number_of_installments: int = Field(..., ge=0, description="Number of installments")
    status: str = Field(
        ...,
        description="Credit status",
        examples=["IN_PROGRESS"],
    )
    email_customer: str = Field(..., description="Email of the owning customer")
    credit_value_total: Decimal = Field(..., description="Requested credit value")


class CreditSummarySchema(BaseModel):
    """Schema for a credit in GET /v1/credits."""

    credit_code: str = Field(..., description="UUID identifying the credit")
    credit_value: Decimal = Field(..., description="Credit value")
    number_of_installments: int = Field(..., ge=0, description="Number of installments")


class CreditDetailSchema(BaseModel):
    """Schema for GET /v1/credits/{credit_code} response body."""

    credit_code: str = Field(..., description="UUID identifying the credit")
    credit_value: Decimal = Field(..., description="Credit value")
    number_of_installments: int = Field(..., ge=0, description="Number of installments")
    status: str = Field(..., description="Credit status", examples=["IN_PROGRESS"])
    email_customer: str = Field(..., description="Email of the owning customer")
    income_customer: Decimal = Field(..., description="Income of the owning customer")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "credit_code": "6a86dcf5-38cd-45bf-bea6-864e6204df4c",
                    "credit_value": "1000000.00",
                    "number_of_installments": 3,
                    "status": "IN_PROGRESS",
                    "email_customer": "gabgalera@hotmail.com",
                    "income_customer": "1000.00",
                }
            ]
        }
    )
