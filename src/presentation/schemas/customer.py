"""Customer-related Pydantic schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, ConfigDict


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
CPF_PATTERN = r"^\d{3}\.?\d{3}\.?\d{3}-?\d{2}$"


class CustomerUpdateSchema(BaseModel):
    """Schema for PATCH /v1/customers request body."""

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer's first name",
        examples=["Gabriel"],
    )
    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer's last name",
        examples=["Galera"],
    )
    income: Decimal = Field(
        ...,
        ge=0,
        max_digits=14,
        decimal_places=2,
        description="Monthly income",
        examples=["1000.00"],
    )
    zip_code: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Postal code",
        examples=["88888333"],
    )
    street: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Street address",
        examples=["Rua dos Galeras"],
    )

    @field_validator("first_name", "last_name", "zip_code", "street")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values made only of whitespace."""
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v.strip()


class CustomerRequestSchema(CustomerUpdateSchema):
    """Schema for POST /v1/customers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "first_name": "Gabriel",
                    "last_name": "Galera",
                    "cpf": "44444444433",
                    "income": "1000.00",
                    "email": "gabgalera@hotmail.com",
                    "password": "minhaSenha",
                    "zip_code": "88888333",
                    "street": "Rua dos Galeras",
                }
            ]
        }
    )

    cpf: str = Field(
        ...,
        pattern=CPF_PATTERN,
        description="Brazilian taxpayer id, digits with optional punctuation",
        examples=["44444444433"],
    )
    email: str = Field(
        ...,
        max_length=255,
        pattern=EMAIL_PATTERN,
        description="Contact email, unique per customer",
        examples=["gabgalera@hotmail.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer credential",
    )


class CustomerResponseSchema(BaseModel):
    """Schema for customer responses."""

    id: int = Field(
        ...,
        description="Numeric id of the customer",
        examples=[1],
    )
    first_name: str = Field(..., description="Customer's first name")
    last_name: str = Field(..., description="Customer's last name")
    cpf: str = Field(..., description="Brazilian taxpayer id")
    income: Decimal = Field(..., description="Monthly income")
    email: str = Field(..., description="Contact email")
    zip_code: str = Field(..., description="Postal code")
    street: str = Field(..., description="Street address")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "first_name": "Gabriel",
                    "last_name": "Galera",
                    "cpf": "44444444433",
                    "income": "1000.00",
                    "email": "gabgalera@hotmail.com",
                    "zip_code": "88888333",
                    "street": "Rua dos Galeras",
                }
            ]
        }
    )
