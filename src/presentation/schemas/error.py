"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["CREDIT_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Creditcode 6a86dcf5-38cd-45bf-bea6-864e6204df4c not found"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "CREDIT_ACCESS_DENIED",
                    "message": "Contact admin",
                    "request_id": "abc123",
                }
            ]
        }
    }
