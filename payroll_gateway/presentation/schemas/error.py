"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["CREDIT_MARGIN_EXCEEDED"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=[
            "Requested amount (R$ 2000.00) exceeds the available credit margin (R$ 1750.00)"
        ],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
