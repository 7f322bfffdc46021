"""Pydantic schema for API error responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    timestamp: datetime = Field(
        ...,
        description="When the error occurred (UTC)",
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[404],
    )
    error: str = Field(
        ...,
        description="HTTP reason phrase",
        examples=["Not Found"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Transaction not found with id: 550e8400-e29b-41d4-a716-446655440000"],
    )
    path: str = Field(
        ...,
        description="Request path that produced the error",
        examples=["/api/v1/transactions/550e8400-e29b-41d4-a716-446655440000"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "timestamp": "2025-09-17T12:00:00Z",
                    "status": 404,
                    "error": "Not Found",
                    "message": "Transaction not found with id: 550e8400-e29b-41d4-a716-446655440000",
                    "path": "/api/v1/transactions/550e8400-e29b-41d4-a716-446655440000",
                }
            ]
        }
    }
