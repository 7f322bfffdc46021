"""Transaction-related Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from transaction_service.domain.entities import TransactionStatus, TransactionType


def _reject_blank(value: Optional[str], field_name: str) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return value


class TransactionCreateSchema(BaseModel):
    """Schema for POST /api/v1/transactions request body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "amount": 150.75,
                    "description": "Rent",
                    "type": "PAYMENT",
                    "accountNumber": "ACC-1",
                }
            ]
        },
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Transaction amount, strictly positive",
        examples=[150.75],
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Free-form description",
        examples=["Rent"],
    )
    type: TransactionType = Field(
        ...,
        description="Kind of banking event",
        examples=["PAYMENT"],
    )
    account_number: str = Field(
        ...,
        alias="accountNumber",
        min_length=1,
        description="Account the transaction belongs to",
        examples=["ACC-1"],
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Ensure description is not just whitespace."""
        return _reject_blank(v, "description")

    @field_validator("account_number")
    @classmethod
    def validate_account_number(cls, v: str) -> str:
        """Ensure account number is not just whitespace."""
        return _reject_blank(v, "accountNumber")


class TransactionUpdateSchema(BaseModel):
    """
    Schema for PUT /api/v1/transactions/{id} request body.

    Every field is optional; omitted or null fields are left unchanged.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "description": "Rent (October)",
                    "status": "COMPLETED",
                }
            ]
        },
    )

    amount: Optional[Decimal] = Field(
        None,
        gt=0,
        description="New amount, strictly positive",
    )
    description: Optional[str] = Field(
        None,
        min_length=1,
        description="New description",
    )
    type: Optional[TransactionType] = Field(
        None,
        description="New transaction type",
    )
    account_number: Optional[str] = Field(
        None,
        alias="accountNumber",
        min_length=1,
        description="New account number",
    )
    status: Optional[TransactionStatus] = Field(
        None,
        description="New status; any transition is allowed",
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return _reject_blank(v, "description")

    @field_validator("account_number")
    @classmethod
    def validate_account_number(cls, v: Optional[str]) -> Optional[str]:
        return _reject_blank(v, "accountNumber")


class TransactionResponseSchema(BaseModel):
    """Schema for a single transaction in responses."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "amount": "150.75",
                    "description": "Rent",
                    "type": "PAYMENT",
                    "accountNumber": "ACC-1",
                    "timestamp": "2025-09-17T12:00:00Z",
                    "status": "PENDING",
                }
            ]
        },
    )

    id: UUID = Field(..., description="UUID of the transaction")
    amount: Decimal = Field(..., description="Transaction amount")
    description: str = Field(..., description="Free-form description")
    type: TransactionType = Field(..., description="Kind of banking event")
    account_number: str = Field(
        ...,
        alias="accountNumber",
        description="Account the transaction belongs to",
    )
    timestamp: datetime = Field(..., description="Creation instant (UTC)")
    status: TransactionStatus = Field(..., description="Processing status")

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: Decimal) -> str:
        """Emit the amount as an exact decimal string, never a binary float."""
        return str(amount)


class TransactionPageSchema(BaseModel):
    """Schema for GET /api/v1/transactions/paged response."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TransactionResponseSchema] = Field(
        ...,
        description="Transactions on this page, newest first",
    )
    page_number: int = Field(..., alias="pageNumber", ge=0)
    page_size: int = Field(..., alias="pageSize", ge=1)
    total_elements: int = Field(..., alias="totalElements", ge=0)
    total_pages: int = Field(..., alias="totalPages", ge=0)
    first: bool = Field(..., description="Whether this is the first page")
    last: bool = Field(..., description="Whether this is the last page")
