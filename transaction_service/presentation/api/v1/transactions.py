"""Transaction API endpoints."""

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response

from transaction_service.application.dto import (
    TransactionCreateRequest,
    TransactionPatch,
    TransactionResponse,
)
from transaction_service.application.services import TransactionService
from transaction_service.core.config import settings
from transaction_service.core.dependencies import get_transaction_service
from transaction_service.presentation.schemas import (
    ErrorResponseSchema,
    TransactionCreateSchema,
    TransactionPageSchema,
    TransactionResponseSchema,
    TransactionUpdateSchema,
)

transaction_router = APIRouter(
    prefix="/api/v1/transactions",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)

TransactionId = Annotated[
    UUID,
    Path(description="UUID of the transaction"),
]


def _to_schema(response: TransactionResponse) -> TransactionResponseSchema:
    return TransactionResponseSchema(
        id=response.id,
        amount=response.amount,
        description=response.description,
        type=response.type,
        account_number=response.account_number,
        timestamp=response.timestamp,
        status=response.status,
    )


@transaction_router.post(
    "",
    response_model=TransactionResponseSchema,
    status_code=201,
    summary="Create Transaction",
    description="""
    Record a new transaction in PENDING status.

    Rejected with 409 if an identical transaction (same account, amount,
    description and type) was recorded within the last 10 seconds.
    """,
    responses={
        201: {"description": "Transaction created"},
        409: {"model": ErrorResponseSchema, "description": "Duplicate transaction"},
    },
)
async def create_transaction(
    request: TransactionCreateSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionResponseSchema:
    dto = TransactionCreateRequest(
        amount=request.amount,
        description=request.description,
        type=request.type,
        account_number=request.account_number,
    )

    response = await transaction_service.create_transaction(dto)

    return _to_schema(response)


@transaction_router.get(
    "",
    response_model=List[TransactionResponseSchema],
    summary="List Transactions",
    description="Return every stored transaction in no particular order.",
)
async def get_all_transactions(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> List[TransactionResponseSchema]:
    responses = await transaction_service.get_all_transactions()

    return [_to_schema(response) for response in responses]


# Declared before /{transaction_id} so "paged" is not parsed as an id
@transaction_router.get(
    "/paged",
    response_model=TransactionPageSchema,
    summary="List Transactions (Paged)",
    description="Return one page of transactions ordered newest first.",
)
async def get_transactions_paginated(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
    page: Annotated[
        int,
        Query(ge=0, description="Zero-based page index"),
    ] = 0,
    size: Annotated[
        int,
        Query(ge=1, description="Number of transactions per page"),
    ] = settings.default_page_size,
) -> TransactionPageSchema:
    page_response = await transaction_service.get_transactions_page(page, size)

    return TransactionPageSchema(
        content=[_to_schema(item) for item in page_response.content],
        page_number=page_response.page_number,
        page_size=page_response.page_size,
        total_elements=page_response.total_elements,
        total_pages=page_response.total_pages,
        first=page_response.first,
        last=page_response.last,
    )


@transaction_router.get(
    "/{transaction_id}",
    response_model=TransactionResponseSchema,
    summary="Get Transaction",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)
async def get_transaction(
    transaction_id: TransactionId,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionResponseSchema:
    response = await transaction_service.get_transaction_by_id(transaction_id)

    return _to_schema(response)


@transaction_router.put(
    "/{transaction_id}",
    response_model=TransactionResponseSchema,
    summary="Update Transaction",
    description="""
    Partially update a transaction. Only the fields present in the body
    change; id and timestamp are never modified.
    """,
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
        409: {"model": ErrorResponseSchema, "description": "Duplicate transaction"},
    },
)
async def update_transaction(
    transaction_id: TransactionId,
    request: TransactionUpdateSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionResponseSchema:
    patch = TransactionPatch(
        amount=request.amount,
        description=request.description,
        type=request.type,
        account_number=request.account_number,
        status=request.status,
    )

    response = await transaction_service.update_transaction(transaction_id, patch)

    return _to_schema(response)


@transaction_router.delete(
    "/{transaction_id}",
    status_code=204,
    summary="Delete Transaction",
    responses={
        204: {"description": "Transaction deleted"},
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: TransactionId,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> Response:
    await transaction_service.delete_transaction(transaction_id)

    return Response(status_code=204)
