"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from transaction_service import __version__
from transaction_service.core.dependencies import (
    get_cache_manager,
    get_transaction_repository,
)
from transaction_service.domain.interfaces import TransactionRepository
from transaction_service.infrastructure.cache import CacheManager

health_router = APIRouter()


class CacheHealth(BaseModel):
    name: str
    size: int
    max_size: int
    hit_rate: float


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    stored_transactions: int = Field(..., ge=0)
    caches: list[CacheHealth]


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the service status, store size and cache occupancy.",
)
async def health_check(
    repository: Annotated[TransactionRepository, Depends(get_transaction_repository)],
    caches: Annotated[CacheManager, Depends(get_cache_manager)],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        stored_transactions=await repository.count(),
        caches=[
            CacheHealth(
                name=stats.name,
                size=stats.size,
                max_size=stats.max_size,
                hit_rate=round(stats.hit_rate, 4),
            )
            for stats in caches.stats()
        ],
    )
