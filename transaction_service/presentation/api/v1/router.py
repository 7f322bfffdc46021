from fastapi import APIRouter

from .transactions import transaction_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(transaction_router, tags=["Transactions"])
