from fastapi import APIRouter

from .loan import loan_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(loan_router, tags=["Loans"])
