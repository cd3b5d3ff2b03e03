from fastapi import APIRouter

from .credit import credit_router
from .health import health_router
from .orders import orders_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(credit_router, tags=["Credit"])
router.include_router(orders_router, tags=["Orders"])
