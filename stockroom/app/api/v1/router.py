from fastapi import APIRouter

from stockroom.app.api.v1.endpoints.health import router as health_router
from stockroom.app.api.v1.endpoints.items import router as items_router
from stockroom.app.api.v1.endpoints.purchases import router as purchases_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(items_router, tags=["items"])
router.include_router(purchases_router, tags=["purchases"])
