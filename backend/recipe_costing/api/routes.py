from fastapi import APIRouter

from recipe_costing.api.health import router as health_router
from recipe_costing.api.summary import router as summary_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(summary_router)
