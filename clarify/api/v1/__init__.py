"""API v1 package."""

from fastapi import APIRouter

from clarify.api.v1.endpoints import ai, decisions

# Create the main API router
router = APIRouter(prefix="/api/v1")

router.include_router(decisions.router, prefix="/decisions", tags=["decisions"])
router.include_router(ai.router, prefix="/ai", tags=["ai"])
