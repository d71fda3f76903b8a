"""Health check endpoint."""

from fastapi import APIRouter

from assigner.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Check that the API is up and report the planning defaults."""
    return {
        "status": "ok",
        "default_plan_type": settings.default_plan_type,
        "strict_plan_types": settings.strict_plan_types,
        "service": "Resource Assigner",
    }
