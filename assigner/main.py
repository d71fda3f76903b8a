"""Resource Assigner — FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assigner.config import settings
from assigner.infrastructure.api.routes_assignments import router as assignments_router
from assigner.infrastructure.api.routes_calendar import router as calendar_router
from assigner.infrastructure.api.routes_health import router as health_router
from assigner.infrastructure.api.routes_upload import router as upload_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(levelname)s | %(message)s",
    )

    app = FastAPI(
        title="Resource Assigner",
        description="Priority-ordered, capacity- and skill-aware task assignment for SAP plans",
        version="0.1.0",
        debug=settings.debug,
    )

    # CORS for the planning frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(assignments_router, prefix="/api")
    app.include_router(upload_router, prefix="/api")
    app.include_router(calendar_router, prefix="/api")

    logger.info("Resource Assigner ready (default plan: %s)", settings.default_plan_type)
    return app


app = create_app()
