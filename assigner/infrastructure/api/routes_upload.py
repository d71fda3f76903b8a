"""Upload endpoint — validate and normalize already-parsed CSV rows."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from assigner.application.use_cases.normalize_upload import (
    NormalizeUploadUseCase,
    UploadValidationError,
)
from assigner.infrastructure.api.dependencies import get_normalize_upload_uc
from assigner.infrastructure.api.schemas import UploadParsedRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])


@router.post("/upload-parsed")
async def upload_parsed(
    body: UploadParsedRequest,
    uc: NormalizeUploadUseCase = Depends(get_normalize_upload_uc),
):
    """Validate SAP project rows parsed by the frontend and normalize dates/numbers."""
    try:
        processed = uc.execute(body.data)
    except UploadValidationError as e:
        logger.warning("Rejected upload: %s", e)
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
    except Exception as e:
        logger.exception("Failed to process parsed CSV data")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e) or "Internal server error"},
        )

    return {
        "success": True,
        "data": processed,
        "message": f"Successfully processed {len(processed)} SAP project records",
    }
