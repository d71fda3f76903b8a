"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from assigner.adapters.clock.system_clock import SystemClock
from assigner.application.use_cases.calculate_assignments import CalculateAssignmentsUseCase
from assigner.application.use_cases.normalize_upload import NormalizeUploadUseCase
from assigner.config import settings

# Stateless adapter, shared across requests
_clock = SystemClock()


def get_calculate_assignments_uc() -> CalculateAssignmentsUseCase:
    return CalculateAssignmentsUseCase(
        clock=_clock,
        strict_plan_types=settings.strict_plan_types,
    )


def get_normalize_upload_uc() -> NormalizeUploadUseCase:
    return NormalizeUploadUseCase()
