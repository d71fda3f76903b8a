"""Assignment endpoints — run the engine, list plan types."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from assigner.application.use_cases.calculate_assignments import CalculateAssignmentsUseCase
from assigner.domain.value_objects.enums import PlanType
from assigner.domain.value_objects.plan_config import PLAN_CONFIGURATIONS, UnknownPlanTypeError
from assigner.infrastructure.api.dependencies import get_calculate_assignments_uc
from assigner.infrastructure.api.schemas import CalculateAssignmentsRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assignments"])


@router.post("/assignments/calculate")
async def calculate_assignments(
    body: CalculateAssignmentsRequest,
    uc: CalculateAssignmentsUseCase = Depends(get_calculate_assignments_uc),
):
    """Assign resources to every task row and return the rows with assignees."""
    try:
        report = uc.execute(body.data, body.plan_type)
    except UnknownPlanTypeError as e:
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
    except Exception as e:
        logger.exception("Error calculating assignments")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e) or "Internal server error"},
        )

    return {
        "success": True,
        "data": report.rows,
        "message": (
            f"Assigned {report.assigned_count} tasks, "
            f"{len(report.unassigned_task_ids)} left unassigned"
        ),
        "plan_type": report.plan_type,
        "plan_recognized": report.plan_recognized,
        "assigned_count": report.assigned_count,
        "preassigned_count": report.preassigned_count,
        "unassigned_task_ids": report.unassigned_task_ids,
        "resources": [
            {
                "name": r.name,
                "available_hours": r.available_hours,
                "assigned_hours": r.assigned_hours,
                "current_load": round(r.current_load, 2),
                "skills": list(r.skills),
            }
            for r in report.resources
        ],
    }


@router.get("/plans")
async def list_plans():
    """Known plan types with their column bindings and display labels."""
    return {
        "plans": [
            {
                "plan_type": plan_type.value,
                "resource_title": config.resource_title,
                "resources_title": config.resources_title,
                "assigned_title": config.assigned_title,
                "start_date_field": config.start_date_field,
                "end_date_field": config.end_date_field,
                "hours_field": config.hours_field,
                "resource_field": config.resource_field,
            }
            for plan_type, config in PLAN_CONFIGURATIONS.items()
        ],
        "default": PlanType.DEVELOPMENT.value,
    }
