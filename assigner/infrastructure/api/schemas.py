"""Request bodies for the JSON endpoints."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from assigner.config import settings


class CalculateAssignmentsRequest(BaseModel):
    data: list[dict[str, Any]]
    plan_type: str = Field(default_factory=lambda: settings.default_plan_type)


class UploadParsedRequest(BaseModel):
    # Left untyped so the use case can report a bad shape with its own message
    data: Any = None


class WorkingDayRequest(BaseModel):
    day: date = Field(alias="date")
    holidays: dict[str, str] = Field(default_factory=dict)
    weekend_days: list[int] | None = Field(default=None, description="weekday() numbers, Monday=0")
