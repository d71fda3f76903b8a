"""Task entity — one plan row that needs a resource."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Task:
    id: str
    project: str
    module: str
    hours: float
    priority: int
    start_date: datetime | None
    end_date: datetime | None
    assigned_resource: str | None = None
    # Position of the source row in the input batch
    row_index: int | None = None

    @property
    def is_assigned(self) -> bool:
        return self.assigned_resource is not None

    def assign_to(self, resource_name: str) -> Task:
        return replace(self, assigned_resource=resource_name)
