"""CalculateAssignmentsUseCase — full pipeline: plan → extract → assign → project."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from assigner.adapters.tabular.extractor import extract_resources, extract_tasks
from assigner.adapters.tabular.projector import project_assignments
from assigner.application.ports.clock_port import ClockPort
from assigner.domain.entities.resource import Resource
from assigner.domain.policies.assignment import assign_tasks
from assigner.domain.value_objects.plan_config import (
    DEFAULT_PLAN_TYPE,
    PlanResolution,
    resolve_plan,
    resolve_strict,
)

logger = logging.getLogger(__name__)


@dataclass
class AssignmentReport:
    """Summary of one assignment run."""

    rows: list[dict]
    plan_type: str
    plan_recognized: bool
    assigned_count: int = 0
    preassigned_count: int = 0
    unassigned_task_ids: list[str] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)


class CalculateAssignmentsUseCase:
    """Orchestrates one assignment run over a batch of plan rows."""

    def __init__(self, clock: ClockPort, strict_plan_types: bool = False):
        self._clock = clock
        self._strict = strict_plan_types

    def _resolve(self, plan_type: str | None) -> PlanResolution:
        if self._strict:
            return resolve_strict(plan_type)
        resolution = resolve_plan(plan_type)
        if not resolution.recognized:
            logger.warning(
                "Unknown plan type %r, falling back to %s",
                plan_type, DEFAULT_PLAN_TYPE.value,
            )
        return resolution

    def execute(
        self, rows: Sequence[Mapping[str, object]], plan_type: str | None
    ) -> AssignmentReport:
        """Assign resources to the task rows of a plan.

        Pipeline:
        1. Resolve the plan configuration (column bindings)
        2. Extract resources and prioritized tasks
        3. Greedy assignment in priority order
        4. Project assignees back onto the original rows

        Raises:
            UnknownPlanTypeError: only in strict mode.
        """
        resolution = self._resolve(plan_type)
        if not rows:
            return AssignmentReport(
                rows=[],
                plan_type=resolution.plan_type.value,
                plan_recognized=resolution.recognized,
            )

        config = resolution.config
        now = self._clock.now()

        resources = extract_resources(rows, config)
        tasks = extract_tasks(rows, config, now)
        preassigned = sum(1 for t in tasks if t.is_assigned)

        outcome = assign_tasks(tasks, resources)
        output_rows = project_assignments(outcome.tasks, rows, config)

        unassigned = [t.id for t in outcome.unassigned]
        assigned_count = len(outcome.tasks) - len(unassigned) - preassigned
        logger.info(
            "Plan %s: %d tasks, %d newly assigned, %d pre-assigned, %d unassigned across %d %s",
            resolution.plan_type.value, len(outcome.tasks), assigned_count,
            preassigned, len(unassigned), len(outcome.resources), config.resources_title,
        )

        return AssignmentReport(
            rows=output_rows,
            plan_type=resolution.plan_type.value,
            plan_recognized=resolution.recognized,
            assigned_count=assigned_count,
            preassigned_count=preassigned,
            unassigned_task_ids=unassigned,
            resources=outcome.resources,
        )
