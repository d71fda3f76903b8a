"""AssignmentPolicy — greedy capacity- and skill-aware task assignment.

Tasks are processed strictly in the order given (the scheduling order from
the priority policy). Each task is a single step of a fold whose accumulator
is the resource pool, so the caller's resources are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

from assigner.domain.entities.resource import Resource
from assigner.domain.entities.task import Task
from assigner.domain.policies.eligibility import is_eligible
from assigner.domain.policies.load_balancing import pick_least_loaded

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentState:
    """Accumulator threaded through the task sequence."""

    resources: tuple[Resource, ...]
    tasks: tuple[Task, ...] = ()

    def skip(self, task: Task) -> AssignmentState:
        return AssignmentState(resources=self.resources, tasks=self.tasks + (task,))

    def commit(self, task: Task, resource: Resource) -> AssignmentState:
        updated = resource.commit(task.hours)
        resources = tuple(updated if r.name == resource.name else r for r in self.resources)
        return AssignmentState(
            resources=resources,
            tasks=self.tasks + (task.assign_to(resource.name),),
        )


@dataclass(frozen=True)
class AssignmentOutcome:
    tasks: list[Task]
    resources: list[Resource]

    @property
    def unassigned(self) -> list[Task]:
        return [t for t in self.tasks if not t.is_assigned]


def assign_task(state: AssignmentState, task: Task) -> AssignmentState:
    """One fold step: keep pre-assigned tasks, otherwise bind the least-loaded eligible resource."""
    if task.is_assigned:
        return state.skip(task)

    eligible = [r for r in state.resources if is_eligible(r, task)]
    if not eligible:
        logger.info(
            "Task %s (%s, %.1fh): no eligible resource, left unassigned",
            task.id, task.module or "-", task.hours,
        )
        return state.skip(task)

    chosen = pick_least_loaded(eligible)
    logger.debug(
        "Task %s → %s (load %.1f%%, %.1fh)",
        task.id, chosen.name, chosen.current_load, task.hours,
    )
    return state.commit(task, chosen)


def assign_tasks(tasks: Iterable[Task], resources: Iterable[Resource]) -> AssignmentOutcome:
    """Assign every unassigned task in order; partial results are expected."""
    final = reduce(assign_task, tasks, AssignmentState(resources=tuple(resources)))
    return AssignmentOutcome(tasks=list(final.tasks), resources=list(final.resources))
