"""Row extractors — build resources and tasks from plan rows."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from datetime import datetime

from assigner.domain.entities.resource import Resource
from assigner.domain.entities.task import Task
from assigner.domain.policies.priority import calculate_priority, order_for_scheduling
from assigner.domain.value_objects.cells import (
    parse_datetime,
    to_number,
    to_resource_name,
    to_text,
)
from assigner.domain.value_objects.plan_config import PlanConfiguration

logger = logging.getLogger(__name__)

ROW_ID_FIELD = "id"

Row = Mapping[str, object]


def derive_row_id(row: Row, index: int) -> str:
    """Task id of a row: its ``id`` cell, or its position in the input."""
    return to_text(row.get(ROW_ID_FIELD)) or str(index)


def extract_resources(rows: Sequence[Row], config: PlanConfiguration) -> list[Resource]:
    """Fold rows into one resource per distinct, non-sentinel assignee name.

    Skills accumulate without duplicates; available hours keep the maximum
    seen. Order is first encounter.
    """
    resources: dict[str, Resource] = {}
    for row in rows:
        name = to_resource_name(row.get(config.resource_field))
        if name is None:
            continue
        available_hours = to_number(row.get(config.available_hours_field))
        skill = to_text(row.get(config.skill_field)) or None

        existing = resources.get(name)
        if existing is None:
            resources[name] = Resource(
                name=name,
                available_hours=available_hours,
                skills=(skill,) if skill else (),
            )
        else:
            resources[name] = existing.merge(skill, available_hours)

    logger.info("Extracted %d resources from %d rows", len(resources), len(rows))
    return list(resources.values())


def is_task_row(row: Row, config: PlanConfiguration) -> bool:
    return bool(to_text(row.get(config.project_field))) and to_number(row.get(config.hours_field)) > 0


def build_task(row: Row, index: int, config: PlanConfiguration, now: datetime) -> Task:
    return Task(
        id=derive_row_id(row, index),
        project=to_text(row.get(config.project_field)),
        module=to_text(row.get(config.module_field)) if config.module_field else "",
        hours=to_number(row.get(config.hours_field)),
        priority=calculate_priority(row, now),
        start_date=parse_datetime(row.get(config.start_date_field)),
        end_date=parse_datetime(row.get(config.end_date_field)),
        assigned_resource=to_resource_name(row.get(config.resource_field)),
        row_index=index,
    )


def extract_tasks(rows: Sequence[Row], config: PlanConfiguration, now: datetime) -> list[Task]:
    """Task rows in scheduling order (priority DESC, start date ASC)."""
    tasks = [
        build_task(row, index, config, now)
        for index, row in enumerate(rows)
        if is_task_row(row, config)
    ]
    dropped = len(rows) - len(tasks)
    if dropped:
        logger.info("Skipped %d rows without project or hours", dropped)
    duplicates = sorted(tid for tid, n in Counter(t.id for t in tasks).items() if n > 1)
    if duplicates:
        logger.warning("Duplicate task ids %s, matching rows by position", duplicates)
    undated = sum(1 for t in tasks if t.start_date is None)
    if undated:
        logger.warning("%d tasks have no parsable start date, scheduling them last", undated)
    return order_for_scheduling(tasks)
