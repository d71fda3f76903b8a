"""PriorityPolicy — business-rule urgency score for a plan row."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timedelta

from assigner.domain.entities.task import Task
from assigner.domain.value_objects.cells import parse_datetime, to_number, to_text

# NOTE: priority reads these development-plan columns for every plan type,
# so switching plans does not change which fields drive urgency.
PRIORITY_MODULE_FIELD = "modulo"
PRIORITY_HOURS_FIELD = "plan_abap_dev_time"
PRIORITY_START_FIELD = "plan_abap_dev_ini"

CRITICAL_MODULE_MARKERS = ("core", "critical")
LARGE_TASK_HOURS = 40
SOON_DAYS = 7
UPCOMING_DAYS = 30


def days_until(start: datetime, now: datetime) -> int:
    """Whole days from *now* to *start*, rounded up."""
    return math.ceil((start - now) / timedelta(days=1))


def calculate_priority(row: Mapping[str, object], now: datetime) -> int:
    """Pure function: additive priority score for one row.

    Business rules:
      1. Module name contains "core" or "critical"  →  +10.
      2. Development hours above 40  →  +5.
      3. Start within 7 days (including past dates)  →  +15,
         otherwise within 30 days  →  +10.

    An unparseable start date contributes nothing.
    """
    priority = 0

    module_name = to_text(row.get(PRIORITY_MODULE_FIELD)).lower()
    if any(marker in module_name for marker in CRITICAL_MODULE_MARKERS):
        priority += 10

    if to_number(row.get(PRIORITY_HOURS_FIELD)) > LARGE_TASK_HOURS:
        priority += 5

    start = parse_datetime(row.get(PRIORITY_START_FIELD))
    if start is not None:
        days = days_until(start, now)
        if days <= SOON_DAYS:
            priority += 15
        elif days <= UPCOMING_DAYS:
            priority += 10

    return priority


def scheduling_order_key(task: Task) -> tuple:
    """Sort key: priority DESC, then start date ASC with undated tasks last."""
    undated = task.start_date is None
    return (-task.priority, undated, task.start_date.timestamp() if not undated else 0.0)


def order_for_scheduling(tasks: list[Task]) -> list[Task]:
    return sorted(tasks, key=scheduling_order_key)
