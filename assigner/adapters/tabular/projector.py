"""Result projector — write assignment decisions back onto the input rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from assigner.adapters.tabular.extractor import derive_row_id
from assigner.domain.entities.task import Task
from assigner.domain.value_objects.plan_config import PlanConfiguration


def project_assignments(
    tasks: Iterable[Task],
    rows: Sequence[Mapping[str, object]],
    config: PlanConfiguration,
) -> list[dict]:
    """Copy every row, overwriting only the assignee column.

    Rows whose task got an assignee take it; all other rows keep their
    original value ("" when the column is missing or empty).

    Tasks that remember their source row are matched by position, so
    duplicate or colliding ids never leak an assignee onto another row.
    Tasks built without a row position fall back to the derived row id.
    """
    by_row: dict[int, str | None] = {}
    by_id: dict[str, str | None] = {}
    for task in tasks:
        if not task.is_assigned:
            continue
        if task.row_index is not None:
            by_row[task.row_index] = task.assigned_resource
        else:
            by_id[task.id] = task.assigned_resource

    projected = []
    for index, row in enumerate(rows):
        out = dict(row)
        if index in by_row:
            assignee = by_row[index]
        else:
            assignee = by_id.get(derive_row_id(row, index))
        out[config.resource_field] = assignee or row.get(config.resource_field) or ""
        projected.append(out)
    return projected
