"""Tests for the resource and task extractors."""

from assigner.adapters.tabular.extractor import (
    derive_row_id,
    extract_resources,
    extract_tasks,
    is_task_row,
)
from assigner.domain.entities.resource import Resource
from assigner.domain.value_objects.enums import PlanType
from assigner.domain.value_objects.plan_config import PLAN_CONFIGURATIONS


def _row(**overrides) -> dict:
    row = {
        "id": "1",
        "proyecto": "PRJ-1",
        "modulo": "FI",
        "plan_abap_dev_time": 10,
        "plan_abap_dev_ini": "2025-03-20",
        "plan_abap_dev_fin": "2025-03-25",
        "abap_asignado": "",
        "esfu_disponible": 0,
        "grupo_dev": "",
    }
    row.update(overrides)
    return row


# ─── derive_row_id ───────────────────────────────────────────────────


def test_row_id_from_id_field():
    assert derive_row_id({"id": "T-7"}, 3) == "T-7"
    assert derive_row_id({"id": 7.0}, 3) == "7"


def test_row_id_falls_back_to_position():
    assert derive_row_id({}, 3) == "3"
    assert derive_row_id({"id": ""}, 0) == "0"


def test_numeric_zero_id_is_kept():
    assert derive_row_id({"id": 0}, 5) == "0"


# ─── extract_resources ───────────────────────────────────────────────


def test_duplicate_rows_merge_into_one_resource(dev_config):
    rows = [
        {"abap_asignado": "Ana", "grupo_dev": "ABAP", "esfu_disponible": 20},
        {"abap_asignado": "Ana", "grupo_dev": "FI", "esfu_disponible": 30},
    ]
    assert extract_resources(rows, dev_config) == [
        Resource(name="Ana", available_hours=30, skills=("ABAP", "FI")),
    ]


def test_available_hours_never_decrease(dev_config):
    rows = [
        {"abap_asignado": "Ana", "esfu_disponible": "30"},
        {"abap_asignado": "Ana", "esfu_disponible": "n/a"},
    ]
    assert extract_resources(rows, dev_config)[0].available_hours == 30


def test_sentinel_names_never_produce_resources(dev_config):
    rows = [{"abap_asignado": name, "esfu_disponible": 10} for name in ("", "None", "nan", None)]
    rows.append({"esfu_disponible": 10})
    assert extract_resources(rows, dev_config) == []


def test_missing_skill_tag_means_no_skills(dev_config):
    resources = extract_resources([{"abap_asignado": "Ana", "esfu_disponible": 8}], dev_config)
    assert resources[0].skills == ()
    assert resources[0].assigned_hours == 0


def test_resources_in_first_encounter_order(dev_config):
    rows = [{"abap_asignado": n} for n in ("Carla", "Ana", "Carla", "Bruno")]
    assert [r.name for r in extract_resources(rows, dev_config)] == ["Carla", "Ana", "Bruno"]


# ─── extract_tasks ───────────────────────────────────────────────────


def test_task_filter(dev_config):
    assert is_task_row(_row(), dev_config) is True
    assert is_task_row(_row(proyecto=""), dev_config) is False
    assert is_task_row(_row(proyecto=None), dev_config) is False
    assert is_task_row(_row(plan_abap_dev_time=0), dev_config) is False
    assert is_task_row(_row(plan_abap_dev_time="abc"), dev_config) is False


def test_extract_task_fields(dev_config, now):
    tasks = extract_tasks([_row(abap_asignado="None")], dev_config, now)
    assert len(tasks) == 1
    task = tasks[0]
    assert task.id == "1"
    assert task.project == "PRJ-1"
    assert task.module == "FI"
    assert task.hours == 10
    assert task.priority == 10
    assert task.start_date.isoformat() == "2025-03-20T00:00:00+00:00"
    assert task.end_date.isoformat() == "2025-03-25T00:00:00+00:00"
    assert task.assigned_resource is None


def test_preassigned_task_keeps_assignee(dev_config, now):
    tasks = extract_tasks([_row(abap_asignado="Ana")], dev_config, now)
    assert tasks[0].assigned_resource == "Ana"


def test_invalid_dates_become_none(dev_config, now):
    tasks = extract_tasks([_row(plan_abap_dev_ini="TBD", plan_abap_dev_fin=None)], dev_config, now)
    assert tasks[0].start_date is None
    assert tasks[0].end_date is None


def test_ids_use_input_position_when_missing(dev_config, now):
    rows = [_row(id=None, proyecto=""), _row(id=None), _row(id=None)]
    assert sorted(t.id for t in extract_tasks(rows, dev_config, now)) == ["1", "2"]


def test_tasks_remember_their_source_row(dev_config, now):
    rows = [_row(id="7", proyecto=""), _row(id="7"), _row(id="7", modulo="SD")]
    tasks = extract_tasks(rows, dev_config, now)
    assert sorted(t.row_index for t in tasks) == [1, 2]
    assert {t.id for t in tasks} == {"7"}


def test_tasks_sorted_by_priority_then_start(dev_config, now):
    rows = [
        _row(id="far", plan_abap_dev_ini="2025-05-01"),
        _row(id="later", plan_abap_dev_ini="2025-03-25"),
        _row(id="urgent", modulo="FI core", plan_abap_dev_ini="2025-03-02"),
        _row(id="sooner", plan_abap_dev_ini="2025-03-15"),
    ]
    ids = [t.id for t in extract_tasks(rows, dev_config, now)]
    assert ids == ["urgent", "sooner", "later", "far"]


def test_productive_support_plan_uses_its_columns(now):
    config = PLAN_CONFIGURATIONS[PlanType.PRODUCTIVE_SUPPORT]
    row = _row(plan_abap_dev_time=0, plan_abap_pu_time=6, plan_abap_pu_ini="2025-03-10")
    tasks = extract_tasks([row], config, now)
    assert tasks[0].hours == 6
    assert tasks[0].start_date.isoformat() == "2025-03-10T00:00:00+00:00"
    # priority still reads the development columns
    assert tasks[0].priority == 10
