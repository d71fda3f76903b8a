"""Plan configuration registry — column bindings per plan type."""

from __future__ import annotations

from dataclasses import dataclass

from assigner.domain.value_objects.enums import PlanType


class UnknownPlanTypeError(ValueError):
    def __init__(self, label: str) -> None:
        known = ", ".join(p.value for p in PlanType.known())
        super().__init__(f"Unknown plan type '{label}'. Expected one of: {known}")
        self.label = label


@dataclass(frozen=True)
class PlanConfiguration:
    """Which row fields carry dates, hours and the assignee for one plan type."""

    start_date_field: str
    end_date_field: str
    resource_field: str
    hours_field: str
    available_hours_field: str
    module_field: str
    project_field: str
    plan_date_field: str
    resource_title: str
    resources_title: str
    assigned_title: str = "Asignado"
    skill_field: str = "grupo_dev"
    use_group_based_assignment: bool = False


@dataclass(frozen=True)
class PlanResolution:
    """Result of resolving a plan-type label.

    ``plan_type`` is ``PlanType.UNRECOGNIZED`` when the label matched nothing;
    ``config`` is then the development plan.
    """

    plan_type: PlanType
    config: PlanConfiguration

    @property
    def recognized(self) -> bool:
        return self.plan_type is not PlanType.UNRECOGNIZED


_COMMON = {
    "resource_field": "abap_asignado",
    "available_hours_field": "esfu_disponible",
    "module_field": "modulo",
    "project_field": "proyecto",
}

PLAN_CONFIGURATIONS: dict[PlanType, PlanConfiguration] = {
    PlanType.DEVELOPMENT: PlanConfiguration(
        start_date_field="plan_abap_dev_ini",
        end_date_field="plan_abap_dev_fin",
        hours_field="plan_abap_dev_time",
        plan_date_field="plan_abap_dev_ini",
        resource_title="ABAP Developer",
        resources_title="ABAP Developers",
        **_COMMON,
    ),
    PlanType.PRODUCTIVE_SUPPORT: PlanConfiguration(
        start_date_field="plan_abap_pu_ini",
        end_date_field="plan_abap_pu_fin",
        hours_field="plan_abap_pu_time",
        plan_date_field="plan_abap_pu_ini",
        resource_title="ABAP PU",
        resources_title="ABAP PUs",
        **_COMMON,
    ),
    PlanType.TEST: PlanConfiguration(
        start_date_field="available_test_date",
        end_date_field="available_test_date",
        hours_field="plan_abap_dev_time",
        plan_date_field="available_test_date",
        resource_title="ABAP Test",
        resources_title="ABAP Testers",
        **_COMMON,
    ),
}

DEFAULT_PLAN_TYPE = PlanType.DEVELOPMENT


def resolve_plan(label: str | None) -> PlanResolution:
    """Look up a plan by its exact label, tagging misses as UNRECOGNIZED."""
    for plan_type in PlanType.known():
        if label == plan_type.value:
            return PlanResolution(plan_type=plan_type, config=PLAN_CONFIGURATIONS[plan_type])
    return PlanResolution(
        plan_type=PlanType.UNRECOGNIZED,
        config=PLAN_CONFIGURATIONS[DEFAULT_PLAN_TYPE],
    )


def resolve(label: str | None) -> PlanConfiguration:
    """Permissive lookup: unknown labels silently get the development plan."""
    return resolve_plan(label).config


def resolve_strict(label: str | None) -> PlanResolution:
    resolution = resolve_plan(label)
    if not resolution.recognized:
        raise UnknownPlanTypeError(str(label))
    return resolution
