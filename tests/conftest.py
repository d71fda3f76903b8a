"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from assigner.domain.value_objects.plan_config import PLAN_CONFIGURATIONS
from assigner.domain.value_objects.enums import PlanType

# Every priority in the tests is computed relative to this instant
FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def dev_config():
    return PLAN_CONFIGURATIONS[PlanType.DEVELOPMENT]


@pytest.fixture
def roster_rows():
    """Two people listed on rows without a project (roster-only rows)."""
    return [
        {"id": "r1", "abap_asignado": "Ana", "grupo_dev": "FI", "esfu_disponible": 40},
        {"id": "r2", "abap_asignado": "Bruno", "grupo_dev": "SD", "esfu_disponible": 20},
    ]
