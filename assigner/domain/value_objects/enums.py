"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class PlanType(str, Enum):
    DEVELOPMENT = "Plan de Desarrollo"
    PRODUCTIVE_SUPPORT = "Plan de PU"
    TEST = "Plan de Test"
    # Tag for labels that matched none of the known plans
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def known(cls) -> tuple["PlanType", ...]:
        return tuple(p for p in cls if p is not cls.UNRECOGNIZED)
