"""Resource entity — a named person with bounded hours and skill tags."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Resource:
    name: str
    available_hours: float
    assigned_hours: float = 0.0
    skills: tuple[str, ...] = ()

    @property
    def current_load(self) -> float:
        """Committed hours as a percentage of available hours.

        A resource with no available hours reports 0.0 so that loads always
        compare.
        """
        if self.available_hours <= 0:
            return 0.0
        return self.assigned_hours / self.available_hours * 100

    def has_capacity_for(self, hours: float) -> bool:
        return self.assigned_hours + hours <= self.available_hours

    def merge(self, skill: str | None, available_hours: float) -> Resource:
        """Fold another row for the same person into this resource."""
        skills = self.skills
        if skill and skill not in skills:
            skills = skills + (skill,)
        return replace(
            self,
            skills=skills,
            available_hours=max(self.available_hours, available_hours),
        )

    def commit(self, hours: float) -> Resource:
        return replace(self, assigned_hours=self.assigned_hours + hours)
