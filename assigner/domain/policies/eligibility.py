"""EligibilityPolicy — can a resource take a task?"""

from collections.abc import Iterable

from assigner.domain.entities.resource import Resource
from assigner.domain.entities.task import Task


def skill_matches(skills: Iterable[str], module: str) -> bool:
    """True if any skill and the module contain one another, ignoring case.

    A resource without skills matches every module.
    """
    skills = tuple(skills)
    if not skills:
        return True
    module_key = module.lower()
    return any(
        skill.lower() in module_key or module_key in skill.lower()
        for skill in skills
    )


def is_eligible(resource: Resource, task: Task) -> bool:
    return resource.has_capacity_for(task.hours) and skill_matches(resource.skills, task.module)
