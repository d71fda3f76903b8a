"""LoadBalancingPolicy — pick the least-loaded candidate."""

from __future__ import annotations

from assigner.domain.entities.resource import Resource


def pick_least_loaded(candidates: list[Resource]) -> Resource:
    """Deterministic pick of the resource with the lowest load percentage.

    ``sorted`` is stable, so equal loads keep the candidates' original order
    and the first one encountered wins.

    Raises:
        ValueError: if candidates list is empty.
    """
    if not candidates:
        raise ValueError("Cannot pick from an empty candidate list")

    return sorted(candidates, key=lambda r: r.current_load)[0]
