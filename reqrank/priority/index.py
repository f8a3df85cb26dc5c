"""Dependency lookups over a requirement set."""

import logging
from typing import Iterable, Optional

from reqrank.lib.constants import SATISFIED_STATUSES
from reqrank.priority.models import DependencyStatus, Requirement

logger = logging.getLogger(__name__)


def is_satisfied_status(status: Optional[str]) -> bool:
    return status in SATISFIED_STATUSES


class DependencyIndex:
    """Forward and inverse dependency edges for a requirement set.

    Records without an id are dropped. When two records share an id the
    first one wins for lookups, but both still contribute dependency edges.
    """

    def __init__(self, requirements: Iterable[Requirement]):
        self.requirements: list[Requirement] = [r for r in requirements if r.id]
        self._by_id: dict[str, Requirement] = {}
        self._dependents: dict[str, list[Requirement]] = {}

        for req in self.requirements:
            if req.id in self._by_id:
                logger.warning(f"Duplicate requirement id {req.id}, keeping first")
            else:
                self._by_id[req.id] = req

            # dict.fromkeys keeps order and lists a record once per target
            for dep_id in dict.fromkeys(req.dependencies):
                if dep_id:
                    self._dependents.setdefault(dep_id, []).append(req)

    def __contains__(self, req_id: str) -> bool:
        return req_id in self._by_id

    def __len__(self) -> int:
        return len(self.requirements)

    def get(self, req_id: str) -> Optional[Requirement]:
        return self._by_id.get(req_id)

    def ids(self) -> list[str]:
        """Requirement ids in record-set order."""
        return [r.id for r in self.requirements]

    def dependents(self, req_id: str) -> list[Requirement]:
        """Requirements that list req_id among their dependencies."""
        return self._dependents.get(req_id, [])

    def dependency_status(self, requirement: Requirement) -> DependencyStatus:
        """Check whether every dependency resolves to a done requirement.

        Unknown ids are reported as pending rather than raising.
        """
        pending = []
        for dep_id in requirement.dependencies:
            if not dep_id:
                continue
            dep = self._by_id.get(dep_id)
            if dep is None or not is_satisfied_status(dep.status):
                pending.append(dep_id)
        return DependencyStatus(satisfied=not pending, pending=pending)
