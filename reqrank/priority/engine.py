"""
Priority engine: one scoring pass over a requirement set.

Builds the dependency index and a propagation run once, then derives the
dynamic score, tier and indicators for every requirement. Nothing is cached
between calls; score the same snapshot twice and you get the same result.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from reqrank.lib.constants import (
    DEFAULT_SCORE,
    SCORE_DRIFT_TOLERANCE,
)
from reqrank.priority.depth import dependency_depth
from reqrank.priority.dynamic import dynamic_score
from reqrank.priority.index import DependencyIndex
from reqrank.priority.models import (
    DependencyStatus,
    PriorityAssignment,
    PriorityIssue,
    Requirement,
    Tier,
)
from reqrank.priority.propagate import PropagationRun
from reqrank.priority.tiers import score_to_tier

logger = logging.getLogger(__name__)

INDICATOR_FOUNDATIONAL = "🏗️"
INDICATOR_SAFETY = "🏥"
INDICATOR_BLOCKING = "🚧"
INDICATOR_DEPTH = "🔗"
INDICATOR_PENDING = "⏳"


def build_indicators(requirement: Requirement, depth: int, status: DependencyStatus) -> str:
    """Short marker string: flags, dependency depth, unmet dependencies."""
    parts = []
    if requirement.foundational:
        parts.append(INDICATOR_FOUNDATIONAL)
    if requirement.safety_related:
        parts.append(INDICATOR_SAFETY)
    if requirement.blocking:
        parts.append(INDICATOR_BLOCKING)
    if depth > 0:
        parts.append(f"{INDICATOR_DEPTH}{depth}")
    if not status.satisfied:
        parts.append(INDICATOR_PENDING)
    return "".join(parts)


@dataclass
class PriorityRun:
    """Results of scoring a requirement set."""
    index: DependencyIndex
    assignments: list[PriorityAssignment] = field(default_factory=list)

    def __post_init__(self):
        self._by_id = {}
        for assignment in self.assignments:
            self._by_id.setdefault(assignment.id, assignment)

    def get(self, req_id: str) -> Optional[PriorityAssignment]:
        """First assignment for req_id."""
        return self._by_id.get(req_id)

    def pairs(self) -> list[tuple[Requirement, PriorityAssignment]]:
        """Each scored requirement with its own assignment.

        Unlike get(), this keeps records that share an id apart.
        """
        return list(zip(self.index.requirements, self.assignments))

    def counts(self) -> dict[Tier, int]:
        """Number of requirements per tier, every tier present."""
        counts = {tier: 0 for tier in Tier}
        for assignment in self.assignments:
            counts[assignment.tier] += 1
        return counts

    def groups(self) -> dict[Tier, list[PriorityAssignment]]:
        """Assignments per tier, highest score first."""
        groups: dict[Tier, list[PriorityAssignment]] = {tier: [] for tier in Tier}
        for assignment in self.assignments:
            groups[assignment.tier].append(assignment)
        for items in groups.values():
            items.sort(key=lambda a: a.score, reverse=True)
        return groups


def score_requirements(requirements: Iterable[Requirement]) -> PriorityRun:
    """Compute score, tier and indicators for every requirement with an id."""
    index = DependencyIndex(requirements)
    propagation = PropagationRun(index)
    propagation.run()

    assignments = []
    for req in index.requirements:
        status = index.dependency_status(req)
        depth = dependency_depth(index, req.id)
        # Scores sit on a 0.1 grid; rounding only strips float noise
        score = round(dynamic_score(propagation, req, index), 1)
        assignments.append(PriorityAssignment(
            id=req.id,
            score=score,
            tier=score_to_tier(score),
            indicators=build_indicators(req, depth, status),
            propagated_score=round(propagation.get(req.id, DEFAULT_SCORE), 1),
            depth=depth,
            pending=status.pending,
        ))

    logger.debug(f"Scored {len(assignments)} requirements")
    return PriorityRun(index=index, assignments=assignments)


def score_changed(requirement: Requirement, new_score: float) -> bool:
    """True when the persisted score drifted from the computed one."""
    current = requirement.priority_score
    if current is None:
        current = DEFAULT_SCORE
    return abs(current - new_score) > SCORE_DRIFT_TOLERANCE


def validate_priorities(run: PriorityRun) -> list[PriorityIssue]:
    """Compare persisted priorities against a fresh scoring run."""
    issues = []
    for req, assignment in run.pairs():
        if assignment.pending and req.priority == Tier.CRITICAL.value:
            issues.append(PriorityIssue(
                id=req.id,
                kind="critical_unmet",
                message=(
                    f"Critical priority but has unmet dependencies: "
                    f"{', '.join(assignment.pending)}"
                ),
            ))

        if score_changed(req, assignment.score):
            current = req.priority_score if req.priority_score is not None else DEFAULT_SCORE
            issues.append(PriorityIssue(
                id=req.id,
                kind="score_drift",
                message=(
                    f"Priority score mismatch - current: {current}, "
                    f"calculated: {assignment.score}"
                ),
            ))

    return issues
