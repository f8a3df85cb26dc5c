"""Dynamic priority: propagated score less the unmet-dependency penalty."""

from reqrank.lib.constants import DEFAULT_SCORE, PENALTY_FLOOR, PENDING_PENALTY
from reqrank.priority.index import DependencyIndex
from reqrank.priority.models import DependencyStatus, Requirement
from reqrank.priority.propagate import PropagationRun


def apply_pending_penalty(propagated: float, status: DependencyStatus) -> float:
    """Apply -2 per pending dependency, never going below 4.

    The penalty is capped at the margin above the floor, so a requirement
    cannot fall out of the Low tier from unmet dependencies alone.
    """
    if status.satisfied:
        return propagated
    penalty = min(len(status.pending) * PENDING_PENALTY, propagated - PENALTY_FLOOR)
    return max(PENALTY_FLOOR, propagated - penalty)


def dynamic_score(run: PropagationRun, requirement: Requirement, index: DependencyIndex) -> float:
    """Score a requirement within an already-run PropagationRun."""
    propagated = run.get(requirement.id, DEFAULT_SCORE)
    return apply_pending_penalty(propagated, index.dependency_status(requirement))
