"""Dependency-aware priority scoring for requirements.

A requirement always outranks the requirements that depend on it:

    from reqrank.priority import Requirement, score_requirements

    run = score_requirements([
        Requirement(id="REQ-001", foundational=True),
        Requirement(id="REQ-002", dependencies=["REQ-001"], blocking=True),
    ])
    run.get("REQ-001").score   # 6.5
    run.get("REQ-002").score   # 4.0, REQ-001 is not implemented yet
"""

from reqrank.priority.models import (
    Tier,
    Requirement,
    DependencyStatus,
    PriorityAssignment,
    PriorityIssue,
)
from reqrank.priority.index import DependencyIndex
from reqrank.priority.depth import dependency_depth
from reqrank.priority.intrinsic import intrinsic_score
from reqrank.priority.propagate import PropagationRun, propagate_priorities
from reqrank.priority.dynamic import apply_pending_penalty, dynamic_score
from reqrank.priority.tiers import score_to_tier
from reqrank.priority.engine import (
    PriorityRun,
    build_indicators,
    score_requirements,
    score_changed,
    validate_priorities,
)

__all__ = [
    # models
    "Tier",
    "Requirement",
    "DependencyStatus",
    "PriorityAssignment",
    "PriorityIssue",
    # graph
    "DependencyIndex",
    "dependency_depth",
    # scoring
    "intrinsic_score",
    "PropagationRun",
    "propagate_priorities",
    "apply_pending_penalty",
    "dynamic_score",
    "score_to_tier",
    # engine
    "PriorityRun",
    "build_indicators",
    "score_requirements",
    "score_changed",
    "validate_priorities",
]
