"""
Intrinsic priority scoring.

Scores a requirement from its own attributes only; the dependency graph is
handled by the propagator.

Starting from 5.0:

    foundational                        +1.0
    blocking                            +1.0
    hierarchy == system-level           +0.5
    category == infrastructure          +0.5
    safetyRelated                       +1.0
    any complianceStandards             +0.5
    riskLevel Critical / High           +0.5 / +0.3
    Implemented or Completed            max(score - 1, 2)
    Draft and blocking                  +0.3
    complianceStandards has 21 CFR 11   +0.5
    validationRequired, not Implemented +0.3

The Implemented/Completed floor is applied after the bonuses above it and
before the ones below it.
"""

import math

from reqrank.lib.constants import COMPLIANCE_PART_11, DEFAULT_SCORE
from reqrank.priority.index import is_satisfied_status
from reqrank.priority.models import Requirement

BASE_SCORE = DEFAULT_SCORE
IMPLEMENTED_FLOOR = 2.0


def round_score(score: float) -> float:
    """Round to one decimal, halves going up."""
    return math.floor(score * 10 + 0.5) / 10


def intrinsic_score(requirement: Requirement) -> float:
    """Compute the base score of a requirement without graph traversal."""
    score = BASE_SCORE

    # Foundational
    if requirement.foundational:
        score += 1.0
    if requirement.blocking:
        score += 1.0
    if requirement.hierarchy == "system-level":
        score += 0.5
    if requirement.category == "infrastructure":
        score += 0.5

    # Risk and compliance
    if requirement.safety_related:
        score += 1.0
    if requirement.compliance_standards:
        score += 0.5
    if requirement.risk_level == "Critical":
        score += 0.5
    elif requirement.risk_level == "High":
        score += 0.3

    # Status
    if is_satisfied_status(requirement.status):
        score = max(score - 1, IMPLEMENTED_FLOOR)
    if requirement.status == "Draft" and requirement.blocking:
        score += 0.3

    # Compliance urgency
    if COMPLIANCE_PART_11 in requirement.compliance_standards:
        score += 0.5
    if requirement.validation_required and requirement.status != "Implemented":
        score += 0.3

    return round_score(score)
