"""
Data models for the priority engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class Tier(Enum):
    """Priority tiers, highest first."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    DEFERRED = "Deferred"


def _as_list(raw) -> list:
    """Frontmatter lists are sometimes written as a single scalar."""
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def _normalize_dependencies(raw) -> list[str]:
    deps = [str(d) for d in _as_list(raw) if d is not None]
    # A lone empty entry is how templates spell "no dependencies"
    if deps == [""]:
        return []
    return deps


def _optional_str(raw) -> Optional[str]:
    return None if raw is None else str(raw)


def _parse_score(raw) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


@dataclass
class Requirement:
    """A tracked requirement, as read from its YAML frontmatter.

    Only the fields the priority engine consumes are modelled; everything
    else in the frontmatter is ignored.
    """
    id: str
    dependencies: list[str] = field(default_factory=list)
    status: str = ""
    foundational: bool = False
    blocking: bool = False
    hierarchy: Optional[str] = None            # "system-level" gets a bonus
    category: Optional[str] = None             # "infrastructure" gets a bonus
    safety_related: bool = False
    compliance_standards: list[str] = field(default_factory=list)
    risk_level: Optional[str] = None           # "Critical" | "High"
    validation_required: bool = False
    priority: Optional[str] = None             # Persisted tier label
    priority_score: Optional[float] = None     # Persisted score, drift checks only
    file_path: Optional[Path] = None

    def __post_init__(self):
        self.dependencies = _normalize_dependencies(self.dependencies)
        self.compliance_standards = [str(s) for s in _as_list(self.compliance_standards)]

    @classmethod
    def from_frontmatter(
        cls,
        data: dict,
        category: Optional[str] = None,
        file_path: Optional[Path] = None,
    ) -> "Requirement":
        """Build a Requirement from a parsed frontmatter dict.

        The category argument wins over any category key in the frontmatter.
        Badly typed values are coerced rather than rejected: a scalar where a
        list belongs becomes a one-item list, and a non-numeric priorityScore
        counts as missing.
        """
        return cls(
            id=str(data["id"]),
            dependencies=data.get("dependencies"),
            status=str(data.get("status") or ""),
            foundational=bool(data.get("foundational")),
            blocking=bool(data.get("blocking")),
            hierarchy=_optional_str(data.get("hierarchy")),
            category=category if category is not None else _optional_str(data.get("category")),
            safety_related=bool(data.get("safetyRelated")),
            compliance_standards=data.get("complianceStandards"),
            risk_level=_optional_str(data.get("riskLevel")),
            validation_required=bool(data.get("validationRequired")),
            priority=_optional_str(data.get("priority")),
            priority_score=_parse_score(data.get("priorityScore")),
            file_path=file_path,
        )


@dataclass
class DependencyStatus:
    """Whether a requirement's dependencies are all done."""
    satisfied: bool
    pending: list[str] = field(default_factory=list)


class PriorityAssignment(BaseModel):
    """Computed priority for one requirement."""
    id: str
    score: float
    tier: Tier
    indicators: str = ""
    propagated_score: float
    depth: int = 0
    pending: list[str] = []


@dataclass
class PriorityIssue:
    """A problem reported by priority validation."""
    id: str
    kind: str  # "score_drift" or "critical_unmet"
    message: str
