"""
prioritization.md generation.

The summary is regenerated from scratch on every update; hand edits to the
file are overwritten.
"""

import logging
import os
from datetime import date
from pathlib import Path

from reqrank.lib.config import ProjectConfig
from reqrank.priority.engine import PriorityRun
from reqrank.priority.models import PriorityAssignment, Requirement, Tier

logger = logging.getLogger(__name__)

TIER_HEADINGS = {
    Tier.CRITICAL: "Critical Priority (P1) - Foundation & Dependencies (Score: 10.0+)",
    Tier.HIGH: "High Priority (P2) - Important Systems (Score: 8.0-9.9)",
    Tier.MEDIUM: "Medium Priority (P3) - Standard Features (Score: 6.0-7.9)",
    Tier.LOW: "Low Priority (P4) - Future Features (Score: 4.0-5.9)",
    Tier.DEFERRED: "Deferred (Score: <4.0)",
}

METHODOLOGY = """\
## Priority Calculation Methodology

### Topological Dependency-Aware Scoring
- **Dependencies get HIGHER priority** than things that depend on them
- **Dependency boost**: +0.5 above the highest-scoring dependent (capped at 15)
- **Unmet dependency penalty**: -2.0 per unsatisfied dependency, never below 4.0

### Intrinsic Property Scoring
- **Base Score**: 5.0
- **Foundational systems**: +1.0
- **Blocking requirements**: +1.0
- **System-level components**: +0.5
- **Infrastructure category**: +0.5
- **Safety-related**: +1.0
- **Compliance standards**: +0.5 (+0.5 more for 21-CFR-Part-11)
- **Risk level (Critical/High)**: +0.5/+0.3
- **Implemented/Completed**: -1.0 (minimum 2.0)

### Priority Ranges
- **Critical (10.0+)**: Dependencies of critical systems, foundational requirements
- **High (8.0-9.9)**: Critical systems themselves, important blocking requirements
- **Medium (6.0-7.9)**: Standard features and enhancements
- **Low (4.0-5.9)**: Nice-to-have features
- **Deferred (<4.0)**: Future considerations

### Key Indicators
- **🏗️** Foundational system
- **🚧** Blocking requirement
- **🏥** Safety-related
- **🔗N** N levels of requirements depend on this
- **⏳** Has unmet dependencies

---

## Usage Instructions

1. **Update priorities**: `rr update` - Recalculates all priorities and updates this file
2. **View distribution**: `rr show --all` - Shows current priority breakdown
3. **Validate consistency**: `rr validate` - Checks for dependency issues
4. **Focus on Critical/High**: Work on requirements without ⏳ indicators first
5. **Follow dependency order**: Complete dependencies before dependents
"""


def _format_entry(req: Requirement, assignment: PriorityAssignment, summary_dir: Path) -> str:
    warning = f" (depends on: {', '.join(assignment.pending)})" if assignment.pending else ""

    if req.file_path is not None:
        link = Path(os.path.relpath(req.file_path, summary_dir)).as_posix()
        title = f"**[{req.file_path.name}]({link})**"
    else:
        title = f"**{assignment.id}**"

    line = f"- {title}: {assignment.id}{warning}"
    if assignment.indicators:
        line += f" {assignment.indicators}"
    return line


def render_summary(run: PriorityRun, config: ProjectConfig, today: date | None = None) -> str:
    """Render the prioritization.md document for a scoring run."""
    today_str = (today or date.today()).isoformat()
    summary_dir = config.summary_path.parent
    counts = run.counts()
    # Same order as PriorityRun.groups(), but each record keeps its own assignment
    groups: dict[Tier, list[tuple[Requirement, PriorityAssignment]]] = {tier: [] for tier in Tier}
    for req, assignment in sorted(run.pairs(), key=lambda pair: pair[1].score, reverse=True):
        groups[assignment.tier].append((req, assignment))

    lines = [
        "# Prioritization Framework",
        "",
        "**Purpose**: Maintain prioritization across all requirements using consistent, dependency-aware criteria.",
        "",
        f"## Current Priorities (Updated: {today_str})",
        "",
        f"Processed {len(run.assignments)} requirements using topological dependency-aware scoring.",
        "",
        f"### Current Priority Distribution ({today_str})",
    ]
    for tier in Tier:
        if counts[tier]:
            lines.append(f"- **{counts[tier]} {tier.value}** priority requirements")
    lines.append("")
    lines.append("### Requirement-Level Priorities")
    lines.append("")

    for tier in Tier:
        items = groups[tier]
        if tier is Tier.DEFERRED and not items:
            continue
        lines.append(f"#### {TIER_HEADINGS[tier]}")
        if items:
            lines.extend(_format_entry(req, a, summary_dir) for req, a in items)
        else:
            lines.append("- None")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append(METHODOLOGY)
    lines.append(f"**Last Generated**: {today_str} by reqrank")
    lines.append("")
    return "\n".join(lines)


def write_summary(path: Path, content: str) -> bool:
    """Replace the summary file. Returns True on success."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    except OSError as e:
        logger.error(f"Error updating {path}: {e}")
        return False
    return True
