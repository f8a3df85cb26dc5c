"""
rr update / show / validate / score - requirement priority commands.
"""

import json
import logging
import os
from pathlib import Path

from reqrank import git
from reqrank.lib.config import ProjectConfig
from reqrank.lib.constants import DEFAULT_PRIORITY, DEFAULT_SCORE, EXIT_ERROR, EXIT_OK
from reqrank.lib.frontmatter import format_score, write_priority
from reqrank.lib.loader import LoadResult, load_requirements
from reqrank.lib.summary import render_summary, write_summary
from reqrank.priority import (
    PriorityAssignment,
    Requirement,
    Tier,
    score_changed,
    score_requirements,
    validate_priorities,
)

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "chore: Update requirement priorities ({count} files)\n\n[PRIORITY-UPDATE]"
DEFAULT_SHOW_LIMIT = 5
TIER_NAMES = [t.value for t in Tier]


def _relative(path: Path, root: Path) -> str:
    return Path(os.path.relpath(path, root)).as_posix()


def _display_name(req: Requirement, config: ProjectConfig) -> str:
    if req.file_path is None:
        return req.id
    return _relative(req.file_path, config.root)


def _load(config: ProjectConfig) -> LoadResult:
    """Load requirements and print a report of frontmatter issues."""
    result = load_requirements(config)
    if result.issues:
        errors = [i for i in result.issues if i.severity == "error"]
        warnings = [i for i in result.issues if i.severity != "error"]
        print()
        print("Frontmatter issues detected:")
        for issue in errors:
            print(f"  [ERROR] {issue.file.name}: {issue.message}")
        for issue in warnings:
            suffix = " (skipped)" if issue.skipped else ""
            print(f"  [WARN] {issue.file.name}: {issue.message}{suffix}")
        if any(i.skipped for i in result.issues):
            print("Skipped files are treated as missing dependencies.")
        print()
    return result


def cmd_update(args, config: ProjectConfig) -> int:
    """Recompute priorities, rewrite changed requirement files and the summary."""
    print("Requirements Priority Review")
    print("=" * 60)

    result = _load(config)
    requirements = result.requirements
    run = score_requirements(requirements)

    changed_files: list[Path] = []
    counts = run.counts()
    critical_high = []

    # Deepest dependency chains first, then by id
    ordered = sorted(
        run.pairs(),
        key=lambda pair: (pair[1].depth, pair[0].id),
        reverse=True,
    )

    for req, assignment in ordered:
        new_tier = assignment.tier.value
        new_score = assignment.score
        current_tier = req.priority or DEFAULT_PRIORITY
        indicators = assignment.indicators

        if current_tier != new_tier or score_changed(req, new_score):
            if req.file_path is not None and write_priority(req.file_path, new_tier, new_score):
                changed_files.append(req.file_path)
            if current_tier != new_tier:
                change = f"{current_tier} -> {new_tier}"
            else:
                current_score = req.priority_score if req.priority_score is not None else DEFAULT_SCORE
                change = f"score {format_score(current_score)} -> {format_score(new_score)}"
            print(f"  [UPDATED] {req.id}: {change} {indicators}".rstrip())
        else:
            print(f"  {req.id}: {new_tier} (Score: {format_score(new_score)}) {indicators}".rstrip())

        if assignment.depth > 0:
            dependents = run.index.dependents(req.id)
            print(f"     └─ {len(dependents)} requirements depend on this (depth: {assignment.depth})")

        if assignment.tier in (Tier.CRITICAL, Tier.HIGH):
            critical_high.append(assignment)

    print()
    print("Priority Distribution")
    print("-" * 60)
    for tier, count in counts.items():
        if count > 0:
            print(f"  {tier.value}: {count} requirements")

    if critical_high:
        print()
        print("Critical & High Priority Requirements")
        print("-" * 60)
        critical_high.sort(key=lambda a: (a.score, a.depth), reverse=True)
        for a in critical_high:
            print(f"  {a.id}: {a.tier.value} ({format_score(a.score)}) {a.indicators}".rstrip())

    summary_path = config.summary_path
    print()
    print(f"Updating {_relative(summary_path, config.root)}...")
    if write_summary(summary_path, render_summary(run, config)):
        changed_files.append(summary_path)

    changed = [_relative(p, config.root) for p in changed_files]
    if getattr(args, "commit", False) and changed:
        return _commit_changes(config.root, changed)

    if changed:
        print()
        print("To commit these changes:")
        print("  rr update --commit")
        print("Or manually:")
        more = " ..." if len(changed) > 3 else ""
        print(f"  git add {' '.join(changed[:3])}{more}")
        print('  git commit -m "chore: Update requirement priorities"')

    return EXIT_OK


def _commit_changes(root: Path, files: list[str]) -> int:
    staged = git.stage_files(root, files)
    if not staged.success:
        print(f"ERROR: git add failed: {staged.output}")
        return EXIT_ERROR

    result = git.commit(root, COMMIT_MESSAGE.format(count=len(files)), files)
    if git.is_nothing_to_commit(result):
        print("No changes to commit")
        return EXIT_OK
    if not result.success:
        print(f"ERROR: Commit failed: {result.output}")
        return EXIT_ERROR

    print(f"Committed {len(files)} file(s)")
    return EXIT_OK


def cmd_show(args, config: ProjectConfig) -> int:
    """Show persisted priorities (as last written by update)."""
    tier_filter = getattr(args, "tier", None)
    limit = getattr(args, "limit", None)
    show_all = getattr(args, "all", False)

    if not show_all and not limit and not tier_filter:
        print(f"Top {DEFAULT_SHOW_LIMIT} Highest Priority Items:")
        limit = DEFAULT_SHOW_LIMIT
    elif tier_filter:
        print(f"{tier_filter} Priority Items:")
    elif limit:
        print(f"Top {limit} Highest Priority Items:")
    else:
        print("Current Priority Distribution:")
    print()

    result = _load(config)
    run = score_requirements(result.requirements)

    by_tier: dict[str, list[tuple[float, Requirement, PriorityAssignment]]] = {name: [] for name in TIER_NAMES}
    for req, assignment in run.pairs():
        tier = req.priority or DEFAULT_PRIORITY
        if tier not in by_tier:
            logger.debug(f"Ignoring {req.id} with unknown priority {tier!r}")
            continue
        score = req.priority_score if req.priority_score is not None else DEFAULT_SCORE
        by_tier[tier].append((score, req, assignment))

    def line(req: Requirement, assignment: PriorityAssignment, show_tier: bool) -> str:
        name = _display_name(req, config)
        if assignment.pending:
            name += f" (depends on: {', '.join(assignment.pending)})"
        tier_part = f" [{req.priority or DEFAULT_PRIORITY}]" if show_tier else ""
        return f"  {req.id}: {name}{tier_part} [{req.category}] {assignment.indicators}".rstrip()

    def by_score(items):
        return sorted(items, key=lambda item: item[0], reverse=True)

    if tier_filter:
        items = by_score(by_tier[tier_filter])
        if limit:
            items = items[:limit]
        for _, req, assignment in items:
            print(line(req, assignment, show_tier=False))
        print()
        return EXIT_OK

    if limit:
        every = [item for items in by_tier.values() for item in items]
        for _, req, assignment in by_score(every)[:limit]:
            print(line(req, assignment, show_tier=True))
        print()
        return EXIT_OK

    for tier, items in by_tier.items():
        if not items:
            continue
        print(f"{tier} Priority ({len(items)}):")
        for _, req, assignment in by_score(items):
            print(line(req, assignment, show_tier=False))
        print()
    return EXIT_OK


def cmd_validate(args, config: ProjectConfig) -> int:
    """Report score drift and Critical requirements with unmet dependencies."""
    print("Priority Validation Report")
    print("=" * 60)

    result = _load(config)
    run = score_requirements(result.requirements)
    issues = validate_priorities(run)

    for issue in issues:
        print(f"  [WARN] {issue.id}: {issue.message}")

    if not issues:
        print("All priorities are properly aligned!")
        return EXIT_OK

    print()
    print(f"Found {len(issues)} priority alignment issue(s)")
    print('Run "rr update" to fix these issues')
    return EXIT_ERROR


def cmd_score(args, config: ProjectConfig) -> int:
    """Print freshly computed priorities without touching any file."""
    result = load_requirements(config)
    for issue in result.issues:
        logger.info(f"Skipped {issue.file}: {issue.message}")
    run = score_requirements(result.requirements)
    assignments = sorted(run.assignments, key=lambda a: (-a.score, a.id))

    if getattr(args, "json", False):
        print(json.dumps([a.model_dump(mode="json") for a in assignments], indent=2, ensure_ascii=False))
        return EXIT_OK

    if not assignments:
        print("No requirements found.")
        return EXIT_OK

    print(f"  {'ID':<16} {'SCORE':>5}  {'TIER':<9} INDICATORS")
    print("  " + "-" * 58)
    for a in assignments:
        print(f"  {a.id:<16} {format_score(a.score):>5}  {a.tier.value:<9} {a.indicators}".rstrip())
    print()
    counts = run.counts()
    print(", ".join(f"{count} {tier.value}" for tier, count in counts.items() if count))
    return EXIT_OK
