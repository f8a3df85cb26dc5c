"""
Requirement loading.

Walks <requirements_dir>/<category>/req-*.md for every configured category
and turns each frontmatter block into a Requirement. Unreadable files and
files without an id are skipped; schema violations are reported but the
record is still loaded. Nothing here raises, so one bad file never blocks
a run.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from reqrank.lib.config import ProjectConfig
from reqrank.lib.constants import REQ_FILE_GLOB
from reqrank.lib.frontmatter import parse_frontmatter
from reqrank.lib.validate import ValidationError, validate
from reqrank.priority.models import Requirement

logger = logging.getLogger(__name__)


@dataclass
class LoadIssue:
    """A requirement file that was skipped or looked wrong."""
    file: Path
    message: str
    severity: str = "warning"  # "error" or "warning"
    skipped: bool = True  # False when the record was still loaded


@dataclass
class LoadResult:
    requirements: list[Requirement] = field(default_factory=list)
    issues: list[LoadIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(i.severity == "error" for i in self.issues)


def load_requirement_file(path: Path, category: str) -> tuple[Requirement | None, LoadIssue | None]:
    """Load one requirement file.

    Returns (requirement, issue). The requirement is None only when the file
    is unreadable or has no id. Schema violations are reported as a warning
    issue alongside the loaded requirement, so a prerequisite with one badly
    typed field still counts for the requirements that depend on it.
    """
    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        return None, LoadIssue(path, f"Error reading file: {e}", "error")

    data = parse_frontmatter(content)
    if not data.get("id"):
        return None, LoadIssue(path, "missing or invalid id field")

    issue = None
    try:
        validate(data, "requirement")
    except ValidationError as e:
        issue = LoadIssue(path, str(e), skipped=False)

    return Requirement.from_frontmatter(data, category=category, file_path=path), issue


def load_requirements(config: ProjectConfig) -> LoadResult:
    """Load all requirements in the configured categories."""
    result = LoadResult()
    requirements_dir = config.requirements_path

    if not requirements_dir.is_dir():
        result.issues.append(LoadIssue(
            requirements_dir,
            f"Requirements directory does not exist: {requirements_dir}",
            "error",
        ))
        return result

    for category in config.categories:
        category_dir = requirements_dir / category
        if not category_dir.is_dir():
            continue

        for path in sorted(category_dir.glob(REQ_FILE_GLOB)):
            requirement, issue = load_requirement_file(path, category)
            if issue is not None:
                result.issues.append(issue)
                if issue.skipped:
                    logger.warning(f"Skipping {path}: {issue.message}")
                else:
                    logger.warning(f"Invalid frontmatter in {path}: {issue.message}")
            if requirement is not None:
                result.requirements.append(requirement)

    logger.debug(f"Loaded {len(result.requirements)} requirements from {requirements_dir}")
    return result
