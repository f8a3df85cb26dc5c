"""
YAML frontmatter helpers for requirement files.

Requirement files are markdown with a leading block:

    ---
    id: REQ-042
    status: Draft
    priority: Medium
    priorityScore: 6.5
    dependencies: [REQ-001]
    ---

Only the priority and priorityScore lines are ever rewritten; the rest of
the file is left byte-for-byte intact.
"""

import logging
import re
from pathlib import Path

import yaml

from reqrank.lib.constants import FRONTMATTER_RE

logger = logging.getLogger(__name__)

PRIORITY_LINE_RE = re.compile(r'^priority:[ \t]*.*$', re.MULTILINE)
SCORE_LINE_RE = re.compile(r'^priorityScore:[ \t]*.*$', re.MULTILINE)


def format_score(score: float) -> str:
    """Format a score the way it is persisted (6.0 -> '6', 6.5 -> '6.5')."""
    return f"{round(score, 1):g}"


def parse_frontmatter(content: str) -> dict:
    """Parse the YAML frontmatter of a markdown document.

    Returns {} when there is no frontmatter or it is not a valid mapping.
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return {}

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse YAML frontmatter: {e}")
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def update_priority_fields(content: str, priority: str, score: float) -> str:
    """Set priority and priorityScore in the frontmatter of content.

    Replaces existing lines, inserts priorityScore after priority when it is
    missing, and appends both when the block has no priority line at all.
    Content without frontmatter is returned unchanged.
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return content

    block = match.group(1)
    priority_line = f"priority: {priority}"
    score_line = f"priorityScore: {format_score(score)}"

    if PRIORITY_LINE_RE.search(block):
        block = PRIORITY_LINE_RE.sub(lambda m: priority_line, block, count=1)
        if SCORE_LINE_RE.search(block):
            block = SCORE_LINE_RE.sub(lambda m: score_line, block, count=1)
        else:
            block = PRIORITY_LINE_RE.sub(
                lambda m: f"{priority_line}\n{score_line}", block, count=1
            )
    elif SCORE_LINE_RE.search(block):
        block = SCORE_LINE_RE.sub(lambda m: f"{priority_line}\n{score_line}", block, count=1)
    else:
        block = f"{block}\n{priority_line}\n{score_line}"

    return content[:match.start(1)] + block + content[match.end(1):]


def write_priority(path: Path, priority: str, score: float) -> bool:
    """Rewrite the priority fields of a requirement file. Returns True on success."""
    try:
        content = path.read_text()
        path.write_text(update_priority_fields(content, priority, score))
    except OSError as e:
        logger.error(f"Error updating {path}: {e}")
        return False
    return True
