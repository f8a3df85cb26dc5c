"""Git operations for reqrank.

Only what the update command needs to commit rewritten requirement files.
Functions return GitResult; callers check .success before using output.
"""

from reqrank.git.runner import run_git, GitResult
from reqrank.git.commit import (
    stage_files,
    commit,
    is_nothing_to_commit,
)

__all__ = [
    "run_git",
    "GitResult",
    "stage_files",
    "commit",
    "is_nothing_to_commit",
]
