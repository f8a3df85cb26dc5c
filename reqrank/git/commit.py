"""Git commit operations."""

from pathlib import Path

from reqrank.git.runner import run_git, GitResult


def stage_files(repo: Path, files: list[str]) -> GitResult:
    """Stage specific files (paths relative to repo)."""
    return run_git(["add", "--"] + files, repo)


def commit(repo: Path, message: str, files: list[str] | None = None) -> GitResult:
    """Create a commit with the given message.

    When files are given, only those paths are committed even if other
    changes are staged.
    """
    args = ["commit", "-m", message]
    if files:
        args += ["--"] + files
    return run_git(args, repo)


def is_nothing_to_commit(result: GitResult) -> bool:
    return not result.success and "nothing to commit" in result.output
