"""Run git in the project root and capture what it says."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_TIMEOUT = 30


@dataclass
class GitResult:
    """Exit status and output of one git invocation.

    Failures to start git at all (timeout, no binary) are reported here too,
    with returncode -1, so callers never need a try/except around run_git.
    """
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def output(self) -> str:
        """stdout and stderr together, for error reporting."""
        return "\n".join(s for s in (self.stdout.strip(), self.stderr.strip()) if s)


def _failed(message: str, timed_out: bool = False) -> GitResult:
    return GitResult(returncode=-1, stdout="", stderr=message, timed_out=timed_out)


def run_git(args: list[str], cwd: Path, timeout: int = GIT_TIMEOUT) -> GitResult:
    """Run `git -C cwd <args>`, e.g. run_git(["add", "--", "docs/req-001.md"], root)."""
    cmd = ["git", "-C", str(cwd), *args]
    logger.debug(f"Running {' '.join(cmd)}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        return _failed(f"Command timed out after {timeout}s", timed_out=True)
    except FileNotFoundError:
        return _failed("git executable not found")
    return GitResult(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
