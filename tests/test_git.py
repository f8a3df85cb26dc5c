"""Tests for reqrank.git module."""

import subprocess
from pathlib import Path
from unittest.mock import patch, MagicMock

from reqrank.git.runner import run_git, GitResult
from reqrank.git.commit import commit, is_nothing_to_commit, stage_files


class TestGitResult:
    """Test GitResult dataclass."""

    def test_success_when_returncode_zero(self):
        result = GitResult(returncode=0, stdout="ok", stderr="")
        assert result.success is True

    def test_failure_when_returncode_nonzero(self):
        result = GitResult(returncode=1, stdout="", stderr="error")
        assert result.success is False

    def test_failure_when_timed_out(self):
        result = GitResult(returncode=0, stdout="ok", stderr="", timed_out=True)
        assert result.success is False

    def test_output_joins_streams(self):
        result = GitResult(returncode=1, stdout="out\n", stderr="err\n")
        assert result.output == "out\nerr"


class TestRunGit:
    """Test run_git function."""

    @patch("reqrank.git.runner.subprocess.run")
    def test_returns_result_on_success(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=0,
            stdout="output",
            stderr="",
        )
        result = run_git(["status"], Path("/tmp"))
        assert result.success
        assert result.stdout == "output"
        mock_run.assert_called_once()

    @patch("reqrank.git.runner.subprocess.run")
    def test_handles_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=30)
        result = run_git(["status"], Path("/tmp"))
        assert not result.success
        assert result.timed_out
        assert "timed out" in result.stderr

    @patch("reqrank.git.runner.subprocess.run")
    def test_handles_missing_git(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")
        result = run_git(["status"], Path("/tmp"))
        assert not result.success
        assert "not found" in result.stderr

    @patch("reqrank.git.runner.subprocess.run")
    def test_passes_cwd_with_C_flag(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        run_git(["status", "--porcelain"], Path("/my/repo"))
        call_args = mock_run.call_args[0][0]
        assert call_args == ["git", "-C", "/my/repo", "status", "--porcelain"]


class TestCommitOperations:
    """Test stage_files and commit argument building."""

    @patch("reqrank.git.commit.run_git")
    def test_stage_files(self, mock_run):
        mock_run.return_value = GitResult(returncode=0, stdout="", stderr="")
        stage_files(Path("/repo"), ["docs/a.md", "docs/b.md"])
        mock_run.assert_called_once_with(["add", "--", "docs/a.md", "docs/b.md"], Path("/repo"))

    @patch("reqrank.git.commit.run_git")
    def test_commit_limits_to_files(self, mock_run):
        mock_run.return_value = GitResult(returncode=0, stdout="", stderr="")
        commit(Path("/repo"), "msg", ["docs/a.md"])
        mock_run.assert_called_once_with(["commit", "-m", "msg", "--", "docs/a.md"], Path("/repo"))

    @patch("reqrank.git.commit.run_git")
    def test_commit_without_files(self, mock_run):
        mock_run.return_value = GitResult(returncode=0, stdout="", stderr="")
        commit(Path("/repo"), "msg")
        mock_run.assert_called_once_with(["commit", "-m", "msg"], Path("/repo"))


class TestIsNothingToCommit:
    """Test is_nothing_to_commit."""

    def test_detects_message(self):
        result = GitResult(returncode=1, stdout="nothing to commit, working tree clean\n", stderr="")
        assert is_nothing_to_commit(result) is True

    def test_other_failure(self):
        result = GitResult(returncode=128, stdout="", stderr="fatal: not a git repository")
        assert is_nothing_to_commit(result) is False

    def test_success_is_not_nothing(self):
        result = GitResult(returncode=0, stdout="nothing to commit", stderr="")
        assert is_nothing_to_commit(result) is False
