"""Tests for reqrank.lib.summary module."""

from datetime import date
from pathlib import Path

from reqrank.lib.config import ProjectConfig
from reqrank.lib.summary import render_summary, write_summary
from reqrank.priority import Requirement, score_requirements


def _config(tmp_path):
    return ProjectConfig(root=tmp_path)


def _run(tmp_path):
    req_dir = tmp_path / "docs" / "requirements" / "core"
    return score_requirements([
        Requirement(id="REQ-001", foundational=True, status="Draft",
                    file_path=req_dir / "req-001-auth.md"),
        Requirement(id="REQ-002", dependencies=["REQ-001"], blocking=True,
                    file_path=req_dir / "req-002-login.md"),
        Requirement(id="REQ-003", status="Implemented"),
    ])


class TestRenderSummary:
    """Test render_summary."""

    def test_header_and_date(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path), today=date(2026, 3, 1))
        assert content.startswith("# Prioritization Framework\n")
        assert "## Current Priorities (Updated: 2026-03-01)" in content
        assert "Processed 3 requirements" in content
        assert "**Last Generated**: 2026-03-01" in content

    def test_distribution_lists_nonzero_tiers(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path), today=date(2026, 3, 1))
        assert "- **1 Medium** priority requirements" in content
        assert "- **2 Low** priority requirements" in content
        assert "Critical** priority requirements" not in content

    def test_empty_tiers_show_none(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path))
        critical = content.split("#### Critical Priority")[1].split("####")[0]
        assert "- None" in critical

    def test_deferred_section_omitted_when_empty(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path))
        assert "#### Deferred" not in content

    def test_entries_link_relative_to_summary(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path))
        assert (
            "- **[req-002-login.md](../../requirements/core/req-002-login.md)**: "
            "REQ-002 (depends on: REQ-001) 🚧⏳"
        ) in content

    def test_entry_without_file(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path))
        assert "- **REQ-003**: REQ-003\n" in content

    def test_includes_methodology(self, tmp_path):
        content = render_summary(_run(tmp_path), _config(tmp_path))
        assert "## Priority Calculation Methodology" in content
        assert "### Key Indicators" in content


class TestWriteSummary:
    """Test write_summary."""

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "docs" / "planning" / "kanban" / "prioritization.md"
        assert write_summary(path, "# hi\n") is True
        assert path.read_text() == "# hi\n"

    def test_replaces_existing_content(self, tmp_path):
        path = tmp_path / "prioritization.md"
        path.write_text("old content that is much longer\n")
        write_summary(path, "new\n")
        assert path.read_text() == "new\n"

    def test_failure_returns_false(self, tmp_path, caplog):
        blocker = tmp_path / "file"
        blocker.write_text("")
        assert write_summary(blocker / "sub" / "prioritization.md", "x") is False
        assert "Error updating" in caplog.text
