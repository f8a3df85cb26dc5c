"""
Configuration loader for reqrank.

Reads reqrank.yaml from the project root. Every key is optional; missing
keys fall back to DEFAULT_CONFIG.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from . import validate

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "reqrank.yaml"

DEFAULT_CATEGORIES = [
    "core",
    "workflow",
    "testing",
    "infrastructure",
    "content-management",
    "compliance",
]  # archive, deprecated and stories are never scored

DEFAULT_CONFIG = {
    "requirements_dir": "docs/requirements",
    "kanban_dir": "docs/planning/kanban",
    "summary_file": "prioritization.md",
    "categories": DEFAULT_CATEGORIES,
}


@dataclass
class ProjectConfig:
    """Project-level configuration from reqrank.yaml"""
    root: Path
    requirements_dir: str = DEFAULT_CONFIG["requirements_dir"]  # Relative to root
    kanban_dir: str = DEFAULT_CONFIG["kanban_dir"]  # Relative to root
    summary_file: str = DEFAULT_CONFIG["summary_file"]  # Inside kanban_dir
    categories: list[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))

    @property
    def requirements_path(self) -> Path:
        return self.root / self.requirements_dir

    @property
    def summary_path(self) -> Path:
        return self.root / self.kanban_dir / self.summary_file


def load_project_config(root: Path, config_path: Optional[Path] = None) -> ProjectConfig:
    """Load reqrank.yaml and return ProjectConfig.

    If the file doesn't exist or isn't valid YAML, returns defaults.

    Raises:
        validate.ValidationError: if the file parses but has bad keys or types
    """
    if config_path is None:
        config_path = root / CONFIG_FILENAME
    if not config_path.exists():
        return ProjectConfig(root=root)

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return ProjectConfig(root=root)

    if not data:
        return ProjectConfig(root=root)
    if not isinstance(data, dict):
        raise validate.ValidationError("config", f"Expected a mapping in {config_path}")

    validate.validate(data, "config")

    merged = {**DEFAULT_CONFIG, **data}
    return ProjectConfig(
        root=root,
        requirements_dir=merged["requirements_dir"],
        kanban_dir=merged["kanban_dir"],
        summary_file=merged["summary_file"],
        categories=list(merged["categories"]),
    )
