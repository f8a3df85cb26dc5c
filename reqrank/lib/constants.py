"""Shared constants for reqrank."""

import re

# Requirement files live in <requirements_dir>/<category>/req-*.md
REQ_FILE_GLOB = "req-*.md"
FRONTMATTER_RE = re.compile(r'^---\n(.*?)\n---', re.DOTALL)

# Statuses that count as done for dependency checks and scoring
SATISFIED_STATUSES = ("Implemented", "Completed")

# Score used for cyclic edges, unknown ids and missing persisted scores
DEFAULT_SCORE = 5.0
MAX_SCORE = 15.0
DEPENDENT_BOOST = 0.5

# Unmet-dependency penalty
PENDING_PENALTY = 2.0
PENALTY_FLOOR = 4.0

# Persisted vs computed score tolerance
SCORE_DRIFT_TOLERANCE = 0.1

DEFAULT_PRIORITY = "Medium"

COMPLIANCE_PART_11 = "21-CFR-Part-11"

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
