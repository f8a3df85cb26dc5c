"""Tests for reqrank.priority.intrinsic module."""

import pytest

from reqrank.priority.intrinsic import intrinsic_score, round_score
from reqrank.priority.models import Requirement


class TestIntrinsicScore:
    """Test intrinsic_score bonuses and status adjustments."""

    def test_plain_requirement_scores_base(self):
        assert intrinsic_score(Requirement(id="REQ-001")) == 5.0

    def test_implemented_without_flags(self):
        req = Requirement(id="REQ-001", status="Implemented")
        assert intrinsic_score(req) == 4.0

    def test_completed_counts_as_implemented(self):
        req = Requirement(id="REQ-001", status="Completed")
        assert intrinsic_score(req) == 4.0

    @pytest.mark.parametrize("field,value,expected", [
        ("foundational", True, 6.0),
        ("blocking", True, 6.0),
        ("hierarchy", "system-level", 5.5),
        ("category", "infrastructure", 5.5),
        ("safety_related", True, 6.0),
        ("risk_level", "Critical", 5.5),
        ("risk_level", "High", 5.3),
        ("risk_level", "Low", 5.0),
        ("validation_required", True, 5.3),
    ])
    def test_single_attribute_bonus(self, field, value, expected):
        req = Requirement(id="REQ-001", **{field: value})
        assert intrinsic_score(req) == expected

    def test_any_compliance_standard(self):
        req = Requirement(id="REQ-001", compliance_standards=["ISO-13485"])
        assert intrinsic_score(req) == 5.5

    def test_part_11_gets_extra_bonus(self):
        req = Requirement(id="REQ-001", compliance_standards=["21-CFR-Part-11"])
        assert intrinsic_score(req) == 6.0

    def test_draft_blocking_bonus(self):
        req = Requirement(id="REQ-001", status="Draft", blocking=True)
        assert intrinsic_score(req) == 6.3

    def test_draft_without_blocking_has_no_bonus(self):
        req = Requirement(id="REQ-001", status="Draft")
        assert intrinsic_score(req) == 5.0

    def test_implemented_applies_after_bonuses(self):
        req = Requirement(id="REQ-001", status="Implemented", foundational=True, safety_related=True)
        assert intrinsic_score(req) == 6.0

    def test_validation_required_skipped_when_implemented(self):
        req = Requirement(id="REQ-001", status="Implemented", validation_required=True)
        assert intrinsic_score(req) == 4.0

    def test_validation_required_still_counts_when_completed(self):
        """Only the literal Implemented status suppresses the validation bonus."""
        req = Requirement(id="REQ-001", status="Completed", validation_required=True)
        assert intrinsic_score(req) == 4.3

    def test_everything_stacks(self):
        req = Requirement(
            id="REQ-001",
            status="Draft",
            foundational=True,
            blocking=True,
            hierarchy="system-level",
            category="infrastructure",
            safety_related=True,
            compliance_standards=["21-CFR-Part-11"],
            risk_level="Critical",
            validation_required=True,
        )
        assert intrinsic_score(req) == 11.1

    def test_ignores_dependencies(self):
        req = Requirement(id="REQ-002", dependencies=["REQ-001", "REQ-404"])
        assert intrinsic_score(req) == 5.0


class TestRoundScore:
    """Test round_score half-up rounding."""

    def test_rounds_to_one_decimal(self):
        assert round_score(5.34) == 5.3

    def test_half_rounds_up(self):
        # Python's round() would give 6.2 here
        assert round_score(6.25) == 6.3

    def test_strips_float_noise(self):
        assert round_score(5.0 + 0.3 + 0.3 + 0.3) == 5.9
