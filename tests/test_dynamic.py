"""Tests for the unmet-dependency penalty and tier classification."""

import pytest

from reqrank.priority.dynamic import apply_pending_penalty, dynamic_score
from reqrank.priority.index import DependencyIndex
from reqrank.priority.models import DependencyStatus, Requirement, Tier
from reqrank.priority.propagate import PropagationRun
from reqrank.priority.tiers import score_to_tier


def _pending(*ids):
    return DependencyStatus(satisfied=False, pending=list(ids))


class TestApplyPendingPenalty:
    """Test apply_pending_penalty."""

    def test_satisfied_is_unchanged(self):
        assert apply_pending_penalty(7.5, DependencyStatus(satisfied=True)) == 7.5

    def test_two_points_per_pending(self):
        assert apply_pending_penalty(10.0, _pending("A")) == 8.0
        assert apply_pending_penalty(10.0, _pending("A", "B")) == 6.0

    def test_floor_holds_with_many_pending(self):
        assert apply_pending_penalty(6.0, _pending("A", "B", "C", "D", "E")) == 4.0

    def test_penalty_capped_at_margin(self):
        assert apply_pending_penalty(9.0, _pending("A", "B", "C")) == 4.0

    def test_at_floor_stays_at_floor(self):
        assert apply_pending_penalty(4.0, _pending("A")) == 4.0


class TestDynamicScore:
    """Test dynamic_score against a propagation run."""

    def _run(self, reqs):
        index = DependencyIndex(reqs)
        run = PropagationRun(index)
        run.run()
        return run, index

    def test_unmet_dependency_penalized(self):
        reqs = [
            Requirement(id="A", foundational=True, status="Draft"),
            Requirement(id="B", dependencies=["A"], blocking=True),
        ]
        run, index = self._run(reqs)
        assert dynamic_score(run, reqs[0], index) == 6.5
        assert dynamic_score(run, reqs[1], index) == 4.0

    def test_met_dependency_not_penalized(self):
        reqs = [
            Requirement(id="A", foundational=True, status="Implemented"),
            Requirement(id="B", dependencies=["A"], blocking=True),
        ]
        run, index = self._run(reqs)
        assert dynamic_score(run, reqs[0], index) == 6.5
        assert dynamic_score(run, reqs[1], index) == 6.0

    def test_unknown_requirement_defaults(self):
        run, index = self._run([Requirement(id="A")])
        stranger = Requirement(id="Z")
        assert dynamic_score(run, stranger, index) == 5.0

    def test_propagated_invariant_survives_penalty(self):
        """Penalty only lowers the dynamic score; the propagated order holds."""
        reqs = [
            Requirement(id="A", dependencies=["MISSING-1", "MISSING-2"]),
            Requirement(id="B", dependencies=["A"], safety_related=True),
        ]
        run, index = self._run(reqs)
        assert run.get("A") >= run.get("B") + 0.5
        assert dynamic_score(run, reqs[0], index) == 4.0
        assert dynamic_score(run, reqs[1], index) == 4.0


class TestScoreToTier:
    """Test score_to_tier boundaries."""

    @pytest.mark.parametrize("score,tier", [
        (15.0, Tier.CRITICAL),
        (10.0, Tier.CRITICAL),
        (9.99, Tier.HIGH),
        (8.0, Tier.HIGH),
        (7.99, Tier.MEDIUM),
        (6.0, Tier.MEDIUM),
        (5.99, Tier.LOW),
        (4.0, Tier.LOW),
        (3.99, Tier.DEFERRED),
        (0.0, Tier.DEFERRED),
    ])
    def test_boundaries(self, score, tier):
        assert score_to_tier(score) is tier

    def test_tier_values(self):
        assert [t.value for t in Tier] == ["Critical", "High", "Medium", "Low", "Deferred"]
