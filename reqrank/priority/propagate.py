"""
Topological priority propagation.

Guarantees that a requirement scores at least 0.5 above every requirement
that depends on it, so work on prerequisites surfaces first:

    score(R) = min(max(intrinsic(R), max(score(D) for D in dependents(R)) + 0.5), 15)

Scores are computed by a memoized depth-first walk over the dependents
edges. A requirement met again while it is still on the walk's stack is a
cycle: that edge scores DEFAULT_SCORE and is not memoized, so the first
path to reach a node decides its score. This is visit-order dependent and
is not corrected afterwards.

Each PropagationRun owns its memo and guard sets. Build a new one per
scoring pass; nothing is shared between runs.
"""

import logging
from typing import Callable, Optional

from reqrank.lib.constants import DEFAULT_SCORE, DEPENDENT_BOOST, MAX_SCORE
from reqrank.priority.index import DependencyIndex
from reqrank.priority.intrinsic import intrinsic_score
from reqrank.priority.models import Requirement

logger = logging.getLogger(__name__)


class PropagationRun:
    """State for one propagation pass over a requirement set."""

    def __init__(
        self,
        index: DependencyIndex,
        scorer: Callable[[Requirement], float] = intrinsic_score,
    ):
        self.index = index
        self.scorer = scorer
        self.priorities: dict[str, float] = {}
        self.visited: set[str] = set()
        self.visiting: set[str] = set()

    def visit(self, req_id: str) -> float:
        """Return the propagated score for req_id, computing it if needed."""
        if req_id in self.visiting:
            logger.warning(f"Circular dependency detected involving {req_id}")
            return DEFAULT_SCORE
        if req_id in self.visited:
            return self.priorities[req_id]

        req = self.index.get(req_id)
        if req is None:
            logger.warning(f"Requirement {req_id} not found")
            return DEFAULT_SCORE

        self.visiting.add(req_id)

        base_score = self.scorer(req)

        max_dependent_score = 0.0
        for dependent in self.index.dependents(req_id):
            max_dependent_score = max(max_dependent_score, self.visit(dependent.id))

        final_score = base_score
        if max_dependent_score > 0:
            final_score = max(base_score, max_dependent_score + DEPENDENT_BOOST)
        final_score = min(final_score, MAX_SCORE)

        self.visiting.discard(req_id)
        self.visited.add(req_id)
        self.priorities[req_id] = final_score
        return final_score

    def run(self) -> dict[str, float]:
        """Visit every requirement so all ids are memoized."""
        for req_id in self.index.ids():
            if req_id not in self.visited:
                self.visit(req_id)
        return self.priorities

    def get(self, req_id: str, default: Optional[float] = DEFAULT_SCORE) -> Optional[float]:
        return self.priorities.get(req_id, default)


def propagate_priorities(index: DependencyIndex) -> dict[str, float]:
    """Compute propagated scores for every requirement in the index."""
    return PropagationRun(index).run()
