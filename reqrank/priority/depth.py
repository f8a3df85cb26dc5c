"""Dependency depth: the longest chain of requirements waiting on one id."""

from typing import Optional

from reqrank.priority.index import DependencyIndex


def dependency_depth(
    index: DependencyIndex,
    req_id: str,
    visited: Optional[set[str]] = None,
) -> int:
    """Return how many levels of dependents hang below req_id.

    0 when nothing depends on req_id. `visited` holds the ids on the current
    path; a node met again on the same path adds nothing, so cycles end.
    Each branch gets its own copy of the path. Display only, not a score input.
    """
    if visited is None:
        visited = set()
    if req_id in visited:
        return 0
    visited.add(req_id)

    max_depth = 0
    for dependent in index.dependents(req_id):
        depth = 1 + dependency_depth(index, dependent.id, set(visited))
        max_depth = max(max_depth, depth)
    return max_depth
