"""
Traversal module: cycle detection, ancestor collection and path search.
"""

from lcaengine.traversal.cycles import has_cycle_through, find_backward_cycle
from lcaengine.traversal.ancestors import iter_backward, collect_ancestors, is_ancestor
from lcaengine.traversal.paths import shortest_path, reaches

__all__ = [
    # cycles
    "has_cycle_through",
    "find_backward_cycle",
    # ancestors
    "iter_backward",
    "collect_ancestors",
    "is_ancestor",
    # paths
    "shortest_path",
    "reaches",
]
