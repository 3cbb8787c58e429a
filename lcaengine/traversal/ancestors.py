"""
lcaengine/traversal/ancestors.py

Ancestor collection by walking backward edges.

The walk is breadth-first, so each ancestor is recorded once with its
shortest hop count even when two backward paths merge (a diamond).
A shared visited set keeps the walk finite on cyclic graphs.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, Iterator

from lcaengine.core.types import AncestorSet, PathRecord
from lcaengine.graph.neighbors import as_neighbor_provider


def iter_backward(graph: Any, node: Any) -> Iterator[PathRecord]:
    """
    Walk backward edges from a node in nondecreasing cost order.
    
    The start node is yielded first with cost 0. Each reachable node is
    yielded exactly once.
    """
    provider = as_neighbor_provider(graph)
    seen = {node}
    queue = deque([(node, 0)])
    while queue:
        u, cost = queue.popleft()
        yield PathRecord(node=u, cost=cost)
        for p in provider.backward_neighbors(u):
            if p in seen:
                continue
            seen.add(p)
            queue.append((p, cost + 1))


def collect_ancestors(graph: Any, node: Any) -> AncestorSet:
    """
    Collect every node backward-reachable from a node, itself included.
    
    Returns:
        AncestorSet with node -> shortest backward hop count
    """
    costs: Dict[Any, int] = {}
    for rec in iter_backward(graph, node):
        costs[rec.node] = rec.cost
    return AncestorSet(origin=node, costs=costs)


def is_ancestor(graph: Any, ancestor: Any, node: Any) -> bool:
    """Check whether ancestor is backward-reachable from node (or equal to it)."""
    for rec in iter_backward(graph, node):
        if rec.node == ancestor:
            return True
    return False
