"""
lcaengine/traversal/paths.py

Shortest path search with unit edge cost.

With every edge costing 1, uniform-cost search visits nodes in the same
order as breadth-first search, so BFS with a parent map is used.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Optional

from lcaengine.core.types import Direction
from lcaengine.graph.neighbors import as_neighbor_provider, neighbors


def shortest_path(
    graph: Any,
    source: Any,
    target: Any,
    direction: Direction = Direction.FORWARD,
) -> Optional[List[Any]]:
    """
    Shortest path from source to target.
    
    Args:
        graph: Host graph or NeighborProvider
        source: Start node
        target: Goal node
        direction: Edge direction to follow
        
    Returns:
        [source, ..., target], [source] if source == target, or None if
        target is unreachable
    """
    provider = as_neighbor_provider(graph)
    if source == target:
        return [source]
    parent: Dict[Any, Any] = {source: None}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, _cost in neighbors(provider, u, direction):
            if v in parent:
                continue
            parent[v] = u
            if v == target:
                return _unwind(parent, source, v)
            queue.append(v)
    return None


def _unwind(parent: Dict[Any, Any], source: Any, end: Any) -> List[Any]:
    path = [end]
    while path[-1] != source:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def reaches(
    graph: Any,
    source: Any,
    target: Any,
    direction: Direction = Direction.FORWARD,
) -> bool:
    """
    Check whether target is reachable from source by one or more edges.
    
    Unlike shortest_path, source == target only counts when a cycle leads
    back to it.
    """
    provider = as_neighbor_provider(graph)
    seen = set()
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, _cost in neighbors(provider, u, direction):
            if v == target:
                return True
            if v in seen:
                continue
            seen.add(v)
            queue.append(v)
    return False
