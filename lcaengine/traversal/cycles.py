"""
lcaengine/traversal/cycles.py

Cycle detection over backward (child -> parent) edges.

has_cycle_through is a reachability walk with one shared seen set.
find_backward_cycle is an iterative DFS with white/grey/black colouring:
- WHITE: not yet reached
- GREY: on the current DFS path
- BLACK: fully explored

There an edge into a GREY node closes a cycle. Both are O(V + E) time and
O(V) memory.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from lcaengine.graph.neighbors import as_neighbor_provider

WHITE, GREY, BLACK = 0, 1, 2


def has_cycle_through(graph: Any, node: Any) -> bool:
    """
    Check whether a node lies on a cycle.
    
    True iff the node can reach itself again by walking one or more
    backward edges (a self-loop counts). Cycles further up the ancestry
    that do not pass through the node are not reported.
    """
    provider = as_neighbor_provider(graph)
    seen = {node}
    stack = [node]
    while stack:
        u = stack.pop()
        for p in provider.backward_neighbors(u):
            if p == node:
                return True
            if p in seen:
                continue
            seen.add(p)
            stack.append(p)
    return False


def find_backward_cycle(graph: Any, node: Any) -> Optional[List[Any]]:
    """
    Find a cycle among the ancestors of a node.
    
    Args:
        graph: Host graph or NeighborProvider
        node: Start of the backward walk
        
    Returns:
        [v0, v1, ..., vk, v0] where each consecutive pair is a backward
        edge, or None if every backward-reachable node is acyclic
    """
    provider = as_neighbor_provider(graph)
    color: Dict[Any, int] = {node: GREY}
    # Stack entries: (node, parents, index of next parent to visit)
    stack: List[Tuple[Any, List[Any], int]] = [(node, provider.backward_neighbors(node), 0)]
    while stack:
        u, parents, idx = stack[-1]
        if idx >= len(parents):
            color[u] = BLACK
            stack.pop()
            continue
        stack[-1] = (u, parents, idx + 1)
        p = parents[idx]
        state = color.get(p, WHITE)
        if state == GREY:
            path = [entry[0] for entry in stack]
            start = path.index(p)
            return path[start:] + [p]
        if state == WHITE:
            color[p] = GREY
            stack.append((p, provider.backward_neighbors(p), 0))
    return None
