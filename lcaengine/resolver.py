"""
lcaengine/resolver.py

Lowest common ancestor resolution.

Two strategies, chosen by the caller:
- Rootless: compare the ancestor sets of both nodes; works on DAGs with
  merges and on forests with several roots
- Rooted: compare shortest root -> node paths; assumes an out-tree

Every graph-shape problem (cycle through a query node, no common
ancestor, node unreachable from the root, cycle back to the root)
resolves to None rather than raising.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from lcaengine.core.types import AncestorSet, Direction
from lcaengine.graph.neighbors import NeighborProvider
from lcaengine.traversal.ancestors import collect_ancestors, iter_backward
from lcaengine.traversal.cycles import has_cycle_through
from lcaengine.traversal.paths import reaches, shortest_path

log = logging.getLogger(__name__)


def _on_cycle(provider: NeighborProvider, *nodes: Any) -> bool:
    for n in nodes:
        if has_cycle_through(provider, n):
            log.debug("node %r lies on a cycle; no LCA", n)
            return True
    return False


def common_ancestors(
    provider: NeighborProvider,
    node1: Any,
    node2: Any,
    ancestors1: Optional[AncestorSet] = None,
) -> Dict[Any, Tuple[int, int]]:
    """
    Nodes backward-reachable from both node1 and node2.

    Args:
        provider: Neighbor provider
        node1, node2: Query nodes
        ancestors1: Precomputed ancestor set of node1

    Returns:
        Common ancestor -> (cost from node1, cost from node2)
    """
    if ancestors1 is None:
        ancestors1 = collect_ancestors(provider, node1)
    out: Dict[Any, Tuple[int, int]] = {}
    for rec in iter_backward(provider, node2):
        d1 = ancestors1.cost(rec.node)
        if d1 is not None:
            out[rec.node] = (d1, rec.cost)
    return out


def lowest_candidates(provider: NeighborProvider, common: Dict[Any, Tuple[int, int]]) -> List[Any]:
    """
    Common ancestors with no lower common ancestor below them.

    A common node below c is lower than c unless it is also an ancestor
    of c, so nodes sharing a cycle above both query nodes do not hide
    each other. Every node on a path from c down to a common node is
    itself common, so the downward walk stays inside the common set.
    """
    lowest = []
    for c in common:
        below = _common_below(provider, c, common)
        if below:
            above = collect_ancestors(provider, c)
            if any(s not in above for s in below):
                continue
        lowest.append(c)
    return lowest


def _common_below(provider: NeighborProvider, c: Any, common: Dict[Any, Tuple[int, int]]) -> Set[Any]:
    seen: Set[Any] = set()
    stack = [c]
    while stack:
        u = stack.pop()
        for s in provider.forward_neighbors(u):
            if s == c or s in seen or s not in common:
                continue
            seen.add(s)
            stack.append(s)
    return seen


def _first_in_order(nodes: List[Any]) -> Any:
    try:
        return min(nodes)
    except TypeError:
        # Mixed, unorderable identifiers
        return min(nodes, key=repr)


def lca_rootless(
    provider: NeighborProvider,
    node1: Any,
    node2: Any,
    ancestors1: Optional[AncestorSet] = None,
) -> Optional[Any]:
    """
    LCA by ancestor-set comparison.

    Among the lowest common ancestors, picks the one with the smallest
    total distance to both nodes, then the smallest larger distance, then
    the smallest identifier. The ranking is symmetric in node1 and node2.

    Args:
        provider: Neighbor provider
        node1, node2: Query nodes
        ancestors1: Precomputed ancestor set of node1 (batch queries)

    Returns:
        The LCA, or None if there is none or a query node lies on a cycle
    """
    if _on_cycle(provider, node1, node2):
        return None
    if node1 == node2:
        return node1

    common = common_ancestors(provider, node1, node2, ancestors1)
    if not common:
        log.debug("no common ancestor for %r and %r", node1, node2)
        return None

    lowest = lowest_candidates(provider, common)

    def rank(c: Any) -> Tuple[int, int]:
        d1, d2 = common[c]
        return (d1 + d2, max(d1, d2))

    best = min(rank(c) for c in lowest)
    tied = [c for c in lowest if rank(c) == best]
    result = tied[0] if len(tied) == 1 else _first_in_order(tied)
    log.debug("lca(%r, %r) = %r (costs %s)", node1, node2, result, common[result])
    return result


def common_prefix_end(path1: List[Any], path2: List[Any]) -> Optional[Any]:
    """Last element of the longest common prefix of two paths."""
    last = None
    for a, b in zip(path1, path2):
        if a != b:
            break
        last = a
    return last


def lca_rooted(
    provider: NeighborProvider,
    root: Any,
    node1: Any,
    node2: Any,
) -> Optional[Any]:
    """
    LCA by comparing shortest forward paths from a known root.

    Args:
        provider: Neighbor provider
        root: Root of the out-tree
        node1, node2: Query nodes

    Returns:
        Deepest node shared by root -> node1 and root -> node2, or None if
        a node lies on a cycle, is unreachable from root, or can reach
        root again by forward edges
    """
    if _on_cycle(provider, node1, node2):
        return None

    path1 = shortest_path(provider, root, node1, Direction.FORWARD)
    path2 = shortest_path(provider, root, node2, Direction.FORWARD)
    if path1 is None or path2 is None:
        log.debug("root %r does not reach %r", root, node1 if path1 is None else node2)
        return None

    for n in (node1, node2):
        if n != root and reaches(provider, n, root, Direction.FORWARD):
            log.debug("node %r reaches root %r again; no LCA", n, root)
            return None

    result = common_prefix_end(path1, path2)
    log.debug("lca(%r, %r) from root %r = %r", node1, node2, root, result)
    return result
