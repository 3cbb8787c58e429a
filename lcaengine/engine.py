"""
lcaengine/engine.py

LCA engine: the public entry points.

The engine borrows a host graph read-only and holds no state between
queries beyond the adapted neighbor provider.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from lcaengine.core.modes import QueryMode, Rooted, Rootless, mode_for_root
from lcaengine.core.types import AncestorSet
from lcaengine.graph.neighbors import as_neighbor_provider
from lcaengine.resolver import lca_rooted, lca_rootless
from lcaengine.traversal.ancestors import collect_ancestors
from lcaengine.traversal.cycles import find_backward_cycle, has_cycle_through


class LcaEngine:
    """
    Lowest common ancestor queries over one host graph.

    The graph may be a networkx DiGraph/MultiDiGraph, a scipy.sparse or
    numpy adjacency matrix, or any object exposing forward_neighbors and
    backward_neighbors.

    Example:
        >>> import networkx as nx
        >>> engine = LcaEngine(nx.DiGraph([(1, 2), (2, 3), (2, 4)]))
        >>> engine.query(3, 4)
        2
        >>> engine.query(3, 4, Rooted(1))
        2
    """

    def __init__(self, graph: Any):
        self.provider = as_neighbor_provider(graph)

    def query(self, node1: Any, node2: Any, mode: Optional[QueryMode] = None) -> Optional[Any]:
        """
        Lowest common ancestor of node1 and node2.

        Args:
            node1, node2: Query nodes
            mode: Rootless() (default) or Rooted(root)

        Returns:
            The LCA node, or None if not found
        """
        if mode is None:
            mode = Rootless()
        if isinstance(mode, Rootless):
            return lca_rootless(self.provider, node1, node2)
        if isinstance(mode, Rooted):
            return lca_rooted(self.provider, mode.root, node1, node2)
        raise TypeError(f"Unknown query mode: {mode!r}")

    def ancestors(self, node: Any) -> AncestorSet:
        """All nodes backward-reachable from node, itself included."""
        return collect_ancestors(self.provider, node)

    def has_cycle(self, node: Any) -> bool:
        """Whether node lies on a cycle."""
        return has_cycle_through(self.provider, node)

    def ancestor_cycle(self, node: Any):
        """A cycle among the ancestors of node, or None."""
        return find_backward_cycle(self.provider, node)

    def all_pairs(
        self,
        pairs: Iterable[Tuple[Any, Any]],
        mode: Optional[QueryMode] = None,
    ) -> Iterator[Tuple[Tuple[Any, Any], Optional[Any]]]:
        """
        Resolve many pairs, yielding ((node1, node2), lca).

        Duplicate pairs are resolved once. In rootless mode the ancestor set
        of each first node is computed once and reused.
        """
        if mode is None:
            mode = Rootless()
        if not isinstance(mode, (Rootless, Rooted)):
            raise TypeError(f"Unknown query mode: {mode!r}")

        cache: Dict[Any, AncestorSet] = {}
        for v, w in dict.fromkeys(pairs):
            if isinstance(mode, Rooted):
                yield (v, w), lca_rooted(self.provider, mode.root, v, w)
                continue
            if v not in cache:
                cache[v] = collect_ancestors(self.provider, v)
            yield (v, w), lca_rootless(self.provider, v, w, ancestors1=cache[v])

    def __repr__(self) -> str:
        return f"LcaEngine({self.provider!r})"


def lca(graph: Any, node1: Any, node2: Any, root: Optional[Any] = None) -> Optional[Any]:
    """
    Lowest common ancestor of two nodes in a directed graph.

    Passing root selects path comparison from that root (out-trees);
    omitting it selects ancestor-set comparison (trees, forests, DAGs).

    Args:
        graph: Host graph (see LcaEngine)
        node1, node2: Query nodes
        root: Optional root node

    Returns:
        The LCA node, or None if not found

    Example:
        >>> import networkx as nx
        >>> G = nx.DiGraph([(1, 2), (2, 3), (2, 4), (5, 6), (5, 7), (6, 8)])
        >>> lca(G, 7, 8)
        5
        >>> lca(G, 4, 6) is None
        True
    """
    return LcaEngine(graph).query(node1, node2, mode_for_root(root))


def all_pairs_lca(
    graph: Any,
    pairs: Iterable[Tuple[Any, Any]],
    root: Optional[Any] = None,
) -> Iterator[Tuple[Tuple[Any, Any], Optional[Any]]]:
    """
    Lowest common ancestors of many pairs.

    Yields:
        ((node1, node2), lca) for each distinct pair
    """
    return LcaEngine(graph).all_pairs(pairs, mode_for_root(root))
