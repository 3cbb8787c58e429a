"""
lcaengine/graph/builders.py

Graph construction helpers.

These build networkx directed graphs with edges oriented parent -> child.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import networkx as nx


def digraph_from_edges(
    edges: Iterable[Tuple[Any, Any]],
    nodes: Optional[Iterable[Any]] = None,
    *,
    multigraph: bool = False,
) -> nx.DiGraph:
    """
    Build a directed graph from (parent, child) edges.
    
    Args:
        edges: Iterable of (parent, child) pairs
        nodes: Optional isolated nodes to add as well
        multigraph: Keep parallel edges (MultiDiGraph)
        
    Returns:
        NetworkX directed graph
    """
    g = nx.MultiDiGraph() if multigraph else nx.DiGraph()
    if nodes is not None:
        g.add_nodes_from(nodes)
    g.add_edges_from(edges)
    return g


def out_tree(children: Dict[Any, Sequence[Any]]) -> nx.DiGraph:
    """
    Build an out-tree from a parent -> children mapping.
    
    Example:
        >>> T = out_tree({"root": [1, 2], 1: [3, 4], 2: [5, 6]})
        >>> sorted(T.successors(1))
        [3, 4]
    """
    g = nx.DiGraph()
    for parent, kids in children.items():
        g.add_node(parent)
        for c in kids:
            g.add_edge(parent, c)
    return g


def tree_roots(g: nx.DiGraph) -> Tuple[Any, ...]:
    """Nodes without incoming edges, i.e. candidate roots of a forest."""
    return tuple(n for n in g.nodes() if g.in_degree(n) == 0)
