"""
lcaengine/graph/neighbors.py

Neighbor providers over host graphs.

A provider answers two questions about a node:
- forward_neighbors: children (edges parent -> child)
- backward_neighbors: parents (the same edges walked child -> parent)

Unknown nodes have no neighbors; providers never raise for them.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Tuple, runtime_checkable

import networkx as nx
import numpy as np
import scipy.sparse as sp

from lcaengine.core.types import Direction

UNIT_COST = 1


@runtime_checkable
class NeighborProvider(Protocol):
    """Read-only adjacency in both edge directions."""

    def forward_neighbors(self, node: Any) -> List[Any]:
        ...

    def backward_neighbors(self, node: Any) -> List[Any]:
        ...


class DiGraphNeighbors:
    """
    Neighbor provider backed by a networkx directed graph.
    
    Parallel edges of a MultiDiGraph collapse to a single neighbor.
    """

    def __init__(self, graph: nx.DiGraph):
        if not isinstance(graph, nx.Graph) or not graph.is_directed():
            raise TypeError("DiGraphNeighbors requires a directed networkx graph")
        self.g = graph

    def forward_neighbors(self, node: Any) -> List[Any]:
        if node not in self.g:
            return []
        return list(self.g.successors(node))

    def backward_neighbors(self, node: Any) -> List[Any]:
        if node not in self.g:
            return []
        return list(self.g.predecessors(node))

    def __repr__(self) -> str:
        return f"DiGraphNeighbors(nodes={self.g.number_of_nodes()}, edges={self.g.number_of_edges()})"


class ArrayNeighbors:
    """
    Neighbor provider backed by an adjacency matrix.
    
    A nonzero entry A[i, j] is an edge i -> j. Nodes are the integer
    indices 0 .. n-1; anything else is an unknown node.
    """

    def __init__(self, matrix):
        A = sp.csr_matrix(matrix, copy=True)
        if A.shape[0] != A.shape[1]:
            raise ValueError(f"adjacency matrix must be square, got shape {A.shape}")
        A.eliminate_zeros()
        A.sort_indices()
        self.n = A.shape[0]
        self._rows = A
        self._cols = A.tocsc()
        self._cols.sort_indices()

    def _index(self, node: Any) -> int:
        if isinstance(node, (bool, np.bool_)):
            return -1
        if not isinstance(node, (int, np.integer)):
            return -1
        i = int(node)
        if i < 0 or i >= self.n:
            return -1
        return i

    def forward_neighbors(self, node: Any) -> List[int]:
        i = self._index(node)
        if i < 0:
            return []
        lo, hi = self._rows.indptr[i], self._rows.indptr[i + 1]
        return self._rows.indices[lo:hi].tolist()

    def backward_neighbors(self, node: Any) -> List[int]:
        i = self._index(node)
        if i < 0:
            return []
        lo, hi = self._cols.indptr[i], self._cols.indptr[i + 1]
        return self._cols.indices[lo:hi].tolist()

    def __repr__(self) -> str:
        return f"ArrayNeighbors(nodes={self.n}, edges={self._rows.nnz})"


def as_neighbor_provider(graph: Any) -> NeighborProvider:
    """
    Adapt a host graph to a NeighborProvider.
    
    Accepts:
        - objects already exposing forward_neighbors/backward_neighbors
        - networkx DiGraph / MultiDiGraph
        - scipy.sparse matrices and 2-D numpy arrays (adjacency)
        
    Raises:
        TypeError: for undirected graphs and unsupported objects
    """
    if isinstance(graph, nx.Graph):
        if not graph.is_directed():
            raise TypeError("LCA requires a directed graph, got an undirected networkx graph")
        return DiGraphNeighbors(graph)
    if sp.issparse(graph) or (isinstance(graph, np.ndarray) and graph.ndim == 2):
        return ArrayNeighbors(graph)
    if isinstance(graph, NeighborProvider):
        return graph
    raise TypeError(f"Cannot use {type(graph).__name__} as a graph")


def neighbors(provider: NeighborProvider, node: Any, direction: Direction) -> List[Tuple[Any, int]]:
    """Neighbors of a node in one direction, each with unit cost."""
    if direction is Direction.FORWARD:
        adj = provider.forward_neighbors(node)
    else:
        adj = provider.backward_neighbors(node)
    return [(m, UNIT_COST) for m in adj]
