"""
Graph module: neighbor providers and graph construction.
"""

from lcaengine.graph.neighbors import (
    UNIT_COST,
    NeighborProvider,
    DiGraphNeighbors,
    ArrayNeighbors,
    as_neighbor_provider,
    neighbors,
)
from lcaengine.graph.builders import digraph_from_edges, out_tree, tree_roots

__all__ = [
    # neighbors
    "UNIT_COST",
    "NeighborProvider",
    "DiGraphNeighbors",
    "ArrayNeighbors",
    "as_neighbor_provider",
    "neighbors",
    # builders
    "digraph_from_edges",
    "out_tree",
    "tree_roots",
]
