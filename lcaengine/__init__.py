"""
lcaengine: Lowest common ancestors in directed graphs

Finds the lowest common ancestor of two nodes in a graph that is expected
to be a rooted tree or forest, and answers None instead of a wrong node
when the graph has cycles, disconnected parts, several roots or merges.

Key components:
- graph: Neighbor providers over networkx graphs and adjacency matrices
- traversal: Cycle detection, ancestor collection and path search
- core: Shared record types and query modes
- resolver: Rootless and rooted LCA strategies
- engine: LcaEngine and the lca() entry point
"""

__version__ = "1.0.0"

from lcaengine.core.types import AncestorSet, Direction, PathRecord
from lcaengine.core.modes import Rooted, Rootless
from lcaengine.graph.neighbors import (
    NeighborProvider,
    DiGraphNeighbors,
    ArrayNeighbors,
    as_neighbor_provider,
)
from lcaengine.traversal.cycles import has_cycle_through, find_backward_cycle
from lcaengine.traversal.ancestors import collect_ancestors
from lcaengine.engine import LcaEngine, lca, all_pairs_lca

__all__ = [
    # Types
    "AncestorSet",
    "Direction",
    "PathRecord",
    # Modes
    "Rooted",
    "Rootless",
    # Neighbors
    "NeighborProvider",
    "DiGraphNeighbors",
    "ArrayNeighbors",
    "as_neighbor_provider",
    # Traversal
    "has_cycle_through",
    "find_backward_cycle",
    "collect_ancestors",
    # Engine
    "LcaEngine",
    "lca",
    "all_pairs_lca",
]
