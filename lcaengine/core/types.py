"""
lcaengine/core/types.py

Shared record types for ancestor walks.

- Direction: which way an edge is traversed
- PathRecord: a node reached by a walk, with its hop count
- AncestorSet: every node backward-reachable from an origin, with costs
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional


class Direction(enum.Enum):
    """Edge traversal direction."""
    FORWARD = "forward"    # parent -> child
    BACKWARD = "backward"  # child -> parent


@dataclass(frozen=True)
class PathRecord:
    """
    A node reached during a walk.
    
    Attributes:
        node: Node identifier
        cost: Hop count from the node the walk started at
    """
    node: Any
    cost: int


@dataclass(frozen=True)
class AncestorSet:
    """
    Ancestors of a node, including the node itself at cost 0.
    
    Attributes:
        origin: Node the backward walk started at
        costs: Node -> shortest backward hop count from origin
    """
    origin: Any
    costs: Dict[Any, int] = field(default_factory=dict)

    def __contains__(self, node: object) -> bool:
        return node in self.costs

    def __iter__(self) -> Iterator[Any]:
        return iter(self.costs)

    def __len__(self) -> int:
        return len(self.costs)

    def cost(self, node: Any) -> Optional[int]:
        """Hop count from origin to an ancestor, or None if not an ancestor."""
        return self.costs.get(node)

    def records(self) -> Iterator[PathRecord]:
        """Iterate over (node, cost) records."""
        for n, c in self.costs.items():
            yield PathRecord(node=n, cost=c)
