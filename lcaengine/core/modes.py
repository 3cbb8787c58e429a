"""
lcaengine/core/modes.py

Query modes for LCA resolution.

The caller picks the mode; the engine never switches between them:
- Rootless: ancestor-set compare, valid for DAGs with merges
- Rooted: root-to-node path compare, valid for clean out-trees
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Rootless:
    """Resolve by comparing backward-reachable ancestor sets."""


@dataclass(frozen=True)
class Rooted:
    """
    Resolve by comparing shortest forward paths from a known root.
    
    Attributes:
        root: Root node of the out-tree containing both query nodes
    """
    root: Any


QueryMode = Union[Rootless, Rooted]


def mode_for_root(root: Optional[Any]) -> QueryMode:
    """Rooted(root) when a root is given, Rootless() otherwise."""
    if root is None:
        return Rootless()
    return Rooted(root)
