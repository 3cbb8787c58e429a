"""
Core module: shared record types and query modes.
"""

from lcaengine.core.types import AncestorSet, Direction, PathRecord
from lcaengine.core.modes import QueryMode, Rooted, Rootless, mode_for_root

__all__ = [
    "AncestorSet",
    "Direction",
    "PathRecord",
    "QueryMode",
    "Rooted",
    "Rootless",
    "mode_for_root",
]
