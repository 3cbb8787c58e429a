"""
Shared graph fixtures.
"""

import pytest

from lcaengine.graph.builders import digraph_from_edges, out_tree


@pytest.fixture
def diamond():
    """1 -> 2 -> {3, 4}; 3 -> 5 -> 7; 4 -> 6 -> 7; 7 -> 8"""
    return digraph_from_edges([
        (1, 2), (2, 3), (2, 4), (3, 5), (4, 6), (5, 7), (6, 7), (7, 8),
    ])


@pytest.fixture
def forest():
    """Two components: {1 -> 2, 2 -> 3, 2 -> 4} and {5 -> 6, 5 -> 7, 6 -> 8}"""
    return digraph_from_edges([
        (1, 2), (2, 3), (2, 4), (5, 6), (5, 7), (6, 8),
    ])


@pytest.fixture
def binary_tree():
    """root -> {1, 2}; 1 -> {3, 4}; 2 -> {5, 6}"""
    return out_tree({"root": [1, 2], 1: [3, 4], 2: [5, 6]})


@pytest.fixture
def looped():
    """Cycle 1 -> 2 -> 5 -> 1 above an otherwise tree-shaped part."""
    return digraph_from_edges([
        (1, 2), (1, 3), (5, 1), (2, 4), (2, 5), (3, 6), (3, 7),
    ])
