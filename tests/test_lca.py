"""
Tests for lowest common ancestor resolution.
"""

import itertools
import logging

import networkx as nx
import numpy as np
import pytest

from lcaengine import LcaEngine, Rooted, Rootless, all_pairs_lca, lca
from lcaengine.graph.builders import digraph_from_edges
from lcaengine.resolver import common_ancestors, common_prefix_end, lowest_candidates
from lcaengine.graph.neighbors import as_neighbor_provider


class TestDiamondMerge:
    """Rootless mode on 1 -> 2 -> {3, 4} -> {5, 6} -> 7 -> 8."""
    
    def test_closest_common_ancestor(self, diamond):
        assert lca(diamond, 8, 4) == 4
        assert lca(diamond, 8, 2) == 2
        assert lca(diamond, 8, 5) == 5
        assert lca(diamond, 3, 7) == 3
    
    def test_branches(self, diamond):
        assert lca(diamond, 3, 2) == 2
        assert lca(diamond, 6, 3) == 2
        assert lca(diamond, 7, 5) == 5
        assert lca(diamond, 7, 4) == 4
        assert lca(diamond, 5, 6) == 2
    
    def test_symmetry(self, diamond):
        for a, b in itertools.combinations(diamond.nodes(), 2):
            assert lca(diamond, a, b) == lca(diamond, b, a)
    
    def test_reflexivity(self, diamond):
        for n in diamond.nodes():
            assert lca(diamond, n, n) == n


class TestForest:
    def test_components(self, forest):
        assert lca(forest, 2, 4) == 2
        assert lca(forest, 7, 8) == 5
        assert lca(forest, 3, 4) == 2
    
    def test_separate_components(self, forest):
        assert lca(forest, 4, 6) is None
        assert lca(forest, 1, 5) is None
    
    def test_isolated_nodes(self):
        g = digraph_from_edges([], nodes=[1, 2, 4, 5, 6, 7])
        
        assert lca(g, 2, 6) is None
        assert lca(g, 7, 6) is None
        assert lca(g, 4, 5) is None
    
    def test_single_node(self):
        g = digraph_from_edges([], nodes=["root"])
        
        assert lca(g, "root", "root") == "root"
    
    def test_unknown_node(self, forest):
        assert lca(forest, 2, 99) is None
        assert lca(forest, 99, 2) is None


class TestCycles:
    def test_node_on_cycle(self, looped):
        assert lca(looped, 2, 6) is None
        assert lca(looped, 6, 2) is None
        assert lca(looped, 1, 5) is None
    
    def test_cycle_elsewhere(self, looped):
        assert lca(looped, 6, 7) == 3
        assert lca(looped, 7, 6) == 3
    
    def test_valid_ancestor_elsewhere(self):
        g = digraph_from_edges([("r", "a"), ("a", "b"), ("b", "a"), ("r", "c")])
        
        assert lca(g, "a", "c") is None
        assert lca(g, "b", "c") is None
        assert lca(g, "a", "a") is None
    
    def test_self_loop(self):
        g = digraph_from_edges([(1, 2), (2, 2), (2, 3), (2, 4)])
        
        assert lca(g, 2, 3) is None
        assert lca(g, 3, 4) == 2
    
    def test_cycle_above_both_nodes(self):
        g = digraph_from_edges([("a", "b"), ("b", "a"), ("b", "x"), ("b", "y")])
        
        assert lca(g, "x", "y") == "b"
    
    def test_cycle_above_beats_farther_merge(self):
        g = digraph_from_edges([
            ("a", "b"), ("b", "a"), ("b", "x"), ("b", "y"),
            ("d", "e"), ("d", "g"), ("e", "x"), ("g", "y"),
        ])
        
        assert lca(g, "x", "y") == "b"
        assert lca(g, "y", "x") == "b"
    
    def test_cycle_members_stay_candidates(self):
        g = digraph_from_edges([
            ("a", "b"), ("b", "a"), ("b", "x"), ("b", "y"),
            ("d", "e"), ("d", "g"), ("e", "x"), ("g", "y"),
        ])
        prov = as_neighbor_provider(g)
        common = common_ancestors(prov, "x", "y")
        
        assert set(lowest_candidates(prov, common)) == {"a", "b", "d"}
    
    def test_lower_node_below_cycle_wins(self):
        g = digraph_from_edges([("a", "b"), ("b", "a"), ("b", "m"), ("m", "x"), ("m", "y")])
        prov = as_neighbor_provider(g)
        common = common_ancestors(prov, "x", "y")
        
        assert lowest_candidates(prov, common) == ["m"]
        assert lca(g, "x", "y") == "m"
    
    def test_rooted_mode_rejects_cycles(self):
        g = digraph_from_edges([("root", "a"), ("a", "b"), ("b", "root"), ("a", "c")])
        
        assert lca(g, "b", "c", root="root") is None
        assert lca(g, "c", "a", root="root") is None


class TestTieBreak:
    def test_criss_cross(self):
        g = digraph_from_edges([("a", "x"), ("a", "y"), ("b", "x"), ("b", "y")])
        
        assert lca(g, "x", "y") == "a"
        assert lca(g, "y", "x") == "a"
    
    def test_nearest_of_two_merges(self):
        g = digraph_from_edges([("p", "x"), ("q", "x"), ("p", "y"), ("q", "s"), ("s", "y")])
        
        assert lca(g, "x", "y") == "p"
        assert lca(g, "y", "x") == "p"
    
    def test_unorderable_identifiers(self):
        g = digraph_from_edges([("a", "x"), ("a", "y"), (1, "x"), (1, "y")])
        
        assert lca(g, "x", "y") == lca(g, "y", "x")
    
    def test_lowest_candidates(self, diamond):
        prov = as_neighbor_provider(diamond)
        common = common_ancestors(prov, 8, 4)
        
        assert common == {4: (3, 0), 2: (4, 1), 1: (5, 2)}
        assert lowest_candidates(prov, common) == [4]


class TestRootedMode:
    def test_binary_tree(self, binary_tree):
        assert lca(binary_tree, 1, 5, root="root") == "root"
        assert lca(binary_tree, 6, 5, root="root") == 2
        assert lca(binary_tree, 3, 4, root="root") == 1
    
    def test_root_as_query_node(self, binary_tree):
        assert lca(binary_tree, "root", 4, root="root") == "root"
        assert lca(binary_tree, "root", "root", root="root") == "root"
    
    def test_ancestor_and_descendant(self, binary_tree):
        assert lca(binary_tree, 2, 6, root="root") == 2
    
    def test_same_node(self, binary_tree):
        assert lca(binary_tree, 4, 4, root="root") == 4
    
    def test_unreachable_from_root(self, binary_tree):
        assert lca(binary_tree, 3, 5, root=2) is None
        assert lca(binary_tree, 3, 99, root="root") is None
    
    def test_symmetry(self, binary_tree):
        for a, b in itertools.combinations(binary_tree.nodes(), 2):
            assert lca(binary_tree, a, b, root="root") == lca(binary_tree, b, a, root="root")
    
    def test_matches_networkx_on_trees(self):
        T = nx.balanced_tree(2, 3, create_using=nx.DiGraph)
        
        for a, b in itertools.combinations(T.nodes(), 2):
            expected = nx.lowest_common_ancestor(T, a, b)
            assert lca(T, a, b, root=0) == expected
            assert lca(T, a, b) == expected
    
    def test_common_prefix_end(self):
        assert common_prefix_end(["r", 1, 3], ["r", 1, 4]) == 1
        assert common_prefix_end(["r", 1], ["r", 2, 5]) == "r"
        assert common_prefix_end(["r"], ["r", 2]) == "r"


class TestEngine:
    def test_modes(self, binary_tree):
        engine = LcaEngine(binary_tree)
        
        assert engine.query(3, 4) == 1
        assert engine.query(3, 4, Rootless()) == 1
        assert engine.query(3, 6, Rooted("root")) == "root"
    
    def test_unknown_mode(self, binary_tree):
        engine = LcaEngine(binary_tree)
        
        with pytest.raises(TypeError):
            engine.query(3, 4, "root")
    
    def test_helpers(self, looped):
        engine = LcaEngine(looped)
        
        assert engine.has_cycle(2)
        assert not engine.has_cycle(7)
        assert set(engine.ancestors(7)) == {7, 3, 1, 5, 2}
        assert set(engine.ancestor_cycle(7)) == {1, 2, 5}
    
    def test_all_pairs(self, forest):
        pairs = [(2, 4), (7, 8), (4, 6), (2, 4)]
        result = list(all_pairs_lca(forest, pairs))
        
        assert len(result) == 3
        assert dict(result) == {(2, 4): 2, (7, 8): 5, (4, 6): None}
    
    def test_all_pairs_rooted(self, binary_tree):
        result = dict(all_pairs_lca(binary_tree, [(3, 4), (6, 5), (1, 5)], root="root"))
        
        assert result == {(3, 4): 1, (6, 5): 2, (1, 5): "root"}
    
    def test_all_pairs_unknown_mode(self, forest):
        engine = LcaEngine(forest)
        
        with pytest.raises(TypeError):
            list(engine.all_pairs([(2, 4)], mode=object()))
    
    def test_adjacency_matrix(self):
        # Diamond relabelled to 0 .. 7
        A = np.zeros((8, 8), dtype=np.int8)
        for u, v in [(0, 1), (1, 2), (1, 3), (2, 4), (3, 5), (4, 6), (5, 6), (6, 7)]:
            A[u, v] = 1
        
        assert lca(A, 7, 3) == 3
        assert lca(A, 2, 6) == 2
        assert lca(A, 4, 5, root=0) == 1
    
    def test_custom_provider(self):
        class Parents:
            parent = {"b": "a", "c": "a", "d": "b"}
            
            def forward_neighbors(self, node):
                return [c for c, p in self.parent.items() if p == node]
            
            def backward_neighbors(self, node):
                return [self.parent[node]] if node in self.parent else []
        
        assert lca(Parents(), "d", "c") == "a"
        assert lca(Parents(), "d", "b", root="a") == "b"
    
    def test_weights_ignored(self):
        g = nx.DiGraph()
        g.add_edge("r", "a", weight=100)
        g.add_edge("a", "x", weight=100)
        g.add_edge("r", "y", weight=1)
        
        assert lca(g, "x", "y") == "r"
        assert lca(g, "x", "y", root="r") == "r"
    
    def test_does_not_modify_graph(self, diamond):
        before = (sorted(diamond.nodes()), sorted(diamond.edges()))
        lca(diamond, 8, 4)
        lca(diamond, 8, 4, root=1)
        
        assert (sorted(diamond.nodes()), sorted(diamond.edges())) == before
    
    def test_logs_rejection(self, looped, caplog):
        with caplog.at_level(logging.DEBUG, logger="lcaengine"):
            assert lca(looped, 2, 6) is None
        
        assert "cycle" in caplog.text
