"""
Example: LCA on a diamond-shaped DAG and on a forest.

1 -> 2 -> {3, 4} -> {5, 6} -> 7 -> 8
{1 -> 2, 2 -> 3, 2 -> 4} and {5 -> 6, 5 -> 7, 6 -> 8}
"""

from lcaengine import LcaEngine
from lcaengine.graph.builders import digraph_from_edges


def main():
    print("=" * 60)
    print("Diamond merge")
    print("=" * 60)
    
    diamond = digraph_from_edges([
        (1, 2), (2, 3), (2, 4), (3, 5), (4, 6), (5, 7), (6, 7), (7, 8),
    ])
    engine = LcaEngine(diamond)
    for a, b in [(8, 4), (8, 2), (8, 5), (3, 7), (5, 6)]:
        print(f"  lca({a}, {b}) = {engine.query(a, b)}")
    
    print()
    print("=" * 60)
    print("Forest")
    print("=" * 60)
    
    forest = digraph_from_edges([
        (1, 2), (2, 3), (2, 4), (5, 6), (5, 7), (6, 8),
    ])
    engine = LcaEngine(forest)
    for (a, b), res in engine.all_pairs([(2, 4), (7, 8), (4, 6)]):
        print(f"  lca({a}, {b}) = {res}")


if __name__ == "__main__":
    main()
