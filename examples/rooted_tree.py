"""
Example: Rooted LCA on a binary tree, and a cycle rejected.

root -> {1, 2}; 1 -> {3, 4}; 2 -> {5, 6}
"""

from lcaengine import LcaEngine, Rooted
from lcaengine.graph.builders import digraph_from_edges, out_tree


def main():
    tree = out_tree({"root": [1, 2], 1: [3, 4], 2: [5, 6]})
    engine = LcaEngine(tree)
    
    print("Binary tree, rooted at 'root':")
    for a, b in [(1, 5), (6, 5), (3, 4)]:
        print(f"  lca({a}, {b}) = {engine.query(a, b, Rooted('root'))}")
    
    # 1 -> 2 -> 5 -> 1 is a cycle; 3's subtree is still fine
    looped = digraph_from_edges([
        (1, 2), (1, 3), (5, 1), (2, 4), (2, 5), (3, 6), (3, 7),
    ])
    engine = LcaEngine(looped)
    
    print("\nGraph with a cycle:")
    print(f"  cycle above 6: {engine.ancestor_cycle(6)}")
    print(f"  lca(2, 6) = {engine.query(2, 6)}")
    print(f"  lca(6, 7) = {engine.query(6, 7)}")


if __name__ == "__main__":
    main()
