"""
Example: Traversals, spanning trees and shortest paths with simplegraph

Builds a small weighted friendship graph and runs every algorithm in the
library on it. Set SIMPLEGRAPH_LOG_LEVEL=DEBUG to watch the edge choices.
"""

from simplegraph import Graph, TraversalCallbacks, adjacency_matrix

FRIENDS = [
    ("Joe", "Bob", 3),
    ("Joe", "Mike", 1),
    ("Bob", "Mike", 2),
    ("Bob", "Sam", 8),
    ("Sam", "Kelly", 6),
    ("Kelly", "Vic", 3),
    ("Kelly", "Finn", 2),
    ("Finn", "Vic", 3),
    ("Finn", "Jess", 2),
    ("Jess", "Vic", 2),
    ("Vic", "Mike", 4),
]


def build_graph() -> Graph:
    g = Graph(weighted=True)
    for u, v, w in FRIENDS:
        g.add_edge(u, v, w)
    return g


def example_traversals(g: Graph):
    """Example: BFS parent map and DFS orderings."""
    print("=" * 60)
    print("Example 1: Traversals")
    print("=" * 60)

    print(f"BFS parents from Vic: {g.breadth_first_search('Vic')}")

    pre, post = [], []
    g.depth_first_search(
        "Vic",
        TraversalCallbacks(vertex_discovered=pre.append, vertex_processed=post.append),
    )
    print(f"DFS preorder:  {pre}")
    print(f"DFS postorder: {post}")
    print()


def example_spanning_tree(g: Graph):
    """Example: Prim's minimum spanning tree."""
    print("=" * 60)
    print("Example 2: Minimum Spanning Tree")
    print("=" * 60)

    mst = g.prim("Joe")
    for u, v, _ in mst.edges():
        print(f"  {u} - {v} ({g.weight(u, v)})")
    print(f"Total weight: {sum(g.weight(u, v) for u, v, _ in mst.edges())}")
    print()


def example_shortest_paths(g: Graph):
    """Example: Dijkstra distances and a reconstructed route."""
    print("=" * 60)
    print("Example 3: Shortest Paths")
    print("=" * 60)

    result = g.dijkstra("Mike")
    for vertex, distance in sorted(result.distances.items(), key=lambda kv: kv[1]):
        print(f"  {vertex:6s} {distance}")
    print(f"Mike -> Kelly: {g.shortest_path('Mike', 'Kelly')}")
    print()


def example_matrix(g: Graph):
    """Example: Dense adjacency matrix."""
    print("=" * 60)
    print("Example 4: Adjacency Matrix")
    print("=" * 60)

    print(g.vertices())
    print(adjacency_matrix(g))
    print()


def main() -> None:
    graph = build_graph()
    example_traversals(graph)
    example_spanning_tree(graph)
    example_shortest_paths(graph)
    example_matrix(graph)


if __name__ == "__main__":
    main()
