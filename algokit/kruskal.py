"""Minimum spanning forest by Kruskal's algorithm."""

from __future__ import annotations

from operator import attrgetter

from algokit.graph import Edge, Graph
from algokit.unionfind import UnionFind


def kruskal(graph: Graph) -> tuple[int | float, list[Edge]]:
    """Return ``(total_cost, edges_used)`` of a minimum spanning forest of an undirected graph."""
    if graph.directed:
        raise ValueError("kruskal needs an undirected graph")
    forest = UnionFind(len(graph))
    total: int | float = 0
    used = []
    for edge in sorted(graph.edges, key=attrgetter("cost")):
        if forest.merge(edge.source, edge.target):
            total += edge.cost
            used.append(edge)
    return total, used