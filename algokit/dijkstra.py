"""Single-source shortest paths with non-negative edge costs."""

from __future__ import annotations

import heapq
import math

from algokit.graph import Graph


def dijkstra_prev(graph: Graph, src: int) -> tuple[list[float], list[int]]:
    """Return ``(dist, prev)``: distances (``math.inf`` if unreachable) and predecessors (-1 if none)."""
    n = len(graph)
    dist: list[float] = [math.inf] * n
    prev = [-1] * n
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, v = heapq.heappop(heap)
        if dist[v] < d:
            continue
        for edge in graph[v]:
            candidate = d + edge.cost
            if candidate < dist[edge.target]:
                dist[edge.target] = candidate
                prev[edge.target] = v
                heapq.heappush(heap, (candidate, edge.target))
    return dist, prev


def dijkstra(graph: Graph, src: int) -> list[float]:
    """Return shortest distances from ``src``; ``math.inf`` marks unreachable vertices."""
    return dijkstra_prev(graph, src)[0]


def restore_path(prev: list[int], dst: int) -> list[int]:
    """Walk ``prev`` back from ``dst`` and return the path in forward order."""
    path = []
    v = dst
    while v != -1:
        path.append(v)
        v = prev[v]
    path.reverse()
    return path