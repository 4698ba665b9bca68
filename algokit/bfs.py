"""Breadth-first search on graphs and grids."""

from __future__ import annotations

from collections import deque

from algokit.graph import Graph

_GRID_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def bfs(graph: Graph, src: int) -> list[int]:
    """Return edge-count distances from ``src``; -1 marks unreachable vertices."""
    dist = [-1] * len(graph)
    dist[src] = 0
    queue = deque([src])
    while queue:
        v = queue.popleft()
        for edge in graph[v]:
            if dist[edge.target] == -1:
                dist[edge.target] = dist[v] + 1
                queue.append(edge.target)
    return dist


def bfs_grid(passable: list[list[bool]], sr: int, sc: int) -> list[list[int]]:
    """Return 4-neighbour distances from ``(sr, sc)`` over passable cells; -1 if unreachable."""
    height, width = len(passable), len(passable[0])
    dist = [[-1] * width for _ in range(height)]
    dist[sr][sc] = 0
    queue = deque([(sr, sc)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _GRID_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and passable[nr][nc] and dist[nr][nc] == -1:
                dist[nr][nc] = dist[r][c] + 1
                queue.append((nr, nc))
    return dist