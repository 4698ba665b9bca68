"""Topological ordering of directed graphs."""

from __future__ import annotations

from collections import deque

from algokit.graph import Graph


def _require_directed(graph: Graph) -> None:
    if not graph.directed:
        raise ValueError("topological sort needs a directed graph")


def toposort(graph: Graph) -> list[int]:
    """Kahn's algorithm; returns an empty list if the graph has a cycle."""
    _require_directed(graph)
    n = len(graph)
    indeg = [0] * n
    for edge in graph.edges:
        indeg[edge.target] += 1
    queue = deque(v for v in range(n) if indeg[v] == 0)
    order = []
    while queue:
        v = queue.popleft()
        order.append(v)
        for edge in graph[v]:
            indeg[edge.target] -= 1
            if indeg[edge.target] == 0:
                queue.append(edge.target)
    return order if len(order) == n else []


def toposort_dfs(graph: Graph) -> tuple[list[int], bool]:
    """Depth-first ordering; returns ``(order, has_cycle)`` with an empty order on a cycle."""
    _require_directed(graph)
    white, gray, black = 0, 1, 2
    color = [white] * len(graph)
    order = []
    for start in range(len(graph)):
        if color[start] != white:
            continue
        color[start] = gray
        stack = [(start, iter(graph[start]))]
        while stack:
            v, pending = stack[-1]
            for edge in pending:
                state = color[edge.target]
                if state == gray:
                    return [], True
                if state == white:
                    color[edge.target] = gray
                    stack.append((edge.target, iter(graph[edge.target])))
                    break
            else:
                color[v] = black
                order.append(v)
                stack.pop()
    order.reverse()
    return order, False