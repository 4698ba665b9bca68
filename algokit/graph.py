"""Adjacency-list graphs whose edges carry a cost and an id."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

Number = int | float


@dataclass(frozen=True)
class Edge:
    """A single edge from ``source`` to ``target``."""

    source: int
    target: int
    cost: Number = 1
    id: int = -1


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _number(token: str) -> Number:
    try:
        return int(token)
    except ValueError:
        return float(token)


class Graph:
    """A graph on vertices ``0 .. n-1``, stored as adjacency lists.

    Every added edge is kept in ``edges``. An undirected edge is also stored
    reversed in the adjacency list of its target, with the same id.
    """

    def __init__(self, n: int, directed: bool = False, weighted: bool = False) -> None:
        self.directed = directed
        self.weighted = weighted
        self.edges: list[Edge] = []
        self.data: list[list[Edge]] = [[] for _ in range(n)]
        self.sum_cost: Number = 0

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, vertex: int) -> list[Edge]:
        return self.data[vertex]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self.data):
            raise IndexError(f"vertex {vertex} out of range for {len(self.data)} vertices")

    def add_edge(self, source: int, target: int, cost: Number = 1, edge_id: int = -1) -> Edge:
        """Add an edge; an id of -1 means the next free id."""
        self._check_vertex(source)
        self._check_vertex(target)
        if edge_id == -1:
            edge_id = len(self.edges)
        edge = Edge(source, target, cost, edge_id)
        self.data[source].append(edge)
        self.edges.append(edge)
        if not self.directed:
            self.data[target].append(Edge(target, source, cost, edge_id))
        self.sum_cost += cost
        return edge

    def add(self, edge: Edge) -> Edge:
        """Add an existing edge value."""
        return self.add_edge(edge.source, edge.target, edge.cost, edge.id)

    def read(self, m: int, indexed: int = 1, stream: TextIO | None = None) -> None:
        """Read ``m`` edges as whitespace-separated ``from to [cost]`` records.

        Vertex numbers in the input start at ``indexed``. Input is consumed
        line by line.
        """
        tokens = _tokens(sys.stdin if stream is None else stream)
        width = 3 if self.weighted else 2
        for _ in range(m):
            try:
                fields = [next(tokens) for _ in range(width)]
            except StopIteration:
                raise EOFError(f"expected {m} edges in the input") from None
            cost = _number(fields[2]) if self.weighted else 1
            self.add_edge(int(fields[0]) - indexed, int(fields[1]) - indexed, cost)

    def path_to_vertex(self, path: list[Edge]) -> list[int]:
        """Turn a sequence of edges into the vertices it walks through."""
        if not path:
            return []
        if len(path) == 1:
            return [path[0].source, path[0].target]
        x, y = path[0].source, path[0].target
        if x in (path[1].target, path[1].source):
            x, y = y, x
        vertices = [x]
        for edge in path[1:]:
            vertices.append(y)
            x = edge.target
            if x == y:
                x = edge.source
            x, y = y, x
        return vertices

    def vertex_to_path(self, vertices: list[int]) -> list[Edge]:
        """Turn a vertex sequence into edges, taking the first edge found per step.

        Steps with no connecting edge are skipped.
        """
        path = []
        for here, there in zip(vertices, vertices[1:]):
            edge = next((e for e in self.data[here] if e.target == there), None)
            if edge is not None:
                path.append(edge)
        return path