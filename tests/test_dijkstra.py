import math

from algokit.bfs import bfs
from algokit.dijkstra import dijkstra, dijkstra_prev, restore_path
from algokit.graph import Graph


def _weighted():
    g = Graph(4, directed=True, weighted=True)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 1, 2)
    g.add_edge(1, 3, 5)
    return g


def test_dijkstra_takes_cheaper_detour():
    dist = dijkstra(_weighted(), 0)
    assert dist[0] == 0
    assert dist[1] == 3
    assert dist[3] == 8


def test_unreachable_is_infinite():
    g = Graph(2, directed=True, weighted=True)
    assert dijkstra(g, 0)[1] == math.inf


def test_restored_paths_cost_their_distance():
    g = _weighted()
    dist, prev = dijkstra_prev(g, 0)
    for t in range(len(g)):
        path = restore_path(prev, t)
        assert path[0] == 0 and path[-1] == t
        cost = sum(min(e.cost for e in g[u] if e.target == v) for u, v in zip(path, path[1:]))
        assert cost == dist[t]


def test_unit_weights_agree_with_bfs():
    g = Graph(6, weighted=True)
    for a, b in [(0, 1), (1, 2), (2, 3), (0, 4), (4, 3)]:
        g.add_edge(a, b, 1)
    dist = dijkstra(g, 0)
    levels = bfs(g, 0)
    for d, level in zip(dist, levels):
        assert (d == math.inf) == (level == -1)
        if level != -1:
            assert d == level


def test_restore_path_follows_prev():
    assert restore_path([-1, 0, 1], 2) == [0, 1, 2]
    assert restore_path([-1, 0], 0) == [0]