from algokit.bfs import bfs, bfs_grid
from algokit.graph import Graph


def test_bfs_distances_on_path():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    assert bfs(g, 0) == [0, 1, 2, -1]


def test_bfs_neighbours_differ_by_at_most_one():
    g = Graph(7)
    for a, b in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5), (2, 5)]:
        g.add_edge(a, b)
    dist = bfs(g, 0)
    assert dist[0] == 0
    assert dist[6] == -1
    for e in g.edges:
        assert dist[e.source] != -1 and dist[e.target] != -1
        assert abs(dist[e.source] - dist[e.target]) <= 1


def test_bfs_directed_ignores_reverse_direction():
    g = Graph(2, directed=True)
    g.add_edge(0, 1)
    assert bfs(g, 1) == [-1, 0]


def test_bfs_grid_goes_around_wall():
    passable = [
        [True, True, True],
        [False, False, True],
        [True, True, True],
    ]
    dist = bfs_grid(passable, 0, 0)
    assert dist[0][0] == 0
    assert dist[1][0] == -1
    assert dist[2][0] == 6


def test_bfs_grid_unreachable_cell():
    dist = bfs_grid([[True, False, True]], 0, 0)
    assert dist[0][0] == 0
    assert dist[0][2] == -1