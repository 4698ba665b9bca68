from algokit.unionfind import UnionFind


def test_merge_and_query():
    uf = UnionFind(5)
    assert uf.merge(0, 1) is True
    assert uf.merge(1, 0) is False
    assert uf.same(0, 1)
    assert not uf.same(0, 2)
    assert uf.size(0) == 2
    assert uf.size(4) == 1
    assert uf.components() == 4


def test_groups_partition_elements():
    uf = UnionFind(6)
    uf.merge(0, 1)
    uf.merge(0, 2)
    uf.merge(3, 4)
    groups = uf.groups()
    assert sorted(groups) == [[0, 1, 2], [3, 4], [5]]
    assert sum(len(g) for g in groups) == len(uf)
    assert len(groups) == uf.components()


def test_unmerged_element_is_its_own_root():
    uf = UnionFind(3)
    assert uf.root(2) == 2
    assert uf[1] == 1


def test_tie_without_callback_roots_at_second():
    uf = UnionFind(3)
    uf.merge(0, 1)
    assert uf.root(0) == 1
    uf.merge(2, 1)
    assert uf.root(2) == 1


def test_callback_receives_root_and_absorbed():
    uf = UnionFind(3)
    calls = []
    uf.merge(0, 1, lambda r, c: calls.append((r, c)))
    assert calls == [(0, 1)]
    assert uf.root(1) == 0
    uf.merge(2, 0, lambda r, c: calls.append((r, c)))
    assert calls[-1] == (0, 2)
    assert uf.size(2) == 3


def test_callback_not_called_when_already_joined():
    uf = UnionFind(2)
    uf.merge(0, 1)
    calls = []
    assert uf.merge(0, 1, lambda r, c: calls.append((r, c))) is False
    assert calls == []