# algokit

A pure-Python collection of algorithms and data structures of the kind used in
competitive programming. It has no third-party dependencies.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.graph` | `Edge`, `Graph` (directed or undirected, weighted or unweighted adjacency lists; `add_edge`, `add`, `read`, `path_to_vertex`, `vertex_to_path`) |
| `algokit.bfs` | `bfs`, `bfs_grid` (unreachable cells are -1) |
| `algokit.dijkstra` | `dijkstra`, `dijkstra_prev`, `restore_path` (unreachable vertices are `math.inf`) |
| `algokit.kruskal` | `kruskal` minimum spanning forest of an undirected graph |
| `algokit.toposort` | `toposort` (Kahn; empty list on a cycle), `toposort_dfs` (returns `(order, has_cycle)`) |
| `algokit.extgcd` | `extgcd`, `modinv`, `crt` (`(0, 0)` when there is no solution) |
| `algokit.modint` | `ModInt`, `Mint` (mod 998244353), `Mint7` (mod 10^9+7), `Combination` (`c`, `p`, `h`) |
| `algokit.prime` | `is_prime` (deterministic Miller-Rabin for 64-bit inputs), `enumprimes`, `factorize` (Pollard's rho) |
| `algokit.unionfind` | `UnionFind` (`root`, `merge`, `size`, `same`, `groups`, `components`) |
| `algokit.kmp` | `kmp_failure`, `kmp_search`, `string_period` |
| `algokit.rolling_hash` | `RollingHash` (double hash; `get`, `lcp`, `eq`) |
| `algokit.z_algorithm` | `z_algorithm`, `z_search` |
| `algokit.fenwick` | `FenwickTree` (`add`, `set`, `get`, `sum`) |
| `algokit.fenwick2d` | `FenwickTree2D`, `CompressedFenwickTree2D` (offline: `reserve`, then `build`) |
| `algokit.segtree` | `SegTree` with `max_right` / `min_left` binary search |
| `algokit.lazysegtree` | `LazySegTree` (`apply`, `apply_point`, `prod`, `get`, `set`) |
| `algokit.sparse_table` | `SparseTable` for idempotent operations |
| `algokit.swag` | `SlidingWindowAggregation` (`push_back`, `pop_front`, `fold`) |
| `algokit.majority_vote` | `MajorityVote`, `MajoritySegTree`, `bm_op` |
| `algokit.interval_heap` | `IntervalHeap` double-ended priority queue |
| `algokit.dynamic_segtree` | `DynamicSegTree` over a large index range, nodes created on demand |
| `algokit.splay_tree` | `SplayTree` ordered set (`predecessor`, `successor`, `lower_bound`, `prev_le`, ...) |
| `algokit.mo` | `Mo` offline range queries |
| `algokit.segtree_beats` | `SegTreeBeats` (range chmin/chmax/add/set, range max/min/sum) |
| `algokit.wavelet_matrix` | `WaveletMatrix` (`kth`, `count`, `count_lt`, `range_freq`), `WaveletMatrixSum` (`sum_lt`, `range_sum`) |
| `algokit.hashmap` | `HashMap` open-addressing map for int and int-pair keys, optional `default_factory` |
| `algokit.bits` | `popcount`, `topbit`, `subsets`, `next_combination`, `power`, `enum_pow`, `deep_min`, `deep_max`, `deep_sum` |

## Examples

Shortest paths:

```python
from algokit.graph import Graph
from algokit.dijkstra import dijkstra_prev, restore_path

g = Graph(4, directed=True, weighted=True)
g.add_edge(0, 1, 5)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 10)
dist, prev = dijkstra_prev(g, 0)
print(dist[2], restore_path(prev, 2))   # 6 [0, 1, 2]
```

A segment tree over sums:

```python
from algokit.segtree import SegTree

seg = SegTree([1, 2, 3, 4], op=lambda a, b: a + b, e=lambda: 0)
seg.add(1, 10)
print(seg.prod(0, 3))   # 16
```

Modular arithmetic and combinations:

```python
from algokit.modint import Mint, Combination

print(Mint(3) / Mint(2))
comb = Combination(100, Mint)
print(comb.c(10, 3))    # 120
```

Primes:

```python
from algokit.prime import is_prime, factorize, enumprimes

print(is_prime(998244353))   # True
print(factorize(360))        # [2, 2, 2, 3, 3, 5]
print(enumprimes(20))        # [2, 3, 5, 7, 11, 13, 17, 19]
```

## Conventions

All index ranges are half-open `[left, right)` and 0-indexed unless a class
documents otherwise; the 2D Fenwick trees use 1-indexed inclusive rectangles.
Monoid-based structures (`SegTree`, `LazySegTree`, `DynamicSegTree`,
`SlidingWindowAggregation`) take the operation as a callable and the identity
as a zero-argument callable. Out-of-range indices raise `IndexError`.

## What it does not do

This is a library only: it installs no command-line program. The only input
reading it offers is `Graph.read`, which takes edge lists from standard input
or from a given text stream.