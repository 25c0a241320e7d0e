# cseskit

Classic competitive-programming problems solved as plain Python functions
and small data structures. Every solver takes ordinary Python values and
returns ordinary Python values, so it can be called from a notebook, a test
or another program. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Conventions

- Graph and tree functions take the number of nodes `n` and an iterable of
  edges, with nodes numbered `1..n`. Weighted edges are `(a, b, weight)`.
  An edge naming a node outside `1..n` raises `ValueError`.
- The range-query structures and `DisjointSet` use 0-based indices, and
  ranges `lo..hi` are inclusive. An index out of range raises `IndexError`.
- Counting results that can grow large are reduced modulo `10**9 + 7`
  (`cseskit.introductory.MOD`) where the docstring says so.
- Where a problem has no solution, the function returns `None` (for
  example `labyrinth`, `round_trip`, `two_sets`, `minimizing_coins`);
  invalid arguments raise `ValueError`. Each docstring says which applies.

## Modules

### `cseskit.introductory`

`weird_algorithm` (Collatz sequence), `missing_number`, `repetitions`,
`increasing_array`, `beautiful_permutation`, `number_spiral`,
`two_knights`, `two_sets`, `bit_strings`, `trailing_zeros`, `coin_piles`,
`palindrome_reorder`, `gray_code`, `tower_of_hanoi` (moves as
`(from, to)` pairs, towers 1 to 3) and `digit_query` (the k-th digit of
`123456789101112...`).

### `cseskit.search`

Exhaustive search and backtracking: `apple_division`,
`creating_strings` (distinct rearrangements in alphabetical order),
`chessboard_queens` (eight queens on an 8x8 board of `.` and reserved `*`
squares) and `grid_paths` (paths through a 7x7 grid described by a
48-character pattern of `U`, `D`, `L`, `R` and `?`).

### `cseskit.dynamic`

`book_shop`, `coin_combinations_ordered`, `coin_combinations_unordered`,
`counting_numbers` (integers in a range with no two equal adjacent
digits), `dice_combinations`, `edit_distance`, `grid_path_count`
(right/down paths avoiding `*` traps), `minimizing_coins`, `money_sums`
(all positive subset sums up to 100000) and `removing_digits`.

### `cseskit.number_theory`

`count_divisors`, `power_mod`, `power_tower` (`a ** (b ** c)` modulo
`10**9 + 7`) and `josephus_query`.

### `cseskit.grid_graphs`

Searches on grids given as lists of strings: `count_rooms`, `labyrinth`
(shortest path from `A` to `B` as a string of moves) and `monsters`
(a way for `A` to reach the border before any `M`).

### `cseskit.traversal`

`building_roads`, `building_teams`, `message_route` and `round_trip`.

### `cseskit.weighted`

`find_negative_cycle`, `flight_routes` (the k cheapest route prices),
`road_reparation` (minimum spanning tree cost), `shortest_routes`
(Dijkstra from node 1), `all_pairs_shortest` (Floyd–Warshall on an
undirected graph) and `shortest_route_queries` (distances, `-1` when
unreachable).

### `cseskit.disjoint_set`

`DisjointSet(size)` with `find`, `union` (returns whether two sets were
joined), and the attributes `components` and `largest`.
`road_construction` reports `(components, largest)` after each road.

### `cseskit.trees`

`centroids` (both entries equal when the tree has one centroid) and
`tree_isomorphic` (two trees, both rooted at node 1).

### `cseskit.range_queries`

- `PrefixSums(values).query(lo, hi)` – static range sums.
- `SparseTableMin(values).query(lo, hi)` – static range minima.
- `FenwickTree(values)` – `set(index, value)`, `prefix_sum(count)`,
  `range_sum(lo, hi)`.

### `cseskit.segment_trees`

- `MinSegmentTree` – `set(index, value)`, `query(lo, hi)` for the minimum.
- `PrefixMaxTree` – `set(index, value)`, `max_prefix_sum(lo, hi)`; the
  empty prefix counts, so the result is never negative.
- `SubarraySumTree` – `set(index, value)`, `max_subarray_sum()`; the empty
  subarray counts, so the result is never negative.

### `cseskit.convex_hull`

- `Line(slope, intercept)` with `value(x)`.
- `MonotoneHull` – minimum of lines added with non-increasing slopes and
  queried at non-decreasing `x`; other orders raise `ValueError`.
- `LiChaoTree(lo, hi)` – minimum of lines over the integers `lo..hi`, in
  any order of insertion and query.

### `cseskit.optimization`

`monster_game` and `houses_schools`, both built on `LiChaoTree`.

## Examples

```python
from cseskit.introductory import weird_algorithm
from cseskit.dynamic import edit_distance
from cseskit.range_queries import FenwickTree

weird_algorithm(3)                # [3, 10, 5, 16, 8, 4, 2, 1]
edit_distance("LOVE", "MOVIE")    # 2

tree = FenwickTree([3, 2, 4, 5])
tree.range_sum(1, 3)              # 11
tree.set(2, 10)
tree.range_sum(1, 3)              # 17
```

```python
from cseskit.traversal import message_route

message_route(5, [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)])   # [1, 4, 5]
```

## What this package does not do

There is no command-line program: nothing reads problem input from
standard input or writes answers to standard output. Parsing input and
printing results in a judge's format is left to the caller.