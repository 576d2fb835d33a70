# dsakit

A small library of classic algorithms and data structures written in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.searching`

Binary search over a sequence sorted in non-decreasing order. Each function returns an index,
or `None` when the target is absent.

```python
from dsakit.searching import binary_search, first_occurrence, last_occurrence

values = [1, 2, 2, 2, 5, 9]
binary_search(values, 5)      # 4
first_occurrence(values, 2)   # 1
last_occurrence(values, 2)    # 3
first_occurrence(values, 7)   # None
```

`binary_search` returns the index of some matching element; `first_occurrence` and
`last_occurrence` return the smallest and largest matching index.

### `dsakit.sorting`

The sorting functions accept any iterable and return a new list; the input is left untouched.

```python
from dsakit.sorting import merge_sort, quick_sort, quick_sort_counting, find_kth_largest

merge_sort([5, 1, 4, 1])                  # [1, 1, 4, 5]
quick_sort([3, 2, 1])                     # [1, 2, 3]
quick_sort_counting([3, 2, 1])            # [1, 2, 3]
find_kth_largest([3, 2, 1, 5, 6, 4], 2)   # 5
```

- `quick_sort` uses the first item of each range as the pivot.
- `quick_sort_counting` places each pivot by counting the items not greater than it.
- `find_kth_largest(values, k)` counts `k` from 1 and raises `ValueError` when `k` is outside
  `1..len(values)`.
- `partition(values, low, high)` places the pivot `values[low]` at its final position within
  `values[low:high + 1]`, in place, and returns that position. Items before it in the range are
  not greater than it, items after it are greater. An invalid range raises `IndexError`.

### `dsakit.dynamic`

Counting and optimisation problems solved by dynamic programming. Counts are reported modulo
`10**9 + 7`. Negative targets, budgets or prices and non-positive coin values raise
`ValueError`.

- `book_shop(prices, pages, budget)`: most pages obtainable, where each book may be bought any
  number of times but only while the money left is strictly greater than its price.
  `prices` and `pages` must be the same length.
- `coin_combinations_ordered(coins, target)`: ordered sequences of coins summing to `target`.
- `coin_combinations_unordered(coins, target)`: multisets of coins summing to `target`; each
  entry of `coins` counts as its own kind, even if values repeat.
- `dice_combinations(n)`: ordered sequences of throws of a six-sided die summing to `n`.
- `grid_paths(grid)`: right/down paths from the top-left to the bottom-right cell of a square
  grid of strings, avoiding `*` cells. A non-square grid raises `ValueError`; an empty grid
  has no paths.
- `min_coins(coins, target)`: fewest coins summing to `target`, or `None` if impossible.
- `remove_digits(n)`: fewest steps to reach zero, each step subtracting one non-zero digit of
  the current number.

```python
from dsakit.dynamic import dice_combinations, min_coins

dice_combinations(3)        # 4
min_coins([2], 3)           # None
```

### `dsakit.graphs`

Graphs have vertices `1..n` and are given as an iterable of `(u, v)` edges: undirected for
traversal and bipartiteness, directed from `u` to `v` for topological sort. Neighbours are
visited in the order their edges were given, and each new component starts from the lowest
unvisited vertex. A vertex outside `1..n` or a negative `n` raises `ValueError`.

```python
from dsakit.graphs import bfs_order, dfs_order, is_bipartite_bfs, topological_sort_bfs

edges = [(1, 2), (1, 3), (2, 4)]
bfs_order(4, edges)                              # [1, 2, 3, 4]
dfs_order(4, edges)                              # [1, 2, 4, 3]
is_bipartite_bfs(3, [(1, 2), (2, 3), (3, 1)])    # False
topological_sort_bfs(3, [(1, 2), (2, 3)])        # [1, 2, 3]
```

`is_bipartite_dfs` answers the same question by depth-first colouring.
`topological_sort_bfs` repeatedly removes vertices with no incoming edges;
`topological_sort_dfs` reverses depth-first finishing order. Both return `None` when the graph
has a cycle.

### `dsakit.structures`

`MinStack` is a stack that reports its smallest element in constant time. `pop` returns the
removed element; `pop`, `top` and `get_min` raise `IndexError` on an empty stack. `len()` and
truth testing work as for a list.

`Trie` stores words made of the letters `a` to `z`; `add` raises `ValueError` for any other
character. `find` (and the `in` operator) is true only for whole words that were added.

```python
from dsakit.structures import MinStack, Trie

stack = MinStack()
stack.push(5)
stack.push(3)
stack.push(7)
stack.top()       # 7
stack.get_min()   # 3
stack.pop()       # 7

trie = Trie()
trie.add("hello")
trie.find("hello")   # True
trie.find("hell")    # False
"hello" in trie      # True
```

## What this package does not do

dsakit is a library only. It has no command-line program and does not read problem input from
standard input or files; call the functions from your own code with the data already parsed.