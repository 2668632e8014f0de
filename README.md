# algokit

A small library of textbook algorithms in plain Python: sorting, string and
array search, lowest common ancestors in trees, linked lists and a linked
queue, streaming statistics, dynamic programming, postfix evaluation and a few
arithmetic exercises. It needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.comparison_sorts`

Each function takes any iterable and returns a new sorted list; the input is
left unchanged.

- `insertion_sort`, `exchange_insertion_sort`, `cocktail_sort`, `cycle_sort`,
  `pancake_sort`, `merge_sort`, `quick_sort` (last element as pivot),
  `heap_sort`.
- `bubble_sort(values, precedes=None)` orders by `precedes(a, b)`, true when
  `a` belongs before `b`; without it the order is ascending.
- `merge(first, second)` merges two sorted sequences; on ties the items of
  `first` come first.

### `algokit.distribution_sorts`

For non-negative integers; negative values raise `ValueError`.

- `bin_sort(values)` drops each value into a bin indexed by the value.
- `radix_sort(values)` sorts by decimal digits, least significant first;
  `radix_passes(values)` yields the list after each pass.
- `count_sort(values, key_range)` is a stable counting sort of integers in
  `range(key_range)`.
- `bounded_count_sort(values)` accepts integers from 0 to `COUNT_SORT_MAX`
  (100000) inclusive.
- `sort_characters(text)` returns the characters of `text` in code order;
  characters above code 255 raise `ValueError`.

### `algokit.search`

- `prefix_function(pattern)` gives the longest proper border of each prefix.
- `kmp_search(text, pattern)` returns the start of every occurrence,
  overlapping ones included; an empty pattern raises `ValueError`.
- `linear_search(values, key)` returns the first matching index, or -1.

### `algokit.tree`

`LiftedTree(node_count, edges)` is a tree on nodes `1..node_count` rooted at
node 1. It raises `ValueError` for nodes out of range or not connected to the
root. `lca(u, v)` and `distance(u, v)` answer by binary lifting;
`rooted_lca(root, u, v)` answers as if the tree were rooted at `root`.

### `algokit.linked`

- `Node(data, next=None)`, `from_iterable(values)` and `to_list(head)`.
- `sorted_merge(first, second)` splices two sorted lists into one, reusing
  their nodes; on equal data the node from `first` comes first.
- `LinkedQueue` has `enqueue`, `dequeue` (raises `IndexError` when empty),
  iteration from front to rear, `len()`, and a `str()` of either
  `Empty Queue` or `Elements in the current Queue are : ...`.

### `algokit.streams`

- `running_medians(values)` gives the median of every prefix: the middle value
  for odd lengths, the float mean of the two middle values for even ones.
- `stock_span(prices)` gives, for each day, the number of consecutive days up
  to it whose price was not above it.

### `algokit.dynamic`

- `minimum_health(dungeon)` is the least starting health to walk a grid from
  top-left to bottom-right moving right or down, keeping health at least 1.
- `matrix_chain_cost(dims)` is the fewest scalar multiplications for a chain
  where matrix `k` is `dims[k - 1] x dims[k]`.
- `digit_removal_steps(n)` is the fewest steps to reach 0, each subtracting
  one of the current number's digits.

### `algokit.postfix`

`evaluate_postfix(expression)` evaluates postfix over single-digit operands
with `+ - * / ^`, ignoring whitespace. `/` truncates toward zero and `^` is
bitwise xor; `apply_operator(left, right, operator)` applies one operator.
Malformed input raises `PostfixError`, a subclass of `ValueError`.

### `algokit.exercises`

`parity(n)`, `boxes_needed(a, b, c, capacity)`,
`classify_mixture(solute, solvent)` (returns `"Solution"`, `"Liquid"`,
`"Solid"` or `None`) and `digit_sum(n, base)`.

## Examples

```python
from algokit.comparison_sorts import heap_sort, bubble_sort
from algokit.search import kmp_search
from algokit.streams import running_medians, stock_span
from algokit.dynamic import matrix_chain_cost
from algokit.tree import LiftedTree

heap_sort([12, 11, 13, 5, 6, 7])            # [5, 6, 7, 11, 12, 13]
bubble_sort([3, 1, 2], lambda a, b: a > b)  # [3, 2, 1]
kmp_search("aabaacaadaabaaba", "aaba")      # [0, 9, 12]
running_medians([12, 15, 10, 5, 8, 7, 16])  # [12, 13.5, 12, 11.0, 10, 9.0, 10]
stock_span([100, 80, 70, 60, 75, 85])       # [1, 1, 1, 1, 3, 5]
matrix_chain_cost([10, 30, 5, 60])          # 4500

tree = LiftedTree(5, [(1, 2), (1, 3), (3, 4), (3, 5)])
tree.lca(4, 5)                              # 3
tree.distance(2, 4)                         # 3
```

## What it does not do

The package is a library only. It installs no commands and reads no input
from the console; call its functions from your own code.