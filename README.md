# dsakit

A plain-Python collection of classic data structures and algorithms, with no
third-party dependencies. Every algorithm is a function or class that takes
ordinary Python values (lists, tuples, strings, ints) and returns a result.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.trees` | `TreeNode`; `build_tree` (level order, `None` or `-1` for a missing node) and `build_heap_tree`; `preorder`, `inorder`, `postorder`, `morris_inorder`, `level_order`; `is_same_tree`, `is_symmetric`, `height`, `diameter`, `has_path_sum`; `right_view`, `top_view`, `bottom_view`, `sum_of_left_leaves`; `bst_insert`, `is_valid_bst`; `count_nodes`, `is_complete`, `is_max_heap` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort` (each returns a new sorted list); `build_min_heap` |
| `dsakit.containers` | `CircularQueue`, `BoundedQueue`, `TwoStackQueue`, `MinStack`, `StockSpanner`, `MaxPriorityQueue` |
| `dsakit.trie` | `Trie` (`insert`, `search`, `starts_with`, `in`) and `word_break` |
| `dsakit.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes`, `huffman_encode`, `huffman_decode` |
| `dsakit.shortest_paths` | `bellman_ford` (raises `NegativeCycleError`) and `dijkstra`; unreachable nodes get `math.inf` |
| `dsakit.arrays` | `asteroid_collision`, `max_profit`, `trap`, `two_sum`, `max_area`, `merge_sorted`, `sort_colors` (in place), `highest_freq_char`, `intersection`, `missing_number`, `set_matrix_zeros` |
| `dsakit.searching` | `lower_bound`, `upper_bound`, `search_rotated`, `search_rotated_with_duplicates`, `first_bad_version`, `min_eating_speed`, `aggressive_cows` |
| `dsakit.hashing` | `get_hint` (bulls and cows), `count_zero_sum_subarrays`, `longest_zero_sum_subarray`, `find_max_length`, `longest_consecutive`, `find_anagrams`, `is_isomorphic`, `is_anagram` |
| `dsakit.heaps` | `find_kth_largest`, `find_kth_smallest`, `max_sliding_window`, `top_k_frequent` |
| `dsakit.dp` | `fib_memo`, `fib_tab`, `climb_stairs`, `min_cost_climbing_stairs`, `num_squares`, `coin_change`, `min_jumps`, `longest_common_subsequence`, `longest_palindrome` |
| `dsakit.bits` | `is_kth_bit_set`, `is_power_of_two`, `count_set_bits_upto`, `count_bits`, `find_duplicate`, `missing_number_xor`, `single_number`, `single_number_ii`, `subsets`, `toggle_bits_in_range` |
| `dsakit.numtheory` | `num_trees` (Catalan numbers), `phi`, `gcd`, `lcm`, `inclusion_exclusion`, `smallest_repunit_div_by_k`, `super_pow` (modulo `SUPER_POW_MODULUS`, 1337), `permute`, `count_primes` |
| `dsakit.grids` | `flood_fill` (returns a new image), `closed_island`, `find_circle_num`, `num_islands` |
| `dsakit.graphs` | `adjacency_list`, `adjacency_matrix`, `bfs`, `dfs`, `has_cycle`, `connected_components`, `valid_path`, `all_paths_source_target` |
| `dsakit.mst` | `DisjointSet` (`find`, `same`, `union`), `kruskal_mst`, `prim_mst`; both return a `SpanningTree(weight, edges)` |

## Examples

```python
from dsakit.trees import build_tree, inorder, top_view
from dsakit.trie import word_break
from dsakit.shortest_paths import bellman_ford, NegativeCycleError
from dsakit.containers import MinStack
from dsakit.huffman import huffman_encode, huffman_decode
from dsakit.mst import kruskal_mst

root = build_tree([1, 2, 3, 4, 5])
print(inorder(root))        # [4, 2, 5, 1, 3]
print(top_view(root))       # [4, 2, 1, 3]

print(word_break("leetcode", ["leet", "code"]))   # True

stack = MinStack()
for value in (5, 3, 7):
    stack.push(value)
print(stack.get_min())      # 3

encoding = huffman_encode("huffman")
print(huffman_decode(encoding.root, encoding.bits))   # huffman

tree = kruskal_mst(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
print(tree.weight)          # 19

try:
    bellman_ford(2, [(0, 1, -1), (1, 0, -1)], 0)
except NegativeCycleError:
    print("negative cycle")
```

## Errors

Failures are raised rather than signalled by sentinel values:

- The queues and `MinStack` raise `IndexError` when read or removed from while
  empty, and `CircularQueue` and `BoundedQueue` raise it when full.
  `MaxPriorityQueue.remove_max` returns `None` on an empty queue.
- `two_sum` raises `ValueError` when no pair adds up to the target, and
  `min_jumps` raises `ValueError` when the last index cannot be reached.
- `find_kth_largest`, `find_kth_smallest` and `top_k_frequent` raise
  `ValueError` for an out-of-range `k`.
- `coin_change` returns `-1` when the amount cannot be made, and
  `smallest_repunit_div_by_k` returns `-1` when no repunit is divisible by `k`.

## What this package does not do

It is a library only. It has no command-line program and does not read input
from the terminal or print results; call the functions from your own code.