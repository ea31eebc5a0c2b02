# algodrills

A collection of well-known algorithm exercises written as plain Python
functions. They cover arrays, subarrays and sliding windows, searching,
greedy scheduling, stock trading, dynamic programming, text, matrices,
small number helpers, bubble sort and an LRU cache. A small command-line
tool runs some of them on numbers read from standard input.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install algodrills
```

To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `algodrills.arrays` | `max_subarray_sum`, `max_product_subarray`, `max_water_area`, `trapped_rain_water`, `merge_in_place`, `next_permutation`, `remove_duplicates`, `repeat_and_missing`, `sort_colors`, `three_way_partition`, `min_swaps_to_group`, `common_elements`, `is_subset`, `longest_consecutive_run`, `max_consecutive_ones`, `min_jumps` |
| `algodrills.subarrays` | `count_pairs_with_sum`, `longest_zero_sum_subarray`, `longest_subarray_divisible_by`, `count_subarrays_divisible_by`, `has_zero_sum_subarray`, `smallest_subarray_with_sum_above`, `longest_window_with_at_most_k_evens`, `longest_unique_substring` |
| `algodrills.selection` | `three_sum`, `has_triplet_with_sum`, `top_k_frequent`, `kth_largest`, `kth_smallest`, `largest_concatenation` |
| `algodrills.search` | `find_rotated_minimum`, `search_rotated`, `search_flat_matrix`, `search_sorted_matrix`, `search_insert_position` |
| `algodrills.greedy` | `Job`, `max_meetings`, `job_scheduling`, `min_platforms`, `merge_intervals` |
| `algodrills.stocks` | `max_single_profit`, `max_multi_profit`, `max_profit_k_transactions`, `buy_sell_days` |
| `algodrills.dynamic` | `climb_stairs`, `frog_jump`, `house_robber_circular`, `max_non_adjacent_sum`, `unique_paths` |
| `algodrills.text` | `largest_odd_prefix`, `is_palindrome` |
| `algodrills.matrix` | `set_zeroes`, `is_valid_sudoku` |
| `algodrills.lru` | `LRUCache` |
| `algodrills.numtheory` | `prime_range`, `non_fibonacci_numbers`, `split_bytes` |
| `algodrills.sorting` | `bubble_sort`, `time_repeated_sort` |
| `algodrills.cli` | `main`, the entry point of the `algodrills` command |

## Examples

```python
from algodrills.arrays import max_subarray_sum, trapped_rain_water
from algodrills.dynamic import unique_paths
from algodrills.greedy import Job, job_scheduling
from algodrills.numtheory import prime_range, split_bytes
from algodrills.text import is_palindrome
from algodrills.lru import LRUCache

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])          # 6
trapped_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
unique_paths(3, 7)                                          # 28
prime_range(10, 30)                                         # [11, 13, 17, 19, 23, 29]
split_bytes(0x12345678)                                     # (0x78, 0x56, 0x34, 0x12)
is_palindrome("A man, a plan, a canal: Panama")             # True
job_scheduling([Job(deadline=1, profit=20), Job(deadline=1, profit=10)])  # (1, 20)

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                                # 1
cache.put(3, 3)                                             # evicts key 2
cache.get(2)                                                # -1
```

Functions that rearrange a list — `sort_colors`, `next_permutation`,
`merge_in_place`, `remove_duplicates`, `three_way_partition`, `set_zeroes`
and `bubble_sort` — change the list they are given and return `None`
(`remove_duplicates` returns the number of distinct values).

Functions that cannot give a meaningful answer for their input, such as
`max_subarray_sum([])` or `kth_largest(values, 0)`, raise `ValueError`.

## Command line

The `algodrills` command runs one drill per call. Commands marked *stdin*
read whitespace-separated integers from standard input; a leading count
`N` says how many values follow.

| Command | Input | Prints |
| --- | --- | --- |
| `three-sum` | stdin: `N`, then N values | each zero-sum triplet on its own line |
| `max-area` | stdin: `N`, then N heights | most water between two lines |
| `rotated-min` | stdin: `N`, then N values | minimum of a rotated sorted sequence |
| `merge-intervals` | stdin: `N`, then N start/end pairs | the merged intervals, one per line |
| `trap` | stdin: `N`, then N heights | trapped rain water |
| `kth-smallest` | stdin: `N`, N values, then `K` | the K-th smallest value |
| `even-window` | stdin: `T`, then for each case `N K` and N values | longest window with at most K evens, per case |
| `longest-run [VALUES...]` | arguments (a sample list if none) | longest run of consecutive integers |
| `min-jumps [STEPS...]` | arguments (a sample list if none) | fewest jumps to the end, or -1 |
| `bytes [VALUE]` | argument, or prompts and reads stdin | the four bytes in hex, least significant first |
| `non-fibonacci [TERMS]` | argument, default 10 | numbers skipped by the Fibonacci sequence |
| `time-sort [--repeats R]` | option, default 10000 | processor time for R bubble sorts of a sample list, then the sorted list |

For example:

```
echo "6 -1 0 1 2 -1 -4" | algodrills three-sum
algodrills non-fibonacci 6
algodrills --help
```

Missing or malformed input, or input a drill rejects, prints a message
to standard error and exits with status 1.