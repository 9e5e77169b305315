# algodrills

Small, self-contained solutions to classic algorithm exercises, written as
plain Python functions. Each function takes ordinary Python values (lists,
strings, integers, tuples) and returns the answer. The package has no
third-party dependencies.

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

- `algodrills.disjoint_set`: `DisjointSet`, union-find over the integers
  `0 .. size - 1` with path compression, and `RankedDisjointSet`, union-find
  over any hashable items (added with `add`) that also uses union by rank.
  `union` returns `False` when the two elements were already joined.
- `algodrills.graphs`: `Edge` (a named tuple of `start`, `end`, `weight`),
  `floyd_warshall` for all-pairs shortest paths (unreachable pairs are
  `None`), `shortest_distance` (which gives `-1` for an unreachable pair),
  `kruskal` and `prim` for minimum spanning trees, and `segment_tree_size`.
  Vertices are numbered from 1.
- `algodrills.greedy`: `algorithmic_crush`, `chief_hopper`, `greedy_florist`,
  `grid_challenge`, `jim_orders`, `largest_permutation`, `mark_and_toys`,
  `max_min`, `maximum_perimeter_triangle`, `priyanka_and_toys`,
  `sherlock_minimax`, `decent_number` and `team_member_counts`.
- `algodrills.implementation`: `absolute_permutation`, `angry_professor`,
  `beautiful_triplets`, `bigger_is_greater`, `cavity_map`, `chocolate_feast`,
  `cut_the_sticks`, `divisible_sum_pairs`, `encrypt`, `fair_rations`,
  `jumping_on_clouds`, `lisas_workbook`, `manasa_stones`,
  `non_divisible_subset`, `service_lane` and `two_arrays`.
- `algodrills.search`: `largest_region`, `count_luck_waves`, `count_luck`,
  `cut_the_tree`, `ice_cream_parlor`, `missing_numbers`,
  `count_pairs_with_difference`, `balanced_sums` and `similar_pairs`.
- `algodrills.sorting`: insertion sort and quicksort variants that return
  each intermediate step (`insert_last_steps`, `insertion_sort_steps`,
  `quicksort_in_place_steps`, `quicksort_steps`), `insertion_sort`,
  `partition`, the counters `insertion_shifts`, `quicksort_swaps` and
  `quicksort_shift_difference`, plus `counting_sort_strings`, `median` and
  `closest_numbers`.
- `algodrills.strings`: `anagram_changes`, `steady_gene`,
  `beautiful_binary_string`, `common_child`, `is_funny`, `gemstones`,
  `make_anagram`, `palindrome_index`, `is_pangram` and `share_substring`.
- `algodrills.contests`: `ones_and_twos`, `playing_with_numbers` and
  `sherlock_and_watson`.
- `algodrills.maths`: `divisors`, `sherlock_queries`, `sherlock_pairs`,
  `connecting_towns`, `filling_jars`, `is_fibo` and `circle_city`.
- `algodrills.validation`: `is_valid_pan`.

Where an exercise can have no answer, the function returns `None` (for
example `decent_number`, `maximum_perimeter_triangle`, `fair_rations`,
`bigger_is_greater`, `palindrome_index`, `ice_cream_parlor`). Inputs that
make no sense for an exercise, such as an empty list where values are
required, raise `ValueError` (or `IndexError`/`KeyError` for out-of-range
positions and unknown items).

## Example

```python
from algodrills.disjoint_set import DisjointSet
from algodrills.greedy import decent_number
from algodrills.sorting import median
from algodrills.strings import common_child, is_pangram

sets = DisjointSet(3)
sets.union(0, 1)
sets.find(0) == sets.find(1)          # True

common_child("SHINCHAN", "NOHARAAA")  # 3
is_pangram("The quick brown fox jumps over the lazy dog")  # True
median([0, 1, 2, 4, 6, 5, 3])         # 3
decent_number(11)                     # "55555533333"
```

## What it does not do

The package is a library only. It has no command-line program: nothing reads
exercise input from standard input and nothing prints answers. Parse your
input yourself and call the functions directly.