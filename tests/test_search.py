import math

import pytest

from algodrills.search import (
    balanced_sums,
    count_luck,
    count_luck_waves,
    count_pairs_with_difference,
    cut_the_tree,
    ice_cream_parlor,
    largest_region,
    missing_numbers,
    similar_pairs,
)

SMALL_MAZE = ["*.M", ".X."]


def test_largest_region_full_grid():
    rows, columns = 3, 4
    grid = [[1] * columns for _ in range(rows)]
    assert largest_region(grid) == rows * columns


def test_largest_region_empty_grid():
    assert largest_region([[0, 0], [0, 0]]) == 0


def test_largest_region_diagonals_connect():
    n = 5
    grid = [[1 if i == j else 0 for j in range(n)] for i in range(n)]
    assert largest_region(grid) == n


def test_largest_region_picks_largest_block():
    grid = [
        [1, 1, 0, 0, 1],
        [1, 1, 0, 0, 1],
        [0, 0, 0, 0, 1],
    ]
    assert largest_region(grid) == 2 * 2


def test_count_luck_small_maze():
    assert count_luck_waves(SMALL_MAZE) == 1
    assert count_luck(SMALL_MAZE, 1) is True
    assert count_luck(SMALL_MAZE, 0) is False


def test_count_luck_sample():
    grid = [
        ".X.X......X",
        ".X*.X.XXX.X",
        ".XX.X.XM...",
        "......XXXX.",
    ]
    assert count_luck(grid, 3) is True


def test_count_luck_unreachable_exit():
    assert count_luck_waves(["M.X*"]) is None


def test_count_luck_missing_start():
    with pytest.raises(ValueError):
        count_luck_waves(["..*"])


def test_cut_the_tree_sample():
    values = [100, 200, 100, 500, 100, 600]
    edges = [(1, 2), (2, 3), (2, 5), (4, 5), (5, 6)]
    assert cut_the_tree(values, edges) == 400


def test_cut_the_tree_two_vertices():
    values = [7, 19]
    assert cut_the_tree(values, [(1, 2)]) == abs(values[0] - values[1])


def test_cut_the_tree_bounded_by_total():
    values = [3, 1, 4, 1, 5]
    edges = [(1, 2), (1, 3), (3, 4), (3, 5)]
    assert 0 <= cut_the_tree(values, edges) <= sum(values)


def test_cut_the_tree_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        cut_the_tree([1, 2], [(1, 3)])


def test_ice_cream_parlor_sample():
    assert ice_cream_parlor(4, [1, 4, 5, 3, 2]) == (1, 4)


@pytest.mark.parametrize(
    "money, costs", [(4, [2, 2, 4, 3]), (9, [5, 8, 1, 4, 7]), (12, [6, 1, 6])]
)
def test_ice_cream_parlor_invariants(money, costs):
    first, second = ice_cream_parlor(money, costs)
    assert first < second
    assert costs[first - 1] + costs[second - 1] == money


def test_ice_cream_parlor_no_pair():
    assert ice_cream_parlor(100, [1, 2, 3]) is None


def test_missing_numbers_extra_values():
    original = [203, 204, 205, 206, 207, 208, 203, 204, 205, 206]
    extra = [206, 204, 205, 205]
    assert missing_numbers(original, original + extra) == sorted(set(extra))


def test_missing_numbers_identical_lists():
    values = [5, 3, 5, 1]
    assert missing_numbers(values, list(reversed(values))) == []


@pytest.mark.parametrize("k", [1, 2, 5])
def test_count_pairs_with_difference_range(k):
    n = 10
    assert count_pairs_with_difference(range(n), k) == n - k


def test_count_pairs_with_difference_ignores_duplicates():
    values = [1, 5, 3, 4, 2]
    assert count_pairs_with_difference(values + values, 2) == count_pairs_with_difference(
        values, 2
    )


def test_balanced_sums():
    assert balanced_sums([1, 2, 3, 3]) is True
    assert balanced_sums([1, 2, 3]) is False
    assert balanced_sums([42]) is True


@pytest.mark.parametrize("n", [2, 4, 7])
def test_similar_pairs_chain_all_pairs(n):
    edges = [(i, i + 1) for i in range(1, n)]
    assert similar_pairs(n, n, edges) == math.comb(n, 2)


def test_similar_pairs_zero_threshold():
    assert similar_pairs(4, 0, [(1, 2), (2, 3), (2, 4)]) == 0


def test_similar_pairs_sample():
    assert similar_pairs(5, 2, [(3, 2), (3, 1), (1, 4), (1, 5)]) == 4


def test_similar_pairs_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        similar_pairs(2, 1, [(1, 5)])