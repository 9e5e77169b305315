import itertools
import math

import pytest

from algodrills.implementation import (
    absolute_permutation,
    angry_professor,
    beautiful_triplets,
    bigger_is_greater,
    cavity_map,
    chocolate_feast,
    cut_the_sticks,
    divisible_sum_pairs,
    encrypt,
    fair_rations,
    jumping_on_clouds,
    lisas_workbook,
    manasa_stones,
    non_divisible_subset,
    service_lane,
    two_arrays,
)


@pytest.mark.parametrize("n, k", [(4, 1), (6, 3), (8, 2), (10, 0), (12, 3)])
def test_absolute_permutation_is_valid(n, k):
    perm = absolute_permutation(n, k)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(value - position) == k for position, value in enumerate(perm, 1))


def test_absolute_permutation_zero_is_identity():
    assert absolute_permutation(7, 0) == list(range(1, 8))


@pytest.mark.parametrize("n, k", [(3, 2), (5, 1), (6, 4)])
def test_absolute_permutation_impossible(n, k):
    assert absolute_permutation(n, k) is None


def test_angry_professor_bounds():
    arrivals = [-1, -3, 4, 2]
    assert angry_professor(arrivals, 0) is False
    assert angry_professor(arrivals, len(arrivals) + 1) is True


def test_angry_professor_zero_counts_as_on_time():
    assert angry_professor([0, -1, 2, 1], 2) is False
    assert angry_professor([0, -1, 2, 1], 3) is True


@pytest.mark.parametrize("d", [3, 6, 9])
def test_beautiful_triplets_progression(d):
    values = list(range(0, 30, 3))
    assert beautiful_triplets(values, d) == len(values) - 2 * (d // 3)


def test_bigger_is_greater_enumerates_permutations():
    word = "abbc"
    expected = sorted({"".join(p) for p in itertools.permutations(word)})
    seen = [word]
    while (following := bigger_is_greater(seen[-1])) is not None:
        seen.append(following)
    assert seen == expected


def test_bigger_is_greater_invariants():
    word = "dkhc"
    result = bigger_is_greater(word)
    assert result > word
    assert sorted(result) == sorted(word)


@pytest.mark.parametrize("word", ["dcba", "bb", "a"])
def test_bigger_is_greater_no_answer(word):
    assert bigger_is_greater(word) is None


def test_cavity_map_sample():
    grid = ["1112", "1912", "1892", "1234"]
    assert cavity_map(grid) == ["1112", "1X12", "18X2", "1234"]


def test_cavity_map_flat_and_border_unchanged():
    flat = ["555", "555", "555"]
    assert cavity_map(flat) == flat
    grid = ["919", "191", "919"]
    result = cavity_map(grid)
    assert result[0] == grid[0]
    assert result[-1] == grid[-1]


def test_chocolate_feast_sample():
    assert chocolate_feast(10, 2, 5) == 6


def test_chocolate_feast_without_trades():
    assert chocolate_feast(17, 3, 100) == 17 // 3


def test_chocolate_feast_rejects_single_wrapper():
    with pytest.raises(ValueError):
        chocolate_feast(10, 2, 1)


def test_cut_the_sticks_invariants():
    lengths = [5, 4, 4, 2, 2, 8]
    counts = cut_the_sticks(lengths)
    assert counts[0] == len(lengths)
    assert len(counts) == len(set(lengths))
    assert all(a > b for a, b in zip(counts, counts[1:]))


def test_divisible_sum_pairs_k_one_counts_all_pairs():
    values = [3, 8, 1, 9, 4]
    assert divisible_sum_pairs(values, 1) == math.comb(len(values), 2)


def test_divisible_sum_pairs_shift_invariant():
    values = [1, 3, 2, 6, 1, 2]
    shifted = [value + 3 * index for index, value in enumerate(values)]
    assert divisible_sum_pairs(values, 3) == divisible_sum_pairs(shifted, 3)


def test_divisible_sum_pairs_rejects_zero():
    with pytest.raises(ValueError):
        divisible_sum_pairs([1, 2], 0)


def test_encrypt_sample():
    assert encrypt("haveaniceday") == "hae and via ecy"


def test_encrypt_ignores_spaces_and_keeps_letters():
    text = "if man was meant to stay"
    assert encrypt(text) == encrypt(text.replace(" ", ""))
    assert sorted(encrypt(text).replace(" ", "")) == sorted(text.replace(" ", ""))


def test_fair_rations_even_line_needs_nothing():
    assert fair_rations([2, 4, 6]) == 0


def test_fair_rations_odd_total_is_impossible():
    assert fair_rations([1, 2]) is None


def test_fair_rations_result_is_even_and_bounded():
    loaves = [1, 3, 5, 7, 2, 4]
    handed = fair_rations(loaves)
    assert handed % 2 == 0
    assert handed <= 2 * (len(loaves) - 1)


def test_fair_rations_rejects_empty_line():
    with pytest.raises(ValueError):
        fair_rations([])


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_jumping_on_clouds_clear_sky(n):
    assert jumping_on_clouds([0] * n) == math.ceil((n - 1) / 2)


def test_jumping_on_clouds_unreachable():
    with pytest.raises(ValueError):
        jumping_on_clouds([0, 1, 1, 0])


def test_lisas_workbook_one_problem_per_page():
    chapters = [6, 4, 3]
    assert lisas_workbook(chapters, 1) == chapters[0]


def test_lisas_workbook_rejects_zero_per_page():
    with pytest.raises(ValueError):
        lisas_workbook([3], 0)


@pytest.mark.parametrize("n, a, b", [(3, 1, 2), (4, 10, 100), (5, 7, 7)])
def test_manasa_stones_invariants(n, a, b):
    stones = manasa_stones(n, a, b)
    assert stones == sorted(set(stones))
    assert stones == manasa_stones(n, b, a)
    assert stones[0] == min(a, b) * (n - 1)
    assert stones[-1] == max(a, b) * (n - 1)
    assert len(stones) == (1 if a == b else n)


def test_non_divisible_subset_sample():
    assert non_divisible_subset([1, 7, 2, 4], 3) == 3


def test_non_divisible_subset_bounded_by_size():
    values = [19, 10, 12, 10, 24, 25, 22]
    assert non_divisible_subset(values, 4) <= len(values)


def test_non_divisible_subset_rejects_zero():
    with pytest.raises(ValueError):
        non_divisible_subset([1], 0)


def test_service_lane_is_narrowest_width():
    widths = [2, 3, 1, 2, 3, 2, 3, 3]
    result = service_lane(widths, 0, 3)
    assert result in widths[0:4]
    assert all(result <= width for width in widths[0:4])


def test_service_lane_rejects_bad_segment():
    with pytest.raises(ValueError):
        service_lane([1, 2, 3], 2, 1)


def test_two_arrays_samples():
    assert two_arrays([2, 1, 3], [7, 8, 9], 10) is True
    assert two_arrays([1, 2, 2, 1], [3, 3, 3, 4], 5) is False


def test_two_arrays_order_does_not_matter():
    first, second = [5, 1, 3], [2, 6, 4]
    assert two_arrays(first, second, 7) == two_arrays(first[::-1], second[::-1], 7)


def test_two_arrays_rejects_different_lengths():
    with pytest.raises(ValueError):
        two_arrays([1, 2], [3], 4)