"""Sorting puzzles: insertion sort, quicksort, counting sort and friends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import pairwise

KEY_LIMIT = 100


def closest_numbers(values: Iterable[int]) -> list[tuple[int, int]]:
    """All adjacent pairs, in sorted order, whose difference is the smallest."""
    ordered = sorted(values)
    gaps = [(high - low, low, high) for low, high in pairwise(ordered)]
    if not gaps:
        return []
    smallest = min(gap for gap, _, _ in gaps)
    return [(low, high) for gap, low, high in gaps if gap == smallest]


def _shifts(items: list[int], end: int, *, past_equal: bool) -> Iterator[None]:
    """Insert ``items[end]`` into the sorted prefix, yielding after each shift.

    With ``past_equal`` the element moves in front of equal values too.
    """
    sought = items[end]
    i = end
    while i > 0 and (items[i - 1] > sought or (past_equal and items[i - 1] == sought)):
        items[i] = items[i - 1]
        i -= 1
        yield
    items[i] = sought


def _count(steps: Iterator[None]) -> int:
    return sum(1 for _ in steps)


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by insertion sort."""
    items = list(values)
    for end in range(1, len(items)):
        _count(_shifts(items, end, past_equal=True))
    return items


def insert_last_steps(values: Iterable[int]) -> list[list[int]]:
    """Insert the last value into the sorted rest, recording the list after
    every shift and once more when the value is placed."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    steps: list[list[int]] = []
    for _ in _shifts(items, len(items) - 1, past_equal=True):
        steps.append(items.copy())
    steps.append(items.copy())
    return steps


def insertion_sort_steps(values: Iterable[int]) -> list[list[int]]:
    """The list after each pass of insertion sort, from the second element on."""
    items = list(values)
    steps: list[list[int]] = []
    for end in range(1, len(items)):
        _count(_shifts(items, end, past_equal=True))
        steps.append(items.copy())
    return steps


def counting_sort_strings(pairs: Iterable[tuple[int, str]]) -> list[str]:
    """Stable counting sort of ``(key, text)`` pairs by key, giving the texts.

    The texts of the first half of the input are replaced by ``"-"``.
    Keys must lie in ``0 .. 99``.
    """
    pairs = list(pairs)
    half = len(pairs) // 2
    buckets: list[list[str]] = [[] for _ in range(KEY_LIMIT)]
    for index, (key, text) in enumerate(pairs):
        if not 0 <= key < KEY_LIMIT:
            raise ValueError(f"key {key} is not in 0..{KEY_LIMIT - 1}")
        buckets[key].append("-" if index < half else text)
    return [text for bucket in buckets for text in bucket]


def median(values: Iterable[int]) -> int:
    """Middle value; for an even count the mean of the two middle values,
    truncated toward zero."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("no values given")
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    total = ordered[middle - 1] + ordered[middle]
    return total // 2 if total >= 0 else -((-total) // 2)


def _lomuto(items: list[int], low: int, high: int) -> tuple[int, int]:
    """Partition ``items[low..high]`` around its last element.

    Returns the pivot's final index and the number of swaps made.
    """
    pivot = items[high]
    store = low
    swaps = 0
    for j in range(low, high):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
            swaps += 1
    items[store], items[high] = items[high], items[store]
    return store, swaps + 1


def _lomuto_quicksort(items: list[int]) -> Iterator[int]:
    """Sort ``items`` in place, yielding the swap count of each partition."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split, swaps = _lomuto(items, low, high)
        yield swaps
        pending.append((split + 1, high))
        pending.append((low, split - 1))


def quicksort_in_place_steps(values: Iterable[int]) -> list[list[int]]:
    """The whole list after every partition of an in-place quicksort."""
    items = list(values)
    steps: list[list[int]] = []
    for _ in _lomuto_quicksort(items):
        steps.append(items.copy())
    return steps


def partition(values: Iterable[int]) -> list[int]:
    """Split around the first value: smaller values, the pivot, then the rest,
    each side in its original order."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    pivot, *rest = items
    smaller = [value for value in rest if value < pivot]
    larger = [value for value in rest if value >= pivot]
    return [*smaller, pivot, *larger]


def quicksort_steps(values: Iterable[int]) -> list[list[int]]:
    """Every sub-list of more than one value, as it is put back together by a
    stable quicksort that pivots on the first value."""
    steps: list[list[int]] = []

    def sort(items: list[int]) -> list[int]:
        if len(items) <= 1:
            return items
        pivot, *rest = items
        smaller = sort([value for value in rest if value < pivot])
        larger = sort([value for value in rest if value >= pivot])
        merged = [*smaller, pivot, *larger]
        steps.append(merged)
        return merged

    sort(list(values))
    return steps


def insertion_shifts(values: Iterable[int]) -> int:
    """Number of shifts insertion sort makes, leaving equal values in place."""
    items = list(values)
    return sum(
        _count(_shifts(items, end, past_equal=False)) for end in range(1, len(items))
    )


def quicksort_swaps(values: Iterable[int]) -> int:
    """Number of swaps an in-place quicksort makes, self-swaps included."""
    return sum(_lomuto_quicksort(list(values)))


def quicksort_shift_difference(values: Iterable[int]) -> int:
    """Insertion sort shifts minus quicksort swaps for the same values."""
    values = list(values)
    return insertion_shifts(values) - quicksort_swaps(values)