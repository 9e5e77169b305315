"""Greedy puzzle solutions."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def algorithmic_crush(operations: Iterable[tuple[int, int, int]]) -> int:
    """Largest value after adding ``k`` to every slot in ``a..b`` per operation."""
    events: list[tuple[int, int]] = []
    for start, stop, amount in operations:
        events.append((start, amount))
        events.append((stop + 1, -amount))
    events.sort()
    return max(accumulate((delta for _, delta in events), initial=0))


def _has_enough(energy: int, heights: Sequence[int], top: int) -> bool:
    for height in heights:
        if energy >= top:
            return True
        energy = 2 * energy - height
        if energy < 0:
            return False
    return True


def chief_hopper(heights: Iterable[int]) -> int:
    """Smallest starting energy that survives jumping over every building."""
    heights = list(heights)
    if not heights:
        raise ValueError("no buildings given")
    top = max(heights)
    low, high = 0, top
    while high - low > 1:
        mid = (low + high) // 2
        if _has_enough(mid, heights, top):
            high = mid
        else:
            low = mid
    return high


def greedy_florist(prices: Iterable[int], buyers: int) -> int:
    """Least total cost for ``buyers`` friends to buy every flower."""
    if buyers < 1:
        raise ValueError("there must be at least one buyer")
    ordered = sorted(prices, reverse=True)
    return sum(price * (index // buyers + 1) for index, price in enumerate(ordered))


def grid_challenge(rows: Iterable[str]) -> bool:
    """Whether sorting each row leaves every column sorted too."""
    grid = [sorted(row) for row in rows]
    return all(list(column) == sorted(column) for column in zip(*grid))


def jim_orders(orders: Iterable[tuple[int, int]]) -> list[int]:
    """Customer numbers (from 1) in the order their orders are served."""
    ranked = sorted(
        enumerate(orders, 1),
        key=lambda item: (item[1][0] + item[1][1], item[0]),
    )
    return [customer for customer, _ in ranked]


def largest_permutation(values: Iterable[int], swaps: int) -> list[int]:
    """Largest permutation of 1..n reachable with at most ``swaps`` swaps."""
    result = list(values)
    n = len(result)
    if sorted(result) != list(range(1, n + 1)):
        raise ValueError("values must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(result)}
    remaining = swaps
    for index, wanted in enumerate(range(n, 0, -1)):
        if remaining <= 0:
            break
        if result[index] == wanted:
            continue
        other = position[wanted]
        displaced = result[index]
        result[other] = displaced
        position[displaced] = other
        result[index] = wanted
        position[wanted] = index
        remaining -= 1
    return result


def mark_and_toys(prices: Iterable[int], budget: int) -> int:
    """Most toys that fit in ``budget``, buying the cheapest first."""
    count = 0
    remaining = budget
    for price in sorted(prices):
        if remaining <= 0:
            break
        remaining -= price
        count += 1
    if remaining < 0:
        count -= 1
    return count


def max_min(values: Iterable[int], k: int) -> int:
    """Smallest spread (max - min) over any choice of ``k`` values."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError("k must be between 1 and the number of values")
    return min(high - low for low, high in zip(ordered, ordered[k - 1:]))


def maximum_perimeter_triangle(sticks: Iterable[int]) -> tuple[int, int, int] | None:
    """Sides, ascending, of the non-degenerate triangle of largest perimeter."""
    ordered = sorted(sticks, reverse=True)
    for longest, middle, shortest in zip(ordered, ordered[1:], ordered[2:]):
        if longest < middle + shortest:
            return (shortest, middle, longest)
    return None


def priyanka_and_toys(weights: Iterable[int]) -> int:
    """Units needed when each unit covers weights ``w .. w + 4``."""
    units = 0
    covered_to: int | None = None
    for weight in sorted(weights):
        if covered_to is None or weight > covered_to:
            covered_to = weight + 4
            units += 1
    return units


def _half(total: int) -> int:
    return total // 2 if total >= 0 else -((-total) // 2)


def _distance_to_nearest(point: int, ordered: Sequence[int]) -> int:
    index = bisect_right(ordered, point)
    gaps = []
    if index < len(ordered):
        gaps.append(abs(point - ordered[index]))
    if index > 0:
        gaps.append(abs(ordered[index - 1] - point))
    return min(gaps)


def sherlock_minimax(values: Iterable[int], low: int, high: int) -> int:
    """Point in ``low..high`` farthest from its nearest value; smallest on ties."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("no values given")
    midpoints = (_half(a + b) for a, b in pairwise(ordered))
    candidates = sorted([low, high, *(m for m in midpoints if low <= m <= high)])
    return max(candidates, key=lambda point: _distance_to_nearest(point, ordered))


def decent_number(digits: int) -> str | None:
    """Largest number of ``digits`` digits made of 5s (a multiple of 3 of them)
    followed by 3s (a multiple of 5 of them), or None if there is none."""
    for fives in range(digits, -1, -1):
        if fives % 3 == 0 and (digits - fives) % 5 == 0:
            return "5" * fives + "3" * (digits - fives)
    return None


def team_member_counts(skills: Iterable[int]) -> list[tuple[int, int]]:
    """Each distinct skill level with how often it occurs, by level."""
    return sorted(Counter(skills).items())