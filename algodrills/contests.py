"""Solutions to assorted contest puzzles."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate

MODULUS = 1_000_000_007


def ones_and_twos(ones: int, twos: int) -> int:
    """Count the distinct values reachable from ``ones`` 1s and ``twos`` 2s.

    A value is built as a sum of terms. Each term is either a 1 or a power
    of two grown from a 2 by doubling, and each doubling uses up one 2. Any
    number of the given digits may be used, but at least one. The count is
    taken modulo 1_000_000_007.
    """
    if ones < 0 or twos < 0:
        raise ValueError("counts must not be negative")
    if not ones and not twos:
        return 0

    reached: set[int] = set()
    visited: set[tuple[int, int, int, int]] = set()
    pending: list[tuple[int, int, int, int]] = []
    if ones:
        reached.add(1)
        pending.append((ones - 1, twos, 0, 1))
    if twos:
        reached.add(2)
        pending.append((ones, twos - 1, 0, 2))

    while pending:
        state = pending.pop()
        if state in visited:
            continue
        visited.add(state)
        ones_left, twos_left, total, term = state
        reached.add(total + term)
        if ones_left:
            pending.append((ones_left - 1, twos_left, total + term, 1))
        if twos_left:
            pending.append((ones_left, twos_left - 1, total, term * 2))
            pending.append((ones_left, twos_left - 1, total + term, 2))
    return len(reached) % MODULUS


def playing_with_numbers(values: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Sum of absolute values after each query adds its number to every value.

    The additions accumulate from one query to the next.
    """
    ordered = sorted(values)
    prefix = list(accumulate(ordered, initial=0))
    total = prefix[-1]
    count = len(ordered)
    shift = 0
    results: list[int] = []
    for query in queries:
        shift += query
        split = bisect_left(ordered, -shift)
        below = prefix[split]
        above = total - below
        results.append(above + shift * (count - split) - (below + shift * split))
    return results


def sherlock_and_watson(
    values: Sequence[int], rotations: int, queries: Iterable[int]
) -> list[int]:
    """Values found at the queried positions after rotating right ``rotations`` times."""
    if not values:
        raise ValueError("no values given")
    size = len(values)
    result: list[int] = []
    for position in queries:
        if not 0 <= position < size:
            raise IndexError(f"position {position} is out of range")
        result.append(values[(position - rotations) % size])
    return result