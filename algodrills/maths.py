"""Number puzzles: divisors, modular products, Fibonacci and lattice points."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import isqrt

MODULUS = 1_000_000_007
TOWN_MODULUS = 1_234_567


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n``, ascending."""
    if n < 1:
        raise ValueError("n must be positive")
    small: list[int] = []
    large: list[int] = []
    for candidate in range(1, isqrt(n) + 1):
        if n % candidate == 0:
            small.append(candidate)
            if candidate * candidate != n:
                large.append(n // candidate)
    return small + large[::-1]


def sherlock_queries(
    values: Sequence[int], positions: Sequence[int], multipliers: Sequence[int]
) -> list[int]:
    """Apply every query: multiply the values at each multiple of the query's
    position (counted from 1) by its multiplier, modulo 1_000_000_007."""
    if len(positions) != len(multipliers):
        raise ValueError("positions and multipliers must have the same length")
    factors: dict[int, int] = {}
    for position, multiplier in zip(positions, multipliers):
        if position < 1:
            raise ValueError(f"position {position} must be positive")
        factors[position] = factors.get(position, 1) * multiplier % MODULUS

    result = [value % MODULUS for value in values]
    size = len(result)
    for position, factor in factors.items():
        for index in range(position, size + 1, position):
            result[index - 1] = result[index - 1] * factor % MODULUS
    return result


def sherlock_pairs(values: Iterable[int]) -> int:
    """Number of ordered pairs of different positions holding equal values."""
    return sum(count * (count - 1) for count in Counter(values).values())


def connecting_towns(routes: Iterable[int]) -> int:
    """Ways to travel through towns in a row, modulo 1_234_567."""
    ways = 1
    for count in routes:
        ways = ways * count % TOWN_MODULUS
    return ways


def filling_jars(jars: int, operations: Iterable[tuple[int, int, int]]) -> int:
    """Average candies per jar, rounded down, after adding ``k`` to jars ``a..b``."""
    if jars < 1:
        raise ValueError("there must be at least one jar")
    total = sum((last - first + 1) * amount for first, last, amount in operations)
    return total // jars


def is_fibo(number: int) -> bool:
    """Whether ``number`` is a positive Fibonacci number."""
    if number < 0:
        raise ValueError("number must not be negative")
    previous, current = 1, 1
    while current < number:
        previous, current = current, previous + current
    return current == number


def circle_city(radius_squared: int, stations: int) -> bool:
    """Whether ``stations`` police stations cover every lattice point on the
    circle ``x*x + y*y == radius_squared``."""
    if radius_squared < 0:
        raise ValueError("radius_squared must not be negative")
    points = 0
    x = 0
    while x * x < radius_squared:
        rest = radius_squared - x * x
        if isqrt(rest) ** 2 == rest:
            points += 4
        x += 1
    return points <= stations