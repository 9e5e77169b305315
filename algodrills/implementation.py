"""Solutions to implementation puzzles."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from math import isqrt


def absolute_permutation(n: int, k: int) -> list[int] | None:
    """Smallest permutation ``p`` of 1..n with ``|p[i] - i| == k`` everywhere.

    Returns None when no such permutation exists.
    """
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k == 0:
        return list(range(1, n + 1))
    if n % (2 * k):
        return None
    result: list[int] = []
    for block_start in range(1, n + 1, 2 * k):
        result.extend(range(block_start + k, block_start + 2 * k))
        result.extend(range(block_start, block_start + k))
    return result


def angry_professor(arrivals: Iterable[int], threshold: int) -> bool:
    """Whether the class is cancelled: fewer than ``threshold`` arrive on time.

    An arrival time of zero or less counts as on time.
    """
    on_time = sum(1 for arrival in arrivals if arrival <= 0)
    return on_time < threshold


def beautiful_triplets(values: Iterable[int], d: int) -> int:
    """Count values ``v`` for which ``v + d`` and ``v + 2d`` are also present."""
    values = list(values)
    present = set(values)
    return sum(1 for value in values if value + d in present and value + 2 * d in present)


def bigger_is_greater(word: str) -> str | None:
    """The next rearrangement of ``word`` in lexicographic order, or None."""
    chars = list(word)
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return None
    successor = len(chars) - 1
    while chars[successor] <= chars[pivot]:
        successor -= 1
    chars[pivot], chars[successor] = chars[successor], chars[pivot]
    chars[pivot + 1:] = reversed(chars[pivot + 1:])
    return "".join(chars)


def cavity_map(grid: Sequence[str]) -> list[str]:
    """Mark with ``X`` every inner cell deeper than its four neighbours."""
    rows = [list(row) for row in grid]
    marked = [list(row) for row in rows]
    for i in range(1, len(rows) - 1):
        for j in range(1, len(rows[i]) - 1):
            depth = rows[i][j]
            neighbours = (rows[i - 1][j], rows[i + 1][j], rows[i][j - 1], rows[i][j + 1])
            if all(neighbour < depth for neighbour in neighbours):
                marked[i][j] = "X"
    return ["".join(row) for row in marked]


def chocolate_feast(money: int, cost: int, wrappers_needed: int) -> int:
    """Chocolates eaten when ``wrappers_needed`` wrappers buy one more."""
    if cost < 1:
        raise ValueError("cost must be positive")
    if wrappers_needed < 2:
        raise ValueError("at least two wrappers must be needed per chocolate")
    eaten = wrappers = money // cost
    while wrappers >= wrappers_needed:
        extra, left = divmod(wrappers, wrappers_needed)
        eaten += extra
        wrappers = left + extra
    return eaten


def cut_the_sticks(lengths: Iterable[int]) -> list[int]:
    """Number of sticks left before each cut by the shortest length."""
    remaining = sorted(length for length in lengths if length > 0)
    counts: list[int] = []
    while remaining:
        counts.append(len(remaining))
        shortest = remaining[0]
        remaining = [length - shortest for length in remaining if length > shortest]
    return counts


def divisible_sum_pairs(values: Iterable[int], k: int) -> int:
    """Number of pairs whose sum is divisible by ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    buckets = Counter(value % k for value in values)
    total = buckets[0] * (buckets[0] - 1) // 2
    for remainder in range(1, (k - 1) // 2 + 1):
        total += buckets[remainder] * buckets[k - remainder]
    if k % 2 == 0:
        half = buckets[k // 2]
        total += half * (half - 1) // 2
    return total


def encrypt(text: str) -> str:
    """Write ``text`` without spaces into a near-square grid and read columns."""
    letters = text.replace(" ", "")
    side = isqrt(len(letters))
    columns = side if side * side == len(letters) else side + 1
    return " ".join(letters[column::columns] for column in range(columns))


def fair_rations(loaves: Iterable[int]) -> int | None:
    """Loaves handed out to make every count even, or None if impossible.

    Each handout gives one loaf to a person and one to the next in line.
    """
    loaves = list(loaves)
    if not loaves:
        raise ValueError("no people in line")
    handed = 0
    carried = 0
    for count in loaves[:-1]:
        if (count + carried) % 2:
            handed += 2
            carried = 1
        else:
            carried = 0
    return handed if (loaves[-1] + carried) % 2 == 0 else None


def jumping_on_clouds(clouds: Sequence[int]) -> int:
    """Fewest jumps of one or two clouds to reach the last, avoiding 1s."""
    if not clouds:
        raise ValueError("no clouds given")
    last = len(clouds) - 1
    jumps = {0: 0}
    queue = deque([0])
    while queue:
        here = queue.popleft()
        if here == last:
            return jumps[here]
        for step in (here + 2, here + 1):
            if step <= last and not clouds[step] and step not in jumps:
                jumps[step] = jumps[here] + 1
                queue.append(step)
    raise ValueError("the last cloud cannot be reached")


def lisas_workbook(chapters: Iterable[int], per_page: int) -> int:
    """Count problems whose number equals the number of the page they are on.

    Each chapter starts on a new page and holds up to ``per_page`` problems
    per page, numbered from 1 within the chapter.
    """
    if per_page < 1:
        raise ValueError("per_page must be positive")
    special = 0
    page = 0
    for problems in chapters:
        for first in range(1, problems + 1, per_page):
            page += 1
            last = min(first + per_page - 1, problems)
            if first <= page <= last:
                special += 1
    return special


def manasa_stones(n: int, a: int, b: int) -> list[int]:
    """All possible values on the last of ``n`` stones, ascending."""
    if n < 1:
        raise ValueError("there must be at least one stone")
    low, high = sorted((a, b))
    if low == high:
        return [low * (n - 1)]
    return [low * (n - 1 - steps) + high * steps for steps in range(n)]


def non_divisible_subset(values: Iterable[int], k: int) -> int:
    """Size of the largest subset where no two values sum to a multiple of ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    buckets = Counter(value % k for value in values)
    size = 1 if buckets[0] else 0
    size += sum(max(buckets[r], buckets[k - r]) for r in range(1, (k - 1) // 2 + 1))
    if k % 2 == 0 and buckets[k // 2]:
        size += 1
    return size


def service_lane(widths: Sequence[int], start: int, end: int) -> int:
    """Widest vehicle class (at most 3) that fits through ``start..end``."""
    if not 0 <= start <= end < len(widths):
        raise ValueError("segment is out of range")
    return min(3, *widths[start:end + 1])


def two_arrays(first: Iterable[int], second: Iterable[int], k: int) -> bool:
    """Whether the arrays can be paired so that every pair sums to at least ``k``."""
    ascending = sorted(first)
    descending = sorted(second, reverse=True)
    if len(ascending) != len(descending):
        raise ValueError("arrays must have the same length")
    return all(x + y >= k for x, y in zip(ascending, descending))