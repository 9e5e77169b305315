"""Solutions to search and graph traversal puzzles."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence

Cell = tuple[int, int]


def largest_region(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest region of 1s, cells touching by side or corner."""
    cells = {
        (i, j)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
        if value == 1
    }
    best = 0
    while cells:
        stack = [cells.pop()]
        size = 1
        while stack:
            i, j = stack.pop()
            for di in (-1, 0, 1):
                for dj in (-1, 0, 1):
                    neighbour = (i + di, j + dj)
                    if neighbour in cells:
                        cells.remove(neighbour)
                        stack.append(neighbour)
                        size += 1
        best = max(best, size)
    return best


def _side_neighbours(cell: Cell) -> Iterable[Cell]:
    i, j = cell
    return ((i - 1, j), (i, j + 1), (i + 1, j), (i, j - 1))


def _locate(rows: Sequence[str], mark: str) -> Cell:
    for i, row in enumerate(rows):
        j = row.find(mark)
        if j >= 0:
            return (i, j)
    raise ValueError(f"grid has no {mark!r} cell")


def count_luck_waves(grid: Sequence[str]) -> int | None:
    """Wand waves on the way from ``M`` to ``*`` through a maze with ``X`` walls.

    A wave is needed at every cell of the path, except the exit, that offers
    more than one way on. Returns None when the exit cannot be reached.
    """
    rows = list(grid)
    start = _locate(rows, "M")
    exit_cell = _locate(rows, "*")
    open_cells = {
        (i, j) for i, row in enumerate(rows) for j, ch in enumerate(row) if ch != "X"
    }
    parent: dict[Cell, Cell | None] = {start: None}
    queue = deque([start])
    while queue:
        here = queue.popleft()
        for neighbour in _side_neighbours(here):
            if neighbour in open_cells and neighbour not in parent:
                parent[neighbour] = here
                queue.append(neighbour)
    if exit_cell not in parent:
        return None
    waves = 0
    cell = parent[exit_cell]
    while cell is not None:
        came_from = parent[cell]
        options = sum(
            1
            for neighbour in _side_neighbours(cell)
            if neighbour in open_cells and neighbour != came_from
        )
        if options > 1:
            waves += 1
        cell = came_from
    return waves


def count_luck(grid: Sequence[str], guess: int) -> bool:
    """Whether ``guess`` is the number of wand waves the maze needs."""
    return count_luck_waves(grid) == guess


def cut_the_tree(values: Sequence[int], edges: Iterable[tuple[int, int]]) -> int:
    """Smallest difference between the sums of the two trees one cut leaves.

    Vertices are numbered from 1; ``values[v - 1]`` belongs to vertex ``v``.
    """
    n = len(values)
    if n == 0:
        raise ValueError("tree has no vertices")
    edges = list(edges)
    adjacency: dict[int, list[int]] = {vertex: [] for vertex in range(1, n + 1)}
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) names an unknown vertex")
        adjacency[a].append(b)
        adjacency[b].append(a)
    root = edges[0][0] if edges else 1

    parent: dict[int, int | None] = {root: None}
    order: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                stack.append(neighbour)

    sums = {vertex: values[vertex - 1] for vertex in adjacency}
    for node in reversed(order):
        above = parent[node]
        if above is not None:
            sums[above] += sums[node]
    total = sums[root]
    return min(abs(total - 2 * subtotal) for subtotal in sums.values())


def ice_cream_parlor(money: int, costs: Iterable[int]) -> tuple[int, int] | None:
    """Positions (from 1, ascending) of two flavours costing exactly ``money``."""
    ranked = sorted(enumerate(costs, 1), key=lambda item: item[1])
    low, high = 0, len(ranked) - 1
    while low < high:
        total = ranked[low][1] + ranked[high][1]
        if total > money:
            high -= 1
        elif total < money:
            low += 1
        else:
            first, second = sorted((ranked[low][0], ranked[high][0]))
            return (first, second)
    return None


def missing_numbers(original: Iterable[int], extended: Iterable[int]) -> list[int]:
    """Values, ascending and once each, that occur more often in ``extended``."""
    return sorted(Counter(extended) - Counter(original))


def count_pairs_with_difference(values: Iterable[int], k: int) -> int:
    """Number of distinct values ``v`` for which ``v + k`` is also present."""
    distinct = set(values)
    return sum(1 for value in distinct if value + k in distinct)


def balanced_sums(values: Iterable[int]) -> bool:
    """Whether some element has equal sums to its left and to its right."""
    values = list(values)
    total = sum(values)
    left = 0
    for value in values:
        if left == total - left - value:
            return True
        left += value
    return False


class _Fenwick:
    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix(self, index: int) -> int:
        index = min(index, len(self._tree) - 1)
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def between(self, low: int, high: int) -> int:
        low = max(low, 1)
        if high < low:
            return 0
        return self.prefix(high) - self.prefix(low - 1)


def similar_pairs(n: int, threshold: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count ancestor/descendant pairs whose labels differ by at most ``threshold``.

    Edges run from parent to child over vertices 1..n.
    """
    children: dict[int, list[int]] = {vertex: [] for vertex in range(1, n + 1)}
    has_parent: set[int] = set()
    for parent, child in edges:
        if parent not in children or child not in children:
            raise ValueError(f"edge ({parent}, {child}) names an unknown vertex")
        children[parent].append(child)
        has_parent.add(child)
    roots = [vertex for vertex in children if vertex not in has_parent]
    if not roots:
        raise ValueError("tree has no root")

    path = _Fenwick(n)
    pairs = 0
    stack: list[tuple[int, bool]] = [(roots[0], False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            path.add(node, -1)
            continue
        pairs += path.between(node - threshold, node + threshold)
        path.add(node, 1)
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(children[node]))
    return pairs