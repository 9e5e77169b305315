"""Disjoint-set (union-find) structures."""

from __future__ import annotations

from collections.abc import Hashable


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with path compression.

    A union hangs the root of the first element's set under the root of the
    second element's set.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        self._parent[x_root] = y_root
        return True


class RankedDisjointSet:
    """Union-find over arbitrary hashable items, using union by rank."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a singleton set; an existing item is left as is."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined.

        The root of lower rank goes under the other; otherwise the second
        root goes under the first and the first root's rank grows.
        """
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True