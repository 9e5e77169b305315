"""Shortest paths and minimum spanning trees on small weighted graphs."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable
from typing import NamedTuple

from algodrills.disjoint_set import DisjointSet


class Edge(NamedTuple):
    """A weighted edge between two vertices numbered from 1."""

    start: int
    end: int
    weight: int

    def reversed(self) -> Edge:
        return Edge(self.end, self.start, self.weight)


Distances = list[list["int | None"]]
Forest = dict[int, list[Edge]]


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is not in 1..{n}")


def _edges(edges: Iterable, n: int) -> list[Edge]:
    result = [Edge._make(edge) for edge in edges]
    for edge in result:
        _check_vertex(edge.start, n)
        _check_vertex(edge.end, n)
    return result


def floyd_warshall(n: int, edges: Iterable) -> Distances:
    """All-pairs shortest paths on a directed graph with vertices 1..n.

    The matrix is indexed by vertex number; ``None`` marks an unreachable
    pair. A later edge between the same pair replaces an earlier one.
    """
    dist: Distances = [[None] * (n + 1) for _ in range(n + 1)]
    for vertex in range(n + 1):
        dist[vertex][vertex] = 0
    for start, end, weight in _edges(edges, n):
        dist[start][end] = weight

    vertices = range(1, n + 1)
    for via in vertices:
        via_row = dist[via]
        for i in vertices:
            row = dist[i]
            to_via = row[via]
            if to_via is None:
                continue
            for j in vertices:
                from_via = via_row[j]
                if from_via is None:
                    continue
                candidate = to_via + from_via
                if row[j] is None or row[j] > candidate:
                    row[j] = candidate
    return dist


def shortest_distance(distances: Distances, start: int, end: int) -> int:
    """Look up a distance, giving -1 when ``end`` cannot be reached."""
    value = distances[start][end]
    return -1 if value is None else value


def _empty_forest(n: int) -> Forest:
    return {vertex: [] for vertex in range(1, n + 1)}


def _link(forest: Forest, edge: Edge) -> None:
    forest[edge.start].append(edge)
    forest[edge.end].append(edge.reversed())


def kruskal(n: int, edges: Iterable) -> Forest:
    """Minimum spanning forest by Kruskal's method.

    Edges are taken by weight, ties broken by the smaller sum of endpoints
    and weight. The result maps every vertex to its tree edges, each edge
    stored once from either end.
    """
    components = DisjointSet(n + 1)
    forest = _empty_forest(n)
    ordered = sorted(
        _edges(edges, n),
        key=lambda edge: (edge.weight, edge.start + edge.end + edge.weight),
    )
    for edge in ordered:
        if components.union(edge.start, edge.end):
            _link(forest, edge)
    return forest


def prim(n: int, edges: Iterable, start: int) -> Forest:
    """Minimum spanning tree grown from ``start`` by Prim's method.

    Raises ValueError if the graph does not connect all n vertices.
    """
    _check_vertex(start, n)
    graph = _empty_forest(n)
    for edge in _edges(edges, n):
        _link(graph, edge)

    order = itertools.count()
    frontier: list[tuple[int, int, Edge]] = []

    def expand(vertex: int) -> None:
        for edge in graph[vertex]:
            heapq.heappush(frontier, (edge.weight, next(order), edge))

    seen = {start}
    expand(start)
    tree = _empty_forest(n)
    while len(seen) < n:
        if not frontier:
            raise ValueError("graph is not connected")
        _, _, edge = heapq.heappop(frontier)
        if edge.end in seen:
            continue
        seen.add(edge.end)
        expand(edge.end)
        _link(tree, edge)
    return tree


def segment_tree_size(n: int) -> int:
    """Array size for a segment tree over ``n`` leaves."""
    if n < 2:
        raise ValueError("a segment tree needs at least two leaves")
    return 1 << ((n - 1).bit_length() + 1)