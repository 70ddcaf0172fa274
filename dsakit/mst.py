"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from operator import itemgetter
from typing import NamedTuple


class SpanningTree(NamedTuple):
    """Total weight and the (u, v, weight) edges chosen, in the order chosen."""

    weight: float
    edges: list[tuple[int, int, float]]


class DisjointSet:
    """Union-find over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """The representative of the set holding x."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside the set")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def same(self, a: int, b: int) -> bool:
        """True when a and b are in the same set."""
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """Join the sets of a and b; False when they were already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        else:
            self._parent[root_b] = root_a
            if self._rank[root_a] == self._rank[root_b]:
                self._rank[root_a] += 1
        return True


def kruskal_mst(n: int, edges: Iterable[Sequence[float]]) -> SpanningTree:
    """Minimum spanning tree (or forest) of nodes 0..n-1 from (u, v, weight) edges.

    Edges are taken in ascending weight, keeping the given order among equals.
    """
    ordered = sorted(((a, b, w) for a, b, w in edges), key=itemgetter(2))
    sets = DisjointSet(n)
    chosen: list[tuple[int, int, float]] = []
    total: float = 0
    for a, b, w in ordered:
        if len(chosen) >= n - 1:
            break
        if sets.union(a, b):
            chosen.append((a, b, w))
            total += w
    return SpanningTree(total, chosen)


def prim_mst(
    n: int, adjacency: Sequence[Iterable[tuple[int, float]]]
) -> SpanningTree:
    """Minimum spanning tree of the component of node 0.

    adjacency[u] holds (v, weight) pairs; each chosen edge is (parent, node, weight).
    """
    if n == 0:
        return SpanningTree(0, [])
    in_tree = [False] * n
    chosen: list[tuple[int, int, float]] = []
    total: float = 0
    added = 0
    heap: list[tuple[float, int, int]] = [(0, 0, -1)]
    while heap and added < n:
        weight, node, parent = heapq.heappop(heap)
        if in_tree[node]:
            continue
        in_tree[node] = True
        total += weight
        added += 1
        if parent >= 0:
            chosen.append((parent, node, weight))
        for nxt, w in adjacency[node]:
            if not in_tree[nxt]:
                heapq.heappush(heap, (w, nxt, node))
    return SpanningTree(total, chosen)