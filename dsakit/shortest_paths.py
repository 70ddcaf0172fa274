"""Single-source shortest paths: Bellman-Ford and Dijkstra."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a graph has a negative cycle reachable from the source."""


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[float]], source: int
) -> list[float]:
    """Distances from source over directed (u, v, weight) edges; math.inf if unreachable."""
    edge_list = [(u, v, w) for u, v, w in edges]
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    if any(dist[u] + w < dist[v] for u, v, w in edge_list):
        raise NegativeCycleError("negative cycle detected")
    return dist


def dijkstra(
    node_count: int,
    adjacency: Sequence[Iterable[tuple[int, float]]],
    source: int,
) -> list[float]:
    """Distances from source to nodes 0..node_count; math.inf if unreachable.

    adjacency[u] holds (v, weight) pairs with non-negative weights.
    """
    dist: list[float] = [math.inf] * (node_count + 1)
    done = [False] * (node_count + 1)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, a = heapq.heappop(heap)
        if done[a]:
            continue
        done[a] = True
        for b, w in adjacency[a]:
            if d + w < dist[b]:
                dist[b] = d + w
                heapq.heappush(heap, (dist[b], b))
    return dist