"""Undirected graph representations, traversals, cycles, components and paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside 0..{count - 1}")


def adjacency_list(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Neighbour lists of vertices 0..vertex_count-1 for undirected (u, v) edges.

    Neighbours appear in the order their edges were given.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def adjacency_matrix(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """A vertex_count x vertex_count 0/1 matrix for undirected (u, v) edges."""
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def _preorder(
    adjacency: Sequence[Sequence[int]], start: int, visited: list[bool]
) -> Iterator[int]:
    """Nodes reachable from start in depth-first order, marking them visited."""
    visited[start] = True
    yield start
    stack = [iter(adjacency[start])]
    while stack:
        for nxt in stack[-1]:
            if not visited[nxt]:
                visited[nxt] = True
                yield nxt
                stack.append(iter(adjacency[nxt]))
                break
        else:
            stack.pop()


def has_cycle(adjacency: Sequence[Sequence[int]]) -> bool:
    """True when the undirected graph given by neighbour lists contains a cycle."""
    visited = [False] * len(adjacency)
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, node, iter(adjacency[nxt])))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
    return False


def connected_components(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Components in order of their lowest vertex, each in depth-first order."""
    visited = [False] * len(adjacency)
    components: list[list[int]] = []
    for start in range(len(adjacency)):
        if not visited[start]:
            components.append(list(_preorder(adjacency, start, visited)))
    return components


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes reachable from start in breadth-first order."""
    _check_vertex(start, len(adjacency))
    visited = [False] * len(adjacency)
    visited[start] = True
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            if not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes reachable from start in depth-first order."""
    _check_vertex(start, len(adjacency))
    return list(_preorder(adjacency, start, [False] * len(adjacency)))


def valid_path(
    n: int, edges: Iterable[Sequence[int]], source: int, destination: int
) -> bool:
    """True when destination can be reached from source over undirected edges."""
    _check_vertex(source, n)
    _check_vertex(destination, n)
    adjacency = adjacency_list(n, edges)
    return any(node == destination for node in _preorder(adjacency, source, [False] * n))


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Every path from node 0 to the last node of a directed acyclic graph."""
    target = len(graph) - 1
    if target < 0:
        return []

    def walk(path: list[int]) -> Iterator[list[int]]:
        node = path[-1]
        if node == target:
            yield list(path)
            return
        for nxt in graph[node]:
            path.append(nxt)
            yield from walk(path)
            path.pop()

    return list(walk([0]))