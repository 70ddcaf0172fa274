"""Grid and adjacency-matrix problems: flood fill, islands and provinces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _fill(grid: list[list[int]], row: int, col: int, match: int, color: int) -> None:
    """Recolor the 4-connected region of cells equal to match around (row, col)."""
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == match:
            grid[r][c] = color
            stack.extend((r + dr, c + dc) for dr, dc in _STEPS)


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, new_color: int
) -> list[list[int]]:
    """A copy of image with the region around (row, col) painted new_color."""
    if not (0 <= row < len(image) and 0 <= col < len(image[row])):
        raise IndexError("starting cell is outside the image")
    result = [list(line) for line in image]
    original = result[row][col]
    if original != new_color:
        _fill(result, row, col, original, new_color)
    return result


def closed_island(grid: Sequence[Sequence[int]]) -> int:
    """Number of islands of 0s (land) fully surrounded by 1s (water)."""
    cells = [list(line) for line in grid]
    if not cells or not cells[0]:
        return 0
    rows, cols = len(cells), len(cells[0])
    border = [(r, c) for r in range(rows) for c in (0, cols - 1)]
    border += [(r, c) for c in range(cols) for r in (0, rows - 1)]
    for r, c in border:
        if cells[r][c] == 0:
            _fill(cells, r, c, 0, 1)
    count = 0
    for r in range(rows):
        for c in range(cols):
            if cells[r][c] == 0:
                count += 1
                _fill(cells, r, c, 0, 1)
    return count


def _count_components(size: int, neighbours) -> int:
    visited = [False] * size
    count = 0
    for start in range(size):
        if visited[start]:
            continue
        count += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in neighbours(node):
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append(nxt)
    return count


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of provinces in an adjacency matrix of directly connected cities."""

    def linked(city: int) -> Iterator[int]:
        return (other for other, flag in enumerate(is_connected[city]) if flag == 1)

    return _count_components(len(is_connected), linked)


def num_islands(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Number of connected components among nodes 0..n-1 joined by undirected edges."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return _count_components(n, adjacency.__getitem__)