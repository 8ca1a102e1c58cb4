"""Grid flood fill, graph search and combination exercises."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Sequence


def _colour_key(color_blind: bool):
    if color_blind:
        return lambda cell: "R" if cell == "G" else cell
    return lambda cell: cell


def count_regions(grid: Iterable[Sequence[str]], color_blind: bool = False) -> int:
    """Count the 4-connected regions of equal colour in ``grid``.

    With ``color_blind`` set, red (``R``) and green (``G``) look the same.
    """
    rows = [list(row) for row in grid]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("grid must be rectangular")
    key = _colour_key(color_blind)
    height = len(rows)

    seen: set[tuple[int, int]] = set()
    regions = 0
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if (i, j) in seen:
                continue
            regions += 1
            colour = key(cell)
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                y, x = stack.pop()
                for ny, nx in ((y + 1, x), (y - 1, x), (y, x - 1), (y, x + 1)):
                    if (
                        0 <= ny < height
                        and 0 <= nx < width
                        and (ny, nx) not in seen
                        and key(rows[ny][nx]) == colour
                    ):
                        seen.add((ny, nx))
                        stack.append((ny, nx))
    return regions


def reachability(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the matrix whose (i, j) entry is 1 when a path of one or more edges leads from i to j."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    neighbours = [[j for j, edge in enumerate(row) if edge] for row in rows]

    result = []
    for start in range(size):
        reached: set[int] = set()
        stack = list(neighbours[start])
        while stack:
            vertex = stack.pop()
            if vertex in reached:
                continue
            reached.add(vertex)
            stack.extend(neighbours[vertex])
        result.append([1 if j in reached else 0 for j in range(size)])
    return result


def _adjacency(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[list[int]]:
    if not 1 <= start <= n:
        raise ValueError("start vertex is out of range")
    adjacent: list[set[int]] = [set() for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) refers to a missing vertex")
        adjacent[a].add(b)
        adjacent[b].add(a)
    return [sorted(vertices) for vertices in adjacent]


def dfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the depth-first visiting order of an undirected graph, smallest neighbour first."""
    adjacent = _adjacency(n, edges, start)
    visited = {start}
    order = [start]
    stack = [iter(adjacent[start])]
    while stack:
        for vertex in stack[-1]:
            if vertex not in visited:
                visited.add(vertex)
                order.append(vertex)
                stack.append(iter(adjacent[vertex]))
                break
        else:
            stack.pop()
    return order


def bfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the breadth-first visiting order of an undirected graph, smallest neighbour first."""
    adjacent = _adjacency(n, edges, start)
    visited = {start}
    order = [start]
    for vertex in order:
        for neighbour in adjacent[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
    return order


def lotto_combinations(numbers: Sequence[int]) -> list[tuple[int, ...]]:
    """Return every choice of six numbers, in the order they appear in ``numbers``."""
    return list(combinations(numbers, 6))