"""Traversals, bipartiteness checks and topological sorts.

Vertices are numbered from 1 to ``n``. Edges are ``(u, v)`` pairs; the
traversal and bipartite functions treat them as undirected, the
topological sorts as directed from ``u`` to ``v``. Neighbours are visited
in the order their edges were given, and components are started from the
lowest unvisited vertex.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional

Edge = tuple[int, int]


def _checked_edges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 0:
        raise ValueError(f"vertex count must not be negative, got {n}")
    checked = []
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        checked.append((u, v))
    return checked


def _undirected(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in _checked_edges(n, edges):
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _directed(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in _checked_edges(n, edges):
        adjacency[u].append(v)
    return adjacency


def bfs_order(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the breadth-first visiting order of every vertex."""
    adjacency = _undirected(n, edges)
    seen = [False] * (n + 1)
    order: list[int] = []
    for start in range(1, n + 1):
        if seen[start]:
            continue
        seen[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for child in adjacency[node]:
                if not seen[child]:
                    seen[child] = True
                    queue.append(child)
    return order


def dfs_order(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the depth-first (preorder) visiting order of every vertex."""
    adjacency = _undirected(n, edges)
    seen = [False] * (n + 1)
    order: list[int] = []
    for start in range(1, n + 1):
        if seen[start]:
            continue
        seen[start] = True
        order.append(start)
        stack = [iter(adjacency[start])]
        while stack:
            for child in stack[-1]:
                if not seen[child]:
                    seen[child] = True
                    order.append(child)
                    stack.append(iter(adjacency[child]))
                    break
            else:
                stack.pop()
    return order


def is_bipartite_bfs(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the graph can be two-coloured, colouring breadth-first."""
    adjacency = _undirected(n, edges)
    color: list[Optional[int]] = [None] * (n + 1)
    for start in range(1, n + 1):
        if color[start] is not None:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for child in adjacency[node]:
                if color[child] is None:
                    color[child] = 1 - color[node]
                    queue.append(child)
                elif color[child] == color[node]:
                    return False
    return True


def is_bipartite_dfs(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the graph can be two-coloured, colouring depth-first."""
    adjacency = _undirected(n, edges)
    color: list[Optional[int]] = [None] * (n + 1)
    for start in range(1, n + 1):
        if color[start] is not None:
            continue
        color[start] = 0
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for child in neighbours:
                if color[child] is None:
                    color[child] = 1 - color[node]
                    stack.append((child, iter(adjacency[child])))
                    break
                if color[child] == color[node]:
                    return False
            else:
                stack.pop()
    return True


def topological_sort_bfs(n: int, edges: Iterable[Edge]) -> Optional[list[int]]:
    """Return a topological order by repeatedly removing sources, or None if cyclic."""
    adjacency = _directed(n, edges)
    indegree = [0] * (n + 1)
    for targets in adjacency:
        for child in targets:
            indegree[child] += 1
    queue = deque(vertex for vertex in range(1, n + 1) if indegree[vertex] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for child in adjacency[node]:
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)
    return order if len(order) == n else None


def topological_sort_dfs(n: int, edges: Iterable[Edge]) -> Optional[list[int]]:
    """Return a topological order from reversed DFS finishing times, or None if cyclic."""
    adjacency = _directed(n, edges)
    visited = [False] * (n + 1)
    on_path = [False] * (n + 1)
    finished: list[int] = []
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for child in neighbours:
                if not visited[child]:
                    visited[child] = on_path[child] = True
                    stack.append((child, iter(adjacency[child])))
                    break
                if on_path[child]:
                    return None
            else:
                on_path[node] = False
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished