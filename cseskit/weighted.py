"""Shortest paths, negative cycles and spanning trees in weighted graphs."""

from __future__ import annotations

import heapq
from bisect import insort

INF = 10**18


def _weighted_edges(n: int, edges) -> list[tuple[int, int, int]]:
    if n < 1:
        raise ValueError("n must be positive")
    checked = []
    for a, b, weight in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        checked.append((a, b, weight))
    return checked


def _directed(n: int, edges) -> list[list[tuple[int, int]]]:
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, weight in _weighted_edges(n, edges):
        graph[a].append((b, weight))
    return graph


def find_negative_cycle(n: int, edges) -> list[int] | None:
    """Return a negative cycle of the directed graph, or ``None`` if there is none.

    The cycle is given as nodes along its edges, with the first node repeated
    at the end.
    """
    graph = _directed(n, edges)
    dist = [INF] * (n + 1)
    dist[1] = 0
    previous = [0] * (n + 1)

    for _ in range(n - 1):
        changed = False
        for node in range(1, n + 1):
            for neighbour, weight in graph[node]:
                if dist[node] + weight < dist[neighbour]:
                    dist[neighbour] = dist[node] + weight
                    previous[neighbour] = node
                    changed = True
        if not changed:
            return None

    cycle_node = 0
    for node in range(1, n + 1):
        for neighbour, weight in graph[node]:
            if dist[node] + weight < dist[neighbour]:
                dist[neighbour] = dist[node] + weight
                previous[neighbour] = node
                cycle_node = neighbour
    if not cycle_node:
        return None

    for _ in range(n):
        cycle_node = previous[cycle_node]
    backwards = [cycle_node]
    node = previous[cycle_node]
    while node != cycle_node:
        backwards.append(node)
        node = previous[node]
    backwards.append(cycle_node)
    return backwards[::-1]


def flight_routes(n: int, edges, k: int) -> list[int]:
    """Return the ``k`` cheapest route prices from city 1 to city ``n``, in order.

    Fewer prices are returned when fewer routes exist.
    """
    if k < 1:
        raise ValueError("k must be positive")
    graph = _directed(n, edges)
    best = [[INF] * k for _ in range(n + 1)]
    best[1][0] = 0
    heap = [(0, 1)]
    while heap:
        cost, node = heapq.heappop(heap)
        if best[node][-1] < cost:
            continue
        for neighbour, weight in graph[node]:
            candidate = cost + weight
            if best[neighbour][-1] > candidate:
                best[neighbour].pop()
                insort(best[neighbour], candidate)
                heapq.heappush(heap, (candidate, neighbour))
    return [price for price in best[n] if price < INF]


def road_reparation(n: int, edges) -> int | None:
    """Return the cheapest total cost of roads that connect all ``n`` cities.

    Returns ``None`` when the cities cannot all be connected.
    """
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, weight in _weighted_edges(n, edges):
        graph[a].append((b, weight))
        graph[b].append((a, weight))
    taken = [False] * (n + 1)
    heap = [(0, 1)]
    total = 0
    count = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if taken[node]:
            continue
        taken[node] = True
        total += weight
        count += 1
        if count == n:
            break
        for neighbour, length in graph[node]:
            if not taken[neighbour]:
                heapq.heappush(heap, (length, neighbour))
    return total if count == n else None


def shortest_routes(n: int, edges) -> list[int | None]:
    """Return the shortest distance from city 1 to each city ``1..n`` of a directed graph.

    Unreachable cities get ``None``.
    """
    graph = _directed(n, edges)
    distance = [INF] * (n + 1)
    distance[1] = 0
    heap = [(0, 1)]
    while heap:
        length, node = heapq.heappop(heap)
        if length > distance[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = length + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return [None if d == INF else d for d in distance[1:]]


def all_pairs_shortest(n: int, edges) -> list[list[int | None]]:
    """Return the matrix of shortest distances of an undirected graph.

    Entry ``[a - 1][b - 1]`` holds the distance between nodes ``a`` and ``b``,
    or ``None`` when they are not connected; the diagonal is 0.
    """
    matrix = [[INF] * n for _ in range(n)]
    for a, b, weight in _weighted_edges(n, edges):
        a, b = a - 1, b - 1
        if weight < matrix[a][b]:
            matrix[a][b] = weight
            matrix[b][a] = weight
    for k in range(n):
        via = matrix[k]
        for i, row in enumerate(matrix):
            if i == k or row[k] == INF:
                continue
            to_k = row[k]
            for j, through in enumerate(via):
                if to_k + through < row[j]:
                    row[j] = to_k + through
    return [
        [0 if i == j else (None if d == INF else d) for j, d in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def shortest_route_queries(n: int, edges, queries) -> list[int]:
    """Answer ``(a, b)`` distance queries on an undirected graph; -1 means no route."""
    matrix = all_pairs_shortest(n, edges)
    answers = []
    for a, b in queries:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"query ({a}, {b}) has a node outside 1..{n}")
        distance = matrix[a - 1][b - 1]
        answers.append(-1 if distance is None else distance)
    return answers