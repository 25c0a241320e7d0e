"""Connectivity, colouring, shortest routes and cycles in undirected graphs."""

from __future__ import annotations

from collections import deque


def _adjacency(n: int, edges) -> list[list[int]]:
    if n < 1:
        raise ValueError("n must be positive")
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        graph[a].append(b)
        graph[b].append(a)
    return graph


def _reach(graph: list[list[int]], source: int, seen: list[bool]) -> None:
    seen[source] = True
    stack = [source]
    while stack:
        node = stack.pop()
        for neighbour in graph[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                stack.append(neighbour)


def building_roads(n: int, edges) -> list[tuple[int, int]]:
    """Return the fewest new roads that connect all ``n`` cities.

    Each road joins the first city of one component to the first city of
    the next.
    """
    graph = _adjacency(n, edges)
    seen = [False] * (n + 1)
    leaders = []
    for city in range(1, n + 1):
        if not seen[city]:
            leaders.append(city)
            _reach(graph, city, seen)
    return list(zip(leaders, leaders[1:]))


def building_teams(n: int, edges) -> list[int] | None:
    """Assign team 1 or 2 to each of ``n`` pupils so that no friends share a team.

    Returns ``None`` when the friendship graph is not bipartite.
    """
    graph = _adjacency(n, edges)
    teams = [0] * (n + 1)
    for pupil in range(1, n + 1):
        if teams[pupil]:
            continue
        teams[pupil] = 1
        queue = deque([pupil])
        while queue:
            node = queue.popleft()
            for friend in graph[node]:
                if not teams[friend]:
                    teams[friend] = 3 - teams[node]
                    queue.append(friend)
                elif teams[friend] == teams[node]:
                    return None
    return teams[1:]


def message_route(n: int, edges) -> list[int] | None:
    """Return a shortest route of computers from 1 to ``n``, or ``None`` if none exists."""
    graph = _adjacency(n, edges)
    parent = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)
    if n not in parent:
        return None
    route = [n]
    while route[-1] != 1:
        route.append(parent[route[-1]])
    return route[::-1]


def round_trip(n: int, edges) -> list[int] | None:
    """Return a cycle that starts and ends in the same city, or ``None`` if the graph has none."""
    graph = _adjacency(n, edges)
    visited = [False] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        path = [root]
        position = {root: 0}
        stack = [(root, 0, iter(graph[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            descended = False
            for neighbour in neighbours:
                if neighbour in (parent, node):
                    continue
                if neighbour in position:
                    loop = path[position[neighbour]:]
                    return [neighbour] + loop[::-1]
                if not visited[neighbour]:
                    visited[neighbour] = True
                    position[neighbour] = len(path)
                    path.append(neighbour)
                    stack.append((neighbour, node, iter(graph[neighbour])))
                    descended = True
                    break
            if not descended:
                stack.pop()
                path.pop()
                del position[node]
    return None