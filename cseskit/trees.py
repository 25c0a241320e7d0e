"""Tree centroids and rooted tree isomorphism."""

from __future__ import annotations


def _tree(n: int, edges) -> list[list[int]]:
    if n < 1:
        raise ValueError("n must be positive")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        graph[a].append(b)
        graph[b].append(a)
    return graph


def _preorder(graph: list[list[int]], root: int) -> tuple[list[int], list[int]]:
    parent = [0] * len(graph)
    seen = [False] * len(graph)
    seen[root] = True
    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        for child in graph[node]:
            if not seen[child]:
                seen[child] = True
                parent[child] = node
                stack.append(child)
    if len(order) != len(graph) - 1:
        raise ValueError("edges do not form a connected tree")
    return order, parent


def centroids(n: int, edges, root: int = 1) -> tuple[int, int]:
    """Return the centroids of a tree; both entries are equal when there is only one."""
    graph = _tree(n, edges)
    if not 1 <= root <= n:
        raise ValueError(f"root must be in 1..{n}")
    order, parent = _preorder(graph, root)
    size = [1] * (n + 1)
    for node in reversed(order):
        if node != root:
            size[parent[node]] += size[node]

    total = size[root]
    node, came_from = root, 0
    while True:
        heavy = next(
            (child for child in graph[node] if child != came_from and size[child] > total // 2),
            None,
        )
        if heavy is None:
            break
        node, came_from = heavy, node

    second = node
    for neighbour in graph[node]:
        if 2 * size[neighbour] == total:
            second = neighbour
    return node, second


def _encode(graph: list[list[int]], codes: dict[tuple[int, ...], int]) -> int:
    order, parent = _preorder(graph, 1)
    code = [0] * len(graph)
    for node in reversed(order):
        key = tuple(sorted(code[child] for child in graph[node] if child != parent[node]))
        code[node] = codes.setdefault(key, len(codes))
    return code[1]


def tree_isomorphic(n: int, first_edges, second_edges) -> bool:
    """Tell whether two trees on ``1..n``, both rooted at node 1, are isomorphic."""
    codes: dict[tuple[int, ...], int] = {}
    first = _encode(_tree(n, first_edges), codes)
    second = _encode(_tree(n, second_edges), codes)
    return first == second