"""Searches over character grids: rooms, labyrinths and escaping monsters."""

from __future__ import annotations

from collections import deque

_STEPS = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))
_BACK = {"D": (-1, 0), "U": (1, 0), "R": (0, -1), "L": (0, 1)}


def _rows(grid) -> list[str]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    return rows


def _single(rows: list[str], mark: str) -> tuple[int, int]:
    found = [(r, c) for r, row in enumerate(rows) for c, square in enumerate(row) if square == mark]
    if len(found) != 1:
        raise ValueError(f"grid must hold exactly one {mark!r}")
    return found[0]


def _neighbours(rows: list[str], r: int, c: int):
    height, width = len(rows), len(rows[0])
    for letter, dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < height and 0 <= nc < width:
            yield letter, (nr, nc)


def _trace(came: dict, start: tuple[int, int], end: tuple[int, int]) -> str:
    moves = []
    r, c = end
    while (r, c) != start:
        letter = came[(r, c)]
        moves.append(letter)
        dr, dc = _BACK[letter]
        r, c = r + dr, c + dc
    return "".join(reversed(moves))


def count_rooms(grid) -> int:
    """Count the connected areas of floor ('.') separated by walls ('#')."""
    rows = _rows(grid)
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, square in enumerate(row):
            if square != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for _, (nr, nc) in _neighbours(rows, cr, cc):
                    if rows[nr][nc] != "#" and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def labyrinth(grid) -> str | None:
    """Return a shortest path of moves (U, D, L, R) from 'A' to 'B' over floor ('.').

    Returns ``None`` when 'B' cannot be reached.
    """
    rows = _rows(grid)
    start = _single(rows, "A")
    end = _single(rows, "B")
    came: dict[tuple[int, int], str] = {}
    queue = deque([start])
    while queue and end not in came:
        r, c = queue.popleft()
        for letter, cell in _neighbours(rows, r, c):
            if cell == start or cell in came:
                continue
            if rows[cell[0]][cell[1]] in ".B":
                came[cell] = letter
                queue.append(cell)
    if end not in came:
        return None
    return _trace(came, start, end)


def monsters(grid) -> str | None:
    """Return moves that take 'A' to the grid border before any monster ('M') can catch it.

    Returns ``None`` when no safe escape exists; an empty string when 'A'
    already stands on the border.
    """
    rows = _rows(grid)
    height, width = len(rows), len(rows[0])
    start = _single(rows, "A")

    danger: dict[tuple[int, int], int] = {}
    queue = deque()
    for r, row in enumerate(rows):
        for c, square in enumerate(row):
            if square == "M":
                danger[(r, c)] = 0
                queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for _, cell in _neighbours(rows, r, c):
            if rows[cell[0]][cell[1]] != "#" and cell not in danger:
                danger[cell] = danger[(r, c)] + 1
                queue.append(cell)

    unreachable = float("inf")
    distance = {start: 0}
    came: dict[tuple[int, int], str] = {}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        step = distance[(r, c)] + 1
        for letter, cell in _neighbours(rows, r, c):
            if rows[cell[0]][cell[1]] == "#" or cell in distance:
                continue
            if step < danger.get(cell, unreachable):
                distance[cell] = step
                came[cell] = letter
                queue.append(cell)

    def safe(cell: tuple[int, int]) -> bool:
        return rows[cell[0]][cell[1]] not in "#M" and cell in distance

    border = [cell for r in range(height) for cell in ((r, 0), (r, width - 1))]
    border += [cell for c in range(width) for cell in ((0, c), (height - 1, c))]
    for cell in border:
        if safe(cell):
            return _trace(came, start, cell)
    return None