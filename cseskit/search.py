"""Complete-search problems solved by enumeration and backtracking."""

from __future__ import annotations

from collections import Counter
from itertools import permutations

_SIZE = 7
_STEPS = _SIZE * _SIZE - 1
_MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
_FREE_ORDER = "DULR"


def apple_division(weights) -> int:
    """Return the smallest difference between two groups of ``weights``."""
    weights = list(weights)
    total = sum(weights)
    sums = {0}
    for weight in weights[1:]:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def creating_strings(text: str) -> list[str]:
    """Return every distinct rearrangement of ``text`` in alphabetical order."""
    return sorted({"".join(p) for p in permutations(text)})


def chessboard_queens(board) -> int:
    """Count placements of eight queens on free squares ('.') of an 8x8 board.

    Squares marked '*' are reserved and cannot hold a queen.
    """
    rows = list(board)
    if len(rows) != 8 or any(len(row) != 8 for row in rows):
        raise ValueError("board must have 8 rows of 8 squares")
    reserved = [[square == "*" for square in row] for row in rows]
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(r: int) -> int:
        if r == 8:
            return 1
        ways = 0
        for c in range(8):
            if reserved[r][c] or c in columns or r + c in diagonals or r - c in anti_diagonals:
                continue
            columns.add(c)
            diagonals.add(r + c)
            anti_diagonals.add(r - c)
            ways += place(r + 1)
            columns.discard(c)
            diagonals.discard(r + c)
            anti_diagonals.discard(r - c)
        return ways

    return place(0)


def grid_paths(pattern: str) -> int:
    """Count paths through a 7x7 grid from the top-left to the bottom-left corner.

    Each path visits every square once; ``pattern`` gives its 48 moves as
    U, D, L, R, or '?' for any move.
    """
    if len(pattern) != _STEPS or set(pattern) - set("UDLR?"):
        raise ValueError("pattern must be 48 characters from 'UDLR?'")
    visited = [[False] * _SIZE for _ in range(_SIZE)]

    def count(r: int, c: int, steps: int) -> int:
        if r == _SIZE - 1 and c == 0:
            return 1 if steps == _STEPS else 0
        if visited[r][c] or steps == _STEPS:
            return 0
        inner_row = 1 <= r <= 5
        inner_col = 1 <= c <= 5
        if inner_col and not visited[r][c - 1] and not visited[r][c + 1] and (
            (r == 0 and visited[r + 1][c]) or (r == 6 and visited[r - 1][c])
        ):
            return 0
        if inner_row and not visited[r + 1][c] and not visited[r - 1][c] and (
            (c == 0 and visited[r][c + 1]) or (c == 6 and visited[r][c - 1])
        ):
            return 0
        if inner_row and inner_col:
            if visited[r + 1][c] and visited[r - 1][c] and not visited[r][c - 1] and not visited[r][c + 1]:
                return 0
            if visited[r][c + 1] and visited[r][c - 1] and not visited[r - 1][c] and not visited[r + 1][c]:
                return 0

        visited[r][c] = True
        choice = pattern[steps]
        total = 0
        for direction in _FREE_ORDER if choice == "?" else choice:
            dr, dc = _MOVES[direction]
            nr, nc = r + dr, c + dc
            if 0 <= nr < _SIZE and 0 <= nc < _SIZE and not visited[nr][nc]:
                total += count(nr, nc, steps + 1)
        visited[r][c] = False
        return total

    return count(0, 0, 0)


def _is_rearrangement(candidate: str, text: str) -> bool:
    return Counter(candidate) == Counter(text)