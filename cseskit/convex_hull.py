"""Lower envelopes of lines: a monotone convex hull and a Li Chao tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """The line ``y = slope * x + intercept``."""

    slope: int
    intercept: int

    def value(self, x: int) -> int:
        """Return the height of the line at ``x``."""
        return self.slope * x + self.intercept


def _useless(first: Line, middle: Line, last: Line) -> bool:
    """Tell whether ``middle`` never lies strictly below both neighbours."""
    return (first.intercept - middle.intercept) * (last.slope - first.slope) >= (
        first.intercept - last.intercept
    ) * (middle.slope - first.slope)


class MonotoneHull:
    """Minimum of lines added with non-increasing slopes, queried at non-decreasing x."""

    def __init__(self) -> None:
        self._lines: deque[Line] = deque()
        self._last_x: int | None = None

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, line: Line) -> None:
        """Add ``line``; its slope must not exceed the slope of the previous line."""
        if self._lines:
            last = self._lines[-1]
            if line.slope > last.slope:
                raise ValueError("slopes must be added in non-increasing order")
            if line.slope == last.slope:
                if line.intercept >= last.intercept:
                    return
                self._lines.pop()
        while len(self._lines) >= 2 and _useless(self._lines[-2], self._lines[-1], line):
            self._lines.pop()
        self._lines.append(line)

    def query(self, x: int) -> int:
        """Return the smallest value of the added lines at ``x``."""
        if not self._lines:
            raise ValueError("no lines have been added")
        if self._last_x is not None and x < self._last_x:
            raise ValueError("queries must come in non-decreasing order of x")
        self._last_x = x
        lines = self._lines
        while len(lines) >= 2 and lines[0].value(x) >= lines[1].value(x):
            lines.popleft()
        return lines[0].value(x)


class _Node:
    __slots__ = ("line", "left", "right")

    def __init__(self) -> None:
        self.line: Line | None = None
        self.left: _Node | None = None
        self.right: _Node | None = None


class LiChaoTree:
    """Minimum of lines over the integers ``lo..hi``, in any order of insertion and query."""

    def __init__(self, lo: int, hi: int) -> None:
        if lo > hi:
            raise ValueError("lo must not exceed hi")
        self.lo = lo
        self.hi = hi
        self._root = _Node()

    def add(self, line: Line) -> None:
        """Add ``line`` to the set whose minimum is queried."""
        node = self._root
        left, right = self.lo, self.hi
        while True:
            if node.line is None:
                node.line = line
                return
            mid = (left + right) // 2
            better_left = line.value(left) < node.line.value(left)
            better_mid = line.value(mid) < node.line.value(mid)
            if better_mid:
                node.line, line = line, node.line
            if left == right:
                return
            if better_left != better_mid:
                if node.left is None:
                    node.left = _Node()
                node = node.left
                right = mid
            else:
                if node.right is None:
                    node.right = _Node()
                node = node.right
                left = mid + 1

    def query(self, x: int) -> int:
        """Return the smallest value of the added lines at ``x``."""
        if not self.lo <= x <= self.hi:
            raise ValueError(f"x={x} is outside {self.lo}..{self.hi}")
        if self._root.line is None:
            raise ValueError("no lines have been added")
        best: int | None = None
        node: _Node | None = self._root
        left, right = self.lo, self.hi
        while node is not None and node.line is not None:
            value = node.line.value(x)
            best = value if best is None else min(best, value)
            if left == right:
                break
            mid = (left + right) // 2
            if x <= mid:
                node, right = node.left, mid
            else:
                node, left = node.right, mid + 1
        return best