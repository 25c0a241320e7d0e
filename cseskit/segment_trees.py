"""Segment trees for range minima, maximum prefix sums and maximum subarray sums."""

from __future__ import annotations

from itertools import accumulate


def _check_range(lo: int, hi: int, length: int) -> None:
    if not 0 <= lo <= hi < length:
        raise IndexError(f"range [{lo}, {hi}] is outside 0..{length - 1}")


def _check_index(index: int, length: int) -> None:
    if not 0 <= index < length:
        raise IndexError(f"index {index} is outside 0..{length - 1}")


class MinSegmentTree:
    """Array with point assignment and range-minimum queries."""

    def __init__(self, values) -> None:
        leaves = list(values)
        if not leaves:
            raise ValueError("values must not be empty")
        self._size = len(leaves)
        self._tree = [0] * self._size + leaves
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to the element at ``index``."""
        _check_index(index, self._size)
        node = index + self._size
        self._tree[node] = value
        node //= 2
        while node >= 1:
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2

    def query(self, lo: int, hi: int) -> int:
        """Return the smallest element at indices ``lo..hi`` inclusive."""
        _check_range(lo, hi, self._size)
        lo += self._size
        hi += self._size
        best = None
        while lo <= hi:
            if lo % 2:
                best = self._tree[lo] if best is None else min(best, self._tree[lo])
                lo += 1
            if hi % 2 == 0:
                best = self._tree[hi] if best is None else min(best, self._tree[hi])
                hi -= 1
            lo //= 2
            hi //= 2
        return best


class PrefixMaxTree:
    """Array with point assignment and maximum-prefix-sum queries on subarrays.

    Internally a lazy segment tree holds the running sums of the array and
    supports adding a constant to a suffix of them.
    """

    def __init__(self, values) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        sums = [0, *accumulate(self._values)]
        self._last = len(sums) - 1
        self._max = [0] * (4 * len(sums))
        self._lazy = [0] * (4 * len(sums))
        self._build(1, 0, self._last, sums)

    def __len__(self) -> int:
        return len(self._values)

    def _build(self, node: int, left: int, right: int, sums: list[int]) -> None:
        if left == right:
            self._max[node] = sums[left]
            return
        mid = (left + right) // 2
        self._build(2 * node, left, mid, sums)
        self._build(2 * node + 1, mid + 1, right, sums)
        self._max[node] = max(self._max[2 * node], self._max[2 * node + 1])

    def _push(self, node: int) -> None:
        pending = self._lazy[node]
        if pending:
            for child in (2 * node, 2 * node + 1):
                self._max[child] += pending
                self._lazy[child] += pending
            self._lazy[node] = 0

    def _add(self, node: int, left: int, right: int, lo: int, hi: int, delta: int) -> None:
        if hi < left or right < lo:
            return
        if lo <= left and right <= hi:
            self._max[node] += delta
            self._lazy[node] += delta
            return
        self._push(node)
        mid = (left + right) // 2
        self._add(2 * node, left, mid, lo, hi, delta)
        self._add(2 * node + 1, mid + 1, right, lo, hi, delta)
        self._max[node] = max(self._max[2 * node], self._max[2 * node + 1])

    def _range_max(self, node: int, left: int, right: int, lo: int, hi: int) -> int | None:
        if hi < left or right < lo:
            return None
        if lo <= left and right <= hi:
            return self._max[node]
        self._push(node)
        mid = (left + right) // 2
        found = [
            best
            for best in (
                self._range_max(2 * node, left, mid, lo, hi),
                self._range_max(2 * node + 1, mid + 1, right, lo, hi),
            )
            if best is not None
        ]
        return max(found)

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to the element at ``index``."""
        _check_index(index, len(self._values))
        delta = value - self._values[index]
        self._values[index] = value
        if delta:
            self._add(1, 0, self._last, index + 1, self._last, delta)

    def max_prefix_sum(self, lo: int, hi: int) -> int:
        """Return the largest sum of a prefix of ``lo..hi`` inclusive; the empty prefix gives 0."""
        _check_range(lo, hi, len(self._values))
        best = self._range_max(1, 0, self._last, lo + 1, hi + 1)
        before = self._range_max(1, 0, self._last, lo, lo)
        return max(best - before, 0)


def _leaf(value: int) -> tuple[int, int, int, int]:
    clipped = max(0, value)
    return clipped, clipped, value, clipped


def _merge(left: tuple[int, int, int, int], right: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    l_pre, l_suf, l_tot, l_best = left
    r_pre, r_suf, r_tot, r_best = right
    prefix = max(l_pre, l_tot + r_pre)
    suffix = max(l_suf + r_tot, r_suf)
    best = max(prefix, suffix, l_best, r_best, l_suf + r_pre)
    return prefix, suffix, l_tot + r_tot, best


_EMPTY = (0, 0, 0, 0)


class SubarraySumTree:
    """Array with point assignment and maximum-subarray-sum queries.

    The empty subarray is allowed, so the answer is never negative.
    """

    def __init__(self, values) -> None:
        self._values = list(values)
        width = 1
        while width < len(self._values):
            width *= 2
        self._width = width
        self._nodes = [_EMPTY] * width + [_leaf(v) for v in self._values]
        self._nodes += [_EMPTY] * (2 * width - len(self._nodes))
        for node in range(width - 1, 0, -1):
            self._nodes[node] = _merge(self._nodes[2 * node], self._nodes[2 * node + 1])

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to the element at ``index``."""
        _check_index(index, len(self._values))
        self._values[index] = value
        node = index + self._width
        self._nodes[node] = _leaf(value)
        node //= 2
        while node >= 1:
            self._nodes[node] = _merge(self._nodes[2 * node], self._nodes[2 * node + 1])
            node //= 2

    def max_subarray_sum(self) -> int:
        """Return the largest sum of a contiguous subarray, 0 for the empty one."""
        if self._width == 1:
            return self._nodes[1][3] if self._values else 0
        return self._nodes[1][3]