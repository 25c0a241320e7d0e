"""Range sums and minima over static and updatable arrays."""

from __future__ import annotations

from itertools import accumulate


def _check_range(lo: int, hi: int, length: int) -> None:
    if not 0 <= lo <= hi < length:
        raise IndexError(f"range [{lo}, {hi}] is outside 0..{length - 1}")


class PrefixSums:
    """Sums of contiguous ranges of a fixed array, answered in constant time."""

    def __init__(self, values) -> None:
        self._sums = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._sums) - 1

    def query(self, lo: int, hi: int) -> int:
        """Return the sum of the values at indices ``lo..hi`` inclusive."""
        _check_range(lo, hi, len(self))
        return self._sums[hi + 1] - self._sums[lo]


class SparseTableMin:
    """Minima of contiguous ranges of a fixed array, answered in constant time."""

    def __init__(self, values) -> None:
        base = list(values)
        self._levels = [base]
        width = 1
        while 2 * width <= len(base):
            previous = self._levels[-1]
            self._levels.append(
                [min(a, b) for a, b in zip(previous, previous[width:])]
            )
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def query(self, lo: int, hi: int) -> int:
        """Return the smallest value at indices ``lo..hi`` inclusive."""
        _check_range(lo, hi, len(self))
        level = (hi - lo + 1).bit_length() - 1
        row = self._levels[level]
        return min(row[lo], row[hi - (1 << level) + 1])


class FenwickTree:
    """Binary indexed tree holding an array with point assignment and range sums."""

    def __init__(self, values) -> None:
        self._values = list(values)
        size = len(self._values)
        self._tree = [0, *self._values]
        for i in range(1, size + 1):
            parent = i + (i & -i)
            if parent <= size:
                self._tree[parent] += self._tree[i]

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to the element at ``index``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} is outside 0..{len(self._values) - 1}")
        delta = value - self._values[index]
        self._values[index] = value
        position = index + 1
        while position <= len(self._values):
            self._tree[position] += delta
            position += position & -position

    def prefix_sum(self, count: int) -> int:
        """Return the sum of the first ``count`` elements."""
        if not 0 <= count <= len(self._values):
            raise IndexError(f"count {count} is outside 0..{len(self._values)}")
        total = 0
        while count > 0:
            total += self._tree[count]
            count -= count & -count
        return total

    def range_sum(self, lo: int, hi: int) -> int:
        """Return the sum of the elements at indices ``lo..hi`` inclusive."""
        _check_range(lo, hi, len(self._values))
        return self.prefix_sum(hi + 1) - self.prefix_sum(lo)