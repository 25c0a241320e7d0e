"""Introductory counting, sequence and construction problems."""

from __future__ import annotations

from collections import Counter

MOD = 1_000_000_007


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence that starts at ``n`` and ends at 1."""
    if n < 1:
        raise ValueError("n must be positive")
    sequence = [n]
    while n != 1:
        n = n * 3 + 1 if n % 2 else n // 2
        sequence.append(n)
    return sequence


def missing_number(n: int, numbers) -> int:
    """Return the smallest number in ``1..n`` that is absent from ``numbers``."""
    remaining = set(range(1, n + 1)).difference(numbers)
    if not remaining:
        raise ValueError("no number is missing")
    return min(remaining)


def repetitions(sequence: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not sequence:
        return 0
    longest = current = 1
    for previous, char in zip(sequence, sequence[1:]):
        current = current + 1 if char == previous else 1
        longest = max(longest, current)
    return longest


def increasing_array(values) -> int:
    """Return the fewest unit increments that make ``values`` non-decreasing."""
    moves = 0
    highest = None
    for value in values:
        if highest is not None and value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of ``1..n`` with no adjacent values differing by 1.

    Returns ``None`` when no such permutation exists.
    """
    if n == 1:
        return [1]
    if n == 4:
        return [2, 4, 1, 3]
    if n < 4:
        return None
    return list(range(1, n + 1, 2)) + list(range(2, n + 1, 2))


def number_spiral(row: int, column: int) -> int:
    """Return the number at ``(row, column)`` of the infinite number spiral."""
    if row < 1 or column < 1:
        raise ValueError("row and column are 1-based")
    if row >= column:
        if row % 2 == 0:
            return row * row - (column - 1)
        return (row - 1) * (row - 1) + column
    if column % 2 == 0:
        return (column - 1) * (column - 1) + row
    return column * column - (row - 1)


def two_knights(n: int) -> list[int]:
    """For each board size ``1..n``, count placements of two non-attacking knights."""
    return [(k * k) * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2) for k in range(1, n + 1)]


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split ``1..n`` into two sets of equal sum, or return ``None`` if impossible."""
    if n < 1:
        raise ValueError("n must be positive")
    if (n * (n + 1) // 2) % 2:
        return None
    one: list[int] = []
    two: list[int] = []
    if n % 2:
        two.append(n)
        lo, hi = 1, n - 1
    else:
        lo, hi = 1, n
    to_first = True
    while lo < hi:
        target = one if to_first else two
        target.extend((lo, hi))
        lo += 1
        hi -= 1
        to_first = not to_first
    return one, two


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by taking 1 and 2 coins at a time."""
    return (a + b) % 3 == 0 and min(a, b) * 2 >= max(a, b)


def palindrome_reorder(text: str) -> str | None:
    """Rearrange ``text`` into a palindrome, or return ``None`` if impossible."""
    counts = Counter(text)
    odd = [char for char, count in counts.items() if count % 2]
    if len(odd) > 1 or (len(odd) == 1 and len(text) % 2 == 0):
        return None
    half = "".join(char * (counts[char] // 2) for char in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]


def gray_code(n: int) -> list[str]:
    """Return the ``2**n`` codes of length ``n`` in Gray code order."""
    if n < 1:
        raise ValueError("n must be positive")
    codes = ["0", "1"]
    for _ in range(n - 1):
        codes = ["1" + code for code in codes] + ["0" + code for code in reversed(codes)]
    return codes


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` discs from tower 1 to tower 3."""
    if n < 1:
        raise ValueError("n must be positive")
    moves: list[tuple[int, int]] = []

    def solve(count: int, start: int, end: int) -> None:
        if count == 1:
            moves.append((start, end))
            return
        other = 6 - (start + end)
        solve(count - 1, start, other)
        moves.append((start, end))
        solve(count - 1, other, end)

    solve(n, 1, 3)
    return moves


def digit_query(k: int) -> int:
    """Return the ``k``-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("k must be positive")
    digits, count, start = 1, 9, 1
    while k > digits * count:
        k -= digits * count
        digits += 1
        count *= 10
        start *= 10
    number = start + (k - 1) // digits
    return int(str(number)[(k - 1) % digits])