"""Dynamic-programming counting and optimisation problems."""

from __future__ import annotations

from functools import lru_cache

from .introductory import MOD

MAX_COIN_SUM = 100_000


def book_shop(prices, pages, budget: int) -> int:
    """Return the most pages buyable with at most ``budget``, each book at most once."""
    prices = list(prices)
    pages = list(pages)
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + count)
    return best[budget]


def coin_combinations_ordered(coins, target: int) -> int:
    """Count ordered sequences of ``coins`` that sum to ``target``, modulo 10**9+7."""
    coins = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [0] * (target + 1)
    ways[0] = 1
    for value in range(1, target + 1):
        ways[value] = sum(ways[value - coin] for coin in coins if coin <= value) % MOD
    return ways[target]


def coin_combinations_unordered(coins, target: int) -> int:
    """Count multisets of ``coins`` that sum to ``target``, modulo 10**9+7."""
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in coins:
        for value in range(coin, target + 1):
            ways[value] = (ways[value] + ways[value - coin]) % MOD
    return ways[target]


def counting_numbers(low: int, high: int) -> int:
    """Count integers in ``[low, high]`` with no two equal adjacent digits."""
    if low < 0 or low > high:
        raise ValueError("need 0 <= low <= high")
    upper = str(high)
    lower = str(low).zfill(len(upper))

    @lru_cache(maxsize=None)
    def count(index: int, tight_low: bool, tight_high: bool, previous: int, leading: bool) -> int:
        if index == len(upper):
            return 1
        low_digit = int(lower[index])
        high_digit = int(upper[index])
        start = low_digit if tight_low else 0
        stop = high_digit if tight_high else 9
        total = 0
        for digit in range(start, stop + 1):
            if digit != previous or leading:
                total += count(
                    index + 1,
                    tight_low and digit == low_digit,
                    tight_high and digit == high_digit,
                    digit,
                    leading and digit == 0,
                )
        return total

    return count(0, True, True, -1, True)


def dice_combinations(total: int) -> int:
    """Count ordered dice throws summing to ``total``, modulo 10**9+7."""
    if total < 0:
        raise ValueError("total must not be negative")
    ways = [1] + [0] * total
    for value in range(1, total + 1):
        ways[value] = sum(ways[max(0, value - 6):value]) % MOD
    return ways[total]


def edit_distance(first: str, second: str) -> int:
    """Return the fewest insertions, deletions and replacements turning one string into the other."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def grid_path_count(grid) -> int:
    """Count right/down paths over '.' squares from corner to corner, modulo 10**9+7.

    Squares marked '*' are traps and cannot be entered.
    """
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    above = [0] * width
    for r, row in enumerate(rows):
        current = [0] * width
        for c, square in enumerate(row):
            if square != ".":
                continue
            if r == 0 and c == 0:
                current[c] = 1
                continue
            left = current[c - 1] if c > 0 else 0
            current[c] = (above[c] + left) % MOD
        above = current
    return above[-1]


def minimizing_coins(coins, target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or ``None`` if impossible."""
    coins = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    unreachable = target + 1
    fewest = [0] + [unreachable] * target
    for value in range(1, target + 1):
        fewest[value] = min(
            (fewest[value - coin] + 1 for coin in coins if coin <= value),
            default=unreachable,
        )
        fewest[value] = min(fewest[value], unreachable)
    return None if fewest[target] >= unreachable else fewest[target]


def money_sums(coins) -> list[int]:
    """Return, in increasing order, every positive sum (up to 100000) of a subset of ``coins``."""
    mask = (1 << (MAX_COIN_SUM + 1)) - 1
    reachable = 1
    for coin in coins:
        reachable = (reachable | (reachable << coin)) & mask
    return [value for value in range(1, MAX_COIN_SUM + 1) if reachable >> value & 1]


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach 0, each step subtracting a digit of the number."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = min(steps[value - int(d)] + 1 for d in str(value) if d != "0")
    return steps[n]