"""Divisors, modular powers and the Josephus problem."""

from __future__ import annotations

from .introductory import MOD


def count_divisors(n: int) -> int:
    """Return the number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    divisors = 1
    factor = 2
    while factor * factor <= n:
        if n % factor == 0:
            exponent = 1
            while n % factor == 0:
                exponent += 1
                n //= factor
            divisors *= exponent
        factor += 1
    if n != 1:
        divisors *= 2
    return divisors


def power_mod(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``; a zero exponent gives 1."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def power_tower(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo 10**9+7, reducing the exponent by Fermat's theorem."""
    exponent = power_mod(b, c, MOD - 1)
    return power_mod(a, exponent, MOD)


def josephus_query(n: int, k: int) -> int:
    """Return the ``k``-th child removed when every second child of ``n`` leaves the circle."""
    if not 1 <= k <= n:
        raise ValueError("need 1 <= k <= n")
    if n == 1:
        return 1
    first_round = (n + 1) // 2
    if k <= first_round:
        return 1 if 2 * k > n else 2 * k
    child = josephus_query(n // 2, k - first_round)
    return 2 * child + 1 if n % 2 else 2 * child - 1