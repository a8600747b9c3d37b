"""Recursive arithmetic: powers, factorials and binomial coefficients."""

from __future__ import annotations


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """Return ``base`` raised to ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    if exponent % 2 == 0:
        return fast_power(base * base, exponent // 2)
    return base * fast_power(base * base, (exponent - 1) // 2)


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def n_choose_r(n: int, r: int) -> float:
    """Return the binomial coefficient C(n, r) computed from factorials."""
    if r < 0 or r > n:
        raise ValueError("r must satisfy 0 <= r <= n")
    return factorial(n) / (factorial(r) * factorial(n - r))