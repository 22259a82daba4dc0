"""Small arithmetic functions defined by recursion."""

from __future__ import annotations

from typing import List


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def factorial(n: int) -> int:
    """Return n! for n >= 0."""
    _require_non_negative("n", n)
    return 1 if n == 0 else n * factorial(n - 1)


def power(x: float, n: int) -> float:
    """Return x raised to the non-negative integer power n."""
    _require_non_negative("n", n)
    return 1 if n == 0 else x * power(x, n - 1)


def count_up(n: int) -> List[int]:
    """Return the numbers 1..n in increasing order."""
    _require_non_negative("n", n)
    return [] if n == 0 else count_up(n - 1) + [n]


def count_down(n: int) -> List[int]:
    """Return the numbers n..1 in decreasing order."""
    _require_non_negative("n", n)
    return [] if n == 0 else [n] + count_down(n - 1)


def is_even(n: int) -> bool:
    """Tell whether the non-negative integer n is even."""
    _require_non_negative("n", n)
    while n > 1:
        n -= 2
    return n == 0


def product(a: int, b: int) -> int:
    """Multiply a by the non-negative integer b through repeated addition."""
    _require_non_negative("b", b)
    if b == 0:
        return 0
    if b == 1:
        return a
    return a + product(a, b - 1)


def quotient(m: int, n: int) -> int:
    """Integer quotient of m by positive n through repeated subtraction."""
    if n <= 0:
        raise ValueError("divisor must be positive")
    count = 0
    while m >= n:
        m -= n
        count += 1
    return count


def remainder(m: int, n: int) -> int:
    """Remainder of m by positive n through repeated subtraction."""
    if n <= 0:
        raise ValueError("divisor must be positive")
    while m >= n:
        m -= n
    return m


def square(n: int) -> int:
    """Return n squared as the sum of the first n odd numbers."""
    _require_non_negative("n", n)
    return 0 if n == 0 else (2 * n - 1) + square(n - 1)


def digit_sum(n: int) -> int:
    """Sum the decimal digits of n; values below 10 are returned unchanged."""
    if n < 10:
        return n
    return n % 10 + digit_sum(n // 10)