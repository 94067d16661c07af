"""Integer arithmetic drills: divisors, factorials, digit properties, primes."""

from __future__ import annotations

import math


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return (a // gcd(a, b)) * b


def factorial(n: int) -> int:
    """Product of 1..n; any n below 1 yields 1."""
    return math.prod(range(1, n + 1))


def ncr(n: int, r: int) -> int:
    """Number of ways to choose r items from n, via factorials."""
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_palindrome_number(n: int) -> bool:
    """True when the decimal digits of n read the same both ways.

    Negative numbers are never palindromes; zero is.
    """
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def is_prime(n: int) -> bool:
    """True when n is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def prime_pair_sums(n: int) -> list[tuple[int, int]]:
    """All pairs (p, q) with p <= q, both prime, and p + q == n."""
    return [
        (low, n - low)
        for low in range(2, n // 2 + 1)
        if is_prime(low) and is_prime(n - low)
    ]


def is_armstrong(n: int) -> bool:
    """True when n equals the sum of its digits each raised to the digit count.

    Digits of a negative number carry its sign.
    """
    sign = -1 if n < 0 else 1
    digits = [sign * int(d) for d in str(abs(n))]
    power = len(digits)
    return sum(d**power for d in digits) == n


def sum_natural(n: int) -> int:
    """Sum of the natural numbers 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def fibonacci_triangle(n: int) -> list[list[int]]:
    """Rows 1..n, where row k holds the first k Fibonacci numbers from 1."""
    rows = []
    for length in range(1, n + 1):
        previous, current = 0, 1
        row = [current]
        for _ in range(length - 1):
            previous, current = current, previous + current
            row.append(current)
        rows.append(row)
    return rows