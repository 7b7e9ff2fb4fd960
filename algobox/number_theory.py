"""Elementary number theory: gcd, factorials, Fibonacci, primes and digit properties."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "gcd",
    "factorial",
    "factorial_recursive",
    "fibonacci",
    "sum_natural",
    "is_prime",
    "primes_up_to",
    "is_perfect",
    "is_harshad",
    "is_armstrong",
    "reverse_number",
    "is_palindrome_number",
    "is_buzz",
]


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must be non-negative, got {n}")


def _digits(n: int) -> list[int]:
    """Decimal digits of ``abs(n)``, least significant first; empty for 0."""
    n = abs(n)
    digits = []
    while n:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def factorial(n: int) -> int:
    """Return ``n!`` computed iteratively."""
    _require_non_negative(n, "n")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Return ``n!`` computed by recursion on ``n``."""
    _require_non_negative(n, "n")
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    _require_non_negative(n, "position")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def sum_natural(n: int) -> int:
    """Return ``1 + 2 + ... + n`` (0 for n = 0)."""
    _require_non_negative(n, "n")
    return n * (n + 1) // 2


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division up to its square root."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def primes_up_to(n: int) -> list[int]:
    """Return every prime ``<= n`` using the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [i for i, flag in enumerate(sieve) if flag]


def is_perfect(n: int) -> bool:
    """Return True if ``n`` equals the sum of its proper divisors."""
    if n <= 0:
        return False
    return sum(i for i in range(1, n // 2 + 1) if n % i == 0) == n


def is_harshad(n: int) -> bool:
    """Return True if ``n`` is divisible by the sum of its digits."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return n % sum(_digits(n)) == 0


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits raised to the digit count.

    Digits of a negative number carry its sign, so ``-153`` qualifies.
    """
    digits = _digits(n)
    sign = -1 if n < 0 else 1
    return sum((sign * d) ** len(digits) for d in digits) == n


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    sign = -1 if n < 0 else 1
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def is_palindrome_number(n: int) -> bool:
    """Return True if ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def is_buzz(n: int) -> bool:
    """Return True if ``n`` is divisible by 7 or its last digit is 7."""
    return n % 7 == 0 or (n > 0 and n % 10 == 7)