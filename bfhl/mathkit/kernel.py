"""Pure integer functions behind the arithmetic operations."""

from functools import reduce
from math import isqrt
from typing import Sequence

from .exceptions import ArithmeticDomainError


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime (trial division up to its square root)."""
    if n < 2:
        return False
    for i in range(2, isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    Operands are taken by absolute value, so the result is never negative.
    ``gcd(0, 0)`` is 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two integers.
    
    Args:
        a: First operand.
        b: Second operand.
        
    Returns:
        Non-negative least common multiple.
        
    Raises:
        ArithmeticDomainError: If both operands are zero.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise ArithmeticDomainError(
            operation="lcm",
            message="LCM is undefined when all inputs are zero",
        )
    return abs(a * b) // divisor


def fibonacci_sequence(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1, 1, 2, ..."""
    if n < 0:
        raise ValueError("n must be non-negative")

    sequence = []
    a, b = 0, 1
    for _ in range(n):
        sequence.append(a)
        a, b = b, a + b
    return sequence


def lcm_of(values: Sequence[int]) -> int:
    """Fold ``lcm`` over ``values`` from the left, seeded with the first element."""
    if not values:
        raise ValueError("values must not be empty")
    return reduce(lcm, values)


def hcf_of(values: Sequence[int]) -> int:
    """Fold ``gcd`` over ``values`` from the left, seeded with the first element."""
    if not values:
        raise ValueError("values must not be empty")
    return reduce(gcd, values)
