"""Math kernel - pure integer functions."""

from .kernel import is_prime, gcd, lcm, fibonacci_sequence, lcm_of, hcf_of
from .exceptions import ArithmeticDomainError


__all__ = [
    "is_prime",
    "gcd",
    "lcm",
    "fibonacci_sequence",
    "lcm_of",
    "hcf_of",
    "ArithmeticDomainError",
]
