"""Integer classifiers used by the photo-count achievements."""

import math

from .constants import FIBONACCI_NUMBERS

_FIBONACCI_SET = frozenset(FIBONACCI_NUMBERS)


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def is_fibonacci(n: int) -> bool:
    """Membership in the fixed Fibonacci sequence up to 987."""
    return n in _FIBONACCI_SET


def is_palindrome(n: int) -> bool:
    """True for numerals of two or more digits that read the same reversed."""
    text = str(n)
    return len(text) >= 2 and text == text[::-1]


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like ``Math.round`` does: halves go up, not to even."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
