"""
Prime generation for sizing the filter's bit tables.
Trial division is plenty for realistic table sizes.
"""

from math import isqrt

from errors import InvalidConfiguration


def is_prime(n):
    """Returns True if n is prime, using 6k +/- 1 trial division."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = isqrt(n)
    divisor = 5
    while divisor <= limit:
        if n % divisor == 0 or n % (divisor + 2) == 0:
            return False
        divisor += 6
    return True


def next_prime(n):
    """Returns the smallest prime strictly greater than n."""
    if n < 2:
        return 2

    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def prime_sequence(start, count):
    """
    Generates `count` strictly increasing primes.

    The first is the smallest prime above `start`; each one after that
    is the smallest prime above its predecessor.

    Returns:
        sizes (list): The primes, in increasing order.
    """
    if count < 0:
        raise InvalidConfiguration(f"count must be non-negative, got {count}")

    sizes = []
    current = start
    for _ in range(count):
        current = next_prime(current)
        sizes.append(current)
    return sizes
