#!/usr/bin/env python3
"""
RULER_NUMBERS.PY - Number theory helpers for interval classification

Contains:
- is_prime, primes_up_to, next_prime, previous_prime
- prime_factors, gcd, odd_part
- dominant_prime: largest prime in a ratio's numerator/denominator
"""

from typing import List


# Sentinel "prime" for the unison 1/1, which has no prime factors at all
UNISON_PRIME = 1


# =============================================================================
# PRIMES
# =============================================================================

def is_prime(n: int) -> bool:
    """Trial division by 6k +/- 1 up to sqrt(n)."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def primes_up_to(limit: int) -> List[int]:
    """All primes in [2, limit], ascending."""
    return [p for p in range(2, limit + 1) if is_prime(p)]


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than n."""
    candidate = max(n + 1, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def previous_prime(n: int) -> int:
    """Largest prime strictly less than n (2 is the floor)."""
    candidate = n - 1
    while candidate > 2 and not is_prime(candidate):
        candidate -= 1
    return max(candidate, 2)


# =============================================================================
# FACTORISATION
# =============================================================================

def prime_factors(n: int) -> List[int]:
    """Prime factors of n with multiplicity, smallest first.

    prime_factors(1) == [] since 1 has no prime factors.
    """
    factors = []
    divisor = 2
    while n >= 2:
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    return factors


def gcd(a: int, b: int) -> int:
    """Euclid. gcd(a, 0) == a."""
    while b != 0:
        a, b = b, a % b
    return abs(a)


def odd_part(n: int) -> int:
    """Largest odd divisor of n (odd_part(1) == 1)."""
    while n % 2 == 0 and n > 1:
        n //= 2
    return n


def dominant_prime(numerator: int, denominator: int) -> int:
    """Largest prime factor appearing in either numerator or denominator.

    Raises ValueError for 1/1, which has no prime factors. Callers that
    need a value for the unison use UNISON_PRIME instead.
    """
    primes = set(prime_factors(numerator)) | set(prime_factors(denominator))
    if not primes:
        raise ValueError(f"{numerator}/{denominator} has no prime factors")
    return max(primes)

