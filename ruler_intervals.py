#!/usr/bin/env python3
"""
RULER_INTERVALS.PY - Just intonation and EDO interval generation

Contains:
- cents_for_ratio: 1200 * log2(n/d)
- generate_intervals: every reduced ratio in [1/1, 2/1] within a prime and odd limit
- edo_steps: the index 0..n steps of an n-EDO
"""

import logging
import math
from fractions import Fraction
from typing import List

from ruler_models import CENTS_PER_OCTAVE, EdoStep, Interval, InvalidParameterError
from ruler_numbers import UNISON_PRIME, dominant_prime, gcd, odd_part

logger = logging.getLogger(__name__)


def cents_for_ratio(numerator: int, denominator: int) -> float:
    """Pitch distance of numerator/denominator in cents."""
    return CENTS_PER_OCTAVE * math.log2(numerator / denominator)


def generate_intervals(prime_limit: int, odd_limit: int) -> List[Interval]:
    """Enumerate all reduced ratios 1 <= n/d <= 2 satisfying both limits.

    A pair (n, d) is accepted when:
      1. gcd(n, d) == 1
      2. n/d <= 2
      3. its largest prime factor <= prime_limit
      4. max(odd_part(n), odd_part(d)) <= odd_limit

    Numerators and denominators never need to exceed 2 * odd_limit: the
    odd side of a reduced ratio is at most odd_limit and the other side is
    at most twice that.

    Returns intervals sorted ascending by pitch. An empty list is a valid
    result.
    """
    if prime_limit < 2:
        raise InvalidParameterError(f"Prime limit must be at least 2 (got {prime_limit})")
    if odd_limit < 1:
        raise InvalidParameterError(f"Odd limit must be at least 1 (got {odd_limit})")

    limit = odd_limit * 2
    intervals = []
    checked = 0

    for numerator in range(1, limit + 1):
        for denominator in range(1, numerator + 1):
            checked += 1
            if gcd(numerator, denominator) != 1:
                continue
            if numerator > 2 * denominator:
                continue
            if max(odd_part(numerator), odd_part(denominator)) > odd_limit:
                continue

            if numerator == 1 and denominator == 1:
                max_prime = UNISON_PRIME
            else:
                max_prime = dominant_prime(numerator, denominator)
            if max_prime > prime_limit:
                continue

            intervals.append(Interval(
                numerator=numerator,
                denominator=denominator,
                cents=cents_for_ratio(numerator, denominator),
                dominant_prime=max_prime,
            ))

    # Sort on the exact ratio so neighbouring intervals never tie
    intervals.sort(key=lambda iv: Fraction(iv.numerator, iv.denominator))

    logger.debug("Checked %d pairs, accepted %d intervals (prime limit %d, odd limit %d)",
                 checked, len(intervals), prime_limit, odd_limit)
    return intervals


def edo_steps(edo_count: int) -> List[EdoStep]:
    """Steps 0..edo_count of an edo_count-EDO, unison and octave included."""
    if edo_count < 1:
        raise InvalidParameterError(f"EDO step count must be positive (got {edo_count})")

    # index * 1200 / n rather than index * (1200 / n) keeps the octave at exactly 1200
    return [EdoStep(index=i, edo_count=edo_count, cents=i * CENTS_PER_OCTAVE / edo_count)
            for i in range(edo_count + 1)]
