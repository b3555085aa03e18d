#!/usr/bin/env python3
"""
RULER_ENCODER.PY - Visual encoding of intervals

Maps number-theoretic properties onto what the ruler shows:
- position_for_cents: vertical pixel offset (linear in cents)
- color_for_prime: deterministic hash of a prime into a legible RGB color
- line_length_for_prime: tick length by the prime's rank among primes <= limit
- style_for_interval: per-interval (color, length) with 1/1 and 2/1 fixed
- edo_style: grayscale (color, length) for one EDO within a batch
"""

from typing import Tuple

from ruler_models import (
    BRIGHTNESS_THRESHOLD,
    CENTS_PER_OCTAVE,
    COLOR_HASH_MODULUS,
    COLOR_HASH_MULTIPLIER,
    CONSTANT_LINE_LENGTH,
    DARKEN_FACTOR,
    DEFAULT_COLOR,
    EDO_DARKEST_GRAY,
    EDO_LIGHTEST_GRAY,
    EDO_MAX_LINE_LENGTH,
    EDO_MIN_LINE_LENGTH,
    MAX_LINE_LENGTH,
    MIN_LINE_LENGTH,
    Interval,
)
from ruler_numbers import primes_up_to


def position_for_cents(cents: float, ruler_height: float) -> float:
    """Pixels from the top: 0 at the unison, ruler_height at the octave."""
    return (cents / CENTS_PER_OCTAVE) * ruler_height


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def color_for_prime(prime: int) -> str:
    """Hash a prime into a color, darkening anything too close to white."""
    hashed = prime * COLOR_HASH_MULTIPLIER % COLOR_HASH_MODULUS
    r = (hashed & 0xFF0000) >> 16
    g = (hashed & 0x00FF00) >> 8
    b = hashed & 0x0000FF

    # Perceptual luminance
    brightness = 0.299 * r + 0.587 * g + 0.114 * b
    if brightness > BRIGHTNESS_THRESHOLD:
        r = int(r * DARKEN_FACTOR)
        g = int(g * DARKEN_FACTOR)
        b = int(b * DARKEN_FACTOR)

    return rgb_to_hex(r, g, b)


def line_length_for_rank(index: int, count: int,
                         minimum: float = MIN_LINE_LENGTH,
                         maximum: float = MAX_LINE_LENGTH) -> float:
    """Linear interpolation from minimum (index 0) to maximum (index count-1).

    A single-entry scale has nothing to interpolate over and gets maximum.
    """
    if count <= 1:
        return float(maximum)
    return minimum + (maximum - minimum) * (index / (count - 1))


def line_length_for_prime(prime: int, prime_limit: int) -> float:
    """Tick length from the prime's rank among all primes up to prime_limit."""
    primes = primes_up_to(prime_limit)
    if prime not in primes:
        # Out-of-limit query primes get a rank of their own
        primes.append(prime)
        primes.sort()
    return line_length_for_rank(primes.index(prime), len(primes))


def style_for_interval(interval: Interval, prime_limit: int) -> Tuple[str, float]:
    """(color, line_length) for a JI interval.

    The unison and the octave are reference marks: they always get the
    neutral color and a fixed length.
    """
    if interval.is_unison or interval.is_octave:
        return DEFAULT_COLOR, float(CONSTANT_LINE_LENGTH)
    prime = interval.dominant_prime
    return color_for_prime(prime), line_length_for_prime(prime, prime_limit)


def edo_style(edo_count: int, batch_min: int, batch_max: int) -> Tuple[str, float]:
    """(color, line_length) shared by every tick of one EDO system.

    The coarsest EDO of the batch is black with the longest ticks, the
    finest is light gray with the shortest. A batch of one sits at the
    midpoint.
    """
    if batch_max == batch_min:
        t = 0.5
    else:
        t = (edo_count - batch_min) / (batch_max - batch_min)
        t = max(0.0, min(1.0, t))

    level = int(round(EDO_DARKEST_GRAY + (EDO_LIGHTEST_GRAY - EDO_DARKEST_GRAY) * t))
    length = EDO_MAX_LINE_LENGTH - (EDO_MAX_LINE_LENGTH - EDO_MIN_LINE_LENGTH) * t
    return rgb_to_hex(level, level, level), length
