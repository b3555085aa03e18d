#!/usr/bin/env python3
"""
RULER_MODELS.PY - Data classes and constants for the EDO/JI ruler

Contains:
- Layout and styling constants
- Interval: a reduced just-intonation ratio within one octave
- EdoStep: one step of an equal division of the octave
- Drawable: a positioned, colored, labeled tick mark
- InvalidParameterError
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple


# =============================================================================
# LAYOUT CONSTANTS (pixels)
# =============================================================================

MAX_LINE_LENGTH = 400        # Longest JI tick (highest prime)
MIN_LINE_LENGTH = 25         # Shortest JI tick (lowest-ranked prime)
CONSTANT_LINE_LENGTH = 100   # Fixed tick for 1/1 and 2/1
JI_LINE_LEFT_POSITION = 152  # JI ticks start here and extend right
EDO_LINE_RIGHT_POSITION = 150  # EDO ticks end here (extend left)
LABEL_PADDING = 5

EDO_MIN_LINE_LENGTH = 25     # Finest EDO in a batch
EDO_MAX_LINE_LENGTH = 100    # Coarsest EDO in a batch
EDO_DARKEST_GRAY = 0
EDO_LIGHTEST_GRAY = 160

DEFAULT_COLOR = "#000000"

# Prime -> color hash
COLOR_HASH_MULTIPLIER = 2654435761
COLOR_HASH_MODULUS = 2 ** 32
BRIGHTNESS_THRESHOLD = 200
DARKEN_FACTOR = 0.7

CENTS_PER_OCTAVE = 1200

# Sides name the end each tick is anchored by (JI at its left end, EDO at
# its right end). On the page JI ticks run right of the axis, EDO ticks left.
JI_SIDE = "left"
EDO_SIDE = "right"


class InvalidParameterError(ValueError):
    """Raised when ruler parameters cannot produce a meaningful ruler."""


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Interval:
    """A reduced JI ratio numerator/denominator with 1 <= ratio <= 2."""
    numerator: int
    denominator: int
    cents: float
    dominant_prime: int  # 1 for the unison

    @property
    def ratio(self) -> Tuple[int, int]:
        return (self.numerator, self.denominator)

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @property
    def is_unison(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    @property
    def is_octave(self) -> bool:
        return self.numerator == 2 and self.denominator == 1

    @property
    def label(self) -> str:
        return f"{self.numerator}/{self.denominator} {self.cents:.1f}¢"


@dataclass(frozen=True)
class EdoStep:
    """Step `index` of `edo_count` equal divisions of the octave."""
    index: int
    edo_count: int
    cents: float

    @property
    def label(self) -> str:
        return f"{self.index}\\{self.edo_count} {self.cents:.1f}¢"


@dataclass(frozen=True)
class Drawable:
    """A tick mark ready to be materialized by a drawing surface."""
    position: float     # pixels from the top of the ruler (unison)
    label: str
    color: str          # "#rrggbb"
    line_length: float  # pixels
    side: str           # JI_SIDE or EDO_SIDE
    cents: float = 0.0

    @property
    def is_ji(self) -> bool:
        return self.side == JI_SIDE
