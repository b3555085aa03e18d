#!/usr/bin/env python3
"""
RULER_VALIDATION.PY - Input checking for ruler parameters

Contains:
- ParameterViolation: Data class for a rejected or suspicious parameter
- parse_edo_values: "12, 19 31" -> [12, 19, 31]
- validate_parameters: Check all ruler parameters
- coerce_odd / coerce_prime: Snap field values to odd / prime
- step_odd / step_prime: Arrow-key increment and decrement
- print_violation_report: Print formatted validation report
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ruler_numbers import is_prime, next_prime, previous_prime

# Enumeration is quadratic in the odd limit; beyond this it gets sluggish
SLOW_ODD_LIMIT = 255


@dataclass
class ParameterViolation:
    """A parameter problem found during validation."""
    constraint: str
    message: str
    severity: str = "error"  # "error" or "warning"
    actual_value: Optional[float] = None


def parse_edo_values(text: str) -> List[int]:
    """Parse comma- or whitespace-separated EDO step counts.

    Raises ValueError on anything that is not an integer.
    """
    values = []
    for chunk in re.split(r"[,\s]+", text.strip()):
        if not chunk:
            continue
        try:
            values.append(int(chunk))
        except ValueError:
            raise ValueError(f"Not an integer EDO value: {chunk!r}") from None
    return values


def validate_parameters(edo_values: Sequence[int], prime_limit: int, odd_limit: int,
                        ruler_height: float) -> List[ParameterViolation]:
    """
    Validate ruler parameters before rendering:
    1. At least one EDO, all positive
    2. Prime limit >= 2 (warn if not itself prime)
    3. Odd limit >= 1 (warn if even or very large)
    4. Positive ruler height

    Returns list of violations (empty if everything passes).
    """
    violations = []

    if not edo_values:
        violations.append(ParameterViolation(
            constraint="edo_values",
            message="No EDO values given",
        ))
    for edo in edo_values:
        if edo < 1:
            violations.append(ParameterViolation(
                constraint="edo_values",
                message=f"EDO value {edo} must be positive",
                actual_value=edo,
            ))

    if prime_limit < 2:
        violations.append(ParameterViolation(
            constraint="prime_limit",
            message=f"Prime limit {prime_limit} must be at least 2",
            actual_value=prime_limit,
        ))
    elif not is_prime(prime_limit):
        violations.append(ParameterViolation(
            constraint="prime_limit",
            message=f"Prime limit {prime_limit} is not prime (acts as {previous_prime(prime_limit + 1)}-limit)",
            severity="warning",
            actual_value=prime_limit,
        ))

    if odd_limit < 1:
        violations.append(ParameterViolation(
            constraint="odd_limit",
            message=f"Odd limit {odd_limit} must be at least 1",
            actual_value=odd_limit,
        ))
    else:
        if odd_limit % 2 == 0:
            violations.append(ParameterViolation(
                constraint="odd_limit",
                message=f"Odd limit {odd_limit} is even (acts as {odd_limit - 1}-odd-limit)",
                severity="warning",
                actual_value=odd_limit,
            ))
        if odd_limit > SLOW_ODD_LIMIT:
            violations.append(ParameterViolation(
                constraint="odd_limit",
                message=f"Odd limit {odd_limit} is large; generation may be slow",
                severity="warning",
                actual_value=odd_limit,
            ))

    if ruler_height <= 0:
        violations.append(ParameterViolation(
            constraint="ruler_height",
            message=f"Ruler height {ruler_height} must be positive",
            actual_value=ruler_height,
        ))

    return violations


def has_errors(violations: Sequence[ParameterViolation]) -> bool:
    return any(v.severity == "error" for v in violations)


# =============================================================================
# FIELD COERCION (odd-only / prime-only entries)
# =============================================================================

def coerce_odd(n: int) -> int:
    """Round n up to the nearest odd number >= 1."""
    if n < 1:
        return 1
    return n if n % 2 == 1 else n + 1


def coerce_prime(n: int) -> int:
    """Round n up to the nearest prime >= 2."""
    if is_prime(n):
        return n
    return next_prime(n)


def step_odd(n: int, direction: int) -> int:
    """Next (+1) or previous (-1) odd number, never below 1."""
    n = coerce_odd(n)
    if direction > 0:
        return n + 2
    return max(n - 2, 1)


def step_prime(n: int, direction: int) -> int:
    """Next (+1) or previous (-1) prime, never below 2."""
    if direction > 0:
        return next_prime(n)
    return previous_prime(n)


def print_violation_report(violations: List[ParameterViolation]):
    """Print a formatted parameter validation report."""

    print("\n" + "=" * 60)
    print("PARAMETER VALIDATION REPORT")
    print("=" * 60)

    if not violations:
        print("\n✓ All parameters PASSED")
        print("=" * 60 + "\n")
        return

    errors = [v for v in violations if v.severity == "error"]
    warnings = [v for v in violations if v.severity == "warning"]

    print(f"\n✗ Found {len(errors)} errors, {len(warnings)} warnings")

    by_constraint = {}
    for v in violations:
        by_constraint.setdefault(v.constraint, []).append(v)

    for constraint, vlist in by_constraint.items():
        print(f"\n--- {constraint.upper().replace('_', ' ')} ---")
        for v in vlist:
            marker = "✗" if v.severity == "error" else "⚠"
            print(f"  {marker} {v.message}")

    print("=" * 60 + "\n")
