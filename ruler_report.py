#!/usr/bin/env python3
"""
RULER_REPORT.PY - Interval table for a ruler configuration

Contains:
- generate_report: Per-prime counts and nearest-EDO-step errors for each JI interval
- print_report: Print formatted report to console
"""

from collections import Counter
from typing import Dict, List, Sequence

from ruler_models import CENTS_PER_OCTAVE, Interval


def nearest_edo_step(cents: float, edo_count: int) -> Dict:
    """Closest step of edo_count-EDO to a pitch, with signed error in cents.

    A positive error means the EDO step is sharp of the target.
    """
    step_size = CENTS_PER_OCTAVE / edo_count
    index = int(round(cents / step_size))
    step_cents = index * CENTS_PER_OCTAVE / edo_count
    return {
        "edo": edo_count,
        "step": index,
        "cents": step_cents,
        "error": step_cents - cents,
    }


def generate_report(intervals: List[Interval], edo_values: Sequence[int]) -> Dict:
    """Summarize JI intervals and how well each EDO approximates them."""

    report = {
        "intervals": [],
        "primes": Counter(),
        "edos": {},
        "summary": {},
    }

    for iv in intervals:
        report["primes"][iv.dominant_prime] += 1
        report["intervals"].append({
            "ratio": f"{iv.numerator}/{iv.denominator}",
            "cents": iv.cents,
            "prime": iv.dominant_prime,
            "nearest": [nearest_edo_step(iv.cents, edo) for edo in edo_values],
        })

    for edo in edo_values:
        errors = [abs(nearest_edo_step(iv.cents, edo)["error"]) for iv in intervals]
        report["edos"][edo] = {
            "steps": edo + 1,
            "step_size": CENTS_PER_OCTAVE / edo,
            "max_error": max(errors) if errors else 0.0,
            "mean_error": sum(errors) / len(errors) if errors else 0.0,
        }

    report["summary"] = {
        "total_intervals": len(intervals),
        "total_edo_steps": sum(e["steps"] for e in report["edos"].values()),
        "distinct_primes": len(report["primes"]),
    }

    return report


def print_report(report: Dict):
    """Print formatted interval report to console."""

    print("\n" + "=" * 60)
    print("INTERVAL REPORT")
    print("=" * 60)

    edos = list(report["edos"].keys())

    print("\n--- JI INTERVALS ---")
    header = f"{'Ratio':>8} {'Cents':>8} {'Prime':>5}"
    for edo in edos:
        header += f" {str(edo) + '-EDO':>14}"
    print(header)
    print("-" * len(header))
    for row in report["intervals"]:
        line = f"{row['ratio']:>8} {row['cents']:>8.1f} {row['prime']:>5}"
        for near in row["nearest"]:
            line += f" {near['step']:>4} ({near['error']:+6.1f})"
        print(line)

    print("\n--- PRIMES ---")
    for prime, count in sorted(report["primes"].items()):
        print(f"  {prime}: {count}")

    print("\n--- EDO FIT ---")
    for edo, info in report["edos"].items():
        print(f"  {edo}-EDO: step {info['step_size']:.1f}¢, "
              f"max error {info['max_error']:.1f}¢, mean error {info['mean_error']:.1f}¢")

    print("\n--- SUMMARY ---")
    for key, value in report["summary"].items():
        print(f"  {key.replace('_', ' ').title()}: {value}")

    print("=" * 60 + "\n")
