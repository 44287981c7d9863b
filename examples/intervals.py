#!/usr/bin/env python3
"""
Example: Spelled interval arithmetic.

This demonstrates the core engine: transposing pitches by intervals,
naming the interval between two pitches, and stacking intervals.

Usage:
    python examples/intervals.py
    python examples/intervals.py path/to/notation.yaml
"""

import sys
from pathlib import Path

from chuk_solfege.config import load_config
from chuk_solfege.core import IntervalClass, IntervalRoot, PitchRoot, major, minor, perfect
from chuk_solfege.notation import (
    describe_interval,
    format_interval,
    format_pitch,
    interval_between,
    parse_pitch,
)


def main() -> None:
    """Print a few worked examples."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("notation.yaml")
    config = load_config(config_path)

    # Example 1: Transposition keeps the spelling
    print("Transposition:")
    for text, interval in [
        ("Eb3", major(IntervalRoot.THIRD).simple()),
        ("G4", perfect(IntervalRoot.FOURTH).compound(1)),
        ("Bb4", minor(IntervalRoot.THIRD).simple()),
        ("B4", IntervalClass.A4.simple()),
    ]:
        pitch = parse_pitch(text)
        result = pitch.transpose(interval)
        print(
            f"  {format_pitch(pitch, config)} + {format_interval(interval, config)}"
            f" = {format_pitch(result, config)}"
        )

    # Example 2: Naming the interval between two pitches
    print("\nIntervals between pitches:")
    for text in ["D4 F5", "C4 G4", "B#3 C4", "Cb4 C#4"]:
        interval = interval_between(text)
        print(f"  {text:<8} {format_interval(interval, config):<6} {describe_interval(interval)}")

    # Example 3: A C major triad stacked from thirds
    print("\nStacked thirds from C4:")
    root = PitchRoot.C.o(4)
    third = root.transpose(IntervalClass.M3)
    fifth = third.transpose(IntervalClass.m3)
    print(f"  {' '.join(format_pitch(p, config) for p in (root, third, fifth))}")
    print(f"  outer interval: {describe_interval(root.interval_to(fifth))}")


if __name__ == "__main__":
    main()
