"""
Core music primitives - the interval arithmetic engine.

These are the invariants everything else composes on:
- Steps, Semitones, Octaves: the three kinds of vertical distance
- PitchRoot: the seven letter names (C-B)
- Accidental: chromatic alteration of a letter
- PitchClass: letter + accidental, octave-independent
- Pitch: pitch class in an octave
- IntervalRoot: the seven simple interval sizes (unison-seventh)
- IntervalQuality: d / m / M / P / A and multiples
- IntervalClass: simple interval with a quality (M3, P5)
- Interval: interval class plus whole octaves (M10)
- Dyad: an unordered pair, normalized to (low, high)
"""

from chuk_solfege.core.dyad import Dyad
from chuk_solfege.core.interval import (
    Interval,
    IntervalClass,
    IntervalQuality,
    IntervalRoot,
    augmented,
    diminished,
    double_augmented,
    double_diminished,
    major,
    minor,
    perfect,
)
from chuk_solfege.core.pitch import (
    Accidental,
    Pitch,
    PitchClass,
    PitchClassDyad,
    PitchDyad,
    PitchRoot,
    PitchRootDyad,
    pitch_class_dyad,
    pitch_root_dyad,
)
from chuk_solfege.core.vertical import Octaves, Semitones, Steps

__all__ = [
    # Distances
    "Steps",
    "Semitones",
    "Octaves",
    # Pitch
    "PitchRoot",
    "Accidental",
    "PitchClass",
    "Pitch",
    # Interval
    "IntervalRoot",
    "IntervalQuality",
    "IntervalClass",
    "Interval",
    "perfect",
    "major",
    "minor",
    "diminished",
    "double_diminished",
    "augmented",
    "double_augmented",
    # Dyads
    "Dyad",
    "PitchDyad",
    "PitchClassDyad",
    "PitchRootDyad",
    "pitch_class_dyad",
    "pitch_root_dyad",
]
