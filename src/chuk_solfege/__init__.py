"""
chuk-solfege - exact pitch and interval arithmetic for Western notation.

Answers questions like "what is a major third above E♭4?" or
"what interval lies between D4 and F5?" with correctly spelled results.
"""

from chuk_solfege.core import (
    Accidental,
    Dyad,
    Interval,
    IntervalClass,
    IntervalQuality,
    IntervalRoot,
    Octaves,
    Pitch,
    PitchClass,
    PitchRoot,
    Semitones,
    Steps,
)

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Dyad",
    "Interval",
    "IntervalClass",
    "IntervalQuality",
    "IntervalRoot",
    "Octaves",
    "Pitch",
    "PitchClass",
    "PitchRoot",
    "Semitones",
    "Steps",
]
