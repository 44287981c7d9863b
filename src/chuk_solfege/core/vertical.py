"""
Vertical distance primitives - Steps, Semitones, Octaves.

Three explicit distance types that are never mixed in a single field:
- Steps count diatonic letter names (C -> D is one step)
- Semitones count chromatic half-steps
- Octaves count whole octaves (1 octave = 7 steps = 12 semitones)

Converting a distance to octaves truncates toward zero, so Steps(-8)
is -1 octave, not -2. Callers that need to locate a position within an
octave use floor division themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_solfege.constants import SEMITONES_PER_OCTAVE, STEPS_PER_OCTAVE


def _truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // divisor
    return quotient if dividend >= 0 else -quotient


@dataclass(frozen=True, order=True)
class Steps:
    """
    A signed distance in diatonic steps.

    Immutable and hashable.
    """

    value: int

    def in_octaves(self) -> Octaves:
        """Whole octaves in this distance (truncated toward zero)."""
        return Octaves(_truncating_div(self.value, STEPS_PER_OCTAVE))

    def __add__(self, other: Steps) -> Steps:
        if not isinstance(other, Steps):
            return NotImplemented
        return Steps(self.value + other.value)

    def __sub__(self, other: Steps) -> Steps:
        if not isinstance(other, Steps):
            return NotImplemented
        return Steps(self.value - other.value)

    def __neg__(self) -> Steps:
        return Steps(-self.value)

    def __repr__(self) -> str:
        return f"Steps({self.value})"


@dataclass(frozen=True, order=True)
class Semitones:
    """
    A signed distance in chromatic semitones.

    Immutable and hashable.
    """

    value: int

    def in_octaves(self) -> Octaves:
        """Whole octaves in this distance (truncated toward zero)."""
        return Octaves(_truncating_div(self.value, SEMITONES_PER_OCTAVE))

    def __add__(self, other: Semitones) -> Semitones:
        if not isinstance(other, Semitones):
            return NotImplemented
        return Semitones(self.value + other.value)

    def __sub__(self, other: Semitones) -> Semitones:
        if not isinstance(other, Semitones):
            return NotImplemented
        return Semitones(self.value - other.value)

    def __neg__(self) -> Semitones:
        return Semitones(-self.value)

    def __repr__(self) -> str:
        return f"Semitones({self.value})"


@dataclass(frozen=True, order=True)
class Octaves:
    """
    A signed distance in whole octaves.

    Converts exactly to Steps (x7) and Semitones (x12).
    """

    value: int

    def in_steps(self) -> Steps:
        return Steps(self.value * STEPS_PER_OCTAVE)

    def in_semitones(self) -> Semitones:
        return Semitones(self.value * SEMITONES_PER_OCTAVE)

    def __add__(self, other: Octaves) -> Octaves:
        if not isinstance(other, Octaves):
            return NotImplemented
        return Octaves(self.value + other.value)

    def __sub__(self, other: Octaves) -> Octaves:
        if not isinstance(other, Octaves):
            return NotImplemented
        return Octaves(self.value - other.value)

    def __neg__(self) -> Octaves:
        return Octaves(-self.value)

    def __repr__(self) -> str:
        return f"Octaves({self.value})"
