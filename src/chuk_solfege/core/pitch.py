"""
Pitch primitives - PitchRoot, Accidental, PitchClass, Pitch.

Pitches are spelled, not just numbered: C♯4 and D♭4 share a key on the
piano but are different pitches here, because they sit on different
letter names. That keeps interval arithmetic exact (C -> E♭ is a minor
third, C -> D♯ an augmented second).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import ClassVar, TypeAlias

from chuk_solfege.constants import (
    ACCIDENTAL_GLYPH_VALUES,
    MIDI_C0,
    NATURAL_SEMITONES,
    PITCH_ROOT_LETTERS,
    STEPS_PER_OCTAVE,
    UNICODE_ACCIDENTALS,
    ErrorMessages,
)
from chuk_solfege.core.dyad import Dyad
from chuk_solfege.core.interval import Interval, IntervalClass, IntervalRoot, wrap_steps
from chuk_solfege.core.vertical import Octaves, Semitones, Steps
from chuk_solfege.errors import NotationParseError

_PITCH_RE = re.compile(r"^(?P<pitch_class>\D+?)(?P<octave>-?\d+)$")


@total_ordering
class PitchRoot(Enum):
    """
    The seven letter names, C to B.

    The value is the number of steps above C. Transposition wraps:
    B up two steps is D.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @classmethod
    def from_steps(cls, steps: int | Steps) -> PitchRoot:
        """Create a root from any number of steps above C, wrapping at the octave."""
        return _PITCH_ROOTS[wrap_steps(steps)]

    def steps_from_c(self) -> Steps:
        return Steps(self.value)

    def semitones_from_c(self) -> Semitones:
        """Semitones above C of the natural pitch on this letter."""
        return Semitones(NATURAL_SEMITONES[self.value])

    def transpose(self, delta: Steps | IntervalRoot) -> PitchRoot:
        """Move up (or down) by a number of steps or an interval root."""
        if isinstance(delta, IntervalRoot):
            delta = delta.in_steps()
        return PitchRoot.from_steps(self.steps_from_c() + delta)

    def with_accidental(self, accidental: Accidental) -> PitchClass:
        return PitchClass(self, accidental)

    def double_flat(self) -> PitchClass:
        return PitchClass(self, Accidental.DOUBLE_FLAT)

    def flat(self) -> PitchClass:
        return PitchClass(self, Accidental.FLAT)

    def natural(self) -> PitchClass:
        return PitchClass(self, Accidental.NATURAL)

    def sharp(self) -> PitchClass:
        return PitchClass(self, Accidental.SHARP)

    def double_sharp(self) -> PitchClass:
        return PitchClass(self, Accidental.DOUBLE_SHARP)

    def o(self, octave: int) -> Pitch:
        """The natural pitch on this letter in the given octave (C.o(4) = C♮4)."""
        return self.natural().o(octave)

    @classmethod
    def parse(cls, text: str) -> PitchRoot:
        """Parse an upper-case letter name."""
        if len(text) != 1 or text not in PITCH_ROOT_LETTERS:
            raise NotationParseError(ErrorMessages.UNKNOWN_ROOT.format(text=text))
        return cls.from_steps(PITCH_ROOT_LETTERS.index(text))

    def __lt__(self, other: PitchRoot) -> bool:
        if not isinstance(other, PitchRoot):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.name


_PITCH_ROOTS: tuple[PitchRoot, ...] = tuple(PitchRoot)


@dataclass(frozen=True, order=True)
class Accidental:
    """
    A chromatic alteration of a letter name, in semitones.

    Any offset is allowed: -1 is a flat, 2 a double sharp, -3 a triple flat.
    """

    offset: Semitones

    # Common accidentals (defined after class)
    DOUBLE_FLAT: ClassVar[Accidental]
    FLAT: ClassVar[Accidental]
    NATURAL: ClassVar[Accidental]
    SHARP: ClassVar[Accidental]
    DOUBLE_SHARP: ClassVar[Accidental]

    def transpose(self, delta: Semitones) -> Accidental:
        return Accidental(self.offset + delta)

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """
        Parse accidental glyphs by summing their values.

        Accepts Unicode (♭ ♮ ♯ 𝄫 𝄪) and ASCII (b n # x) glyphs.
        An empty string is a natural.

        Raises:
            NotationParseError: On any unrecognized character
        """
        offset = 0
        for glyph in text:
            if glyph not in ACCIDENTAL_GLYPH_VALUES:
                raise NotationParseError(
                    ErrorMessages.UNKNOWN_ACCIDENTAL.format(glyph=glyph, text=text)
                )
            offset += ACCIDENTAL_GLYPH_VALUES[glyph]
        return cls(Semitones(offset))

    def __str__(self) -> str:
        offset = self.offset.value
        if offset in UNICODE_ACCIDENTALS:
            return UNICODE_ACCIDENTALS[offset]
        glyph = UNICODE_ACCIDENTALS[1] if offset > 0 else UNICODE_ACCIDENTALS[-1]
        return glyph * abs(offset)

    def __repr__(self) -> str:
        return f"Accidental({self.offset.value})"


Accidental.DOUBLE_FLAT = Accidental(Semitones(-2))
Accidental.FLAT = Accidental(Semitones(-1))
Accidental.NATURAL = Accidental(Semitones(0))
Accidental.SHARP = Accidental(Semitones(1))
Accidental.DOUBLE_SHARP = Accidental(Semitones(2))


@dataclass(frozen=True, order=True)
class PitchClass:
    """
    A letter name with an accidental, independent of octave.

    Ordered by (root, accidental), so C♭ < C♮ < C♯ < D♭ and E♯ < F♭.
    Immutable and hashable.
    """

    root: PitchRoot
    accidental: Accidental = Accidental.NATURAL

    def steps_from_c(self) -> Steps:
        return self.root.steps_from_c()

    def semitones_from_c(self) -> Semitones:
        """Chromatic position above C. C♭ is -1, B♯ is 12."""
        return self.root.semitones_from_c() + self.accidental.offset

    def transpose(self, delta: Steps | Semitones | IntervalClass) -> PitchClass:
        """
        Transpose by steps (letter changes, accidental kept), semitones
        (accidental changes, letter kept), or an interval class (both).

        Examples:
            D♭ + M3 = F♮
            B♭ + m3 = D♭
        """
        if isinstance(delta, Steps):
            return PitchClass(self.root.transpose(delta), self.accidental)
        if isinstance(delta, Semitones):
            return PitchClass(self.root, self.accidental.transpose(delta))
        if isinstance(delta, IntervalClass):
            return self._transpose_by_class(delta)
        raise TypeError(f"Cannot transpose a pitch class by {type(delta).__name__}")

    def _transpose_by_class(self, delta: IntervalClass) -> PitchClass:
        new_root = self.root.transpose(delta.root)
        between_roots = new_root.semitones_from_c() - self.root.semitones_from_c()

        # Wrapped past B: the new letter is in the next octave
        if new_root < self.root:
            between_roots = between_roots + Octaves(1).in_semitones()

        accidental = Accidental(self.accidental.offset + delta.semitones - between_roots)
        return PitchClass(new_root, accidental)

    def interval_to(self, other: PitchClass) -> IntervalClass:
        """Get the ascending interval class from this pitch class to another."""
        return IntervalClass.between(self, other)

    def o(self, octave: int) -> Pitch:
        """Place this pitch class in an octave (C4 = middle C)."""
        return Pitch(self, Octaves(octave))

    @classmethod
    def parse(cls, text: str) -> PitchClass:
        """Parse a pitch class like 'C', 'F#', 'E♭' or 'Bbb'."""
        text = text.strip()
        if not text:
            raise NotationParseError(ErrorMessages.INVALID_PITCH_CLASS.format(text=text))
        return cls(PitchRoot.parse(text[0]), Accidental.parse(text[1:]))

    def __str__(self) -> str:
        return f"{self.root}{self.accidental}"

    def __repr__(self) -> str:
        return f"PitchClass({self})"


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """
    A pitch class in a specific octave.

    Octaves follow scientific pitch notation: C4 is middle C, and
    B♯3 sounds like C4 but is still written in octave 3.

    Ordered by position on the staff, then by accidental.
    Immutable and hashable.
    """

    pitch_class: PitchClass
    octave: Octaves

    @property
    def root(self) -> PitchRoot:
        return self.pitch_class.root

    @property
    def accidental(self) -> Accidental:
        return self.pitch_class.accidental

    def steps_from_c0(self) -> Steps:
        return self.octave.in_steps() + self.pitch_class.steps_from_c()

    def semitones_from_c0(self) -> Semitones:
        return self.octave.in_semitones() + self.pitch_class.semitones_from_c()

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.semitones_from_c0().value + MIDI_C0

    def transpose(self, delta: Interval | IntervalClass | Steps | Semitones) -> Pitch:
        """
        Transpose upward by an interval, or by a raw step or semitone delta.

        Examples:
            E♭3 + M3 = G♮3
            G4 + P4 = C5 (wraps past B into the next octave)
            G4 + P11 = C6
        """
        if isinstance(delta, IntervalClass):
            delta = delta.simple()
        if isinstance(delta, Interval):
            return self._transpose_by_interval(delta)
        if isinstance(delta, Steps):
            steps = self.steps_from_c0() + delta
            octave, offset = divmod(steps.value, STEPS_PER_OCTAVE)
            return Pitch(
                PitchClass(PitchRoot.from_steps(offset), self.accidental),
                Octaves(octave),
            )
        if isinstance(delta, Semitones):
            return Pitch(self.pitch_class.transpose(delta), self.octave)
        raise TypeError(f"Cannot transpose a pitch by {type(delta).__name__}")

    def _transpose_by_interval(self, delta: Interval) -> Pitch:
        pitch_class = self.pitch_class.transpose(delta.interval_class)
        octave = self.octave + delta.octaves

        # The letter wrapped past B, so the octave number goes up one more
        if pitch_class.root < self.root:
            octave = octave + Octaves(1)

        return Pitch(pitch_class, octave)

    def interval_to(self, other: Pitch) -> Interval:
        """Get the (unsigned) interval between this pitch and another."""
        return Interval.from_dyad(Dyad(self, other))

    def _position(self) -> tuple[Steps, Semitones]:
        return (self.steps_from_c0(), self.semitones_from_c0())

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._position() < other._position()

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch like 'C4', 'F#3', 'E♭5' or 'Bb-1'.

        Raises:
            NotationParseError: If there is no octave number, or the pitch
                class part is not a letter followed by accidental glyphs
        """
        match = _PITCH_RE.match(text.strip())
        if not match:
            raise NotationParseError(ErrorMessages.INVALID_PITCH.format(text=text))
        pitch_class = PitchClass.parse(match.group("pitch_class"))
        return cls(pitch_class, Octaves(int(match.group("octave"))))

    def __str__(self) -> str:
        return f"{self.pitch_class}{self.octave.value}"

    def __repr__(self) -> str:
        return f"Pitch({self})"


PitchDyad: TypeAlias = Dyad[Pitch]
PitchClassDyad: TypeAlias = Dyad[PitchClass]
PitchRootDyad: TypeAlias = Dyad[PitchRoot]


def pitch_class_dyad(dyad: PitchDyad) -> PitchClassDyad:
    """Drop the octaves of a pitch dyad, keeping which end is low."""
    return dyad.map(lambda pitch: pitch.pitch_class)


def pitch_root_dyad(dyad: PitchDyad | PitchClassDyad) -> PitchRootDyad:
    """Drop accidentals (and octaves) from a dyad, keeping which end is low."""
    return dyad.map(lambda value: value.root)

