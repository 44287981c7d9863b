"""
Constants and enums for the notation layer.

No magic strings - glyph tables and error messages live here.
"""

from enum import Enum


class AccidentalStyle(str, Enum):
    """How accidentals are rendered as text."""

    UNICODE = "unicode"  # ♭ ♮ ♯ 𝄫 𝄪
    ASCII = "ascii"  # b n # bb x


class QualityFamily(str, Enum):
    """
    The two families of interval quality.

    Unison, fourth and fifth are perfectable (d, P, A).
    Second, third, sixth and seventh are imperfect (d, m, M, A).
    """

    PERFECTABLE = "perfectable"
    IMPERFECT = "imperfect"


# Single-glyph accidentals by semitone offset
UNICODE_ACCIDENTALS: dict[int, str] = {
    -2: "\U0001d12b",  # 𝄫
    -1: "♭",
    0: "♮",
    1: "♯",
    2: "\U0001d12a",  # 𝄪
}

ASCII_ACCIDENTALS: dict[int, str] = {
    -2: "bb",
    -1: "b",
    0: "n",
    1: "#",
    2: "x",
}

# Every character the accidental parser recognizes, with its semitone value
ACCIDENTAL_GLYPH_VALUES: dict[str, int] = {
    "\U0001d12b": -2,
    "♭": -1,
    "♮": 0,
    "♯": 1,
    "\U0001d12a": 2,
    "b": -1,
    "n": 0,
    "#": 1,
    "x": 2,
}

PITCH_ROOT_LETTERS: str = "CDEFGAB"

# Natural semitone value of each diatonic step above C (and above a unison)
NATURAL_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Roots whose quality family is perfectable, by step offset
PERFECT_STEPS: frozenset[int] = frozenset({0, 3, 4})

STEPS_PER_OCTAVE = 7
SEMITONES_PER_OCTAVE = 12

# MIDI number of C0 (C4 = 60)
MIDI_C0 = 12


class ErrorMessages:
    """Standardized error messages."""

    NOT_PERFECTABLE = "Cannot build a {quality} interval on a {root}: root is not perfectable."
    NOT_IMPERFECT = "Cannot build a {quality} interval on a {root}: root is perfectable."
    INTERVAL_UNDERFLOW = "Cannot subtract {right} from {left}: the result would be negative."
    UNKNOWN_ACCIDENTAL = "Unknown accidental glyph {glyph!r} in {text!r}."
    UNKNOWN_ROOT = "Unknown pitch root: {text!r}."
    UNKNOWN_INTERVAL_ROOT = "Unknown interval size: {text!r}."
    INVALID_PITCH_CLASS = "Invalid pitch class: {text!r}."
    INVALID_PITCH = "Invalid pitch: {text!r}. Expected a form like 'C#4' or 'E♭3'."
    INVALID_QUALITY = "Invalid {family} quality: {text!r}."
    INVALID_INTERVAL = "Invalid interval: {text!r}. Expected a form like 'M3' or 'P12'."
    INVALID_DYAD = "Invalid dyad: {text!r}. Expected two pitches like 'D4 F5'."
