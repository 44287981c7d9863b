"""
Notation - text rendering and parsing on top of the core types.

The core types render themselves in one fixed style (C♮4, M3, M10).
These functions render according to a NotationConfig, and parse the
text that arrives from users and files.
"""

from __future__ import annotations

import logging
import re

from chuk_solfege.config import DEFAULT_CONFIG, NotationConfig
from chuk_solfege.constants import (
    ASCII_ACCIDENTALS,
    AccidentalStyle,
    ErrorMessages,
)
from chuk_solfege.core.dyad import Dyad
from chuk_solfege.core.interval import Interval, IntervalClass, IntervalQuality
from chuk_solfege.core.pitch import Accidental, Pitch, PitchClass, PitchDyad
from chuk_solfege.errors import NotationParseError

logger = logging.getLogger(__name__)

_DYAD_SEPARATOR_RE = re.compile(r"[\s,]+")

_INTERVAL_NAMES: list[str] = [
    "unison",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "octave",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
]

_MULTIPLIERS: dict[int, str] = {1: "", 2: "doubly ", 3: "triply "}


def format_accidental(accidental: Accidental, config: NotationConfig | None = None) -> str:
    """
    Render an accidental.

    Offsets from -2 to 2 use a single glyph; larger offsets repeat
    the flat or sharp glyph (-3 -> ♭♭♭).
    """
    config = config or DEFAULT_CONFIG
    offset = accidental.offset.value
    if offset == 0 and not config.show_naturals:
        return ""

    if config.accidental_style != AccidentalStyle.ASCII:
        return str(accidental)
    if offset in ASCII_ACCIDENTALS:
        return ASCII_ACCIDENTALS[offset]
    return (ASCII_ACCIDENTALS[1] if offset > 0 else ASCII_ACCIDENTALS[-1]) * abs(offset)


def format_pitch_class(pitch_class: PitchClass, config: NotationConfig | None = None) -> str:
    return f"{pitch_class.root}{format_accidental(pitch_class.accidental, config)}"


def format_pitch(pitch: Pitch, config: NotationConfig | None = None) -> str:
    return f"{format_pitch_class(pitch.pitch_class, config)}{pitch.octave.value}"


def format_interval(
    interval: Interval | IntervalClass, config: NotationConfig | None = None
) -> str:
    """
    Render an interval.

    With compound_numbers (the default) a major third plus an octave is
    'M10'; without, it is 'M3+1oct'.
    """
    config = config or DEFAULT_CONFIG
    if isinstance(interval, IntervalClass):
        return str(interval)
    if config.compound_numbers or interval.octaves.value == 0:
        return str(interval)
    return f"{interval.interval_class}+{interval.octaves.value}oct"


def describe_quality(quality: IntervalQuality) -> str:
    """Long name of a quality: 'major', 'perfect', 'doubly diminished'."""
    abbreviation = str(quality)
    if abbreviation == "P":
        return "perfect"
    if abbreviation == "M":
        return "major"
    if abbreviation == "m":
        return "minor"

    base = "augmented" if abbreviation[0] == "A" else "diminished"
    count = len(abbreviation)
    prefix = _MULTIPLIERS.get(count, f"{count}x ")
    return f"{prefix}{base}"


def describe_interval(interval: Interval | IntervalClass) -> str:
    """
    Long name of an interval.

    Examples:
        M3  -> 'major third'
        m10 -> 'minor tenth'
        P22 -> 'perfect unison + 3 octaves'
    """
    if isinstance(interval, IntervalClass):
        interval = interval.simple()

    index = interval.number - 1
    if index < len(_INTERVAL_NAMES):
        size = _INTERVAL_NAMES[index]
    else:
        size = f"{_INTERVAL_NAMES[interval.root.value]} + {interval.octaves.value} octaves"
    return f"{describe_quality(interval.quality())} {size}"


def parse_pitch(text: str) -> Pitch:
    """Parse a pitch like 'C4' or 'E♭3', logging what could not be parsed."""
    try:
        return Pitch.parse(text)
    except NotationParseError:
        logger.debug(f"Could not parse pitch {text!r}")
        raise


def parse_interval(text: str) -> Interval:
    """Parse an interval like 'M3' or 'm10', logging what could not be parsed."""
    try:
        return Interval.parse(text)
    except NotationParseError:
        logger.debug(f"Could not parse interval {text!r}")
        raise


def parse_pitch_dyad(text: str) -> PitchDyad:
    """
    Parse two pitches separated by whitespace or a comma ('D4 F5', 'C4,G4').

    The order of the pitches in the text does not matter.
    """
    parts = [part for part in _DYAD_SEPARATOR_RE.split(text.strip()) if part]
    if len(parts) != 2:
        logger.debug(f"Expected two pitches in {text!r}, got {len(parts)}")
        raise NotationParseError(ErrorMessages.INVALID_DYAD.format(text=text))
    return Dyad(parse_pitch(parts[0]), parse_pitch(parts[1]))


def interval_between(text: str) -> Interval:
    """The interval spanned by a dyad written as text ('D4 F5' -> m10)."""
    return Interval.from_dyad(parse_pitch_dyad(text))
