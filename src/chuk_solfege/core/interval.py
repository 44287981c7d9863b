"""
Interval primitives - IntervalRoot, IntervalQuality, IntervalClass, Interval.

An interval has two sizes that must stay consistent:
- a diatonic size (how many letter names it spans: a third spans 2 steps)
- a chromatic size (how many semitones it spans: a major third is 4)

IntervalRoot is the diatonic size within an octave (unison to seventh).
IntervalClass adds the chromatic size, giving it a quality (M3, P5, d7).
Interval adds whole octaves on top of a class (M10 = M3 + 1 octave).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar, Protocol

from chuk_solfege.constants import (
    NATURAL_SEMITONES,
    PERFECT_STEPS,
    STEPS_PER_OCTAVE,
    ErrorMessages,
    QualityFamily,
)
from chuk_solfege.core.vertical import Octaves, Semitones, Steps
from chuk_solfege.errors import (
    IntervalOrderError,
    InvalidConstructionError,
    NotationParseError,
)

if TYPE_CHECKING:
    from chuk_solfege.core.dyad import Dyad

_INTERVAL_RE = re.compile(r"^(?P<quality>P|M|m|d+|A+)(?P<number>\d+)$")


def wrap_steps(steps: int | Steps) -> int:
    """
    Reduce a step count to a step offset within the octave (0-6).

    Python's % is floored, so negative counts wrap upward: -1 -> 6.
    """
    value = steps.value if isinstance(steps, Steps) else steps
    offset = value % STEPS_PER_OCTAVE
    if not 0 <= offset < STEPS_PER_OCTAVE:
        raise AssertionError(f"Step offset out of range: {offset}")
    return offset


class _Located(Protocol):
    """Anything with a position inside the octave (a pitch class or pitch root)."""

    def steps_from_c(self) -> Steps: ...

    def semitones_from_c(self) -> Semitones: ...


@total_ordering
class IntervalRoot(Enum):
    """
    The seven simple interval sizes, by steps spanned.

    Arithmetic wraps within the octave: SIXTH + FIFTH == THIRD.
    """

    UNISON = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6

    @classmethod
    def from_steps(cls, steps: int | Steps) -> IntervalRoot:
        """Create an interval root from any step count, wrapping at the octave."""
        return _INTERVAL_ROOTS[wrap_steps(steps)]

    @classmethod
    def from_dyad(cls, dyad: Dyad[_Located]) -> IntervalRoot:
        """The diatonic size between the two roots of a dyad."""
        return cls.from_steps(dyad.high.steps_from_c() - dyad.low.steps_from_c())

    @property
    def number(self) -> int:
        """Conventional interval number (unison = 1, fifth = 5)."""
        return self.value + 1

    def in_steps(self) -> Steps:
        return Steps(self.value)

    def in_semitones(self) -> Semitones:
        """Semitones of the major or perfect interval of this size."""
        return Semitones(NATURAL_SEMITONES[self.value])

    def is_perfect(self) -> bool:
        """Unison, fourth and fifth are perfectable; the rest are imperfect."""
        return self.value in PERFECT_STEPS

    def family(self) -> QualityFamily:
        return QualityFamily.PERFECTABLE if self.is_perfect() else QualityFamily.IMPERFECT

    def quality(self) -> IntervalQuality:
        """The unaltered quality of this size: perfect or major."""
        return IntervalQuality(self.family(), Semitones(0))

    def inverted(self) -> IntervalRoot:
        """Invert within the octave: third <-> sixth, unison stays unison."""
        return IntervalRoot.from_steps(Steps(STEPS_PER_OCTAVE) - self.in_steps())

    @classmethod
    def parse(cls, text: str) -> IntervalRoot:
        """Parse an interval number from '1' to '7'."""
        if not text.isdigit() or not 1 <= int(text) <= STEPS_PER_OCTAVE:
            raise NotationParseError(ErrorMessages.UNKNOWN_INTERVAL_ROOT.format(text=text))
        return cls(int(text) - 1)

    def __add__(self, other: IntervalRoot) -> IntervalRoot:
        if not isinstance(other, IntervalRoot):
            return NotImplemented
        return IntervalRoot.from_steps(self.in_steps() + other.in_steps())

    def __sub__(self, other: IntervalRoot) -> IntervalRoot:
        if not isinstance(other, IntervalRoot):
            return NotImplemented
        return IntervalRoot.from_steps(self.in_steps() - other.in_steps())

    def __lt__(self, other: IntervalRoot) -> bool:
        if not isinstance(other, IntervalRoot):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.number)


_INTERVAL_ROOTS: tuple[IntervalRoot, ...] = tuple(IntervalRoot)


@dataclass(frozen=True)
class IntervalQuality:
    """
    The quality of an interval: its chromatic offset from perfect or major.

    Perfectable family: ... dd(-2) d(-1) P(0) A(1) AA(2) ...
    Imperfect family:   ... dd(-3) d(-2) m(-1) M(0) A(1) AA(2) ...
    """

    family: QualityFamily
    offset: Semitones

    @classmethod
    def perfectable(cls, offset: int) -> IntervalQuality:
        return cls(QualityFamily.PERFECTABLE, Semitones(offset))

    @classmethod
    def imperfect(cls, offset: int) -> IntervalQuality:
        return cls(QualityFamily.IMPERFECT, Semitones(offset))

    def is_perfect(self) -> bool:
        return self.family == QualityFamily.PERFECTABLE and self.offset.value == 0

    @classmethod
    def parse(cls, text: str, family: QualityFamily) -> IntervalQuality:
        """
        Parse a quality abbreviation for the given family.

        Args:
            text: One of 'P', 'M', 'm', or a run of 'd' or 'A'
            family: Which family the interval root belongs to

        Returns:
            The parsed quality

        Raises:
            NotationParseError: If the abbreviation is unknown or does not
                fit the family ('P' on a third, 'M' on a fifth)
        """
        offset: int | None = None
        if text and set(text) == {"A"}:
            offset = len(text)
        elif text and set(text) == {"d"}:
            if family == QualityFamily.PERFECTABLE:
                offset = -len(text)
            else:
                offset = -len(text) - 1
        elif text == "P" and family == QualityFamily.PERFECTABLE:
            offset = 0
        elif text == "M" and family == QualityFamily.IMPERFECT:
            offset = 0
        elif text == "m" and family == QualityFamily.IMPERFECT:
            offset = -1

        if offset is None:
            raise NotationParseError(
                ErrorMessages.INVALID_QUALITY.format(family=family.value, text=text)
            )
        return cls(family, Semitones(offset))

    def __str__(self) -> str:
        offset = self.offset.value
        if offset > 0:
            return "A" * offset

        if self.family == QualityFamily.PERFECTABLE:
            return "P" if offset == 0 else "d" * -offset

        if offset == 0:
            return "M"
        if offset == -1:
            return "m"
        return "d" * (-offset - 1)


@dataclass(frozen=True, order=True)
class IntervalClass:
    """
    A simple interval: a diatonic size plus its absolute chromatic size.

    `semitones` is the full chromatic distance (a major third is 4),
    not an offset from the natural size. The quality is derived from it.

    Ordered by (root, semitones). Immutable and hashable.
    """

    root: IntervalRoot
    semitones: Semitones

    # Named interval classes (defined after class)
    P1: ClassVar[IntervalClass]
    m2: ClassVar[IntervalClass]
    M2: ClassVar[IntervalClass]
    m3: ClassVar[IntervalClass]
    M3: ClassVar[IntervalClass]
    P4: ClassVar[IntervalClass]
    A4: ClassVar[IntervalClass]
    d5: ClassVar[IntervalClass]
    P5: ClassVar[IntervalClass]
    m6: ClassVar[IntervalClass]
    M6: ClassVar[IntervalClass]
    m7: ClassVar[IntervalClass]
    M7: ClassVar[IntervalClass]

    @classmethod
    def between(cls, low: _Located, high: _Located) -> IntervalClass:
        """
        The ascending interval class from one pitch class to another.

        If `high` sits on an earlier letter than `low` (B♯ up to C),
        the distance wraps through the next octave.
        """
        steps = high.steps_from_c() - low.steps_from_c()
        semitones = high.semitones_from_c() - low.semitones_from_c()
        if steps.value < 0:
            semitones = semitones + Octaves(1).in_semitones()
        return cls(IntervalRoot.from_steps(steps), semitones)

    @classmethod
    def from_dyad(cls, dyad: Dyad[_Located]) -> IntervalClass:
        """The interval class from the low to the high end of a pitch-class dyad."""
        return cls.between(dyad.low, dyad.high)

    def in_steps(self) -> Steps:
        return self.root.in_steps()

    def in_semitones(self) -> Semitones:
        return self.semitones

    def is_perfect(self) -> bool:
        return self.root.is_perfect() and self.semitones == self.root.in_semitones()

    def quality(self) -> IntervalQuality:
        """Classify this interval as d/m/M/P/A (and multiples)."""
        return IntervalQuality(self.root.family(), self.semitones - self.root.in_semitones())

    def inverted(self) -> IntervalClass:
        """
        Invert within the octave.

        M3 -> m6, P5 -> P4, A1 -> d1 (a unison keeps its root and
        negates its semitones).
        """
        if self.root == IntervalRoot.UNISON:
            return IntervalClass(IntervalRoot.UNISON, -self.semitones)
        return IntervalClass(self.root.inverted(), Octaves(1).in_semitones() - self.semitones)

    def simple(self) -> Interval:
        """This class as an interval smaller than an octave."""
        return self.compound(0)

    def compound(self, octaves: int) -> Interval:
        """This class widened by a number of octaves."""
        return Interval(self, Octaves(octaves))

    def __add__(self, other: IntervalClass) -> IntervalClass:
        """
        Stack two interval classes, wrapping at the octave.

        M6 + P5 spans 9 steps and 16 semitones; one octave is carried
        away, leaving M3.
        """
        if not isinstance(other, IntervalClass):
            return NotImplemented
        carried = (self.in_steps() + other.in_steps()).in_octaves()
        return IntervalClass(
            self.root + other.root,
            self.semitones + other.semitones - carried.in_semitones(),
        )

    def __sub__(self, other: IntervalClass) -> IntervalClass:
        """Difference of two interval classes; a negative result is inverted."""
        if not isinstance(other, IntervalClass):
            return NotImplemented
        if self < other:
            return (other - self).inverted()
        return IntervalClass(self.root - other.root, self.semitones - other.semitones)

    @classmethod
    def parse(cls, text: str) -> IntervalClass:
        """Parse a simple interval like 'M3', 'P5', 'dd7' or 'A1'."""
        interval = Interval.parse(text)
        if interval.octaves.value != 0:
            raise NotationParseError(ErrorMessages.INVALID_INTERVAL.format(text=text))
        return interval.interval_class

    def __str__(self) -> str:
        return f"{self.quality()}{self.root}"

    def __repr__(self) -> str:
        return f"IntervalClass({self.root}, {self.semitones!r})"


@total_ordering
@dataclass(frozen=True)
class Interval:
    """
    An interval class plus a number of whole octaves.

    Never negative: subtracting a larger interval raises IntervalOrderError.
    Ordered by total size, so M3 < M10 and m3 < M3.
    """

    interval_class: IntervalClass
    octaves: Octaves = Octaves(0)

    @classmethod
    def from_dyad(cls, dyad: Dyad[_Pitched]) -> Interval:
        """
        The interval between the two pitches of a dyad.

        C4/C4 is a perfect unison, C♭4/C♯4 a doubly augmented unison,
        D4/F5 a minor tenth.
        """
        steps = dyad.high.steps_from_c0() - dyad.low.steps_from_c0()
        semitones = dyad.high.semitones_from_c0() - dyad.low.semitones_from_c0()
        octaves = steps.in_octaves()
        interval_class = IntervalClass(
            IntervalRoot.from_steps(steps),
            semitones - octaves.in_semitones(),
        )
        return cls(interval_class, octaves)

    @property
    def root(self) -> IntervalRoot:
        return self.interval_class.root

    @property
    def number(self) -> int:
        """Compound interval number (M10 -> 10, P8 -> 8)."""
        return self.in_steps().value + 1

    def in_steps(self) -> Steps:
        return self.interval_class.in_steps() + self.octaves.in_steps()

    def in_semitones(self) -> Semitones:
        return self.interval_class.in_semitones() + self.octaves.in_semitones()

    def is_perfect(self) -> bool:
        return self.interval_class.is_perfect()

    def quality(self) -> IntervalQuality:
        return self.interval_class.quality()

    def _size(self) -> tuple[Steps, Semitones]:
        return (self.in_steps(), self.in_semitones())

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        octaves = (self.in_steps() + other.in_steps()).in_octaves()
        return Interval(self.interval_class + other.interval_class, octaves)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        if self < other:
            raise IntervalOrderError(
                ErrorMessages.INTERVAL_UNDERFLOW.format(left=self, right=other)
            )
        octaves = (self.in_steps() - other.in_steps()).in_octaves()
        return Interval(self.interval_class - other.interval_class, octaves)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._size() < other._size()

    @classmethod
    def parse(cls, text: str) -> Interval:
        """
        Parse an interval like 'M3', 'P8', 'm10' or 'AA4'.

        Raises:
            NotationParseError: If the text is not quality + number, or the
                quality does not fit the size (e.g. 'P3')
        """
        match = _INTERVAL_RE.match(text.strip())
        if not match or int(match.group("number")) < 1:
            raise NotationParseError(ErrorMessages.INVALID_INTERVAL.format(text=text))

        steps = int(match.group("number")) - 1
        root = IntervalRoot.from_steps(steps)
        quality = IntervalQuality.parse(match.group("quality"), root.family())
        interval_class = IntervalClass(root, root.in_semitones() + quality.offset)
        return cls(interval_class, Octaves(steps // STEPS_PER_OCTAVE))

    def __str__(self) -> str:
        return f"{self.quality()}{self.number}"

    def __repr__(self) -> str:
        if self.octaves.value == 0:
            return f"Interval({self.interval_class})"
        return f"Interval({self.interval_class}, octaves={self.octaves.value})"


class _Pitched(Protocol):
    """Anything with an absolute position from C0 (a pitch)."""

    def steps_from_c0(self) -> Steps: ...

    def semitones_from_c0(self) -> Semitones: ...


def perfect(root: IntervalRoot) -> IntervalClass:
    """Create a perfect interval class (unison, fourth or fifth only)."""
    if not root.is_perfect():
        raise InvalidConstructionError(
            ErrorMessages.NOT_PERFECTABLE.format(quality="perfect", root=root.name.lower())
        )
    return IntervalClass(root, root.in_semitones())


def major(root: IntervalRoot) -> IntervalClass:
    """Create a major interval class (second, third, sixth or seventh only)."""
    if root.is_perfect():
        raise InvalidConstructionError(
            ErrorMessages.NOT_IMPERFECT.format(quality="major", root=root.name.lower())
        )
    return IntervalClass(root, root.in_semitones())


def minor(root: IntervalRoot) -> IntervalClass:
    """Create a minor interval class (second, third, sixth or seventh only)."""
    if root.is_perfect():
        raise InvalidConstructionError(
            ErrorMessages.NOT_IMPERFECT.format(quality="minor", root=root.name.lower())
        )
    return IntervalClass(root, root.in_semitones() - Semitones(1))


def diminished(root: IntervalRoot) -> IntervalClass:
    offset = Semitones(1) if root.is_perfect() else Semitones(2)
    return IntervalClass(root, root.in_semitones() - offset)


def double_diminished(root: IntervalRoot) -> IntervalClass:
    offset = Semitones(2) if root.is_perfect() else Semitones(3)
    return IntervalClass(root, root.in_semitones() - offset)


def augmented(root: IntervalRoot) -> IntervalClass:
    return IntervalClass(root, root.in_semitones() + Semitones(1))


def double_augmented(root: IntervalRoot) -> IntervalClass:
    return IntervalClass(root, root.in_semitones() + Semitones(2))


# Named interval classes
IntervalClass.P1 = perfect(IntervalRoot.UNISON)
IntervalClass.m2 = minor(IntervalRoot.SECOND)
IntervalClass.M2 = major(IntervalRoot.SECOND)
IntervalClass.m3 = minor(IntervalRoot.THIRD)
IntervalClass.M3 = major(IntervalRoot.THIRD)
IntervalClass.P4 = perfect(IntervalRoot.FOURTH)
IntervalClass.A4 = augmented(IntervalRoot.FOURTH)
IntervalClass.d5 = diminished(IntervalRoot.FIFTH)
IntervalClass.P5 = perfect(IntervalRoot.FIFTH)
IntervalClass.m6 = minor(IntervalRoot.SIXTH)
IntervalClass.M6 = major(IntervalRoot.SIXTH)
IntervalClass.m7 = minor(IntervalRoot.SEVENTH)
IntervalClass.M7 = major(IntervalRoot.SEVENTH)
