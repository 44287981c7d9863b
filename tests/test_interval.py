"""
Tests for interval primitives.

Tests cover:
- IntervalRoot arithmetic, wrapping and inversion
- IntervalQuality abbreviations
- Named constructors (perfect, major, minor, ...)
- IntervalClass arithmetic and inversion
- Interval (compound) arithmetic, ordering and derivation from dyads
"""

import pytest

from chuk_solfege.constants import QualityFamily
from chuk_solfege.core import (
    Dyad,
    Interval,
    IntervalClass,
    IntervalQuality,
    IntervalRoot,
    Octaves,
    PitchRoot,
    Semitones,
    Steps,
    augmented,
    diminished,
    double_augmented,
    double_diminished,
    major,
    minor,
    perfect,
)
from chuk_solfege.errors import (
    IntervalOrderError,
    InvalidConstructionError,
    NotationParseError,
)

UNISON = IntervalRoot.UNISON
SECOND = IntervalRoot.SECOND
THIRD = IntervalRoot.THIRD
FOURTH = IntervalRoot.FOURTH
FIFTH = IntervalRoot.FIFTH
SIXTH = IntervalRoot.SIXTH
SEVENTH = IntervalRoot.SEVENTH

C, D, E, F, G, A, B = PitchRoot


class TestIntervalRoot:
    """Tests for IntervalRoot enum."""

    def test_from_steps(self) -> None:
        """Roots are created from step counts, wrapping at the octave."""
        assert IntervalRoot.from_steps(0) == UNISON
        assert IntervalRoot.from_steps(Steps(4)) == FIFTH
        assert IntervalRoot.from_steps(-1) == SEVENTH
        assert IntervalRoot.from_steps(8) == SECOND

    @pytest.mark.parametrize("n", range(-21, 22))
    def test_from_steps_periodic(self, n: int) -> None:
        """Adding an octave of steps gives the same root."""
        assert IntervalRoot.from_steps(n) == IntervalRoot.from_steps(n + 7)

    def test_addition(self) -> None:
        """Roots add as letter-name distances."""
        assert UNISON + UNISON == UNISON
        assert UNISON + THIRD == THIRD
        assert THIRD + FOURTH == SIXTH

    def test_wrapping_addition(self) -> None:
        """Addition wraps past the seventh."""
        assert SIXTH + FIFTH == THIRD

    def test_subtraction(self) -> None:
        """Roots subtract as letter-name distances."""
        assert UNISON - UNISON == UNISON
        assert THIRD - UNISON == THIRD
        assert THIRD - THIRD == UNISON
        assert FIFTH - THIRD == THIRD

    def test_wrapping_subtraction(self) -> None:
        """Subtraction wraps below the unison."""
        assert UNISON - SECOND == SEVENTH
        assert THIRD - FIFTH == SIXTH

    def test_inversion(self) -> None:
        """Inversion pairs sizes that add up to an octave."""
        assert UNISON.inverted() == UNISON
        assert THIRD.inverted() == SIXTH
        assert SECOND.inverted() == SEVENTH
        assert FOURTH.inverted() == FIFTH

    def test_is_perfect(self) -> None:
        """Unison, fourth and fifth are perfectable."""
        assert [root for root in IntervalRoot if root.is_perfect()] == [UNISON, FOURTH, FIFTH]

    def test_natural_semitones(self) -> None:
        """Each root has the size of its major or perfect interval."""
        assert [root.in_semitones().value for root in IntervalRoot] == [0, 2, 4, 5, 7, 9, 11]

    def test_quality(self) -> None:
        """The unaltered quality is perfect or major."""
        assert FIFTH.quality() == IntervalQuality.perfectable(0)
        assert THIRD.quality() == IntervalQuality.imperfect(0)

    def test_from_dyad(self) -> None:
        """The size between the roots of a dyad."""
        assert IntervalRoot.from_dyad(Dyad(D, F)) == THIRD
        assert IntervalRoot.from_dyad(Dyad(G, C)) == FIFTH
        assert IntervalRoot.from_dyad(Dyad(B, D)) == SIXTH

    def test_ordering(self) -> None:
        """Roots are ordered by size."""
        assert UNISON < SECOND < SEVENTH
        assert max(IntervalRoot) == SEVENTH

    def test_display(self) -> None:
        """Roots render as their interval number."""
        assert str(UNISON) == "1"
        assert str(THIRD) == "3"

    def test_parse(self) -> None:
        """Parse interval numbers 1-7."""
        assert IntervalRoot.parse("3") == THIRD
        assert IntervalRoot.parse("7") == SEVENTH
        with pytest.raises(NotationParseError):
            IntervalRoot.parse("8")
        with pytest.raises(NotationParseError):
            IntervalRoot.parse("x")


class TestIntervalQuality:
    """Tests for IntervalQuality abbreviations."""

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(-3, "ddd"), (-2, "dd"), (-1, "d"), (0, "P"), (1, "A"), (2, "AA")],
    )
    def test_perfectable_display(self, offset: int, expected: str) -> None:
        """Perfectable qualities run d, P, A."""
        assert str(IntervalQuality.perfectable(offset)) == expected

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(-4, "ddd"), (-3, "dd"), (-2, "d"), (-1, "m"), (0, "M"), (1, "A"), (2, "AA")],
    )
    def test_imperfect_display(self, offset: int, expected: str) -> None:
        """Imperfect qualities run d, m, M, A."""
        assert str(IntervalQuality.imperfect(offset)) == expected

    @pytest.mark.parametrize("offset", range(-4, 4))
    def test_parse_inverts_display(self, offset: int) -> None:
        """Parsing a rendered quality gives it back, in both families."""
        for family in QualityFamily:
            quality = IntervalQuality(family, Semitones(offset))
            assert IntervalQuality.parse(str(quality), family) == quality

    def test_parse_wrong_family(self) -> None:
        """Perfect thirds and major fifths do not exist."""
        with pytest.raises(NotationParseError, match="Invalid imperfect quality"):
            IntervalQuality.parse("P", QualityFamily.IMPERFECT)
        with pytest.raises(NotationParseError):
            IntervalQuality.parse("M", QualityFamily.PERFECTABLE)
        with pytest.raises(NotationParseError):
            IntervalQuality.parse("dA", QualityFamily.PERFECTABLE)

    def test_is_perfect(self) -> None:
        """Only an unaltered perfectable quality is perfect."""
        assert IntervalQuality.perfectable(0).is_perfect()
        assert not IntervalQuality.perfectable(1).is_perfect()
        assert not IntervalQuality.imperfect(0).is_perfect()


class TestNamedConstructors:
    """Tests for perfect, major, minor, diminished and augmented."""

    def test_perfect(self) -> None:
        """Perfect intervals have their natural size."""
        assert perfect(UNISON) == IntervalClass(UNISON, Semitones(0))
        assert perfect(FOURTH) == IntervalClass(FOURTH, Semitones(5))
        assert perfect(FIFTH) == IntervalClass(FIFTH, Semitones(7))

    @pytest.mark.parametrize("root", [SECOND, THIRD, SIXTH, SEVENTH])
    def test_perfect_rejects_imperfect_roots(self, root: IntervalRoot) -> None:
        """There is no perfect third."""
        with pytest.raises(InvalidConstructionError, match="not perfectable"):
            perfect(root)

    def test_minor(self) -> None:
        """Minor intervals are a semitone below major."""
        assert minor(SECOND) == IntervalClass(SECOND, Semitones(1))
        assert minor(THIRD) == IntervalClass(THIRD, Semitones(3))
        assert minor(SIXTH) == IntervalClass(SIXTH, Semitones(8))
        assert minor(SEVENTH) == IntervalClass(SEVENTH, Semitones(10))

    @pytest.mark.parametrize("root", [UNISON, FOURTH, FIFTH])
    def test_minor_rejects_perfect_roots(self, root: IntervalRoot) -> None:
        """There is no minor fifth."""
        with pytest.raises(InvalidConstructionError):
            minor(root)

    def test_major(self) -> None:
        """Major intervals have their natural size."""
        assert major(SECOND) == IntervalClass(SECOND, Semitones(2))
        assert major(THIRD) == IntervalClass(THIRD, Semitones(4))
        assert major(SIXTH) == IntervalClass(SIXTH, Semitones(9))
        assert major(SEVENTH) == IntervalClass(SEVENTH, Semitones(11))

    @pytest.mark.parametrize("root", [UNISON, FOURTH, FIFTH])
    def test_major_rejects_perfect_roots(self, root: IntervalRoot) -> None:
        """Invalid construction is also a ValueError."""
        with pytest.raises(ValueError):
            major(root)

    def test_diminished(self) -> None:
        """Diminished is one below perfect, two below major."""
        assert diminished(THIRD) == IntervalClass(THIRD, Semitones(2))
        assert diminished(FOURTH) == IntervalClass(FOURTH, Semitones(4))

    def test_double_diminished(self) -> None:
        """Doubly diminished is one below diminished."""
        assert double_diminished(THIRD) == IntervalClass(THIRD, Semitones(1))
        assert double_diminished(FOURTH) == IntervalClass(FOURTH, Semitones(3))

    def test_augmented(self) -> None:
        """Augmented is one above perfect or major."""
        assert augmented(SECOND) == IntervalClass(SECOND, Semitones(3))
        assert augmented(FOURTH) == IntervalClass(FOURTH, Semitones(6))

    def test_double_augmented(self) -> None:
        """Doubly augmented is two above perfect or major."""
        assert double_augmented(SECOND) == IntervalClass(SECOND, Semitones(4))
        assert double_augmented(FOURTH) == IntervalClass(FOURTH, Semitones(7))

    def test_named_constants(self) -> None:
        """Short aliases match the constructors."""
        assert IntervalClass.P1 == perfect(UNISON)
        assert IntervalClass.m3 == minor(THIRD)
        assert IntervalClass.M3 == major(THIRD)
        assert IntervalClass.A4 == augmented(FOURTH)
        assert IntervalClass.d5 == diminished(FIFTH)
        assert IntervalClass.P5 == perfect(FIFTH)
        assert IntervalClass.M7 == major(SEVENTH)


class TestIntervalClass:
    """Tests for IntervalClass arithmetic and quality."""

    def test_addition(self) -> None:
        """Stacking interval classes."""
        assert perfect(FOURTH) + perfect(UNISON) == perfect(FOURTH)
        assert perfect(FOURTH) + augmented(UNISON) == augmented(FOURTH)
        assert augmented(FOURTH) + augmented(UNISON) == double_augmented(FOURTH)
        assert perfect(FOURTH) + perfect(FOURTH) == minor(SEVENTH)
        assert minor(THIRD) + minor(THIRD) == diminished(FIFTH)
        assert major(THIRD) + major(THIRD) == augmented(FIFTH)

    def test_wrapping_addition(self) -> None:
        """Stacking past the octave carries it away."""
        assert major(SIXTH) + perfect(FIFTH) == major(THIRD)
        assert augmented(FOURTH) + augmented(FOURTH) == augmented(SEVENTH)
        assert perfect(FIFTH) + perfect(FOURTH) == perfect(UNISON)

    def test_subtraction(self) -> None:
        """Differences of interval classes."""
        assert perfect(FOURTH) - perfect(UNISON) == perfect(FOURTH)
        assert perfect(FOURTH) - augmented(UNISON) == diminished(FOURTH)
        assert diminished(FOURTH) - diminished(FOURTH) == perfect(UNISON)
        assert perfect(FIFTH) - major(THIRD) == minor(THIRD)
        assert perfect(FIFTH) - minor(THIRD) == major(THIRD)

    def test_wrapping_subtraction(self) -> None:
        """A negative difference is inverted."""
        assert perfect(UNISON) - minor(THIRD) == major(SIXTH)
        assert major(THIRD) - perfect(FIFTH) == major(SIXTH)

    def test_inversion(self) -> None:
        """Inversion within the octave."""
        assert perfect(UNISON).inverted() == perfect(UNISON)
        assert augmented(UNISON).inverted() == diminished(UNISON)
        assert major(SECOND).inverted() == minor(SEVENTH)
        assert major(THIRD).inverted() == minor(SIXTH)
        assert perfect(FIFTH).inverted() == perfect(FOURTH)

    @pytest.mark.parametrize(
        "interval_class",
        [
            perfect(UNISON),
            augmented(UNISON),
            diminished(UNISON),
            minor(SECOND),
            major(THIRD),
            augmented(FOURTH),
            diminished(FIFTH),
            double_augmented(SIXTH),
            major(SEVENTH),
        ],
    )
    def test_inversion_is_involutive(self, interval_class: IntervalClass) -> None:
        """Inverting twice gives the original."""
        assert interval_class.inverted().inverted() == interval_class

    def test_quality(self) -> None:
        """Quality is the offset from the natural size."""
        assert major(THIRD).quality() == IntervalQuality.imperfect(0)
        assert minor(THIRD).quality() == IntervalQuality.imperfect(-1)
        assert diminished(FIFTH).quality() == IntervalQuality.perfectable(-1)

    def test_is_perfect(self) -> None:
        """Only unaltered unisons, fourths and fifths are perfect."""
        assert perfect(FIFTH).is_perfect()
        assert not augmented(FIFTH).is_perfect()
        assert not major(THIRD).is_perfect()

    def test_ordering(self) -> None:
        """Classes order by root, then semitones."""
        assert minor(THIRD) < major(THIRD)
        assert major(THIRD) < perfect(FOURTH)
        assert augmented(THIRD) < diminished(FOURTH)

    def test_display(self) -> None:
        """Classes render as quality + number."""
        assert str(IntervalClass(THIRD, Semitones(4))) == "M3"
        assert str(diminished(FIFTH)) == "d5"
        assert str(double_diminished(THIRD)) == "dd3"
        assert str(augmented(UNISON)) == "A1"

    def test_parse(self) -> None:
        """Parse simple intervals."""
        assert IntervalClass.parse("M3") == major(THIRD)
        assert IntervalClass.parse("d5") == diminished(FIFTH)
        assert IntervalClass.parse("AA1") == double_augmented(UNISON)

    def test_parse_rejects_compound(self) -> None:
        """An interval class is smaller than an octave."""
        with pytest.raises(NotationParseError):
            IntervalClass.parse("M10")

    def test_from_dyad(self) -> None:
        """The interval class between two pitch classes."""
        assert IntervalClass.from_dyad(Dyad(D.natural(), F.natural())) == minor(THIRD)
        assert IntervalClass.from_dyad(Dyad(F.natural(), D.natural())) == minor(THIRD)
        assert IntervalClass.from_dyad(Dyad(C.flat(), C.sharp())) == double_augmented(UNISON)

    def test_between_wraps(self) -> None:
        """An ascending distance that passes B wraps into the next octave."""
        assert IntervalClass.between(B.sharp(), C.natural()) == diminished(SECOND)
        assert IntervalClass.between(G.natural(), C.natural()) == perfect(FOURTH)


class TestInterval:
    """Tests for Interval (class + octaves)."""

    def test_simple(self) -> None:
        """A simple interval has no octaves."""
        assert perfect(UNISON).simple() == Interval(perfect(UNISON), Octaves(0))
        assert major(SEVENTH).simple() == Interval(major(SEVENTH))

    def test_compound(self) -> None:
        """A compound interval adds octaves."""
        assert perfect(UNISON).compound(1) == Interval(perfect(UNISON), Octaves(1))
        assert major(SEVENTH).compound(2) == Interval(major(SEVENTH), Octaves(2))

    def test_size(self) -> None:
        """Total size counts the octaves."""
        tenth = major(THIRD).compound(1)
        assert tenth.in_steps() == Steps(9)
        assert tenth.in_semitones() == Semitones(16)
        assert tenth.number == 10

    def test_ordering(self) -> None:
        """Intervals order by total size."""
        assert major(THIRD).simple() < major(THIRD).compound(1)
        assert minor(THIRD).simple() < major(THIRD).simple()
        assert major(SIXTH).simple() < major(THIRD).compound(1)
        assert perfect(FIFTH).compound(1) > major(SEVENTH).simple()

    def test_quality(self) -> None:
        """Quality and perfection come from the class."""
        assert perfect(FIFTH).compound(1).is_perfect()
        assert minor(THIRD).compound(2).quality() == IntervalQuality.imperfect(-1)

    def test_addition(self) -> None:
        """Adding intervals carries octaves."""
        assert major(SIXTH).simple() + perfect(FIFTH).simple() == major(THIRD).compound(1)
        assert perfect(FIFTH).simple() + perfect(FOURTH).simple() == perfect(UNISON).compound(1)
        assert (
            major(THIRD).compound(1) + major(THIRD).compound(1) == augmented(FIFTH).compound(2)
        )

    def test_subtraction(self) -> None:
        """Subtracting a smaller interval."""
        assert perfect(UNISON).compound(1) - perfect(FIFTH).simple() == perfect(FOURTH).simple()
        assert major(THIRD).compound(1) - perfect(FIFTH).simple() == major(SIXTH).simple()
        assert major(THIRD).simple() - minor(THIRD).simple() == augmented(UNISON).simple()

    def test_subtraction_underflow(self) -> None:
        """An interval cannot go negative."""
        with pytest.raises(IntervalOrderError, match="would be negative"):
            perfect(FIFTH).simple() - major(THIRD).compound(1)
        with pytest.raises(ValueError):
            perfect(UNISON).simple() - augmented(UNISON).simple()

    @pytest.mark.parametrize(
        ("x", "y"),
        [
            (major(THIRD).compound(1), perfect(FIFTH).simple()),
            (perfect(UNISON).compound(1), major(THIRD).simple()),
            (minor(THIRD).compound(2), major(SIXTH).compound(1)),
            (augmented(FOURTH).simple(), augmented(FOURTH).simple()),
            (major(THIRD).simple(), minor(THIRD).simple()),
            (perfect(UNISON).compound(1), augmented(UNISON).simple()),
        ],
    )
    def test_subtraction_round_trip(self, x: Interval, y: Interval) -> None:
        """(x - y) + y == x whenever x >= y."""
        assert (x - y) + y == x

    def test_display(self) -> None:
        """Compound intervals render by their full number."""
        assert str(minor(THIRD).simple()) == "m3"
        assert str(major(THIRD).compound(1)) == "M10"
        assert str(perfect(UNISON).compound(1)) == "P8"
        assert str(diminished(UNISON).compound(1)) == "d8"

    def test_parse(self) -> None:
        """Parse simple and compound intervals."""
        assert Interval.parse("m3") == minor(THIRD).simple()
        assert Interval.parse("M10") == major(THIRD).compound(1)
        assert Interval.parse("P8") == perfect(UNISON).compound(1)
        assert Interval.parse("d8") == diminished(UNISON).compound(1)
        assert Interval.parse("P15") == perfect(UNISON).compound(2)

    @pytest.mark.parametrize("text", ["P3", "M5", "M0", "Q3", "3", "M", ""])
    def test_parse_invalid(self, text: str) -> None:
        """Invalid intervals raise a parse error."""
        with pytest.raises(NotationParseError):
            Interval.parse(text)


class TestIntervalFromDyad:
    """Tests for deriving an interval from two pitches."""

    def test_unison(self) -> None:
        """Zero distance is a perfect unison."""
        assert Interval.from_dyad(Dyad(C.o(4), C.o(4))) == perfect(UNISON).simple()

    def test_double_augmented_unison(self) -> None:
        """C♭4 to C♯4 spans no steps and two semitones."""
        interval = Interval.from_dyad(Dyad(C.flat().o(4), C.sharp().o(4)))
        assert interval == Interval(IntervalClass(UNISON, Semitones(2)))
        assert interval == double_augmented(UNISON).simple()

    def test_compound_minor_third(self) -> None:
        """D4 to F5 is a minor tenth."""
        assert Interval.from_dyad(Dyad(D.o(4), F.o(5))) == minor(THIRD).compound(1)
        assert Interval.from_dyad(Dyad(F.o(5), D.o(4))) == minor(THIRD).compound(1)

    def test_major_third(self) -> None:
        """E♭4 to G4 is a major third."""
        assert Interval.from_dyad(Dyad(E.flat().o(4), G.o(4))) == major(THIRD).simple()

    def test_diminished_second_across_octave_number(self) -> None:
        """B♯3 and C4 sound the same but are a diminished second apart."""
        assert Interval.from_dyad(Dyad(C.o(4), B.sharp().o(3))) == diminished(SECOND).simple()

    def test_spellings_crossing_the_octave(self) -> None:
        """Class size plus octaves always equals the raw distance."""
        assert Interval.from_dyad(Dyad(C.o(4), B.sharp().o(4))) == augmented(SEVENTH).simple()
        assert Interval.from_dyad(Dyad(C.o(4), C.flat().o(5))) == diminished(UNISON).compound(1)
