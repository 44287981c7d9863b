"""
Dyad - a canonical, order-independent pair of values.

Dyad(a, b) == Dyad(b, a) for any two comparable values.
The pair is normalized to (low, high) at construction and can never
be built un-normalized from outside this module.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import total_ordering
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@total_ordering
class Dyad(Generic[T]):
    """
    An unordered pair of two values, stored as (low, high).

    If the second value is strictly greater it becomes high,
    otherwise the first does. Equal values give low == high.

    Immutable and hashable.
    """

    __slots__ = ("_low", "_high")
    _low: T
    _high: T

    def __init__(self, first: T, second: T) -> None:
        """Create a dyad from two values in any order."""
        if second > first:  # type: ignore[operator]
            low, high = first, second
        else:
            low, high = second, first
        object.__setattr__(self, "_low", low)
        object.__setattr__(self, "_high", high)

    @classmethod
    def from_pair(cls, pair: tuple[T, T]) -> Dyad[T]:
        """Create a dyad from a 2-tuple."""
        first, second = pair
        return cls(first, second)

    @classmethod
    def _ordered(cls, low: U, high: U) -> Dyad[U]:
        # Trusts the caller: used for projections of an existing dyad
        dyad: Dyad[U] = object.__new__(cls)
        object.__setattr__(dyad, "_low", low)
        object.__setattr__(dyad, "_high", high)
        return dyad

    @property
    def low(self) -> T:
        """The lower value."""
        return self._low

    @property
    def high(self) -> T:
        """The higher value."""
        return self._high

    def map(self, projection: Callable[[T], U]) -> Dyad[U]:
        """
        Project both ends of the dyad, keeping the low/high assignment.

        The projected values are not compared again: the low end of a
        pitch dyad stays the low end of the pitch-class dyad, even if
        the classes alone would sort the other way (B♯3 / C4).
        """
        return Dyad._ordered(projection(self._low), projection(self._high))

    def spans(self, value: T) -> bool:
        """Check whether a value lies within [low, high]."""
        return bool(self._low <= value <= self._high)  # type: ignore[operator]

    def __iter__(self) -> Iterator[T]:
        yield self._low
        yield self._high

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Dyad is immutable, cannot set {name!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Restored through _ordered, not __setattr__
        return (Dyad._ordered, (self._low, self._high))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dyad):
            return NotImplemented
        return bool(self._low == other._low and self._high == other._high)

    def __lt__(self, other: Dyad[T]) -> bool:
        if not isinstance(other, Dyad):
            return NotImplemented
        return bool((self._low, self._high) < (other._low, other._high))

    def __hash__(self) -> int:
        return hash((self._low, self._high))

    def __repr__(self) -> str:
        return f"Dyad({self._low!r}, {self._high!r})"

    def __str__(self) -> str:
        return f"{self._low}-{self._high}"
