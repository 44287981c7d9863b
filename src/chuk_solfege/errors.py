"""
Exception hierarchy.

Every error subclasses ValueError, so callers that only care about
"bad value" can keep catching that.
"""


class SolfegeError(Exception):
    """Base class for all chuk-solfege errors."""


class InvalidConstructionError(SolfegeError, ValueError):
    """A value was requested that the music theory does not allow (e.g. a perfect third)."""


class IntervalOrderError(SolfegeError, ValueError):
    """An interval subtraction would produce a negative interval."""


class NotationParseError(SolfegeError, ValueError):
    """Text could not be parsed into a pitch, accidental, or interval."""
