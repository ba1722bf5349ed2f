"""Exceptions raised by the GuideResto domain.

All of them are Protean ``ValidationError`` subclasses: ``messages`` maps a
field (or a pseudo field such as ``"grades"``) to a list of human readable
messages. A missing aggregate is reported with Protean's own
``ObjectNotFoundError``.
"""

from protean.exceptions import ValidationError


class InvalidGradeError(ValidationError):
    """A grade value outside the accepted range."""


class ReferenceNotFoundError(ValidationError):
    """A required foreign reference (city, type, criterion) does not resolve."""


class UnknownCriterionError(ReferenceNotFoundError):
    """A criterion name that is not part of the criterion catalog."""
