"""Evaluation — the feedback a visitor leaves about a restaurant.

An evaluation is a tagged variant, ``kind`` being one of:

    Vote    like/dislike flag + advisory origin token of the submitter
    Review  username + comment + grades, at most one grade per criterion

Both variants live in one collection owned by the Restaurant aggregate and in
one table. Consumers branch on ``kind`` (or ``is_vote`` / ``is_review``).

Grades keep the id and the name of the criterion they score, so statistics
never have to reach back into the criterion catalog. Evaluations are immutable
once recorded.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, Integer, String, Text

from guideresto.domain import guideresto
from guideresto.exceptions import InvalidGradeError
from guideresto.reference.criterion import Criterion
from guideresto.utils.names import same_name

MIN_GRADE = 1
MAX_GRADE = 5


class EvaluationKind(Enum):
    VOTE = "Vote"
    REVIEW = "Review"


def is_valid_grade(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_GRADE <= value <= MAX_GRADE


def _utc_now():
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@guideresto.entity(part_of="Restaurant", limit=None)
class Evaluation:
    kind: String(required=True, max_length=10, choices=EvaluationKind)
    visit_date: DateTime(default=_utc_now)

    # Vote
    like: Boolean()
    origin: String(max_length=100)

    # Review
    username: String(max_length=100)
    comment: Text()
    grades: HasMany("Grade")

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def vote(cls, like, origin=None, visit_date=None):
        """Record a like (``True``) or dislike (``False``)."""
        if not isinstance(like, bool):
            raise ValidationError({"like": ["A vote must be either a like or a dislike"]})

        return cls(
            kind=EvaluationKind.VOTE.value,
            visit_date=visit_date or _utc_now(),
            like=like,
            origin=origin,
        )

    @classmethod
    def review(cls, username, comment=None, visit_date=None):
        """Start a review. Grades are attached afterwards with ``add_grade``."""
        if username is None or not username.strip():
            raise ValidationError({"username": ["A review must be signed with a username"]})

        return cls(
            kind=EvaluationKind.REVIEW.value,
            visit_date=visit_date or _utc_now(),
            username=username.strip(),
            comment=comment,
        )

    # -------------------------------------------------------------------
    # Variant helpers
    # -------------------------------------------------------------------
    @property
    def is_vote(self) -> bool:
        return self.kind == EvaluationKind.VOTE.value

    @property
    def is_review(self) -> bool:
        return self.kind == EvaluationKind.REVIEW.value

    # -------------------------------------------------------------------
    # Grades
    # -------------------------------------------------------------------
    def grade_for(self, criterion_name: str) -> "Grade | None":
        return next((g for g in self.grades if g.is_for(criterion_name)), None)

    def add_grade(self, criterion: Criterion, value: int) -> "Grade":
        """Grade ``criterion`` with ``value``. A criterion can be graded only once."""
        if not self.is_review:
            raise ValidationError({"grades": ["Only reviews carry grades"]})

        # Booleans and strings would otherwise be coerced by the Integer field
        if not is_valid_grade(value):
            raise InvalidGradeError({"value": [f"Grade must be between {MIN_GRADE} and {MAX_GRADE}"]})

        if any(g.criterion_id == criterion.id or g.is_for(criterion.name) for g in self.grades):
            raise ValidationError({"grades": [f"Criterion '{criterion.name}' is already graded in this review"]})

        grade = Grade(criterion_id=criterion.id, criterion_name=criterion.name, value=value)
        self.add_grades(grade)
        return grade

    def __repr__(self):
        if self.is_vote:
            return f"<Vote {'like' if self.like else 'dislike'} restaurant={self.restaurant_id}>"
        return f"<Review by {self.username} restaurant={self.restaurant_id} grades={len(self.grades)}>"


@guideresto.entity(part_of=Evaluation, limit=None)
class Grade:
    """One score, for one criterion, within one review."""

    criterion_id: Identifier(required=True)
    criterion_name: String(required=True, max_length=100)
    value: Integer(required=True, min_value=MIN_GRADE, max_value=MAX_GRADE)

    def is_for(self, criterion_name: str) -> bool:
        return same_name(self.criterion_name, criterion_name)

    def __repr__(self):
        return f"<Grade {self.criterion_name}={self.value}>"
