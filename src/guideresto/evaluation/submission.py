"""EvaluationService — record votes and reviews, and read their statistics.

Reviews are all-or-nothing: every ``criterion name -> score`` entry is checked
against the grade range and the criterion catalog before the review is
attached to its restaurant. One bad entry fails the use case and its Unit of
Work is rolled back.

Read-side calls load the restaurant and delegate to ``statistics``. An unknown
restaurant yields zero / empty results rather than an error.
"""

import socket

from protean import use_case
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from guideresto.domain import guideresto
from guideresto.evaluation import statistics
from guideresto.evaluation.evaluation import MAX_GRADE, MIN_GRADE, Evaluation, is_valid_grade
from guideresto.evaluation.statistics import RestaurantStatistics
from guideresto.exceptions import InvalidGradeError, UnknownCriterionError
from guideresto.reference.criterion import Criterion
from guideresto.restaurant.restaurant import Restaurant
from guideresto.utils.logging import get_logger

logger = get_logger(__name__)

UNAVAILABLE_ORIGIN = "unavailable"


def resolve_local_origin() -> str:
    """Best-effort address of this host, used as the submitter token of a vote."""
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError as exc:
        logger.warning("Could not resolve submitter address", error=str(exc))
        return UNAVAILABLE_ORIGIN


def _resolve_grades(grades):
    resolved = []
    seen = set()
    criteria = current_domain.repository_for(Criterion)
    for name, value in grades.items():
        if not is_valid_grade(value):
            logger.warning("Invalid grade", criterion=name, value=value)
            raise InvalidGradeError(
                {"grades": [f"Grade for '{name}' must be between {MIN_GRADE} and {MAX_GRADE}, got {value!r}"]}
            )

        criterion = criteria.find_by_exact_name(name)
        if criterion is None:
            logger.warning("Unknown criterion", criterion=name)
            raise UnknownCriterionError({"grades": [f"Criterion '{name}' does not exist"]})

        if criterion.id in seen:
            raise ValidationError({"grades": [f"Criterion '{criterion.name}' is graded more than once"]})
        seen.add(criterion.id)
        resolved.append((criterion, value))
    return resolved


@guideresto.application_service(part_of=Restaurant)
class EvaluationService:
    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    @use_case
    def add_vote(self, restaurant_id, like, origin=None) -> Evaluation:
        """Record a like or dislike. ``origin`` defaults to the local host address."""
        repo = current_domain.repository_for(Restaurant)
        restaurant = repo.get(restaurant_id)
        vote = Evaluation.vote(like=like, origin=origin or resolve_local_origin())
        restaurant.add_evaluation(vote)
        repo.add(restaurant)

        logger.info(
            "Vote recorded",
            restaurant_id=restaurant_id,
            evaluation_id=vote.id,
            like=like,
        )
        return vote

    @use_case
    def add_review(self, restaurant_id, username, comment, grades) -> Evaluation:
        """Record a review graded with ``grades``, a mapping of criterion name to score."""
        repo = current_domain.repository_for(Restaurant)
        restaurant = repo.get(restaurant_id)
        resolved = _resolve_grades(grades or {})

        review = Evaluation.review(username=username, comment=comment)
        for criterion, value in resolved:
            review.add_grade(criterion, value)

        restaurant.add_evaluation(review)
        repo.add(restaurant)

        logger.info(
            "Review recorded",
            restaurant_id=restaurant_id,
            evaluation_id=review.id,
            grade_count=len(review.grades),
        )
        return review

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def _load(self, restaurant_id) -> Restaurant | None:
        return current_domain.repository_for(Restaurant).get_or_none(restaurant_id)

    def count_likes(self, restaurant_id) -> int:
        restaurant = self._load(restaurant_id)
        return statistics.count_votes(restaurant, like=True) if restaurant else 0

    def count_dislikes(self, restaurant_id) -> int:
        restaurant = self._load(restaurant_id)
        return statistics.count_votes(restaurant, like=False) if restaurant else 0

    def count_complete_evaluations(self, restaurant_id) -> int:
        restaurant = self._load(restaurant_id)
        return statistics.count_reviews(restaurant) if restaurant else 0

    def count_total_evaluations(self, restaurant_id) -> int:
        restaurant = self._load(restaurant_id)
        return statistics.count_total_evaluations(restaurant) if restaurant else 0

    def average_grade_for_criterion(self, restaurant_id, criterion_name) -> float:
        restaurant = self._load(restaurant_id)
        return statistics.average_grade(restaurant, criterion_name) if restaurant else statistics.NO_DATA

    def has_grades_for_criterion(self, restaurant_id, criterion_name) -> bool:
        restaurant = self._load(restaurant_id)
        return statistics.has_grades(restaurant, criterion_name) if restaurant else False

    def overall_average(self, restaurant_id) -> float:
        restaurant = self._load(restaurant_id)
        return statistics.overall_average(restaurant) if restaurant else statistics.NO_DATA

    def list_reviews(self, restaurant_id) -> list[Evaluation]:
        """Reviews of the restaurant, oldest visit first."""
        restaurant = self._load(restaurant_id)
        return sorted(restaurant.reviews, key=lambda r: r.visit_date) if restaurant else []

    def has_evaluations(self, restaurant_id) -> bool:
        restaurant = self._load(restaurant_id)
        return restaurant is not None and restaurant.has_evaluations()

    def summary(self, restaurant_id) -> RestaurantStatistics | None:
        restaurant = self._load(restaurant_id)
        return statistics.summarize(restaurant) if restaurant else None
