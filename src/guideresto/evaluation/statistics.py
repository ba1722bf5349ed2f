"""Statistics over a restaurant's evaluations.

Pure functions over an already loaded Restaurant: no I/O, no ordering
assumptions. Averages are arithmetic means over the flattened multiset of
grades, so the overall average weighs every grade equally (it is not a mean
of per-criterion means).

``average_grade`` and ``overall_average`` return ``0.0`` when there is no
grade to average. Grades are never below 1, but callers should still check
``has_grades`` before displaying a score; ``summarize`` reports missing data
as ``None`` / absent keys instead.
"""

from dataclasses import dataclass, field

NO_DATA = 0.0


@dataclass(frozen=True)
class RestaurantStatistics:
    likes: int
    dislikes: int
    reviews: int
    total: int
    overall_average: float | None
    criterion_averages: dict[str, float] = field(default_factory=dict)


def _grades(restaurant, criterion_name=None):
    for evaluation in restaurant.evaluations:
        if not evaluation.is_review:
            continue
        for grade in evaluation.grades:
            if criterion_name is None or grade.is_for(criterion_name):
                yield grade


def _mean(values) -> float:
    values = list(values)
    if not values:
        return NO_DATA
    return sum(values) / len(values)


def count_votes(restaurant, like: bool) -> int:
    return sum(1 for e in restaurant.evaluations if e.is_vote and e.like == like)


def count_reviews(restaurant) -> int:
    return sum(1 for e in restaurant.evaluations if e.is_review)


def count_total_evaluations(restaurant) -> int:
    return len(restaurant.evaluations)


def has_grades(restaurant, criterion_name: str | None = None) -> bool:
    """Whether any review graded ``criterion_name`` (or anything at all when ``None``)."""
    return next(_grades(restaurant, criterion_name), None) is not None


def average_grade(restaurant, criterion_name: str) -> float:
    """Mean grade for the criterion named ``criterion_name`` (case-insensitive)."""
    return _mean(g.value for g in _grades(restaurant, criterion_name))


def overall_average(restaurant) -> float:
    return _mean(g.value for g in _grades(restaurant))


def summarize(restaurant) -> RestaurantStatistics:
    by_criterion: dict[str, list[int]] = {}
    for grade in _grades(restaurant):
        by_criterion.setdefault(grade.criterion_name, []).append(grade.value)

    return RestaurantStatistics(
        likes=count_votes(restaurant, like=True),
        dislikes=count_votes(restaurant, like=False),
        reviews=count_reviews(restaurant),
        total=count_total_evaluations(restaurant),
        overall_average=overall_average(restaurant) if by_criterion else None,
        criterion_averages={name: _mean(values) for name, values in sorted(by_criterion.items())},
    )
