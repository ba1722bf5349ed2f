"""Pydantic request/response schemas for the GuideResto API.

These are separate from the domain objects (anti-corruption pattern).
The API layer is the external contract; aggregates are internal concepts.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictBool, StrictInt


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateRestaurantRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    website: str | None = Field(default=None, max_length=100)
    street: str | None = Field(default=None, max_length=100)
    city_id: str
    type_id: str


class UpdateRestaurantRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    website: str | None = Field(default=None, max_length=100)


class UpdateAddressRequest(BaseModel):
    street: str | None = Field(default=None, max_length=100)
    city_id: str


class UpdateTypeRequest(BaseModel):
    type_id: str


class VoteRequest(BaseModel):
    like: StrictBool


class ReviewRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    comment: str | None = None
    # Strict: JSON booleans and numeric strings are not grades
    grades: dict[str, StrictInt] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class RestaurantResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    website: str | None = None
    street: str | None = None
    city_id: str
    city_name: str | None = None
    type_id: str
    type_label: str | None = None

    @classmethod
    def from_restaurant(cls, restaurant, city=None, restaurant_type=None) -> RestaurantResponse:
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            description=restaurant.description,
            website=restaurant.website,
            street=restaurant.address.street,
            city_id=restaurant.address.city_id,
            city_name=city.name if city else None,
            type_id=restaurant.type_id,
            type_label=restaurant_type.label if restaurant_type else None,
        )


class StatisticsResponse(BaseModel):
    likes: int
    dislikes: int
    reviews: int
    total: int
    overall_average: float | None = None
    criterion_averages: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_statistics(cls, stats) -> StatisticsResponse:
        return cls(
            likes=stats.likes,
            dislikes=stats.dislikes,
            reviews=stats.reviews,
            total=stats.total,
            overall_average=stats.overall_average,
            criterion_averages=dict(stats.criterion_averages),
        )


class RestaurantDetailResponse(RestaurantResponse):
    statistics: StatisticsResponse


class VoteResponse(BaseModel):
    evaluation_id: str
    like: bool
    visit_date: datetime


class ReviewResponse(BaseModel):
    evaluation_id: str
    username: str
    comment: str | None = None
    visit_date: datetime
    grades: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_review(cls, review) -> ReviewResponse:
        return cls(
            evaluation_id=review.id,
            username=review.username,
            comment=review.comment,
            visit_date=review.visit_date,
            grades={g.criterion_name: g.value for g in review.grades},
        )


class StatusResponse(BaseModel):
    status: str = "ok"
