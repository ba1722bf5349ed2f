"""FastAPI routes for restaurants and their evaluations.

Each route translates between Pydantic schemas (external contract) and
service calls (internal domain operations).
"""

from fastapi import APIRouter, Depends, Request
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from guideresto.api.schemas import (
    CreateRestaurantRequest,
    RestaurantDetailResponse,
    RestaurantResponse,
    ReviewRequest,
    ReviewResponse,
    StatisticsResponse,
    StatusResponse,
    UpdateAddressRequest,
    UpdateRestaurantRequest,
    UpdateTypeRequest,
    VoteRequest,
    VoteResponse,
)
from guideresto.evaluation import statistics
from guideresto.evaluation.submission import EvaluationService
from guideresto.reference.city import City
from guideresto.reference.restaurant_type import RestaurantType
from guideresto.restaurant.management import RestaurantService

restaurant_router = APIRouter(prefix="/restaurants", tags=["restaurants"])


def get_restaurant_service(request: Request) -> RestaurantService:
    return request.app.state.restaurant_service


def get_evaluation_service(request: Request) -> EvaluationService:
    return request.app.state.evaluation_service


def _restaurant_response(restaurant) -> RestaurantResponse:
    return RestaurantResponse.from_restaurant(
        restaurant,
        city=current_domain.repository_for(City).get_or_none(restaurant.city_id),
        restaurant_type=current_domain.repository_for(RestaurantType).get_or_none(restaurant.type_id),
    )


def _not_found(restaurant_id) -> ObjectNotFoundError:
    return ObjectNotFoundError(f"Restaurant {restaurant_id} does not exist")


# --- Restaurant endpoints ---


@restaurant_router.get("", response_model=list[RestaurantResponse])
async def list_restaurants(
    name: str | None = None,
    city_id: str | None = None,
    type_id: str | None = None,
    service: RestaurantService = Depends(get_restaurant_service),
) -> list[RestaurantResponse]:
    """List restaurants, optionally filtered by name fragment, city or type."""
    if name:
        restaurants = service.search_by_name(name)
    elif city_id is not None:
        restaurants = service.list_by_city(city_id)
    elif type_id is not None:
        restaurants = service.list_by_type(type_id)
    else:
        restaurants = service.list_all()
    return [_restaurant_response(r) for r in restaurants]


@restaurant_router.post("", status_code=201, response_model=RestaurantResponse)
async def create_restaurant(
    body: CreateRestaurantRequest,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantResponse:
    restaurant = service.create(
        name=body.name,
        description=body.description,
        website=body.website,
        street=body.street,
        city_id=body.city_id,
        type_id=body.type_id,
    )
    return _restaurant_response(restaurant)


@restaurant_router.get("/{restaurant_id}", response_model=RestaurantDetailResponse)
async def get_restaurant(
    restaurant_id: str,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantDetailResponse:
    restaurant = service.get(restaurant_id)
    return RestaurantDetailResponse(
        **_restaurant_response(restaurant).model_dump(),
        statistics=StatisticsResponse.from_statistics(statistics.summarize(restaurant)),
    )


@restaurant_router.put("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    restaurant_id: str,
    body: UpdateRestaurantRequest,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantResponse:
    restaurant = service.update(
        restaurant_id,
        name=body.name,
        description=body.description,
        website=body.website,
    )
    return _restaurant_response(restaurant)


@restaurant_router.put("/{restaurant_id}/address", response_model=RestaurantResponse)
async def update_address(
    restaurant_id: str,
    body: UpdateAddressRequest,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantResponse:
    restaurant = service.update_address(restaurant_id, street=body.street, city_id=body.city_id)
    return _restaurant_response(restaurant)


@restaurant_router.put("/{restaurant_id}/type", response_model=RestaurantResponse)
async def update_type(
    restaurant_id: str,
    body: UpdateTypeRequest,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantResponse:
    restaurant = service.update_type(restaurant_id, type_id=body.type_id)
    return _restaurant_response(restaurant)


@restaurant_router.delete("/{restaurant_id}", response_model=StatusResponse)
async def delete_restaurant(
    restaurant_id: str,
    service: RestaurantService = Depends(get_restaurant_service),
) -> StatusResponse:
    if not service.delete(restaurant_id):
        raise _not_found(restaurant_id)
    return StatusResponse()


# --- Evaluation endpoints ---


@restaurant_router.post("/{restaurant_id}/votes", status_code=201, response_model=VoteResponse)
async def add_vote(
    restaurant_id: str,
    body: VoteRequest,
    request: Request,
    service: EvaluationService = Depends(get_evaluation_service),
) -> VoteResponse:
    """Like or dislike a restaurant. The client address is kept as the vote's origin."""
    origin = request.client.host if request.client else None
    vote = service.add_vote(restaurant_id, like=body.like, origin=origin)
    return VoteResponse(evaluation_id=vote.id, like=vote.like, visit_date=vote.visit_date)


@restaurant_router.post("/{restaurant_id}/reviews", status_code=201, response_model=ReviewResponse)
async def add_review(
    restaurant_id: str,
    body: ReviewRequest,
    service: EvaluationService = Depends(get_evaluation_service),
) -> ReviewResponse:
    review = service.add_review(
        restaurant_id,
        username=body.username,
        comment=body.comment,
        grades=body.grades,
    )
    return ReviewResponse.from_review(review)


@restaurant_router.get("/{restaurant_id}/reviews", response_model=list[ReviewResponse])
async def list_reviews(
    restaurant_id: str,
    service: EvaluationService = Depends(get_evaluation_service),
) -> list[ReviewResponse]:
    return [ReviewResponse.from_review(r) for r in service.list_reviews(restaurant_id)]


@restaurant_router.get("/{restaurant_id}/statistics", response_model=StatisticsResponse)
async def get_statistics(
    restaurant_id: str,
    service: EvaluationService = Depends(get_evaluation_service),
) -> StatisticsResponse:
    summary = service.summary(restaurant_id)
    if summary is None:
        raise _not_found(restaurant_id)
    return StatisticsResponse.from_statistics(summary)
