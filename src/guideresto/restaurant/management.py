"""RestaurantService — create, edit, relocate, retype and delete restaurants.

Every mutating call is a use case running in its own Unit of Work: city and
type references are resolved first, and a failed lookup aborts the whole call
before anything is written.
"""

from protean import use_case
from protean.utils.globals import current_domain

from guideresto.domain import guideresto
from guideresto.exceptions import ReferenceNotFoundError
from guideresto.reference.city import City
from guideresto.reference.restaurant_type import RestaurantType
from guideresto.restaurant.restaurant import UNSET, Restaurant
from guideresto.utils.logging import get_logger

logger = get_logger(__name__)


def _city(city_id) -> City:
    city = current_domain.repository_for(City).get_or_none(city_id)
    if city is None:
        logger.warning("Unknown city", city_id=city_id)
        raise ReferenceNotFoundError({"city_id": [f"City {city_id} does not exist"]})
    return city


def _restaurant_type(type_id) -> RestaurantType:
    restaurant_type = current_domain.repository_for(RestaurantType).get_or_none(type_id)
    if restaurant_type is None:
        logger.warning("Unknown restaurant type", type_id=type_id)
        raise ReferenceNotFoundError({"type_id": [f"Restaurant type {type_id} does not exist"]})
    return restaurant_type


@guideresto.application_service(part_of=Restaurant)
class RestaurantService:
    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    @use_case
    def create(self, name, description, website, street, city_id, type_id) -> Restaurant:
        restaurant = Restaurant.create(
            name=name,
            description=description,
            website=website,
            street=street,
            city=_city(city_id),
            restaurant_type=_restaurant_type(type_id),
        )
        current_domain.repository_for(Restaurant).add(restaurant)

        logger.info("Restaurant created", restaurant_id=restaurant.id, name=restaurant.name)
        return restaurant

    @use_case
    def update(self, restaurant_id, name=UNSET, description=UNSET, website=UNSET) -> Restaurant:
        """Change name, description and website; address and type are left as they are."""
        repo = current_domain.repository_for(Restaurant)
        restaurant = repo.get(restaurant_id)
        restaurant.update_details(name=name, description=description, website=website)
        repo.add(restaurant)

        logger.info("Restaurant updated", restaurant_id=restaurant_id)
        return restaurant

    @use_case
    def update_address(self, restaurant_id, street, city_id) -> Restaurant:
        repo = current_domain.repository_for(Restaurant)
        restaurant = repo.get(restaurant_id)
        restaurant.relocate(street=street, city=_city(city_id))
        repo.add(restaurant)

        logger.info("Restaurant address updated", restaurant_id=restaurant_id, city_id=city_id)
        return restaurant

    @use_case
    def update_type(self, restaurant_id, type_id) -> Restaurant:
        repo = current_domain.repository_for(Restaurant)
        restaurant = repo.get(restaurant_id)
        restaurant.change_type(_restaurant_type(type_id))
        repo.add(restaurant)

        logger.info("Restaurant type updated", restaurant_id=restaurant_id, type_id=type_id)
        return restaurant

    @use_case
    def delete(self, restaurant_id) -> bool:
        """Delete a restaurant with all its evaluations and grades.

        Returns ``False`` when there is no such restaurant.
        """
        repo = current_domain.repository_for(Restaurant)
        restaurant = repo.get_or_none(restaurant_id)
        if restaurant is None:
            logger.info("Restaurant to delete not found", restaurant_id=restaurant_id)
            return False

        repo.remove(restaurant)
        logger.info("Restaurant deleted", restaurant_id=restaurant_id)
        return True

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get(self, restaurant_id) -> Restaurant:
        return current_domain.repository_for(Restaurant).get(restaurant_id)

    def find(self, restaurant_id) -> Restaurant | None:
        return current_domain.repository_for(Restaurant).get_or_none(restaurant_id)

    def list_all(self) -> list[Restaurant]:
        return current_domain.repository_for(Restaurant).find_all()

    def search_by_name(self, fragment: str) -> list[Restaurant]:
        return current_domain.repository_for(Restaurant).find_by_name(fragment)

    def find_by_exact_name(self, name: str) -> Restaurant | None:
        return current_domain.repository_for(Restaurant).find_by_exact_name(name)

    def list_by_city(self, city_id) -> list[Restaurant]:
        return current_domain.repository_for(Restaurant).find_by_city(city_id)

    def list_by_type(self, type_id) -> list[Restaurant]:
        return current_domain.repository_for(Restaurant).find_by_type(type_id)

    def count(self) -> int:
        return current_domain.repository_for(Restaurant).count()

    def exists(self, restaurant_id) -> bool:
        return self.find(restaurant_id) is not None
