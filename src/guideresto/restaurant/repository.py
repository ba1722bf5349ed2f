"""Repository for the Restaurant aggregate.

Adding a restaurant persists its new evaluations and their grades. Removing it
deletes them all; criteria, cities and types are left alone.
"""

from guideresto.domain import guideresto
from guideresto.evaluation.evaluation import Evaluation, Grade
from guideresto.restaurant.restaurant import Restaurant
from guideresto.utils.names import contains_name, same_name


@guideresto.repository(part_of=Restaurant)
class RestaurantRepository:
    def find_all(self) -> list[Restaurant]:
        return self._dao.query.order_by("name").all().items

    def find_by_name(self, fragment: str) -> list[Restaurant]:
        """Restaurants whose name contains ``fragment``, ignoring case."""
        fragment = fragment.strip()
        candidates = self._dao.query.filter(name__icontains=fragment).order_by("name").all().items
        return [r for r in candidates if contains_name(r.name, fragment)]

    def find_by_exact_name(self, name: str) -> Restaurant | None:
        name = name.strip()
        return next((r for r in self.find_by_name(name) if same_name(r.name, name)), None)

    def find_by_city(self, city_id) -> list[Restaurant]:
        return self._dao.query.filter(address_city_id=city_id).order_by("name").all().items

    def find_by_type(self, type_id) -> list[Restaurant]:
        return self._dao.query.filter(type_id=type_id).order_by("name").all().items

    def count(self) -> int:
        return self._dao.query.count()

    def remove(self, restaurant: Restaurant) -> None:
        """Delete ``restaurant`` together with its evaluations and their grades."""
        evaluation_dao = self._domain.repository_for(Evaluation)._dao
        grade_dao = self._domain.repository_for(Grade)._dao

        for evaluation in restaurant.evaluations:
            for grade in evaluation.grades:
                grade_dao.delete(grade)
            evaluation_dao.delete(evaluation)
        self._dao.delete(restaurant)
