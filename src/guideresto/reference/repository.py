"""Repositories for reference data: cities, restaurant types, criteria."""

from guideresto.domain import guideresto
from guideresto.reference.city import City
from guideresto.reference.criterion import Criterion
from guideresto.reference.restaurant_type import RestaurantType
from guideresto.utils.names import contains_name, same_name


@guideresto.repository(part_of=City)
class CityRepository:
    def find_all(self) -> list[City]:
        return self._dao.query.order_by("name").all().items

    def find_by_zip_code(self, zip_code: str) -> City | None:
        return self._dao.query.filter(zip_code=zip_code.strip()).all().first

    def find_by_name(self, fragment: str) -> list[City]:
        """Cities whose name contains ``fragment``, ignoring case."""
        fragment = fragment.strip()
        candidates = self._dao.query.filter(name__icontains=fragment).order_by("name").all().items
        return [c for c in candidates if contains_name(c.name, fragment)]

    def find_by_exact_name(self, name: str) -> City | None:
        return next((c for c in self.find_by_name(name) if same_name(c.name, name.strip())), None)


@guideresto.repository(part_of=RestaurantType)
class RestaurantTypeRepository:
    def find_all(self) -> list[RestaurantType]:
        return self._dao.query.order_by("label").all().items

    def find_by_label(self, fragment: str) -> list[RestaurantType]:
        fragment = fragment.strip()
        candidates = self._dao.query.filter(label__icontains=fragment).order_by("label").all().items
        return [t for t in candidates if contains_name(t.label, fragment)]

    def find_by_exact_label(self, label: str) -> RestaurantType | None:
        return next((t for t in self.find_by_label(label) if same_name(t.label, label.strip())), None)


@guideresto.repository(part_of=Criterion)
class CriterionRepository:
    def find_all(self) -> list[Criterion]:
        return self._dao.query.order_by("name").all().items

    def find_by_name(self, fragment: str) -> list[Criterion]:
        fragment = fragment.strip()
        candidates = self._dao.query.filter(name__icontains=fragment).order_by("name").all().items
        return [c for c in candidates if contains_name(c.name, fragment)]

    def find_by_exact_name(self, name: str) -> Criterion | None:
        # The catalog is small; a full scan keeps non-ASCII names case-insensitive
        return next((c for c in self.find_all() if c.matches(name.strip())), None)
