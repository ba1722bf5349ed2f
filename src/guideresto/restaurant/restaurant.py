"""Restaurant aggregate — the root through which evaluations are recorded.

A restaurant embeds an Address (street + city reference), references exactly
one RestaurantType and owns its evaluations. Adding the restaurant to its
repository persists new evaluations and their grades.
"""

from protean.exceptions import ValidationError
from protean.fields import HasMany, Identifier, String, Text, ValueObject

from guideresto.domain import guideresto
from guideresto.evaluation.evaluation import Evaluation
from guideresto.reference.city import City
from guideresto.reference.restaurant_type import RestaurantType

NAME_MAX_LENGTH = 100

# Sentinel for distinguishing "not provided" from None in partial updates
UNSET = object()


def _clean_name(name):
    if name is None or not name.strip():
        raise ValidationError({"name": ["Restaurant name is required"]})
    if len(name.strip()) > NAME_MAX_LENGTH:
        raise ValidationError({"name": [f"Restaurant name cannot exceed {NAME_MAX_LENGTH} characters"]})
    return name.strip()


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@guideresto.value_object(part_of="Restaurant")
class Address:
    """Street and city of a restaurant. Replaced wholesale, never edited in place."""

    street: String(max_length=100)
    city_id: Identifier(required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@guideresto.aggregate(limit=None)
class Restaurant:
    name: String(required=True, max_length=NAME_MAX_LENGTH)
    description: Text()
    website: String(max_length=100)
    address: ValueObject(Address, required=True)
    type_id: Identifier(required=True)
    evaluations: HasMany(Evaluation)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name, city: City, restaurant_type: RestaurantType, street=None, description=None, website=None):
        if city is None:
            raise ValidationError({"city": ["A restaurant must be located in a city"]})
        if restaurant_type is None:
            raise ValidationError({"restaurant_type": ["A restaurant must have a type"]})

        return cls(
            name=_clean_name(name),
            description=description,
            website=website,
            address=Address(street=street, city_id=city.id),
            type_id=restaurant_type.id,
        )

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def update_details(self, name=UNSET, description=UNSET, website=UNSET):
        """Change name, description and/or website. Address and type stay untouched."""
        if name is not UNSET:
            self.name = _clean_name(name)
        if description is not UNSET:
            self.description = description
        if website is not UNSET:
            self.website = website

    def relocate(self, street, city: City):
        if city is None:
            raise ValidationError({"city": ["A restaurant must be located in a city"]})
        self.address = Address(street=street, city_id=city.id)

    def change_type(self, restaurant_type: RestaurantType):
        if restaurant_type is None:
            raise ValidationError({"restaurant_type": ["A restaurant must have a type"]})
        self.type_id = restaurant_type.id

    def add_evaluation(self, evaluation: Evaluation) -> Evaluation:
        """Take ownership of ``evaluation``."""
        if evaluation.restaurant_id is not None and evaluation.restaurant_id != self.id:
            raise ValidationError({"evaluations": ["Evaluation already belongs to another restaurant"]})
        if evaluation not in self.evaluations:
            self.add_evaluations(evaluation)
        return evaluation

    # -------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------
    @property
    def city_id(self):
        return self.address.city_id

    @property
    def street(self):
        return self.address.street

    @property
    def votes(self) -> list[Evaluation]:
        return [e for e in self.evaluations if e.is_vote]

    @property
    def reviews(self) -> list[Evaluation]:
        return [e for e in self.evaluations if e.is_review]

    def has_evaluations(self) -> bool:
        return bool(self.evaluations)

    def __repr__(self):
        return f"<Restaurant {self.id} {self.name!r}>"
