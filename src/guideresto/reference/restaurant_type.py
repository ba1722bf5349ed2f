"""RestaurantType — the gastronomic category of a restaurant (Pizzeria, Brasserie...)."""

from protean.fields import String, Text

from guideresto.domain import guideresto


@guideresto.aggregate(limit=None)
class RestaurantType:
    label: String(required=True, max_length=100, unique=True)
    description: Text()

    def __repr__(self):
        return f"<RestaurantType {self.label}>"
