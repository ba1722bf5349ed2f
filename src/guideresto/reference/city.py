"""City — shared reference data for restaurant addresses."""

from protean.fields import String

from guideresto.domain import guideresto


@guideresto.aggregate(limit=None)
class City:
    zip_code: String(required=True, max_length=10, unique=True)
    name: String(required=True, max_length=100)

    def __repr__(self):
        return f"<City {self.zip_code} {self.name}>"
