"""Criterion — a named axis of evaluation (Service, Cuisine, Setting...).

Criteria form a fixed catalog. Reviews grade restaurants against them but
never own them.
"""

from protean.fields import String, Text

from guideresto.domain import guideresto
from guideresto.utils.names import same_name


@guideresto.aggregate(limit=None)
class Criterion:
    name: String(required=True, max_length=100, unique=True)
    description: Text()

    def matches(self, name: str) -> bool:
        return same_name(self.name, name)

    def __repr__(self):
        return f"<Criterion {self.name}>"
