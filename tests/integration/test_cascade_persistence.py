"""Persistence behaviour of the Restaurant aggregate: cascades and references."""

import pytest
from guideresto.evaluation.evaluation import Evaluation, Grade
from guideresto.reference.city import City
from guideresto.reference.criterion import Criterion
from guideresto.reference.restaurant_type import RestaurantType
from guideresto.restaurant.restaurant import Restaurant
from protean.exceptions import ValidationError


@pytest.fixture()
def reviewed(evaluation_service, restaurant):
    evaluation_service.add_vote(restaurant.id, like=True, origin="10.0.0.1")
    review = evaluation_service.add_review(
        restaurant.id, username="alice", comment=None, grades={"Service": 5, "Cuisine": 4}
    )
    return restaurant, review


class TestAggregatePersistence:
    def test_evaluations_saved_through_restaurant(self, domain, reviewed):
        restaurant, review = reviewed
        evaluations = domain.repository_for(Evaluation).query.filter(restaurant_id=restaurant.id).all().items
        grades = domain.repository_for(Grade).query.filter(evaluation_id=review.id).all().items

        assert sorted(e.kind for e in evaluations) == ["Review", "Vote"]
        assert sorted(g.criterion_name for g in grades) == ["Cuisine", "Service"]

    def test_reload_rebuilds_variants(self, restaurant_service, reviewed):
        restaurant, _ = reviewed
        loaded = restaurant_service.get(restaurant.id)

        assert len(loaded.votes) == 1
        assert loaded.votes[0].like is True
        assert len(loaded.reviews) == 1
        assert loaded.reviews[0].grade_for("service").value == 5

    def test_address_survives_reload(self, restaurant_service, restaurant, city):
        loaded = restaurant_service.get(restaurant.id)
        assert loaded.address.street == "Rue du Seyon 12"
        assert loaded.address.city_id == city.id


class TestDeleteCascade:
    def test_delete_removes_evaluations_and_grades(self, domain, restaurant_service, reviewed):
        restaurant, review = reviewed
        grade_ids = [g.id for g in review.grades]

        assert restaurant_service.delete(restaurant.id) is True

        assert domain.repository_for(Restaurant).get_or_none(restaurant.id) is None
        evaluations = domain.repository_for(Evaluation)
        assert evaluations.query.filter(restaurant_id=restaurant.id).count() == 0
        assert evaluations.query.filter(id=review.id).count() == 0
        assert domain.repository_for(Grade).query.filter(id__in=grade_ids).count() == 0

    def test_delete_keeps_other_restaurants_evaluations(
        self, domain, restaurant_service, evaluation_service, reviewed, city, pizzeria
    ):
        restaurant, _ = reviewed
        other = restaurant_service.create(
            name="Da Luigi", description=None, website=None, street=None, city_id=city.id, type_id=pizzeria.id
        )
        evaluation_service.add_vote(other.id, like=False, origin="10.0.0.9")

        restaurant_service.delete(restaurant.id)

        assert evaluation_service.count_total_evaluations(other.id) == 1
        assert domain.repository_for(Evaluation).query.count() == 1

    def test_delete_keeps_criteria(self, domain, restaurant_service, reviewed):
        restaurant, _ = reviewed
        restaurant_service.delete(restaurant.id)
        assert [c.name for c in domain.repository_for(Criterion).find_all()] == ["Cuisine", "Service", "Setting"]


class TestReferenceUniqueness:
    def test_duplicate_zip_code_rejected(self, domain, city):
        with pytest.raises(ValidationError) as exc:
            domain.repository_for(City).add(City(zip_code="2000", name="Neuchâtel bis"))
        assert "zip_code" in exc.value.messages

    def test_duplicate_criterion_name_rejected(self, domain, criteria):
        with pytest.raises(ValidationError):
            domain.repository_for(Criterion).add(Criterion(name="Service"))


class TestReferenceLookups:
    def test_city_lookups(self, domain, city):
        cities = domain.repository_for(City)
        assert cities.find_by_zip_code("2000").id == city.id
        assert cities.find_by_zip_code("9999") is None
        assert cities.find_by_exact_name("neuchâtel").id == city.id
        assert [c.name for c in cities.find_by_name("chât")] == ["Neuchâtel"]

    def test_type_lookups(self, domain, pizzeria, brasserie):
        types = domain.repository_for(RestaurantType)
        assert types.find_by_exact_label("PIZZERIA").id == pizzeria.id
        assert types.find_by_exact_label("Pizz") is None
        assert [t.label for t in types.find_by_label("r")] == ["Brasserie", "Pizzeria"]

    def test_criterion_lookups(self, domain, criteria):
        criteria_repo = domain.repository_for(Criterion)
        assert criteria_repo.find_by_exact_name("setting").id == criteria["Setting"].id
        assert criteria_repo.find_by_exact_name("Parking") is None
        assert [c.name for c in criteria_repo.find_by_name("ce")] == ["Service"]

    def test_seeding_is_idempotent(self, domain, criteria):
        from guideresto.utils.db import seed_reference_data

        assert seed_reference_data(domain) == []
        assert len(domain.repository_for(Criterion).find_all()) == 3
