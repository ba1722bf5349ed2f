import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Fetch and activate the domain by pushing the associated domain_context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from guideresto.domain import guideresto

    guideresto.init()
    guideresto.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from guideresto.domain import guideresto
    from guideresto.utils.db import drop_db, setup_db

    setup_db(guideresto)

    yield

    drop_db(guideresto)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Services and reference data
# ---------------------------------------------------------------------------
@pytest.fixture()
def domain():
    from guideresto.domain import guideresto

    return guideresto


@pytest.fixture()
def restaurant_service():
    from guideresto.restaurant.management import RestaurantService

    return RestaurantService()


@pytest.fixture()
def evaluation_service():
    from guideresto.evaluation.submission import EvaluationService

    return EvaluationService()


@pytest.fixture()
def criteria(domain):
    from guideresto.utils.db import seed_reference_data

    return {c.name: c for c in seed_reference_data(domain)}


@pytest.fixture()
def city(domain):
    from guideresto.reference.city import City

    return domain.repository_for(City).add(City(zip_code="2000", name="Neuchâtel"))


@pytest.fixture()
def other_city(domain):
    from guideresto.reference.city import City

    return domain.repository_for(City).add(City(zip_code="1000", name="Lausanne"))


@pytest.fixture()
def pizzeria(domain):
    from guideresto.reference.restaurant_type import RestaurantType

    return domain.repository_for(RestaurantType).add(RestaurantType(label="Pizzeria", description="Italian pizzas"))


@pytest.fixture()
def brasserie(domain):
    from guideresto.reference.restaurant_type import RestaurantType

    return domain.repository_for(RestaurantType).add(
        RestaurantType(label="Brasserie", description="Local dishes and beer")
    )


@pytest.fixture()
def restaurant(restaurant_service, city, pizzeria, criteria):
    return restaurant_service.create(
        name="Chez Mario",
        description="Wood-fired pizzas",
        website="https://chez-mario.ch",
        street="Rue du Seyon 12",
        city_id=city.id,
        type_id=pizzeria.id,
    )
