from protean.domain import Domain
from sqlalchemy import create_engine

from guideresto.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CRITERIA = {
    "Service": "Quality of the service",
    "Cuisine": "Quality of the food",
    "Setting": "Decor and atmosphere of the place",
}


def setup_db(domain: Domain):
    """Setup database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in ("sqlite", "postgresql"):
                engine = create_engine(provider.conn_info["database_uri"])

                # Ensure live entities are loaded and registered with SQLAlchemy
                #   by accessing the _dao attribute of each repository
                for _, aggregate_record in domain.registry.aggregates.items():
                    if aggregate_record.cls.meta_.provider == provider.name:
                        domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

                for _, entity_record in domain.registry.entities.items():
                    if entity_record.cls.meta_.provider == provider.name:
                        domain.repository_for(entity_record.cls)._dao  # noqa: B018

                # Create tables that do not exist yet
                provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in ("sqlite", "postgresql"):
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)


def seed_reference_data(domain: Domain, criteria=None):
    """Insert the default evaluation criteria that are not present yet.

    Returns the criteria created by this call.
    """
    from guideresto.reference.criterion import Criterion

    criteria = criteria or DEFAULT_CRITERIA
    created = []
    with domain.domain_context():
        repo = domain.repository_for(Criterion)
        for name, description in criteria.items():
            if repo.find_by_exact_name(name) is None:
                criterion = Criterion(name=name, description=description)
                repo.add(criterion)
                created.append(criterion)

    if created:
        logger.info("Reference data seeded", criteria=[c.name for c in created])
    return created
