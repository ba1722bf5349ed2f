"""GuideResto bounded context — restaurants, visitor votes and scored reviews.

Restaurants are the aggregate root: they own their evaluations (votes and
reviews) and reviews own their grades. Cities, restaurant types and
evaluation criteria are aggregates of their own, referenced by id.

Configuration lives in ``domain.toml`` next to this file. ``PROTEAN_ENV``
selects the overlay (``test``, ``production``) and must be set before this
module is imported.
"""

from protean.domain import Domain

from guideresto.utils.logging import configure_logging, get_logger

# Domain Composition Root
guideresto = Domain(name="guideresto")

# Configure logging before Domain.init() would install its own defaults
configure_logging(
    level=guideresto.config["logging"]["level"] or "INFO",
    fmt=guideresto.config["logging"]["format"],
)

logger = get_logger(__name__)
