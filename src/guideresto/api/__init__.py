"""GuideResto API package."""

from guideresto.api.errors import register_exception_handlers
from guideresto.api.routes import restaurant_router

__all__ = ["restaurant_router", "register_exception_handlers"]
