"""GuideResto FastAPI application.

Usage:
    uvicorn guideresto.app:app_factory --factory --host 0.0.0.0 --port 8000 --reload

PROTEAN_ENV controls which overlay of domain.toml is applied.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.domain import Domain

from guideresto.api import register_exception_handlers, restaurant_router
from guideresto.domain import guideresto
from guideresto.evaluation.submission import EvaluationService
from guideresto.restaurant.management import RestaurantService
from guideresto.utils.db import seed_reference_data, setup_db


def create_app(domain: Domain = guideresto) -> FastAPI:
    """Build the API around an already initialized domain."""
    app = FastAPI(
        title="GuideResto API",
        description="Restaurant guide: restaurants, votes and scored reviews",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for each request."""
        with domain.domain_context():
            response = await call_next(request)
        return response

    app.state.restaurant_service = RestaurantService()
    app.state.evaluation_service = EvaluationService()

    app.include_router(restaurant_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name, "env": domain.env})

    return app


def app_factory() -> FastAPI:
    """Initialize the domain, its schema and reference data, then build the API."""
    guideresto.init()
    setup_db(guideresto)
    if guideresto.SEED_REFERENCE_DATA:
        seed_reference_data(guideresto)
    return create_app(guideresto)
