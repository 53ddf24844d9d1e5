"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), shutdown of the search client.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from ecommerce_search.config import get_settings
from ecommerce_search.api.v1.router import api_router
from ecommerce_search.search.elasticsearch_client import close_elasticsearch

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log the target index. Shutdown: close the Elasticsearch client."""
    settings = get_settings()
    # Strip user:pass before logging
    host = settings.elasticsearch_url.split("@")[-1]
    logger.info("%s serving index %r from %s", settings.app_name, settings.ecommerce_index, host)
    yield
    await close_elasticsearch()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        description="Term, terms, prefix, range, wildcard, fuzzy and full-text queries over the Kibana ecommerce sample index.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
