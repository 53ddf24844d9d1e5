"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness reflects whether Elasticsearch answers.
"""

import logging

from fastapi import APIRouter, Response, status

from ecommerce_search.config import get_settings
from ecommerce_search.core.dependencies import ElasticsearchClient

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(es: ElasticsearchClient, response: Response):
    """Readiness: can the search backend be reached?"""
    try:
        reachable = await es.ping()
    except Exception as e:
        logger.warning("readiness ping failed: %s", e)
        reachable = False
    if not reachable:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unavailable"}
    return {"status": "ready"}
