"""
API v1 router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from ecommerce_search.api.v1.endpoints import ecommerce, health

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(ecommerce.router, prefix="/ecommerce", tags=["ecommerce"])
