"""
FastAPI dependencies - injection for the search client and repositories.
Tests override get_elasticsearch with an in-memory fake.
"""

from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import Depends

from ecommerce_search.config import get_settings
from ecommerce_search.repositories import ECommerceRepository
from ecommerce_search.search.elasticsearch_client import get_elasticsearch

ElasticsearchClient = Annotated[AsyncElasticsearch, Depends(get_elasticsearch)]


def get_ecommerce_repository(es: ElasticsearchClient) -> ECommerceRepository:
    """Repository bound to the configured ecommerce index."""
    settings = get_settings()
    return ECommerceRepository(es, settings.ecommerce_index, result_size=settings.result_size)


ECommerceRepo = Annotated[ECommerceRepository, Depends(get_ecommerce_repository)]
