"""
ECommerce search endpoints - one query type per route.
Design: Thin controller; the repository builds the query and shapes the hits.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Query

from ecommerce_search.config import get_settings
from ecommerce_search.core.dependencies import ECommerceRepo
from ecommerce_search.schemas.ecommerce import ECommerce

router = APIRouter()
settings = get_settings()


@router.get("/term-query", response_model=list[ECommerce])
async def term_query(repo: ECommerceRepo, customer_first_name: str = Query(..., min_length=1)):
    """Exact, case-insensitive first-name match."""
    return await repo.term_query(customer_first_name)


@router.post("/terms-query", response_model=list[ECommerce])
async def terms_query(
    repo: ECommerceRepo,
    customer_first_names: Annotated[list[str], Body(min_length=1)],
):
    """Orders whose first name is any of the names in the JSON array body."""
    return await repo.terms_query(customer_first_names)


@router.get("/prefix-query", response_model=list[ECommerce])
async def prefix_query(repo: ECommerceRepo, customer_full_name: str = Query(..., min_length=1)):
    return await repo.prefix_query(customer_full_name)


@router.get("/range-query", response_model=list[ECommerce])
async def range_query(repo: ECommerceRepo, from_price: float = Query(...), to_price: float = Query(...)):
    """Orders with from_price <= taxful_total_price <= to_price."""
    return await repo.range_query(from_price, to_price)


@router.get("/match-all-query", response_model=list[ECommerce])
async def match_all_query(repo: ECommerceRepo):
    return await repo.match_all_query()


@router.get("/pagination-query", response_model=list[ECommerce])
async def pagination_query(
    repo: ECommerceRepo,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """All orders, one page at a time. REST: GET /pagination-query?page=2&page_size=10."""
    return await repo.pagination_query(page, page_size)


@router.get("/wildcard-query", response_model=list[ECommerce])
async def wildcard_query(repo: ECommerceRepo, customer_full_name: str = Query(..., min_length=1)):
    """Full-name pattern, e.g. `Mar*` or `?ddie Underwood`."""
    return await repo.wildcard_query(customer_full_name)


@router.get("/fuzzy-query", response_model=list[ECommerce])
async def fuzzy_query(repo: ECommerceRepo, customer_name: str = Query(..., min_length=1)):
    return await repo.fuzzy_query(customer_name)


@router.get("/match-query", response_model=list[ECommerce])
async def match_query(repo: ECommerceRepo, category_name: str = Query(..., min_length=1)):
    """Full-text category match; every word must appear."""
    return await repo.match_query_full_text(category_name)


@router.get("/match-bool-prefix-query", response_model=list[ECommerce])
async def match_bool_prefix_query(repo: ECommerceRepo, customer_full_name: str = Query(..., min_length=1)):
    return await repo.match_bool_prefix_full_text(customer_full_name)
