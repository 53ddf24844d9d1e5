"""
ECommerce repository - pre-canned queries against the ecommerce sample index.
Each method maps its arguments onto a single query and returns the matching orders.
"""

from elasticsearch import AsyncElasticsearch

from ecommerce_search.repositories.base_repository import BaseSearchRepository
from ecommerce_search.schemas.ecommerce import ECommerce
from ecommerce_search.search import queries as q

CUSTOMER_FIRST_NAME = "customer_first_name"
CUSTOMER_FULL_NAME = "customer_full_name"
CATEGORY = "category"
TAXFUL_TOTAL_PRICE = "taxful_total_price"


class ECommerceRepository(BaseSearchRepository[ECommerce]):
    """ECommerce-specific queries."""

    def __init__(self, es: AsyncElasticsearch, index: str, result_size: int = 100):
        super().__init__(es, index, ECommerce)
        self.result_size = result_size

    async def term_query(self, customer_first_name: str) -> list[ECommerce]:
        return await self.search(
            q.term_query(q.keyword(CUSTOMER_FIRST_NAME), customer_first_name, case_insensitive=True)
        )

    async def terms_query(self, customer_first_names: list[str]) -> list[ECommerce]:
        return await self.search(
            q.terms_query(q.keyword(CUSTOMER_FIRST_NAME), customer_first_names),
            size=self.result_size,
        )

    async def prefix_query(self, customer_full_name: str) -> list[ECommerce]:
        return await self.search(q.prefix_query(q.keyword(CUSTOMER_FULL_NAME), customer_full_name))

    async def range_query(self, from_price: float, to_price: float) -> list[ECommerce]:
        return await self.search(q.range_query(TAXFUL_TOTAL_PRICE, gte=from_price, lte=to_price))

    async def match_all_query(self) -> list[ECommerce]:
        return await self.search(q.match_all_query(), size=self.result_size)

    async def pagination_query(self, page: int, page_size: int) -> list[ECommerce]:
        """1-based pages: page 1 holds hits 1..page_size, page 2 the next page_size, and so on."""
        if page < 1 or page_size < 1:
            raise ValueError("page and page_size must be >= 1")
        page_from = (page - 1) * page_size
        return await self.search(q.match_all_query(), from_=page_from, size=page_size)

    async def wildcard_query(self, customer_full_name: str) -> list[ECommerce]:
        return await self.search(q.wildcard_query(q.keyword(CUSTOMER_FULL_NAME), customer_full_name))

    async def fuzzy_query(self, customer_name: str) -> list[ECommerce]:
        """One-edit fuzzy match on first name, most expensive orders first."""
        return await self.search(
            q.fuzzy_query(q.keyword(CUSTOMER_FIRST_NAME), customer_name, fuzziness=1),
            sort=q.field_sort(TAXFUL_TOTAL_PRICE, "desc"),
        )

    async def match_query_full_text(self, category_name: str) -> list[ECommerce]:
        return await self.search(q.match_query(CATEGORY, category_name, operator="and"))

    async def match_bool_prefix_full_text(self, customer_full_name: str) -> list[ECommerce]:
        return await self.search(q.match_bool_prefix_query(CUSTOMER_FULL_NAME, customer_full_name))
