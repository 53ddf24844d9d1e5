"""
Pytest fixtures - fake search backend and HTTP client.
Challenge: Isolated tests; no running Elasticsearch needed.
"""

import copy
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ecommerce_search.main import app
from ecommerce_search.search.elasticsearch_client import get_elasticsearch


SAMPLE_HITS = [
    {
        "_index": "kibana_sample_data_ecommerce",
        "_id": "hit-1",
        "_score": 1.0,
        "_source": {
            "customer_first_name": "Eddie",
            "customer_last_name": "Underwood",
            "customer_full_name": "Eddie Underwood",
            "category": ["Men's Clothing"],
            "taxful_total_price": 36.98,
            "order_id": 584677,
            "order_date": "2024-11-11T09:28:48+00:00",
            "products": [
                {"product_id": 6283, "product_name": "Basic T-shirt - dark blue/white", "base_price": 11.99},
                {"product_id": 19400, "product_name": "Sweatshirt - grey multicolor", "base_price": 24.99},
            ],
            "currency": "EUR",
        },
    },
    {
        "_index": "kibana_sample_data_ecommerce",
        "_id": "hit-2",
        "_score": 0.8,
        "_source": {
            # Stored id must never win over the hit id
            "id": "stale-id",
            "customer_first_name": "Mary",
            "customer_last_name": "Bailey",
            "customer_full_name": "Mary Bailey",
            "category": "Women's Clothing",
            "taxful_total_price": 53.98,
            "order_id": 584021,
            "order_date": "2024-11-10T21:59:02+00:00",
            "products": [],
        },
    },
]


class FakeElasticsearch:
    """Stands in for AsyncElasticsearch: records search kwargs, returns canned hits."""

    def __init__(self, hits: list[dict[str, Any]] | None = None):
        self.hits = hits if hits is not None else []
        self.calls: list[dict[str, Any]] = []
        self.error: Exception | None = None
        self.reachable = True

    async def search(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {
            "took": 1,
            "timed_out": False,
            "hits": {"total": {"value": len(self.hits), "relation": "eq"}, "hits": self.hits},
        }

    async def ping(self) -> bool:
        return self.reachable

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def sample_hits() -> list[dict[str, Any]]:
    return copy.deepcopy(SAMPLE_HITS)


@pytest.fixture
def fake_es(sample_hits) -> FakeElasticsearch:
    return FakeElasticsearch(sample_hits)


@pytest.fixture
def override_es(fake_es: FakeElasticsearch):
    app.dependency_overrides[get_elasticsearch] = lambda: fake_es
    yield fake_es
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(override_es):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
