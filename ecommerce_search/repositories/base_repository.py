"""
Base search repository - generic read access to one Elasticsearch index.
Challenge: One place for the search call, hit projection and error logging.
"""

import logging
from typing import Any, Generic, Protocol, TypeVar

from elasticsearch import AsyncElasticsearch

logger = logging.getLogger(__name__)


class HitModel(Protocol):
    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> Any: ...


DocType = TypeVar("DocType", bound=HitModel)


class BaseSearchRepository(Generic[DocType]):
    """Generic async search repository. Subclasses define index-specific queries."""

    def __init__(self, es: AsyncElasticsearch, index: str, model: type[DocType]):
        self.es = es
        self.index = index
        self.model = model

    async def search(self, query: dict, **params: Any) -> list[DocType]:
        """Run one search and project each hit to the model. Engine errors propagate to the caller."""
        # Log only the query type; values carry customer names
        query_type = next(iter(query), "?")
        try:
            response = await self.es.search(index=self.index, query=query, **params)
        except Exception as e:
            logger.warning("search failed: index=%s query_type=%s error=%s", self.index, query_type, e)
            raise
        # Response may be ObjectApiResponse; support both .body and dict access
        body = getattr(response, "body", response)
        hits = body["hits"]["hits"]
        if not hits:
            logger.info("search: index=%s query_type=%s returned 0 hits", self.index, query_type)
        else:
            logger.debug("search: index=%s returned %d hits", self.index, len(hits))
        return [self.model.from_hit(hit) for hit in hits]
