# Repository pattern: query construction lives here, endpoints stay thin

from ecommerce_search.repositories.ecommerce_repository import ECommerceRepository

__all__ = ["ECommerceRepository"]
