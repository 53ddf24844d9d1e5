"""ECommerce response schemas - one record per search hit."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator


class Product(BaseModel):
    product_id: int | None = None
    product_name: str | None = None


class ECommerce(BaseModel):
    """Order from the ecommerce sample index. `id` comes from the hit's `_id`, not the document."""

    id: str | None = None
    customer_first_name: str | None = None
    customer_last_name: str | None = None
    customer_full_name: str | None = None
    category: list[str] = []
    taxful_total_price: float | None = None
    order_id: int | None = None
    order_date: datetime | None = None
    products: list[Product] = []

    @field_validator("category", mode="before")
    @classmethod
    def _category_as_list(cls, value: Any) -> Any:
        # ES returns a bare string for single-valued array fields
        if isinstance(value, str):
            return [value]
        return value

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> "ECommerce":
        """Build from a raw search hit, overwriting any stored id with the hit's `_id`."""
        return cls.model_validate({**hit.get("_source", {}), "id": hit["_id"]})
