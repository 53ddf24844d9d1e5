"""
Query DSL builders - plain dicts accepted by AsyncElasticsearch.search(query=...).
"""

from collections.abc import Iterable
from typing import Any

# Sub-field holding the untokenized value of a text field
KEYWORD_SUFFIX = "keyword"


def keyword(field: str) -> str:
    return f"{field}.{KEYWORD_SUFFIX}"


def term_query(field: str, value: Any, case_insensitive: bool = False) -> dict:
    """Exact match on a single value."""
    return {"term": {field: {"value": value, "case_insensitive": case_insensitive}}}


def terms_query(field: str, values: Iterable[Any]) -> dict:
    """Exact match on any of several values."""
    return {"terms": {field: list(values)}}


def prefix_query(field: str, value: str) -> dict:
    return {"prefix": {field: {"value": value}}}


def range_query(field: str, gte: float | None = None, lte: float | None = None) -> dict:
    """Inclusive numeric range. Omitted bounds are open."""
    if gte is None and lte is None:
        raise ValueError("range_query needs at least one bound")
    bounds: dict[str, float] = {}
    if gte is not None:
        bounds["gte"] = gte
    if lte is not None:
        bounds["lte"] = lte
    return {"range": {field: bounds}}


def wildcard_query(field: str, pattern: str) -> dict:
    """Pattern match; `*` spans any run of characters, `?` a single one."""
    return {"wildcard": {field: {"value": pattern}}}


def fuzzy_query(field: str, value: str, fuzziness: int | str = 1) -> dict:
    """Match within `fuzziness` edits (int 0-2 or "AUTO")."""
    return {"fuzzy": {field: {"value": value, "fuzziness": fuzziness}}}


def match_query(field: str, text: str, operator: str = "and") -> dict:
    """Analyzed full-text match. With "and" every token must be present."""
    return {"match": {field: {"query": text, "operator": operator}}}


def match_bool_prefix_query(field: str, text: str) -> dict:
    """Full-text match where the last token is treated as a prefix (search-as-you-type)."""
    return {"match_bool_prefix": {field: {"query": text}}}


def match_all_query() -> dict:
    return {"match_all": {}}


def field_sort(field: str, order: str = "desc") -> list[dict]:
    return [{field: {"order": order}}]
