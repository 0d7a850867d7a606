"""
Search domain package.

Public API:
- Models: SearchQuery, MedicineAvailability, StoreCoverage
- Parsing: normalize_query, EmptyQuery
- Matching: find_listing, aggregate_store, aggregate_stores
- Policy: SearchPolicy, ListingTieBreak, default_search_policy
"""
from .models import MedicineAvailability, SearchQuery, StoreCoverage
from .policy import ListingTieBreak, SearchPolicy, default_search_policy
from .normalizer import EmptyQuery, normalize_query
from .matcher import find_listing
from .aggregator import aggregate_store, aggregate_stores

__all__ = [
    "SearchQuery",
    "MedicineAvailability",
    "StoreCoverage",
    "SearchPolicy",
    "ListingTieBreak",
    "default_search_policy",
    "EmptyQuery",
    "normalize_query",
    "find_listing",
    "aggregate_store",
    "aggregate_stores",
]
