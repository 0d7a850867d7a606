"""
Purpose: Resolve one search term against one store's shelf.
What it does:
- candidate = in-stock listing whose name contains the term (case-insensitive)
- picks one candidate according to the ListingTieBreak
- returns None when the store cannot supply the term

Rule: Single store, single term. Aggregation lives in aggregator.py.
"""

from __future__ import annotations

from typing import List, Optional

from stores.models import MedicineListing, Store

from .policy import ListingTieBreak


def is_candidate(listing: MedicineListing, term: str) -> bool:
    return listing.is_in_stock and term.lower() in listing.name.lower()


def find_listing(
    store: Store,
    term: str,
    tie_break: ListingTieBreak = ListingTieBreak.FIRST,
) -> Optional[MedicineListing]:
    """
    Find the listing at `store` that satisfies `term`.

    FIRST returns as soon as one candidate is seen. The other strategies
    scan the whole shelf; min/max keep the earliest listing on equal keys,
    so list order stays the final tie-break.
    """
    if tie_break == ListingTieBreak.FIRST:
        for listing in store.medicines:
            if is_candidate(listing, term):
                return listing
        return None

    candidates: List[MedicineListing] = [m for m in store.medicines if is_candidate(m, term)]
    if not candidates:
        return None

    if tie_break == ListingTieBreak.LOWEST_PRICE:
        return min(candidates, key=lambda m: m.price)
    if tie_break == ListingTieBreak.HIGHEST_STOCK:
        return max(candidates, key=lambda m: m.stock_quantity)

    raise ValueError(f"unknown tie_break: {tie_break!r}")
