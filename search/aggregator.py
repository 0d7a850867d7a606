"""
Purpose: Per-store coverage and price aggregation.
What it does:

For each store:

- resolves every query term with matcher.find_listing

- partitions terms into available / missing

- sums matched unit prices (quantity is an order-time concept)

- flags each matched item with the prescription classifier

Stores that match nothing are excluded (None). Stores with at least one
match are kept even when incomplete.

Rule: Aggregation only. Scoring and ordering live in ranking/.
"""

# search/aggregator.py

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from stores.models import Store
from stores.prescription import PrescriptionClassifier, default_prescription_classifier

from .matcher import find_listing
from .models import MedicineAvailability, SearchQuery, StoreCoverage
from .policy import SearchPolicy, default_search_policy

logger = logging.getLogger(__name__)


def aggregate_store(
    store: Store,
    query: SearchQuery,
    *,
    classifier: Optional[PrescriptionClassifier] = None,
    policy: Optional[SearchPolicy] = None,
) -> Optional[StoreCoverage]:
    """
    Coverage of `query` at a single store, or None if the store has none of it.
    """
    classifier = classifier or default_prescription_classifier()
    policy = policy or default_search_policy()

    available: List[MedicineAvailability] = []
    missing: List[str] = []
    total_price = 0.0

    for term in query:
        listing = find_listing(store, term, policy.tie_break)
        if listing is None:
            missing.append(term)
            continue

        available.append(
            MedicineAvailability(
                term=term,
                medicine_name=listing.name,
                price=listing.price,
                category=listing.category,
                stock_quantity=listing.stock_quantity,
                requires_prescription=bool(classifier(listing.name)),
            )
        )
        total_price += listing.price

    logger.debug(
        "Store %s: %d available, %d missing, total %.2f",
        store.id, len(available), len(missing), total_price,
    )

    if not available:
        return None

    return StoreCoverage(
        store=store,
        available_medicines=tuple(available),
        missing_medicines=tuple(missing),
        total_price=total_price,
    )


def aggregate_stores(
    stores: Sequence[Store],
    query: SearchQuery,
    *,
    classifier: Optional[PrescriptionClassifier] = None,
    policy: Optional[SearchPolicy] = None,
) -> List[StoreCoverage]:
    """
    Coverage for every store that can supply at least one term, in input order.

    Stores are independent, so with policy.max_workers set they are matched
    in a thread pool; executor.map keeps results aligned with input order.
    """
    classifier = classifier or default_prescription_classifier()
    policy = policy or default_search_policy()
    policy.validate()

    def run(store: Store) -> Optional[StoreCoverage]:
        return aggregate_store(store, query, classifier=classifier, policy=policy)

    if policy.max_workers and len(stores) > 1:
        with ThreadPoolExecutor(max_workers=policy.max_workers) as executor:
            coverages = list(executor.map(run, stores))
    else:
        coverages = [run(store) for store in stores]

    return [c for c in coverages if c is not None]
