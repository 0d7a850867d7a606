"""
Purpose: The search "orchestrator" (single entry point).
What it does:

Coordinates the pipeline end-to-end:

- normalises the raw query (search.normalizer)

- matches and aggregates every store (search.aggregator)

- scores the covering stores (ranking.scoring)

- orders them (ranking.pipeline.initial_order, or apply_view when a
  sort/filter is given)

- wraps the outcome in a typed SearchOutcome

Typical public function signature:

- search_stores(raw_query, stores, ...) -> SearchOutcome

Rule: Engine is the only file other modules should call directly for searching.
It never raises for user-input conditions: EMPTY_QUERY and NO_STORES_MATCHED
come back as statuses.
"""

# ranking/engine.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from search.aggregator import aggregate_stores
from search.models import SearchQuery
from search.normalizer import EmptyQuery, normalize_query
from search.policy import SearchPolicy, default_search_policy
from stores.models import Store
from stores.prescription import PrescriptionClassifier, default_prescription_classifier

from .models import StoreResult
from .pipeline import ResultFilters, SortMode, apply_view, initial_order
from .policy import RankingPolicy, default_ranking_policy
from .scoring import score_coverages

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    OK = "OK"
    EMPTY_QUERY = "EMPTY_QUERY"
    NO_STORES_MATCHED = "NO_STORES_MATCHED"


@dataclass(frozen=True)
class SearchOutcome:
    """
    Output of one search run.
    """
    status: SearchStatus
    query: Optional[SearchQuery] = None
    results: List[StoreResult] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == SearchStatus.OK

    def view(
        self,
        sort_mode: SortMode | str = SortMode.PRIORITY,
        filters: Optional[ResultFilters] = None,
    ) -> List[StoreResult]:
        """
        Re-run the display pipeline over these results without searching again.
        """
        return apply_view(self.results, sort_mode, filters)


def search_stores(
    raw_query: Optional[str],
    stores: Sequence[Store],
    *,
    classifier: Optional[PrescriptionClassifier] = None,
    search_policy: Optional[SearchPolicy] = None,
    ranking_policy: Optional[RankingPolicy] = None,
    sort_mode: SortMode | str | None = None,
    filters: Optional[ResultFilters] = None,
) -> SearchOutcome:
    """
    Main search entry point (pure algorithm).

    Parameters
    ----------
    raw_query:
        The comma-separated text the user typed.
    stores:
        Snapshot from a StoreProvider. Not mutated.
    classifier:
        Prescription lookup used to flag matched items.
    search_policy / ranking_policy:
        Tunables; defaults when omitted.
    sort_mode / filters:
        When given, results go through apply_view. Otherwise they come back
        in initial_order.

    Returns
    -------
    SearchOutcome:
        status OK with at least one result, EMPTY_QUERY, or NO_STORES_MATCHED.
    """
    search_policy = search_policy or default_search_policy()
    ranking_policy = ranking_policy or default_ranking_policy()
    classifier = classifier or default_prescription_classifier()

    try:
        query = normalize_query(raw_query, search_policy)
    except EmptyQuery as e:
        return SearchOutcome(status=SearchStatus.EMPTY_QUERY, message=str(e))

    coverages = aggregate_stores(stores, query, classifier=classifier, policy=search_policy)
    results = score_coverages(coverages, ranking_policy)

    if not results:
        logger.info("No stores matched %s across %d stores", list(query.terms), len(stores))
        return SearchOutcome(
            status=SearchStatus.NO_STORES_MATCHED,
            query=query,
            message="No stores found with the requested medicines",
        )

    if sort_mode is not None or filters is not None:
        ordered = apply_view(results, sort_mode or SortMode.PRIORITY, filters)
    else:
        ordered = initial_order(results)

    complete = sum(1 for r in ordered if r.is_complete)
    logger.info(
        "Search %s: %d stores matched (%d complete) of %d",
        list(query.terms), len(ordered), complete, len(stores),
    )

    return SearchOutcome(
        status=SearchStatus.OK,
        query=query,
        results=ordered,
        message=f"Found {len(ordered)} stores with your medicines!",
    )
