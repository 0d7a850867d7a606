"""
Purpose: Score stores that can (partly) fulfil a query.
What it does:

Computes for each StoreCoverage:

rating_score = (rating / 5) * 100

distance_score = max(0, 100 - (distance_km / 10) * 100)

price_score = max(0, 100 - (total_price / 500) * 100)

base_score = 0.40*rating + 0.35*distance + 0.25*price

availability_ratio = available / query terms

priority_score = base_score * (1 + availability_ratio * 2)

Distance and price clamp at 0: beyond the reference they stop penalising.
priority_score is a sort key and is deliberately left unbounded.

Rule: Scoring computes numbers; it does not filter or order results.
"""

# ranking/scoring.py

from __future__ import annotations

from typing import List, Optional, Sequence

from search.models import StoreCoverage

from .models import StoreResult
from .policy import RankingPolicy, default_ranking_policy


def rating_score(rating: float, policy: RankingPolicy) -> float:
    return (rating / policy.max_rating) * 100


def distance_score(distance_km: float, policy: RankingPolicy) -> float:
    return max(0.0, 100 - (distance_km / policy.distance_reference_km) * 100)


def price_score(total_price: float, policy: RankingPolicy) -> float:
    return max(0.0, 100 - (total_price / policy.price_reference) * 100)


def base_score(
    rating: float,
    distance_km: float,
    total_price: float,
    policy: Optional[RankingPolicy] = None,
) -> float:
    """
    Weighted composite of the three component scores (0-100 with default weights).
    """
    policy = policy or default_ranking_policy()
    return (
        policy.rating_weight * rating_score(rating, policy)
        + policy.distance_weight * distance_score(distance_km, policy)
        + policy.price_weight * price_score(total_price, policy)
    )


def boosted_score(base: float, availability_ratio: float, policy: Optional[RankingPolicy] = None) -> float:
    """
    Availability boost: a full-coverage store gets (1 + boost) times its base score.
    """
    policy = policy or default_ranking_policy()
    return base * (1 + availability_ratio * policy.availability_boost)


def estimated_delivery(distance_km: float, policy: Optional[RankingPolicy] = None) -> str:
    policy = policy or default_ranking_policy()
    for upper_km, label in policy.delivery_buckets:
        if distance_km < upper_km:
            return label
    return policy.last_delivery_label


def score_coverage(coverage: StoreCoverage, policy: Optional[RankingPolicy] = None) -> StoreResult:
    """
    Turn one StoreCoverage into a scored StoreResult.
    """
    policy = policy or default_ranking_policy()
    store = coverage.store

    base = base_score(store.rating, store.distance_km, coverage.total_price, policy)
    priority = boosted_score(base, coverage.availability_ratio(), policy)

    return StoreResult(
        store=store,
        available_medicines=coverage.available_medicines,
        missing_medicines=coverage.missing_medicines,
        total_price=coverage.total_price,
        base_score=base,
        priority_score=priority,
        estimated_delivery=estimated_delivery(store.distance_km, policy),
    )


def score_coverages(
    coverages: Sequence[StoreCoverage],
    policy: Optional[RankingPolicy] = None,
) -> List[StoreResult]:
    policy = policy or default_ranking_policy()
    policy.validate()
    return [score_coverage(c, policy) for c in coverages]
