"""
Purpose: Central configuration for store ranking (single source of truth).
What it does:

Stores all tunable weights/references:

RATING_WEIGHT = 0.40

DISTANCE_WEIGHT = 0.35

PRICE_WEIGHT = 0.25

DISTANCE_REFERENCE_KM = 10 (distance score hits 0 here)

PRICE_REFERENCE = 500 (price score hits 0 here, in rupees)

AVAILABILITY_BOOST = 2 (priority = base * (1 + ratio * boost))

Delivery estimate buckets by distance.

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class RankingPolicy:
    """
    Central configuration for store scoring.

    Notes:
    - the component scores are 0-100 each; base score is their weighted sum.
    - the availability boost makes a full-coverage store worth
      (1 + boost) times its base score. priority_score is a ranking key,
      not a percentage, and is never clamped.
    """

    # --- Composite score weights ---
    rating_weight: float = 0.40
    distance_weight: float = 0.35
    price_weight: float = 0.25

    # --- Normalisation references ---
    max_rating: float = 5.0
    distance_reference_km: float = 10.0
    price_reference: float = 500.0

    # --- Availability boost ---
    availability_boost: float = 2.0

    # --- Delivery estimate buckets ---
    # (upper bound km, exclusive) -> label; last_delivery_label beyond the last bound
    delivery_buckets: List[Tuple[float, str]] = field(
        default_factory=lambda: [(2.0, "30-45 mins"), (5.0, "1-2 hours"), (10.0, "2-3 hours")]
    )
    last_delivery_label: str = "3-4 hours"

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup if you want.
        """
        for name in ("rating_weight", "distance_weight", "price_weight", "availability_boost"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

        if self.max_rating <= 0:
            raise ValueError("max_rating must be > 0")

        if self.distance_reference_km <= 0:
            raise ValueError("distance_reference_km must be > 0")

        if self.price_reference <= 0:
            raise ValueError("price_reference must be > 0")

        bounds = [bound for bound, _ in self.delivery_buckets]
        if bounds != sorted(bounds):
            raise ValueError("delivery_buckets must be sorted by distance")


def default_ranking_policy() -> RankingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = RankingPolicy()
    p.validate()
    return p
